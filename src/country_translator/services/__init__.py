from .language_codes import LanguageCodeConverter
from .resources import (
    ResourceLoadError,
    ResourceSource,
    describe_source,
    load_json_records,
    load_tsv_rows,
    read_text,
)

__all__ = [
    "LanguageCodeConverter",
    "ResourceLoadError",
    "ResourceSource",
    "describe_source",
    "load_json_records",
    "load_tsv_rows",
    "read_text",
]
