from .country import METADATA_FIELDS, CountryRecord
from .language import ALIAS_SEPARATOR, Language, split_aliases

__all__ = [
    "METADATA_FIELDS",
    "CountryRecord",
    "ALIAS_SEPARATOR",
    "Language",
    "split_aliases",
]
