"""Country name translations and language code lookups."""

from .config import Settings, get_settings, setup_logging
from .models import METADATA_FIELDS, CountryRecord, Language
from .services import LanguageCodeConverter, ResourceLoadError
from .translators import (
    InLabByHandTranslator,
    JSONTranslator,
    Translator,
    TranslatorRegistry,
)


def get_translator(name: str | None = None, **kwargs) -> Translator:
    """Build the named translator, or the configured default one."""
    return TranslatorRegistry.create(name or get_settings().default_translator, **kwargs)


__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "METADATA_FIELDS",
    "CountryRecord",
    "Language",
    "LanguageCodeConverter",
    "ResourceLoadError",
    "InLabByHandTranslator",
    "JSONTranslator",
    "Translator",
    "TranslatorRegistry",
    "get_translator",
]
