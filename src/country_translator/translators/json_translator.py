"""Translator backed by a JSON array of country records."""

import logging

from pydantic import ValidationError

from country_translator.config import get_settings
from country_translator.models.country import CountryRecord
from country_translator.services.resources import (
    ResourceLoadError,
    ResourceSource,
    describe_source,
    load_json_records,
)
from country_translator.translators.base import Translator
from country_translator.translators.registry import TranslatorRegistry

logger = logging.getLogger(__name__)


@TranslatorRegistry.register
class JSONTranslator(Translator):
    """Reads translations once, when constructed, from a JSON resource.

    Each record holds ``alpha3`` (the country key), optionally ``id`` and
    ``alpha2``, and one ``"<language code>": "<country name>"`` pair per language.
    """

    name = "json"

    def __init__(self, source: ResourceSource | None = None):
        if source is None:
            source = get_settings().translations_resource
        self.source = describe_source(source)
        # alpha3 -> language codes, and alpha3 -> (language code -> name)
        self._country_languages: dict[str, list[str]] = {}
        self._country_translations: dict[str, dict[str, str]] = {}

        for index, raw in enumerate(load_json_records(source, what="translations")):
            try:
                record = CountryRecord.model_validate(raw)
            except ValidationError as exc:
                raise ResourceLoadError(
                    "translations", self.source, f"record {index} is invalid: {exc}"
                ) from exc

            translations = record.translations
            if not translations:
                logger.debug("Record %d (%s) has no translations", index, record.alpha3)
                continue
            self._country_translations[record.alpha3] = translations
            self._country_languages[record.alpha3] = list(translations)

        logger.debug(
            "Loaded translations for %d countries from %s",
            len(self._country_translations),
            self.source,
        )

    def get_country_languages(self, country: str) -> list[str]:
        if not isinstance(country, str):
            return []
        return list(self._country_languages.get(country, []))

    def get_countries(self) -> list[str]:
        return list(self._country_languages)

    def translate(self, country: str, language: str) -> str | None:
        if not isinstance(country, str) or not isinstance(language, str):
            return None
        translations = self._country_translations.get(country)
        if translations is None:
            return None
        return translations.get(language)
