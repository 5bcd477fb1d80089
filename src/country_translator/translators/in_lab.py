from country_translator.translators.base import Translator
from country_translator.translators.registry import TranslatorRegistry

CANADA = "can"


@TranslatorRegistry.register
class InLabByHandTranslator(Translator):
    """Hand-written translations of CANADA into a few languages."""

    name = "in_lab"

    _COUNTRY_NAMES = {
        "de": "Kanada",
        "en": "Canada",
        "zh": "加拿大",
    }

    def get_country_languages(self, country: str) -> list[str]:
        if country == CANADA:
            return list(self._COUNTRY_NAMES)
        return []

    def get_countries(self) -> list[str]:
        return [CANADA]

    def translate(self, country: str, language: str) -> str | None:
        if country != CANADA or not isinstance(language, str):
            return None
        return self._COUNTRY_NAMES.get(language)
