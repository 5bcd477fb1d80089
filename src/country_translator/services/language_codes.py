"""Conversion between language codes and language display names."""

import logging

from country_translator.config import get_settings
from country_translator.models.language import Language
from country_translator.services.resources import (
    ResourceLoadError,
    ResourceSource,
    describe_source,
    load_tsv_rows,
)

logger = logging.getLogger(__name__)


class LanguageCodeConverter:
    """Language code <-> name table loaded from a tab-separated resource.

    Each data row is ``<names>\\t<code>[\\t...]`` where ``<names>`` is one or
    more aliases joined by ", ". The code maps to the whole ``<names>`` string;
    every alias maps back to the code, later rows overriding earlier ones.
    """

    def __init__(self, source: ResourceSource | None = None):
        if source is None:
            source = get_settings().language_codes_resource
        self.source = describe_source(source)
        self._code_name: dict[str, str] = {}
        self._name_code: dict[str, str] = {}

        for lineno, fields in load_tsv_rows(source, what="language codes"):
            if len(fields) < 2:
                raise ResourceLoadError(
                    "language codes",
                    self.source,
                    f"line {lineno} has no language code column",
                )
            names, code = fields[0], fields[1]
            language = Language.from_row(names, code)
            self._code_name[code] = language.name
            for alias in language.aliases:
                self._name_code[alias] = code

        logger.debug(
            "Loaded %d language codes (%d names) from %s",
            len(self._code_name),
            len(self._name_code),
            self.source,
        )

    def from_language_code(self, code: str) -> str | None:
        """Display name for ``code``, or None if unknown."""
        if not isinstance(code, str):
            return None
        return self._code_name.get(code)

    def from_language(self, language: str) -> str | None:
        """Code for an exact language name or alias, or None if unknown."""
        if not isinstance(language, str):
            return None
        return self._name_code.get(language)

    def get_num_languages(self) -> int:
        """Number of distinct language codes (aliases not counted)."""
        return len(self._code_name)

    def get_language(self, code: str) -> Language | None:
        name = self.from_language_code(code)
        if name is None:
            return None
        return Language.from_row(name, code)

    def languages(self) -> list[Language]:
        """All loaded languages in source order."""
        return [Language.from_row(name, code) for code, name in self._code_name.items()]

    def __len__(self) -> int:
        return self.get_num_languages()

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._code_name
