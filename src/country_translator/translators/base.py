from abc import ABC, abstractmethod


class Translator(ABC):
    """Abstract base class for country name translators.

    Lookup misses are never errors: unknown countries give an empty list and
    unknown (country, language) pairs give None.
    """

    name: str = "Translator"  # Registry key

    @abstractmethod
    def get_country_languages(self, country: str) -> list[str]:
        """Language codes with a translation for ``country``, in source order."""
        pass

    @abstractmethod
    def get_countries(self) -> list[str]:
        """Country codes this translator has data for."""
        pass

    @abstractmethod
    def translate(self, country: str, language: str) -> str | None:
        """Name of ``country`` in ``language``, or None if not available."""
        pass

    def supports(self, country: str, language: str) -> bool:
        return self.translate(country, language) is not None
