from country_translator.translators.base import Translator


class TranslatorRegistry:
    """Translator classes by name, so callers pick a backend from config."""

    _translators: dict[str, type[Translator]] = {}

    @classmethod
    def register(cls, translator_cls: type[Translator]) -> type[Translator]:
        """Class decorator registering a translator under its ``name``."""
        cls._translators[translator_cls.name] = translator_cls
        return translator_cls

    @classmethod
    def get(cls, name: str) -> type[Translator]:
        try:
            return cls._translators[name]
        except KeyError:
            known = ", ".join(sorted(cls._translators))
            raise KeyError(f"Unknown translator {name!r} (known: {known})") from None

    @classmethod
    def all(cls) -> list[type[Translator]]:
        return list(cls._translators.values())

    @classmethod
    def create(cls, name: str, **kwargs) -> Translator:
        return cls.get(name)(**kwargs)
