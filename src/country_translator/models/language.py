"""Language definitions loaded from the language code table."""

from dataclasses import dataclass

ALIAS_SEPARATOR = ", "


@dataclass(frozen=True)
class Language:
    """A language known to the code table."""

    code: str  # "de", "es"
    name: str  # raw display string: "Spanish, Castilian"
    aliases: tuple[str, ...] = ()  # ("Spanish", "Castilian")

    @classmethod
    def from_row(cls, name: str, code: str) -> "Language":
        return cls(code=code, name=name, aliases=split_aliases(name))


def split_aliases(name: str) -> tuple[str, ...]:
    """Split a display name on ", ", dropping trailing empty aliases."""
    if not name:
        return (name,)
    aliases = name.split(ALIAS_SEPARATOR)
    while aliases and not aliases[-1]:
        aliases.pop()
    return tuple(aliases)
