"""Country translation records as stored in the JSON resource."""

from typing import Any

from pydantic import BaseModel, ConfigDict

# Identifier fields; every other key in a record is a language code
METADATA_FIELDS = frozenset({"id", "alpha2", "alpha3"})


class CountryRecord(BaseModel):
    """One country: its identifiers plus one translated name per language code."""

    model_config = ConfigDict(extra="allow", frozen=True)

    # Extra fields are translations and must be strings
    __pydantic_extra__: dict[str, str]

    alpha3: str
    # Identifiers other than alpha3 are carried but never validated
    id: Any = None
    alpha2: Any = None

    @property
    def translations(self) -> dict[str, str]:
        """Language code -> country name, in source order."""
        extra = self.__pydantic_extra__ or {}
        return {
            code: name for code, name in extra.items() if code not in METADATA_FIELDS
        }
