"""Registry of the built-in entity types value intents can extract."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ConstructionFailed

CORE_ENTITIES: tuple[str, ...] = (
    "address",
    "age",
    "airport",
    "any",
    "capital",
    "cardinal",
    "city",
    "city-gb",
    "city-us",
    "color",
    "country",
    "country-code",
    "county-gb",
    "county-us",
    "date",
    "date-period",
    "date-time",
    "duration",
    "email",
    "flight-number",
    "given-name",
    "integer",
    "language",
    "last-name",
    "location",
    "music-artist",
    "music-genre",
    "number",
    "number-sequence",
    "ordinal",
    "percentage",
    "phone-number",
    "place-attraction",
    "place-attraction-gb",
    "place-attraction-us",
    "state",
    "state-gb",
    "state-us",
    "street-address",
    "temperature",
    "time",
    "time-period",
    "unit-area",
    "unit-currency",
    "unit-information",
    "unit-length",
    "unit-speed",
    "unit-volume",
    "unit-weight",
    "url",
    "zip-code",
)

_KNOWN_ENTITIES = frozenset(CORE_ENTITIES)


@dataclass(frozen=True)
class EntityReference:
    """Opaque reference to a named entity type."""

    name: str

    def __str__(self) -> str:
        return self.name


def is_known_entity(name: str) -> bool:
    return name in _KNOWN_ENTITIES


def get_entity(name: str) -> EntityReference:
    """Return the reference for ``name``.

    Raises:
        ConstructionFailed: If the registry does not define ``name``.
    """

    if not is_known_entity(name):
        raise ConstructionFailed(f"Unknown entity type '{name}'")
    return EntityReference(name)


__all__ = ["CORE_ENTITIES", "EntityReference", "get_entity", "is_known_entity"]
