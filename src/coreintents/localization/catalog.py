"""Translation catalogues for intent training sentences backed by JSON resources."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cache
from importlib import resources
from types import MappingProxyType

from .locale import LocaleTag, is_resource_locale

DEFAULT_LOCALE = LocaleTag("en", "US")
_TRANSLATIONS_PACKAGE = "coreintents.translations"
_SUFFIX = ".json"

_LOGGER = logging.getLogger(__name__)

Sentences = tuple[str, ...]


class ResourceMissing(LookupError):
    """Raised when no resource exists for a catalogue along a locale chain."""

    def __init__(self, catalogue_name: str, tried: Sequence[LocaleTag]) -> None:
        self.catalogue_name = catalogue_name
        self.tried = tuple(tried)
        locales = ", ".join(str(locale) for locale in self.tried) or "<none>"
        super().__init__(f"No catalogue '{catalogue_name}' found for locales: {locales}")


class CatalogueFormatError(ValueError):
    """Raised when a translation payload does not map keys to sentence lists."""


def _coerce_sentences(value: object, *, where: str) -> Sentences:
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise CatalogueFormatError(f"{where} must be a list of strings")
    sentences = []
    for item in value:
        if not isinstance(item, str):
            raise CatalogueFormatError(f"{where} must only contain strings")
        sentences.append(item)
    return tuple(sentences)


def _freeze_messages(
    messages: Mapping[str, object], *, where: str
) -> Mapping[str, Sentences]:
    if not isinstance(messages, Mapping):
        raise CatalogueFormatError(f"{where} must map translation keys to lists")
    frozen = {
        str(key): _coerce_sentences(value, where=f"{where}:{key}")
        for key, value in messages.items()
    }
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class Catalogue:
    """Immutable translations of one catalogue, indexed by locale then key."""

    name: str
    entries: Mapping[LocaleTag, Mapping[str, Sentences]] = field(default_factory=dict)

    @classmethod
    def from_mapping(
        cls,
        name: str,
        payload: Mapping[str | LocaleTag, Mapping[str, Sequence[str]]],
    ) -> Catalogue:
        """Build a catalogue from an in-memory ``{locale: {key: [...]}}`` table."""

        entries = {
            LocaleTag.parse(locale): _freeze_messages(messages, where=f"{name}_{locale}")
            for locale, messages in payload.items()
        }
        return cls(name=name, entries=MappingProxyType(entries))

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        return tuple(sorted(self.entries, key=str))

    def has_locale(self, locale: LocaleTag) -> bool:
        return locale in self.entries

    def messages(self, locale: LocaleTag) -> Mapping[str, Sentences]:
        return self.entries.get(locale, MappingProxyType({}))


def _translations_root():
    """Return the directory holding the ``<name>_<locale>.json`` resources."""

    return resources.files(_TRANSLATIONS_PACKAGE)


def _catalogue_resources(name: str):
    try:
        root = _translations_root()
    except ModuleNotFoundError:  # pragma: no cover - packaging invariant
        return

    prefix = f"{name}_"
    for entry in root.iterdir():
        if not entry.is_file() or not entry.name.endswith(_SUFFIX):
            continue
        stem = entry.name[: -len(_SUFFIX)]
        if not stem.startswith(prefix):
            continue
        suffix = stem[len(prefix):]
        # Sibling catalogues share the prefix, e.g. ``CoreLibrary_Extra_en_US``.
        if not is_resource_locale(suffix):
            _LOGGER.debug("Skipping %s: '%s' is not a locale of %s", entry.name, suffix, name)
            continue
        yield suffix, entry


@cache
def load_catalogue(name: str) -> Catalogue:
    """Load every ``<name>_<locale>.json`` resource into a cached catalogue."""

    if not name or not name.isidentifier():
        return Catalogue(name=name, entries=MappingProxyType({}))

    payload: dict[str, Mapping[str, object]] = {}
    for locale, resource in _catalogue_resources(name):
        with resource.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise CatalogueFormatError(f"Unexpected payload format in {resource.name}")
        payload[locale] = data

    catalogue = Catalogue.from_mapping(name, payload)
    _LOGGER.debug(
        "Loaded catalogue %s with locales: %s",
        name,
        ", ".join(str(locale) for locale in catalogue.locales) or "<none>",
    )
    return catalogue


def available_locales(name: str) -> tuple[LocaleTag, ...]:
    """Return the locales with published translations for ``name``."""

    return load_catalogue(name).locales


@dataclass(frozen=True)
class TranslationResolver:
    """Resolve training sentences for one catalogue and locale.

    Lookups walk :meth:`LocaleTag.fallback_chain` and stop at the first locale
    that defines the key, including keys mapped to an empty list. Tiers are
    never merged. A key missing from every tier resolves to an empty tuple.
    """

    catalogue: Catalogue
    locale: LocaleTag
    default_locale: LocaleTag = DEFAULT_LOCALE

    @classmethod
    def initialize(
        cls,
        catalogue_name: str,
        locale: str | LocaleTag,
        *,
        default_locale: str | LocaleTag | None = None,
        catalogue: Catalogue | None = None,
    ) -> TranslationResolver:
        """Bind a resolver to ``catalogue_name`` for the requested locale.

        Raises:
            ResourceMissing: If no locale of the fallback chain has a resource
                for the catalogue.
        """

        requested = LocaleTag.parse(locale)
        default = LocaleTag.parse(default_locale) if default_locale else DEFAULT_LOCALE
        chain = requested.fallback_chain(default)

        source = catalogue if catalogue is not None else load_catalogue(catalogue_name)
        if source.name != catalogue_name or not any(source.has_locale(tier) for tier in chain):
            raise ResourceMissing(catalogue_name, chain)

        return cls(catalogue=source, locale=requested, default_locale=default)

    @property
    def chain(self) -> tuple[LocaleTag, ...]:
        return self.locale.fallback_chain(self.default_locale)

    def source_locale(self, key: str) -> LocaleTag | None:
        """Return the locale whose translations would answer ``key``."""

        for tier in self.chain:
            if key in self.catalogue.messages(tier):
                return tier
        return None

    def resolve(self, key: str) -> Sentences:
        """Return the training sentences for ``key``, or ``()`` when untranslated."""

        tier = self.source_locale(key)
        if tier is None:
            _LOGGER.warning(
                "Key %r is not translated in catalogue %s (tried %s)",
                key,
                self.catalogue.name,
                ", ".join(str(locale) for locale in self.chain),
            )
            return ()

        if tier != self.locale:
            _LOGGER.debug(
                "Key %r resolved from %s instead of %s", key, tier, self.locale
            )
        return self.catalogue.messages(tier)[key]

    def keys(self) -> frozenset[str]:
        """Return every key resolvable through the fallback chain."""

        resolved: set[str] = set()
        for tier in self.chain:
            resolved.update(self.catalogue.messages(tier))
        return frozenset(resolved)


__all__ = [
    "DEFAULT_LOCALE",
    "Catalogue",
    "CatalogueFormatError",
    "ResourceMissing",
    "TranslationResolver",
    "available_locales",
    "load_catalogue",
]
