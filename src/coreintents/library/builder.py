"""Build the core intent library for a requested locale."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from coreintents.config import IntentSpec, LibraryManifest, load_library_manifest
from coreintents.localization import Catalogue, LocaleTag, TranslationResolver

from .definitions import DslIntentFactory, IntentDefinition, IntentFactory

_LOGGER = logging.getLogger(__name__)


class IntentLibrary(Mapping[str, IntentDefinition]):
    """Read-only mapping of intent names to definitions built for one locale.

    Intents are also reachable as attributes, e.g. ``library.Yes``. Aliases
    resolve to the same definition but are not part of iteration or ``len``.
    """

    def __init__(
        self,
        locale: LocaleTag,
        definitions: Mapping[str, IntentDefinition],
        value_intent_names: frozenset[str] = frozenset(),
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        self._locale = locale
        self._definitions = MappingProxyType(dict(definitions))
        self._value_intent_names = value_intent_names
        self._aliases = MappingProxyType(dict(aliases or {}))

    @property
    def locale(self) -> LocaleTag:
        return self._locale

    def __getitem__(self, name: str) -> IntentDefinition:
        return self._definitions[self._aliases.get(name, name)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def __len__(self) -> int:
        return len(self._definitions)

    def __getattr__(self, name: str) -> IntentDefinition:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!s} has no intent named '{name}'"
            ) from None

    def simple_intents(self) -> Mapping[str, IntentDefinition]:
        return MappingProxyType(
            {
                name: definition
                for name, definition in self._definitions.items()
                if name not in self._value_intent_names
            }
        )

    def value_intents(self) -> Mapping[str, IntentDefinition]:
        return MappingProxyType(
            {
                name: definition
                for name, definition in self._definitions.items()
                if name in self._value_intent_names
            }
        )

    @property
    def aliases(self) -> Mapping[str, str]:
        """Alternative names mapped to the intent they refer to."""

        return self._aliases

    def __repr__(self) -> str:
        return f"IntentLibrary(locale={self._locale}, intents={len(self)})"


class IntentCatalogBuilder:
    """Materialise every manifest intent for a locale.

    Simple intents take their training sentences from the manifest catalogue,
    resolved with locale fallback. Value intents are built from their literal
    template and never consult the translations.
    """

    def __init__(
        self,
        factory: IntentFactory | None = None,
        manifest: LibraryManifest | None = None,
        catalogue: Catalogue | None = None,
    ) -> None:
        self._factory = factory or DslIntentFactory()
        self._manifest = manifest or load_library_manifest()
        self._catalogue = catalogue

    def resolver_for(self, locale: str | LocaleTag) -> TranslationResolver:
        """Return the translation resolver used for ``locale``.

        Raises:
            ResourceMissing: If the manifest catalogue has no resource for the
                locale or the default locale.
        """

        return TranslationResolver.initialize(
            self._manifest.catalogue,
            locale,
            default_locale=self._manifest.default_locale_tag,
            catalogue=self._catalogue,
        )

    def build(self, locale: str | LocaleTag) -> IntentLibrary:
        """Build the library for ``locale``.

        Raises:
            ResourceMissing: If the catalogue cannot be loaded for the locale.
            ConstructionFailed: If the factory rejects any intent; nothing is
                returned in that case.
        """

        resolver = self.resolver_for(locale)
        definitions: dict[str, IntentDefinition] = {}
        for spec in self._manifest.intents:
            definitions[spec.name] = self._build_intent(spec, resolver)

        _LOGGER.debug("Built %d intents for locale %s", len(definitions), resolver.locale)
        return IntentLibrary(
            resolver.locale,
            definitions,
            frozenset(spec.name for spec in self._manifest.value_intents),
            {alias: spec.name for spec in self._manifest.intents for alias in spec.aliases},
        )

    def _build_intent(self, spec: IntentSpec, resolver: TranslationResolver) -> IntentDefinition:
        if spec.is_value_intent:
            return self._factory.build_value_intent(
                spec.name, spec.template, spec.parameter, spec.entity
            )

        sentences = resolver.resolve(spec.translation_key)
        return self._factory.build_simple_intent(spec.name, sentences)


def build_core_library(locale: str | LocaleTag) -> IntentLibrary:
    """Build the core intent library for ``locale`` with the default factory."""

    return IntentCatalogBuilder().build(locale)


__all__ = ["IntentCatalogBuilder", "IntentLibrary", "build_core_library"]
