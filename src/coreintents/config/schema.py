"""Pydantic models describing the intent library manifest."""

from __future__ import annotations

from collections import Counter
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from coreintents.localization.locale import LocaleTag

DEFAULT_VALUE_TEMPLATE = "VALUE"
DEFAULT_VALUE_PARAMETER = "value"


class ConfigurationError(ValueError):
    """Raised when manifest values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class IntentSpec(ImmutableModel):
    """Language-agnostic description of one intent to build.

    An intent is either *simple* (it names the translation key holding its
    training sentences) or a *value* intent (a literal template whose whole text
    is extracted into ``parameter`` as an instance of ``entity``).

    ``aliases`` are extra names the built intent stays reachable under.
    """

    name: str
    translation_key: str | None = None
    template: str | None = None
    parameter: str | None = None
    entity: str | None = None
    aliases: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _validate_kind(self) -> IntentSpec:
        if not self.name.strip():
            raise ConfigurationError("Intent names must not be blank")
        if any(not alias.strip() or alias == self.name for alias in self.aliases):
            raise ConfigurationError(f"Intent '{self.name}' has a blank or redundant alias")

        value_fields = (self.template, self.parameter, self.entity)
        if self.translation_key is not None:
            if any(value is not None for value in value_fields):
                raise ConfigurationError(
                    f"Intent '{self.name}' cannot mix a translation key with a value template"
                )
            if not self.translation_key.strip():
                raise ConfigurationError(f"Intent '{self.name}' has a blank translation key")
        elif not all(value for value in value_fields):
            raise ConfigurationError(
                f"Intent '{self.name}' requires a translation key or a template, "
                "parameter and entity"
            )
        return self

    @property
    def is_value_intent(self) -> bool:
        return self.translation_key is None


class LibraryManifest(ImmutableModel):
    """Catalogue settings plus the static table of intents to build."""

    catalogue: str
    default_locale: str = "en_US"
    supported_locales: tuple[str, ...] = ()
    simple_intents: tuple[IntentSpec, ...] = ()
    value_intents: tuple[IntentSpec, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        expanded = dict(data)
        template = expanded.pop("value_template", DEFAULT_VALUE_TEMPLATE)
        parameter = expanded.pop("value_parameter", DEFAULT_VALUE_PARAMETER)

        simple = []
        for entry in expanded.get("simple_intents") or ():
            if isinstance(entry, str):
                entry = {"name": entry}
            if isinstance(entry, dict):
                entry = {"translation_key": entry.get("name"), **entry}
            simple.append(entry)
        expanded["simple_intents"] = simple

        values = []
        for entry in expanded.get("value_intents") or ():
            if isinstance(entry, dict):
                entry = {"template": template, "parameter": parameter, **entry}
            values.append(entry)
        expanded["value_intents"] = values
        return expanded

    @field_validator("default_locale")
    @classmethod
    def _normalise_default_locale(cls, value: str) -> str:
        return str(LocaleTag.parse(value))

    @field_validator("supported_locales", mode="before")
    @classmethod
    def _normalise_supported_locales(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(str(LocaleTag.parse(locale)) for locale in value)

    @model_validator(mode="after")
    def _validate_manifest(self) -> LibraryManifest:
        if not self.catalogue.isidentifier():
            raise ConfigurationError(
                f"Catalogue names must be identifiers, got '{self.catalogue}'"
            )
        if self.supported_locales and self.default_locale not in self.supported_locales:
            raise ConfigurationError(
                f"Default locale {self.default_locale} must be listed in supported locales"
            )
        if any(spec.is_value_intent for spec in self.simple_intents):
            raise ConfigurationError("Simple intents must declare a translation key")
        if not all(spec.is_value_intent for spec in self.value_intents):
            raise ConfigurationError("Value intents must not declare a translation key")

        names = Counter(name for spec in self.intents for name in (spec.name, *spec.aliases))
        duplicates = [name for name, count in names.items() if count > 1]
        if duplicates:
            raise ConfigurationError(f"Duplicate intent names: {sorted(duplicates)}")
        return self

    @property
    def intents(self) -> tuple[IntentSpec, ...]:
        """All specs in declaration order, simple intents first."""

        return self.simple_intents + self.value_intents

    @property
    def default_locale_tag(self) -> LocaleTag:
        return LocaleTag.parse(self.default_locale)

    @property
    def supported_locale_tags(self) -> tuple[LocaleTag, ...]:
        return tuple(LocaleTag.parse(locale) for locale in self.supported_locales)


__all__ = [
    "DEFAULT_VALUE_PARAMETER",
    "DEFAULT_VALUE_TEMPLATE",
    "ConfigurationError",
    "ImmutableModel",
    "IntentSpec",
    "LibraryManifest",
]
