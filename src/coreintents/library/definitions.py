"""Intent definition models and the factory that materialises them."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .entities import EntityReference, is_known_entity
from .errors import ConstructionFailed


class ContextParameter(BaseModel):
    """A typed value extracted from the ``fragment`` of a training sentence."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    fragment: str
    entity: EntityReference


class IntentDefinition(BaseModel):
    """A named intent with its training sentences and optional parameters."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    training_sentences: tuple[str, ...] = ()
    parameters: tuple[ContextParameter, ...] = ()

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Intent names must not be blank")
        return value

    def get_parameter(self, name: str) -> ContextParameter | None:
        return next((parameter for parameter in self.parameters if parameter.name == name), None)


class IntentFactory(Protocol):
    """Construction operations the catalogue builder relies on."""

    def build_simple_intent(
        self, name: str, training_sentences: Sequence[str]
    ) -> IntentDefinition: ...

    def build_value_intent(
        self,
        name: str,
        template: str,
        parameter: str,
        entity: EntityReference | str,
    ) -> IntentDefinition: ...


class DslIntentFactory:
    """Default :class:`IntentFactory` producing :class:`IntentDefinition` models."""

    def build_simple_intent(
        self, name: str, training_sentences: Sequence[str]
    ) -> IntentDefinition:
        return self._materialise(name=name, training_sentences=tuple(training_sentences))

    def build_value_intent(
        self,
        name: str,
        template: str,
        parameter: str,
        entity: EntityReference | str,
    ) -> IntentDefinition:
        reference = entity if isinstance(entity, EntityReference) else EntityReference(entity)
        if not is_known_entity(reference.name):
            raise ConstructionFailed(f"Unknown entity type '{reference.name}'", intent=name)
        if not template or not template.strip():
            raise ConstructionFailed("Value templates must not be blank", intent=name)
        if not parameter or not parameter.strip():
            raise ConstructionFailed("Parameter names must not be blank", intent=name)

        # The whole template is the fragment the parameter is extracted from.
        return self._materialise(
            name=name,
            training_sentences=(template,),
            parameters=(
                ContextParameter(name=parameter, fragment=template, entity=reference),
            ),
        )

    @staticmethod
    def _materialise(**payload: object) -> IntentDefinition:
        try:
            return IntentDefinition.model_validate(payload)
        except ValidationError as error:
            raise ConstructionFailed(
                f"Invalid intent definition: {error}", intent=str(payload.get("name"))
            ) from error


__all__ = [
    "ContextParameter",
    "DslIntentFactory",
    "IntentDefinition",
    "IntentFactory",
]
