"""Tests for building the core intent library per locale."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from coreintents.config import load_library_manifest, parse_library_manifest
from coreintents.library import (
    ConstructionFailed,
    DslIntentFactory,
    EntityReference,
    IntentCatalogBuilder,
    IntentDefinition,
    build_core_library,
)
from coreintents.localization import Catalogue, ResourceMissing, TranslationResolver

SUPPORTED_LOCALES = ("en_US", "fr_FR", "es_ES", "cat")

SIMPLE_INTENTS = (
    "Yes",
    "No",
    "Maybe",
    "Help",
    "Greetings",
    "HowAreYou",
    "WhoAreYou",
    "GoodBye",
    "Thanks",
    "Quit",
)


class RecordingFactory(DslIntentFactory):
    """Factory that records which construction operation served each intent."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def build_simple_intent(self, name: str, training_sentences: Sequence[str]) -> IntentDefinition:
        self.calls.append(("simple", name))
        return super().build_simple_intent(name, training_sentences)

    def build_value_intent(self, name, template, parameter, entity) -> IntentDefinition:
        self.calls.append(("value", name))
        return super().build_value_intent(name, template, parameter, entity)


@pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
def test_build_contains_every_declared_intent(locale: str) -> None:
    manifest = load_library_manifest()

    library = build_core_library(locale)

    assert list(library) == [spec.name for spec in manifest.intents]
    assert len(library) == len(SIMPLE_INTENTS) + len(manifest.value_intents)
    assert tuple(library.simple_intents()) == SIMPLE_INTENTS
    assert len(library.value_intents()) == 51


@pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
def test_simple_intents_use_resolved_translations(locale: str) -> None:
    resolver = TranslationResolver.initialize("CoreLibrary", locale)

    library = build_core_library(locale)

    for name in SIMPLE_INTENTS:
        definition = library[name]
        assert definition.training_sentences == resolver.resolve(name)
        assert definition.training_sentences, f"{name} has no sentences for {locale}"
        assert definition.parameters == ()


@pytest.mark.parametrize("locale", SUPPORTED_LOCALES)
def test_value_intents_have_single_typed_parameter(locale: str) -> None:
    manifest = load_library_manifest()
    library = build_core_library(locale)

    for spec in manifest.value_intents:
        definition = library[spec.name]
        assert definition.training_sentences == ("VALUE",)
        assert len(definition.parameters) == 1
        parameter = definition.parameters[0]
        assert parameter.name == "value"
        assert parameter.fragment == "VALUE"
        assert parameter.entity.name == spec.entity


def test_value_intents_never_consult_translations() -> None:
    catalogue = Catalogue.from_mapping(
        "CoreLibrary",
        {"en_US": {"Yes": ["Yes"], "DateValue": ["translated date"]}},
    )
    builder = IntentCatalogBuilder(catalogue=catalogue)

    library = builder.build("en_US")

    assert library["DateValue"].training_sentences == ("VALUE",)


def test_untranslated_simple_intent_builds_with_no_sentences() -> None:
    catalogue = Catalogue.from_mapping("CoreLibrary", {"en_US": {"Yes": ["Yes"]}})
    builder = IntentCatalogBuilder(catalogue=catalogue)

    library = builder.build("en_US")

    assert library["Yes"].training_sentences == ("Yes",)
    assert library["Quit"].training_sentences == ()


def test_builder_routes_specs_to_matching_factory_operations() -> None:
    factory = RecordingFactory()

    IntentCatalogBuilder(factory=factory).build("fr_FR")

    simple = [name for kind, name in factory.calls if kind == "simple"]
    values = [name for kind, name in factory.calls if kind == "value"]
    assert tuple(simple) == SIMPLE_INTENTS
    assert len(values) == 51


def test_build_is_idempotent() -> None:
    builder = IntentCatalogBuilder()

    first = builder.build("es_ES")
    second = builder.build("es_ES")

    assert list(first) == list(second)
    for name in first:
        assert set(first[name].training_sentences) == set(second[name].training_sentences)


def test_library_exposes_intents_as_attributes() -> None:
    library = build_core_library("fr_FR")

    assert library.Yes is library["Yes"]
    assert library.DateValue.parameters[0].entity == EntityReference("date")
    assert str(library.locale) == "fr_FR"
    with pytest.raises(AttributeError):
        library.NotAnIntent  # noqa: B018


def test_legacy_names_resolve_to_the_renamed_intents() -> None:
    library = build_core_library("en_US")

    assert library["CountryGBValue"] is library.CountyGBValue
    assert library.GiveNameValue is library["GivenNameValue"]
    assert "CountryGBValue" not in list(library)
    assert library.aliases == {"CountryGBValue": "CountyGBValue", "GiveNameValue": "GivenNameValue"}
    assert len(library) == 61


def test_library_is_read_only() -> None:
    library = build_core_library("en_US")

    with pytest.raises(TypeError):
        library["Yes"] = library["No"]  # type: ignore[index]


def test_unknown_entity_aborts_the_build() -> None:
    manifest = parse_library_manifest(
        {
            "catalogue": "CoreLibrary",
            "simple_intents": ["Yes"],
            "value_intents": [
                {"name": "DateValue", "entity": "date"},
                {"name": "MoodValue", "entity": "mood"},
            ],
        }
    )
    builder = IntentCatalogBuilder(manifest=manifest)

    with pytest.raises(ConstructionFailed) as excinfo:
        builder.build("en_US")

    assert excinfo.value.intent == "MoodValue"


def test_factory_failures_propagate_verbatim() -> None:
    failure = ConstructionFailed("backend rejected intent", intent="Yes")

    class RejectingFactory(DslIntentFactory):
        def build_simple_intent(self, name, training_sentences):
            raise failure

    with pytest.raises(ConstructionFailed) as excinfo:
        IntentCatalogBuilder(factory=RejectingFactory()).build("en_US")

    assert excinfo.value is failure


def test_build_for_missing_catalogue_raises_resource_missing() -> None:
    manifest = parse_library_manifest({"catalogue": "NoSuchCatalog", "simple_intents": ["Yes"]})

    with pytest.raises(ResourceMissing):
        IntentCatalogBuilder(manifest=manifest).build("en_US")
