"""Intent definitions, entity references and the catalogue builder."""

from .builder import IntentCatalogBuilder, IntentLibrary, build_core_library
from .definitions import ContextParameter, DslIntentFactory, IntentDefinition, IntentFactory
from .entities import CORE_ENTITIES, EntityReference, get_entity, is_known_entity
from .errors import ConstructionFailed

__all__ = [
    "CORE_ENTITIES",
    "ConstructionFailed",
    "ContextParameter",
    "DslIntentFactory",
    "EntityReference",
    "IntentCatalogBuilder",
    "IntentDefinition",
    "IntentFactory",
    "IntentLibrary",
    "build_core_library",
    "get_entity",
    "is_known_entity",
]
