"""Locale handling and training-sentence catalogues."""

from .catalog import (
    DEFAULT_LOCALE,
    Catalogue,
    CatalogueFormatError,
    ResourceMissing,
    TranslationResolver,
    available_locales,
    load_catalogue,
)
from .locale import LocaleTag, is_resource_locale

__all__ = [
    "DEFAULT_LOCALE",
    "Catalogue",
    "CatalogueFormatError",
    "LocaleTag",
    "ResourceMissing",
    "TranslationResolver",
    "available_locales",
    "is_resource_locale",
    "load_catalogue",
]
