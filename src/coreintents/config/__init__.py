"""Library manifest loading and validation helpers."""

from .library_config import (
    CONFIG_DIRECTORY,
    MANIFEST_FILE,
    load_library_manifest,
    parse_library_manifest,
)
from .schema import ConfigurationError, IntentSpec, LibraryManifest

__all__ = [
    "CONFIG_DIRECTORY",
    "MANIFEST_FILE",
    "ConfigurationError",
    "IntentSpec",
    "LibraryManifest",
    "load_library_manifest",
    "parse_library_manifest",
]
