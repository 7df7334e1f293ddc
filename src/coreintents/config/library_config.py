"""Manifest loader wrapping the shared schema models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, LibraryManifest

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
MANIFEST_FILE = CONFIG_DIRECTORY / "core_library.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Manifest file must define a mapping at the top level")
    return data


def parse_library_manifest(raw_manifest: dict[str, Any]) -> LibraryManifest:
    """Validate a raw manifest mapping."""

    try:
        return LibraryManifest.model_validate(raw_manifest)
    except ValidationError as error:
        raise ConfigurationError(f"Manifest validation failed: {error}") from error


@lru_cache(maxsize=1)
def load_library_manifest() -> LibraryManifest:
    """Load and cache the core library manifest."""

    if not MANIFEST_FILE.exists():
        raise FileNotFoundError(f"Library manifest not found: {MANIFEST_FILE}")

    return parse_library_manifest(_load_yaml(MANIFEST_FILE))


__all__ = [
    "CONFIG_DIRECTORY",
    "MANIFEST_FILE",
    "load_library_manifest",
    "parse_library_manifest",
]
