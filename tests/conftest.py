"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from coreintents.config import library_config  # noqa: E402
from coreintents.localization import Catalogue, catalog  # noqa: E402


@pytest.fixture(autouse=True)
def _clear_caches():
    """Start every test from freshly loaded resources."""

    catalog.load_catalogue.cache_clear()
    library_config.load_library_manifest.cache_clear()
    yield
    catalog.load_catalogue.cache_clear()
    library_config.load_library_manifest.cache_clear()


@pytest.fixture()
def yes_catalogue() -> Catalogue:
    """Small in-memory catalogue with a partial French translation."""

    return Catalogue.from_mapping(
        "CoreLibrary",
        {
            "en_US": {"Yes": ["Yes", "Yeah"], "No": ["No", "Nope"]},
            "fr_FR": {"Yes": ["Oui"]},
        },
    )
