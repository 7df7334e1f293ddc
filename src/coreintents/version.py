"""Version string reported by the command line tools."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import metadata
from pathlib import Path
from typing import Final

DISTRIBUTION: Final = "core-intents"
PYPROJECT_PATH: Final = Path(__file__).resolve().parents[2] / "pyproject.toml"

# ``version = "..."`` inside the ``[project]`` table, up to the next table header.
_PROJECT_VERSION = re.compile(
    r'^\[project\]\s*$(?:(?!^\[).)*?^version\s*=\s*"(?P<version>[^"]+)"',
    re.MULTILINE | re.DOTALL,
)


@lru_cache(maxsize=1)
def get_project_version() -> str:
    """Return the installed distribution version.

    Source checkouts without distribution metadata read ``pyproject.toml``.
    """

    try:
        return metadata.version(DISTRIBUTION)
    except metadata.PackageNotFoundError:
        return version_from_pyproject(PYPROJECT_PATH)


def version_from_pyproject(path: Path) -> str:
    if not path.is_file():
        raise RuntimeError(f"Unable to locate project metadata at {path}")

    match = _PROJECT_VERSION.search(path.read_text(encoding="utf-8"))
    if match is None:
        raise RuntimeError(f"No [project] version declared in {path}")
    return match.group("version")


__all__ = ["get_project_version", "version_from_pyproject"]
