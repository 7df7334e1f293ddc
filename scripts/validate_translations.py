#!/usr/bin/env python3
"""Validate training sentence catalogues and emit a coverage metadata artifact."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Import the package straight from a checkout, like ``validate_config.py``.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from coreintents.config import load_library_manifest  # noqa: E402
from coreintents.config.validator import missing_translations, validate_library  # noqa: E402
from coreintents.localization import Catalogue, LocaleTag, load_catalogue  # noqa: E402


def coverage_metadata(catalogue: Catalogue, base_locale: LocaleTag) -> dict:
    """Summarise how much of the ``base_locale`` keys each locale translates."""

    base_keys = set(catalogue.messages(base_locale))
    return {
        "catalogue": catalogue.name,
        "locales": [str(locale) for locale in catalogue.locales],
        "base_locale": str(base_locale),
        "keys": sorted(base_keys),
        "coverage": {
            str(locale): {
                "translated": len(set(catalogue.messages(locale)) & base_keys),
                "sentences": sum(len(value) for value in catalogue.messages(locale).values()),
            }
            for locale in catalogue.locales
        },
    }


def _write_metadata(metadata: dict, metadata_path: Path) -> None:
    metadata_path.parent.mkdir(parents=True, exist_ok=True)
    metadata_path.write_text(
        json.dumps(metadata, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--fail-on-missing",
        action="store_true",
        help="Exit with an error if a locale relies on default-locale fallback",
    )
    parser.add_argument(
        "--metadata",
        type=Path,
        help="Write a JSON coverage report to this path",
    )
    args = parser.parse_args(argv)

    try:
        manifest = load_library_manifest()
        catalogue = load_catalogue(manifest.catalogue)
    except (OSError, ValueError) as error:
        print(f"[error] {error}")
        return 1

    if not catalogue.locales:
        print(f"[error] No translation catalogues discovered for {manifest.catalogue}")
        return 1

    base_locale = manifest.default_locale_tag
    issues = validate_library(manifest, catalogue)
    missing = missing_translations(catalogue, base_locale)

    if args.metadata:
        _write_metadata(coverage_metadata(catalogue, base_locale), args.metadata)

    for issue in issues:
        print(f"[baseline] {issue}")
    for locale, keys in missing.items():
        print(f"[missing] Locale '{locale}' falls back for {len(keys)} keys: {', '.join(keys)}")

    if issues or (missing and args.fail_on_missing):
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
