"""Utilities for validating the library manifest and its translations."""

from __future__ import annotations

import argparse
from typing import Sequence

from coreintents.library.entities import is_known_entity
from coreintents.localization import Catalogue, LocaleTag, load_catalogue
from coreintents.version import get_project_version

from .library_config import load_library_manifest
from .schema import LibraryManifest


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_entities(manifest: LibraryManifest) -> list[str]:
    return [
        _format_scope(spec.name, f"unknown entity type '{spec.entity}'")
        for spec in manifest.value_intents
        if not is_known_entity(spec.entity or "")
    ]


def _validate_locales(manifest: LibraryManifest, catalogue: Catalogue) -> list[str]:
    errors: list[str] = []
    default = manifest.default_locale_tag

    if not catalogue.has_locale(default):
        errors.append(
            _format_scope(catalogue.name, f"no translations for default locale {default}")
        )

    for locale in manifest.supported_locale_tags:
        if locale != default and not (
            catalogue.has_locale(locale) or catalogue.has_locale(locale.language_only())
        ):
            errors.append(
                _format_scope(
                    catalogue.name,
                    f"supported locale {locale} has no translations and relies on {default}",
                )
            )

    return errors


def _validate_simple_keys(manifest: LibraryManifest, catalogue: Catalogue) -> list[str]:
    baseline = catalogue.messages(manifest.default_locale_tag)
    return [
        _format_scope(
            spec.name,
            f"translation key '{spec.translation_key}' missing from {manifest.default_locale}",
        )
        for spec in manifest.simple_intents
        if spec.translation_key not in baseline
    ]


def validate_catalogue(catalogue: Catalogue, default_locale: LocaleTag) -> list[str]:
    """Check that the default locale is a complete baseline for ``catalogue``."""

    errors: list[str] = []
    baseline = set(catalogue.messages(default_locale))

    for locale in catalogue.locales:
        messages = catalogue.messages(locale)
        scope = f"{catalogue.name}_{locale}"

        extra = set(messages) - baseline
        if locale != default_locale and extra:
            errors.append(
                _format_scope(
                    scope,
                    f"keys missing from default locale {default_locale}: {sorted(extra)}",
                )
            )

        empty = sorted(key for key, sentences in messages.items() if not sentences)
        if empty:
            errors.append(
                _format_scope(scope, f"empty translations block fallback for: {empty}")
            )

    return errors


def missing_translations(
    catalogue: Catalogue, default_locale: LocaleTag
) -> dict[LocaleTag, list[str]]:
    """Return, per locale, the default-locale keys that will fall back."""

    baseline = set(catalogue.messages(default_locale))
    missing: dict[LocaleTag, list[str]] = {}
    for locale in catalogue.locales:
        absent = sorted(baseline - set(catalogue.messages(locale)))
        if absent:
            missing[locale] = absent
    return missing


def validate_library(
    manifest: LibraryManifest | None = None,
    catalogue: Catalogue | None = None,
) -> list[str]:
    """Validate the manifest against its translation catalogue."""

    manifest = manifest or load_library_manifest()
    catalogue = catalogue or load_catalogue(manifest.catalogue)

    errors: list[str] = []
    errors.extend(_validate_entities(manifest))
    errors.extend(_validate_locales(manifest, catalogue))
    errors.extend(_validate_simple_keys(manifest, catalogue))
    errors.extend(validate_catalogue(catalogue, manifest.default_locale_tag))
    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the intent library manifest and its translations."
    )
    parser.add_argument(
        "--show-missing",
        action="store_true",
        help="List the keys each locale inherits from the default locale",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {get_project_version()}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)

    manifest = load_library_manifest()
    catalogue = load_catalogue(manifest.catalogue)
    issues = validate_library(manifest, catalogue)

    if args.show_missing:
        for locale, keys in missing_translations(catalogue, manifest.default_locale_tag).items():
            print(f"[{locale}] falls back for {len(keys)} key(s): {', '.join(keys)}")

    if issues:
        print(f"[{manifest.catalogue}] {len(issues)} issue(s) detected:")
        for issue in issues:
            print(f"  - {issue}")
        return 1

    print(f"[{manifest.catalogue}] OK ({len(manifest.intents)} intents)")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
