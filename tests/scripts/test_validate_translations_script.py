"""Coverage for the translation validation script."""

from __future__ import annotations

import json
from importlib import util as importlib_util
from pathlib import Path

import pytest

from coreintents.localization import catalog

SCRIPT_PATH = Path(__file__).resolve().parents[2] / "scripts" / "validate_translations.py"


@pytest.fixture()
def script():
    spec = importlib_util.spec_from_file_location("validate_translations", SCRIPT_PATH)
    module = importlib_util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def test_reference_catalogue_passes(script, capsys) -> None:
    assert script.main([]) == 0

    output = capsys.readouterr().out
    assert "[baseline]" not in output
    assert "Locale 'fr_FR' falls back for 1 keys: Quit" in output


def test_fail_on_missing_turns_fallbacks_into_errors(script) -> None:
    assert script.main(["--fail-on-missing"]) == 1


def test_metadata_report_counts_translated_keys(script, tmp_path: Path) -> None:
    target = tmp_path / "coverage.json"

    assert script.main(["--metadata", str(target)]) == 0

    metadata = json.loads(target.read_text(encoding="utf-8"))
    assert metadata["base_locale"] == "en_US"
    assert metadata["locales"] == ["cat", "en_US", "es_ES", "fr_FR"]
    assert metadata["coverage"]["en_US"]["translated"] == len(metadata["keys"]) == 10
    assert metadata["coverage"]["cat"]["translated"] == 8


def test_coverage_metadata_counts_only_baseline_keys(script) -> None:
    catalogue = script.Catalogue.from_mapping(
        "Greeter",
        {
            "en_US": {"Yes": ["Yes", "Yeah"], "No": ["No"]},
            "fr_FR": {"Yes": ["Oui"], "Bonjour": ["Bonjour"]},
        },
    )

    metadata = script.coverage_metadata(catalogue, script.LocaleTag("en", "US"))

    assert metadata["catalogue"] == "Greeter"
    assert metadata["keys"] == ["No", "Yes"]
    assert metadata["coverage"]["fr_FR"] == {"translated": 1, "sentences": 2}
    assert metadata["coverage"]["en_US"] == {"translated": 2, "sentences": 3}


def test_malformed_catalogue_is_reported(script, monkeypatch, tmp_path: Path, capsys) -> None:
    tmp_path.joinpath("CoreLibrary_en_US.json").write_text(
        json.dumps({"Yes": "Yes, Yeah"}), encoding="utf-8"
    )
    monkeypatch.setattr(catalog, "_translations_root", lambda: tmp_path)
    catalog.load_catalogue.cache_clear()

    assert script.main([]) == 1
    assert "[error]" in capsys.readouterr().out
