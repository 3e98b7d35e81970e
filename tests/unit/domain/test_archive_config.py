from __future__ import annotations

"""
Unit tests for the Archive Configuration layer.

Verifies:
1. Default injection.
2. Type coercion and warnings in lenient mode.
3. Strict mode failures.
4. JSON file loading.
"""

import json
from pathlib import Path

import pytest

from iconjar.domain.config import ArchiveConfig, get_default_config, load_config, validate_config


def test_defaults_match_archive_contract() -> None:
    cfg = ArchiveConfig()
    assert cfg.extension == "iconjar"
    assert cfg.version == 2
    assert cfg.compression_level == 1
    assert cfg.meta_filename == "META"
    assert cfg.icons_dirname == "icons"
    assert get_default_config()["extension"] == "iconjar"


def test_validate_none_returns_defaults() -> None:
    cfg, warnings = validate_config(None)
    assert cfg == ArchiveConfig()
    assert warnings == []


def test_validate_non_dict_warns() -> None:
    cfg, warnings = validate_config(["bad"])
    assert cfg == ArchiveConfig()
    assert len(warnings) == 1


def test_validate_coerces_numeric_strings() -> None:
    cfg, warnings = validate_config({"compression_level": "6", "version": "3"})
    assert cfg.compression_level == 6
    assert cfg.version == 3
    assert len(warnings) == 2


def test_validate_strips_extension_dot() -> None:
    cfg, _ = validate_config({"extension": ".jar"})
    assert cfg.extension == "jar"


def test_validate_out_of_range_level_falls_back() -> None:
    cfg, warnings = validate_config({"compression_level": 12})
    assert cfg.compression_level == 1
    assert any("compression_level" in w for w in warnings)


def test_validate_reports_unknown_keys() -> None:
    cfg, warnings = validate_config({"colour": "blue"})
    assert cfg == ArchiveConfig()
    assert warnings == ["Unknown config key 'colour' ignored."]


def test_strict_raises_on_bad_type() -> None:
    with pytest.raises(TypeError):
        validate_config({"version": "two"}, strict=True)

    with pytest.raises(TypeError):
        validate_config({"extension": 5}, strict=True)

    with pytest.raises(ValueError):
        validate_config({"compression_level": -1}, strict=True)


def test_load_config_reads_json(tmp_path: Path) -> None:
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"icons_dirname": "assets"}), encoding="utf-8")

    cfg, warnings = load_config(str(path))

    assert cfg.icons_dirname == "assets"
    assert warnings == []


def test_load_config_missing_or_corrupt(tmp_path: Path) -> None:
    cfg, warnings = load_config(str(tmp_path / "nope.json"))
    assert cfg == ArchiveConfig()
    assert len(warnings) == 1

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    cfg, warnings = load_config(str(broken))
    assert cfg == ArchiveConfig()
    assert len(warnings) == 1
