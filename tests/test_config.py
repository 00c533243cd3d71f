import json
from pathlib import Path

import pytest

from babelsheet.config.api import load_config
from babelsheet.config.config import ConfigError


def _config(tmp_path: Path, data) -> str:
    p = tmp_path / "export.json"
    p.write_text(json.dumps(data), encoding="utf-8")
    return str(p)


def test_defaults_and_relative_paths(tmp_path: Path):
    cfg = load_config(_config(tmp_path, {"paths": ["i18n/*.json"], "languages": ["cz", "sk"]}))

    assert cfg.paths == [str(tmp_path.resolve() / "i18n/*.json")]
    assert cfg.languages == ["cz", "sk"]
    assert cfg.combine_sheets is False
    assert cfg.max_workers == 1
    assert cfg.sheet_name_max_length == 31


def test_optional_values(tmp_path: Path):
    abs_path = str(tmp_path / "x.json")
    cfg = load_config(_config(tmp_path, {
        "paths": [abs_path], "languages": [], "combine_sheets": True,
        "max_workers": 4, "sheet_name_max_length": 100,
    }))
    assert cfg.paths == [abs_path]
    assert cfg.combine_sheets is True
    assert cfg.max_workers == 4
    assert cfg.sheet_name_max_length == 100


@pytest.mark.parametrize("data", [
    {"languages": ["cz"]},
    {"paths": ["a.json"]},
    {"paths": [], "languages": ["cz"]},
    {"paths": "a.json", "languages": ["cz"]},
    {"paths": ["a.json"], "languages": [1]},
    {"paths": ["a.json"], "languages": [], "max_workers": 0},
    {"paths": ["a.json"], "languages": [], "max_workers": "2"},
    {"paths": ["a.json"], "languages": [], "sheet_name_max_length": 2},
    ["a.json"],
])
def test_invalid_config(tmp_path: Path, data):
    with pytest.raises(ConfigError):
        load_config(_config(tmp_path, data))


def test_unreadable_config(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_config(str(tmp_path / "missing.json"))
