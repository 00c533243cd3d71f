import json
import logging
from pathlib import Path

import pytest

from babelsheet.config.model import ExportConfig
from babelsheet.exporter.api import export
from babelsheet.exporter.exporter import ExportError
from babelsheet.messages.loader import JsonMessageLoader
from babelsheet.snapshot.api import new_snapshot, snapshot_from_messages


def _write(p: Path, data) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def project(tmp_path: Path) -> Path:
    _write(tmp_path / "i18n" / "common.json", {"prev": "Previous", "next": "Next", "free": "Free"})
    _write(tmp_path / "i18n" / "common_cz.json", {"prev": "Předchozí", "next": "Další", "free": "Zdarma"})
    _write(tmp_path / "i18n" / "common_sk.json", {"prev": "Predchádzajúce", "next": "Nasledujúce", "free": "Zadarmo"})
    _write(tmp_path / "mail" / "mail.json", {"subject": "Hello"})
    return tmp_path


def test_export_new_message_only(project: Path):
    _write(project / "i18n" / "common.json",
           {"prev": "Previous", "next": "Next", "free": "Free", "avail": "In stock"})
    common = str(project / "i18n" / "common.json")
    snapshot = snapshot_from_messages({common: {"prev": "Previous", "next": "Next", "free": "Free"}})
    cfg = ExportConfig(paths=[common], languages=["cz", "sk"])

    result = export(cfg, JsonMessageLoader(), snapshot)

    assert result.new_file_paths == []
    assert result.sheets[0].data_rows == [["avail", "In stock", None, None]]


def test_export_expands_patterns(project: Path):
    cfg = ExportConfig(
        paths=[str(project / "i18n" / "common.json"), str(project / "mail" / "*.json")],
        languages=["cz", "sk"],
    )
    snapshot = new_snapshot()
    result = export(cfg, JsonMessageLoader(), snapshot)

    assert [s.sheet_name for s in result.sheets] == ["common#0", "mail#1"]
    assert len(result.new_file_paths) == 2
    assert result.sheets[1].data_rows == [["subject", "Hello", None, None]]
    assert len(snapshot.list_files()) == 2


def test_missing_path_aborts_before_collecting(project: Path, caplog):
    missing = str(project / "i18n" / "gone.json")
    cfg = ExportConfig(paths=[str(project / "i18n" / "common.json"), missing], languages=["cz"])
    snapshot = new_snapshot()

    with caplog.at_level(logging.ERROR), pytest.raises(ExportError):
        export(cfg, JsonMessageLoader(), snapshot)

    assert missing in caplog.text
    assert snapshot.list_files() == set()


def test_duplicate_patterns_are_logged(project: Path, caplog):
    common = str(project / "i18n" / "common.json")
    cfg = ExportConfig(paths=[common, common], languages=["cz", "sk"])

    with caplog.at_level(logging.WARNING):
        result = export(cfg, JsonMessageLoader(), new_snapshot())

    assert "defined more than once" in caplog.text
    assert len(result.sheets) == 1


def test_combine_sheets(project: Path):
    cfg = ExportConfig(
        paths=[str(project / "mail" / "mail.json"), str(project / "i18n" / "common.json")],
        languages=["cz", "sk"],
        combine_sheets=True,
    )
    common = str(project / "i18n" / "common.json")
    snapshot = snapshot_from_messages({common: {"prev": "Previous", "next": "Next page", "free": "Free"}})

    result = export(cfg, JsonMessageLoader(), snapshot)

    assert [s.sheet_name for s in result.sheets] == ["ALL"]
    assert result.sheets[0].rows == [
        ["key", "primary", "cz", "sk"],
        ["subject", "Hello", None, None],
        ["next", "Next", None, None],
    ]
    assert len(result.stats) == 2
