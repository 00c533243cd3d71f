from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from babelsheet.sheetname.sheetname import DEFAULT_MAX_LENGTH, MIN_MAX_LENGTH
from .model import ExportConfig


class ConfigError(RuntimeError):
    pass


class ConfigLoader:
    def load_config(self, config_path: str) -> ExportConfig:
        path = Path(config_path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except Exception as e:
            raise ConfigError(f"Cannot read config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError("Config must be a JSON object")

        for req in ("paths", "languages"):
            if req not in data:
                raise ConfigError(f"Config missing required section: {req}")

        patterns = self._require_str_list(data, "paths")
        if not patterns:
            raise ConfigError("Config section 'paths' is empty")
        languages = self._require_str_list(data, "languages")

        max_workers = self._require_int(data, "max_workers", 1)
        if max_workers < 1:
            raise ConfigError("max_workers must be >= 1")

        sheet_name_max_length = self._require_int(data, "sheet_name_max_length", DEFAULT_MAX_LENGTH)
        if sheet_name_max_length < MIN_MAX_LENGTH:
            raise ConfigError(f"sheet_name_max_length must be >= {MIN_MAX_LENGTH}")

        base = path.resolve().parent
        return ExportConfig(
            paths=[self._resolve(base, p) for p in patterns],
            languages=languages,
            combine_sheets=bool(data.get("combine_sheets", False)),
            max_workers=max_workers,
            sheet_name_max_length=sheet_name_max_length,
            source_file=str(path),
        )

    def _require_str_list(self, data: Dict[str, Any], key: str) -> List[str]:
        v = data.get(key)
        if not isinstance(v, list) or not all(isinstance(x, str) for x in v):
            raise ConfigError(f"Config section '{key}' must be a list of strings")
        return list(v)

    def _require_int(self, data: Dict[str, Any], key: str, default: int) -> int:
        v = data.get(key, default)
        if isinstance(v, bool) or not isinstance(v, int):
            raise ConfigError(f"Config value '{key}' must be an integer")
        return v

    def _resolve(self, base: Path, pattern: str) -> str:
        p = Path(pattern)
        return pattern if p.is_absolute() else str(base / pattern)
