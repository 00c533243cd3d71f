from __future__ import annotations

from .config import ConfigError, ConfigLoader
from .model import ExportConfig


def load_config(config_path: str) -> ExportConfig:
    """Public API (ConfigLoader)

    Contract:
    - JSON object with required "paths" (non-empty) and "languages" lists of strings.
    - Optional: combine_sheets, max_workers (>= 1), sheet_name_max_length.
    - Relative paths resolve against the config file directory.
    - Any problem -> ConfigError.
    """
    return ConfigLoader().load_config(config_path)
