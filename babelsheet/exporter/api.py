from __future__ import annotations

from babelsheet.collector.model import ExportResult
from babelsheet.config.model import ExportConfig
from babelsheet.messages.loader import MessageLoader
from babelsheet.snapshot.snapshot import TranslationSnapshot
from .exporter import ExportError, Exporter


def export(config: ExportConfig, loader: MessageLoader, snapshot: TranslationSnapshot) -> ExportResult:
    """Public API (Exporter)

    Contract:
    - Duplicate path patterns are logged, not fatal.
    - Patterns expand to unique paths; any missing path -> ExportError (nothing collected).
    - combine_sheets=True -> single sheet "ALL": first header + all data rows.
    - The snapshot is updated by the collector (register new, remove obsolete).
    """
    return Exporter(loader, snapshot).export(config)
