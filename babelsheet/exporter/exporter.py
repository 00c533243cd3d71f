from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from babelsheet.collector.collector import TranslationCollector
from babelsheet.collector.model import ExportResult, TranslationSheet
from babelsheet.config.model import ExportConfig
from babelsheet.messages.loader import MessageLoader
from babelsheet.messages.paths import expand_paths, find_duplicate_patterns
from babelsheet.sheetprocessor.sheetprocessor import SheetProcessor
from babelsheet.snapshot.snapshot import TranslationSnapshot

logger = logging.getLogger(__name__)

COMBINING_SHEET_NAME = "ALL"


class ExportError(RuntimeError):
    pass


class Exporter:
    """Export phase: configured message files -> translation sheets."""

    def __init__(self, loader: MessageLoader, snapshot: TranslationSnapshot) -> None:
        self.loader = loader
        self.snapshot = snapshot

    def export(self, config: ExportConfig) -> ExportResult:
        self._warn_duplicate_patterns(config.paths)

        paths = expand_paths(config.paths)
        missing = [p for p in paths if not Path(p).exists()]
        for p in missing:
            logger.error("File '%s' could not be found.", p)
        if missing:
            raise ExportError("Please fix the message file paths in the configuration file.")

        collector = TranslationCollector(
            self.loader,
            SheetProcessor(self.snapshot),
            self.snapshot,
            self.snapshot,
            max_workers=config.max_workers,
            sheet_name_max_length=config.sheet_name_max_length,
        )
        result = collector.collect(paths, config.languages)

        if config.combine_sheets:
            result = ExportResult(
                new_file_paths=result.new_file_paths,
                sheets=self._combine(result.sheets),
                stats=result.stats,
            )

        for sheet in result.non_empty_sheets():
            logger.info("Sheet '%s' has %d rows to translate.", sheet.sheet_name, len(sheet.data_rows))
        return result

    def _warn_duplicate_patterns(self, patterns: List[str]) -> None:
        duplicates = find_duplicate_patterns(patterns)
        if duplicates:
            logger.warning("Detected duplicate message file paths in configuration file:")
        for dup in duplicates:
            logger.warning("'%s' is defined more than once.", dup)

    def _combine(self, sheets: List[TranslationSheet]) -> List[TranslationSheet]:
        if not sheets:
            return []
        rows = [list(sheets[0].header)]
        for sheet in sheets:
            rows.extend(sheet.data_rows)
        return [TranslationSheet(sheet_name=COMBINING_SHEET_NAME, rows=rows)]
