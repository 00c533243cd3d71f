from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

from babelsheet.messages.loader import MessageLoader
from babelsheet.messages.model import Language
from babelsheet.sheetname.sheetname import DEFAULT_MAX_LENGTH, SheetNamer
from babelsheet.sheetprocessor.model import MessageFileExportStats, SheetContent
from babelsheet.sheetprocessor.sheetprocessor import SheetProcessor
from babelsheet.snapshot.contract import SnapshotReadContract, SnapshotWriteContract
from .model import ExportResult, TranslationSheet

logger = logging.getLogger(__name__)


class CollectorError(RuntimeError):
    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


_Prepared = Tuple[str, SheetContent, MessageFileExportStats]


class TranslationCollector:
    """Collects translation sheets for many message files.

    Every file is loaded and diffed before the snapshot is touched, so a file
    that fails to load aborts the run without any snapshot mutation.
    """

    def __init__(
        self,
        loader: MessageLoader,
        processor: SheetProcessor,
        snapshot_read: SnapshotReadContract,
        snapshot_write: SnapshotWriteContract,
        max_workers: int = 1,
        sheet_name_max_length: int = DEFAULT_MAX_LENGTH,
    ) -> None:
        self.loader = loader
        self.processor = processor
        self.snapshot_read = snapshot_read
        self.snapshot_write = snapshot_write
        self.max_workers = max(1, max_workers)
        self.namer = SheetNamer(sheet_name_max_length)

    def collect(self, all_paths: List[str], translate_to: List[Language]) -> ExportResult:
        paths = list(dict.fromkeys(all_paths))
        new_paths = [p for p in paths if not self.snapshot_read.includes_file(p)]
        if new_paths:
            logger.info("Found %d new message file(s).", len(new_paths))

        prepared = self._prepare_all(paths, translate_to)

        sheets: List[TranslationSheet] = []
        stats: List[MessageFileExportStats] = []
        for path, content, file_stats in prepared:
            sheet_id = self.snapshot_write.register_file(path)
            name = self.namer.sheet_name(path, sheet_id)
            sheet = TranslationSheet(sheet_name=name, rows=content.rows)
            logger.info("Gathered %d translation rows from message file '%s'.", content.data_row_count, path)
            sheets.append(sheet)
            stats.append(file_stats)

        obsolete = self.snapshot_read.list_files() - set(paths)
        if obsolete:
            self.snapshot_write.remove_files(sorted(obsolete))

        return ExportResult(new_file_paths=new_paths, sheets=sheets, stats=stats)

    def _prepare_all(self, paths: List[str], translate_to: List[Language]) -> List[_Prepared]:
        if self.max_workers == 1 or len(paths) < 2:
            return [self._prepare_guarded(p, translate_to) for p in paths]

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [pool.submit(self._prepare_guarded, p, translate_to) for p in paths]
            # input order, first failure wins
            return [f.result() for f in futures]

    def _prepare_guarded(self, path: str, translate_to: List[Language]) -> _Prepared:
        try:
            return self._prepare(path, translate_to)
        except AssertionError:
            raise
        except Exception as e:
            logger.error("Message file '%s' failed: %s", path, e)
            raise CollectorError(f"Cannot prepare translation sheet for '{path}': {e}", path) from e

    def _prepare(self, path: str, translate_to: List[Language]) -> _Prepared:
        primary = self.loader.load_primary(path)
        translations = self.loader.load_translations(path, translate_to)
        content, stats = self.processor.prepare_sheet(path, primary, translations, translate_to)
        return path, content, stats
