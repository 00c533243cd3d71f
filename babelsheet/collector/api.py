from __future__ import annotations

from typing import List

from babelsheet.messages.loader import MessageLoader
from babelsheet.sheetname.sheetname import DEFAULT_MAX_LENGTH
from babelsheet.sheetprocessor.sheetprocessor import SheetProcessor
from babelsheet.snapshot.snapshot import TranslationSnapshot
from .collector import CollectorError, TranslationCollector
from .model import ExportResult, TranslationSheet


def collect(
    loader: MessageLoader,
    snapshot: TranslationSnapshot,
    all_paths: List[str],
    translate_to: List[str],
    max_workers: int = 1,
    sheet_name_max_length: int = DEFAULT_MAX_LENGTH,
) -> ExportResult:
    """Public API (TranslationCollector)

    Contract:
    - new_file_paths = paths unknown to the snapshot before the run.
    - One sheet per path, in path order, named <stem>#<sheet id>.
    - Any load/diff failure -> CollectorError(path), snapshot untouched.
    - Files known to the snapshot but not in all_paths are removed from it.
    """
    collector = TranslationCollector(
        loader,
        SheetProcessor(snapshot),
        snapshot,
        snapshot,
        max_workers=max_workers,
        sheet_name_max_length=sheet_name_max_length,
    )
    return collector.collect(all_paths, translate_to)
