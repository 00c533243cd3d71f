from __future__ import annotations

from typing import List, Mapping, Tuple

from babelsheet.messages.model import Language, Messages
from babelsheet.snapshot.contract import SnapshotReadContract
from .model import MessageFileExportStats, SheetContent
from .sheetprocessor import SheetProcessor


def prepare_sheet(
    snapshot: SnapshotReadContract,
    file_path: str,
    primary_msgs: Messages,
    translations: Mapping[Language, Messages],
    translation_langs: List[Language],
) -> Tuple[SheetContent, MessageFileExportStats]:
    """Public API (SheetProcessor)

    Contract:
    - Pure: reads the snapshot, mutates nothing.
    - Rows: blank for new/changed keys, populated for keys missing a translation.
    - A missing-translation key without a primary message yields the row [key].
    - Rows sorted by position of the key in primary_msgs, header first.
    """
    return SheetProcessor(snapshot).prepare_sheet(file_path, primary_msgs, translations, translation_langs)
