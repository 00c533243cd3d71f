from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Set, Tuple

from babelsheet.messages.model import Language, MessageKey, Messages, SheetRow
from babelsheet.snapshot.contract import SnapshotReadContract
from .model import COL_KEY, COL_PRIMARY, MessageFileExportStats, SheetContent

logger = logging.getLogger(__name__)


class RowOrderingError(AssertionError):
    pass


class SheetProcessor:
    """Decides which messages of one message file go to its translation sheet.

    A message is exported when
    - no translation of any language knows its key (new),
    - its primary text differs from the one recorded in the snapshot (changed), or
    - at least one language lacks a translation for it (missing translation).

    New and changed messages are exported with blank translation cells,
    missing-translation messages keep the translations that exist.
    """

    def __init__(self, snapshot: SnapshotReadContract) -> None:
        self.snapshot = snapshot

    def prepare_sheet(
        self,
        file_path: str,
        primary_msgs: Messages,
        translations: Mapping[Language, Messages],
        translation_langs: List[Language],
    ) -> Tuple[SheetContent, MessageFileExportStats]:
        new_keys = self._new_keys(primary_msgs, translations)
        existing = {k: v for k, v in primary_msgs.items() if k not in new_keys}
        changed_keys = self._changed_keys(file_path, existing)
        missing_keys = self._missing_translation_keys(existing, translations)

        ordering = {key: index for index, key in enumerate(primary_msgs)}

        blank_keys = new_keys | changed_keys
        blank_rows = [
            self._row(key, primary_msgs[key], [None] * len(translation_langs))
            for key in blank_keys
        ]
        # a changed key keeps only its blank row
        populated_keys = missing_keys - blank_keys
        populated_rows = [
            self._populated_row(key, primary_msgs, translations, translation_langs)
            for key in populated_keys
        ]

        rows = self._sort_rows(blank_rows + populated_rows, ordering)
        header = [COL_KEY, COL_PRIMARY] + list(translation_langs)
        content = SheetContent(header=header, data_rows=rows)

        stats = MessageFileExportStats(
            file_path=file_path,
            new_count=len(new_keys),
            changed_count=len(changed_keys),
            missing_translation_count=len(missing_keys),
            total_data_rows=len(rows),
        )
        logger.debug(
            "%s: %d new, %d changed, %d missing translation",
            file_path, stats.new_count, stats.changed_count, stats.missing_translation_count,
        )
        return content, stats

    def _new_keys(self, primary_msgs: Messages, translations: Mapping[Language, Messages]) -> Set[MessageKey]:
        translated: Set[MessageKey] = set()
        for msgs in translations.values():
            translated.update(msgs.keys())
        return {k for k in primary_msgs if k not in translated}

    def _changed_keys(self, file_path: str, existing: Messages) -> Set[MessageKey]:
        if not self.snapshot.includes_file(file_path):
            return set()
        changed: Set[MessageKey] = set()
        for key, current in existing.items():
            if not self.snapshot.contains_message(key, file_path):
                continue
            if not self.snapshot.has_same_message(key, file_path, current):
                changed.add(key)
        return changed

    def _missing_translation_keys(
        self, existing: Messages, translations: Mapping[Language, Messages]
    ) -> Set[MessageKey]:
        key_sets = [set(msgs.keys()) for msgs in translations.values()]
        in_every_bundle: Set[MessageKey] = set.intersection(*key_sets) if key_sets else set()
        return {k for k in existing if k not in in_every_bundle}

    def _populated_row(
        self,
        key: MessageKey,
        primary_msgs: Messages,
        translations: Mapping[Language, Messages],
        translation_langs: List[Language],
    ) -> SheetRow:
        primary = primary_msgs.get(key)
        # nothing to translate against
        if primary is None:
            return [key]
        translated = [translations.get(lang, {}).get(key) for lang in translation_langs]
        return self._row(key, primary, translated)

    def _row(self, key: MessageKey, primary, translated: List) -> SheetRow:
        return [key, primary] + list(translated)

    def _sort_rows(self, rows: List[SheetRow], ordering: Dict[MessageKey, int]) -> List[SheetRow]:
        for row in rows:
            if row[0] not in ordering:
                raise RowOrderingError(f"Row key not found in primary messages: {row[0]}")
        return sorted(rows, key=lambda r: ordering[r[0]])
