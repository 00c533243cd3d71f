from __future__ import annotations

import logging
import threading
from typing import Dict, Iterable, Optional, Set

from .contract import SnapshotReadContract, SnapshotWriteContract
from .model import MessageFileContent

logger = logging.getLogger(__name__)


class SnapshotError(RuntimeError):
    pass


def normalize_message(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.replace("\r\n", "\n").replace("\r", "\n")


class TranslationSnapshot(SnapshotReadContract, SnapshotWriteContract):
    """In-memory snapshot of the last export, safe to share between threads."""

    def __init__(self, files: Optional[Dict[str, MessageFileContent]] = None) -> None:
        self._lock = threading.Lock()
        self._files: Dict[str, MessageFileContent] = {}

        ids: Set[int] = set()
        for path, content in (files or {}).items():
            if content.id in ids:
                raise SnapshotError(f"Duplicate sheet id {content.id} for path {path}")
            ids.add(content.id)
            self._files[path] = MessageFileContent(
                id=content.id,
                messages={k: normalize_message(v) for k, v in content.messages.items()},
            )
        self._next_id = max(ids) + 1 if ids else 0

    # -- read --------------------------------------------------------------

    def includes_file(self, path: str) -> bool:
        with self._lock:
            return path in self._files

    def list_files(self) -> Set[str]:
        with self._lock:
            return set(self._files)

    def contains_message(self, key: str, path: str) -> bool:
        with self._lock:
            content = self._files.get(path)
            return content is not None and key in content.messages

    def has_same_message(self, key: str, path: str, current: Optional[str]) -> bool:
        with self._lock:
            content = self._files.get(path)
            if content is None or key not in content.messages:
                return False
            return content.messages[key] == normalize_message(current)

    def file_id(self, path: str) -> Optional[int]:
        with self._lock:
            content = self._files.get(path)
            return content.id if content else None

    # -- write -------------------------------------------------------------

    def register_file(self, path: str) -> int:
        with self._lock:
            content = self._files.get(path)
            if content is not None:
                return content.id
            sheet_id = self._next_id
            self._next_id += 1
            self._files[path] = MessageFileContent(id=sheet_id)
            logger.debug("Registered message file %s with id %d", path, sheet_id)
            return sheet_id

    def remove_files(self, paths: Iterable[str]) -> None:
        with self._lock:
            for path in paths:
                if self._files.pop(path, None) is not None:
                    logger.info("Removed obsolete message file '%s' from snapshot.", path)
