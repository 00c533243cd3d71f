from __future__ import annotations

from typing import Dict, Mapping, Optional

from .model import MessageFileContent
from .snapshot import TranslationSnapshot


def new_snapshot() -> TranslationSnapshot:
    """Public API (Snapshot): empty snapshot, i.e. the first-export state."""
    return TranslationSnapshot()


def snapshot_from_messages(messages_by_file: Mapping[str, Mapping[str, Optional[str]]]) -> TranslationSnapshot:
    """Public API (Snapshot)

    Contract:
    - One MessageFileContent per file, ids 0..n-1 in mapping order.
    - Recorded messages are compared with normalized line endings.
    """
    files: Dict[str, MessageFileContent] = {}
    for i, (path, messages) in enumerate(messages_by_file.items()):
        files[path] = MessageFileContent(id=i, messages=dict(messages))
    return TranslationSnapshot(files)
