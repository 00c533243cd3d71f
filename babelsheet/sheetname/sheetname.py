from __future__ import annotations

from pathlib import PurePath

DEFAULT_MAX_LENGTH = 31
# one stem character, "#" and a ten digit id
MIN_MAX_LENGTH = 12
FALLBACK_STEM = "sheet"


class SheetNameError(RuntimeError):
    pass


class SheetNamer:
    _invalid = set(':\\/?*[]')

    def __init__(self, max_length: int = DEFAULT_MAX_LENGTH) -> None:
        if max_length < MIN_MAX_LENGTH:
            raise SheetNameError(f"max_length {max_length} is below the minimum of {MIN_MAX_LENGTH}")
        self.max_length = max_length

    def sheet_name(self, msg_file_path: str, sheet_id: int) -> str:
        suffix = f"#{sheet_id}"
        room = self.max_length - len(suffix)
        if room < 1:
            raise SheetNameError(f"max_length {self.max_length} too short for sheet id {sheet_id}")
        stem = self._sanitize(self._stem(msg_file_path)) or FALLBACK_STEM
        return stem[:room].rstrip() + suffix

    def _stem(self, msg_file_path: str) -> str:
        # accept both separators regardless of platform
        return PurePath(msg_file_path.replace("\\", "/")).stem

    def _sanitize(self, s: str) -> str:
        cleaned = "".join(ch for ch in s if ch not in self._invalid)
        return cleaned.strip().strip("'").strip()
