from __future__ import annotations

from .sheetname import DEFAULT_MAX_LENGTH, SheetNamer


def sheet_name(msg_file_path: str, sheet_id: int, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """Public API (SheetNamer)

    Contract:
    - Name = <file stem>#<sheet_id>.
    - Characters : \\ / ? * [ ] removed, surrounding blanks/apostrophes stripped.
    - Empty stem -> "sheet".
    - Stem truncated so that the #<sheet_id> suffix fits into max_length.
    """
    return SheetNamer(max_length).sheet_name(msg_file_path, sheet_id)
