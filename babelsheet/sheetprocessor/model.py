from dataclasses import dataclass
from typing import List, Optional

COL_KEY = "key"
COL_PRIMARY = "primary"


@dataclass(frozen=True)
class SheetContent:
    header: List[str]
    data_rows: List[List[Optional[str]]]

    @property
    def data_row_count(self) -> int:
        return len(self.data_rows)

    @property
    def rows(self) -> List[List[Optional[str]]]:
        return [list(self.header)] + [list(r) for r in self.data_rows]


@dataclass(frozen=True)
class MessageFileExportStats:
    file_path: str
    new_count: int
    changed_count: int
    missing_translation_count: int
    total_data_rows: int
