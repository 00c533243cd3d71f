from dataclasses import dataclass, field
from typing import List, Optional

from babelsheet.sheetprocessor.model import MessageFileExportStats


@dataclass(frozen=True)
class TranslationSheet:
    sheet_name: str
    rows: List[List[Optional[str]]]  # header first

    @property
    def header(self) -> List[Optional[str]]:
        return self.rows[0] if self.rows else []

    @property
    def data_rows(self) -> List[List[Optional[str]]]:
        return self.rows[1:]


@dataclass(frozen=True)
class ExportResult:
    new_file_paths: List[str]
    sheets: List[TranslationSheet]
    stats: List[MessageFileExportStats] = field(default_factory=list)

    def non_empty_sheets(self) -> List[TranslationSheet]:
        return [s for s in self.sheets if s.data_rows]
