from dataclasses import dataclass, field
from typing import List

from babelsheet.sheetname.sheetname import DEFAULT_MAX_LENGTH


@dataclass(frozen=True)
class ExportConfig:
    paths: List[str]
    languages: List[str]
    combine_sheets: bool = False
    max_workers: int = 1
    sheet_name_max_length: int = DEFAULT_MAX_LENGTH
    source_file: str = field(default="", compare=False)
