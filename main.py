from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, List

from babelsheet.collector.collector import CollectorError
from babelsheet.collector.model import ExportResult
from babelsheet.config.api import load_config
from babelsheet.config.config import ConfigError
from babelsheet.exporter.api import export
from babelsheet.exporter.exporter import ExportError
from babelsheet.messages.loader import JsonMessageLoader
from babelsheet.sheetname.sheetname import SheetNameError
from babelsheet.snapshot.api import new_snapshot

SEPARATOR = "=" * 78


def _h(title: str) -> None:
    print(SEPARATOR)
    print(title)
    print(SEPARATOR)


def _kv(k: str, v: Any, indent: int = 0) -> None:
    pad = " " * indent
    if isinstance(v, (dict, list)):
        print(f"{pad}{k}:")
        _pp(v, indent + 2)
    else:
        print(f"{pad}{k}: {v}")


def _pp(obj: Any, indent: int = 0) -> None:
    pad = " " * indent
    if isinstance(obj, dict):
        for k, v in obj.items():
            _kv(str(k), v, indent)
    elif isinstance(obj, list):
        for item in obj:
            if isinstance(item, (dict, list)):
                print(f"{pad}-")
                _pp(item, indent + 2)
            else:
                print(f"{pad}- {item}")
    else:
        print(f"{pad}{obj}")


def _print_result(result: ExportResult) -> None:
    _h("EXPORT")
    _kv("new_files", len(result.new_file_paths))
    if result.new_file_paths:
        _kv("new_file_paths", list(result.new_file_paths))

    _kv("sheets", {s.sheet_name: len(s.data_rows) for s in result.sheets})

    print()
    for st in result.stats:
        print(f"[{st.file_path}]")
        _kv("new", st.new_count, indent=2)
        _kv("changed", st.changed_count, indent=2)
        _kv("missing_translation", st.missing_translation_count, indent=2)
        _kv("rows", st.total_data_rows, indent=2)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Compute translation sheets for JSON message files."
    )
    parser.add_argument("--config", required=True, help="Path to the export config (JSON)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
        result = export(config, JsonMessageLoader(), new_snapshot())
    except (ConfigError, ExportError, CollectorError, SheetNameError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    _print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
