from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from .loader import JsonMessageLoader, MessageLoader, MessageLoadError
from .model import Language, Messages, MsgFilePath
from .paths import expand_paths as _expand_paths
from .paths import find_duplicate_patterns as _find_duplicate_patterns


def load_primary(path: MsgFilePath) -> Messages:
    """Public API (MessageLoader, JSON)

    Contract:
    - path points to a JSON object of key -> string|null.
    - Key order of the file is preserved.
    - Missing/unreadable/invalid file -> MessageLoadError.
    """
    return JsonMessageLoader().load_primary(path)


def load_translations(path: MsgFilePath, languages: List[Language]) -> Dict[Language, Messages]:
    """Public API (MessageLoader, JSON)

    Contract:
    - Translation for language xx lives next to the primary file: <stem>_xx<suffix>.
    - Missing translation file -> empty bundle for that language.
    """
    return JsonMessageLoader().load_translations(path, languages)


def translation_path(path: MsgFilePath, language: Language) -> Path:
    return JsonMessageLoader().translation_path(path, language)


def expand_paths(patterns: List[str]) -> List[MsgFilePath]:
    """Public API (path expansion)

    Contract:
    - Glob patterns (*, ?, [, recursive **) expand to their sorted matches.
    - Plain paths are kept as they are, existing or not.
    - Result is unique, first occurrence wins.
    """
    return _expand_paths(patterns)


def find_duplicate_patterns(patterns: List[str]) -> List[str]:
    """Public API: patterns listed more than once, in first-seen order."""
    return _find_duplicate_patterns(patterns)
