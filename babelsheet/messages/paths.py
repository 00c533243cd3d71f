from __future__ import annotations

import glob
from collections import Counter
from typing import List

from .model import MsgFilePath


def expand_paths(patterns: List[str]) -> List[MsgFilePath]:
    out: List[MsgFilePath] = []
    seen = set()
    for pattern in patterns:
        if glob.has_magic(pattern):
            matches = sorted(glob.glob(pattern, recursive=True))
        else:
            matches = [pattern]
        for m in matches:
            if m not in seen:
                seen.add(m)
                out.append(m)
    return out


def find_duplicate_patterns(patterns: List[str]) -> List[str]:
    counts = Counter(patterns)
    return [p for p, n in counts.items() if n > 1]
