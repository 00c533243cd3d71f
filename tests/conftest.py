from typing import Dict, List, Optional

import pytest

from babelsheet.messages.loader import MessageLoader, MessageLoadError


class FakeMessageLoader(MessageLoader):
    """Serves message bundles from memory, path -> {"": primary, lang: translation}."""

    def __init__(self, files: Dict[str, Dict[str, Dict[str, str]]], broken: Optional[List[str]] = None) -> None:
        self.files = files
        self.broken = set(broken or [])

    def load_primary(self, path):
        if path in self.broken:
            raise MessageLoadError(f"Cannot read message file {path}")
        return self.files[path][""]

    def load_translations(self, path, languages):
        bundles = self.files[path]
        return {lang: bundles.get(lang, {}) for lang in languages}


@pytest.fixture
def fake_loader():
    return FakeMessageLoader
