from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

from .model import Language, Messages, MsgFilePath

logger = logging.getLogger(__name__)


class MessageLoadError(RuntimeError):
    pass


class MessageLoader(ABC):
    """Loads primary and translated message bundles of one message file."""

    @abstractmethod
    def load_primary(self, path: MsgFilePath) -> Messages:
        """
        Load the primary language messages of a message file.

        Args:
            path: Path of the message file

        Returns:
            Ordered mapping of message key to message
        """
        pass

    @abstractmethod
    def load_translations(self, path: MsgFilePath, languages: List[Language]) -> Dict[Language, Messages]:
        """
        Load already translated messages for each of the given languages.

        Args:
            path: Path of the primary message file
            languages: Languages to load translations for

        Returns:
            Mapping of language to its messages, possibly empty per language
        """
        pass


class JsonMessageLoader(MessageLoader):
    """Message files are JSON objects: messages.json, messages_cz.json, ..."""

    def load_primary(self, path: MsgFilePath) -> Messages:
        p = Path(path)
        if not p.exists():
            raise MessageLoadError(f"Message file not found: {p}")
        return self._read_bundle(p)

    def load_translations(self, path: MsgFilePath, languages: List[Language]) -> Dict[Language, Messages]:
        out: Dict[Language, Messages] = {}
        for lang in languages:
            p = self.translation_path(path, lang)
            if not p.exists():
                logger.debug("No %s translation for %s (expected %s)", lang, path, p)
                out[lang] = {}
                continue
            out[lang] = self._read_bundle(p)
        return out

    def translation_path(self, path: MsgFilePath, language: Language) -> Path:
        p = Path(path)
        return p.with_name(f"{p.stem}_{language}{p.suffix}")

    def _read_bundle(self, path: Path) -> Messages:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except Exception as e:
            raise MessageLoadError(f"Cannot read message file {path}: {e}") from e

        if not isinstance(data, dict):
            raise MessageLoadError(f"Message file {path} must contain a JSON object")

        for key, value in data.items():
            if value is not None and not isinstance(value, str):
                raise MessageLoadError(f"Message '{key}' in {path} is not a string")
        return data
