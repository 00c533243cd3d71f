"""
Read and write contracts of the translation snapshot.

The sheet processor only ever sees the read side. The collector is the
single component allowed to mutate a snapshot, and only through the two
operations of the write side.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set


class SnapshotReadContract(ABC):

    @abstractmethod
    def includes_file(self, path: str) -> bool:
        """True if the message file was known at the last export."""
        pass

    @abstractmethod
    def list_files(self) -> Set[str]:
        """Paths of all message files known to the snapshot."""
        pass

    @abstractmethod
    def contains_message(self, key: str, path: str) -> bool:
        """True if a primary message was recorded for key in the file."""
        pass

    @abstractmethod
    def has_same_message(self, key: str, path: str, current: Optional[str]) -> bool:
        """
        Compare the recorded primary message with the current one.

        Args:
            key: Message key
            path: Message file path
            current: Current primary message, None when absent

        Returns:
            True if the recorded value equals current
        """
        pass


class SnapshotWriteContract(ABC):

    @abstractmethod
    def register_file(self, path: str) -> int:
        """
        Register a message file, idempotent per path.

        Returns:
            Stable sheet id of the file
        """
        pass

    @abstractmethod
    def remove_files(self, paths: Iterable[str]) -> None:
        """Forget the given message files. Unknown paths are ignored."""
        pass
