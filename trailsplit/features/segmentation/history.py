"""
Undo history for marker edits.

Snapshot-based: each entry is the full marker list, by value, as it was
before a tracked edit.
"""

from collections import deque

from trailsplit.shared.constants import HISTORY_LIMIT
from trailsplit.shared.exceptions import NothingToUndoError
from trailsplit.shared.track_types import MarkerSnapshot

HistoryEntry = tuple[MarkerSnapshot, ...]


class HistoryStack:
    """
    Bounded LIFO of marker-list snapshots.

    When full, pushing drops the oldest entry.
    """

    def __init__(self, limit: int = HISTORY_LIMIT):
        self.limit = limit
        self._entries: deque[HistoryEntry] = deque(maxlen=limit)

    def push(self, entry: HistoryEntry) -> None:
        self._entries.append(tuple(entry))

    def pop(self) -> HistoryEntry:
        """
        Remove and return the most recent snapshot.

        Raises:
            NothingToUndoError: If the stack is empty
        """
        if not self._entries:
            raise NothingToUndoError("Nothing to undo")
        return self._entries.pop()

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)
