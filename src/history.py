"""Undo/redo history of task snapshots.

History keeps two LIFO trails. Recording a new snapshot clears the redo
trail; undo and redo move one snapshot at a time between the trails.
"""
from __future__ import annotations
import logging
from collections import deque
from typing import Deque, Optional
from models import Snapshot

logger = logging.getLogger(__name__)


class EmptyHistory(LookupError):
    """Raised when undo or redo is requested with nothing on the trail."""

    def __init__(self, trail: str):
        super().__init__(f"Nothing to {trail}.")
        self.trail = trail


class History:
    def __init__(self, max_depth: Optional[int] = None):
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be a positive integer or None")
        self.max_depth = max_depth
        # deque(maxlen) drops the oldest entry from the bottom of the trail
        self._undo: Deque[Snapshot] = deque(maxlen=max_depth)
        self._redo: Deque[Snapshot] = deque(maxlen=max_depth)

    # -------------------- recording --------------------
    def record(self, snapshot: Snapshot) -> None:
        self._undo.append(snapshot)
        logger.debug("Recorded snapshot of task %d (undo depth %d)", snapshot.task_id, len(self._undo))
        if self._redo:
            logger.debug("Discarding %d redo snapshot(s)", len(self._redo))
            self._redo.clear()

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()

    # -------------------- trail movement --------------------
    def undo(self, counterpart: Optional[Snapshot] = None) -> Snapshot:
        """Pop the latest snapshot and push its counterpart onto the redo trail.

        ``counterpart`` is the state the popped snapshot is about to replace;
        when omitted the popped snapshot itself is kept for redo.
        """
        if not self._undo:
            raise EmptyHistory("undo")
        snapshot = self._undo.pop()
        self._redo.append(counterpart if counterpart is not None else snapshot)
        logger.debug("Undo trail -> redo trail: task %d", snapshot.task_id)
        return snapshot

    def redo(self, counterpart: Optional[Snapshot] = None) -> Snapshot:
        """Pop the latest redo snapshot and push its counterpart back for undo.

        Unlike record(), this leaves the rest of the redo trail intact.
        """
        if not self._redo:
            raise EmptyHistory("redo")
        snapshot = self._redo.pop()
        self._undo.append(counterpart if counterpart is not None else snapshot)
        logger.debug("Redo trail -> undo trail: task %d", snapshot.task_id)
        return snapshot

    def peek_undo(self) -> Snapshot:
        if not self._undo:
            raise EmptyHistory("undo")
        return self._undo[-1]

    def peek_redo(self) -> Snapshot:
        if not self._redo:
            raise EmptyHistory("redo")
        return self._redo[-1]

    # -------------------- queries --------------------
    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def __str__(self) -> str:
        return f'History: {self.undo_depth} undo, {self.redo_depth} redo'
