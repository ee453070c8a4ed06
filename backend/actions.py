"""Undo/redo history for the pedigree editor.

History entries are plain records naming the node by id together with the old
and new value of the changed attribute. Replaying an entry looks the node up
in the registry at that moment, so entries stay valid when the graph has been
rebuilt in between, and silently do nothing when the node is gone.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, Field

logger = logging.getLogger("pedigree.actions")

DEFAULT_MAX_UNDO = 50


class ActionKind(str, Enum):
    ADOPTION_CHANGE = "adoption_change"
    GENDER_CHANGE = "gender_change"


class ActionRecord(BaseModel):
    """One undoable change of a single node attribute."""
    kind: ActionKind
    node_id: int
    old_value: Any
    new_value: Any
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())


_APPLIERS: dict[ActionKind, Callable[[Any, Any], None]] = {
    ActionKind.ADOPTION_CHANGE: lambda node, value: node.set_adopted(value),
    ActionKind.GENDER_CHANGE: lambda node, value: node.set_gender(value),
}


def apply_action(registry, record: ActionRecord, undo: bool) -> bool:
    """
    Replay one side of a history record against the live graph.

    Args:
        registry: node registry providing get_node(id)
        record: the history record
        undo: apply the old value if True, the new value otherwise

    Returns:
        True if the node was found and updated, False if it no longer exists
    """
    node = registry.get_node(record.node_id)
    if node is None:
        logger.warning(f"Node {record.node_id} not found, skipping {record.kind.value}")
        return False

    value = record.old_value if undo else record.new_value
    _APPLIERS[record.kind](node, value)
    return True


class ActionStack:
    """Bounded undo/redo stacks of ActionRecords."""

    def __init__(self, registry, max_size: int = DEFAULT_MAX_UNDO):
        self._registry = registry
        self.max_size = max_size
        self._undo_stack: list[ActionRecord] = []
        self._redo_stack: list[ActionRecord] = []
        # Whether the last undo/redo found its node; False when it was a no-op
        self.last_applied = False

    def push(self, record: ActionRecord) -> None:
        """Record a change that has already been applied."""
        self._undo_stack.append(record)
        if len(self._undo_stack) > self.max_size:
            self._undo_stack.pop(0)  # Drop oldest entry
        self._redo_stack.clear()
        logger.info(f"Recorded {record.kind.value} on node {record.node_id}")

    def undo(self) -> ActionRecord | None:
        """Revert the most recent change. Returns the record, or None if there is nothing to undo."""
        if not self._undo_stack:
            return None
        record = self._undo_stack.pop()
        self.last_applied = apply_action(self._registry, record, undo=True)
        self._redo_stack.append(record)
        logger.info(f"Undid {record.kind.value} on node {record.node_id}")
        return record

    def redo(self) -> ActionRecord | None:
        """Re-apply the most recently undone change."""
        if not self._redo_stack:
            return None
        record = self._redo_stack.pop()
        self.last_applied = apply_action(self._registry, record, undo=False)
        self._undo_stack.append(record)
        logger.info(f"Redid {record.kind.value} on node {record.node_id}")
        return record

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    def clear(self) -> None:
        self._undo_stack.clear()
        self._redo_stack.clear()

    def history(self) -> list[ActionRecord]:
        """Undoable records, oldest first."""
        return list(self._undo_stack)

    def __len__(self) -> int:
        return len(self._undo_stack)
