"""Editor context: the live node registry and the action stack recording changes to it."""

import logging
from typing import Any

from actions import DEFAULT_MAX_UNDO, ActionStack
from nodes import AbstractPerson

logger = logging.getLogger("pedigree.editor")


class NodeRegistry:
    """Maps node ids to the node instances currently on the graph."""

    def __init__(self):
        self._nodes: dict[int, AbstractPerson] = {}
        # Only grows, so ids of removed nodes are never handed out again
        self._next_id = 0

    def generate_id(self) -> int:
        """Return the next node id that has never been used on this graph."""
        return self._next_id

    def add_node(self, node: AbstractPerson) -> None:
        node_id = node.get_id()
        if node_id in self._nodes:
            raise ValueError(f"Node id already in use: {node_id}")
        self._nodes[node_id] = node
        self._next_id = max(self._next_id, node_id + 1)

    def get_node(self, node_id: int) -> AbstractPerson | None:
        return self._nodes.get(node_id)

    def remove_node(self, node_id: int) -> AbstractPerson | None:
        """Remove a node from the graph. Returns the removed node, or None if unknown."""
        node = self._nodes.pop(node_id, None)
        if node is not None:
            node.remove()
        return node

    def get_all_nodes(self) -> list[AbstractPerson]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)


class EditorContext:
    """
    Everything a node needs to take part in undo/redo: the registry used to
    re-acquire nodes at replay time and the action stack to record on.
    """

    def __init__(self, max_undo: int = DEFAULT_MAX_UNDO):
        self.registry = NodeRegistry()
        self.action_stack = ActionStack(self.registry, max_size=max_undo)

    def add_person(self, x: float, y: float, gender: Any = "U", node_id: int | None = None) -> AbstractPerson:
        """Create a person node and place it on the graph."""
        if node_id is None:
            node_id = self.registry.generate_id()
        person = AbstractPerson(x, y, gender, node_id, editor=self)
        self.registry.add_node(person)
        logger.info(f"Added person {node_id} ({person.get_gender().value}) at ({x}, {y})")
        return person

    def remove_person(self, node_id: int) -> bool:
        removed = self.registry.remove_node(node_id) is not None
        if removed:
            logger.info(f"Removed person {node_id}")
        return removed
