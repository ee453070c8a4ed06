"""Pedigree graph nodes: the base node and the person node built on top of it."""

import logging
from enum import Enum
from typing import Any, Callable, Mapping

from actions import ActionKind, ActionRecord
from visuals import AbstractPersonVisuals

logger = logging.getLogger("pedigree.nodes")


class Gender(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"


def parse_gender(value: Any) -> Gender:
    """
    Convert free-form input into one of the standard genders.
    "M"/"m" is male, "F"/"f" is female, anything else (including empty or
    non-string input) is unknown.
    """
    if isinstance(value, Gender):
        return value
    if not isinstance(value, str):
        return Gender.UNKNOWN
    normalized = value.upper()
    if normalized == "M":
        return Gender.MALE
    if normalized == "F":
        return Gender.FEMALE
    return Gender.UNKNOWN


# ============================================================================
# Base node
# ============================================================================

class AbstractNode:
    """
    Identity, position and graphics shared by every node on the pedigree graph.

    Args:
        x: x coordinate on the canvas
        y: y coordinate on the canvas
        node_id: identifier of the node, unique within the graph
        node_type: discriminator of the concrete node kind
        graphics_factory: called with (x, y) to build the node's graphics
    """

    def __init__(
        self,
        x: float,
        y: float,
        node_id: int,
        node_type: str = "AbstractNode",
        graphics_factory: Callable[[float, float], Any] | None = None,
    ):
        self._id = node_id
        self._x = x
        self._y = y
        self._type = node_type
        self._graphics = graphics_factory(x, y) if graphics_factory else None

    def get_id(self) -> int:
        return self._id

    def get_type(self) -> str:
        return self._type

    def get_graphics(self):
        return self._graphics

    def get_x(self) -> float:
        return self._x

    def get_y(self) -> float:
        return self._y

    def get_position(self) -> tuple[float, float]:
        return self._x, self._y

    def set_position(self, x: float, y: float) -> None:
        self._x = x
        self._y = y
        if self._graphics is not None:
            self._graphics.set_position(x, y)

    def remove(self) -> None:
        """Remove the graphics of this node from the drawing surface."""
        if self._graphics is not None:
            self._graphics.remove()

    def get_properties(self) -> dict[str, Any]:
        """Semantic properties of the node. Never includes id, position or type."""
        return {}

    def assign_properties(self, properties: Mapping[str, Any]) -> bool:
        """Apply a property bag. Returns False if it cannot be applied."""
        return isinstance(properties, Mapping)


# ============================================================================
# Person node
# ============================================================================

class AbstractPerson:
    """
    A person on the pedigree graph, carrying gender and adoption status.

    The node records its undoable changes on the action stack of ``editor``.
    Without an editor the ``*_action`` mutators still change the node but
    nothing is recorded.

    Args:
        x: x coordinate on the canvas
        y: y coordinate on the canvas
        gender: "M", "F" or "U" (anything else is treated as "U")
        node_id: identifier of the node
        editor: EditorContext owning the action stack and node registry
        node_type: set by subtypes; defaults to "AbstractPerson"
    """

    def __init__(self, x: float, y: float, gender: Any, node_id: int, editor=None, node_type: str | None = None):
        self._gender = parse_gender(gender)
        self._is_adopted = False
        self._type = node_type or "AbstractPerson"
        self._editor = editor
        self._base = AbstractNode(x, y, node_id, self._type, self._generate_graphics)

    def _generate_graphics(self, x: float, y: float) -> AbstractPersonVisuals:
        return AbstractPersonVisuals(self, x, y)

    # Base node delegation

    def get_id(self) -> int:
        return self._base.get_id()

    def get_type(self) -> str:
        return self._base.get_type()

    def get_graphics(self) -> AbstractPersonVisuals:
        return self._base.get_graphics()

    def get_position(self) -> tuple[float, float]:
        return self._base.get_position()

    def set_position(self, x: float, y: float) -> None:
        self._base.set_position(x, y)

    def remove(self) -> None:
        self._base.remove()

    # Gender

    def get_gender(self) -> Gender:
        return self._gender

    def set_gender(self, gender: Any) -> None:
        """
        Update the gender of this node and redraw its symbol.

        TODO: once partnerships and twin groups exist, also set the gender of
        partners and twins whose gender is unknown.
        """
        self._gender = parse_gender(gender)
        self.get_graphics().set_gender_graphics()
        logger.debug(f"Node {self.get_id()} gender set to {self._gender.value}")

    def set_gender_action(self, gender: Any) -> None:
        """Change the gender of this node and record the change on the action stack."""
        old_gender = self.get_gender()
        new_gender = parse_gender(gender)
        if old_gender == new_gender:
            return
        self.set_gender(new_gender)
        self._record(ActionKind.GENDER_CHANGE, old_gender.value, new_gender.value)

    def get_opposite_gender(self) -> Gender:
        """Male for female and vice versa. Unknown stays unknown."""
        if self._gender == Gender.MALE:
            return Gender.FEMALE
        if self._gender == Gender.FEMALE:
            return Gender.MALE
        return Gender.UNKNOWN

    # Adoption

    def is_adopted(self) -> bool:
        return self._is_adopted

    def set_adopted(self, is_adopted: bool) -> None:
        """Change the adoption status and draw or remove the adoption marker."""
        self._is_adopted = is_adopted
        if is_adopted:
            self.get_graphics().draw_adopted_shape()
        else:
            self.get_graphics().remove_adopted_shape()
        logger.debug(f"Node {self.get_id()} adopted set to {is_adopted}")

    def set_adopted_action(self, is_adopted: bool) -> None:
        """Change the adoption status and record the change on the action stack."""
        old_status = self.is_adopted()
        if old_status == is_adopted:
            return
        self.set_adopted(is_adopted)
        self._record(ActionKind.ADOPTION_CHANGE, old_status, is_adopted)

    def _record(self, kind: ActionKind, old_value: Any, new_value: Any) -> None:
        if self._editor is None:
            return
        self._editor.action_stack.push(
            ActionRecord(kind=kind, node_id=self.get_id(), old_value=old_value, new_value=new_value)
        )

    # Properties

    def get_properties(self) -> dict[str, Any]:
        """
        Returns all properties of this node except id, x, y and type, e.g.
        ``{"gender": "M"}``.
        """
        properties = self._base.get_properties()
        properties["gender"] = self.get_gender().value
        return properties

    def assign_properties(self, properties: Mapping[str, Any]) -> bool:
        """
        Apply the properties found in ``properties`` to this node.
        Gender changes made here are not recorded on the action stack.

        Returns:
            True if the properties were assigned
        """
        if not self._base.assign_properties(properties):
            return False
        if not properties.get("gender"):
            return False

        if self.get_gender() != parse_gender(properties["gender"]):
            self.set_gender(properties["gender"])
        return True
