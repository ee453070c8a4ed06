"""Headless graphics for person nodes.

The editor front end owns the real drawing surface. This model keeps track of
what a person node currently shows so the service can report it and tests can
check that every state change refreshed the graphics.
"""

import logging
from typing import Any

logger = logging.getLogger("pedigree.visuals")

# Pedigree symbol convention: square for male, circle for female, diamond for unknown
GENDER_SHAPES = {
    "M": "square",
    "F": "circle",
    "U": "diamond",
}


class AbstractPersonVisuals:
    """Graphics state for a single person node."""

    def __init__(self, node, x: float, y: float):
        self._node = node
        self.x = x
        self.y = y
        self.gender_shape: str | None = None
        self.adopted_shape = False
        self.removed = False
        self.redraw_count = 0
        self.set_gender_graphics()

    def set_gender_graphics(self) -> None:
        """Redraw the symbol matching the node's current gender."""
        gender = self._node.get_gender().value
        self.gender_shape = GENDER_SHAPES.get(gender, GENDER_SHAPES["U"])
        self.redraw_count += 1
        logger.debug(f"Gender graphics set to {self.gender_shape}")

    def draw_adopted_shape(self) -> None:
        """Draw the adoption brackets around the symbol."""
        self.adopted_shape = True
        self.redraw_count += 1

    def remove_adopted_shape(self) -> None:
        self.adopted_shape = False
        self.redraw_count += 1

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def remove(self) -> None:
        """Drop everything this node draws."""
        self.gender_shape = None
        self.adopted_shape = False
        self.removed = True

    def describe(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "genderShape": self.gender_shape,
            "adoptedShape": self.adopted_shape,
        }
