"""Rectangle record with a computed area."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A plain width/height record.

    ``area()`` is computed from the current field values on every call.
    """

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height


def rectangle(width: float, height: float) -> Rectangle:
    """Return a Rectangle with the given dimensions."""
    return Rectangle(width=width, height=height)
