"""
yapgeom exceptions.

Degenerate geometry (a zero vector asked for its direction, three
collinear points asked for a circumcenter) is not an error: those
operations return ``None``.  The exceptions here are raised for misuse,
which is to say combining values whose unit or coordinate-space tags do
not agree.
"""

from __future__ import annotations

from typing import Any


class GeometryError(ValueError):
    """Base exception for yapgeom errors."""
    pass


class UnitsMismatchError(GeometryError):
    """Two values with incompatible units were combined."""
    pass


class SpaceMismatchError(GeometryError):
    """Two values from different coordinate spaces were combined."""
    pass


def require_same_units(a: Any, b: Any, operation: str) -> None:
    """Raise ``UnitsMismatchError`` unless units ``a`` and ``b`` agree."""

    if a != b:
        raise UnitsMismatchError(
            f"{operation}: units '{a}' and '{b}' are not compatible"
        )


def require_same_space(a: str, b: str, operation: str) -> None:
    """Raise ``SpaceMismatchError`` unless spaces ``a`` and ``b`` agree."""

    if a != b:
        raise SpaceMismatchError(
            f"{operation}: coordinate spaces '{a}' and '{b}' differ; "
            "convert with relative_to()/place_in() first"
        )


__all__ = [
    "GeometryError",
    "UnitsMismatchError",
    "SpaceMismatchError",
    "require_same_units",
    "require_same_space",
]
