"""Lumber piece construction helpers."""

from __future__ import annotations

from ..entities import BoxLumber, DiagonalLumber
from ..value_objects import LumberType, Vector3

__all__ = ["create_brace", "create_lumber"]


def create_lumber(
    lumber_type: LumberType,
    size_x: float,
    size_y: float,
    size_z: float,
    center_x: float,
    center_y: float,
    center_z: float,
) -> BoxLumber:
    """Create an axis-aligned member from its extents and center point."""
    return BoxLumber(
        lumber_type=lumber_type,
        dims=Vector3(size_x, size_y, size_z),
        position=Vector3(center_x, center_y, center_z),
    )


def create_brace(
    start: Vector3,
    end: Vector3,
    section_width: float,
    section_thick: float,
) -> DiagonalLumber:
    """Create a diagonal brace running from ``start`` to ``end``."""
    return DiagonalLumber(
        start=start,
        end=end,
        section_width=section_width,
        section_thick=section_thick,
    )
