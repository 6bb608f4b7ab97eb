"""Value objects for the crate packing domain.

Immutable geometry and classification types shared by the planner,
the framing generator and the exporters.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """How an item rests inside a crate.

    Only axis swaps are modelled, never general rotations:
    - FLAT: lying down, length runs along the pallet length. The larger of
      width/height becomes the vertical extent.
    - STANDING: on end, length becomes the vertical extent.
    """

    FLAT = "flat"
    STANDING = "standing"


class LumberType(str, Enum):
    """Structural role of a lumber piece."""

    BASE_RUNNER = "base-runner"
    POST = "post"
    RUNG = "rung"
    RAIL = "rail"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class Vector3:
    """Point or extent in crate coordinates.

    The crate uses a Y-up frame: x runs across the pallet width, y is
    height above the floor and z runs along the pallet length.
    """

    x: float
    y: float
    z: float

    def distance_to(self, other: Vector3) -> float:
        """Straight-line distance between two points."""
        return math.sqrt(
            (other.x - self.x) ** 2 + (other.y - self.y) ** 2 + (other.z - self.z) ** 2
        )

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def largest(self) -> float:
        """Largest of the three components."""
        return max(self.x, self.y, self.z)


@dataclass(frozen=True)
class FitFailure:
    """A crate-building pass that could not place a single item.

    Returned (never raised) by the scheduler. Retrying with the same input
    reproduces it; only a configuration or manifest change helps.

    Attributes:
        message: Human-readable description.
        unplaced_uids: Identities of every item still waiting for a crate.
        crates_completed: Number of crates finished before the failure.
    """

    message: str
    unplaced_uids: tuple[str, ...]
    crates_completed: int

    def __post_init__(self) -> None:
        if not self.unplaced_uids:
            raise ValueError("A fit failure must name at least one unplaced item")
        if self.crates_completed < 0:
            raise ValueError("crates_completed must be non-negative")

    @property
    def unplaced_count(self) -> int:
        return len(self.unplaced_uids)
