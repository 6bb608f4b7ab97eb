"""Lumber usage estimation service."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from ..value_objects import LumberType

if TYPE_CHECKING:
    from ..entities import LumberPiece

__all__ = ["LumberEstimate", "LumberEstimator", "wood_usage_feet"]


def wood_usage_feet(lumber: Iterable[LumberPiece]) -> float:
    """Linear feet of stock for a set of lumber pieces.

    Each box counts as one length of stock equal to its largest extent;
    each brace counts its endpoint-to-endpoint length. Rounded to 0.1 ft.
    """
    return _to_feet(sum(piece.stock_length for piece in lumber))


def _to_feet(inches: float) -> float:
    # Half-up on the exact binary value, so 407.25 becomes 407.3
    feet = Decimal(inches / 12).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return float(feet)


@dataclass
class LumberEstimate:
    """Estimate of framing lumber needed for a crate."""

    linear_feet: float
    stock_count: int
    stock_length_ft: float
    waste_percentage: float
    piece_counts: dict[LumberType, int] = field(default_factory=dict)
    feet_by_type: dict[LumberType, float] = field(default_factory=dict)

    @property
    def piece_count(self) -> int:
        return sum(self.piece_counts.values())

    @property
    def description(self) -> str:
        """Human-readable description of lumber needs."""
        return (
            f"{self.linear_feet:.1f} linear ft "
            f"({self.stock_count} boards of {self.stock_length_ft:g} ft, "
            f"assuming {self.waste_percentage:.0%} waste)"
        )


class LumberEstimator:
    """Estimates framing stock requirements from a lumber list."""

    STOCK_LENGTH_FT = 8.0  # standard 2x4x8

    def __init__(self, waste_factor: float = 0.10) -> None:
        """Initialize with waste factor (default 10%)."""
        if waste_factor < 0:
            raise ValueError("Waste factor must be non-negative")
        self.waste_factor = waste_factor

    def estimate(self, lumber: Iterable[LumberPiece]) -> LumberEstimate:
        """Estimate stock for a lumber list, with a per-type breakdown."""
        pieces = list(lumber)

        counts: dict[LumberType, int] = {}
        inches_by_type: dict[LumberType, float] = {}
        for piece in pieces:
            lumber_type = piece.lumber_type
            counts[lumber_type] = counts.get(lumber_type, 0) + 1
            inches_by_type[lumber_type] = (
                inches_by_type.get(lumber_type, 0.0) + piece.stock_length
            )

        total_inches = sum(inches_by_type.values())
        with_waste = total_inches * (1 + self.waste_factor)
        return LumberEstimate(
            linear_feet=wood_usage_feet(pieces),
            stock_count=math.ceil(with_waste / (self.STOCK_LENGTH_FT * 12)),
            stock_length_ft=self.STOCK_LENGTH_FT,
            waste_percentage=self.waste_factor,
            piece_counts=counts,
            feet_by_type={
                lumber_type: _to_feet(inches)
                for lumber_type, inches in inches_by_type.items()
            },
        )
