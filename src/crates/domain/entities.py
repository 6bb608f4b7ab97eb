"""Domain entities for crate packing.

All entities are frozen dataclasses. Items never change once the manifest
is normalized; placement produces new ``PlacedItem`` objects instead of
flagging the source item, so one item set can safely feed several runs.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

from .value_objects import FitFailure, LumberType, Orientation, Vector3

# Smallest non-zero cradle spacing in inches
MIN_FRAMING_SPACING = 1.0


@dataclass(frozen=True)
class CrateConfig:
    """Configuration for one packing run, in inches and pounds.

    Defaults describe a 20'10" x 7' flatbed pallet framed with 2x4 stock
    (actual 3.5" x 1.5").

    Attributes:
        pallet_length: Pallet length (z axis).
        pallet_width: Pallet width (x axis).
        max_height: Maximum stacked height including the base runners.
        max_weight: Maximum payload weight per crate.
        safety_gap: Clearance kept free along every pallet edge.
        framing_spacing: Distance between cradle points along an item.
        lumber_width: Wide face of the framing stock.
        lumber_thick: Narrow face of the framing stock.
        add_bracing: Whether to add diagonal braces between cradle points.
        allow_vertical: Whether short items may stand on end in the base layer.
    """

    pallet_length: float = 250.0
    pallet_width: float = 84.0
    max_height: float = 80.0
    max_weight: float = 2500.0
    safety_gap: float = 1.0
    framing_spacing: float = 48.0
    lumber_width: float = 3.5
    lumber_thick: float = 1.5
    add_bracing: bool = True
    allow_vertical: bool = True

    def __post_init__(self) -> None:
        if self.pallet_length <= 0:
            raise ValueError("Pallet length must be positive")
        if self.pallet_width <= 0:
            raise ValueError("Pallet width must be positive")
        if self.max_height <= 0:
            raise ValueError("Max height must be positive")
        if self.max_weight <= 0:
            raise ValueError("Max weight must be positive")
        if self.safety_gap < 0:
            raise ValueError("Safety gap must be non-negative")
        if not math.isfinite(self.framing_spacing) or self.framing_spacing < 0:
            raise ValueError("Framing spacing must be finite and non-negative")
        if 0 < self.framing_spacing < MIN_FRAMING_SPACING:
            raise ValueError(
                f"Framing spacing must be 0 or at least {MIN_FRAMING_SPACING:g} in"
            )
        if self.lumber_width <= 0 or self.lumber_thick <= 0:
            raise ValueError("Lumber cross-section must be positive")

    @property
    def effective_width(self) -> float:
        """Packable width after the safety gap on both sides."""
        return self.pallet_width - (2 * self.safety_gap)

    @property
    def effective_length(self) -> float:
        """Packable length after the safety gap on both ends."""
        return self.pallet_length - (2 * self.safety_gap)

    @property
    def base_height(self) -> float:
        """Top surface of the base runners, where the first layer sits."""
        return self.lumber_thick


@dataclass(frozen=True)
class Item:
    """One physical unit from the manifest.

    Attributes:
        item_number: Manifest label, shared by every unit of the same line.
        height: Cross-section height.
        width: Cross-section width.
        length: Long dimension.
        weight: Unit weight.
        uid: Identity distinguishing this unit from its siblings.
        group_index: Cosmetic grouping used by presentation (color slot).
    """

    item_number: str
    height: float
    width: float
    length: float
    weight: float
    uid: str
    group_index: int = 0

    def __post_init__(self) -> None:
        if self.height <= 0 or self.width <= 0 or self.length <= 0:
            raise ValueError(f"Item '{self.uid}' dimensions must be positive")
        if self.weight <= 0:
            raise ValueError(f"Item '{self.uid}' weight must be positive")
        if not self.uid:
            raise ValueError("Item uid must not be empty")


@dataclass(frozen=True)
class PlacedItem:
    """An item at its resolved position inside a crate.

    Attributes:
        item: The source item.
        orientation: Flat or standing.
        dims: Oriented extents (x across, y up, z along the pallet).
        position: Center of the item in crate coordinates.
    """

    item: Item
    orientation: Orientation
    dims: Vector3
    position: Vector3

    @property
    def top(self) -> float:
        """Height of the item's upper face."""
        return self.position.y + self.dims.y / 2

    @property
    def is_standing(self) -> bool:
        return self.orientation is Orientation.STANDING


@dataclass(frozen=True)
class BoxLumber:
    """Axis-aligned lumber piece described by extents and center."""

    lumber_type: LumberType
    dims: Vector3
    position: Vector3

    def __post_init__(self) -> None:
        if self.lumber_type is LumberType.DIAGONAL:
            raise ValueError("Diagonal braces must use DiagonalLumber")
        if self.dims.x <= 0 or self.dims.y <= 0 or self.dims.z <= 0:
            raise ValueError("Lumber dimensions must be positive")

    @property
    def stock_length(self) -> float:
        """Length of stock consumed, taken as the largest extent."""
        return self.dims.largest


@dataclass(frozen=True)
class DiagonalLumber:
    """Diagonal brace described by its endpoints and cross-section."""

    start: Vector3
    end: Vector3
    section_width: float
    section_thick: float

    def __post_init__(self) -> None:
        if self.section_width <= 0 or self.section_thick <= 0:
            raise ValueError("Brace cross-section must be positive")

    @property
    def lumber_type(self) -> LumberType:
        return LumberType.DIAGONAL

    @property
    def stock_length(self) -> float:
        """Brace length, derived from its endpoints."""
        return self.start.distance_to(self.end)


LumberPiece = Union[BoxLumber, DiagonalLumber]


@dataclass(frozen=True)
class Crate:
    """A finished crate: items, framing and totals.

    Attributes:
        index: One-based position in the run.
        items: Placed items in placement order.
        lumber: Framing in generation order, base runners first.
        total_weight: Sum of placed item weights.
        height: Stacked height reached by the last row.
        wood_usage: Lumber estimate in linear feet, one decimal.
    """

    index: int
    items: tuple[PlacedItem, ...]
    lumber: tuple[LumberPiece, ...]
    total_weight: float
    height: float
    wood_usage: float

    def __post_init__(self) -> None:
        if self.index < 1:
            raise ValueError("Crate index must be at least 1")

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def item_uids(self) -> tuple[str, ...]:
        return tuple(p.item.uid for p in self.items)


@dataclass(frozen=True)
class PackingResult:
    """Outcome of one packing run.

    Attributes:
        crates: Completed crates in build order.
        error: Set when a pass could not place anything.
    """

    crates: tuple[Crate, ...]
    error: FitFailure | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @property
    def crate_count(self) -> int:
        return len(self.crates)

    @property
    def placed_count(self) -> int:
        return sum(crate.item_count for crate in self.crates)

    @property
    def total_weight(self) -> float:
        return sum(crate.total_weight for crate in self.crates)
