"""Row planning for crate layers.

A row is a band of items placed side by side across the pallet width at
one height. Rows are orientation-homogeneous: either every item lies flat
inside its own cradle, or every item stands on end in the base layer.

Planning is pure. ``RowPlanner.plan`` never mutates the items it scans;
the caller removes the planned items from its own remaining collection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..entities import CrateConfig, Item, LumberPiece, PlacedItem
from ..value_objects import Orientation, Vector3
from .framing import FramingGenerator

logger = logging.getLogger(__name__)

__all__ = [
    "PlannedRow",
    "RowEntry",
    "RowPlanner",
    "STANDING_CLEARANCE",
    "VERTICAL_LENGTH_LIMIT",
    "resolve_orientation",
]

# Items must be shorter than this (and than max height) to stand on end.
VERTICAL_LENGTH_LIMIT = 90.0

# Gap left beside each standing item in place of framing posts.
STANDING_CLEARANCE = 0.5


@dataclass(frozen=True)
class RowEntry:
    """An item accepted into a row with its resolved geometry.

    Attributes:
        item: The source item.
        orientation: Orientation chosen for the item.
        dims: Oriented extents (x across, y up, z along the pallet).
        footprint_width: Width consumed in the row, framing allowance included.
    """

    item: Item
    orientation: Orientation
    dims: Vector3
    footprint_width: float


@dataclass(frozen=True)
class PlannedRow:
    """Result of one row-filling scan.

    Attributes:
        entries: Accepted items in scan order.
        width_used: Summed footprint width.
        max_height: Tallest oriented item.
        max_depth: Deepest oriented item.
    """

    entries: tuple[RowEntry, ...] = ()
    width_used: float = 0.0
    max_height: float = 0.0
    max_depth: float = 0.0

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def orientation(self) -> Orientation | None:
        """Orientation shared by every entry, None for an empty row."""
        if not self.entries:
            return None
        return self.entries[0].orientation

    @property
    def weight(self) -> float:
        return sum(entry.item.weight for entry in self.entries)

    @property
    def uids(self) -> frozenset[str]:
        return frozenset(entry.item.uid for entry in self.entries)


def resolve_orientation(item: Item, config: CrateConfig) -> tuple[Orientation, Vector3]:
    """Choose an orientation and the matching oriented extents.

    Short items stand on end when vertical placement is allowed. Everything
    else lies flat with the narrower cross-section side across the row.

    Args:
        item: Item to orient.
        config: Crate configuration.

    Returns:
        Tuple of (orientation, dims).
    """
    if (
        config.allow_vertical
        and item.length < config.max_height
        and item.length < VERTICAL_LENGTH_LIMIT
    ):
        return Orientation.STANDING, Vector3(item.width, item.length, item.height)

    if item.width > item.height:
        return Orientation.FLAT, Vector3(item.height, item.width, item.length)
    return Orientation.FLAT, Vector3(item.width, item.height, item.length)


class RowPlanner:
    """Greedy single-pass row filler.

    Attributes:
        config: Crate configuration.
        framing: Generator used to cradle flat items when a row is placed.
    """

    def __init__(
        self,
        config: CrateConfig,
        framing: FramingGenerator | None = None,
    ) -> None:
        self.config = config
        self.framing = framing or FramingGenerator(config)

    def plan(
        self,
        remaining: Sequence[Item],
        crate_weight: float,
        layer_y: float,
    ) -> PlannedRow:
        """Scan remaining items in order and fill one row.

        Items that fail a check are skipped, not rejected: they stay
        candidates for a later row or crate.

        Args:
            remaining: Unplaced items in queue order.
            crate_weight: Weight already committed to the crate.
            layer_y: Height the row would rest on.

        Returns:
            The planned row, empty when nothing fits.
        """
        config = self.config
        lumber_w = config.lumber_width
        is_base_layer = layer_y <= config.base_height

        entries: list[RowEntry] = []
        row_orientation: Orientation | None = None
        width_used = 0.0
        max_height = 0.0
        max_depth = 0.0
        weight = crate_weight

        for item in remaining:
            if weight + item.weight > config.max_weight:
                continue

            orientation, dims = resolve_orientation(item, config)
            standing = orientation is Orientation.STANDING

            if standing and not is_base_layer:
                continue

            if row_orientation is not None and orientation is not row_orientation:
                continue

            if standing:
                footprint = dims.x + STANDING_CLEARANCE
            elif not entries:
                footprint = dims.x + 2 * lumber_w
            else:
                footprint = dims.x + lumber_w

            # Standing items are not checked against the effective length
            if not standing and dims.z > config.effective_length:
                continue
            if layer_y + dims.y > config.max_height:
                continue
            if width_used + footprint > config.effective_width:
                continue

            entries.append(
                RowEntry(
                    item=item,
                    orientation=orientation,
                    dims=dims,
                    footprint_width=footprint,
                )
            )
            row_orientation = orientation
            width_used += footprint
            max_height = max(max_height, dims.y)
            max_depth = max(max_depth, dims.z)
            weight += item.weight

        if entries:
            logger.debug(
                "Planned %s row at y=%.2f: %d items, width %.2f of %.2f",
                row_orientation.value if row_orientation else "empty",
                layer_y,
                len(entries),
                width_used,
                config.effective_width,
            )

        return PlannedRow(
            entries=tuple(entries),
            width_used=width_used,
            max_height=max_height,
            max_depth=max_depth,
        )

    def place(
        self,
        row: PlannedRow,
        layer_y: float,
    ) -> tuple[list[PlacedItem], list[LumberPiece]]:
        """Position a planned row and generate its cradles.

        The row is centered across the pallet width; every item is centered
        along the pallet length regardless of its depth.

        Args:
            row: Row returned by ``plan``.
            layer_y: Height the row rests on.

        Returns:
            Tuple of (placed items, lumber pieces).
        """
        config = self.config
        lumber_w = config.lumber_width

        placed: list[PlacedItem] = []
        lumber: list[LumberPiece] = []
        cursor = (config.pallet_width - row.width_used) / 2

        for entry in row.entries:
            dims = entry.dims
            standing = entry.orientation is Orientation.STANDING
            left_x = cursor if standing else cursor + lumber_w

            placed.append(
                PlacedItem(
                    item=entry.item,
                    orientation=entry.orientation,
                    dims=dims,
                    position=Vector3(
                        left_x + dims.x / 2,
                        layer_y + dims.y / 2,
                        config.pallet_length / 2,
                    ),
                )
            )

            if standing:
                cursor += dims.x + STANDING_CLEARANCE
            else:
                lumber.extend(self.framing.frame_item(left_x, dims, layer_y))
                cursor += dims.x + lumber_w

        return placed, lumber

    def next_layer_y(self, row: PlannedRow, layer_y: float) -> float:
        """Height at which the next row starts.

        Flat rows leave room for the rung above and the next layer's
        clearance. Standing rows add only their own height.
        """
        if row.orientation is Orientation.STANDING:
            return layer_y + row.max_height
        return layer_y + row.max_height + (self.config.lumber_thick * 2)
