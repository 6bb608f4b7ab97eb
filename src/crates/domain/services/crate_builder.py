"""Single-crate construction as an explicit state machine.

States and transitions:

    OPEN         -> ROW_FILLING   lay base runners, cursor on top of them
    ROW_FILLING  -> ROW_CLOSED    a non-empty row was planned and committed
    ROW_FILLING  -> CLOSED        nothing fits at the current cursor
    ROW_CLOSED   -> ROW_FILLING   row placed and framed, cursor raised

Each transition is a pure function from one ``CrateState`` to the next, so
every step can be exercised on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

from ..entities import Crate, CrateConfig, Item, LumberPiece, PlacedItem
from .framing import FramingGenerator
from .material_estimator import wood_usage_feet
from .row_planner import PlannedRow, RowPlanner

logger = logging.getLogger(__name__)

__all__ = ["CrateBuilder", "CratePhase", "CrateState", "build_one"]


class CratePhase(str, Enum):
    """Lifecycle phase of a crate under construction."""

    OPEN = "open"
    ROW_FILLING = "row_filling"
    ROW_CLOSED = "row_closed"
    CLOSED = "closed"


@dataclass(frozen=True)
class CrateState:
    """Snapshot of a crate under construction.

    Attributes:
        phase: Current lifecycle phase.
        remaining: Items not yet placed, in queue order.
        layer_y: Height the next row would rest on.
        weight: Weight committed so far.
        height: Stacked height after the last placed row.
        items: Items placed so far.
        lumber: Lumber generated so far.
        pending_row: Row planned but not yet placed (ROW_CLOSED only).
    """

    phase: CratePhase
    remaining: tuple[Item, ...]
    layer_y: float = 0.0
    weight: float = 0.0
    height: float = 0.0
    items: tuple[PlacedItem, ...] = ()
    lumber: tuple[LumberPiece, ...] = ()
    pending_row: PlannedRow | None = None

    @property
    def is_closed(self) -> bool:
        return self.phase is CratePhase.CLOSED


class CrateBuilder:
    """Fills one crate row by row until no remaining item fits.

    Attributes:
        config: Crate configuration.
        framing: Base runner and cradle generator.
        planner: Row planner.
    """

    def __init__(
        self,
        config: CrateConfig,
        planner: RowPlanner | None = None,
        framing: FramingGenerator | None = None,
    ) -> None:
        self.config = config
        self.framing = framing or FramingGenerator(config)
        self.planner = planner or RowPlanner(config, self.framing)

    def open(self, queue: Sequence[Item]) -> CrateState:
        """Start a crate over the given queue."""
        return CrateState(phase=CratePhase.OPEN, remaining=tuple(queue))

    def advance(self, state: CrateState) -> CrateState:
        """Apply one transition.

        Raises:
            ValueError: If the crate is already closed.
        """
        if state.phase is CratePhase.OPEN:
            return self._lay_base(state)
        if state.phase is CratePhase.ROW_FILLING:
            return self._fill_row(state)
        if state.phase is CratePhase.ROW_CLOSED:
            return self._place_row(state)
        raise ValueError("Crate is already closed")

    def run(self, queue: Sequence[Item]) -> CrateState:
        """Drive a fresh crate from OPEN to CLOSED."""
        state = self.open(queue)
        while not state.is_closed:
            state = self.advance(state)
        return state

    def build(self, queue: Sequence[Item], index: int = 1) -> tuple[Crate, tuple[Item, ...]]:
        """Build one crate and report what is left over.

        Args:
            queue: Unplaced items in queue order.
            index: One-based crate number.

        Returns:
            Tuple of (finished crate, items still unplaced).
        """
        state = self.run(queue)
        crate = Crate(
            index=index,
            items=state.items,
            lumber=state.lumber,
            total_weight=state.weight,
            height=state.height,
            wood_usage=wood_usage_feet(state.lumber),
        )
        logger.debug(
            "Crate %d: %d items, %.1f lb, height %.2f, %.1f ft of lumber",
            index,
            crate.item_count,
            crate.total_weight,
            crate.height,
            crate.wood_usage,
        )
        return crate, state.remaining

    def _lay_base(self, state: CrateState) -> CrateState:
        return replace(
            state,
            phase=CratePhase.ROW_FILLING,
            layer_y=self.config.base_height,
            lumber=state.lumber + tuple(self.framing.base_runners()),
        )

    def _fill_row(self, state: CrateState) -> CrateState:
        row = self.planner.plan(state.remaining, state.weight, state.layer_y)
        if row.is_empty:
            return replace(state, phase=CratePhase.CLOSED)

        taken = row.uids
        return replace(
            state,
            phase=CratePhase.ROW_CLOSED,
            remaining=tuple(item for item in state.remaining if item.uid not in taken),
            weight=state.weight + row.weight,
            pending_row=row,
        )

    def _place_row(self, state: CrateState) -> CrateState:
        row = state.pending_row
        if row is None:
            raise ValueError("No planned row to place")

        placed, lumber = self.planner.place(row, state.layer_y)
        next_y = self.planner.next_layer_y(row, state.layer_y)
        return replace(
            state,
            phase=CratePhase.ROW_FILLING,
            layer_y=next_y,
            height=next_y,
            items=state.items + tuple(placed),
            lumber=state.lumber + tuple(lumber),
            pending_row=None,
        )


def build_one(queue: Sequence[Item], config: CrateConfig) -> Crate:
    """Build a single crate from the front of ``queue``."""
    crate, _ = CrateBuilder(config).build(queue)
    return crate
