"""Multi-crate scheduling.

Seeds one queue ordered by length (heaviest first among near-equal
lengths) and builds crates from it until every item is placed. A pass
that places nothing ends the run with a ``FitFailure``; every other pass
strictly shrinks the queue, so a run makes at most one pass per item.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Sequence

from ..entities import Crate, CrateConfig, Item, PackingResult
from ..value_objects import FitFailure
from .crate_builder import CrateBuilder

logger = logging.getLogger(__name__)

__all__ = ["CrateScheduler", "SORT_LENGTH_TOLERANCE", "pack", "sort_queue"]

# Lengths closer than this are treated as equal and ordered by weight.
SORT_LENGTH_TOLERANCE = 5.0


def _compare_items(a: Item, b: Item) -> float:
    if abs(b.length - a.length) > SORT_LENGTH_TOLERANCE:
        return b.length - a.length
    return b.weight - a.weight


def sort_queue(items: Sequence[Item]) -> list[Item]:
    """Order items longest first, heaviest first within the length tolerance.

    The comparison is applied pairwise with a stable sort, so the result
    depends only on the input order and is fully deterministic.
    """
    return sorted(items, key=cmp_to_key(_compare_items))


class CrateScheduler:
    """Builds as many crates as needed for an item set.

    Attributes:
        config: Crate configuration.
        builder: Builder used for every crate.
    """

    def __init__(self, config: CrateConfig, builder: CrateBuilder | None = None) -> None:
        self.config = config
        self.builder = builder or CrateBuilder(config)

    def pack(self, items: Sequence[Item]) -> PackingResult:
        """Pack every item into crates.

        Args:
            items: Unit items. Never modified; the scheduler works on its
                own queue.

        Returns:
            PackingResult with completed crates, plus a FitFailure when a
            pass could not place any remaining item.

        Raises:
            ValueError: If two items share a uid.
        """
        self._check_unique(items)
        if not items:
            return PackingResult(crates=())

        remaining = tuple(sort_queue(items))
        crates: list[Crate] = []

        logger.info("Packing %d items", len(remaining))

        while remaining:
            crate, leftover = self.builder.build(remaining, index=len(crates) + 1)

            if len(leftover) == len(remaining):
                failure = FitFailure(
                    message=(
                        f"{len(remaining)} item(s) could not be placed in an empty "
                        "crate. Check max dimensions and weight limits."
                    ),
                    unplaced_uids=tuple(item.uid for item in remaining),
                    crates_completed=len(crates),
                )
                logger.warning(
                    "Fit failure after %d crate(s): %d item(s) unplaced",
                    len(crates),
                    len(remaining),
                )
                return PackingResult(crates=tuple(crates), error=failure)

            crates.append(crate)
            remaining = leftover
            logger.info(
                "Crate %d holds %d items; %d remaining",
                crate.index,
                crate.item_count,
                len(remaining),
            )

        return PackingResult(crates=tuple(crates))

    @staticmethod
    def _check_unique(items: Sequence[Item]) -> None:
        seen: set[str] = set()
        for item in items:
            if item.uid in seen:
                raise ValueError(f"Duplicate item uid '{item.uid}'")
            seen.add(item.uid)


def pack(items: Sequence[Item], config: CrateConfig) -> PackingResult:
    """Pack ``items`` into crates under ``config``."""
    return CrateScheduler(config).pack(items)
