"""Application commands (use cases) for crate packing."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from crates.domain import CrateBuilder, CrateScheduler, LumberEstimator
from crates.domain.entities import CrateConfig

from .dtos import PackingOutput
from .manifest import ManifestLine, normalize_manifest

logger = logging.getLogger(__name__)


class PackCratesCommand:
    """Command to turn a manifest into framed crate layouts."""

    def __init__(self, lumber_estimator: LumberEstimator | None = None) -> None:
        self.lumber_estimator = lumber_estimator or LumberEstimator()

    def execute(
        self,
        lines: Sequence[ManifestLine],
        config: CrateConfig,
    ) -> PackingOutput:
        """Execute the packing command.

        Args:
            lines: Manifest lines to ship.
            config: Crate configuration for the run.

        Returns:
            PackingOutput with crates, per-crate lumber estimates and any
            fit failure. Input problems are reported in ``errors``.
        """
        errors = self._validate(lines)
        if errors:
            return PackingOutput(config=config, errors=errors)

        # Fresh items per run; the scheduler never shares them
        items = normalize_manifest(lines)
        result = CrateScheduler(config).pack(items)

        estimates = {
            crate.index: self.lumber_estimator.estimate(crate.lumber)
            for crate in result.crates
        }

        if result.error is not None:
            logger.warning(result.error.message)

        return PackingOutput(
            config=config,
            items=items,
            crates=list(result.crates),
            estimates=estimates,
            fit_failure=result.error,
        )

    @staticmethod
    def _validate(lines: Sequence[ManifestLine]) -> list[str]:
        if not lines:
            return ["Manifest contains no items"]
        return []


def find_unplaceable_lines(
    lines: Sequence[ManifestLine],
    config: CrateConfig,
) -> list[ManifestLine]:
    """Return manifest lines whose units cannot fit even in an empty crate."""
    builder = CrateBuilder(config)
    unplaceable: list[ManifestLine] = []
    for line in lines:
        single = normalize_manifest([replace(line, quantity=1)])
        crate, _ = builder.build(single)
        if crate.item_count == 0:
            unplaceable.append(line)
    return unplaceable
