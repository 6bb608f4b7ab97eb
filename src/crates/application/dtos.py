"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from crates.domain import Crate, CrateConfig, FitFailure, Item, LumberEstimate


@dataclass
class PackingOutput:
    """Output DTO for a packing run.

    Attributes:
        config: Configuration the run used (None when input was rejected).
        items: Unit items the run was given.
        crates: Completed crates in build order.
        estimates: Lumber estimate per crate index.
        fit_failure: Set when some items could not be placed.
        errors: Input validation messages; non-empty means nothing ran.
    """

    config: CrateConfig | None
    items: list[Item] = field(default_factory=list)
    crates: list[Crate] = field(default_factory=list)
    estimates: dict[int, LumberEstimate] = field(default_factory=dict)
    fit_failure: FitFailure | None = None
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the input was accepted."""
        return len(self.errors) == 0

    @property
    def succeeded(self) -> bool:
        """Check if every item was placed."""
        return self.is_valid and self.fit_failure is None

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def placed_count(self) -> int:
        return sum(crate.item_count for crate in self.crates)

    @property
    def total_wood_usage(self) -> float:
        return round(sum(crate.wood_usage for crate in self.crates), 1)
