"""Console formatters for packing output."""

from __future__ import annotations

from crates.application.dtos import PackingOutput
from crates.domain import Crate, LumberType

# Display order for lumber types
LUMBER_TYPE_ORDER: tuple[LumberType, ...] = (
    LumberType.BASE_RUNNER,
    LumberType.POST,
    LumberType.RUNG,
    LumberType.RAIL,
    LumberType.DIAGONAL,
)


def _format_fit_failure(output: PackingOutput) -> list[str]:
    failure = output.fit_failure
    if failure is None:
        return []
    shown = ", ".join(failure.unplaced_uids[:10])
    more = failure.unplaced_count - 10
    if more > 0:
        shown += f", ... ({more} more)"
    return [
        "",
        f"FIT FAILURE: {failure.message}",
        f"  Unplaced: {shown}",
    ]


class CrateSummaryFormatter:
    """Formats per-crate totals as a table."""

    def format(self, output: PackingOutput) -> str:
        """Format a crate summary table."""
        if not output.is_valid:
            return "\n".join(["Errors:"] + [f"  - {e}" for e in output.errors])

        if not output.crates and output.fit_failure is None:
            return "No crates built."

        max_weight = output.config.max_weight if output.config else 0.0
        lines = [
            "CRATE SUMMARY",
            "=" * 70,
            f"{'Crate':<8} {'Items':<8} {'Weight (lb)':<20} {'Height (in)':<14} {'Lumber (ft)'}",
            "-" * 70,
        ]

        for crate in output.crates:
            weight = f"{crate.total_weight:.1f} / {max_weight:.0f}"
            lines.append(
                f"{crate.index:<8} {crate.item_count:<8} {weight:<20} "
                f"{crate.height:<14.2f} {crate.wood_usage:.1f}"
            )

        lines.append("-" * 70)
        total_weight = sum(c.total_weight for c in output.crates)
        lines.append(
            f"{'TOTAL':<8} {output.placed_count:<8} {total_weight:<20.1f} "
            f"{'':<14} {output.total_wood_usage:.1f}"
        )
        lines.append(f"Placed {output.placed_count} of {output.item_count} items")
        lines.extend(_format_fit_failure(output))

        return "\n".join(lines)


class LumberListFormatter:
    """Formats framing lumber per crate, grouped by type."""

    def format(self, output: PackingOutput) -> str:
        """Format the lumber list for every crate."""
        if not output.crates:
            return "No lumber required."

        lines = ["LUMBER LIST", "=" * 50]
        for crate in output.crates:
            estimate = output.estimates.get(crate.index)
            lines.append(f"Crate {crate.index}")
            lines.append(f"  {'Type':<14} {'Count':<8} {'Linear ft'}")
            lines.append("  " + "-" * 34)
            if estimate is None:
                continue
            for lumber_type in LUMBER_TYPE_ORDER:
                count = estimate.piece_counts.get(lumber_type, 0)
                if count == 0:
                    continue
                feet = estimate.feet_by_type.get(lumber_type, 0.0)
                lines.append(f"  {lumber_type.value:<14} {count:<8} {feet:.1f}")
            lines.append(f"  {estimate.description}")
            lines.append("")

        return "\n".join(lines).rstrip()


class PlacementFormatter:
    """Lists every placed item with orientation and center position."""

    def format(self, output: PackingOutput) -> str:
        if not output.crates:
            return "No items placed."

        lines = ["PLACEMENTS", "=" * 78]
        for crate in output.crates:
            lines.extend(self._format_crate(crate))
        return "\n".join(lines)

    def _format_crate(self, crate: Crate) -> list[str]:
        lines = [
            f"Crate {crate.index}",
            f"  {'Item':<20} {'Orient':<10} {'Dims (x y z)':<22} {'Center (x y z)'}",
            "  " + "-" * 74,
        ]
        for placed in crate.items:
            d = placed.dims
            p = placed.position
            dims = f"{d.x:g} x {d.y:g} x {d.z:g}"
            lines.append(
                f"  {placed.item.uid:<20} {placed.orientation.value:<10} {dims:<22} "
                f"{p.x:.2f}, {p.y:.2f}, {p.z:.2f}"
            )
        return lines
