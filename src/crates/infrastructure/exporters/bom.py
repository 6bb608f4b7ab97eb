"""Lumber bill of materials exporter.

One CSV row per crate and lumber type with piece count and linear feet,
followed by a totals row per type and the stock board estimate.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from crates.domain import LumberEstimator, LumberType
from crates.infrastructure.exporters.base import ExporterRegistry
from crates.infrastructure.formatters import LUMBER_TYPE_ORDER

if TYPE_CHECKING:
    from crates.application.dtos import PackingOutput


logger = logging.getLogger(__name__)


@ExporterRegistry.register("bom")
class LumberBomExporter:
    """Exports the framing lumber bill as CSV.

    Attributes:
        format_name: "bom"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "bom"
    file_extension: ClassVar[str] = "csv"

    def __init__(self, estimator: LumberEstimator | None = None) -> None:
        self.estimator = estimator or LumberEstimator()

    def export(self, output: PackingOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info("Exported lumber BOM to %s", path)

    def export_string(self, output: PackingOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Crate", "Type", "Count", "Linear Feet"])

        total_counts: dict[LumberType, int] = {}
        total_feet: dict[LumberType, float] = {}

        for crate in output.crates:
            estimate = output.estimates.get(crate.index) or self.estimator.estimate(
                crate.lumber
            )
            for lumber_type in LUMBER_TYPE_ORDER:
                count = estimate.piece_counts.get(lumber_type, 0)
                if count == 0:
                    continue
                feet = estimate.feet_by_type.get(lumber_type, 0.0)
                writer.writerow([crate.index, lumber_type.value, count, f"{feet:.1f}"])
                total_counts[lumber_type] = total_counts.get(lumber_type, 0) + count
                total_feet[lumber_type] = total_feet.get(lumber_type, 0.0) + feet

        for lumber_type in LUMBER_TYPE_ORDER:
            if lumber_type in total_counts:
                writer.writerow(
                    [
                        "TOTAL",
                        lumber_type.value,
                        total_counts[lumber_type],
                        f"{total_feet[lumber_type]:.1f}",
                    ]
                )

        all_lumber = [piece for crate in output.crates for piece in crate.lumber]
        overall = self.estimator.estimate(all_lumber)
        writer.writerow(
            [
                "STOCK",
                f"{overall.stock_length_ft:g} ft boards",
                overall.stock_count,
                f"{overall.linear_feet:.1f}",
            ]
        )
        return buffer.getvalue()
