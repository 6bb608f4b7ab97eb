"""JSON exporter for crate layouts.

The document carries the configuration used, every crate with its placed
items and lumber, per-crate lumber estimates and any fit failure. Box
lumber is written with dims and center; braces with start, end and
cross-section.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from crates.domain import BoxLumber, Crate, LumberPiece, Vector3
from crates.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from crates.application.dtos import PackingOutput


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def _vec(v: Vector3) -> dict[str, float]:
    return {"x": v.x, "y": v.y, "z": v.z}


@ExporterRegistry.register("json")
class CrateJsonExporter:
    """Exports packing output as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_lumber: bool = True, indent: int = 2) -> None:
        """Initialize the exporter.

        Args:
            include_lumber: Whether to include the full lumber list per crate.
            indent: JSON indentation level.
        """
        self.include_lumber = include_lumber
        self.indent = indent

    def export(self, output: PackingOutput, path: Path) -> None:
        path.write_text(self.export_string(output))
        logger.info("Exported JSON to %s", path)

    def export_string(self, output: PackingOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self.indent)

    def to_dict(self, output: PackingOutput) -> dict[str, Any]:
        """Build the JSON-ready structure."""
        failure = output.fit_failure
        return {
            "schema_version": SCHEMA_VERSION,
            "config": asdict(output.config) if output.config else None,
            "errors": list(output.errors),
            "item_count": output.item_count,
            "placed_count": output.placed_count,
            "crates": [self._crate(crate, output) for crate in output.crates],
            "fit_failure": (
                {
                    "message": failure.message,
                    "unplaced": list(failure.unplaced_uids),
                    "crates_completed": failure.crates_completed,
                }
                if failure
                else None
            ),
        }

    def _crate(self, crate: Crate, output: PackingOutput) -> dict[str, Any]:
        data: dict[str, Any] = {
            "index": crate.index,
            "total_weight": crate.total_weight,
            "height": crate.height,
            "wood_usage_ft": crate.wood_usage,
            "items": [
                {
                    "uid": placed.item.uid,
                    "item_number": placed.item.item_number,
                    "height": placed.item.height,
                    "width": placed.item.width,
                    "length": placed.item.length,
                    "weight": placed.item.weight,
                    "group_index": placed.item.group_index,
                    "orientation": placed.orientation.value,
                    "dims": _vec(placed.dims),
                    "position": _vec(placed.position),
                }
                for placed in crate.items
            ],
        }

        estimate = output.estimates.get(crate.index)
        if estimate is not None:
            data["lumber_estimate"] = {
                "linear_feet": estimate.linear_feet,
                "stock_count": estimate.stock_count,
                "stock_length_ft": estimate.stock_length_ft,
                "piece_counts": {t.value: n for t, n in estimate.piece_counts.items()},
                "feet_by_type": {t.value: ft for t, ft in estimate.feet_by_type.items()},
            }

        if self.include_lumber:
            data["lumber"] = [self._lumber(piece) for piece in crate.lumber]
        return data

    @staticmethod
    def _lumber(piece: LumberPiece) -> dict[str, Any]:
        if isinstance(piece, BoxLumber):
            return {
                "type": piece.lumber_type.value,
                "dims": _vec(piece.dims),
                "position": _vec(piece.position),
            }
        return {
            "type": piece.lumber_type.value,
            "start": _vec(piece.start),
            "end": _vec(piece.end),
            "section": {"width": piece.section_width, "thickness": piece.section_thick},
        }
