"""Exporter framework for crate packing output.

Registered exporters:
- bom: CSV lumber bill per crate and lumber type
- json: Full layout with items, lumber geometry and estimates
- stl: 3D mesh of every crate, items and framing

Usage:
    manager = ExportManager(output_dir=Path("./output"))
    files = manager.export_all(["json", "stl"], packing_output, project_name="load-42")
"""

from crates.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from crates.infrastructure.exporters.bom import LumberBomExporter
from crates.infrastructure.exporters.crate_json import CrateJsonExporter
from crates.infrastructure.exporters.stl import StlLayoutExporter

__all__ = [
    "CrateJsonExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "LumberBomExporter",
    "StlLayoutExporter",
]
