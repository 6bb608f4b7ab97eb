"""Infrastructure layer - formatters and file exporters."""

from .exporters import (
    CrateJsonExporter,
    ExporterRegistry,
    ExportManager,
    LumberBomExporter,
    StlLayoutExporter,
)
from .formatters import CrateSummaryFormatter, LumberListFormatter, PlacementFormatter
from .stl_exporter import StlExporter, StlMeshBuilder

__all__ = [
    "CrateJsonExporter",
    "CrateSummaryFormatter",
    "ExportManager",
    "ExporterRegistry",
    "LumberBomExporter",
    "LumberListFormatter",
    "PlacementFormatter",
    "StlExporter",
    "StlLayoutExporter",
    "StlMeshBuilder",
]
