"""STL format exporter for crate layouts."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from crates.infrastructure.exporters.base import ExporterRegistry
from crates.infrastructure.stl_exporter import StlExporter as StlExporterImpl
from crates.infrastructure.stl_exporter import StlMeshBuilder

if TYPE_CHECKING:
    from crates.application.dtos import PackingOutput


@ExporterRegistry.register("stl")
class StlLayoutExporter:
    """Exports crate layouts to STL for 3D viewing.

    Wraps StlExporter to conform to the Exporter protocol.

    Attributes:
        format_name: "stl"
        file_extension: "stl"
    """

    format_name: ClassVar[str] = "stl"
    file_extension: ClassVar[str] = "stl"

    def __init__(
        self,
        mesh_builder: StlMeshBuilder | None = None,
        include_items: bool = True,
    ) -> None:
        self._exporter = StlExporterImpl(
            mesh_builder=mesh_builder, include_items=include_items
        )

    def export(self, output: PackingOutput, path: Path) -> None:
        """Export every crate to one STL file.

        Raises:
            ValueError: If the output has no crates.
        """
        if output.config is None or not output.crates:
            raise ValueError("No crates to export")
        self._exporter.export_to_file(
            output.crates, output.config.pallet_width, filepath=path
        )

    def export_string(self, output: PackingOutput) -> str:
        """STL is written as binary and has no string form."""
        raise NotImplementedError("Format 'stl' does not support string export")
