"""Tests for the exporter framework (base.py)."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

import pytest

from crates.application import PackingOutput
from crates.infrastructure.exporters import (
    CrateJsonExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    LumberBomExporter,
    StlLayoutExporter,
)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def setup_method(self) -> None:
        """Store original exporters before each test."""
        self._original_exporters = ExporterRegistry._exporters.copy()

    def teardown_method(self) -> None:
        """Restore original exporters after each test."""
        ExporterRegistry._exporters = self._original_exporters

    def test_builtin_exporters_registered(self) -> None:
        assert ExporterRegistry.get("json") is CrateJsonExporter
        assert ExporterRegistry.get("stl") is StlLayoutExporter
        assert ExporterRegistry.get("bom") is LumberBomExporter
        assert ExporterRegistry.available_formats() == ["bom", "json", "stl"]

    def test_get_unknown_format_raises_key_error(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("dxf")
        assert "No exporter registered for format 'dxf'" in str(exc_info.value)

    def test_register_new_exporter(self) -> None:
        @ExporterRegistry.register("test_format")
        class TestExporter:
            format_name: ClassVar[str] = "test_format"
            file_extension: ClassVar[str] = "test"

            def export(self, output, path: Path) -> None:
                pass

        assert "test_format" in ExporterRegistry.available_formats()
        assert ExporterRegistry.get("test_format") is TestExporter

    def test_name_clash_rejected(self) -> None:
        with pytest.raises(ValueError, match="already registered"):

            @ExporterRegistry.register("json")
            class OtherJson:
                format_name: ClassVar[str] = "json"
                file_extension: ClassVar[str] = "json"

    def test_partition_expands_all(self) -> None:
        assert ExporterRegistry.partition(["all"]) == (["bom", "json", "stl"], [])

    def test_partition_reports_unknown(self) -> None:
        known, unknown = ExporterRegistry.partition(["stl", "dxf", "stl", "svg"])
        assert known == ["stl"]
        assert unknown == ["dxf", "svg"]

    def test_exporters_satisfy_protocol(self) -> None:
        for name in ("json", "stl", "bom"):
            assert isinstance(ExporterRegistry.get(name)(), Exporter)


class TestExportManager:
    def test_export_all_names_files(self, tmp_path: Path, demo_output: PackingOutput) -> None:
        manager = ExportManager(tmp_path / "out")
        files = manager.export_all(["json", "bom", "stl"], demo_output, "load-42")

        assert files == {
            "json": tmp_path / "out" / "load-42_json.json",
            "bom": tmp_path / "out" / "load-42_bom.csv",
            "stl": tmp_path / "out" / "load-42_stl.stl",
        }
        assert all(path.exists() for path in files.values())

    def test_default_project_name(self, tmp_path: Path, demo_output: PackingOutput) -> None:
        files = ExportManager(tmp_path).export_all(["json"], demo_output)
        assert files == {"json": tmp_path / "crate_json.json"}

    def test_unknown_format(self, tmp_path: Path, demo_output: PackingOutput) -> None:
        with pytest.raises(KeyError):
            ExportManager(tmp_path / "out").export_all(["json", "svg"], demo_output)
        assert not (tmp_path / "out").exists()
