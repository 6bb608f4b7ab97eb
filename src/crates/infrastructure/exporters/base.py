"""Exporter protocol, format registry and the multi-format export manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from crates.application.dtos import PackingOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Writes a read-only PackingOutput in one file format.

    Attributes:
        format_name: Name the exporter is registered under.
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: PackingOutput, path: Path) -> None:
        ...

    def export_string(self, output: PackingOutput) -> str:
        """Render the output as text.

        Raises:
            NotImplementedError: For binary formats.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Format name to exporter class, filled by ``@ExporterRegistry.register``."""

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Class decorator registering an exporter under ``format_name``.

        Raises:
            ValueError: If another class already claims the name.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            existing = cls._exporters.get(format_name)
            if existing is not None and existing is not exporter_class:
                raise ValueError(
                    f"Format '{format_name}' already registered by {existing.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Look up an exporter class.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            available = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available}"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)

    @classmethod
    def partition(cls, formats: list[str]) -> tuple[list[str], list[str]]:
        """Split requested names into known and unknown formats.

        ``"all"`` expands to every registered format. Duplicates are dropped
        and request order is kept.
        """
        known: list[str] = []
        unknown: list[str] = []
        for name in formats:
            expanded = cls.available_formats() if name == "all" else [name]
            for format_name in expanded:
                target = known if format_name in cls._exporters else unknown
                if format_name not in target:
                    target.append(format_name)
        return known, unknown


class ExportManager:
    """Writes one file per format into ``output_dir``.

    Files are named ``{project_name}_{format}.{ext}``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: PackingOutput,
        project_name: str = "crate",
    ) -> dict[str, Path]:
        """Export to every format and return the written paths by format.

        All formats are resolved before anything is written, so an unknown
        name leaves the output directory untouched.

        Raises:
            KeyError: If any format is not registered.
            OSError: If a file cannot be written.
        """
        exporters = {name: ExporterRegistry.get(name)() for name in formats}
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters.items():
            path = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            logger.info("Exporting %s to %s", name, path)
            exporter.export(output, path)
            written[name] = path
        return written
