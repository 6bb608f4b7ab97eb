"""Manifest ingestion: CSV parsing, demo data and unit expansion.

A manifest line describes one part number with a quantity. The packing
engine works on unit items, so every line is expanded into ``quantity``
individual ``Item`` objects before packing. Rows that cannot describe a
real item are dropped here; the engine assumes valid input.
"""

from __future__ import annotations

import csv
import io
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from crates.domain import Item

logger = logging.getLogger(__name__)

__all__ = [
    "MANIFEST_COLUMNS",
    "PALETTE_SIZE",
    "ManifestError",
    "ManifestLine",
    "demo_manifest",
    "load_manifest",
    "normalize_manifest",
    "parse_manifest_csv",
]

MANIFEST_COLUMNS: tuple[str, ...] = (
    "item_number",
    "height",
    "width",
    "length",
    "weight",
    "quantity",
)

# Number of presentation color slots; group indices wrap around it.
PALETTE_SIZE = 12


class ManifestError(Exception):
    """Raised when a manifest file cannot be read.

    Attributes:
        message: The primary error message.
        path: Path to the manifest file, if any.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


@dataclass(frozen=True)
class ManifestLine:
    """One manifest row: a part number and how many units ship."""

    item_number: str
    height: float
    width: float
    length: float
    weight: float
    quantity: int = 1

    def __post_init__(self) -> None:
        if not self.item_number:
            raise ValueError("Item number must not be empty")
        if self.height <= 0 or self.width <= 0 or self.length <= 0:
            raise ValueError(f"'{self.item_number}' dimensions must be positive")
        if self.weight <= 0:
            raise ValueError(f"'{self.item_number}' weight must be positive")
        if self.quantity < 1:
            raise ValueError(f"'{self.item_number}' quantity must be at least 1")


def _parse_positive(cell: str) -> float | None:
    try:
        value = float(cell)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value) or value <= 0:
        return None
    return value


def _parse_quantity(cell: str) -> int | None:
    """Parse a quantity cell; blank, invalid or zero means one unit.

    Returns None for a negative quantity, which drops the row.
    """
    try:
        value = float(cell)
    except ValueError:
        return 1
    if math.isnan(value) or value == 0:
        return 1
    if value < 0 or math.isinf(value):
        return None
    return math.ceil(value)


def parse_manifest_csv(text: str) -> list[ManifestLine]:
    """Parse manifest CSV text.

    The first row is a header and is skipped. Columns are item number,
    height, width, length, weight and quantity.

    Args:
        text: CSV content.

    Returns:
        Valid manifest lines in file order.
    """
    lines: list[ManifestLine] = []
    reader = csv.reader(io.StringIO(text))

    for row_number, row in enumerate(reader, start=1):
        if row_number == 1:
            continue
        cells = [cell.strip() for cell in row]
        if len(cells) < len(MANIFEST_COLUMNS) or not cells[0]:
            if any(cells):
                logger.warning("Manifest row %d: too few columns, skipped", row_number)
            continue

        height, width, length, weight = (_parse_positive(c) for c in cells[1:5])
        quantity = _parse_quantity(cells[5])
        if None in (height, width, length, weight) or quantity is None:
            logger.warning(
                "Manifest row %d (%s): invalid dimensions, weight or quantity, skipped",
                row_number,
                cells[0],
            )
            continue

        lines.append(
            ManifestLine(
                item_number=cells[0],
                height=height,  # type: ignore[arg-type]
                width=width,  # type: ignore[arg-type]
                length=length,  # type: ignore[arg-type]
                weight=weight,  # type: ignore[arg-type]
                quantity=quantity,
            )
        )

    logger.debug("Parsed %d manifest lines", len(lines))
    return lines


def load_manifest(path: Path) -> list[ManifestLine]:
    """Read and parse a manifest CSV file.

    Raises:
        ManifestError: If the file is missing or unreadable.
    """
    if not path.exists():
        raise ManifestError(f"Manifest file not found: {path}", path=path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except OSError as e:
        raise ManifestError(f"Error reading manifest file: {path}: {e}", path=path)
    return parse_manifest_csv(content)


def demo_manifest() -> list[ManifestLine]:
    """Sample manifest mixing long pipe, short posts and bulky parts."""
    return [
        ManifestLine("PIPE-240-HVY", height=4.5, width=4.5, length=240, weight=180, quantity=4),
        ManifestLine("PIPE-120-STD", height=4, width=4, length=120, weight=80, quantity=6),
        ManifestLine("SHORT-POST-60", height=4, width=4, length=60, weight=45, quantity=15),
        ManifestLine("CURVED-96", height=8, width=12, length=96, weight=65, quantity=2),
    ]


def normalize_manifest(lines: Iterable[ManifestLine]) -> list[Item]:
    """Expand manifest lines into unit items.

    Units are numbered per item number across the whole manifest, so a
    part listed on two lines still gets unique uids.

    Args:
        lines: Manifest lines.

    Returns:
        One Item per unit, in manifest order.
    """
    items: list[Item] = []
    counters: dict[str, int] = {}

    for line_index, line in enumerate(lines):
        for _ in range(line.quantity):
            n = counters.get(line.item_number, 0)
            counters[line.item_number] = n + 1
            items.append(
                Item(
                    item_number=line.item_number,
                    height=line.height,
                    width=line.width,
                    length=line.length,
                    weight=line.weight,
                    uid=f"{line.item_number}-{n}",
                    group_index=line_index % PALETTE_SIZE,
                )
            )

    return items
