"""Application layer - use cases and orchestration."""

from .commands import PackCratesCommand, find_unplaceable_lines
from .dtos import PackingOutput
from .manifest import (
    ManifestError,
    ManifestLine,
    demo_manifest,
    load_manifest,
    normalize_manifest,
    parse_manifest_csv,
)

__all__ = [
    "ManifestError",
    "ManifestLine",
    "PackCratesCommand",
    "PackingOutput",
    "demo_manifest",
    "find_unplaceable_lines",
    "load_manifest",
    "normalize_manifest",
    "parse_manifest_csv",
]
