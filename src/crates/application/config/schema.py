"""Pydantic models for crate configuration files.

A configuration file describes the pallet, the framing stock, packing
options and, optionally, the manifest itself:

    {
        "schema_version": "1.0",
        "pallet": {"length": 250, "width": 84, "max_height": 80,
                   "max_weight": 2500, "safety_gap": 1.0},
        "framing": {"spacing": 48, "lumber_width": 3.5,
                    "lumber_thickness": 1.5, "add_bracing": true},
        "packing": {"allow_vertical": true},
        "manifest": [{"item_number": "PIPE-240", "height": 4.5, "width": 4.5,
                      "length": 240, "weight": 180, "quantity": 4}],
        "output": {"format": "summary"}
    }
"""

from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from crates.domain.entities import MIN_FRAMING_SPACING

# Supported schema versions for configuration files
# Version 1.0: Initial schema with pallet, framing, packing and manifest
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Console output format.

    - SUMMARY: per-crate weight, height and lumber totals
    - LUMBER: per-crate lumber list by type
    - PLACEMENTS: every placed item with orientation and position
    - JSON: machine-readable document
    - ALL: summary, lumber and placements together
    """

    SUMMARY = "summary"
    LUMBER = "lumber"
    PLACEMENTS = "placements"
    JSON = "json"
    ALL = "all"


class PalletConfig(BaseModel):
    """Pallet size and load limits, in inches and pounds.

    Attributes:
        length: Pallet length along the items.
        width: Pallet width across rows.
        max_height: Maximum stacked height including base runners.
        max_weight: Maximum payload per crate.
        safety_gap: Clearance kept free at every pallet edge.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(default=250.0, gt=0, description="Pallet length in inches")
    width: float = Field(default=84.0, gt=0, description="Pallet width in inches")
    max_height: float = Field(default=80.0, gt=0, description="Maximum height in inches")
    max_weight: float = Field(default=2500.0, gt=0, description="Maximum weight in pounds")
    safety_gap: float = Field(default=1.0, ge=0, description="Edge clearance in inches")

    @model_validator(mode="after")
    def validate_safety_gap(self) -> "PalletConfig":
        """Ensure the safety gap leaves a packable footprint."""
        if 2 * self.safety_gap >= min(self.length, self.width):
            raise ValueError("safety_gap leaves no packable area on the pallet")
        return self


class FramingConfig(BaseModel):
    """Framing stock and cradle layout.

    Attributes:
        spacing: Distance between cradle points along an item.
        lumber_width: Wide face of the stock (3.5 for a 2x4).
        lumber_thickness: Narrow face of the stock (1.5 for a 2x4).
        add_bracing: Add diagonal braces between cradle points.
    """

    model_config = ConfigDict(extra="forbid")

    spacing: float = Field(
        default=48.0, ge=0, allow_inf_nan=False, description="Cradle spacing in inches"
    )
    lumber_width: float = Field(default=3.5, gt=0, le=12.0)
    lumber_thickness: float = Field(default=1.5, gt=0, le=12.0)
    add_bracing: bool = Field(default=True, description="Add diagonal bracing")

    @field_validator("spacing")
    @classmethod
    def validate_spacing(cls, v: float) -> float:
        """Reject spacings too small to frame, keeping 0 for end points only."""
        if 0 < v < MIN_FRAMING_SPACING:
            raise ValueError(
                f"spacing must be 0 or at least {MIN_FRAMING_SPACING:g} inches"
            )
        return v


class PackingConfig(BaseModel):
    """Packing behaviour options."""

    model_config = ConfigDict(extra="forbid")

    allow_vertical: bool = Field(
        default=True,
        description="Stand short items on end in the base layer",
    )


class ManifestLineConfig(BaseModel):
    """One manifest entry inside a configuration file."""

    model_config = ConfigDict(extra="forbid")

    item_number: str = Field(..., min_length=1)
    height: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    length: float = Field(..., gt=0)
    weight: float = Field(..., gt=0)
    quantity: int = Field(default=1, ge=1, le=10000)


class OutputConfig(BaseModel):
    """Output options.

    Attributes:
        format: Console output format.
        formats: File export formats (e.g. ["json", "stl"]).
        output_dir: Directory for exported files.
        project_name: Base name for exported files.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.SUMMARY
    formats: list[str] = Field(default_factory=list)
    output_dir: str | None = None
    project_name: str = Field(default="crate", min_length=1)

    @field_validator("formats")
    @classmethod
    def normalize_formats(cls, v: list[str]) -> list[str]:
        """Lower-case and strip export format names."""
        return [f.strip().lower() for f in v if f.strip()]


class CrateConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Configuration schema version.
        pallet: Pallet size and limits.
        framing: Framing stock and layout.
        packing: Packing options.
        manifest: Items to ship (may instead come from a CSV file).
        output: Output options.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    pallet: PalletConfig = Field(default_factory=PalletConfig)
    framing: FramingConfig = Field(default_factory=FramingConfig)
    packing: PackingConfig = Field(default_factory=PackingConfig)
    manifest: list[ManifestLineConfig] = Field(default_factory=list)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported versions: {supported}"
            )
        return v
