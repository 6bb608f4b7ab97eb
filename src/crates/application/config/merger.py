"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from crates.application.config.loader import validate_config
from crates.application.config.schema import CrateConfiguration


def merge_config_with_cli(
    config: CrateConfiguration,
    *,
    pallet_length: float | None = None,
    pallet_width: float | None = None,
    max_height: float | None = None,
    max_weight: float | None = None,
    safety_gap: float | None = None,
    framing_spacing: float | None = None,
    add_bracing: bool | None = None,
    allow_vertical: bool | None = None,
    output_format: str | None = None,
) -> CrateConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration
        pallet_length: Override for pallet.length
        pallet_width: Override for pallet.width
        max_height: Override for pallet.max_height
        max_weight: Override for pallet.max_weight
        safety_gap: Override for pallet.safety_gap
        framing_spacing: Override for framing.spacing
        add_bracing: Override for framing.add_bracing
        allow_vertical: Override for packing.allow_vertical
        output_format: Override for output.format

    Returns:
        A new, re-validated CrateConfiguration

    Raises:
        ConfigError: If an override produces an invalid configuration.

    Example:
        >>> merged = merge_config_with_cli(CrateConfiguration(), max_weight=1800)
        >>> merged.pallet.max_weight
        1800.0
    """
    data = config.model_dump(mode="json")

    _override(data["pallet"], "length", pallet_length)
    _override(data["pallet"], "width", pallet_width)
    _override(data["pallet"], "max_height", max_height)
    _override(data["pallet"], "max_weight", max_weight)
    _override(data["pallet"], "safety_gap", safety_gap)
    _override(data["framing"], "spacing", framing_spacing)
    _override(data["framing"], "add_bracing", add_bracing)
    _override(data["packing"], "allow_vertical", allow_vertical)
    _override(data["output"], "format", output_format)

    return validate_config(data)


def _override(section: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        section[key] = value
