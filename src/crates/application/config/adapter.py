"""Adapters from configuration models to domain and application objects."""

from crates.application.config.schema import CrateConfiguration
from crates.application.manifest import ManifestLine
from crates.domain import CrateConfig


def config_to_crate_config(config: CrateConfiguration) -> CrateConfig:
    """Convert a configuration file model to the domain CrateConfig.

    Args:
        config: Validated configuration

    Returns:
        CrateConfig for the packing engine
    """
    pallet = config.pallet
    framing = config.framing
    return CrateConfig(
        pallet_length=pallet.length,
        pallet_width=pallet.width,
        max_height=pallet.max_height,
        max_weight=pallet.max_weight,
        safety_gap=pallet.safety_gap,
        framing_spacing=framing.spacing,
        lumber_width=framing.lumber_width,
        lumber_thick=framing.lumber_thickness,
        add_bracing=framing.add_bracing,
        allow_vertical=config.packing.allow_vertical,
    )


def config_to_manifest(config: CrateConfiguration) -> list[ManifestLine]:
    """Convert the embedded manifest to manifest lines."""
    return [
        ManifestLine(
            item_number=line.item_number,
            height=line.height,
            width=line.width,
            length=line.length,
            weight=line.weight,
            quantity=line.quantity,
        )
        for line in config.manifest
    ]


def has_manifest(config: CrateConfiguration) -> bool:
    """Check whether the configuration carries its own manifest."""
    return len(config.manifest) > 0
