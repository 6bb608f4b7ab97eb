"""Configuration loading, validation and adaptation for crate packing.

Usage:
    from crates.application.config import load_config, config_to_crate_config

    config = load_config(Path("crate.json"))
    crate_config = config_to_crate_config(config)
"""

from crates.application.config.adapter import (
    config_to_crate_config,
    config_to_manifest,
    has_manifest,
)
from crates.application.config.loader import (
    ConfigError,
    load_config,
    validate_config,
)
from crates.application.config.merger import merge_config_with_cli
from crates.application.config.schema import (
    SUPPORTED_VERSIONS,
    CrateConfiguration,
    FramingConfig,
    ManifestLineConfig,
    OutputConfig,
    OutputFormat,
    PackingConfig,
    PalletConfig,
)

__all__ = [
    "ConfigError",
    "CrateConfiguration",
    "FramingConfig",
    "ManifestLineConfig",
    "OutputConfig",
    "OutputFormat",
    "PackingConfig",
    "PalletConfig",
    "SUPPORTED_VERSIONS",
    "config_to_crate_config",
    "config_to_manifest",
    "has_manifest",
    "load_config",
    "merge_config_with_cli",
    "validate_config",
]
