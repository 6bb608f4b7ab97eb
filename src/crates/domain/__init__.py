"""Domain layer - crate packing entities, value objects and services."""

from .entities import (
    BoxLumber,
    Crate,
    CrateConfig,
    DiagonalLumber,
    Item,
    LumberPiece,
    PackingResult,
    PlacedItem,
)
from .services import (
    CrateBuilder,
    CrateScheduler,
    FramingGenerator,
    LumberEstimate,
    LumberEstimator,
    RowPlanner,
    build_one,
    pack,
)
from .value_objects import FitFailure, LumberType, Orientation, Vector3

__all__ = [
    # Entities
    "BoxLumber",
    "Crate",
    "CrateConfig",
    "DiagonalLumber",
    "Item",
    "LumberPiece",
    "PackingResult",
    "PlacedItem",
    # Value objects
    "FitFailure",
    "LumberType",
    "Orientation",
    "Vector3",
    # Services
    "CrateBuilder",
    "CrateScheduler",
    "FramingGenerator",
    "LumberEstimate",
    "LumberEstimator",
    "RowPlanner",
    "build_one",
    "pack",
]
