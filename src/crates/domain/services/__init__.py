"""Domain services for crate packing and framing."""

from .crate_builder import CrateBuilder, CratePhase, CrateState, build_one
from .framing import BASE_RUNNER_OFFSETS, FramingGenerator
from .lumber import create_brace, create_lumber
from .material_estimator import LumberEstimate, LumberEstimator, wood_usage_feet
from .row_planner import (
    STANDING_CLEARANCE,
    VERTICAL_LENGTH_LIMIT,
    PlannedRow,
    RowEntry,
    RowPlanner,
    resolve_orientation,
)
from .scheduler import SORT_LENGTH_TOLERANCE, CrateScheduler, pack, sort_queue

__all__ = [
    "BASE_RUNNER_OFFSETS",
    "CrateBuilder",
    "CratePhase",
    "CrateScheduler",
    "CrateState",
    "FramingGenerator",
    "LumberEstimate",
    "LumberEstimator",
    "PlannedRow",
    "RowEntry",
    "RowPlanner",
    "SORT_LENGTH_TOLERANCE",
    "STANDING_CLEARANCE",
    "VERTICAL_LENGTH_LIMIT",
    "build_one",
    "create_brace",
    "create_lumber",
    "pack",
    "resolve_orientation",
    "sort_queue",
    "wood_usage_feet",
]
