"""Mars rover plateau simulation: parse a placement and instructions, then drive the rover."""

from .errors import InvalidMoveError, ParseError, RoverError, WorldConfigError
from .geometry import Point, point_sum
from .library import MarsRoverLibrary, MissionSummary, RoverOutcome
from .movement import next_orientation, next_position
from .navigator import apply_instruction, navigate, navigate_placement
from .parser import parse_instructions, parse_placement
from .validate import world_from_document
from .world import (
    ORIENTATION_CYCLE,
    Instruction,
    Orientation,
    RoverConfiguration,
    RoverPlacement,
    World,
    is_valid_position,
)

__all__ = [
    "InvalidMoveError",
    "ParseError",
    "RoverError",
    "WorldConfigError",
    "Point",
    "point_sum",
    "MarsRoverLibrary",
    "MissionSummary",
    "RoverOutcome",
    "next_orientation",
    "next_position",
    "apply_instruction",
    "navigate",
    "navigate_placement",
    "parse_instructions",
    "parse_placement",
    "world_from_document",
    "ORIENTATION_CYCLE",
    "Instruction",
    "Orientation",
    "RoverConfiguration",
    "RoverPlacement",
    "World",
    "is_valid_position",
]
