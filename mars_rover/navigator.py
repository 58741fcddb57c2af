from __future__ import annotations

import logging
from typing import Iterable

from .errors import InvalidMoveError
from .movement import next_orientation, next_position
from .parser import parse_instructions, parse_placement
from .world import Instruction, RoverPlacement, World, is_valid_position

logger = logging.getLogger(__name__)


def apply_instruction(world: World, placement: RoverPlacement, instruction: Instruction) -> RoverPlacement:
    orientation = next_orientation(world, placement.orientation, instruction)
    position = next_position(world.rover, placement, instruction)
    if not is_valid_position(world, position):
        logger.info("Rejected %s at (%d, %d)", instruction.name, position.x, position.y)
        raise InvalidMoveError(instruction, position)
    return RoverPlacement(position=position, orientation=orientation)


def navigate_placement(world: World, placement: RoverPlacement, instructions: Iterable[Instruction]) -> RoverPlacement:
    for step, instruction in enumerate(instructions, start=1):
        placement = apply_instruction(world, placement, instruction)
        logger.debug(
            "step %d %s -> (%d, %d) %s",
            step,
            instruction.name,
            placement.position.x,
            placement.position.y,
            placement.orientation.name,
        )
    return placement


def navigate(world: World, placement_line: str, instruction_line: str) -> RoverPlacement:
    """Parse both lines and drive the rover; the first invalid move aborts the run."""
    placement = parse_placement(placement_line)
    instructions = parse_instructions(instruction_line)
    return navigate_placement(world, placement, instructions)
