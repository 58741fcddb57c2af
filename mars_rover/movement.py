from __future__ import annotations

from .geometry import Point
from .world import Instruction, Orientation, RoverConfiguration, RoverPlacement, World


def next_orientation(world: World, orientation: Orientation, instruction: Instruction) -> Orientation:
    cycle = world.orientations
    delta = world.rover.orient_deltas[instruction]
    return cycle[(cycle.index(orientation) + delta + len(cycle)) % len(cycle)]


def next_position(rover: RoverConfiguration, placement: RoverPlacement, instruction: Instruction) -> Point:
    if instruction is Instruction.FORWARD:
        return placement.position + rover.forward_deltas[placement.orientation]
    return placement.position
