"""Text parsing for placement and instruction lines.

A placement line is ``"<x> <y> <orientation>"`` (for example ``"1 2 N"``); an
instruction line is a run of ``L``, ``R`` and ``M`` characters.
"""

from __future__ import annotations

import re
from typing import Tuple

from .errors import ParseError
from .geometry import Point
from .world import Instruction, Orientation, RoverPlacement

ORIENTATION_CODES = {o.value: o for o in Orientation}
INSTRUCTION_CODES = {i.value: i for i in Instruction}
COORDINATE_RE = re.compile(r"[+-]?[0-9]+")


def _parse_coordinate(token: str, line: str) -> int:
    if not COORDINATE_RE.fullmatch(token):
        raise ParseError(token, line, "Coordinate is not an integer")
    return int(token)


def parse_placement(line: str) -> RoverPlacement:
    tokens = line.split()
    if len(tokens) != 3:
        raise ParseError(line, line, f"Expected 3 tokens, got {len(tokens)}")
    x_token, y_token, code = tokens
    position = Point(_parse_coordinate(x_token, line), _parse_coordinate(y_token, line))
    orientation = ORIENTATION_CODES.get(code)
    if orientation is None:
        raise ParseError(code, line, "Unknown orientation code")
    return RoverPlacement(position=position, orientation=orientation)


def parse_instructions(line: str) -> Tuple[Instruction, ...]:
    stripped = line.strip()
    instructions = []
    for index, char in enumerate(stripped):
        instruction = INSTRUCTION_CODES.get(char)
        if instruction is None:
            raise ParseError(char, line, f"Unknown instruction at index {index}")
        instructions.append(instruction)
    return tuple(instructions)
