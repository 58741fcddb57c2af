from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .geometry import Point
    from .world import Instruction


class RoverError(ValueError):
    """Base class for rejected rover input or transitions."""


class ParseError(RoverError):
    def __init__(self, token: str, line: str, reason: str) -> None:
        self.token = token
        self.line = line
        super().__init__(f"{reason}: {token!r} in {line!r}")


class InvalidMoveError(RoverError):
    """A step would leave the plateau."""

    def __init__(self, instruction: Instruction, position: Point) -> None:
        self.instruction = instruction
        self.position = position
        super().__init__(f"Invalid move: instruction {instruction.name} would put rover at ({position.x}, {position.y})")


class WorldConfigError(RoverError):
    pass
