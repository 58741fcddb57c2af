from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from .geometry import Point


class Orientation(Enum):
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"


class Instruction(Enum):
    LEFT = "L"
    RIGHT = "R"
    FORWARD = "M"


ORIENTATION_CYCLE: Tuple[Orientation, ...] = (
    Orientation.NORTH,
    Orientation.EAST,
    Orientation.SOUTH,
    Orientation.WEST,
)

FORWARD_DELTAS: Mapping[Orientation, Point] = MappingProxyType(
    {
        Orientation.NORTH: Point(0, 1),
        Orientation.EAST: Point(1, 0),
        Orientation.SOUTH: Point(0, -1),
        Orientation.WEST: Point(-1, 0),
    }
)

ORIENT_DELTAS: Mapping[Instruction, int] = MappingProxyType(
    {
        Instruction.LEFT: -1,
        Instruction.RIGHT: 1,
        Instruction.FORWARD: 0,
    }
)


@dataclass(frozen=True)
class RoverConfiguration:
    """Rover physics: unit step per orientation and cycle shift per instruction."""

    forward_deltas: Mapping[Orientation, Point] = field(default_factory=lambda: FORWARD_DELTAS)
    orient_deltas: Mapping[Instruction, int] = field(default_factory=lambda: ORIENT_DELTAS)

    def __post_init__(self) -> None:
        missing = [o.name for o in Orientation if o not in self.forward_deltas]
        if missing:
            raise ValueError(f"Missing forward delta for: {', '.join(missing)}")
        missing = [i.name for i in Instruction if i not in self.orient_deltas]
        if missing:
            raise ValueError(f"Missing orient delta for: {', '.join(missing)}")
        object.__setattr__(self, "forward_deltas", MappingProxyType(dict(self.forward_deltas)))
        object.__setattr__(self, "orient_deltas", MappingProxyType(dict(self.orient_deltas)))

    @staticmethod
    def default() -> "RoverConfiguration":
        return RoverConfiguration()


@dataclass(frozen=True)
class RoverPlacement:
    position: Point
    orientation: Orientation

    def report_lines(self) -> Tuple[str, str, str]:
        return str(self.position.x), str(self.position.y), self.orientation.name


@dataclass(frozen=True)
class World:
    """Rectangular plateau from (0, 0) to ``edge`` inclusive, plus the rover physics."""

    edge: Point
    rover: RoverConfiguration = field(default_factory=RoverConfiguration)
    orientations: Tuple[Orientation, ...] = ORIENTATION_CYCLE

    def __post_init__(self) -> None:
        if self.edge.x < 0 or self.edge.y < 0:
            raise ValueError("Plateau edge must not be negative.")
        orientations = tuple(self.orientations)
        if len(orientations) != len(Orientation) or set(orientations) != set(Orientation):
            raise ValueError("Orientation cycle must list every orientation exactly once.")
        object.__setattr__(self, "orientations", orientations)

    @staticmethod
    def mars(
        width: int = 5,
        height: int = 5,
        rover: RoverConfiguration | None = None,
        orientations: Iterable[Orientation] | None = None,
    ) -> "World":
        return World(
            edge=Point(width, height),
            rover=rover or RoverConfiguration.default(),
            orientations=tuple(orientations) if orientations is not None else ORIENTATION_CYCLE,
        )

    def contains(self, point: Point) -> bool:
        return is_valid_position(self, point)


def is_valid_position(world: World, point: Point) -> bool:
    return 0 <= point.x <= world.edge.x and 0 <= point.y <= world.edge.y
