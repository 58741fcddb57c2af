from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return point_sum(self, other)


def point_sum(a: Point, b: Point) -> Point:
    return Point(a.x + b.x, a.y + b.y)
