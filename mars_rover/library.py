from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .errors import RoverError
from .navigator import navigate
from .world import RoverPlacement, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoverOutcome:
    index: int
    placement: RoverPlacement | None = None
    error: RoverError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class MissionSummary:
    rovers: int
    succeeded: int
    failed: int


class MarsRoverLibrary:
    """Factory + orchestration API for driving independent rovers over one shared plateau."""

    def create_world(self, width: int, height: int) -> World:
        return World.mars(width=width, height=height)

    def run_mission(
        self,
        world: World,
        rovers: Iterable[Tuple[str, str]],
    ) -> tuple[List[RoverOutcome], MissionSummary]:
        outcomes: List[RoverOutcome] = []
        for index, (placement_line, instruction_line) in enumerate(rovers):
            try:
                placement = navigate(world, placement_line, instruction_line)
            except RoverError as exc:
                logger.warning("Rover %d failed: %s", index, exc)
                outcomes.append(RoverOutcome(index=index, error=exc))
            else:
                outcomes.append(RoverOutcome(index=index, placement=placement))

        failed = sum(1 for o in outcomes if not o.ok)
        summary = MissionSummary(rovers=len(outcomes), succeeded=len(outcomes) - failed, failed=failed)
        return outcomes, summary
