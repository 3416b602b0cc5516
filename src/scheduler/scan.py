from __future__ import annotations

import logging

from .interface import CarPosition, Direction

logger = logging.getLogger(__name__)


class ScanScheduler:
    """Implements the SCAN (elevator) algorithm.

    The car sweeps to the physical end of the shaft before reversing,
    whether or not any request remains ahead of it.
    """

    def next_direction(self, position: CarPosition) -> Direction:
        heading = position.direction
        at_end = position.at_top if heading is Direction.UP else position.at_bottom
        if at_end:
            logger.debug("Reversing %s at floor %d", heading.name, position.current_floor)
            return heading.reversed()
        return heading
