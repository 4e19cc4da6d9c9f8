# SPDX-License-Identifier: MIT

from time import monotonic
from typing import Callable, Optional

from weekgrid.model.interaction import Copying, Dragging, InteractionMode

DAYS_IN_WEEK = 7


class AutoScroller:
    """
    Shifts the focused weekday while a block is dragged against a viewport
    edge.

    Holding the pointer within edge_px of the left or right edge arms a
    timer; once delay_ms has passed the focus moves one day in that
    direction, wrapping around the week, and the timer re-arms. Leaving the
    edge zone, switching edges or ending the gesture cancels it.
    """

    def __init__(
        self,
        delay_ms: int = 300,
        edge_px: float = 50,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.delay_seconds = delay_ms / 1000
        self.edge_px = edge_px
        self._clock = clock
        self._direction = 0
        self._deadline: Optional[float] = None

    @property
    def armed(self) -> bool:
        return self._deadline is not None

    @property
    def direction(self) -> int:
        return self._direction

    def cancel(self) -> None:
        self._direction = 0
        self._deadline = None

    def pointer_moved(
        self, pointer_x: float, viewport_width: float, mode: InteractionMode
    ) -> None:
        if not isinstance(mode, (Dragging, Copying)):
            self.cancel()
            return

        if pointer_x < self.edge_px:
            direction = -1
        elif pointer_x > viewport_width - self.edge_px:
            direction = 1
        else:
            direction = 0

        if direction == 0:
            self.cancel()
        elif direction != self._direction:
            self._direction = direction
            self._deadline = self._clock() + self.delay_seconds

    def poll(self, focused_day_index: int) -> int:
        """Return the focused weekday index after any timer that has fired."""
        if self._deadline is None or self._clock() < self._deadline:
            return focused_day_index
        self._deadline = self._clock() + self.delay_seconds
        return (focused_day_index + self._direction) % DAYS_IN_WEEK
