# SPDX-License-Identifier: MIT

from weekgrid.model.entity_id import EntityId
from weekgrid.model.errors import GestureError
from weekgrid.model.interaction import (
    IDLE,
    Copying,
    Dragging,
    Idle,
    InteractionMode,
    ResizeEdge,
    Resizing,
)
from weekgrid.model.schedule import Schedule
from weekgrid.service.schedule import copy_schedule, move_schedule, resize_schedule
from weekgrid.time import nearest_slot


class GestureController:
    """
    Tracks the single pointer gesture in progress and turns its drop
    position into a schedule mutation.

    Pointer positions are pixel offsets from the top of a day column; they
    are snapped to the half-hour grid with nearest_slot.
    """

    def __init__(self, slot_height_px: float) -> None:
        self.slot_height_px = slot_height_px
        self._mode: InteractionMode = IDLE

    @property
    def mode(self) -> InteractionMode:
        return self._mode

    @property
    def is_idle(self) -> bool:
        return isinstance(self._mode, Idle)

    def __enter_mode(self, mode: InteractionMode) -> None:
        if not self.is_idle:
            raise GestureError(f"Cannot start {mode} while {self._mode} is active")
        self._mode = mode

    def begin_drag(self, schedule_id: EntityId, pointer_offset_y: float) -> None:
        self.__enter_mode(Dragging(schedule_id, pointer_offset_y))

    def begin_resize(self, schedule_id: EntityId, edge: ResizeEdge) -> None:
        self.__enter_mode(Resizing(schedule_id, edge))

    def begin_copy(self, schedule: Schedule, pointer_offset_y: float = 0.0) -> None:
        self.__enter_mode(Copying(schedule, pointer_offset_y))

    def cancel(self) -> None:
        self._mode = IDLE

    def drop(
        self, schedules: list[Schedule], drop_date: str, pointer_y: float
    ) -> list[Schedule]:
        """
        Release the pointer over drop_date at pointer_y.

        The gesture ends whether or not the mutation is accepted; a rejected
        drop raises and leaves schedules as they were.
        """
        mode = self._mode
        self._mode = IDLE

        match mode:
            case Dragging(schedule_id=schedule_id, pointer_offset_y=offset):
                new_start = nearest_slot(pointer_y - offset, self.slot_height_px)
                return move_schedule(schedules, schedule_id, drop_date, new_start)
            case Resizing(schedule_id=schedule_id, edge=edge):
                new_time = nearest_slot(pointer_y, self.slot_height_px)
                return resize_schedule(schedules, schedule_id, edge, new_time)
            case Copying(schedule=source, pointer_offset_y=offset):
                new_start = nearest_slot(pointer_y - offset, self.slot_height_px)
                new_schedules, _ = copy_schedule(schedules, source, drop_date, new_start)
                return new_schedules
            case _:
                raise GestureError("No gesture in progress")
