# SPDX-License-Identifier: MIT

from copy import deepcopy
from time import monotonic
from typing import Callable, Optional

from loguru import logger

from weekgrid.configuration import Configuration
from weekgrid.model.entity_id import EntityId, generate_entity_id
from weekgrid.model.errors import (
    InvalidTagError,
    InvalidTimeError,
    ScheduleRejectedError,
    UnknownScheduleError,
)
from weekgrid.model.interaction import InteractionMode, ResizeEdge
from weekgrid.model.monthly_goal import TagProgress
from weekgrid.model.monthly_plan import MonthlyPlan
from weekgrid.model.schedule import Recurrence, Schedule, ScheduleForm
from weekgrid.model.user_data import SaveResult, UserData
from weekgrid.repository.gateway import UserDataGateway
from weekgrid.service import aggregation, schedule as schedule_service, tag as tag_service
from weekgrid.service.auto_scroll import AutoScroller
from weekgrid.service.gesture import GestureController
from weekgrid.service.notice import Notice
from weekgrid.template.user_data import get_user_data_template
from weekgrid.time import DEFAULT_SLOT_HEIGHT_PX, today_str, week_of, weekday_index

_REJECTIONS = (
    ScheduleRejectedError,
    InvalidTimeError,
    InvalidTagError,
    UnknownScheduleError,
)


class CalendarSession:
    """
    One user's committed calendar state.

    Every mutation is computed against the committed state first; a rejected
    mutation leaves it untouched and posts a transient notice. An accepted
    mutation is committed and the complete bundle is handed to the gateway.
    A failed save is logged and posted as a notice; the new state is kept
    unless revert_on_save_failure is set, in which case the previous state
    is restored.
    """

    def __init__(
        self,
        user_id: str,
        gateway: UserDataGateway,
        slot_height_px: float = DEFAULT_SLOT_HEIGHT_PX,
        notice_seconds: float = 3,
        auto_scroll_delay_ms: int = 300,
        auto_scroll_edge_px: float = 50,
        revert_on_save_failure: bool = False,
        clock: Callable[[], float] = monotonic,
    ) -> None:
        self.user_id = user_id
        self.gateway = gateway
        self.revert_on_save_failure = revert_on_save_failure
        self.notice = Notice(notice_seconds, clock)
        self.gestures = GestureController(slot_height_px)
        self.auto_scroller = AutoScroller(auto_scroll_delay_ms, auto_scroll_edge_px, clock)
        self.focused_date = today_str()
        self.last_save_result: Optional[SaveResult] = None
        self._user_data: UserData = get_user_data_template()

    @classmethod
    def from_config(
        cls, user_id: str, gateway: UserDataGateway, config: Configuration
    ) -> "CalendarSession":
        return cls(
            user_id,
            gateway,
            slot_height_px=config["slot_height_px"],
            notice_seconds=config["notice_seconds"],
            auto_scroll_delay_ms=config["auto_scroll_delay_ms"],
            auto_scroll_edge_px=config["auto_scroll_edge_px"],
            revert_on_save_failure=config["revert_on_save_failure"],
        )

    def load(self) -> None:
        self._user_data = self.gateway.load(self.user_id)
        logger.debug(
            f"Loaded {len(self._user_data['schedules'])} schedules for {self.user_id}"
        )

    @property
    def user_data(self) -> UserData:
        return deepcopy(self._user_data)

    @property
    def schedules(self) -> list[Schedule]:
        return deepcopy(self._user_data["schedules"])

    def __commit(self, new_user_data: UserData) -> SaveResult:
        previous = self._user_data
        self._user_data = new_user_data

        result = self.gateway.save(self.user_id, deepcopy(new_user_data))
        self.last_save_result = result
        if not result["success"]:
            logger.error(f"Save failed for {self.user_id}: {result.get('error')}")
            self.notice.show(f"Could not save: {result.get('error')}")
            if self.revert_on_save_failure:
                self._user_data = previous
        return result

    def __apply(self, mutate: Callable[[UserData], UserData]) -> bool:
        try:
            new_user_data = mutate(deepcopy(self._user_data))
        except _REJECTIONS as e:
            message = f"Unknown schedule: {e.args[0]}" if isinstance(e, UnknownScheduleError) else str(e)
            logger.debug(f"Rejected change for {self.user_id}: {message}")
            self.notice.show(message)
            return False
        self.__commit(new_user_data)
        return True

    def __with_schedules(
        self, mutate: Callable[[list[Schedule]], list[Schedule]]
    ) -> Callable[[UserData], UserData]:
        def apply(user_data: UserData) -> UserData:
            user_data["schedules"] = mutate(user_data["schedules"])
            return user_data

        return apply

    # Schedules

    def resolve_schedule_id(self, id_prefix: str) -> EntityId:
        """Resolve a full id or a unique id prefix to a schedule id."""
        matches = [
            schedule["id"]
            for schedule in self._user_data["schedules"]
            if schedule["id"].startswith(id_prefix)
        ]
        if len(matches) != 1:
            raise UnknownScheduleError(id_prefix)
        return matches[0]

    def create_schedules(
        self,
        form: ScheduleForm,
        base_date: str,
        recurrence: Optional[Recurrence] = None,
    ) -> list[Schedule]:
        created: list[Schedule] = []

        def mutate(user_data: UserData) -> UserData:
            user_data["schedules"], new_schedules = schedule_service.create_schedules(
                user_data["schedules"],
                form,
                base_date,
                user_data["tag_items"],
                recurrence,
            )
            created.extend(new_schedules)
            return user_data

        if not self.__apply(mutate):
            return []
        return deepcopy(created)

    def move_schedule(self, schedule_id: EntityId, new_date: str, new_start: str) -> bool:
        return self.__apply(
            self.__with_schedules(
                lambda schedules: schedule_service.move_schedule(
                    schedules, schedule_id, new_date, new_start
                )
            )
        )

    def resize_schedule(self, schedule_id: EntityId, edge: ResizeEdge, new_time: str) -> bool:
        return self.__apply(
            self.__with_schedules(
                lambda schedules: schedule_service.resize_schedule(
                    schedules, schedule_id, edge, new_time
                )
            )
        )

    def copy_schedule(
        self, schedule_id: EntityId, new_date: str, new_start: str
    ) -> Optional[Schedule]:
        copies: list[Schedule] = []

        def mutate(schedules: list[Schedule]) -> list[Schedule]:
            source = schedule_service.get_schedule(schedules, schedule_id)
            new_schedules, clone = schedule_service.copy_schedule(
                schedules, source, new_date, new_start
            )
            copies.append(clone)
            return new_schedules

        if not self.__apply(self.__with_schedules(mutate)):
            return None
        return deepcopy(copies[0])

    def delete_schedule(self, schedule_id: EntityId) -> bool:
        return self.__apply(
            self.__with_schedules(
                lambda schedules: schedule_service.delete_schedule(schedules, schedule_id)
            )
        )

    def toggle_done(self, schedule_id: EntityId) -> bool:
        return self.__apply(
            self.__with_schedules(
                lambda schedules: schedule_service.toggle_done(schedules, schedule_id)
            )
        )

    def update_schedule(
        self,
        schedule_id: EntityId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tag: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        remove_description: bool = False,
    ) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["schedules"] = schedule_service.update_schedule(
                user_data["schedules"],
                schedule_id,
                user_data["tag_items"],
                title=title,
                description=description,
                tag=tag,
                start=start,
                end=end,
                remove_description=remove_description,
            )
            return user_data

        return self.__apply(mutate)

    # Gestures

    @property
    def mode(self) -> InteractionMode:
        return self.gestures.mode

    def begin_drag(self, schedule_id: EntityId, pointer_offset_y: float) -> None:
        self.gestures.begin_drag(schedule_id, pointer_offset_y)

    def begin_resize(self, schedule_id: EntityId, edge: ResizeEdge) -> None:
        self.gestures.begin_resize(schedule_id, edge)

    def begin_copy(self, schedule_id: EntityId, pointer_offset_y: float = 0.0) -> None:
        source = schedule_service.get_schedule(self._user_data["schedules"], schedule_id)
        self.gestures.begin_copy(source, pointer_offset_y)

    def pointer_moved(self, pointer_x: float, viewport_width: float) -> None:
        self.auto_scroller.pointer_moved(pointer_x, viewport_width, self.gestures.mode)

    def poll_auto_scroll(self) -> str:
        """Apply a fired auto-scroll timer to the focused date and return it."""
        week = week_of(self.focused_date)
        index = self.auto_scroller.poll(weekday_index(self.focused_date))
        self.focused_date = week[index]
        return self.focused_date

    def drop(self, drop_date: str, pointer_y: float) -> bool:
        """Release the pointer; the gesture ends even when the drop is rejected."""
        self.auto_scroller.cancel()
        return self.__apply(
            self.__with_schedules(
                lambda schedules: self.gestures.drop(schedules, drop_date, pointer_y)
            )
        )

    def cancel_gesture(self) -> None:
        self.auto_scroller.cancel()
        self.gestures.cancel()

    # Tags

    def add_tag_item(self, tag_type: str, tag_name: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["tags"], user_data["tag_items"] = tag_service.add_tag_item(
                user_data["tags"], user_data["tag_items"], tag_type, tag_name
            )
            return user_data

        return self.__apply(mutate)

    def remove_tag_item(self, tag_type: str, tag_name: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["tag_items"] = tag_service.remove_tag_item(
                user_data["tag_items"], tag_type, tag_name
            )
            return user_data

        return self.__apply(mutate)

    def remove_tag_type(self, tag_type: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["tags"], user_data["tag_items"] = tag_service.remove_tag_type(
                user_data["tags"], user_data["tag_items"], tag_type
            )
            return user_data

        return self.__apply(mutate)

    # Plans and goals

    def add_plan(
        self,
        tag: str,
        name: str,
        estimated_time: int,
        month: str,
        description: Optional[str] = None,
    ) -> Optional[MonthlyPlan]:
        tag_type = tag_service.resolve_type(tag, self._user_data["tag_items"])
        plan: MonthlyPlan = {
            "id": generate_entity_id(),
            "tag_type": tag_type,
            "tag": tag,
            "name": name,
            "description": description,
            "estimated_time": max(estimated_time, 0),
            "month": month,
        }

        def mutate(user_data: UserData) -> UserData:
            user_data["monthly_plans"], user_data["monthly_goals"] = (
                aggregation.add_monthly_plan(
                    user_data["monthly_plans"], user_data["monthly_goals"], plan
                )
            )
            return user_data

        if not self.__apply(mutate):
            return None
        return deepcopy(plan)

    def remove_plan(self, plan_id: EntityId) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["monthly_plans"], user_data["monthly_goals"] = (
                aggregation.remove_monthly_plan(
                    user_data["monthly_plans"], user_data["monthly_goals"], plan_id
                )
            )
            return user_data

        return self.__apply(mutate)

    def set_goal(self, month: str, tag_type: str, target_hours: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["monthly_goals"] = aggregation.set_goal(
                user_data["monthly_goals"], month, tag_type, target_hours
            )
            return user_data

        return self.__apply(mutate)

    def remove_goal(self, month: str, tag_type: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            user_data["monthly_goals"] = aggregation.remove_goal(
                user_data["monthly_goals"], month, tag_type
            )
            return user_data

        return self.__apply(mutate)

    def derive_goals(self, month: str) -> bool:
        def mutate(user_data: UserData) -> UserData:
            derived = aggregation.derive_goals_from_plans(
                user_data["monthly_plans"], user_data["monthly_goals"], month
            )
            user_data["monthly_goals"] = aggregation.upsert_monthly_goal(
                user_data["monthly_goals"], derived
            )
            return user_data

        return self.__apply(mutate)

    def clear_month(self, month: str) -> bool:
        return self.__apply(lambda user_data: aggregation.clear_month(user_data, month))

    # Reads

    def progress(self, month: str) -> list[TagProgress]:
        return aggregation.tag_progress(
            self._user_data["schedules"],
            self._user_data["tag_items"],
            self._user_data["tags"],
            self._user_data["monthly_goals"],
            month,
        )

    def week_totals(self, date: str) -> dict[str, str]:
        week = set(week_of(date))
        return aggregation.tag_totals(
            [s for s in self._user_data["schedules"] if s["date"] in week],
            self._user_data["tag_items"],
        )
