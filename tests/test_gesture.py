"""Tests for pointer gestures, auto-scroll and notices."""

import pytest

from weekgrid.model.errors import GestureError, OverlapError
from weekgrid.model.interaction import IDLE, Copying, Dragging, Resizing
from weekgrid.service.auto_scroll import AutoScroller
from weekgrid.service.gesture import GestureController
from weekgrid.service.notice import Notice
from weekgrid.service.schedule import get_schedule

SLOT_PX = 24


class TestGestureController:
    def test_starts_idle(self):
        controller = GestureController(SLOT_PX)
        assert controller.mode == IDLE
        assert controller.is_idle

    def test_only_one_gesture_at_a_time(self, make_schedule):
        controller = GestureController(SLOT_PX)
        controller.begin_drag("a", 0)
        with pytest.raises(GestureError):
            controller.begin_resize("a", "top")
        with pytest.raises(GestureError):
            controller.begin_copy(make_schedule(id="a"))
        assert controller.mode == Dragging("a", 0)

    def test_drag_drop_snaps_to_the_grid(self, make_schedule):
        controller = GestureController(SLOT_PX)
        schedules = [make_schedule(id="a", start="09:00", end="10:00")]
        # grabbed 12px below the block's top, released at 14:00 + 17px
        controller.begin_drag("a", 12)
        moved = controller.drop(schedules, "2025-03-11", 28 * SLOT_PX + 17)
        schedule = get_schedule(moved, "a")
        assert (schedule["date"], schedule["start"], schedule["end"]) == (
            "2025-03-11",
            "14:00",
            "15:00",
        )
        assert controller.is_idle

    def test_resize_drop_moves_one_edge(self, make_schedule):
        controller = GestureController(SLOT_PX)
        schedules = [make_schedule(id="a", start="09:00", end="10:00")]
        controller.begin_resize("a", "bottom")
        resized = controller.drop(schedules, "2025-03-10", 23 * SLOT_PX)
        assert get_schedule(resized, "a")["end"] == "11:30"
        assert controller.mode == IDLE

    def test_copy_drop_adds_a_clone(self, make_schedule):
        controller = GestureController(SLOT_PX)
        source = make_schedule(id="a", start="09:00", end="10:00")
        controller.begin_copy(source)
        assert isinstance(controller.mode, Copying)
        copied = controller.drop([source], "2025-03-12", 20 * SLOT_PX)
        assert len(copied) == 2
        assert controller.is_idle

    def test_rejected_drop_still_ends_the_gesture(self, make_schedule):
        controller = GestureController(SLOT_PX)
        schedules = [
            make_schedule(id="a", start="09:00", end="10:00"),
            make_schedule(id="b", start="11:00", end="12:00"),
        ]
        controller.begin_drag("a", 0)
        with pytest.raises(OverlapError):
            controller.drop(schedules, "2025-03-10", 22 * SLOT_PX)
        assert controller.is_idle

    def test_drop_without_gesture(self):
        with pytest.raises(GestureError):
            GestureController(SLOT_PX).drop([], "2025-03-10", 0)

    def test_cancel(self):
        controller = GestureController(SLOT_PX)
        controller.begin_resize("a", "top")
        assert controller.mode == Resizing("a", "top")
        controller.cancel()
        assert controller.is_idle


class TestAutoScroller:
    def test_arms_only_while_moving_a_block(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(10, 800, IDLE)
        assert not scroller.armed
        scroller.pointer_moved(10, 800, Resizing("a", "top"))
        assert not scroller.armed
        scroller.pointer_moved(10, 800, Dragging("a", 0))
        assert scroller.armed
        assert scroller.direction == -1

    def test_shifts_focus_after_the_delay_and_rearms(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(790, 800, Dragging("a", 0))
        assert scroller.direction == 1

        clock.advance(0.2)
        assert scroller.poll(3) == 3
        clock.advance(0.1)
        assert scroller.poll(3) == 4
        # the timer re-armed; nothing more until another delay has passed
        assert scroller.poll(4) == 4
        clock.advance(0.3)
        assert scroller.poll(4) == 5

    def test_focus_wraps_around_the_week(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(0, 800, Dragging("a", 0))
        clock.advance(0.3)
        assert scroller.poll(0) == 6

    def test_leaving_the_edge_cancels(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(10, 800, Dragging("a", 0))
        scroller.pointer_moved(400, 800, Dragging("a", 0))
        assert not scroller.armed
        clock.advance(1)
        assert scroller.poll(2) == 2

    def test_switching_edges_restarts_the_delay(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(10, 800, Dragging("a", 0))
        clock.advance(0.2)
        scroller.pointer_moved(790, 800, Dragging("a", 0))
        clock.advance(0.2)
        assert scroller.poll(2) == 2
        clock.advance(0.1)
        assert scroller.poll(2) == 3

    def test_staying_at_the_same_edge_keeps_the_deadline(self, clock):
        scroller = AutoScroller(300, 50, clock)
        scroller.pointer_moved(10, 800, Dragging("a", 0))
        clock.advance(0.2)
        scroller.pointer_moved(20, 800, Dragging("a", 0))
        clock.advance(0.1)
        assert scroller.poll(2) == 1


class TestNotice:
    def test_message_expires(self, clock):
        notice = Notice(3, clock)
        notice.show("overlap")
        assert notice.message == "overlap"
        clock.advance(2.9)
        assert notice.message == "overlap"
        clock.advance(0.2)
        assert notice.message is None

    def test_new_message_restarts_the_timer(self, clock):
        notice = Notice(3, clock)
        notice.show("first")
        clock.advance(2)
        notice.show("second")
        clock.advance(2)
        assert notice.message == "second"
