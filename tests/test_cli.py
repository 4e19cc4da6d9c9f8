"""Tests for the weekgrid command line."""

import pytest
from typer.testing import CliRunner

from weekgrid import state as app_state
from weekgrid.repository.gateway import get_user_data_gateway
from weekgrid.terminal.app import app
from weekgrid.view import state as view_state

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_state(data_path):
    app_state.set_active_user(None)
    view_state.set_show_header(True)
    yield
    app_state.set_active_user(None)
    view_state.set_show_header(True)


def invoke(*args):
    return runner.invoke(app, ["--user", "alice", "--no-header", *args])


def stored():
    return get_user_data_gateway("document").load("alice")


class TestSchedules:
    def test_add_saves_the_schedule(self):
        result = invoke(
            "schedule", "add", "gym", "--start", "9:00", "--end", "10:30", "--date", "2025-03-10"
        )
        assert result.exit_code == 0, result.output
        [schedule] = stored()["schedules"]
        assert (schedule["date"], schedule["start"], schedule["end"]) == (
            "2025-03-10",
            "09:00",
            "10:30",
        )

    def test_overlapping_add_is_rejected(self):
        invoke("s", "a", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        result = invoke("s", "a", "run", "-s", "9:30", "-e", "11:00", "-d", "2025-03-10")
        assert result.exit_code == 1
        assert "overlaps" in result.output
        assert len(stored()["schedules"]) == 1

    def test_recurring_add(self):
        result = invoke(
            "schedule", "add", "gym",
            "--start", "7:00", "--end", "8:00",
            "--date", "2025-03-10",
            "--repeat", "2", "--weekday", "mon,thu",
        )
        assert result.exit_code == 0, result.output
        dates = sorted(s["date"] for s in stored()["schedules"])
        assert dates == ["2025-03-10", "2025-03-13", "2025-03-17", "2025-03-20"]

    def test_off_grid_time_is_a_usage_error(self):
        result = invoke("schedule", "add", "gym", "--start", "9:15", "--end", "10:00")
        assert result.exit_code == 2
        assert stored()["schedules"] == []

    def test_move_by_id_prefix(self):
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        schedule_id = stored()["schedules"][0]["id"]

        result = invoke("schedule", "move", schedule_id[:8], "--start", "13:00")
        assert result.exit_code == 0, result.output
        [schedule] = stored()["schedules"]
        assert (schedule["start"], schedule["end"]) == ("13:00", "14:00")

    def test_resize_needs_exactly_one_edge(self):
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        schedule_id = stored()["schedules"][0]["id"]
        assert invoke("schedule", "resize", schedule_id).exit_code == 2

        result = invoke("schedule", "resize", schedule_id, "--end", "11:00")
        assert result.exit_code == 0, result.output
        assert stored()["schedules"][0]["end"] == "11:00"

    def test_done_and_delete(self):
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        schedule_id = stored()["schedules"][0]["id"]

        assert invoke("schedule", "done", schedule_id).exit_code == 0
        assert stored()["schedules"][0]["done"] is True
        assert invoke("schedule", "delete", schedule_id).exit_code == 0
        assert stored()["schedules"] == []

    def test_unknown_id(self):
        result = invoke("schedule", "done", "nope")
        assert result.exit_code == 2


class TestReports:
    def test_week_view(self):
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        result = invoke("week", "--date", "2025-03-12", "--from", "8:00", "--to", "11:00")
        assert result.exit_code == 0, result.output
        assert "gym" in result.output
        assert "09:00" in result.output

    def test_goal_progress(self):
        invoke("tag", "add", "학습", "reading")
        invoke(
            "schedule", "add", "book", "-s", "9:00", "-e", "11:00",
            "-d", "2025-03-10", "-t", "reading",
        )
        assert invoke("goal", "set", "학습", "4", "--month", "2025-03").exit_code == 0

        result = invoke("goal", "progress", "--month", "2025-03")
        assert result.exit_code == 0, result.output
        assert "50%" in result.output

    def test_goal_set_accepts_three_digit_hours(self):
        result = invoke("goal", "set", "학습", "120:00", "--month", "2025-03")
        assert result.exit_code == 0, result.output
        assert stored()["monthly_goals"] == [
            {"month": "2025-03", "goals": [{"tag_type": "학습", "target_hours": "120:00"}]}
        ]
        assert invoke("goal", "progress", "--month", "2025-03").exit_code == 0

    def test_plan_add_derives_a_goal(self):
        result = invoke("plan", "add", "reading", "books", "--hours", "12", "--month", "2025-03")
        assert result.exit_code == 0, result.output
        assert stored()["monthly_goals"] == [
            {"month": "2025-03", "goals": [{"tag_type": "기타", "target_hours": "12:00"}]}
        ]

    def test_month_clear_keeps_other_months(self):
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-03-10")
        invoke("schedule", "add", "gym", "-s", "9:00", "-e", "10:00", "-d", "2025-04-10")

        result = invoke("month", "clear", "--month", "2025-03", "--yes")
        assert result.exit_code == 0, result.output
        assert [s["date"] for s in stored()["schedules"]] == ["2025-04-10"]

    def test_user_list(self):
        invoke("tag", "add", "학습", "reading")
        result = invoke("user", "list")
        assert result.exit_code == 0
        assert "alice" in result.output


class TestGlobalOptions:
    def test_no_user_is_a_usage_error(self):
        result = runner.invoke(app, ["schedule", "list"])
        assert result.exit_code == 2
        assert "No user selected" in result.output

    def test_config_set(self):
        result = runner.invoke(app, ["config", "set", "--storage-backend", "rows"])
        assert result.exit_code == 0, result.output
        assert "rows" in result.output

        result = runner.invoke(app, ["config", "set", "--storage-backend", "sqlite"])
        assert result.exit_code == 2
