"""Tests for monthly totals, goals and plans."""

from weekgrid.service.aggregation import (
    TOTAL_KEY,
    add_monthly_plan,
    clear_month,
    derive_goals_from_plans,
    goals_for_month,
    monthly_totals,
    percentage,
    remove_goal,
    remove_monthly_plan,
    set_goal,
    tag_progress,
    tag_totals,
    visible_tag_types,
)

TAG_ITEMS = [
    {"tag_type": "학습", "tag_name": "reading"},
    {"tag_type": "운동", "tag_name": "running"},
]
TAGS = [{"tag_type": "학습", "color": "sky_blue1"}]


def plan(id, tag_type, hours, month="2025-03"):
    return {
        "id": id,
        "tag_type": tag_type,
        "tag": "",
        "name": id,
        "description": None,
        "estimated_time": hours,
        "month": month,
    }


class TestTotals:
    def test_goal_met_exactly(self, make_schedule):
        """90 + 30 minutes against a 02:00 goal is 100%."""
        schedules = [
            make_schedule(date="2025-03-03", start="09:00", end="10:30", tag="reading"),
            make_schedule(date="2025-03-20", start="20:00", end="20:30", tag="reading"),
        ]
        goals = [{"month": "2025-03", "goals": [{"tag_type": "학습", "target_hours": "02:00"}]}]

        assert monthly_totals(schedules, TAG_ITEMS, "2025-03") == {"학습": 120}
        [progress] = tag_progress(schedules, TAG_ITEMS, TAGS, goals, "2025-03")
        assert progress["percentage"] == 100
        assert progress["actual_time"] == "02:00"
        assert progress["goal_minutes"] == 120
        assert progress["color"] == "sky_blue1"

    def test_other_months_are_ignored(self, make_schedule):
        schedules = [
            make_schedule(date="2025-02-28", tag="reading"),
            make_schedule(date="2025-04-01", tag="reading"),
        ]
        assert monthly_totals(schedules, TAG_ITEMS, "2025-03") == {}

    def test_unresolvable_tags_count_as_the_default_type(self, make_schedule):
        schedules = [make_schedule(date="2025-03-03", tag="mystery", tag_type="")]
        assert monthly_totals(schedules, TAG_ITEMS, "2025-03") == {"기타": 60}

    def test_tag_totals_include_the_overall_sum(self, make_schedule):
        schedules = [
            make_schedule(id="a", start="09:00", end="10:30", tag="reading"),
            make_schedule(id="b", start="11:00", end="12:00", tag="running"),
        ]
        assert tag_totals(schedules, TAG_ITEMS) == {
            "학습": "01:30",
            "운동": "01:00",
            TOTAL_KEY: "02:30",
        }


class TestPercentage:
    def test_missing_goal_is_zero(self):
        assert percentage(300, 0) == 0

    def test_overshoot_is_not_clamped(self):
        assert percentage(180, 120) == 150

    def test_rounds_half_up(self):
        assert percentage(1, 8) == 13
        assert percentage(1, 3) == 33
        assert percentage(0, 120) == 0


class TestVisibleTagTypes:
    def test_goal_types_come_first(self, make_schedule):
        schedules = [make_schedule(date="2025-03-03", tag="running")]
        goals = [{"month": "2025-03", "goals": [{"tag_type": "학습", "target_hours": "10:00"}]}]
        assert visible_tag_types(schedules, TAG_ITEMS, goals, "2025-03") == ["학습", "운동"]

    def test_goal_without_schedules_shows_zero_progress(self):
        goals = [{"month": "2025-03", "goals": [{"tag_type": "학습", "target_hours": "10:00"}]}]
        [progress] = tag_progress([], TAG_ITEMS, TAGS, goals, "2025-03")
        assert progress["actual_minutes"] == 0
        assert progress["percentage"] == 0


class TestGoals:
    def test_set_goal_adds_then_replaces(self):
        goals = set_goal([], "2025-03", "학습", "10:00")
        goals = set_goal(goals, "2025-03", "학습", "12:30")
        assert goals == [
            {"month": "2025-03", "goals": [{"tag_type": "학습", "target_hours": "12:30"}]}
        ]

    def test_remove_goal(self):
        goals = set_goal([], "2025-03", "학습", "10:00")
        goals = set_goal(goals, "2025-03", "운동", "05:00")
        goals = remove_goal(goals, "2025-03", "학습")
        assert goals_for_month(goals, "2025-03") == [
            {"tag_type": "운동", "target_hours": "05:00"}
        ]

    def test_derive_sums_plan_hours_per_tag_type(self):
        plans = [plan("a", "학습", 10), plan("b", "학습", 5), plan("c", "운동", 3)]
        existing = set_goal([], "2025-03", "기타", "02:00")
        derived = derive_goals_from_plans(plans, existing, "2025-03")
        assert derived["goals"] == [
            {"tag_type": "기타", "target_hours": "02:00"},
            {"tag_type": "학습", "target_hours": "15:00"},
            {"tag_type": "운동", "target_hours": "03:00"},
        ]

    def test_derive_ignores_other_months(self):
        plans = [plan("a", "학습", 10, month="2025-04")]
        assert derive_goals_from_plans(plans, [], "2025-03") == {"month": "2025-03", "goals": []}


class TestPlans:
    def test_adding_plans_rederives_goals(self):
        plans, goals = add_monthly_plan([], [], plan("a", "학습", 10))
        plans, goals = add_monthly_plan(plans, goals, plan("b", "학습", 4))
        assert len(plans) == 2
        assert goals_for_month(goals, "2025-03") == [
            {"tag_type": "학습", "target_hours": "14:00"}
        ]

    def test_removing_a_plan_lowers_the_goal(self):
        plans, goals = add_monthly_plan([], [], plan("a", "학습", 10))
        plans, goals = add_monthly_plan(plans, goals, plan("b", "학습", 4))
        plans, goals = remove_monthly_plan(plans, goals, "a")
        assert goals_for_month(goals, "2025-03") == [
            {"tag_type": "학습", "target_hours": "04:00"}
        ]

    def test_last_plan_of_a_tag_type_drops_its_goal(self):
        plans, goals = add_monthly_plan([], [], plan("a", "학습", 10))
        plans, goals = add_monthly_plan(plans, goals, plan("b", "운동", 4))
        plans, goals = remove_monthly_plan(plans, goals, "b")
        assert goals_for_month(goals, "2025-03") == [
            {"tag_type": "학습", "target_hours": "10:00"}
        ]

    def test_last_plan_of_a_month_drops_the_month(self):
        plans, goals = add_monthly_plan([], [], plan("a", "학습", 10))
        plans, goals = remove_monthly_plan(plans, goals, "a")
        assert plans == []
        assert goals == []

    def test_removing_an_unknown_plan_changes_nothing(self):
        plans, goals = add_monthly_plan([], [], plan("a", "학습", 10))
        assert remove_monthly_plan(plans, goals, "zzz") == (plans, goals)


class TestClearMonth:
    def test_drops_schedules_and_goals_but_keeps_plans(self, make_schedule):
        user_data = {
            "schedules": [
                make_schedule(id="march", date="2025-03-03"),
                make_schedule(id="april", date="2025-04-03"),
            ],
            "tags": [],
            "tag_items": [],
            "monthly_plans": [plan("a", "학습", 10)],
            "monthly_goals": set_goal([], "2025-03", "학습", "10:00"),
        }
        cleared = clear_month(user_data, "2025-03")
        assert [s["id"] for s in cleared["schedules"]] == ["april"]
        assert cleared["monthly_goals"] == []
        assert cleared["monthly_plans"] == user_data["monthly_plans"]
        assert len(user_data["schedules"]) == 2
