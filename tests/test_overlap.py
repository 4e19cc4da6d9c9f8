"""Tests for schedule overlap detection."""

from weekgrid.service.overlap import find_conflicts, is_overlapping


class TestOverlap:
    def test_partial_overlap(self, make_schedule):
        existing = [make_schedule(id="a", start="09:00", end="10:00")]
        candidate = make_schedule(id="b", start="09:30", end="10:30")
        assert is_overlapping(existing, candidate)

    def test_adjacent_intervals_do_not_overlap(self, make_schedule):
        existing = [make_schedule(id="a", start="09:00", end="10:00")]
        assert not is_overlapping(existing, make_schedule(id="b", start="10:00", end="11:00"))
        assert not is_overlapping(existing, make_schedule(id="c", start="08:00", end="09:00"))

    def test_containment_in_both_directions(self, make_schedule):
        existing = [make_schedule(id="a", start="09:00", end="12:00")]
        assert is_overlapping(existing, make_schedule(id="b", start="10:00", end="10:30"))
        assert is_overlapping(existing, make_schedule(id="c", start="08:00", end="13:00"))

    def test_other_dates_are_ignored(self, make_schedule):
        existing = [make_schedule(id="a", date="2025-03-11")]
        assert not is_overlapping(existing, make_schedule(id="b", date="2025-03-10"))

    def test_candidate_does_not_conflict_with_itself(self, make_schedule):
        schedule = make_schedule(id="a")
        assert find_conflicts([schedule], schedule) == []

    def test_find_conflicts_returns_every_conflicting_schedule(self, make_schedule):
        existing = [
            make_schedule(id="a", start="09:00", end="10:00"),
            make_schedule(id="b", start="10:00", end="11:00"),
            make_schedule(id="c", start="11:00", end="12:00"),
        ]
        candidate = make_schedule(id="d", start="09:30", end="10:30")
        assert [c["id"] for c in find_conflicts(existing, candidate)] == ["a", "b"]
