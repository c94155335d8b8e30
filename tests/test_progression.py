"""Property-based tests for experience and levels.

**Feature: stockquest**
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from stockquest.events import LevelUp, NotificationQueue, AchievementUnlocked
from stockquest.models import Achievement, Progression
from stockquest.progression import ProgressionTracker


class TestProgressionMonotonicity:
    """
    **Feature: stockquest, Property: Progression Monotonicity**

    *For any* sequence of grants, experience never decreases and the level
    is always floor(experience / 100) + 1.
    """

    @given(grants=st.lists(st.integers(min_value=1, max_value=250), max_size=50))
    @settings(max_examples=100)
    def test_level_follows_experience(self, grants):
        tracker = ProgressionTracker()
        previous = 0
        for points in grants:
            tracker.grant_experience(points)
            assert tracker.experience >= previous
            assert tracker.level == tracker.experience // 100 + 1
            previous = tracker.experience

        assert tracker.experience == sum(grants)

    @given(experience=st.integers(min_value=0, max_value=10**6))
    def test_level_progress(self, experience):
        progression = Progression(experience=experience)

        assert progression.level == experience // 100 + 1
        assert 0 <= progression.level_progress < 100


class TestLevelUp:
    """Crossing a level boundary produces a level-up event."""

    def test_no_event_within_level(self):
        tracker = ProgressionTracker()

        assert tracker.grant_experience(10) is None
        assert tracker.grant_experience(89) is None
        assert tracker.level == 1

    def test_event_on_boundary(self):
        tracker = ProgressionTracker(experience=90)

        event = tracker.grant_experience(10)

        assert event == LevelUp(previous_level=1, level=2)
        assert tracker.level == 2

    def test_multiple_levels_at_once(self):
        tracker = ProgressionTracker()

        event = tracker.grant_experience(350)

        assert event.previous_level == 1
        assert event.level == 4

    @pytest.mark.parametrize("points", [0, -10, 2.5, True])
    def test_rejects_non_positive_points(self, points):
        tracker = ProgressionTracker()

        with pytest.raises(ValueError):
            tracker.grant_experience(points)
        assert tracker.experience == 0

    def test_reset(self):
        tracker = ProgressionTracker(experience=420)

        tracker.reset()

        assert tracker.experience == 0
        assert tracker.level == 1


class TestNotificationQueue:
    """Notifications are shown one at a time in arrival order."""

    def _unlocked(self, achievement_id: str) -> AchievementUnlocked:
        return AchievementUnlocked(
            achievement=Achievement(id=achievement_id, title=achievement_id.title(), unlocked=True)
        )

    def test_one_at_a_time(self):
        queue = NotificationQueue()
        first, second = self._unlocked("first"), self._unlocked("second")
        queue.push(first)
        queue.push(second)

        assert queue.current == first
        assert queue.dismiss() == second
        assert queue.dismiss() is None
        assert len(queue) == 0

    def test_drain_returns_all_in_order(self):
        queue = NotificationQueue()
        items = [LevelUp(previous_level=1, level=2), self._unlocked("a"), self._unlocked("b")]
        for item in items:
            queue.push(item)

        assert queue.drain() == items
        assert queue.current is None

    def test_text(self):
        assert "level 3" in LevelUp(previous_level=2, level=3).text
        assert "First" in self._unlocked("first").text
