"""Tests for week normalization: classification, completion and backfill."""

import pytest

from plan_ingestor.parsers.models import DAY_NAMES, DayWorkout, Exercise
from plan_ingestor.parsers.normalizer import (
    backfill_exercises,
    backfill_focus,
    classify_focus,
    classify_workout_type,
    complete_week,
    exercises_mentioned,
    normalize_week,
)


@pytest.fixture
def global_exercises():
    return [Exercise(name="Push-ups", sets=3), Exercise(name="Squats"), Exercise(name="Row")]


class TestClassifyWorkoutType:
    @pytest.mark.parametrize("text, expected", [
        ("Rest day", "rest"),
        ("Active recovery walk", "recovery"),
        ("Cardio intervals", "cardio"),
        ("HIIT circuit", "hiit"),
        ("Stretching and mobility", "flexibility"),
        ("Flexibility flow", "flexibility"),
        ("Upper Body", "strength"),
        ("", "strength"),
        (None, "strength"),
    ])
    def test_keywords(self, text, expected):
        assert classify_workout_type(text) == expected

    def test_first_keyword_wins(self):
        assert classify_workout_type("Rest or light cardio") == "rest"


class TestClassifyFocus:
    def test_vocabulary_match(self):
        assert classify_focus("Today: lower body power") == "Lower Body"

    def test_default(self):
        assert classify_focus("Something else") == "Workout"


class TestCompleteWeek:
    def test_missing_days_are_synthesized_in_order(self):
        week = complete_week({"Friday": DayWorkout(day="Friday", focus="Legs")})
        assert list(week) == DAY_NAMES
        assert week["Friday"].focus == "Legs"
        assert week["Monday"].focus == ""
        assert week["Monday"].workout_type == "strength"


class TestBackfillFocus:
    def test_keeps_existing_focus(self):
        day = DayWorkout(day="Monday", focus="Push")
        assert backfill_focus(day) is day

    def test_rest_day(self):
        day = DayWorkout(day="Monday", is_rest_day=True)
        assert backfill_focus(day).focus == "Rest"

    def test_description_vocabulary(self):
        day = DayWorkout(day="Monday", description="Endurance run, 5k")
        assert backfill_focus(day).focus == "Endurance"

    def test_default(self):
        assert backfill_focus(DayWorkout(day="Monday")).focus == "Workout"

    def test_input_is_not_mutated(self):
        day = DayWorkout(day="Monday")
        backfill_focus(day)
        assert day.focus == ""


class TestBackfillExercises:
    def test_substring_match(self, global_exercises):
        matched = exercises_mentioned("Upper body: push-ups and planks", global_exercises)
        assert [ex.name for ex in matched] == ["Push-ups"]

    def test_all_exercises_phrase(self, global_exercises):
        assert exercises_mentioned("Full body - all exercises", global_exercises) == global_exercises

    def test_short_names_match_inside_words(self, global_exercises):
        # Known weakness of plain substring matching
        matched = exercises_mentioned("Rowing machine", global_exercises)
        assert [ex.name for ex in matched] == ["Row"]

    def test_rest_day_is_left_alone(self, global_exercises):
        day = DayWorkout(day="Sunday", description="Rest, maybe squats", is_rest_day=True)
        assert backfill_exercises(day, global_exercises).exercises == []

    def test_existing_exercises_are_kept(self, global_exercises):
        day = DayWorkout(day="Monday", description="squats", exercises=[Exercise(name="Lunges")])
        assert [ex.name for ex in backfill_exercises(day, global_exercises).exercises] == ["Lunges"]

    def test_fills_empty_day(self, global_exercises):
        day = DayWorkout(day="Monday", description="Squats and more squats")
        assert [ex.name for ex in backfill_exercises(day, global_exercises).exercises] == ["Squats"]


class TestNormalizeWeek:
    def test_completes_and_backfills(self, global_exercises):
        week = normalize_week(
            {"Tuesday": DayWorkout(day="Tuesday", description="Lower body: squats")},
            global_exercises,
        )
        assert list(week) == DAY_NAMES
        assert week["Tuesday"].focus == "Lower Body"
        assert [ex.name for ex in week["Tuesday"].exercises] == ["Squats"]
        assert week["Monday"].focus == "Workout"
        assert week["Monday"].exercises == []
