"""
Normalization of a reconstructed week.

Classifies workout types and focus labels, synthesizes missing days and
backfills empty focus labels and exercise lists. Every function returns new
records; inputs are left untouched.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .models import DAY_NAMES, DayWorkout, Exercise, WorkoutType

logger = logging.getLogger(__name__)

# Keyword -> type, first match wins; no match means strength
WORKOUT_TYPE_KEYWORDS: List[Tuple[Tuple[str, ...], WorkoutType]] = [
    (("rest",), WorkoutType.REST),
    (("cardio",), WorkoutType.CARDIO),
    (("hiit",), WorkoutType.HIIT),
    (("flexibility", "stretch"), WorkoutType.FLEXIBILITY),
    (("recovery",), WorkoutType.RECOVERY),
]

# Focus labels tried when a day has no "Focus:" label
FOCUS_KEYWORDS = ["Upper Body", "Lower Body", "Core", "Cardio", "Full Body", "Rest"]

# Wider vocabulary used to backfill an empty focus from the description
BACKFILL_FOCUS_KEYWORDS = [
    "Upper Body", "Lower Body", "Core", "Cardio", "Full Body",
    "Strength", "Flexibility", "HIIT", "Endurance", "Rest",
]

DEFAULT_FOCUS = "Workout"
REST_FOCUS = "Rest"
ALL_EXERCISES_PHRASE = "all exercises"


def classify_workout_type(text: Optional[str]) -> str:
    lowered = (text or '').lower()
    for keywords, workout_type in WORKOUT_TYPE_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return workout_type.value
    return WorkoutType.STRENGTH.value


def _first_keyword(text: Optional[str], vocabulary: Sequence[str]) -> Optional[str]:
    lowered = (text or '').lower()
    for label in vocabulary:
        if label.lower() in lowered:
            return label
    return None


def classify_focus(text: Optional[str]) -> str:
    return _first_keyword(text, FOCUS_KEYWORDS) or DEFAULT_FOCUS


def empty_day(day: str) -> DayWorkout:
    return DayWorkout(
        day=day,
        focus="",
        description="",
        workout_type=WorkoutType.STRENGTH.value,
        is_rest_day=False,
        exercises=[],
    )


def complete_week(week: Mapping[str, DayWorkout]) -> Dict[str, DayWorkout]:
    """All seven canonical days, in calendar order; missing ones synthesized"""
    missing = [day for day in DAY_NAMES if day not in week]
    if missing:
        logger.debug(f"Synthesizing missing days: {missing}")
    return {day: week[day] if day in week else empty_day(day) for day in DAY_NAMES}


def backfill_focus(day: DayWorkout) -> DayWorkout:
    if day.focus:
        return day
    if day.is_rest_day:
        focus = REST_FOCUS
    else:
        focus = _first_keyword(day.description, BACKFILL_FOCUS_KEYWORDS) or DEFAULT_FOCUS
    return day.model_copy(update={"focus": focus})


def exercises_mentioned(description: str, exercises: Sequence[Exercise]) -> List[Exercise]:
    """
    Global exercises whose name appears in the description.

    Plain substring match: short names ("Row") can hit unrelated words.
    """
    lowered = (description or '').lower()
    if ALL_EXERCISES_PHRASE in lowered:
        return list(exercises)
    return [exercise for exercise in exercises if exercise.name.lower() in lowered]


def backfill_exercises(day: DayWorkout, exercises: Sequence[Exercise]) -> DayWorkout:
    if day.is_rest_day or day.exercises:
        return day
    matched = exercises_mentioned(day.description, exercises)
    if not matched:
        return day
    return day.model_copy(update={"exercises": [exercise.model_copy() for exercise in matched]})


def normalize_week(
    week: Mapping[str, DayWorkout],
    exercises: Sequence[Exercise],
) -> Dict[str, DayWorkout]:
    """Complete the week, then backfill focus labels and exercise lists"""
    completed = complete_week(week)
    return {
        name: backfill_exercises(backfill_focus(day), exercises)
        for name, day in completed.items()
    }
