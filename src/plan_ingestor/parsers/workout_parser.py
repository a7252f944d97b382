"""
Workout Plan Parser

Turns a generated workout plan into a ParsedWorkoutPlan:
- splits the document on markdown headings
- routes each section by its title (schedule, warm-up, cool-down, nutrition,
  recovery, or a single day)
- rebuilds the week from inline schedule lines and per-day sections
- completes and backfills the week
"""

import logging
from typing import Dict, List

from .base import BaseParser
from .extractors import (
    exercise_blocks,
    extract_cooldown,
    extract_exercises,
    extract_flat_list,
    extract_warmup,
)
from .models import (
    CooldownItem,
    DayWorkout,
    Exercise,
    ParsedWorkoutPlan,
    ScheduleEntry,
    WarmupItem,
)
from .normalizer import normalize_week
from .schedule import day_workout, inline_schedule, merge_exercises
from .sections import SectionKind, workout_sections

logger = logging.getLogger(__name__)


class WorkoutPlanParser(BaseParser[ParsedWorkoutPlan]):
    """Parser for generated weekly workout plans"""

    plan_kind = "workout plan"

    def default_result(self) -> ParsedWorkoutPlan:
        return ParsedWorkoutPlan.default()

    def _parse(self, text: str) -> ParsedWorkoutPlan:
        sections = workout_sections(text)
        logger.debug(f"Workout plan split into {len(sections)} recognized sections")

        inline_week: Dict[str, DayWorkout] = {}
        day_week: Dict[str, DayWorkout] = {}
        schedule: List[ScheduleEntry] = []
        exercises: List[Exercise] = []
        warmup: List[WarmupItem] = []
        cooldown: List[CooldownItem] = []
        nutrition: List[str] = []
        recovery: List[str] = []

        for section in sections:
            if section.kind is SectionKind.SCHEDULE:
                week, entries = inline_schedule(section.body)
                inline_week = {**inline_week, **week}
                schedule = schedule + entries
                for day in week.values():
                    exercises = merge_exercises(exercises, day.exercises)
                # Exercise lists outside any day line still feed the global list
                if exercise_blocks(section.body) is not None:
                    exercises = merge_exercises(exercises, extract_exercises(section.body))

            elif section.kind is SectionKind.DAY:
                day = day_workout(section)
                day_week = {**day_week, section.day: day}
                exercises = merge_exercises(exercises, day.exercises)

            elif section.kind is SectionKind.WARMUP:
                warmup = warmup + extract_warmup(section.body)

            elif section.kind is SectionKind.COOLDOWN:
                cooldown = cooldown + extract_cooldown(section.body)

            elif section.kind is SectionKind.NUTRITION:
                nutrition = nutrition + extract_flat_list(section.body)

            elif section.kind is SectionKind.RECOVERY:
                recovery = recovery + extract_flat_list(section.body)

        if not inline_week and not day_week:
            logger.info("No schedule recognized in workout plan; every day is synthesized")

        # Per-day sections replace inline entries for the same day
        week = normalize_week({**inline_week, **day_week}, exercises)

        return ParsedWorkoutPlan(
            schedule=schedule,
            exercises=exercises,
            warmup=warmup,
            cooldown=cooldown,
            nutrition=nutrition,
            recovery=recovery,
            week_schedule=week,
        )


def parse_workout_plan(text: str) -> ParsedWorkoutPlan:
    """Parse a workout plan document. Never raises."""
    return WorkoutPlanParser().parse(text)
