"""
Schedule reconstruction

Builds per-day records from classified sections:
- inline schedules ("Monday: Upper Body - push-ups, rows"), one line per day
- per-day sections ("## Monday"), with their own exercise lists
- nutrition day blocks with one "- Breakfast: ..." line per meal
"""

import re
import logging
from copy import deepcopy
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .base import DAY_LINE_PATTERN, DAY_NAME_PATTERN, NUTRITION_DAY_LINE_PATTERN, clean_line, days_in
from .extractors import exercise_blocks, extract_exercises, parse_meal_stub
from .models import DayWorkout, Exercise, Meal, ScheduleEntry, ScheduleWorkout
from .normalizer import classify_focus, classify_workout_type
from .sections import Section

logger = logging.getLogger(__name__)

FOCUS_LABEL_PATTERN = re.compile(
    r'^[ \t]*(?:[-*][ \t]*)?(?:\*\*)?focus(?:\*\*)?\s*:(?:\*\*)?\s*(.+)$',
    re.IGNORECASE | re.MULTILINE,
)
_TITLE_SEPARATORS = ' \t:-–|*'


@dataclass
class _InlineDay:
    days: List[str]
    head: str
    lines: List[str] = field(default_factory=list)

    @property
    def description(self) -> str:
        return '\n'.join(line for line in self.lines if line)


def inline_schedule(body: str) -> Tuple[Dict[str, DayWorkout], List[ScheduleEntry]]:
    """
    Scan a schedule body for day-prefixed lines.

    Lines that follow a day line are appended to its description until the
    next day line or a blank line. A later line for the same day replaces the
    earlier one in the week map; the flat schedule keeps both.
    """
    entries: List[_InlineDay] = []
    current: Optional[_InlineDay] = None

    for line in body.split('\n'):
        cleaned = clean_line(line)
        if not cleaned:
            current = None
            continue

        match = DAY_LINE_PATTERN.match(cleaned)
        if match:
            head = match.group(2).strip()
            current = _InlineDay(days=days_in(match.group(1)), head=head, lines=[head])
            entries.append(current)
        elif current is not None:
            current.lines.append(line.strip())

    week: Dict[str, DayWorkout] = {}
    schedule: List[ScheduleEntry] = []

    for entry in entries:
        description = entry.description
        signal = entry.head or description
        workout_type = classify_workout_type(signal)
        # Exercises listed under the day line itself, e.g. "Exercises:" then bullets
        exercises = extract_exercises(description) if exercise_blocks(description) is not None else []

        for day in entry.days:
            week[day] = DayWorkout(
                day=day,
                focus=entry.head,
                description=description,
                workout_type=workout_type,
                is_rest_day="rest" in signal.lower(),
                exercises=[exercise.model_copy() for exercise in exercises],
            )
            schedule.append(ScheduleEntry(
                day=day,
                workouts=[ScheduleWorkout(type=workout_type, description=description)],
            ))

    if week:
        logger.debug(f"Inline schedule covered {len(week)} days")
    return week, schedule


def _title_remainder(title: Optional[str]) -> str:
    """'Monday: Upper Body' -> 'Upper Body'"""
    if not title:
        return ''
    return DAY_NAME_PATTERN.sub('', title, count=1).replace('**', '').strip(_TITLE_SEPARATORS)


def day_workout(section: Section) -> DayWorkout:
    """DayWorkout for a per-day section"""
    body = section.body

    label = FOCUS_LABEL_PATTERN.search(body)
    if label and label.group(1).replace('**', '').strip():
        focus = label.group(1).replace('**', '').strip()
    else:
        focus = classify_focus(f"{section.title or ''}\n{body}")

    return DayWorkout(
        day=section.day,
        focus=focus,
        description=_title_remainder(section.title),
        workout_type=classify_workout_type(body),
        is_rest_day="rest day" in body.lower() or "rest" in focus.lower(),
        exercises=extract_exercises(body),
    )


def merge_exercises(existing: Sequence[Exercise], found: Sequence[Exercise]) -> List[Exercise]:
    """Append exercises whose name is not yet present; first occurrence wins"""
    merged = list(existing)
    seen = {exercise.name.casefold() for exercise in merged}
    for exercise in found:
        key = exercise.name.casefold()
        if key in seen:
            continue
        seen.add(key)
        merged.append(exercise.model_copy())
    return merged


# ---------------------------------------------------------------------------
# Nutrition
# ---------------------------------------------------------------------------

def schedule_meals(
    body: str,
    current_days: Sequence[str] = (),
) -> Tuple[Dict[str, List[Meal]], List[str]]:
    """
    Stub meals per day from a schedule block.

    Meal lines before the block's first day line belong to ``current_days``,
    the days still open from the previous chunk. Returns the meals and the
    days open at the end of the block.
    """
    meals: Dict[str, List[Meal]] = {}
    days = list(current_days)

    for line in body.split('\n'):
        match = NUTRITION_DAY_LINE_PATTERN.match(clean_line(line))
        if match:
            days = days_in(match.group(1))
            continue

        meal = parse_meal_stub(line)
        if meal is None or not days:
            continue

        for day in days:
            meals.setdefault(day, []).append(meal.model_copy(deep=True))

    return meals, days



def merge_day_meals(
    week: Mapping[str, Sequence[Meal]],
    found: Mapping[str, Sequence[Meal]],
) -> Dict[str, List[Meal]]:
    merged = {day: list(meals) for day, meals in week.items()}
    for day, meals in found.items():
        merged.setdefault(day, []).extend(meals)
    return merged


def apply_meal_details(
    week: Mapping[str, Sequence[Meal]],
    details: Sequence[Meal],
) -> Dict[str, List[Meal]]:
    """
    Enrich stub meals with the detailed record of the same name.

    Fields set on the detail record overwrite the stub's; a detail whose name
    matches no stub is ignored.
    """
    by_name: Dict[str, dict] = {}
    for detail in details:
        by_name.setdefault(detail.name, {}).update(detail.model_dump(exclude_none=True, exclude={"name"}))

    enriched: Dict[str, List[Meal]] = {}
    for day, meals in week.items():
        enriched[day] = [
            meal.model_copy(update=deepcopy(by_name[meal.name])) if meal.name in by_name else meal
            for meal in meals
        ]

    unmatched = set(by_name) - {meal.name for meals in week.values() for meal in meals}
    if unmatched:
        logger.debug(f"Meal details without a scheduled meal: {sorted(unmatched)}")
    return enriched
