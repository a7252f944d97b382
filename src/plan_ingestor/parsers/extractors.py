"""
Entity extraction

Line-level recovery of exercises, warm-up/cool-down items, meals and flat tip
lists from a block of bulleted or numbered text. Every extractor is a pure
function of its input block; "nothing found" is an empty list or None.
"""

import re
import logging
from typing import Callable, List, Optional

from .base import (
    BULLET_PATTERN,
    HEADING_PATTERN,
    ORDINAL_PATTERN,
    clean_line,
    first_match,
    first_non_empty,
)
from .models import CooldownItem, Exercise, Meal, TimeOfDay, WarmupItem

logger = logging.getLogger(__name__)

# Field values stop at a comma or the end of the line
_VALUE = r'([^,\n]+)'

SETS_PATTERNS = [
    re.compile(r'(?<!\d)(\d+)\s*[x×]\s*\d+', re.IGNORECASE),  # "3x12"
    re.compile(r'\bsets?\s*:\s*(\d+)', re.IGNORECASE),  # "sets: 3"
    re.compile(r'(?<!\d)(\d+)\s*sets?\b', re.IGNORECASE),  # "3 sets"
    re.compile(r'\bsets\s+(\d+)', re.IGNORECASE),  # "sets 3"
]

REPS_PATTERNS = [
    re.compile(r'(?<!\d)\d+\s*[x×]\s*(\d+(?:\s*[-–]\s*\d+)?)', re.IGNORECASE),  # "3x8-10"
    re.compile(r'\breps?\s*:\s*' + _VALUE, re.IGNORECASE),  # "reps: 12"
    re.compile(r'(?<!\d)(\d+(?:\s*[-–]\s*\d+)?)\s*reps?\b', re.IGNORECASE),  # "8-10 reps"
    re.compile(r'\breps\s+(\d[^,\n]*)', re.IGNORECASE),  # "reps 12"
]

REST_PATTERNS = [
    re.compile(r'\brest\s+for\s+' + _VALUE, re.IGNORECASE),  # "rest for 60 seconds"
    re.compile(r'\brest\s*:\s*' + _VALUE, re.IGNORECASE),  # "rest: 60 seconds"
    re.compile(r'(?<!\d)(\d+\s*(?:seconds?|secs?|s|minutes?|mins?))\s+rest\b', re.IGNORECASE),  # "60s rest"
    re.compile(r'\brest\s+(\d[^,\n]*)', re.IGNORECASE),  # "rest 90 seconds"
]

DURATION_LABEL_PATTERN = re.compile(r'\bduration\s*:?\s*' + _VALUE, re.IGNORECASE)
DURATION_FOR_PATTERN = re.compile(r'\bfor\s+' + _VALUE, re.IGNORECASE)
TIME_VALUE_PATTERN = re.compile(
    r'(?<!\d)(\d+(?:\s*[-–]\s*\d+)?\s*(?:seconds?|secs?|minutes?|mins?)(?:\s+each\s+\w+)?)',
    re.IGNORECASE,
)
INSTRUCTIONS_PATTERN = re.compile(r'\b(?:instructions|notes?)\s*:\s*(.+)$', re.IGNORECASE)
MUSCLE_GROUP_PATTERN = re.compile(r'\b(?:muscle\s*groups?|targets?)\s*:\s*' + _VALUE, re.IGNORECASE)

# Name ends at the first ':' or ',' or ' - '
_NAME_SPLIT = re.compile(r':|,|\s[-–]\s')
# "Squats 3x10", "Squats 3 sets of 10" -> "Squats"
_NAME_METRIC_SPLIT = re.compile(r'(?<!\s)\s+\(?\d+\s*(?:[x×]\s*\d|sets?\b|reps?\b)', re.IGNORECASE)
_NAME_LABEL_PATTERN = re.compile(r'\bname\s*:\s*([^,\n]+)', re.IGNORECASE)

# Bullet "names" that are really labels of the day, not exercises
_NON_EXERCISE_LABELS = {
    "focus", "description", "notes", "note", "type", "workout type", "goal",
    "intensity", "duration", "rest", "sets", "reps", "instructions",
}

# "Exercises:", "**Workout:**", "Main workout:"
_EXERCISE_DELIMITER = re.compile(
    r'^(?:main\s+)?(?:exercises|workout)(?:\s*\([^)\n]*\))?\s*:',
    re.IGNORECASE,
)
# "Warm-up:", "Cool down:", "Nutrition:", "Recovery:"
_EXERCISE_TERMINATOR = re.compile(
    r'^(?:warm[- ]?up|cool[- ]?down|nutrition|recovery)(?:\s+\w+)?(?:\s*\([^)\n]*\))?\s*:',
    re.IGNORECASE,
)

# Numbered entry at the start of a line: "1. Squats"
_ORDINAL_LINE = re.compile(r'(?m)^[ \t]*\d+\.\s+')
_BLANK_LINES = re.compile(r'\n\s*\n')

# "- Breakfast: Oatmeal Bowl - oats with fruit"
MEAL_STUB_PATTERN = re.compile(
    r'^\s*[-*]\s*(?:\*\*)?(Breakfast|Lunch|Dinner|Snacks?)(?:\*\*)?\s*:(?:\*\*)?(.*)$',
    re.IGNORECASE,
)
# Name and description of a meal stub: "Oatmeal Bowl - oats with fruit"
_MEAL_DESCRIPTION_SPLIT = re.compile(r'(?<!\s)\s+[-–]\s+')
_MEAL_BLOCK_SPLIT = re.compile(r'(?m)^[ \t]*(?:\*\*)?\d+\.\s+')
_MEAL_FIELD_PATTERN = re.compile(
    r'^[-*]\s*(?:\*\*)?(calories|protein|carbs|fats|ingredients|instructions|time of day)(?:\*\*)?\s*:(?:\*\*)?\s*(.*)$',
    re.IGNORECASE,
)
_MEAL_SCALAR_FIELDS = {"calories", "protein", "carbs", "fats"}
_INGREDIENT_SPLIT = re.compile(r',|\n')


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def bullet_items(block: str) -> List[str]:
    """Text of every bullet line in block, marker stripped"""
    items = []
    for line in block.split('\n'):
        match = BULLET_PATTERN.match(line)
        if match and match.group(1).strip():
            items.append(match.group(1).strip())
    return items


def _clean_value(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.replace('**', '').strip().rstrip('.;)').strip()
    return value or None


def _leading_name(text: str) -> str:
    """Name part of an entry: before the first separator, ordinal stripped"""
    text = ORDINAL_PATTERN.sub('', text.replace('**', '').strip())
    name = _NAME_SPLIT.split(text, 1)[0]
    name = _NAME_METRIC_SPLIT.split(name, 1)[0]
    return name.strip(' *-–')


def _is_label_name(name: str) -> bool:
    return name.lower() in _NON_EXERCISE_LABELS


def _exercise_from_text(name: str, text: str) -> Exercise:
    sets = first_match(SETS_PATTERNS, text)
    instructions = first_match([INSTRUCTIONS_PATTERN], text)
    return Exercise(
        name=name,
        sets=int(sets) if sets else None,
        reps=_clean_value(first_match(REPS_PATTERNS, text)),
        rest=_clean_value(first_match(REST_PATTERNS, text)),
        duration=_clean_value(first_match([DURATION_LABEL_PATTERN], text)),
        instructions=instructions.strip() if instructions else None,
        muscle_group=_clean_value(first_match([MUSCLE_GROUP_PATTERN], text)),
    )


# ---------------------------------------------------------------------------
# Exercises
# ---------------------------------------------------------------------------

def parse_bullet_exercises(block: str) -> List[Exercise]:
    """One exercise per bullet line; fields recovered from the line itself"""
    exercises = []
    for item in bullet_items(block):
        name = _leading_name(item)
        if not name or _is_label_name(name):
            continue
        rest_of_line = item[len(item.split(':', 1)[0]):] if ':' in item else item
        exercises.append(_exercise_from_text(name, rest_of_line))
    return exercises


def _chunk_exercise(chunk: str) -> Optional[Exercise]:
    chunk = chunk.strip()
    if not chunk:
        return None

    label = _NAME_LABEL_PATTERN.search(chunk)
    if label:
        name = label.group(1).replace('**', '').strip()
    else:
        name = _leading_name(clean_line(chunk.split('\n', 1)[0]))

    if not name or _is_label_name(name):
        return None
    return _exercise_from_text(name, chunk)


def _has_metrics(exercise: Exercise) -> bool:
    return any([exercise.sets, exercise.reps, exercise.rest, exercise.duration])


def parse_chunk_exercises(block: str) -> List[Exercise]:
    """
    Fallback for blocks without bullets.

    Numbered entries ("1. Squats") always yield an exercise. Prose outside
    the numbered list, e.g. an intro line, is split on blank lines and a
    chunk is kept only when some metric (sets, reps, rest, duration) was
    recovered from it.
    """
    first = _ORDINAL_LINE.search(block)
    prose = block[:first.start()] if first else block
    numbered = _ORDINAL_LINE.split(block[first.start():])[1:] if first else []

    exercises = []
    for chunk in _BLANK_LINES.split(prose):
        exercise = _chunk_exercise(chunk)
        if exercise and _has_metrics(exercise):
            exercises.append(exercise)

    for chunk in numbered:
        exercise = _chunk_exercise(chunk)
        if exercise:
            exercises.append(exercise)

    if exercises:
        logger.debug(f"Chunk fallback recovered {len(exercises)} exercises")

    return exercises


def exercise_blocks(body: str) -> Optional[List[str]]:
    """
    Blocks of lines following an ``Exercises:``/``Workout:`` delimiter.

    A block ends at a markdown heading or a warm-up/cool-down/nutrition/
    recovery line. Returns None when the body has no delimiter at all.
    """
    blocks: List[str] = []
    buffer: List[str] = []
    collecting = False
    seen_delimiter = False

    for line in body.split('\n'):
        cleaned = clean_line(line)

        if _EXERCISE_DELIMITER.match(cleaned):
            if buffer:
                blocks.append('\n'.join(buffer))
            buffer = []
            collecting = True
            seen_delimiter = True
            continue

        if collecting and (HEADING_PATTERN.match(line) or _EXERCISE_TERMINATOR.match(cleaned)):
            blocks.append('\n'.join(buffer))
            buffer = []
            collecting = False
            continue

        if collecting:
            buffer.append(line)

    if buffer:
        blocks.append('\n'.join(buffer))

    return blocks if seen_delimiter else None


EXERCISE_STRATEGIES: List[Callable[[str], List[Exercise]]] = [
    parse_bullet_exercises,
    parse_chunk_exercises,
]


def extract_exercises(body: str) -> List[Exercise]:
    """Exercises of one day body; the whole body is used when it has no delimiter"""
    blocks = exercise_blocks(body)
    if blocks is None:
        blocks = [body]

    exercises: List[Exercise] = []
    for block in blocks:
        exercises.extend(first_non_empty(EXERCISE_STRATEGIES, block))
    return exercises


# ---------------------------------------------------------------------------
# Warm-up / cool-down
# ---------------------------------------------------------------------------

def _duration_of(text: str) -> Optional[str]:
    return _clean_value(first_match([DURATION_LABEL_PATTERN, DURATION_FOR_PATTERN, TIME_VALUE_PATTERN], text))


def extract_warmup(body: str) -> List[WarmupItem]:
    items = []
    for item in bullet_items(body):
        name = _leading_name(item)
        if name:
            items.append(WarmupItem(
                name=name,
                duration=_duration_of(item),
                reps=_clean_value(first_match(REPS_PATTERNS, item)),
            ))
    if not items and body.strip():
        return [WarmupItem(name=body.strip())]
    return items


def extract_cooldown(body: str) -> List[CooldownItem]:
    items = []
    for item in bullet_items(body):
        name = _leading_name(item)
        if name:
            items.append(CooldownItem(name=name, duration=_duration_of(item)))
    if not items and body.strip():
        return [CooldownItem(name=body.strip())]
    return items


# ---------------------------------------------------------------------------
# Flat lists
# ---------------------------------------------------------------------------

def extract_flat_list(body: str) -> List[str]:
    """Bullet lines of a section; a section with no bullets becomes one entry"""
    items = bullet_items(body)
    if items:
        return items
    text = body.strip()
    return [text] if text else []


# ---------------------------------------------------------------------------
# Meals
# ---------------------------------------------------------------------------

def normalize_time_of_day(value: Optional[str]) -> Optional[str]:
    """'Snacks' -> 'snack'; unknown values -> None"""
    if not value:
        return None
    lowered = value.strip().lower()
    if lowered == "snacks":
        return TimeOfDay.SNACK.value
    for slot in TimeOfDay:
        if lowered == slot.value:
            return slot.value
    for slot in TimeOfDay:
        if slot.value in lowered:
            return slot.value
    return None


def parse_meal_stub(line: str) -> Optional[Meal]:
    """Stub meal from an inline schedule line, or None if it is not one"""
    match = MEAL_STUB_PATTERN.match(line)
    if not match:
        return None
    parts = _MEAL_DESCRIPTION_SPLIT.split(match.group(2).replace('**', '').strip(), 1)
    name = parts[0].strip()
    if not name:
        return None
    description = parts[1].strip() if len(parts) > 1 else ''
    return Meal(
        name=name,
        description=description or None,
        time_of_day=normalize_time_of_day(match.group(1)),
    )


def _collect_continuation(lines: List[str], start: int, first: str):
    """Value starting on lines[start-1] plus following lines not starting with '- '"""
    parts = [first]
    index = start
    while index < len(lines):
        stripped = lines[index].strip()
        if stripped.startswith('- ') or stripped.startswith('* '):
            break
        parts.append(stripped)
        index += 1
    return ' '.join(p for p in parts if p), index


def _parse_meal_block(block: str) -> Optional[Meal]:
    lines = block.split('\n')
    name = clean_line(lines[0]).rstrip(':').strip()
    if not name:
        return None

    fields = {}
    index = 1
    while index < len(lines):
        match = _MEAL_FIELD_PATTERN.match(lines[index].strip())
        index += 1
        if not match:
            continue

        label = match.group(1).lower()
        value = match.group(2).strip()

        if label in _MEAL_SCALAR_FIELDS:
            fields[label] = value
        elif label == "ingredients":
            text, index = _collect_continuation(lines, index, value)
            fields["ingredients"] = [i.strip() for i in _INGREDIENT_SPLIT.split(text) if i.strip()]
        elif label == "instructions":
            text, index = _collect_continuation(lines, index, value)
            fields["instructions"] = text
        elif label == "time of day":
            time_of_day = normalize_time_of_day(value)
            if time_of_day:
                fields["time_of_day"] = time_of_day

    return Meal(name=name, **fields)


def parse_meal_details(body: str) -> List[Meal]:
    """Detailed meal records from a ``MEALS:`` section body"""
    meals = []
    for block in _MEAL_BLOCK_SPLIT.split(body)[1:]:
        meal = _parse_meal_block(block)
        if meal:
            meals.append(meal)
    return meals
