"""
Section splitting and classification.

Two grammars:
- workout plans are split on markdown headings; the heading line is the title
- nutrition plans are split on blank lines; the literal header the generation
  prompt asks for (``MEALS:``, ``HYDRATION:``...) identifies the chunk
"""

import re
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .base import NUTRITION_DAY_LINE_PATTERN, canonical_day, clean_line

logger = logging.getLogger(__name__)

_HEADING_SPLIT = re.compile(r'(?m)^[ \t]*#+[ \t]+')
_BLANK_LINE_SPLIT = re.compile(r'\n\s*\n')


class SectionKind(str, Enum):
    SCHEDULE = "schedule"
    WARMUP = "warmup"
    COOLDOWN = "cooldown"
    NUTRITION = "nutrition"
    RECOVERY = "recovery"
    DAY = "day"
    MEALS = "meals"
    GUIDELINES = "guidelines"
    HYDRATION = "hydration"
    SUPPLEMENTS = "supplements"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Section:
    kind: SectionKind
    title: Optional[str]
    body: str
    day: Optional[str] = None
    # True when a headerless chunk carries on the previous section
    continued: bool = False


# Workout titles, first match wins
_SCHEDULE_TITLES = ("weekly schedule", "workout schedule", "weekly workout plan")

# Nutrition headers as emitted by the generation prompt, first match wins
_NUTRITION_HEADERS: List[Tuple[str, SectionKind]] = [
    ("WEEKLY NUTRITION SCHEDULE:", SectionKind.SCHEDULE),
    ("MEALS:", SectionKind.MEALS),
    ("NUTRITION GUIDELINES:", SectionKind.GUIDELINES),
    ("HYDRATION:", SectionKind.HYDRATION),
    ("SUPPLEMENTS", SectionKind.SUPPLEMENTS),
]


def split_markdown_sections(text: str) -> List[Tuple[Optional[str], str]]:
    """
    Split on markdown headings into (title, body) pairs.

    Text before the first heading, or the whole document when it has no
    headings, comes back as an untitled section.
    """
    chunks = _HEADING_SPLIT.split(text)
    sections = []

    preamble = chunks[0]
    if preamble.strip():
        sections.append((None, preamble))

    for chunk in chunks[1:]:
        title, _, body = chunk.partition('\n')
        sections.append((title.strip(), body))

    return sections


def split_blank_line_chunks(text: str) -> List[str]:
    """Split on blank lines, dropping empty chunks"""
    return [chunk.strip() for chunk in _BLANK_LINE_SPLIT.split(text) if chunk.strip()]


def classify_workout_title(title: Optional[str]) -> Tuple[SectionKind, Optional[str]]:
    """
    Route a workout section title to its handler.

    Returns:
        Tuple of (kind, day). An untitled section is treated as a schedule.
    """
    if title is None:
        return SectionKind.SCHEDULE, None

    lowered = title.lower()

    if any(phrase in lowered for phrase in _SCHEDULE_TITLES):
        return SectionKind.SCHEDULE, None
    if "warm" in lowered and "up" in lowered:
        return SectionKind.WARMUP, None
    if "cool" in lowered and "down" in lowered:
        return SectionKind.COOLDOWN, None
    if "nutrition" in lowered or "diet" in lowered:
        return SectionKind.NUTRITION, None
    if "recovery" in lowered or "rest" in lowered:
        return SectionKind.RECOVERY, None

    day = canonical_day(title)
    if day:
        return SectionKind.DAY, day

    return SectionKind.UNKNOWN, None


def classify_nutrition_chunk(chunk: str) -> SectionKind:
    """Route a blank-line chunk by its leading header"""
    head = clean_line(chunk.split('\n', 1)[0]).lstrip('#').strip()

    for header, kind in _NUTRITION_HEADERS:
        if head.startswith(header):
            return kind

    if NUTRITION_DAY_LINE_PATTERN.match(head):
        return SectionKind.SCHEDULE

    return SectionKind.UNKNOWN


def workout_sections(text: str) -> List[Section]:
    """Split and classify a workout plan; unrecognized sections are dropped"""
    sections = []

    for title, body in split_markdown_sections(text):
        kind, day = classify_workout_title(title)
        if kind is SectionKind.UNKNOWN:
            logger.debug(f"Dropping unrecognized workout section: {title!r}")
            continue
        sections.append(Section(kind=kind, title=title, body=body, day=day))

    return sections


def nutrition_sections(text: str) -> List[Section]:
    """
    Split and classify a nutrition plan.

    A chunk without a recognized header continues the previous section;
    leading headerless chunks are dropped.
    """
    sections: List[Section] = []
    previous: Optional[SectionKind] = None

    for chunk in split_blank_line_chunks(text):
        kind = classify_nutrition_chunk(chunk)

        if kind is SectionKind.UNKNOWN:
            if previous is None:
                logger.debug("Dropping headerless nutrition chunk before any section")
                continue
            sections.append(Section(kind=previous, title=None, body=chunk, continued=True))
            continue

        title, _, rest = chunk.partition('\n')
        title = clean_line(title).lstrip('#').strip()

        if kind is SectionKind.SCHEDULE and NUTRITION_DAY_LINE_PATTERN.match(title):
            # The day line itself is schedule content
            body = chunk
        else:
            # Text after the header's colon belongs to the body
            inline = title.split(':', 1)[1].strip() if ':' in title else ''
            body = f"{inline}\n{rest}" if inline else rest

        sections.append(Section(kind=kind, title=title, body=body))
        previous = kind

    return sections
