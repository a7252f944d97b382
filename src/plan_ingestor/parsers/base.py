"""
Base Parser

Abstract base class for the plan parsers. Holds the patterns shared by every
stage and the single failure boundary around a parse call.
"""

import re
import logging
from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from .models import DAY_NAMES

logger = logging.getLogger(__name__)

PlanT = TypeVar("PlanT")

_DAY_ALTERNATION = "|".join(DAY_NAMES)

# Bullet line: "- Push-ups", "* Push-ups"
BULLET_PATTERN = re.compile(r'^\s*[*-]\s+(.*)$')
# Markdown heading: "## Monday"
HEADING_PATTERN = re.compile(r'^\s*#+\s+')
# Leading ordinal: "1. Push-ups"
ORDINAL_PATTERN = re.compile(r'^\s*\d+\.\s+')
# Any weekday name, whole word
DAY_NAME_PATTERN = re.compile(rf'\b({_DAY_ALTERNATION})\b', re.IGNORECASE)
# Day prefix of a line; several days may be joined: "Saturday & Sunday: Rest"
_DAY_LINE = rf'^((?:{_DAY_ALTERNATION})(?:\s*(?:&|,|\band\b)\s*(?:{_DAY_ALTERNATION}))*)\s*:(.*)$'
DAY_LINE_PATTERN = re.compile(_DAY_LINE, re.IGNORECASE)
# Nutrition plans emit day headers literally: "Monday:", never "monday:"
NUTRITION_DAY_LINE_PATTERN = re.compile(_DAY_LINE)
# Leading decoration on a line: bullet markers and markdown bold
_DECORATION_PATTERN = re.compile(r'^[\s*-]+')


def clean_line(line: str) -> str:
    """Strip bullet markers and markdown bold from a line"""
    line = _DECORATION_PATTERN.sub('', line.strip())
    return line.replace('**', '').strip()


def canonical_day(text: str) -> Optional[str]:
    """Return the canonical day name found in text, if any"""
    match = DAY_NAME_PATTERN.search(text or '')
    if match:
        return match.group(1).capitalize()
    return None


def days_in(text: str) -> list:
    """All canonical day names mentioned in text, in order of appearance, unique"""
    found = []
    for match in DAY_NAME_PATTERN.finditer(text or ''):
        day = match.group(1).capitalize()
        if day not in found:
            found.append(day)
    return found


def first_match(patterns, text: str) -> Optional[str]:
    """Try each pattern in order; return the first non-empty captured group"""
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            value = next((g for g in match.groups() if g), None)
            if value and value.strip():
                return value.strip()
    return None


def first_non_empty(strategies, *args: Any) -> list:
    """Run extractor strategies in order until one yields a non-empty result"""
    for strategy in strategies:
        result = strategy(*args)
        if result:
            return result
    return []


class BaseParser(ABC, Generic[PlanT]):
    """Abstract base class for plan parsers"""

    #: Name used in log messages
    plan_kind = "plan"

    def parse(self, text: Any) -> PlanT:
        """
        Parse plan text into a plan record. Never raises.

        Args:
            text: Raw document from the text-generation service

        Returns:
            The parsed plan, or the default plan if anything goes wrong
        """
        try:
            if text is None:
                text = ''
            if not isinstance(text, str):
                text = str(text)

            if not text.strip():
                logger.debug(f"Empty {self.plan_kind} text, returning default result")
                return self.default_result()

            return self._parse(text)

        except Exception as e:
            logger.exception(f"Failed to parse {self.plan_kind}: {e}")
            return self.default_result()

    @abstractmethod
    def _parse(self, text: str) -> PlanT:
        """Parse non-empty text. May raise; parse() handles it."""
        pass

    @abstractmethod
    def default_result(self) -> PlanT:
        """Canonical empty-but-complete result for this plan type"""
        pass
