"""
Nutrition Plan Parser

Turns a generated nutrition plan into a ParsedNutritionPlan. The generation
prompt asks for literal section headers (WEEKLY NUTRITION SCHEDULE:, MEALS:,
NUTRITION GUIDELINES:, HYDRATION:, SUPPLEMENTS), separated by blank lines.
"""

import logging
from typing import Dict, List

from .base import BaseParser
from .extractors import bullet_items, extract_flat_list, parse_meal_details
from .models import DAY_NAMES, DayNutrition, Meal, ParsedNutritionPlan
from .schedule import apply_meal_details, merge_day_meals, schedule_meals
from .sections import Section, SectionKind, nutrition_sections

logger = logging.getLogger(__name__)

_LIST_FIELDS = {
    SectionKind.GUIDELINES: "guidelines",
    SectionKind.HYDRATION: "hydration",
    SectionKind.SUPPLEMENTS: "supplements",
}


def _list_entries(section: Section) -> List[str]:
    # Continuation chunks only contribute their bullets
    if section.continued:
        return bullet_items(section.body)
    return extract_flat_list(section.body)


class NutritionPlanParser(BaseParser[ParsedNutritionPlan]):
    """Parser for generated weekly nutrition plans"""

    plan_kind = "nutrition plan"

    def default_result(self) -> ParsedNutritionPlan:
        return ParsedNutritionPlan.default()

    def _parse(self, text: str) -> ParsedNutritionPlan:
        sections = nutrition_sections(text)
        logger.debug(f"Nutrition plan split into {len(sections)} recognized chunks")
        if not sections:
            logger.info("No recognized headers in nutrition plan; every day is empty")

        week: Dict[str, List[Meal]] = {}
        details: List[Meal] = []
        open_days: List[str] = []
        lists: Dict[str, List[str]] = {name: [] for name in _LIST_FIELDS.values()}

        for section in sections:
            if section.kind is SectionKind.SCHEDULE:
                # A headerless chunk keeps filling the days left open by the previous one
                carried = open_days if section.continued else []
                meals, open_days = schedule_meals(section.body, carried)
                week = merge_day_meals(week, meals)

            elif section.kind is SectionKind.MEALS:
                details = details + parse_meal_details(section.body)

            elif section.kind in _LIST_FIELDS:
                name = _LIST_FIELDS[section.kind]
                lists[name] = lists[name] + _list_entries(section)

        week = apply_meal_details(week, details)
        logger.debug(
            f"Recovered {sum(len(m) for m in week.values())} scheduled meals, "
            f"{len(details)} meal details"
        )

        return ParsedNutritionPlan(
            week_schedule={
                day: DayNutrition(day=day, meals=week.get(day, []))
                for day in DAY_NAMES
            },
            **lists,
        )


def parse_nutrition_plan(text: str) -> ParsedNutritionPlan:
    """Parse a nutrition plan document. Never raises."""
    return NutritionPlanParser().parse(text)
