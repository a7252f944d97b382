"""Structured records from generated weekly workout and nutrition plans."""
from .parsers import parse_nutrition_plan, parse_workout_plan

__all__ = ["parse_nutrition_plan", "parse_workout_plan"]
