"""Plan-text extraction engine: workout and nutrition plan parsers."""
from .models import (
    Day,
    DayNutrition,
    DayWorkout,
    Exercise,
    Meal,
    ParsedNutritionPlan,
    ParsedWorkoutPlan,
    TimeOfDay,
    WorkoutType,
)
from .nutrition_parser import NutritionPlanParser, parse_nutrition_plan
from .workout_parser import WorkoutPlanParser, parse_workout_plan

__all__ = [
    "Day",
    "DayNutrition",
    "DayWorkout",
    "Exercise",
    "Meal",
    "NutritionPlanParser",
    "ParsedNutritionPlan",
    "ParsedWorkoutPlan",
    "TimeOfDay",
    "WorkoutPlanParser",
    "WorkoutType",
    "parse_nutrition_plan",
    "parse_workout_plan",
]
