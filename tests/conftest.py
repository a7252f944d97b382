"""
Test fixtures for plan-ingestor.

Provides sample generated plans and a FastAPI TestClient for the parse routes.
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import plan_ingestor...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from plan_ingestor.main import app


# ---------------------------------------------------------------------------
# Core Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> TestClient:
    """Per-test FastAPI TestClient."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# Sample Plan Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_workout_plan() -> str:
    """Workout plan mixing an inline schedule with per-day sections."""
    return """# Your 4-Week Strength Plan

## Weekly Schedule
Monday: Upper Body - push-ups, rows
Tuesday: Lower Body
Wednesday: Rest day
Thursday: Cardio intervals
Friday: Full body - all exercises
Saturday & Sunday: Rest and light stretching

## Warm-up
- Jumping jacks: 2 minutes
- Arm circles, reps: 10 each direction

## Monday: Upper Body
Focus: Upper Body Strength
Exercises:
- Push-ups: sets: 3, reps: 12, rest: 60 seconds
- Dumbbell Rows: 3 sets of 10 reps, rest for 90 seconds

## Tuesday
**Exercises:**
- Squats 4x8
- Lunges: sets: 3, reps: 10 each leg
- Push-ups: sets: 2, reps: 15

## Cool-down
- Hamstring stretch: hold for 30 seconds
- Deep breathing

## Nutrition Tips
- Eat protein with every meal
- Stay hydrated

## Recovery
- Sleep 8 hours
"""


@pytest.fixture
def sample_nutrition_plan() -> str:
    """Nutrition plan in the layout the generation prompt asks for."""
    return """WEEKLY NUTRITION SCHEDULE:
Monday:
- Breakfast: Oatmeal Bowl - oats with fruit
- Lunch: Chicken Salad - grilled chicken with greens
- Dinner: Salmon & Rice
- Snacks: Greek Yogurt

Tuesday:
- Breakfast: Oatmeal Bowl - oats with fruit
- Lunch: Turkey Wrap

MEALS:
1. Oatmeal Bowl
- Calories: 350
- Protein: 12g
- Carbs: 60g
- Fats: 6g
- Ingredients: 1 cup oats, 1 banana,
  1 tbsp honey
- Instructions: Cook the oats.
  Top with banana and honey.
- Time of day: breakfast

2. Chicken Salad
- Calories: 450
- Time of day: lunch

3. Protein Shake
- Calories: 200
- Time of day: snack

NUTRITION GUIDELINES:
- Eat protein at every meal
- Limit added sugar

HYDRATION:
Drink at least 3 liters of water daily.

SUPPLEMENTS (if appropriate):
- Creatine 5g daily
"""
