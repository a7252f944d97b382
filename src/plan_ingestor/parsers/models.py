"""
Parser Models

Pydantic models for the plan records that the workout and nutrition parsers
output to. Attribute names are snake_case; the serialized names (aliases) are
the camelCase keys the document store and the weekly-schedule UI read.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field
from enum import Enum


class Day(str, Enum):
    """Canonical weekdays, in calendar order"""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"


DAY_NAMES: List[str] = [day.value for day in Day]


class WorkoutType(str, Enum):
    """Kind of training a day is dedicated to"""
    STRENGTH = "strength"
    CARDIO = "cardio"
    HIIT = "hiit"
    FLEXIBILITY = "flexibility"
    RECOVERY = "recovery"
    REST = "rest"


class TimeOfDay(str, Enum):
    """Slot a meal is eaten in"""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class PlanModel(BaseModel):
    """Shared config: accept field or alias names, store enum values"""
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)


class Exercise(PlanModel):
    """Exercise recovered from a bullet line or a numbered chunk"""
    name: str = Field(..., description="Exercise name as written in the plan")
    sets: Optional[int] = None
    reps: Optional[str] = Field(default=None, description="Reps as string to preserve '8-10', '10 each leg'")
    rest: Optional[str] = None
    duration: Optional[str] = None
    instructions: Optional[str] = None
    muscle_group: Optional[str] = Field(default=None, alias="muscleGroup")


class WarmupItem(PlanModel):
    name: str
    duration: Optional[str] = None
    reps: Optional[str] = None


class CooldownItem(PlanModel):
    name: str
    duration: Optional[str] = None


class ScheduleWorkout(PlanModel):
    """Flattened workout entry of the legacy schedule list"""
    type: str
    description: str


class ScheduleEntry(PlanModel):
    day: Day
    workouts: List[ScheduleWorkout] = Field(default_factory=list)


class DayWorkout(PlanModel):
    """One day of the weekly workout schedule"""
    day: Day
    focus: str = ""
    description: str = ""
    workout_type: WorkoutType = Field(default=WorkoutType.STRENGTH, alias="workoutType")
    is_rest_day: bool = Field(default=False, alias="isRestDay")
    exercises: List[Exercise] = Field(default_factory=list)


class Meal(PlanModel):
    """Meal from an inline schedule line, optionally enriched by a MEALS: block"""
    name: str
    description: Optional[str] = None
    calories: Optional[str] = None
    protein: Optional[str] = None
    carbs: Optional[str] = None
    fats: Optional[str] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[str] = None
    time_of_day: Optional[TimeOfDay] = Field(default=None, alias="timeOfDay")


class DayNutrition(PlanModel):
    day: Day
    meals: List[Meal] = Field(default_factory=list)


def _dump(model: BaseModel) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


class ParsedWorkoutPlan(PlanModel):
    """Result of parsing a workout plan document"""
    schedule: List[ScheduleEntry] = Field(default_factory=list)
    exercises: List[Exercise] = Field(default_factory=list, description="Global list, unique by name")
    warmup: List[WarmupItem] = Field(default_factory=list)
    cooldown: List[CooldownItem] = Field(default_factory=list)
    nutrition: List[str] = Field(default_factory=list)
    recovery: List[str] = Field(default_factory=list)
    week_schedule: Dict[str, DayWorkout] = Field(default_factory=dict, alias="weekSchedule")

    @classmethod
    def default(cls) -> "ParsedWorkoutPlan":
        """Empty plan with all seven days present"""
        return cls(week_schedule={name: DayWorkout(day=name) for name in DAY_NAMES})

    def to_dict(self) -> Dict[str, Any]:
        return _dump(self)


class ParsedNutritionPlan(PlanModel):
    """Result of parsing a nutrition plan document"""
    week_schedule: Dict[str, DayNutrition] = Field(default_factory=dict, alias="weekSchedule")
    guidelines: List[str] = Field(default_factory=list)
    hydration: List[str] = Field(default_factory=list)
    supplements: List[str] = Field(default_factory=list)

    @classmethod
    def default(cls) -> "ParsedNutritionPlan":
        """Empty plan with all seven days present"""
        return cls(week_schedule={name: DayNutrition(day=name) for name in DAY_NAMES})

    def to_dict(self) -> Dict[str, Any]:
        return _dump(self)
