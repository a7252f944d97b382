"""
Parse endpoints for generated plan text

Provides POST /parse/workout-plan and POST /parse/nutrition-plan.
Both return the plan record with the camelCase field names the document store
and the weekly-schedule UI read (weekSchedule, isRestDay, timeOfDay...).

Parsing never fails: unrecognizable text yields the empty seven-day plan.
"""

import asyncio
import logging
from pydantic import BaseModel, Field
from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from plan_ingestor.config import settings
from plan_ingestor.parsers.nutrition_parser import parse_nutrition_plan
from plan_ingestor.parsers.workout_parser import parse_workout_plan

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request Models
# ---------------------------------------------------------------------------

class ParsePlanRequest(BaseModel):
    """Request model for the plan parse endpoints"""
    text: str = Field(
        ...,
        max_length=settings.MAX_PLAN_TEXT_LENGTH,
        description="Plan text as returned by the generation service",
    )


# ---------------------------------------------------------------------------
# API Endpoints
# ---------------------------------------------------------------------------

@router.post("/parse/workout-plan")
async def parse_workout_plan_text(request: ParsePlanRequest) -> JSONResponse:
    """
    Parse a generated workout plan.

    ## Response
    - schedule, exercises, warmup, cooldown, nutrition, recovery
    - weekSchedule: all seven days with focus, description, workoutType,
      isRestDay and exercises
    """
    if not request.text:
        raise HTTPException(status_code=400, detail="Text is required")

    plan = await asyncio.to_thread(parse_workout_plan, request.text)
    logger.info(f"Parsed workout plan: {len(plan.exercises)} exercises")
    return JSONResponse(plan.to_dict())


@router.post("/parse/nutrition-plan")
async def parse_nutrition_plan_text(request: ParsePlanRequest) -> JSONResponse:
    """
    Parse a generated nutrition plan.

    ## Response
    - weekSchedule: all seven days with their meals
    - guidelines, hydration, supplements
    """
    if not request.text:
        raise HTTPException(status_code=400, detail="Text is required")

    plan = await asyncio.to_thread(parse_nutrition_plan, request.text)
    logger.info(f"Parsed nutrition plan: {len(plan.guidelines)} guidelines")
    return JSONResponse(plan.to_dict())
