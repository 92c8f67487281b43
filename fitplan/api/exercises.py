from typing import Optional

from fastapi import APIRouter, Depends, Query

from fitplan.core.auth import get_current_profile
from fitplan.models.user import UserProfile
from fitplan.schemas.exercise import Exercise, ExerciseCalories, ExerciseDifficulty
from fitplan.services.exercises import calculate_exercise_calories, filter_exercises, get_exercise

router = APIRouter(prefix="/exercises", tags=["exercises"])


@router.get("", response_model=list[Exercise])
async def list_exercises(
    category: Optional[str] = None,
    difficulty: Optional[ExerciseDifficulty] = None,
    equipment: Optional[list[str]] = Query(default=None),
    target_muscle: Optional[list[str]] = Query(default=None),
):
    return filter_exercises(
        category=category,
        difficulty=difficulty,
        equipment=equipment,
        target_muscle=target_muscle,
    )


@router.get("/{exercise_id}", response_model=Exercise)
async def read_exercise(exercise_id: str):
    return get_exercise(exercise_id)


@router.get("/{exercise_id}/calories", response_model=ExerciseCalories)
async def exercise_calories(
    exercise_id: str,
    minutes: float = Query(gt=0, le=300),
    profile: UserProfile = Depends(get_current_profile),
):
    exercise = get_exercise(exercise_id)
    return ExerciseCalories(
        exercise_id=exercise.id,
        minutes=minutes,
        weight_kg=profile.weight,
        calories=calculate_exercise_calories(exercise, minutes, profile.weight),
    )
