from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, Field

from fitplan.models.tracking import DrinkType
from fitplan.services.hydration import HydrationStatus


class HydrationEntryCreate(BaseModel):
    amount_ml: int = Field(gt=0, le=2000)
    drink_type: DrinkType = DrinkType.WATER


class HydrationEntryRead(BaseModel):
    id: int
    amount_ml: int
    drink_type: DrinkType
    consumed_on: date
    consumed_at: datetime

    model_config = {"from_attributes": True}


class HydrationSummary(BaseModel):
    day: date
    intake_ml: int
    goal_ml: int
    percentage: float
    status: HydrationStatus
    message: str
    entries: list[HydrationEntryRead]


class ProgressEntryCreate(BaseModel):
    recorded_on: Optional[date] = None
    weight: Optional[float] = Field(default=None, ge=30, le=300)
    body_fat: Optional[float] = Field(default=None, ge=5, le=50)
    chest: Optional[float] = Field(default=None, ge=50, le=200)
    waist: Optional[float] = Field(default=None, ge=50, le=200)
    hips: Optional[float] = Field(default=None, ge=50, le=200)
    arms: Optional[float] = Field(default=None, ge=20, le=80)
    thighs: Optional[float] = Field(default=None, ge=30, le=100)
    notes: Optional[str] = Field(default=None, max_length=500)


class ProgressEntryRead(BaseModel):
    id: int
    recorded_on: date
    weight: Optional[float] = None
    body_fat: Optional[float] = None
    chest: Optional[float] = None
    waist: Optional[float] = None
    hips: Optional[float] = None
    arms: Optional[float] = None
    thighs: Optional[float] = None
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class SetLog(BaseModel):
    reps: int = Field(ge=1, le=100)
    weight: Optional[float] = Field(default=None, ge=0, le=500)
    duration: Optional[int] = Field(default=None, ge=1, le=3600)
    completed: bool


class ExerciseLog(BaseModel):
    exercise_id: str = Field(min_length=1)
    sets: list[SetLog]
    completed: bool


class WorkoutSessionCreate(BaseModel):
    workout_id: str = Field(min_length=1)
    performed_on: Optional[date] = None
    exercises: list[ExerciseLog] = Field(default_factory=list)
    duration_minutes: int = Field(ge=1, le=300)
    calories_burned: int = Field(ge=0, le=2000)
    notes: Optional[str] = Field(default=None, max_length=500)


class WorkoutSessionRead(BaseModel):
    id: int
    workout_id: str
    performed_on: date
    exercises: list[ExerciseLog]
    duration_minutes: int
    calories_burned: int
    notes: Optional[str] = None

    model_config = {"from_attributes": True}


class ActivitySummaryRead(BaseModel):
    total_workouts: int
    total_calories_burned: int
    total_minutes: int
    average_workout_duration: float
    start_weight: Optional[float] = None
    current_weight: Optional[float] = None
    weight_change: Optional[float] = None

    model_config = {"from_attributes": True}
