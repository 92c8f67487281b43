from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from fitplan.models.user import Goal


class MealTime(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class LocalizedString(BaseModel):
    en: str
    ar: str


class MacroGrams(BaseModel):
    protein: float
    carbs: float
    fat: float


class FoodPortion(BaseModel):
    name: LocalizedString
    quantity_g: float
    calories: float


class Meal(BaseModel):
    id: str
    time: MealTime
    name: LocalizedString
    foods: list[FoodPortion]
    total_calories: float
    total_macros: MacroGrams
    preparation_time: int
    instructions: list[LocalizedString] = Field(default_factory=list)


class DietPlan(BaseModel):
    id: str
    goal: Goal
    meals: list[Meal]
    daily_calories: int
    daily_macros: MacroGrams
    hydration: float
    notes: list[LocalizedString] = Field(default_factory=list)


class PlannedExercise(BaseModel):
    exercise_id: str
    sets: int
    reps: str
    rest_seconds: int


class WorkoutDay(BaseModel):
    day: str
    exercises: list[PlannedExercise]
    total_duration: int
    target_muscles: list[str]


class TrainingPlan(BaseModel):
    id: str
    goal: Goal
    days: dict[str, WorkoutDay]
    weekly_schedule: list[str]
    notes: list[LocalizedString] = Field(default_factory=list)


class PlanTemplate(BaseModel):
    diet: DietPlan
    training: TrainingPlan


class Plan(PlanTemplate):
    id: str
    user_id: str
    goal: Goal
    created_at: datetime
    updated_at: datetime
