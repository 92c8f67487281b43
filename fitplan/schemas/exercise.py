from enum import Enum

from pydantic import BaseModel, Field

from fitplan.schemas.plan import LocalizedString


class ExerciseDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class RepScheme(BaseModel):
    lose_weight: str
    gain_muscle: str
    gain_weight: str


class Exercise(BaseModel):
    id: str
    name: LocalizedString
    category: str
    target_muscle: list[str]
    equipment: list[str]
    difficulty: ExerciseDifficulty
    sets: int
    reps: RepScheme
    rest_seconds: int
    instructions: list[LocalizedString] = Field(default_factory=list)
    tips: list[LocalizedString] = Field(default_factory=list)
    photo_url: str
    video_url: str
    thumbnail_url: str
    calories: float  # burned per set


class ExerciseCalories(BaseModel):
    exercise_id: str
    minutes: float
    weight_kg: float
    calories: int
