"""Static exercise catalogue: loading, filtering and calorie estimates."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Sequence

from pydantic import TypeAdapter

from fitplan.core.config import settings
from fitplan.core.exceptions import NotFoundError
from fitplan.schemas.exercise import Exercise, ExerciseDifficulty
from fitplan.services.metrics import round_half_up

logger = logging.getLogger(__name__)

# Coarse MET per difficulty tier; an approximation, not a physiological model.
DIFFICULTY_MET: dict[ExerciseDifficulty, int] = {
    ExerciseDifficulty.BEGINNER: 3,
    ExerciseDifficulty.INTERMEDIATE: 5,
    ExerciseDifficulty.ADVANCED: 7,
}

_catalog_adapter = TypeAdapter(list[Exercise])


@lru_cache(maxsize=None)
def load_exercises(path: Path | None = None) -> tuple[Exercise, ...]:
    path = path or settings.exercises_path
    exercises = tuple(_catalog_adapter.validate_json(Path(path).read_bytes()))
    logger.info("Loaded %d exercises from %s", len(exercises), path)
    return exercises


class ExerciseSelection:
    """Lazy, order-preserving view over a catalogue.

    Every iteration re-runs the filter, so the same selection can be
    consumed any number of times.
    """

    def __init__(self, source: Sequence[Exercise], predicate: Callable[[Exercise], bool]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator[Exercise]:
        return (exercise for exercise in self._source if self._predicate(exercise))

    def ids(self) -> list[str]:
        return [exercise.id for exercise in self]


def get_exercises_by_muscle_group(
    muscle_group: str, catalog: Optional[Sequence[Exercise]] = None
) -> ExerciseSelection:
    needle = muscle_group.lower()
    return ExerciseSelection(
        catalog if catalog is not None else load_exercises(),
        lambda exercise: any(needle in muscle.lower() for muscle in exercise.target_muscle),
    )


def get_exercises_by_difficulty(
    difficulty: ExerciseDifficulty, catalog: Optional[Sequence[Exercise]] = None
) -> ExerciseSelection:
    return ExerciseSelection(
        catalog if catalog is not None else load_exercises(),
        lambda exercise: exercise.difficulty == difficulty,
    )


def filter_exercises(
    category: Optional[str] = None,
    difficulty: Optional[ExerciseDifficulty] = None,
    equipment: Optional[Iterable[str]] = None,
    target_muscle: Optional[Iterable[str]] = None,
    catalog: Optional[Sequence[Exercise]] = None,
) -> list[Exercise]:
    """
    Combine the catalogue filters used by the exercise browser.

    ``category`` is a substring match over target muscles; ``equipment`` and
    ``target_muscle`` match when the exercise shares any listed value.
    """
    exercises: Iterable[Exercise] = catalog if catalog is not None else load_exercises()

    if category:
        exercises = get_exercises_by_muscle_group(category, list(exercises))
    if difficulty:
        exercises = get_exercises_by_difficulty(difficulty, list(exercises))
    if equipment:
        wanted = set(equipment)
        exercises = [e for e in exercises if wanted.intersection(e.equipment)]
    if target_muscle:
        wanted = set(target_muscle)
        exercises = [e for e in exercises if wanted.intersection(e.target_muscle)]
    return list(exercises)


def get_exercise(exercise_id: str, catalog: Optional[Sequence[Exercise]] = None) -> Exercise:
    for exercise in catalog if catalog is not None else load_exercises():
        if exercise.id == exercise_id:
            return exercise
    raise NotFoundError("Exercise", exercise_id)


def calculate_exercise_calories(exercise: Exercise, duration_minutes: float, weight_kg: float) -> int:
    """Calories = MET × weight(kg) × hours."""
    met = DIFFICULTY_MET[exercise.difficulty]
    return int(round_half_up(met * weight_kg * (duration_minutes / 60)))
