import pytest

from fitplan.core.exceptions import NotFoundError
from fitplan.schemas.exercise import ExerciseDifficulty
from fitplan.services.exercises import (
    DIFFICULTY_MET,
    calculate_exercise_calories,
    filter_exercises,
    get_exercise,
    get_exercises_by_difficulty,
    get_exercises_by_muscle_group,
    load_exercises,
)


class TestCatalog:
    def test_loads_unique_ids(self):
        ids = [e.id for e in load_exercises()]
        assert len(ids) == len(set(ids))
        assert "push_up" in ids

    def test_get_exercise(self):
        assert get_exercise("squat").difficulty == ExerciseDifficulty.INTERMEDIATE

    def test_get_unknown_exercise(self):
        with pytest.raises(NotFoundError):
            get_exercise("moonwalk")


class TestMuscleGroupFilter:
    def test_case_insensitive(self):
        assert get_exercises_by_muscle_group("CHEST").ids() == get_exercises_by_muscle_group("chest").ids()

    def test_substring_match(self):
        # "back" also matches "lower_back"
        ids = get_exercises_by_muscle_group("back").ids()
        assert "plank" in ids
        assert "pull_up" in ids

    def test_preserves_catalog_order(self):
        catalog_order = [e.id for e in load_exercises()]
        ids = get_exercises_by_muscle_group("chest").ids()
        assert ids == [i for i in catalog_order if i in ids]

    def test_restartable(self):
        selection = get_exercises_by_muscle_group("glutes")
        assert list(selection) == list(selection)
        assert len(list(selection)) > 0

    def test_no_match(self):
        assert list(get_exercises_by_muscle_group("tail")) == []


class TestDifficultyFilter:
    @pytest.mark.parametrize("difficulty", list(ExerciseDifficulty))
    def test_only_matching(self, difficulty):
        selection = list(get_exercises_by_difficulty(difficulty))
        assert selection
        assert all(e.difficulty == difficulty for e in selection)


class TestFilterExercises:
    def test_no_filters_returns_catalog(self):
        assert filter_exercises() == list(load_exercises())

    def test_equipment_any_of(self):
        ids = {e.id for e in filter_exercises(equipment=["pull_up_bar", "treadmill"])}
        assert ids == {"pull_up", "treadmill_run"}

    def test_target_muscle_exact(self):
        # exact values, unlike the category substring match
        ids = {e.id for e in filter_exercises(target_muscle=["back"])}
        assert "plank" not in ids
        assert "pull_up" in ids

    def test_combined(self):
        result = filter_exercises(category="chest", difficulty=ExerciseDifficulty.BEGINNER)
        assert [e.id for e in result] == ["push_up"]


class TestExerciseCalories:
    @pytest.mark.parametrize("exercise_id,met", [
        ("push_up", 3),
        ("squat", 5),
        ("deadlift", 7),
    ])
    def test_met_by_difficulty(self, exercise_id, met):
        exercise = get_exercise(exercise_id)
        assert DIFFICULTY_MET[exercise.difficulty] == met
        assert calculate_exercise_calories(exercise, 60, 80) == met * 80

    def test_partial_hour(self):
        # 5 × 70 × 0.5
        assert calculate_exercise_calories(get_exercise("squat"), 30, 70) == 175

    def test_rounded(self):
        # 5 × 70 × 7/60 = 40.83
        assert calculate_exercise_calories(get_exercise("squat"), 7, 70) == 41
