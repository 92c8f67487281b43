import pytest
from datetime import date

from fitplan.core.exceptions import InvalidInputError
from fitplan.models.user import ActivityLevel, Gender, Goal
from fitplan.services.metrics import (
    ACTIVITY_MULTIPLIER,
    GOAL_CALORIE_MODIFIER,
    MACRO_SPLIT,
    BMICategory,
    BodyStats,
    CalorieTargets,
    Macros,
    calculate_age,
    calculate_bmi,
    calculate_bmr,
    calculate_daily_calories,
    calculate_macros,
    calculate_tdee,
    calculate_water_intake,
    get_bmi_category,
    round_half_up,
)


def _stats(**overrides) -> BodyStats:
    values = dict(
        gender=Gender.MALE,
        weight=80,
        height=180,
        age=30,
        activity_level=ActivityLevel.MODERATE,
        goal=Goal.LOSE_WEIGHT,
    )
    values.update(overrides)
    return BodyStats(**values)


# ── rounding ──────────────────────────────────────────────────────────────

class TestRoundHalfUp:
    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_one_decimal(self):
        assert round_half_up(22.857, 1) == 22.9


# ── calculate_age ─────────────────────────────────────────────────────────

class TestCalculateAge:
    def test_age_normal(self):
        assert calculate_age(date(1990, 1, 1), today=date(2026, 2, 26)) == 36

    def test_age_birthday_today(self):
        assert calculate_age(date(1990, 2, 26), today=date(2026, 2, 26)) == 36

    def test_birthday_yesterday_matches_year_difference(self):
        assert calculate_age(date(1990, 2, 25), today=date(2026, 2, 26)) == 36

    def test_birthday_tomorrow_is_one_less_than_year_difference(self):
        assert calculate_age(date(1990, 2, 27), today=date(2026, 2, 26)) == 35

    def test_age_leap_year_birthday(self):
        assert calculate_age(date(2000, 2, 29), today=date(2026, 2, 28)) == 25

    def test_defaults_to_today(self):
        today = date.today()
        assert calculate_age(date(today.year - 20, 1, 1)) == 20


# ── calculate_bmi / get_bmi_category ──────────────────────────────────────

class TestCalculateBMI:
    def test_reference_value(self):
        # 70 / 1.75² = 22.857… → 22.9
        assert calculate_bmi(70, 175) == 22.9

    def test_increases_with_weight(self):
        assert calculate_bmi(90, 175) > calculate_bmi(70, 175)

    def test_decreases_with_height(self):
        assert calculate_bmi(70, 190) < calculate_bmi(70, 160)

    @pytest.mark.parametrize("height", [0, -170])
    def test_non_positive_height_rejected(self, height):
        with pytest.raises(InvalidInputError):
            calculate_bmi(70, height)


class TestBMICategory:
    @pytest.mark.parametrize("bmi,category", [
        (16.0, BMICategory.UNDERWEIGHT),
        (18.49, BMICategory.UNDERWEIGHT),
        (18.5, BMICategory.NORMAL),
        (24.999, BMICategory.NORMAL),
        (25, BMICategory.OVERWEIGHT),
        (29.9, BMICategory.OVERWEIGHT),
        (30, BMICategory.OBESE),
        (41.2, BMICategory.OBESE),
    ])
    def test_boundaries(self, bmi, category):
        assert get_bmi_category(bmi) == category


# ── calculate_bmr ─────────────────────────────────────────────────────────

class TestCalculateBMR:
    def test_male_bmr(self):
        # 88.362 + 1071.76 + 863.82 − 170.31 = 1853.632
        assert calculate_bmr(_stats()) == 1854

    def test_female_bmr(self):
        # 447.593 + 9.247×60 + 3.098×165 − 4.330×25 = 1405.333
        assert calculate_bmr(_stats(gender=Gender.FEMALE, weight=60, height=165, age=25)) == 1405

    def test_other_uses_female_equation(self):
        female = calculate_bmr(_stats(gender=Gender.FEMALE))
        assert calculate_bmr(_stats(gender=Gender.OTHER)) == female

    def test_heavier_person_higher_bmr(self):
        assert calculate_bmr(_stats(weight=90)) > calculate_bmr(_stats(weight=60))

    def test_older_person_lower_bmr(self):
        assert calculate_bmr(_stats(age=20)) > calculate_bmr(_stats(age=50))

    def test_implausible_age_does_not_raise(self):
        assert isinstance(calculate_bmr(_stats(age=400)), int)


# ── calculate_tdee ────────────────────────────────────────────────────────

class TestCalculateTDEE:
    def test_moderate(self):
        # 1854 × 1.55 = 2873.7
        assert calculate_tdee(_stats()) == 2874

    @pytest.mark.parametrize("level,mult", [
        (ActivityLevel.SEDENTARY, 1.2),
        (ActivityLevel.LIGHT, 1.375),
        (ActivityLevel.MODERATE, 1.55),
        (ActivityLevel.ACTIVE, 1.725),
        (ActivityLevel.VERY_ACTIVE, 1.9),
    ])
    def test_each_level(self, level, mult):
        assert ACTIVITY_MULTIPLIER[level] == mult
        assert calculate_tdee(_stats(activity_level=level)) == round_half_up(1854 * mult)

    @pytest.mark.parametrize("level", list(ActivityLevel))
    def test_all_multipliers_covered(self, level):
        assert level in ACTIVITY_MULTIPLIER


# ── calculate_daily_calories ──────────────────────────────────────────────

class TestDailyCalories:
    def test_lose_weight_reports_deficit(self):
        t = calculate_daily_calories(_stats())
        assert t == CalorieTargets(bmr=1854, tdee=2874, target=2299, deficit=575)
        assert t.surplus is None

    def test_gain_weight_reports_surplus(self):
        t = calculate_daily_calories(_stats(goal=Goal.GAIN_WEIGHT))
        # 2874 × 1.2 = 3448.8
        assert t.target == 3449
        assert t.surplus == 575
        assert t.deficit is None

    def test_gain_muscle_reports_surplus(self):
        t = calculate_daily_calories(_stats(goal=Goal.GAIN_MUSCLE))
        # 2874 × 1.1 = 3161.4
        assert t.target == 3161
        assert t.surplus == 287

    def test_maintenance_reports_neither(self):
        t = calculate_daily_calories(_stats(goal=Goal.EXTRA_DIET))
        assert t.target == t.tdee == 2874
        assert t.deficit is None
        assert t.surplus is None

    def test_goal_required(self):
        with pytest.raises(InvalidInputError):
            calculate_daily_calories(_stats(goal=None))

    @pytest.mark.parametrize("goal", list(Goal))
    def test_all_goal_modifiers_covered(self, goal):
        assert goal in GOAL_CALORIE_MODIFIER
        assert goal in MACRO_SPLIT


# ── calculate_macros ──────────────────────────────────────────────────────

class TestCalculateMacros:
    def test_extra_diet_split(self):
        # 25/50/25 → 500/4, 1000/4, 500/9 = 55.6
        assert calculate_macros(2000, Goal.EXTRA_DIET) == Macros(protein=125, carbs=250, fat=56)

    def test_lose_weight_split(self):
        # 35/35/30 of 2299
        assert calculate_macros(2299, Goal.LOSE_WEIGHT) == Macros(protein=201, carbs=201, fat=77)

    @pytest.mark.parametrize("goal", list(Goal))
    def test_splits_sum_to_100(self, goal):
        assert sum(MACRO_SPLIT[goal]) == 100

    def test_grams_are_not_reconciled(self):
        m = calculate_macros(2299, Goal.LOSE_WEIGHT)
        assert m.protein * 4 + m.carbs * 4 + m.fat * 9 != 2299


# ── calculate_water_intake ────────────────────────────────────────────────

class TestWaterIntake:
    def test_active(self):
        # 2.8 + 0.5 + 0.2
        assert calculate_water_intake(80, ActivityLevel.ACTIVE) == 3.5

    def test_moderate_has_no_activity_bonus(self):
        assert calculate_water_intake(80, ActivityLevel.MODERATE) == 3.0

    def test_default_activity_is_moderate(self):
        assert calculate_water_intake(80) == 3.0

    def test_clamped_to_minimum(self):
        assert calculate_water_intake(30, ActivityLevel.SEDENTARY) == 1.5

    def test_clamped_to_maximum(self):
        assert calculate_water_intake(150, ActivityLevel.VERY_ACTIVE) == 4.0


# ── full pipeline ─────────────────────────────────────────────────────────

class _Profile:
    gender = Gender.MALE
    weight = 80
    height = 180
    birth_date = date(1996, 2, 26)
    activity_level = ActivityLevel.MODERATE
    goal = Goal.LOSE_WEIGHT


class TestFullPipeline:
    def test_from_profile(self):
        stats = BodyStats.from_profile(_Profile(), today=date(2026, 2, 26))
        assert stats.age == 30
        assert calculate_bmr(stats) == 1854
        assert calculate_tdee(stats) == 2874
        assert calculate_daily_calories(stats).target == 2299
