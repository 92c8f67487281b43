"""BMI / BMR / TDEE calculator, goal calorie targets, macros and hydration."""

import enum
import math
from dataclasses import dataclass
from datetime import date
from typing import Optional

from fitplan.core.exceptions import InvalidInputError
from fitplan.models.user import ActivityLevel, Gender, Goal

ACTIVITY_MULTIPLIER: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

GOAL_CALORIE_MODIFIER: dict[Goal, float] = {
    Goal.LOSE_WEIGHT: 0.8,
    Goal.GAIN_WEIGHT: 1.2,
    Goal.GAIN_MUSCLE: 1.1,
    Goal.EXTRA_DIET: 1.0,
}

# percentage of daily calories: (protein, carbs, fat)
MACRO_SPLIT: dict[Goal, tuple[int, int, int]] = {
    Goal.LOSE_WEIGHT: (35, 35, 30),
    Goal.GAIN_WEIGHT: (25, 45, 30),
    Goal.GAIN_MUSCLE: (30, 40, 30),
    Goal.EXTRA_DIET: (25, 50, 25),
}

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

WATER_ML_PER_KG = 35
WATER_EXERCISE_BONUS_ML = 500
WATER_CLIMATE_BONUS_ML = 200
WATER_MIN_LITERS = 1.5
WATER_MAX_LITERS = 4.0


class BMICategory(str, enum.Enum):
    UNDERWEIGHT = "underweight"
    NORMAL = "normal"
    OVERWEIGHT = "overweight"
    OBESE = "obese"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round .5 away from zero for positive values, unlike ``round()``."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


@dataclass(frozen=True)
class BodyStats:
    gender: Gender
    weight: float
    height: float
    age: int
    activity_level: ActivityLevel
    goal: Optional[Goal] = None

    @classmethod
    def from_profile(cls, profile, today: date | None = None) -> "BodyStats":
        """Build stats from anything shaped like ``UserProfile``."""
        return cls(
            gender=profile.gender,
            weight=profile.weight,
            height=profile.height,
            age=calculate_age(profile.birth_date, today=today),
            activity_level=profile.activity_level,
            goal=profile.goal,
        )


@dataclass
class CalorieTargets:
    bmr: int
    tdee: int
    target: int
    deficit: Optional[int] = None
    surplus: Optional[int] = None


@dataclass
class Macros:
    protein: int
    carbs: int
    fat: int


def calculate_age(birth_date: date, today: date | None = None) -> int:
    if today is None:
        today = date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    if height_cm <= 0:
        raise InvalidInputError("Height must be positive", field="height")
    height_m = height_cm / 100
    return round_half_up(weight_kg / (height_m * height_m), 1)


def get_bmi_category(bmi: float) -> BMICategory:
    if bmi < 18.5:
        return BMICategory.UNDERWEIGHT
    if bmi < 25:
        return BMICategory.NORMAL
    if bmi < 30:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def calculate_bmr(stats: BodyStats) -> int:
    """
    Mifflin-St Jeor style equation with the revised Harris-Benedict
    coefficients.

    Male:           88.362 + 13.397 × weight + 4.799 × height − 5.677 × age
    Female / other: 447.593 + 9.247 × weight + 3.098 × height − 4.330 × age
    """
    if stats.gender == Gender.MALE:
        bmr = 88.362 + 13.397 * stats.weight + 4.799 * stats.height - 5.677 * stats.age
    else:
        bmr = 447.593 + 9.247 * stats.weight + 3.098 * stats.height - 4.330 * stats.age
    return int(round_half_up(bmr))


def calculate_tdee(stats: BodyStats) -> int:
    return int(round_half_up(calculate_bmr(stats) * ACTIVITY_MULTIPLIER[stats.activity_level]))


def calculate_daily_calories(stats: BodyStats) -> CalorieTargets:
    """
    Calorie target for the profile's goal.

    ``deficit`` is set only for goals below maintenance and ``surplus`` only
    for goals above it; maintenance reports neither.
    """
    if stats.goal is None:
        raise InvalidInputError("A goal is required to compute calorie targets", field="goal")

    bmr = calculate_bmr(stats)
    tdee = calculate_tdee(stats)
    modifier = GOAL_CALORIE_MODIFIER[stats.goal]
    target = int(round_half_up(tdee * modifier))

    result = CalorieTargets(bmr=bmr, tdee=tdee, target=target)
    if modifier < 1:
        result.deficit = tdee - target
    elif modifier > 1:
        result.surplus = target - tdee
    return result


def calculate_macros(calories: float, goal: Goal) -> Macros:
    # each macro is rounded on its own; grams need not add back up to calories
    protein_pct, carbs_pct, fat_pct = MACRO_SPLIT[goal]
    return Macros(
        protein=int(round_half_up(calories * protein_pct / 100 / KCAL_PER_GRAM_PROTEIN)),
        carbs=int(round_half_up(calories * carbs_pct / 100 / KCAL_PER_GRAM_CARBS)),
        fat=int(round_half_up(calories * fat_pct / 100 / KCAL_PER_GRAM_FAT)),
    )


def calculate_water_intake(weight_kg: float, activity_level: ActivityLevel = ActivityLevel.MODERATE) -> float:
    """Daily water recommendation in litres, clamped to a safe range."""
    base = weight_kg * WATER_ML_PER_KG / 1000
    active_bonus = 0.0
    if activity_level in (ActivityLevel.ACTIVE, ActivityLevel.VERY_ACTIVE):
        active_bonus = WATER_EXERCISE_BONUS_ML / 1000
    climate_bonus = WATER_CLIMATE_BONUS_ML / 1000

    total = round_half_up(base + active_bonus + climate_bonus, 1)
    return max(WATER_MIN_LITERS, min(WATER_MAX_LITERS, total))
