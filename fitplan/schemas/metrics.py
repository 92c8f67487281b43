from pydantic import BaseModel, Field
from typing import Optional

from fitplan.models.user import ActivityLevel, Goal
from fitplan.services.metrics import BMICategory


class CalorieTargetsRead(BaseModel):
    bmr: int
    tdee: int
    target: int
    deficit: Optional[int] = None
    surplus: Optional[int] = None

    model_config = {"from_attributes": True}


class MacrosRead(BaseModel):
    protein: int
    carbs: int
    fat: int

    model_config = {"from_attributes": True}


class BMIRead(BaseModel):
    bmi: float
    category: BMICategory


class ProfileMetricsRead(BaseModel):
    age: int
    bmi: float
    bmi_category: BMICategory
    calories: Optional[CalorieTargetsRead] = None
    macros: Optional[MacrosRead] = None
    water_liters: float


class BMIRequest(BaseModel):
    weight: float = Field(ge=30, le=300)
    height: float = Field(ge=100, le=250)


class MacrosRequest(BaseModel):
    calories: float = Field(gt=0)
    goal: Goal


class WaterRequest(BaseModel):
    weight: float = Field(ge=30, le=300)
    activity_level: ActivityLevel = ActivityLevel.MODERATE


class WaterRead(BaseModel):
    liters: float
