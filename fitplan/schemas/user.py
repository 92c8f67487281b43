from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime, date
from typing import Optional

from fitplan.models.user import ActivityLevel, Gender, Goal, Language, Theme
from fitplan.services.metrics import calculate_age

MIN_AGE = 13
MAX_AGE = 100

NAME_PATTERN = r"^[a-zA-Z؀-ۿ\s]+$"
PHONE_PATTERN = r"^[+]?[(]?[\d\s\-()]{10,15}$"


def _check_birth_date(value: Optional[date]) -> Optional[date]:
    if value is None:
        return value
    age = calculate_age(value)
    if age < MIN_AGE or age > MAX_AGE:
        raise ValueError(f"Age must be between {MIN_AGE} and {MAX_AGE} years")
    return value


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)


class UserRead(BaseModel):
    id: int
    email: EmailStr
    is_active: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class TokenRefresh(BaseModel):
    refresh_token: str


class UserProfileCreate(BaseModel):
    first_name: str = Field(min_length=2, max_length=50, pattern=NAME_PATTERN)
    last_name: str = Field(min_length=2, max_length=50, pattern=NAME_PATTERN)
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    gender: Gender
    birth_date: date
    weight: float = Field(ge=30, le=300)
    height: float = Field(ge=100, le=250)
    goal: Optional[Goal] = None
    activity_level: ActivityLevel

    @field_validator("birth_date")
    @classmethod
    def _age_in_range(cls, value):
        return _check_birth_date(value)


class UserProfileUpdate(BaseModel):
    first_name: Optional[str] = Field(default=None, min_length=2, max_length=50, pattern=NAME_PATTERN)
    last_name: Optional[str] = Field(default=None, min_length=2, max_length=50, pattern=NAME_PATTERN)
    phone: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    gender: Optional[Gender] = None
    birth_date: Optional[date] = None
    weight: Optional[float] = Field(default=None, ge=30, le=300)
    height: Optional[float] = Field(default=None, ge=100, le=250)
    goal: Optional[Goal] = None
    activity_level: Optional[ActivityLevel] = None

    # omitted fields are left alone; only goal and phone may be cleared
    @field_validator(
        "first_name", "last_name", "gender", "birth_date", "weight", "height", "activity_level",
        mode="before",
    )
    @classmethod
    def _not_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("birth_date")
    @classmethod
    def _age_in_range(cls, value):
        return _check_birth_date(value)


class UserProfileRead(BaseModel):
    id: int
    user_id: int
    first_name: str
    last_name: str
    phone: Optional[str] = None
    gender: Gender
    birth_date: date
    weight: float
    height: float
    goal: Optional[Goal] = None
    activity_level: ActivityLevel

    model_config = {"from_attributes": True}


class PreferencesRead(BaseModel):
    language: Language
    theme: Theme
    notifications: bool

    model_config = {"from_attributes": True}


class PreferencesUpdate(BaseModel):
    language: Optional[Language] = None
    theme: Optional[Theme] = None
    notifications: Optional[bool] = None
