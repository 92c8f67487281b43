import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.auth import get_current_profile, get_current_user
from fitplan.core.database import get_db_session
from fitplan.models.user import User, UserProfile
from fitplan.schemas.metrics import CalorieTargetsRead, MacrosRead, ProfileMetricsRead
from fitplan.schemas.plan import Plan
from fitplan.schemas.user import (
    PreferencesRead,
    PreferencesUpdate,
    UserProfileCreate,
    UserProfileRead,
    UserProfileUpdate,
)
from fitplan.services.metrics import (
    BodyStats,
    calculate_bmi,
    calculate_daily_calories,
    calculate_macros,
    calculate_water_intake,
    get_bmi_category,
)
from fitplan.services.plan_generator import generate_plan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("", response_model=UserProfileRead, status_code=status.HTTP_201_CREATED)
async def create_profile(
    data: UserProfileCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    result = await db.execute(
        select(UserProfile).where(UserProfile.user_id == current_user.id)
    )
    if result.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Profile already exists",
        )

    profile = UserProfile(user_id=current_user.id, **data.model_dump())
    db.add(profile)
    await db.flush()
    await db.refresh(profile)
    logger.info("Created profile %s for user %s", profile.id, current_user.id)
    return profile


@router.get("", response_model=UserProfileRead)
async def get_profile(profile: UserProfile = Depends(get_current_profile)):
    return profile


@router.put("", response_model=UserProfileRead)
async def update_profile(
    data: UserProfileUpdate,
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(profile, field, value)

    await db.flush()
    await db.refresh(profile)
    return profile


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile(
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    await db.delete(profile)
    await db.flush()


@router.get("/metrics", response_model=ProfileMetricsRead)
async def get_metrics(profile: UserProfile = Depends(get_current_profile)):
    """Derived metrics, recomputed from the stored profile on every read.

    Calorie targets and macros are omitted until a goal is selected.
    """
    stats = BodyStats.from_profile(profile)
    bmi = calculate_bmi(profile.weight, profile.height)

    calories = macros = None
    if profile.goal is not None:
        targets = calculate_daily_calories(stats)
        calories = CalorieTargetsRead.model_validate(targets)
        macros = MacrosRead.model_validate(calculate_macros(targets.target, profile.goal))

    return ProfileMetricsRead(
        age=stats.age,
        bmi=bmi,
        bmi_category=get_bmi_category(bmi),
        calories=calories,
        macros=macros,
        water_liters=calculate_water_intake(profile.weight, profile.activity_level),
    )


@router.get("/plan", response_model=Plan)
async def get_plan(profile: UserProfile = Depends(get_current_profile)):
    return generate_plan(profile)


@router.get("/preferences", response_model=PreferencesRead)
async def get_preferences(profile: UserProfile = Depends(get_current_profile)):
    return profile


@router.put("/preferences", response_model=PreferencesRead)
async def update_preferences(
    data: PreferencesUpdate,
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(profile, field, value)
    await db.flush()
    await db.refresh(profile)
    return profile
