from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.auth import get_current_profile, get_current_user
from fitplan.core.database import get_db_session
from fitplan.models.tracking import HydrationEntry, ProgressEntry, WorkoutSession
from fitplan.models.user import User, UserProfile
from fitplan.schemas.tracking import (
    HydrationEntryCreate,
    HydrationEntryRead,
    HydrationSummary,
    ProgressEntryCreate,
    ProgressEntryRead,
    WorkoutSessionCreate,
    WorkoutSessionRead,
)
from fitplan.services.hydration import hydration_progress
from fitplan.services.metrics import calculate_water_intake

router = APIRouter(prefix="/tracking", tags=["tracking"])


# hydration days are UTC days, matching consumed_at
def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


async def _entries_for_day(user_id: int, day: date, db: AsyncSession) -> list[HydrationEntry]:
    result = await db.execute(
        select(HydrationEntry)
        .where(HydrationEntry.user_id == user_id, HydrationEntry.consumed_on == day)
        .order_by(HydrationEntry.id)
    )
    return list(result.scalars().all())


async def _hydration_summary(profile: UserProfile, db: AsyncSession) -> HydrationSummary:
    today = _utc_today()
    entries = await _entries_for_day(profile.user_id, today, db)
    progress = hydration_progress(
        sum(e.amount_ml for e in entries),
        calculate_water_intake(profile.weight, profile.activity_level),
        language=profile.language,
    )
    return HydrationSummary(
        day=today,
        intake_ml=progress.intake_ml,
        goal_ml=progress.goal_ml,
        percentage=progress.percentage,
        status=progress.status,
        message=progress.message,
        entries=[HydrationEntryRead.model_validate(e) for e in entries],
    )


@router.post("/hydration", response_model=HydrationSummary, status_code=status.HTTP_201_CREATED)
async def add_hydration(
    data: HydrationEntryCreate,
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    now = datetime.now(timezone.utc)
    entry = HydrationEntry(
        user_id=profile.user_id,
        amount_ml=data.amount_ml,
        drink_type=data.drink_type,
        consumed_on=now.date(),
        consumed_at=now,
    )
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return await _hydration_summary(profile, db)


@router.get("/hydration/today", response_model=HydrationSummary)
async def hydration_today(
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    return await _hydration_summary(profile, db)


@router.delete("/hydration/last", response_model=HydrationSummary)
async def remove_last_hydration(
    profile: UserProfile = Depends(get_current_profile),
    db: AsyncSession = Depends(get_db_session),
):
    entries = await _entries_for_day(profile.user_id, _utc_today(), db)
    if not entries:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No hydration entries today")
    await db.delete(entries[-1])
    await db.flush()
    return await _hydration_summary(profile, db)


@router.post("/progress", response_model=ProgressEntryRead, status_code=status.HTTP_201_CREATED)
async def add_progress(
    data: ProgressEntryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    values = data.model_dump()
    values["recorded_on"] = values["recorded_on"] or date.today()
    entry = ProgressEntry(user_id=current_user.id, **values)
    db.add(entry)
    await db.flush()
    await db.refresh(entry)
    return entry


@router.get("/progress", response_model=list[ProgressEntryRead])
async def list_progress(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    result = await db.execute(
        select(ProgressEntry)
        .where(ProgressEntry.user_id == current_user.id)
        .order_by(ProgressEntry.recorded_on, ProgressEntry.id)
    )
    return result.scalars().all()


@router.post("/workouts", response_model=WorkoutSessionRead, status_code=status.HTTP_201_CREATED)
async def add_workout_session(
    data: WorkoutSessionCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    session = WorkoutSession(
        user_id=current_user.id,
        workout_id=data.workout_id,
        performed_on=data.performed_on or date.today(),
        duration_minutes=data.duration_minutes,
        calories_burned=data.calories_burned,
        exercises=[exercise.model_dump() for exercise in data.exercises],
        notes=data.notes,
    )
    db.add(session)
    await db.flush()
    await db.refresh(session)
    return session


@router.get("/workouts", response_model=list[WorkoutSessionRead])
async def list_workout_sessions(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.user_id == current_user.id)
        .order_by(WorkoutSession.performed_on, WorkoutSession.id)
    )
    return result.scalars().all()
