from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.auth import require_subscription
from fitplan.core.database import get_db_session
from fitplan.models.tracking import ProgressEntry, WorkoutSession
from fitplan.models.user import SubscriptionTier, User
from fitplan.schemas.tracking import ActivitySummaryRead
from fitplan.services.analytics import summarize_activity

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.get("/summary", response_model=ActivitySummaryRead)
async def activity_summary(
    current_user: User = Depends(require_subscription(SubscriptionTier.VIP)),
    db: AsyncSession = Depends(get_db_session),
):
    sessions = await db.execute(select(WorkoutSession).where(WorkoutSession.user_id == current_user.id))
    progress = await db.execute(select(ProgressEntry).where(ProgressEntry.user_id == current_user.id))
    return summarize_activity(sessions.scalars().all(), progress.scalars().all())
