import logging
from datetime import date, timedelta

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.auth import get_current_user
from fitplan.core.config import settings
from fitplan.core.database import get_db_session
from fitplan.models.user import Language, Subscription, SubscriptionStatus, User
from fitplan.schemas.subscription import PackageRead, SubscriptionCreate, SubscriptionRead
from fitplan.services.formatting import format_currency, format_date
from fitplan.services.subscription import (
    SUBSCRIPTION_PACKAGES,
    SUBSCRIPTION_PERIOD_DAYS,
    is_subscription_active,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


def _to_read(subscription: Subscription, locale: str) -> SubscriptionRead:
    return SubscriptionRead(
        tier=subscription.tier,
        status=subscription.status,
        start_date=subscription.start_date,
        end_date=subscription.end_date,
        auto_renew=subscription.auto_renew,
        is_active=is_subscription_active(subscription),
        end_date_display=format_date(subscription.end_date, locale=locale),
    )


async def _get_subscription(user: User, db: AsyncSession) -> Subscription | None:
    result = await db.execute(select(Subscription).where(Subscription.user_id == user.id))
    return result.scalar_one_or_none()


@router.get("/packages", response_model=list[PackageRead])
async def list_packages(locale: Language = Language(settings.default_locale)):
    return [
        PackageRead(
            tier=package.tier,
            name=package.name_ar if locale == Language.AR else package.name_en,
            price=package.price,
            price_display=format_currency(package.price, package.currency, locale=locale.value),
            currency=package.currency,
            period=package.period,
            popular=package.popular,
            features=list(package.features),
            limitations=list(package.limitations),
        )
        for package in SUBSCRIPTION_PACKAGES.values()
    ]


@router.post("", response_model=SubscriptionRead, status_code=status.HTTP_201_CREATED)
async def subscribe(
    data: SubscriptionCreate,
    locale: Language = Language(settings.default_locale),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    """Start or replace the caller's subscription for one billing period."""
    today = date.today()
    subscription = await _get_subscription(current_user, db)
    if subscription is None:
        subscription = Subscription(user_id=current_user.id)
        db.add(subscription)

    subscription.tier = data.tier
    subscription.status = SubscriptionStatus.ACTIVE
    subscription.start_date = today
    subscription.end_date = today + timedelta(days=SUBSCRIPTION_PERIOD_DAYS)
    subscription.auto_renew = data.auto_renew

    await db.flush()
    await db.refresh(subscription)
    logger.info("User %s subscribed to %s", current_user.id, data.tier.value)
    return _to_read(subscription, locale.value)


@router.get("/me", response_model=SubscriptionRead)
async def my_subscription(
    locale: Language = Language(settings.default_locale),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    subscription = await _get_subscription(current_user, db)
    if subscription is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No subscription")
    return _to_read(subscription, locale.value)


@router.delete("/me", response_model=SubscriptionRead)
async def cancel_subscription(
    locale: Language = Language(settings.default_locale),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
):
    subscription = await _get_subscription(current_user, db)
    if subscription is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No subscription")

    subscription.status = SubscriptionStatus.CANCELLED
    subscription.auto_renew = False
    await db.flush()
    await db.refresh(subscription)
    return _to_read(subscription, locale.value)
