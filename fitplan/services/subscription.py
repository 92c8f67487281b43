"""Subscription packages and tier gating."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from fitplan.models.user import Subscription, SubscriptionStatus, SubscriptionTier

SUBSCRIPTION_PERIOD_DAYS = 30

# higher rank unlocks everything a lower rank does
TIER_RANK: dict[SubscriptionTier, int] = {
    SubscriptionTier.BASIC: 1,
    SubscriptionTier.VIP: 2,
}


@dataclass(frozen=True)
class SubscriptionPackage:
    tier: SubscriptionTier
    name_en: str
    name_ar: str
    price: int
    currency: str = "SAR"
    period: str = "month"
    popular: bool = False
    features: tuple[str, ...] = field(default_factory=tuple)
    limitations: tuple[str, ...] = field(default_factory=tuple)


SUBSCRIPTION_PACKAGES: dict[SubscriptionTier, SubscriptionPackage] = {
    SubscriptionTier.BASIC: SubscriptionPackage(
        tier=SubscriptionTier.BASIC,
        name_en="Basic Package",
        name_ar="الباقة الأساسية",
        price=300,
        features=(
            "personalizedWorkoutPlans",
            "dietNutritionGuidance",
            "progressTracking",
            "basicExerciseLibrary",
        ),
        limitations=(
            "noPersonalCoaching",
            "noAdvancedAnalytics",
            "limitedSupport",
        ),
    ),
    SubscriptionTier.VIP: SubscriptionPackage(
        tier=SubscriptionTier.VIP,
        name_en="VIP Package",
        name_ar="الباقة المميزة",
        price=550,
        popular=True,
        features=(
            "personalizedWorkoutPlans",
            "dietNutritionGuidance",
            "progressTracking",
            "completeExerciseLibrary",
            "personalCoachingSessions",
            "advancedAnalytics",
            "prioritySupport",
            "customMealPlans",
            "videoConsultations",
        ),
    ),
}


def is_subscription_active(subscription: Optional[Subscription], today: date | None = None) -> bool:
    if subscription is None:
        return False
    today = today or date.today()
    return subscription.status == SubscriptionStatus.ACTIVE and subscription.end_date >= today


def has_required_tier(
    subscription: Optional[Subscription],
    required: SubscriptionTier,
    today: date | None = None,
) -> bool:
    if not is_subscription_active(subscription, today):
        return False
    return TIER_RANK[subscription.tier] >= TIER_RANK[required]
