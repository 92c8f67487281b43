from datetime import date

from pydantic import BaseModel

from fitplan.models.user import SubscriptionStatus, SubscriptionTier


class PackageRead(BaseModel):
    tier: SubscriptionTier
    name: str
    price: int
    price_display: str
    currency: str
    period: str
    popular: bool
    features: list[str]
    limitations: list[str]


class SubscriptionCreate(BaseModel):
    tier: SubscriptionTier
    auto_renew: bool = True


class SubscriptionRead(BaseModel):
    tier: SubscriptionTier
    status: SubscriptionStatus
    start_date: date
    end_date: date
    auto_renew: bool
    is_active: bool
    end_date_display: str
