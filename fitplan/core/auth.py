from datetime import datetime, timedelta, timezone

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from pwdlib import PasswordHash
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fitplan.core.config import settings
from fitplan.core.database import get_db_session
from fitplan.models.user import Subscription, SubscriptionTier, User, UserProfile
from fitplan.services.subscription import has_required_tier

pwd_hash = PasswordHash.recommended()

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_hash.verify(plain_password, hashed_password)


def hash_password(password: str) -> str:
    return pwd_hash.hash(password)


def _encode(data: dict, lifetime: timedelta, token_type: str) -> str:
    claims = dict(data)
    claims.update({"exp": datetime.now(timezone.utc) + lifetime, "type": token_type})
    return jwt.encode(claims, settings.secret_key, algorithm=settings.jwt_algorithm)


def create_access_token(data: dict) -> str:
    return _encode(data, timedelta(minutes=settings.access_token_expire_minutes), "access")


def create_refresh_token(data: dict) -> str:
    return _encode(data, timedelta(days=settings.refresh_token_expire_days), "refresh")


def create_tokens(user_id: int) -> dict:
    payload = {"sub": str(user_id)}
    return {
        "access_token": create_access_token(payload),
        "refresh_token": create_refresh_token(payload),
        "token_type": "bearer",
    }


def _decode_token(token: str, expected_type: str) -> int:
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise credentials_exception
    subject = payload.get("sub")
    if subject is None or payload.get("type") != expected_type:
        raise credentials_exception
    return int(subject)


def decode_refresh_token(token: str) -> int:
    return _decode_token(token, expected_type="refresh")


def ensure_active(user: User | None) -> User:
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return user


async def get_current_user(token: str = Depends(oauth2_scheme), db: AsyncSession = Depends(get_db_session)) -> User:
    user_id = _decode_token(token, expected_type="access")
    result = await db.execute(select(User).where(User.id == user_id))
    return ensure_active(result.scalar_one_or_none())


async def get_current_profile(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db_session),
) -> UserProfile:
    result = await db.execute(select(UserProfile).where(UserProfile.user_id == current_user.id))
    profile = result.scalar_one_or_none()
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")
    return profile


def require_subscription(tier: SubscriptionTier):
    """Dependency factory admitting users whose subscription covers ``tier``."""

    async def _check(
        current_user: User = Depends(get_current_user),
        db: AsyncSession = Depends(get_db_session),
    ) -> User:
        result = await db.execute(select(Subscription).where(Subscription.user_id == current_user.id))
        if not has_required_tier(result.scalar_one_or_none(), tier):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"An active {tier.value} subscription is required",
            )
        return current_user

    return _check
