import enum

from sqlalchemy import DateTime, String, func, ForeignKey, Date, Float, Integer, Enum, JSON, Index
from sqlalchemy.orm import Mapped, mapped_column
from fitplan.core.database import Base
from datetime import date, datetime


class DrinkType(str, enum.Enum):
    WATER = "water"
    TEA = "tea"
    COFFEE = "coffee"
    JUICE = "juice"
    OTHER = "other"


class HydrationEntry(Base):
    __tablename__ = "hydration_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"))
    amount_ml: Mapped[int] = mapped_column(Integer, nullable=False)
    drink_type: Mapped[DrinkType] = mapped_column(Enum(DrinkType), default=DrinkType.WATER, nullable=False)
    consumed_on: Mapped[date] = mapped_column(Date, nullable=False)
    consumed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("ix_hydration_user_day", "user_id", "consumed_on"),
    )


class ProgressEntry(Base):
    __tablename__ = "progress_entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    recorded_on: Mapped[date] = mapped_column(Date, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    body_fat: Mapped[float | None] = mapped_column(Float, nullable=True)
    chest: Mapped[float | None] = mapped_column(Float, nullable=True)
    waist: Mapped[float | None] = mapped_column(Float, nullable=True)
    hips: Mapped[float | None] = mapped_column(Float, nullable=True)
    arms: Mapped[float | None] = mapped_column(Float, nullable=True)
    thighs: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)


class WorkoutSession(Base):
    __tablename__ = "workout_sessions"

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), index=True)
    workout_id: Mapped[str] = mapped_column(String(100), nullable=False)
    performed_on: Mapped[date] = mapped_column(Date, nullable=False)
    duration_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    calories_burned: Mapped[int] = mapped_column(Integer, nullable=False)
    exercises: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    notes: Mapped[str | None] = mapped_column(String(500), nullable=True)
