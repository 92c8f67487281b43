"""Daily hydration progress against the recommended intake."""

import enum
from dataclasses import dataclass

from fitplan.models.user import Language
from fitplan.services.formatting import interpolate


class HydrationStatus(str, enum.Enum):
    GOAL_ACHIEVED = "goal_achieved"
    ALMOST_THERE = "almost_there"
    HALFWAY_THERE = "halfway_there"
    KEEP_GOING = "keep_going"


STATUS_MESSAGES: dict[Language, dict[HydrationStatus, str]] = {
    Language.EN: {
        HydrationStatus.GOAL_ACHIEVED: "Goal reached: {{intake}} of {{goal}} ml today.",
        HydrationStatus.ALMOST_THERE: "Almost there: {{remaining}} ml to go.",
        HydrationStatus.HALFWAY_THERE: "Halfway there: {{intake}} of {{goal}} ml.",
        HydrationStatus.KEEP_GOING: "Keep going: {{remaining}} ml left today.",
    },
    Language.AR: {
        HydrationStatus.GOAL_ACHIEVED: "تم تحقيق الهدف: {{intake}} من {{goal}} مل اليوم.",
        HydrationStatus.ALMOST_THERE: "أوشكت على الوصول: تبقى {{remaining}} مل.",
        HydrationStatus.HALFWAY_THERE: "في منتصف الطريق: {{intake}} من {{goal}} مل.",
        HydrationStatus.KEEP_GOING: "استمر: تبقى {{remaining}} مل اليوم.",
    },
}


@dataclass
class HydrationProgress:
    intake_ml: int
    goal_ml: int
    percentage: float
    status: HydrationStatus
    message: str


def hydration_status(percentage: float) -> HydrationStatus:
    if percentage >= 100:
        return HydrationStatus.GOAL_ACHIEVED
    if percentage >= 75:
        return HydrationStatus.ALMOST_THERE
    if percentage >= 50:
        return HydrationStatus.HALFWAY_THERE
    return HydrationStatus.KEEP_GOING


def hydration_progress(intake_ml: int, goal_liters: float, language: Language = Language.EN) -> HydrationProgress:
    goal_ml = int(round(goal_liters * 1000))
    percentage = min(intake_ml / goal_ml * 100, 100.0) if goal_ml > 0 else 100.0
    status = hydration_status(percentage)
    message = interpolate(
        STATUS_MESSAGES[language][status],
        {"intake": intake_ml, "goal": goal_ml, "remaining": max(goal_ml - intake_ml, 0)},
    )
    return HydrationProgress(
        intake_ml=intake_ml,
        goal_ml=goal_ml,
        percentage=round(percentage, 1),
        status=status,
        message=message,
    )
