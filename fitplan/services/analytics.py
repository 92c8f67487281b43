from dataclasses import dataclass
from typing import Optional, Sequence

from fitplan.models.tracking import ProgressEntry, WorkoutSession


@dataclass
class ActivitySummary:
    total_workouts: int
    total_calories_burned: int
    total_minutes: int
    average_workout_duration: float
    start_weight: Optional[float]
    current_weight: Optional[float]
    weight_change: Optional[float]


def summarize_activity(
    sessions: Sequence[WorkoutSession],
    progress: Sequence[ProgressEntry],
) -> ActivitySummary:
    """Totals over workout sessions and the weight trend over progress entries."""
    total_minutes = sum(s.duration_minutes for s in sessions)
    average = round(total_minutes / len(sessions), 1) if sessions else 0.0

    weighed = sorted((p for p in progress if p.weight is not None), key=lambda p: (p.recorded_on, p.id))
    start = weighed[0].weight if weighed else None
    current = weighed[-1].weight if weighed else None
    change = round(current - start, 1) if weighed else None

    return ActivitySummary(
        total_workouts=len(sessions),
        total_calories_burned=sum(s.calories_burned for s in sessions),
        total_minutes=total_minutes,
        average_workout_duration=average,
        start_weight=start,
        current_weight=current,
        weight_change=change,
    )
