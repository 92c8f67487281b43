"""Personalised plans built from the static goal templates.

The generator customises totals only: daily calories, macros and
hydration are replaced with values computed from the profile while meals,
foods and training days are returned exactly as authored.
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import TypeAdapter

from fitplan.core.config import settings
from fitplan.core.exceptions import InvalidInputError, TemplateNotFoundError
from fitplan.models.user import Goal
from fitplan.schemas.plan import MacroGrams, Plan, PlanTemplate
from fitplan.services.formatting import generate_id
from fitplan.services.metrics import (
    BodyStats,
    calculate_daily_calories,
    calculate_macros,
    calculate_water_intake,
)

logger = logging.getLogger(__name__)

_templates_adapter = TypeAdapter(dict[str, PlanTemplate])


@lru_cache(maxsize=None)
def load_plan_templates(path: Path | None = None) -> dict[str, PlanTemplate]:
    path = path or settings.plans_path
    templates = _templates_adapter.validate_json(Path(path).read_bytes())
    logger.info("Loaded plan templates for goals %s from %s", sorted(templates), path)
    return templates


def get_template(goal: Goal, templates: Optional[Mapping[str, PlanTemplate]] = None) -> PlanTemplate:
    templates = templates if templates is not None else load_plan_templates()
    template = templates.get(goal.value)
    if template is None:
        logger.warning("No plan template for goal %s", goal.value)
        raise TemplateNotFoundError(goal.value)
    return template


def generate_plan(
    profile,
    templates: Optional[Mapping[str, PlanTemplate]] = None,
    now: Optional[datetime] = None,
) -> Plan:
    """Overlay calorie, macro and hydration targets on the goal's template.

    ``profile`` is anything shaped like ``UserProfile``. Raises
    ``InvalidInputError`` when no goal is set and ``TemplateNotFoundError``
    when the goal has no template.
    """
    if profile.goal is None:
        raise InvalidInputError("Select a goal before generating a plan", field="goal")

    now = now or datetime.now(timezone.utc)
    template = get_template(profile.goal, templates)

    stats = BodyStats.from_profile(profile, today=now.date())
    targets = calculate_daily_calories(stats)
    macros = calculate_macros(targets.target, profile.goal)
    hydration = calculate_water_intake(profile.weight, profile.activity_level)

    # deep copy so the cached template is never mutated
    diet = template.diet.model_copy(
        deep=True,
        update={
            "daily_calories": targets.target,
            "daily_macros": MacroGrams(protein=macros.protein, carbs=macros.carbs, fat=macros.fat),
            "hydration": hydration,
        },
    )

    plan = Plan(
        id=generate_id(f"plan_{profile.user_id}"),
        user_id=str(profile.user_id),
        goal=profile.goal,
        diet=diet,
        training=template.training.model_copy(deep=True),
        created_at=now,
        updated_at=now,
    )
    logger.debug("Generated plan %s for user %s (%s kcal)", plan.id, profile.user_id, targets.target)
    return plan
