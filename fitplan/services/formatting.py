"""Small display and identity helpers shared by the routers."""

import re
import secrets
from datetime import date, datetime
from typing import Mapping, Union

from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency

# app language -> full locale used for number and date formatting
_LOCALES = {
    "en": "en_US",
    "ar": "ar_SA",
}

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _resolve_locale(locale: str) -> str:
    return _LOCALES.get(locale, locale)


def interpolate(template: str, variables: Mapping[str, object]) -> str:
    """Replace ``{{key}}`` placeholders.

    Unknown keys, ``None`` values and values that render as an empty string
    leave the placeholder as it is.
    """

    def _sub(match: re.Match) -> str:
        value = variables.get(match.group(1))
        text = str(value) if value is not None else ""
        return text or match.group(0)

    return _PLACEHOLDER.sub(_sub, template)


def format_currency(amount: float, currency: str = "SAR", locale: str = "en") -> str:
    # whole currency units only, e.g. "SAR 300"
    return babel_format_currency(
        amount,
        currency,
        format="¤\xa0#,##0",
        locale=_resolve_locale(locale),
        currency_digits=False,
    )


def format_date(value: Union[date, datetime, str], locale: str = "en") -> str:
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return babel_format_date(value, format="long", locale=_resolve_locale(locale))


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL.match(email))


def generate_id(prefix: str = "") -> str:
    token = secrets.token_hex(6)
    return f"{prefix}_{token}" if prefix else token
