"""Date and time rules.

Dates are parsed with ``datetime.fromisoformat`` plus a few common textual
formats. Aware datetimes are normalized to naive UTC so they compare with
naive ones. The argument ``now`` stands for the current time.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any

from ruleforge.rules.utils import require_argument, split_params
from ruleforge.types import ConfigurationError, RuleParam, RuleState

FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%m/%d/%Y %H:%M",
    "%d %B %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%b %d, %Y",
)

TIME_PATTERN = re.compile(r"^(0[0-9]|1[0-9]|2[0-3]):[0-5][0-9]:[0-5][0-9]$")


def parse_date(value: Any) -> datetime | None:
    """Parse ``value`` to a naive UTC datetime, or return None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        parsed = _parse_text(value.strip())
        if parsed is None:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _parse_text(text: str) -> datetime | None:
    if text.lower() == "now":
        return datetime.now(timezone.utc)
    iso = text[:-1] + "+00:00" if text.endswith(("Z", "z")) else text
    try:
        return datetime.fromisoformat(iso)
    except ValueError:
        pass
    for fmt in FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _date_argument(rule: str, param: RuleParam) -> datetime:
    bound = parse_date(param)
    if bound is None:
        raise ConfigurationError(f"Please provide a valid date argument for the {rule} rule, got {param!r}")
    return bound


def is_date(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|date``: coerces the value to an ISO 8601 string."""
    if not value:
        return RuleState(passes=False, value=value)
    parsed = parse_date(value)
    if parsed is None:
        return RuleState(passes=False, value=value)
    return RuleState(passes=True, value=parsed.isoformat(), type="date")


def before(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``before:2020-11-11`` or ``before:now``"""
    parsed = parse_date(value)
    if parsed is None:
        return RuleState(passes=False, value=value)
    bound = _date_argument("before", param)
    return RuleState(passes=parsed < bound, value=value)


def after(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``after:2020-11-11`` or ``after:now``"""
    parsed = parse_date(value)
    if parsed is None:
        return RuleState(passes=False, value=value)
    bound = _date_argument("after", param)
    return RuleState(passes=parsed > bound, value=parsed.isoformat())


def date_between(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``dateBetween:2020-11-11,now``"""
    require_argument("dateBetween", param)
    bounds = split_params(param)
    if len(bounds) < 2:
        raise ConfigurationError("The dateBetween rule expects two dates")
    passes = after(value, bounds[0]).passes and before(value, bounds[1]).passes
    return RuleState(passes=passes, value=value)


def is_time(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|time``: 24-hour ``HH:mm:ss``; missing parts default to 00."""
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    padded = value
    while len(padded.split(":")) < 3:
        padded += ":00"
    return RuleState(passes=bool(TIME_PATTERN.match(padded)), value=padded)
