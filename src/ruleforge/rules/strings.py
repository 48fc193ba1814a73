"""String rules: format checks, prefixes, lengths and casing."""

import re
from typing import Any

from ruleforge.rules.utils import (
    numeric_argument,
    parse_number,
    replace_spaces,
    require_argument,
    split_params,
    to_text,
)
from ruleforge.types import MissingRuleArgumentError, RuleParam, RuleState


# =============================================================================
# Format Patterns
# =============================================================================

EMAIL_PATTERN = re.compile(
    r"^(([^<>()\[\]\\.,;:\s@\"]+(\.[^<>()\[\]\\.,;:\s@\"]+)*)|(\".+\"))"
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$"
)

URL_PATTERN = re.compile(r"^(ftp|http|https)://[^ \"]+$")

PASSWORD_SPECIAL_CHARS = re.compile(r"[!@#$%^&*(),.?\":{}|<>]")

PASSWORD_MIN_LENGTH = 8


def email(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|email``"""
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    return RuleState(passes=bool(EMAIL_PATTERN.match(value)), value=value)


def url(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|url``"""
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    return RuleState(passes=bool(URL_PATTERN.match(value)), value=value)


def is_string(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    return RuleState(passes=isinstance(value, str), value=value)


def password(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """At least 8 characters with upper, lower, digit and special character."""
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    passes = (
        len(value) >= PASSWORD_MIN_LENGTH
        and re.search(r"[A-Z]", value) is not None
        and re.search(r"[a-z]", value) is not None
        and re.search(r"\d", value) is not None
        and PASSWORD_SPECIAL_CHARS.search(value) is not None
    )
    return RuleState(passes=passes, value=value)


# =============================================================================
# Length
# =============================================================================


def minlength(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``minlength:8``; non-strings fail."""
    limit = numeric_argument("minlength", param)
    passes = isinstance(value, str) and len(value) >= limit
    return RuleState(passes=passes, value=value)


def maxlength(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``maxlength:8``; non-strings pass."""
    limit = numeric_argument("maxlength", param)
    passes = len(value) <= limit if isinstance(value, str) else True
    return RuleState(passes=passes, value=value)


def length(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``length:9``: exact number of characters of a string or number."""
    size = parse_number(param)
    if size is None:
        raise MissingRuleArgumentError("length", "The length rule argument must be an integer")
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return RuleState(passes=False, value=value)
    return RuleState(passes=len(to_text(value)) == int(size), value=value)


def string_between(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``stringBetween:2,5``"""
    if not isinstance(param, str):
        raise MissingRuleArgumentError("between")
    bounds = split_params(param)
    if len(bounds) < 2:
        raise MissingRuleArgumentError("stringBetween", "The stringBetween rule expects two arguments")
    passes = minlength(value, bounds[0]).passes and maxlength(value, bounds[1]).passes
    return RuleState(passes=passes, value=value)


# =============================================================================
# Prefixes, suffixes and contents
# =============================================================================


def start_with(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``startWith:pre1,pre2``"""
    require_argument("startWith", param)
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    prefixes = split_params(param)
    return RuleState(passes=any(value.startswith(p) for p in prefixes), value=value)


def end_with(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``endWith:suf1,suf2``"""
    require_argument("endWith", param)
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    suffixes = split_params(param)
    return RuleState(passes=any(value.endswith(s) for s in suffixes), value=value)


def contains(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``contains:str1,str2``: every substring must be present."""
    require_argument("contains", param)
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    substrings = [replace_spaces(s) for s in split_params(param)]
    return RuleState(passes=all(s in value for s in substrings), value=value)


def excludes(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``excludes:-,@,&esp;``: none of the characters may appear."""
    require_argument("excludes", param)
    chars = [replace_spaces(c) for c in split_params(param)]
    if not chars:
        raise MissingRuleArgumentError("excludes")
    if not isinstance(value, str):
        return RuleState(passes=True, value=value)
    return RuleState(passes=not any(c in value for c in chars), value=value)


def start_with_upper(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    if not isinstance(value, str) or not value:
        return RuleState(passes=False, value=value)
    return RuleState(passes="A" <= value[0] <= "Z", value=value)


def start_with_lower(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    if not isinstance(value, str) or not value or value[0] == " ":
        return RuleState(passes=False, value=value)
    return RuleState(passes=value[0] == value[0].lower(), value=value)


def start_with_string(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """The first character must not be a digit."""
    if not isinstance(value, str) or not value or value[0] == " ":
        return RuleState(passes=False, value=value)
    return RuleState(passes=not value[0].isdigit(), value=value)


def end_with_string(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """The last character must not be a digit."""
    if not isinstance(value, str) or not value:
        return RuleState(passes=False, value=value)
    return RuleState(passes=not value[-1].isdigit(), value=value)


def has_letter(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    return RuleState(passes=any(ch.isalpha() for ch in value), value=value)


def upper(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    return RuleState(passes=value == value.upper(), value=value)


def lower(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    return RuleState(passes=value == value.lower(), value=value)
