"""General-purpose rules: presence, membership, comparison, structure.

``between`` and ``size`` are composite: they dispatch on the type hint or the
value and report an alias so the message of the specialized rule is used.
"""

import json
import re
from typing import Any, Mapping

from ruleforge.rules.dates import date_between
from ruleforge.rules.files import file_between, is_file, max_file_size
from ruleforge.rules.numeric import is_number, max_rule, min_rule
from ruleforge.rules.strings import length, string_between
from ruleforge.rules.utils import (
    parse_file_size,
    parse_number,
    replace_pipes,
    split_params,
    to_text,
)
from ruleforge.types import ConfigurationError, MissingRuleArgumentError, RuleParam, RuleState

TRUTHY_TEXT = ("true", "1", "yes")
BOOLEAN_TEXT = ("true", "false", "1", "0", "yes", "no")


def required(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """Present and not empty: zero and False count as present."""
    if value is None:
        return RuleState(passes=False, value=value)
    if isinstance(value, str):
        return RuleState(passes=value.strip() != "", value=value)
    if isinstance(value, (list, tuple, set, Mapping)):
        return RuleState(passes=len(value) > 0, value=value)
    return RuleState(passes=True, value=value)


def nullable(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """Always passes; an empty value makes the rest of the chain pass too."""
    return RuleState(passes=True, value=value)


def in_list(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``in:draft,published``"""
    if not isinstance(param, str) or param == "":
        raise MissingRuleArgumentError("in", "The in rule parameter must be a non-empty string")
    choices = split_params(param)
    return RuleState(passes=to_text(value) in choices, value=value)


def size(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``size:1MB`` for files, exact length otherwise."""
    if param is None or isinstance(param, bool):
        raise MissingRuleArgumentError("size")
    if is_file(value).passes:
        parse_file_size("size", param)
        return RuleState(passes=max_file_size(value, param).passes, value=value)
    return RuleState(passes=length(value, param).passes, value=value, alias="length")


def is_boolean(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """Accepts booleans and their common textual forms; coerces to bool."""
    if isinstance(value, bool):
        return RuleState(passes=True, value=value, type="boolean")
    text = to_text(value).strip().lower()
    if text in BOOLEAN_TEXT:
        return RuleState(passes=True, value=text in TRUTHY_TEXT, type="boolean")
    return RuleState(passes=False, value=value)


def between(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``between:18,30`` validated according to the type hint.

    file -> fileBetween, date -> dateBetween, number -> numberBetween,
    anything else -> stringBetween.
    """
    if param is None or isinstance(param, bool):
        raise MissingRuleArgumentError("between")
    param = to_text(param)
    bounds = split_params(param)

    if input_type == "file":
        return RuleState(
            passes=file_between(value, param).passes,
            value=value,
            alias="fileBetween",
        )

    if input_type in ("date", "date-local"):
        return RuleState(
            passes=date_between(value, param).passes,
            value=value,
            alias="dateBetween",
        )

    if input_type == "number" and value is not None and value != "" and len(bounds) >= 2:
        low, high = parse_number(bounds[0]), parse_number(bounds[1])
        if low is not None and high is not None:
            number = parse_number(value)
            if number is None:
                return RuleState(passes=False, value=value)
            return RuleState(
                passes=min_rule(number, low).passes and max_rule(number, high).passes,
                value=number,
                alias="numberBetween",
            )

    return RuleState(
        passes=string_between(value, param).passes,
        value=value,
        alias="stringBetween",
    )


def regex(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``regex:^[A-Z]+$``; write ``&pip;`` for a literal ``|``."""
    if not param or not isinstance(param, str):
        raise MissingRuleArgumentError("regex", "The regex rule argument must not be empty")
    try:
        pattern = re.compile(replace_pipes(param))
    except re.error as e:
        raise ConfigurationError(f"Invalid regex pattern {param!r}: {e}") from e
    if value is None:
        return RuleState(passes=False, value=value)
    return RuleState(passes=pattern.search(to_text(value)) is not None, value=value)


def only(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``only:string`` (no digits) or ``only:digit`` (numeric)."""
    passes = False
    if param == "string":
        passes = isinstance(value, str) and value != "" and not re.search(r"\d", value)
    elif param == "digit":
        passes = is_number(value).passes
    return RuleState(passes=passes, value=value)


def equal(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """Strict comparison: type and value must both match."""
    if isinstance(value, bool) or isinstance(param, bool):
        passes = value is param
    elif isinstance(value, (int, float)) and isinstance(param, (int, float)):
        passes = value == param
    else:
        passes = type(value) is type(param) and value == param
    return RuleState(passes=passes, value=value)


def same(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """Loose comparison of text forms, so ``True`` matches ``"true"``.

    Used for confirmation fields; keep it loose.
    """
    return RuleState(passes=to_text(value) == to_text(param), value=value)


def is_object(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``object`` or ``object:name,email`` (keys that must exist)."""
    if not isinstance(value, Mapping):
        return RuleState(passes=False, value=value)
    keys = split_params(param) if param else []
    return RuleState(passes=all(key in value for key in keys), value=value)


def is_array(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``array`` or ``array:0,2`` (indexes that must exist)."""
    if not isinstance(value, (list, tuple)):
        return RuleState(passes=False, value=value)
    if not param:
        return RuleState(passes=True, value=value)
    indexes = [parse_number(i) for i in split_params(param)]
    indexes = [i for i in indexes if isinstance(i, int)]
    return RuleState(passes=all(0 <= i < len(value) for i in indexes), value=value)


def is_json(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """A JSON string encoding an object or array, optionally with given keys."""
    if not isinstance(value, str):
        return RuleState(passes=False, value=value)
    try:
        parsed = json.loads(value)
    except ValueError:
        return RuleState(passes=False, value=value)

    if not isinstance(parsed, (dict, list)):
        return RuleState(passes=False, value=value)
    if not param:
        return RuleState(passes=True, value=value)

    keys = split_params(param)
    if isinstance(parsed, list):
        indexes = [parse_number(k) for k in keys]
        passes = all(isinstance(i, int) and 0 <= i < len(parsed) for i in indexes)
    else:
        passes = all(key in parsed for key in keys)
    return RuleState(passes=passes, value=value)
