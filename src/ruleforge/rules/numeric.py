"""Numeric rules.

``number`` and ``integer`` coerce their input: the value they return is numeric
and the type hint becomes "number", so rules further down the chain compare
numbers rather than strings.
"""

from typing import Any

from ruleforge.rules.files import max_file_size, min_file_size
from ruleforge.rules.strings import maxlength, minlength
from ruleforge.rules.utils import as_file, numeric_argument, parse_number, split_params
from ruleforge.types import MissingRuleArgumentError, RuleParam, RuleState


def is_number(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|number``"""
    number = parse_number(value)
    if number is None:
        return RuleState(passes=False, value=value)
    return RuleState(passes=True, value=number, type="number")


def integer(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|integer``"""
    state = is_number(value)
    if state.passes and float(state.value).is_integer():
        return RuleState(passes=True, value=int(state.value), type="number")
    return RuleState(passes=False, value=value)


def min_rule(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``min:2``: numeric lower bound, or minimum length for text, or file size.

    Missing values count as 0.
    """
    bound = numeric_argument("min", param)
    if as_file(value) is not None or input_type == "file":
        return RuleState(
            passes=min_file_size(value, f"{bound}B").passes,
            value=value,
            alias="minFileSize",
        )
    if value is None:
        value = 0
    number = parse_number(value)
    if number is not None:
        return RuleState(passes=number >= bound, value=number)
    return RuleState(passes=minlength(value, bound).passes, value=value, alias="minlength")


def max_rule(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``max:20``: numeric upper bound, or maximum length for text, or file size."""
    bound = numeric_argument("max", param)
    if as_file(value) is not None or input_type == "file":
        return RuleState(
            passes=max_file_size(value, f"{bound}B").passes,
            value=value,
            alias="maxFileSize",
        )
    if value is None:
        value = 0
    number = parse_number(value)
    if number is not None:
        return RuleState(passes=number <= bound, value=number)
    return RuleState(passes=maxlength(value, bound).passes, value=value, alias="maxlength")


def modulo(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``modulo:2``"""
    divisor = numeric_argument("modulo", param)
    number = parse_number(value)
    if number is None:
        return RuleState(passes=False, value=value)
    if divisor == 0:
        return RuleState(passes=False, value=number)
    return RuleState(passes=number % divisor == 0, value=number)


def less_than(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``lessThan:10``"""
    threshold = numeric_argument("lessThan", param)
    number = parse_number(value)
    if number is None:
        return RuleState(passes=False, value=value)
    return RuleState(passes=number < threshold, value=value)


def greater_than(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``greaterThan:5``"""
    threshold = numeric_argument("greaterThan", param)
    number = parse_number(value)
    if number is None:
        return RuleState(passes=False, value=value)
    return RuleState(passes=number > threshold, value=value)


def number_between(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``numberBetween:1,10``"""
    bounds = split_params(param)
    if len(bounds) < 2:
        raise MissingRuleArgumentError("numberBetween", "The numberBetween rule expects two arguments")
    number = parse_number(value)
    if number is None:
        return RuleState(passes=False, value=value)
    passes = min_rule(number, bounds[0]).passes and max_rule(number, bounds[1]).passes
    return RuleState(passes=passes, value=number)


# =============================================================================
# Digits
# =============================================================================


def _digits(value: Any) -> str | None:
    if parse_number(value) is None:
        return None
    text = str(value).strip()
    return text if text.isdigit() else None


def digit(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``digit:4``: exactly N digits."""
    count = numeric_argument("digit", param)
    digits = _digits(value)
    return RuleState(passes=digits is not None and len(digits) == count, value=value)


def min_digit(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``minDigit:4``"""
    count = numeric_argument("minDigit", param)
    digits = _digits(value)
    return RuleState(passes=digits is not None and len(digits) >= count, value=value)


def max_digit(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``maxDigit:4``"""
    count = numeric_argument("maxDigit", param)
    digits = _digits(value)
    return RuleState(passes=digits is not None and len(digits) <= count, value=value)
