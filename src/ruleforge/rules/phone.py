"""Phone number rule backed by the ``phonenumbers`` library."""

from typing import Any

import phonenumbers
from phonenumbers import NumberParseException

from ruleforge.rules.utils import split_params
from ruleforge.types import RuleParam, RuleState


def _valid_for_region(number: str, region: str | None) -> bool:
    try:
        parsed = phonenumbers.parse(number, region)
    except NumberParseException:
        return False
    if region is not None and phonenumbers.region_code_for_number(parsed) != region:
        return False
    return phonenumbers.is_valid_number(parsed)


def phone(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``phone`` or ``phone:US,FR,BJ``

    Without country codes the number must be in international form
    (``+229 ...``). With country codes it must be valid for at least one.
    """
    if not isinstance(value, str) or not value.strip():
        return RuleState(passes=False, value=value)

    regions = [code.upper() for code in split_params(param)] if param else []
    if not regions:
        return RuleState(passes=_valid_for_region(value, None), value=value)
    return RuleState(
        passes=any(_valid_for_region(value, region) for region in regions),
        value=value,
    )
