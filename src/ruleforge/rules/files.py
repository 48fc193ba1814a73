"""File rules: presence, size bounds and MIME types.

Files are normalized to FileInfo (see ``rules.utils.as_file``); a list of files
passes a rule only when every file passes it.
"""

from typing import Any

from ruleforge.rules.utils import files_of, parse_file_size, require_argument, split_params
from ruleforge.types import MissingRuleArgumentError, RuleParam, RuleState


def is_file(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``required|file``"""
    return RuleState(passes=bool(files_of(value)), value=value)


def max_file_size(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``maxFileSize:1MB``"""
    files = files_of(value)
    if not files:
        return RuleState(passes=False, value=value)
    limit = parse_file_size("maxFileSize", param)
    return RuleState(passes=all(f.size <= limit for f in files), value=value)


def min_file_size(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``minFileSize:1KB``"""
    files = files_of(value)
    if not files:
        return RuleState(passes=False, value=value)
    require_argument("minFileSize", param, "The minimum size rule argument is required")
    limit = parse_file_size("minFileSize", param)
    return RuleState(passes=all(f.size >= limit for f in files), value=value)


def file_between(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``fileBetween:1KB,5MB``"""
    if not isinstance(param, str):
        raise MissingRuleArgumentError("between")
    bounds = split_params(param)
    if len(bounds) < 2:
        raise MissingRuleArgumentError("fileBetween", "The fileBetween rule expects two arguments")
    if not files_of(value):
        return RuleState(passes=False, value=value)
    passes = min_file_size(value, bounds[0]).passes and max_file_size(value, bounds[1]).passes
    return RuleState(passes=passes, value=value)


def _mime_matches(allowed: str, name: str, content_type: str) -> bool:
    allowed = "".join(allowed.split())
    if allowed in ("", "*") or content_type == "" or name.endswith(allowed):
        return True
    if allowed.endswith("/*"):
        return content_type.startswith(allowed[:-2])
    if allowed.startswith("*."):
        return name.endswith(allowed[2:])
    return content_type == allowed


def mimes(value: Any, param: RuleParam = None, input_type: str | None = None) -> RuleState:
    """``mimes:.pdf``, ``mimes:image/*``, ``mimes:*.png,application/pdf``

    Files whose content type is unknown are accepted.
    """
    require_argument("mimes", param)
    files = files_of(value)
    if not files:
        return RuleState(passes=False, value=value)
    allowed = split_params(param)
    passes = all(
        any(_mime_matches(mime, f.name, f.content_type) for mime in allowed)
        for f in files
    )
    return RuleState(passes=passes, value=value)
