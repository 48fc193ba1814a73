"""Parameter parsing and value helpers shared by the built-in rules."""

import math
import mimetypes
import os
import re
from pathlib import Path
from typing import Any

from ruleforge.types import (
    ConfigurationError,
    FileInfo,
    MissingRuleArgumentError,
    RuleParam,
)

# Placeholders usable inside rule arguments, since "|" separates rules
PIPE_TOKEN = "&pip;"
SPACE_TOKEN = "&esp;"

NUMERIC_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

FILE_SIZE_PATTERN = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(B|KB|MB|GB)\s*$", re.IGNORECASE)

FILE_SIZE_UNITS = {
    "B": 1,
    "KB": 1024,
    "MB": 1024**2,
    "GB": 1024**3,
}


# =============================================================================
# Parameters
# =============================================================================


def split_params(param: RuleParam) -> list[str]:
    """Split a comma-separated rule argument into trimmed parts.

    ``"18, 30"`` -> ``["18", "30"]``; None or "" -> ``[]``.
    """
    if param is None:
        return []
    text = to_text(param)
    if text == "":
        return []
    return [part.strip() for part in text.split(",")]


def require_argument(rule: str, param: RuleParam, message: str | None = None) -> None:
    """Raise MissingRuleArgumentError when ``param`` is empty."""
    if param is None or param == "" or isinstance(param, bool):
        raise MissingRuleArgumentError(rule, message)


def replace_pipes(text: str) -> str:
    return text.replace(PIPE_TOKEN, "|")


def replace_spaces(text: str) -> str:
    return text.replace(SPACE_TOKEN, " ")


# =============================================================================
# Values
# =============================================================================


def to_text(value: Any) -> str:
    """Render a value the way rule arguments and loose comparisons see it.

    Booleans become "true"/"false", None becomes "null" and integral floats
    drop their fractional part, so ``True`` matches ``"true"`` and ``5.0``
    matches ``"5"``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def is_empty(value: Any) -> bool:
    """None and the empty string count as absent values."""
    return value is None or (isinstance(value, str) and value == "")


def parse_number(value: Any) -> int | float | None:
    """Parse ``value`` as a number, or return None.

    Booleans, containers and NaN are not numbers. Numeric strings are
    converted to int when integral, float otherwise.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if isinstance(value, str):
        text = value.strip()
        if not NUMERIC_PATTERN.match(text):
            return None
        number = float(text)
        if number.is_integer() and "." not in text and "e" not in text.lower():
            return int(number)
        return number
    return None


def numeric_argument(rule: str, param: RuleParam) -> int | float:
    """Parse a numeric rule argument, raising ConfigurationError otherwise."""
    number = parse_number(param)
    if number is None:
        raise ConfigurationError(f"The {rule} rule argument must be a number, got {param!r}")
    return number


# =============================================================================
# Files
# =============================================================================


def as_file(value: Any) -> FileInfo | None:
    """Normalize a file-like value to FileInfo.

    Accepts FileInfo, existing filesystem paths, and objects exposing ``size``
    together with ``name`` or ``filename`` (upload objects).
    """
    if isinstance(value, FileInfo):
        return value
    if isinstance(value, Path):
        if not value.is_file():
            return None
        content_type = mimetypes.guess_type(value.name)[0] or ""
        return FileInfo(name=value.name, size=value.stat().st_size, content_type=content_type)
    if isinstance(value, (str, bytes, int, float, bool)) or value is None:
        return None

    size = getattr(value, "size", None)
    name = getattr(value, "filename", None) or getattr(value, "name", None)
    if isinstance(size, int) and not isinstance(size, bool) and isinstance(name, str):
        content_type = (
            getattr(value, "content_type", None)
            or getattr(value, "type", None)
            or mimetypes.guess_type(name)[0]
            or ""
        )
        return FileInfo(name=os.path.basename(name), size=size, content_type=str(content_type))
    return None


def files_of(value: Any) -> list[FileInfo]:
    """Return the files held by ``value`` (a single file or a list of files).

    A list containing anything that is not a file yields no files.
    """
    if isinstance(value, (list, tuple)):
        files = [as_file(item) for item in value]
        if not files or any(f is None for f in files):
            return []
        return [f for f in files if f is not None]
    single = as_file(value)
    return [single] if single else []


def parse_file_size(rule: str, param: RuleParam) -> int:
    """Convert an argument such as ``"1MB"`` to a size in bytes.

    Raises:
        ConfigurationError: If the unit is missing or unknown
    """
    match = FILE_SIZE_PATTERN.match(to_text(param)) if param is not None else None
    if not match:
        raise ConfigurationError(
            f"Invalid file size argument for {rule}: {param!r}. "
            "Expected a number followed by B, KB, MB or GB."
        )
    amount, unit = match.groups()
    return int(float(amount) * FILE_SIZE_UNITS[unit.upper()])
