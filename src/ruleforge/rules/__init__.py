"""Built-in rules for ruleforge.

Every rule is a plain function ``(value, param=None, input_type=None)``
returning a RuleState. register_builtin_rules() adds them all to a registry
under the names used in rule specs.

Categories:
- Common: required, nullable, in, size, boolean, between, regex, only, same, equal
- String: email, url, string, minlength, maxlength, length, startWith, ...
- Numeric: number, integer, min, max, modulo, lessThan, greaterThan, digit, ...
- File: file, maxFileSize, minFileSize, fileBetween, mimes
- Date: date, before, after, dateBetween, time
- Structure: object, json, array
- Phone: phone
"""

from ruleforge.registry import RuleRegistry
from ruleforge.rules import common, dates, files, numeric, phone, strings
from ruleforge.types import RuleCallback

BUILTIN_RULES: dict[str, RuleCallback] = {
    # Common
    "required": common.required,
    "nullable": common.nullable,
    "in": common.in_list,
    "size": common.size,
    "boolean": common.is_boolean,
    "between": common.between,
    "regex": common.regex,
    "only": common.only,
    "same": common.same,
    "equal": common.equal,
    # String
    "email": strings.email,
    "url": strings.url,
    "string": strings.is_string,
    "password": strings.password,
    "minlength": strings.minlength,
    "maxlength": strings.maxlength,
    "length": strings.length,
    "len": strings.length,
    "stringBetween": strings.string_between,
    "startWith": strings.start_with,
    "endWith": strings.end_with,
    "contains": strings.contains,
    "excludes": strings.excludes,
    "startWithUpper": strings.start_with_upper,
    "startWithLower": strings.start_with_lower,
    "startWithString": strings.start_with_string,
    "endWithString": strings.end_with_string,
    "hasLetter": strings.has_letter,
    "upper": strings.upper,
    "lower": strings.lower,
    # Numeric
    "number": numeric.is_number,
    "numeric": numeric.is_number,
    "integer": numeric.integer,
    "int": numeric.integer,
    "min": numeric.min_rule,
    "max": numeric.max_rule,
    "modulo": numeric.modulo,
    "mod": numeric.modulo,
    "lessThan": numeric.less_than,
    "lthan": numeric.less_than,
    "greaterThan": numeric.greater_than,
    "gthan": numeric.greater_than,
    "numberBetween": numeric.number_between,
    "digit": numeric.digit,
    "minDigit": numeric.min_digit,
    "maxDigit": numeric.max_digit,
    # File
    "file": files.is_file,
    "maxFileSize": files.max_file_size,
    "minFileSize": files.min_file_size,
    "fileBetween": files.file_between,
    "mimes": files.mimes,
    # Date
    "date": dates.is_date,
    "before": dates.before,
    "after": dates.after,
    "dateBetween": dates.date_between,
    "time": dates.is_time,
    # Structure
    "object": common.is_object,
    "json": common.is_json,
    "array": common.is_array,
    # Phone
    "phone": phone.phone,
}


def register_builtin_rules(registry: RuleRegistry) -> RuleRegistry:
    """Register every built-in rule on ``registry`` and return it."""
    for name, callback in BUILTIN_RULES.items():
        registry.add(name, callback)
    return registry


__all__ = [
    "BUILTIN_RULES",
    "register_builtin_rules",
]
