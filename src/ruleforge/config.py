"""Runtime configuration for ruleforge."""

import os
from dataclasses import dataclass

from ruleforge.types import ConfigurationError

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def parse_bool(name: str, raw: str) -> bool:
    """Parse a boolean environment value.

    Raises:
        ConfigurationError: If the value is not a recognized boolean
    """
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be one of {', '.join(TRUE_VALUES + FALSE_VALUES)}, got {raw!r}")


@dataclass
class RuleforgeConfig:
    """Defaults applied by ValidationContext.

    Attributes:
        locale: Active message locale
        fail_fast: Whether fields stop at their first failing rule by default
    """

    locale: str = "en"
    fail_fast: bool = True

    @classmethod
    def from_env(cls) -> "RuleforgeConfig":
        """Create config from environment variables.

        Resolution order for each setting:
        1. RULEFORGE_LOCALE / RULEFORGE_FAIL_FAST env vars
        2. Defaults: "en" and fail-fast enabled
        """
        locale = os.environ.get("RULEFORGE_LOCALE", "").strip() or "en"

        fail_fast = True
        raw = os.environ.get("RULEFORGE_FAIL_FAST")
        if raw is not None and raw.strip():
            fail_fast = parse_bool("RULEFORGE_FAIL_FAST", raw)

        return cls(locale=locale, fail_fast=fail_fast)
