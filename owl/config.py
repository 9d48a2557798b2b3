from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Literal, Optional

FatalPolicy = Literal["raise", "exit"]

_FATAL_POLICIES = ("raise", "exit")
_TRUE_VALUES = ("1", "true", "yes", "on")

# Exit status used by the `exit` fatal policy (EX_SOFTWARE)
FATAL_EXIT_STATUS = 70


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def fatal_policy_from_env(var: str = "OWL_FATAL_POLICY") -> FatalPolicy:
    raw = (os.environ.get(var) or "raise").strip().lower()
    if raw not in _FATAL_POLICIES:
        raise ValueError(f"{var} must be one of {_FATAL_POLICIES}, got {raw!r}")
    return raw  # type: ignore[return-value]


@dataclass(frozen=True)
class Config:
    """Per-session interpreter settings.

    fatal_policy:       what a malformed special form does ('raise' or 'exit')
    uniform_arguments:  evaluate the first argument of -, / and = like the rest
    log_level:          level name for the 'owl' logger, None leaves it alone
    """
    fatal_policy: FatalPolicy = "raise"
    uniform_arguments: bool = False
    log_level: Optional[str] = None

    def __post_init__(self):
        if self.fatal_policy not in _FATAL_POLICIES:
            raise ValueError(f"fatal_policy must be one of {_FATAL_POLICIES}")

    @classmethod
    def from_env(cls) -> Config:
        level = os.environ.get("OWL_LOG_LEVEL")
        return cls(
            fatal_policy=fatal_policy_from_env(),
            uniform_arguments=flag_from_env("OWL_UNIFORM_ARGS"),
            log_level=level.strip().upper() if level and level.strip() else None,
        )
