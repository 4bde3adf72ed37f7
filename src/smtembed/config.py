"""
Session configuration.

Values can be given explicitly or read from the environment:

    SMTEMBED_LOGIC          SMT-LIB logic name passed to z3.SolverFor
    SMTEMBED_TIMEOUT_MS     per check-sat timeout in milliseconds
    SMTEMBED_MACRO_FINDER   "1"/"0" (also true/false, yes/no, on/off)
"""
from dataclasses import dataclass, replace
from typing import Mapping, Optional
import os

from .errors import ConfigError

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass(frozen=True)
class SessionConfig:
    """Settings applied when a solver session is created.

    Attributes:
        logic: SMT-LIB logic (e.g. "QF_LIA"); None lets Z3 pick
        timeout_ms: Solver timeout for check-sat, None for no limit
        macro_finder: Let Z3 treat quantified defining equations as macros
    """
    logic: Optional[str] = None
    timeout_ms: Optional[int] = None
    macro_finder: bool = True

    def __post_init__(self):
        if self.timeout_ms is not None and self.timeout_ms <= 0:
            raise ConfigError(f"timeout_ms must be positive, got {self.timeout_ms}")
        if self.logic is not None and not self.logic.strip():
            raise ConfigError("logic must not be empty")

    def with_overrides(self, **overrides) -> "SessionConfig":
        """Return a copy with the given fields replaced."""
        try:
            return replace(self, **overrides)
        except TypeError as e:
            raise ConfigError(str(e)) from e

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SessionConfig":
        """Build a config from SMTEMBED_* environment variables."""
        env = os.environ if environ is None else environ

        logic = env.get("SMTEMBED_LOGIC") or None

        timeout_ms = None
        raw = env.get("SMTEMBED_TIMEOUT_MS")
        if raw:
            try:
                timeout_ms = int(raw)
            except ValueError:
                raise ConfigError(f"SMTEMBED_TIMEOUT_MS is not an integer: {raw!r}") from None

        macro_finder = True
        raw = env.get("SMTEMBED_MACRO_FINDER")
        if raw:
            flag = raw.strip().lower()
            if flag in _TRUE:
                macro_finder = True
            elif flag in _FALSE:
                macro_finder = False
            else:
                raise ConfigError(f"SMTEMBED_MACRO_FINDER is not a boolean: {raw!r}")

        return cls(logic=logic, timeout_ms=timeout_ms, macro_finder=macro_finder)
