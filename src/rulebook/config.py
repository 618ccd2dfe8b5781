"""
Runtime configuration for rule sequencing.

Defaults live in module constants and may be overridden per process
through environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Environment overrides
CONTINUE_ON_ERROR_ENV = "RULEBOOK_CONTINUE_ON_ERROR"
LOG_FACTS_ENV = "RULEBOOK_LOG_FACTS"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning(f"Ignoring unrecognized value {raw!r} for {name}")
    return default


@dataclass
class SequencerConfig:
    """Behavior switches for a DecisionSequencer run."""
    continue_on_error: bool = False  # Log rule failures and keep going
    log_facts: bool = False          # Log a fact snapshot after each run

    @classmethod
    def from_env(cls, base: Optional["SequencerConfig"] = None) -> "SequencerConfig":
        base = base or cls()
        return cls(
            continue_on_error=_env_flag(CONTINUE_ON_ERROR_ENV, base.continue_on_error),
            log_facts=_env_flag(LOG_FACTS_ENV, base.log_facts),
        )
