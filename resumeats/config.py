"""
Caller-side settings read from the environment.

The analysis core never reads the environment itself; the CLI (or any
embedding service) builds Settings once and passes the pieces down.
"""

import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from .scoring import COMPONENTS, WEIGHTS, check_weights

LOG_LEVEL_VAR = "RESUMEATS_LOG_LEVEL"
LOG_DIR_VAR = "RESUMEATS_LOG_DIR"
WEIGHTS_VAR = "RESUMEATS_WEIGHTS"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = "INFO"
    log_dir: Optional[Path] = None
    weights: Dict[str, float] = dict(WEIGHTS)

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator("weights")
    @classmethod
    def valid_weights(cls, v: Dict[str, float]) -> Dict[str, float]:
        check_weights(v)
        return v


def parse_weights(raw: str) -> Dict[str, float]:
    """
    Parse ``skills=0.5,experience=0.2,keywords=0.2,formatting=0.1``.

    Raises:
        ValueError: malformed pair, unknown or repeated component, or a
            table that fails ``check_weights``
    """
    weights: Dict[str, float] = {}
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if "=" not in pair:
            raise ValueError(f"Expected name=value, got {pair!r}")
        name, value = (part.strip() for part in pair.split("=", 1))
        name = name.lower()
        if name not in COMPONENTS:
            raise ValueError(f"Unknown score component: {name!r}")
        if name in weights:
            raise ValueError(f"Weight for {name} given twice")
        try:
            weights[name] = float(value)
        except ValueError:
            raise ValueError(f"Weight for {name} is not a number: {value!r}") from None
    check_weights(weights)
    return weights


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from ``environ`` (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ

    values = {}
    if environ.get(LOG_LEVEL_VAR):
        values["log_level"] = environ[LOG_LEVEL_VAR]
    if environ.get(LOG_DIR_VAR):
        values["log_dir"] = Path(environ[LOG_DIR_VAR])
    if environ.get(WEIGHTS_VAR):
        values["weights"] = parse_weights(environ[WEIGHTS_VAR])
    return Settings(**values)
