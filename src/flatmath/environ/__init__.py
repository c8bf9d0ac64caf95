# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""flatmath's environment helper module

Runtime configuration read from environment variables:
- FLATMATH_EPSILON: default epsilon of approx_equal() methods (float > 0, default: 1e-8)
- FLATMATH_DEGENERATE_WARNINGS: "1" (default) to emit DegenerateVectorWarning, "0" to silence it
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_EPSILON",
    "EPSILON_ENV_VAR",
    "WARNINGS_ENV_VAR",
    "check_environment",
    "degenerate_warnings_enabled",
    "get_default_epsilon",
]

import os
from typing import Final

from ..system.validation import valid_choice, valid_float

EPSILON_ENV_VAR: Final[str] = "FLATMATH_EPSILON"
WARNINGS_ENV_VAR: Final[str] = "FLATMATH_DEGENERATE_WARNINGS"

DEFAULT_EPSILON: Final[float] = 1e-8

_valid_epsilon = valid_float(min_value=0, strict=True)
_valid_switch = valid_choice(choices=("0", "1"))


def get_default_epsilon() -> float:
    value = os.environ.get(EPSILON_ENV_VAR)
    if not value:
        return DEFAULT_EPSILON
    try:
        return _valid_epsilon(value)
    except ValueError as exc:
        raise ValueError(f"Invalid value for {EPSILON_ENV_VAR!r}, got {value!r}") from exc


def degenerate_warnings_enabled() -> bool:
    value = os.environ.get(WARNINGS_ENV_VAR, "1")
    try:
        return _valid_switch(value) == "1"
    except ValueError:
        raise ValueError(f"Invalid value for {WARNINGS_ENV_VAR!r}, got {value!r}") from None


def check_environment() -> None:
    degenerate_warnings_enabled()
    get_default_epsilon()
