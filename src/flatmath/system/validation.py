# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Generic validator functions module"""

from __future__ import annotations

__all__ = [
    "valid_choice",
    "valid_float",
]

import math
from collections.abc import Callable, Container
from functools import cache
from typing import Any, TypeVar, overload

_T = TypeVar("_T")

_MISSING: Any = object()


@overload
def valid_float(*, min_value: float, strict: bool = ...) -> Callable[[Any], float]: ...


@overload
def valid_float(*, max_value: float, strict: bool = ...) -> Callable[[Any], float]: ...


@overload
def valid_float(*, min_value: float, max_value: float, strict: bool = ...) -> Callable[[Any], float]: ...


@overload
def valid_float(*, value: Any, min_value: float, strict: bool = ...) -> float: ...


@overload
def valid_float(*, value: Any, max_value: float, strict: bool = ...) -> float: ...


@overload
def valid_float(*, value: Any, min_value: float, max_value: float, strict: bool = ...) -> float: ...


def valid_float(**kwargs: Any) -> float | Callable[[Any], float]:
    """
    Convert a value to a finite float lying between 'min_value' and 'max_value'.

    With strict=True the bounds are exclusive.
    Raises ValueError if the value cannot be converted or is out of range.
    """
    value: Any = kwargs.pop("value", _MISSING)
    decorator: Callable[[Any], float] = __valid_float(**kwargs)
    if value is not _MISSING:
        return decorator(value)
    return decorator


@cache
def __valid_float(*, strict: bool = False, **kwargs: Any) -> Callable[[Any], float]:
    if any(param not in ("min_value", "max_value") for param in kwargs):
        raise TypeError("Invalid arguments")

    min_value: float | None = float(kwargs["min_value"]) if "min_value" in kwargs else None
    max_value: float | None = float(kwargs["max_value"]) if "max_value" in kwargs else None

    if min_value is None and max_value is None:
        raise TypeError("Invalid arguments")
    if min_value is not None and max_value is not None and min_value > max_value:
        raise ValueError(f"min_value ({min_value}) > max_value ({max_value})")

    def valid_float(val: Any) -> float:
        try:
            val = float(val)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid float value: {val!r}") from None
        if not math.isfinite(val):
            raise ValueError(f"Expected a finite value, got {val}")
        if min_value is not None and (val <= min_value if strict else val < min_value):
            raise ValueError(f"{val} is below the lower bound {min_value}")
        if max_value is not None and (val >= max_value if strict else val > max_value):
            raise ValueError(f"{val} is above the upper bound {max_value}")
        return val

    return valid_float


@overload
def valid_choice(*, choices: Container[_T]) -> Callable[[Any], _T]: ...


@overload
def valid_choice(*, value: Any, choices: Container[_T]) -> _T: ...


def valid_choice(*, value: Any = _MISSING, choices: Container[Any]) -> Any:
    def valid_choice(val: Any) -> Any:
        if val not in choices:
            raise ValueError(f"Invalid value {val!r}")
        return val

    if value is not _MISSING:
        return valid_choice(value)
    return valid_choice
