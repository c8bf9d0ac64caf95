# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""Shared constants and capability protocols of the math package"""

from __future__ import annotations

__all__ = [
    "EPS",
    "HALF_PI",
    "TWO_PI",
    "AngleLike",
    "Normalizable",
    "Rotatable",
    "SupportsAlmostEqual",
    "almost_equal",
    "ieee_divide",
    "resolve_angle",
    "resolve_epsilon",
]

import math
from numbers import Real
from typing import Any, Final, Protocol, runtime_checkable

from typing_extensions import Self

from ..environ import DEFAULT_EPSILON, get_default_epsilon

TWO_PI: Final[float] = math.pi * 2.0
HALF_PI: Final[float] = math.pi / 2.0
EPS: Final[float] = DEFAULT_EPSILON


@runtime_checkable
class AngleLike(Protocol):
    def cos(self) -> float: ...

    def sin(self) -> float: ...


@runtime_checkable
class SupportsAlmostEqual(Protocol):
    def approx_equal(self, other: Any, /, epsilon: float | None = ...) -> bool: ...


@runtime_checkable
class Normalizable(Protocol):
    def normalize(self) -> None: ...

    def normalized(self) -> Self: ...


@runtime_checkable
class Rotatable(Protocol):
    def rotate(self, angle: float | AngleLike, /) -> None: ...

    def rotated(self, angle: float | AngleLike, /) -> Self: ...


def resolve_epsilon(epsilon: float | None) -> float:
    if epsilon is None:
        return get_default_epsilon()
    return float(epsilon)


def almost_equal(a: float, b: float, /, epsilon: float | None = None) -> bool:
    return abs(a - b) < resolve_epsilon(epsilon)


def ieee_divide(a: float, b: float, /) -> float:
    """
    Float division which returns the IEEE 754 result for a zero divisor
    instead of raising ZeroDivisionError.
    """
    a = float(a)
    b = float(b)
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def resolve_angle(angle: float | AngleLike, /) -> tuple[float, float]:
    """
    Return the (cos, sin) pair of 'angle'.

    A real number is taken as a value in radians.
    """
    if isinstance(angle, Real):
        radians = float(angle)
        return math.cos(radians), math.sin(radians)
    if isinstance(angle, AngleLike):
        return angle.cos(), angle.sin()
    raise TypeError(f"Expected a real number or an angle-like object, got {angle!r}")
