# -*- coding: Utf-8 -*-

from __future__ import annotations

import math
from typing import Any

from flatmath.math.angle import Angle
from flatmath.math.common import (
    HALF_PI,
    TWO_PI,
    AngleLike,
    Normalizable,
    Rotatable,
    SupportsAlmostEqual,
    ieee_divide,
    resolve_angle,
)
from flatmath.math.rect import Rect
from flatmath.math.vector2 import Vector2

import pytest


class TestConstants:
    def test__half_pi__quarter_turn(self) -> None:
        # Arrange

        # Act
        angle = Angle.from_radians(HALF_PI)

        # Assert
        assert angle.approx_equal(Angle.from_degrees(90))
        assert HALF_PI * 4 == TWO_PI
        assert Vector2(1, 0).rotated(HALF_PI).approx_equal(Vector2(0, 1))


class TestProtocols:
    @pytest.mark.parametrize(
        ["obj", "expected"],
        [
            pytest.param(Angle.from_degrees(30), True, id="Angle"),
            pytest.param(Vector2(1, 2), True, id="Vector2"),
            pytest.param(Rect(left=0, top=1, right=1, bottom=0), False, id="Rect"),
        ],
    )
    def test__normalizable__implemented_by_angle_and_vector(self, obj: Any, expected: bool) -> None:
        # Arrange

        # Act & Assert
        assert isinstance(obj, Normalizable) is expected

    @pytest.mark.parametrize(
        ["obj", "expected"],
        [
            pytest.param(Vector2(1, 2), True, id="Vector2"),
            pytest.param(Angle.from_degrees(30), False, id="Angle"),
            pytest.param(Rect(left=0, top=1, right=1, bottom=0), False, id="Rect"),
        ],
    )
    def test__rotatable__implemented_by_vector(self, obj: Any, expected: bool) -> None:
        # Arrange

        # Act & Assert
        assert isinstance(obj, Rotatable) is expected

    @pytest.mark.parametrize(
        "obj",
        [
            pytest.param(Angle.from_degrees(30), id="Angle"),
            pytest.param(Vector2(1, 2), id="Vector2"),
            pytest.param(Rect(left=0, top=1, right=1, bottom=0), id="Rect"),
        ],
    )
    def test__supports_almost_equal__implemented_by_all_primitives(self, obj: Any) -> None:
        # Arrange

        # Act & Assert
        assert isinstance(obj, SupportsAlmostEqual)
        assert obj.approx_equal(obj)

    def test__angle_like__only_angle(self) -> None:
        # Arrange

        # Act & Assert
        assert isinstance(Angle.from_degrees(30), AngleLike)
        assert not isinstance(Vector2(1, 2), AngleLike)
        assert not isinstance(1.5, AngleLike)


class TestIEEEDivide:
    @pytest.mark.parametrize(
        ["a", "b", "expected"],
        [
            pytest.param(1.0, 0.0, math.inf, id="positive by zero"),
            pytest.param(-1.0, 0.0, -math.inf, id="negative by zero"),
            pytest.param(1.0, -0.0, -math.inf, id="positive by negative zero"),
            pytest.param(6.0, 3.0, 2.0, id="regular"),
        ],
    )
    def test__ieee_divide__signed_infinity(self, a: float, b: float, expected: float) -> None:
        # Arrange

        # Act & Assert
        assert ieee_divide(a, b) == expected

    @pytest.mark.parametrize(
        ["a", "b"],
        [
            pytest.param(0.0, 0.0, id="zero by zero"),
            pytest.param(math.nan, 0.0, id="nan by zero"),
        ],
    )
    def test__ieee_divide__nan(self, a: float, b: float) -> None:
        # Arrange

        # Act & Assert
        assert math.isnan(ieee_divide(a, b))


class TestResolveAngle:
    def test__resolve_angle__radians_and_angle_agree(self) -> None:
        # Arrange
        angle = Angle.from_radians(HALF_PI)

        # Act
        from_number = resolve_angle(HALF_PI)
        from_angle = resolve_angle(angle)

        # Assert
        assert from_number == (math.cos(HALF_PI), math.sin(HALF_PI))
        assert from_angle == (angle.cos(), angle.sin())

    @pytest.mark.parametrize("value", [pytest.param("90", id="str"), pytest.param(None, id="None")])
    def test__resolve_angle__invalid_type(self, value: Any) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError):
            resolve_angle(value)
