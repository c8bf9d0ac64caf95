# -*- coding: Utf-8 -*-

from __future__ import annotations

from typing import Any

from flatmath.system.validation import valid_choice, valid_float

import pytest


class TestValidFloat:
    @pytest.mark.parametrize(
        ["value", "expected"],
        [
            pytest.param("1.5", 1.5),
            pytest.param(2, 2.0),
            pytest.param("1e-8", 1e-8),
        ],
    )
    def test__valid_float__converts(self, value: Any, expected: float) -> None:
        # Arrange

        # Act
        result = valid_float(value=value, min_value=0)

        # Assert
        assert result == expected
        assert type(result) is float

    def test__valid_float__decorator_form(self) -> None:
        # Arrange
        validator = valid_float(min_value=0, max_value=10)

        # Act & Assert
        assert validator(0) == 0.0
        assert validator(10) == 10.0
        with pytest.raises(ValueError):
            validator(10.5)

    def test__valid_float__strict_bounds(self) -> None:
        # Arrange
        validator = valid_float(min_value=0, strict=True)

        # Act & Assert
        assert validator(1e-300) == 1e-300
        with pytest.raises(ValueError, match=r"below the lower bound"):
            validator(0)

    @pytest.mark.parametrize("value", ["abc", None, "inf", float("nan")])
    def test__valid_float__invalid_values(self, value: Any) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError):
            valid_float(value=value, max_value=1)

    def test__valid_float__invalid_arguments(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(TypeError, match=r"Invalid arguments"):
            valid_float(unknown=1)  # type: ignore[call-overload]
        with pytest.raises(ValueError, match=r"min_value \(2.0\) > max_value \(1.0\)"):
            valid_float(min_value=2, max_value=1)


class TestValidChoice:
    def test__valid_choice__accepts_members(self) -> None:
        # Arrange
        validator = valid_choice(choices=("0", "1"))

        # Act & Assert
        assert validator("0") == "0"
        assert valid_choice(value="1", choices=("0", "1")) == "1"

    def test__valid_choice__rejects_others(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError, match=r"Invalid value '2'"):
            valid_choice(value="2", choices=("0", "1"))
