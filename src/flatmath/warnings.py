# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""flatmath custom warnings module"""

from __future__ import annotations

__all__ = [
    "DegenerateVectorWarning",
    "FlatMathWarning",
]


class FlatMathWarning(UserWarning):
    pass


class DegenerateVectorWarning(FlatMathWarning):
    """Emitted when an operation is requested on a zero-length vector and has no effect"""
