# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""flatmath's system module"""

from __future__ import annotations

__all__ = []  # type: list[str]
