"""Code shaped to satisfy common lints."""

from __future__ import annotations

import sys


def floats_differ(x: float, y: float) -> bool:
    """Whether two floats differ by more than machine epsilon."""
    return abs(y - x) > sys.float_info.epsilon


def add_optional(total: int, option: int | None) -> int:
    """Add the optional value to ``total`` when it is present."""
    if option is not None:
        total += option
    return total