from __future__ import annotations

from enum import Enum


class CascadeMode(str, Enum):
    """Whether rule execution continues after the first failure."""

    CONTINUE = "Continue"
    STOP = "Stop"
