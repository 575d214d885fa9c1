"""Shared test utilities for the functorkit test suite.

Usage:
    >>> from tests.helpers import expect_right, expect_left, Spy
"""

from __future__ import annotations

from tests.helpers.either_utils import expect_left, expect_right
from tests.helpers.spies import Spy

__all__ = [
    "expect_left",
    "expect_right",
    "Spy",
]
