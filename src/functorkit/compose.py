"""
Function composition.

``compose`` applies its stages right to left, ``pipe`` left to right. Both
produce a :class:`Composed`, a frozen record of the stages, so compositions
are values that can be inspected and compared.

Usage:
    >>> shout = compose(lambda s: s + "!", str.upper)
    >>> shout("hi there")
    'HI THERE!'
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, TypeVar

from functorkit.curry import curry


A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


@dataclass(frozen=True)
class Composed:
    """A non-empty chain of unary functions, stored outermost first.

    Attributes:
        stages: ``(f1, ..., fn)``; calling the composition on ``x``
            computes ``f1(f2(...fn(x)))``.
    """

    stages: tuple[Callable[[Any], Any], ...]

    def __post_init__(self) -> None:
        if not self.stages:
            raise ValueError("compose requires at least one function")

    def __call__(self, value: Any) -> Any:
        return reduce(lambda acc, stage: stage(acc), reversed(self.stages), value)


def compose(*fns: Callable[[Any], Any]) -> Composed:
    """Compose unary functions right to left.

    Raises:
        ValueError: If no functions are given.
    """
    return Composed(stages=fns)


def pipe(*fns: Callable[[Any], Any]) -> Composed:
    """Compose unary functions left to right; ``pipe(f, g) == compose(g, f)``."""
    return Composed(stages=tuple(reversed(fns)))


def identity(value: A) -> A:
    return value


@curry
def converge(
    after: Callable[[B, C], Any],
    left: Callable[[A], B],
    right: Callable[[A], C],
    value: A,
) -> Any:
    """
    Feed one input through two branches and join the results.

    Example:
        >>> avg = converge(lambda total, n: total / n, sum, len)
        >>> avg([1, 2, 3, 4, 5])
        3.0
    """
    return after(left(value), right(value))


__all__ = [
    "Composed",
    "compose",
    "converge",
    "identity",
    "pipe",
]
