"""
Deferred effects.

An :class:`IO` holds a zero-argument callable describing an impure
computation. Mapping builds a longer description without running anything;
only :meth:`IO.unsafe_perform_io` executes it, and it does so afresh on
every call.

Usage:
    >>> reads: list[str] = []
    >>> io = IO(lambda: reads.append("config") or "debug=1").map(str.upper)
    >>> reads
    []
    >>> io.unsafe_perform_io()
    'DEBUG=1'
    >>> reads
    ['config']
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar


T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class IO(Generic[T]):
    """A deferred, repeatable effect producing a ``T``.

    Attributes:
        effect: Zero-argument callable; never invoked at construction or map time.
    """

    effect: Callable[[], T]

    @classmethod
    def of(cls, value: U) -> IO[U]:
        """Lift a plain value into an IO that performs nothing."""
        return IO(lambda: value)

    def map(self, f: Callable[[T], U]) -> IO[U]:
        effect = self.effect
        return IO(lambda: f(effect()))

    def unsafe_perform_io(self) -> T:
        """Run the effect. Side effects happen here and only here."""
        return self.effect()


__all__ = ["IO"]
