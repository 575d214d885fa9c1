"""
The closed set of functors and pointfree ``fmap`` over them.

``fmap`` selects the container's behaviour with an exhaustive ``match`` on
the :data:`Mappable` union rather than looking a ``map`` attribute up on
arbitrary objects. A value outside the union is a programming error and
fails loudly.

Example:
    >>> increment_all = fmap(lambda x: x + 1)
    >>> increment_all(Identity(1))
    Identity(value=2)
    >>> increment_all(Maybe(None))
    Maybe(value=None)
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from functorkit.containers import Identity, Left, Maybe, Right
from functorkit.curry import curry
from functorkit.errors import assert_never
from functorkit.io import IO
from functorkit.task import Task


T = TypeVar("T")
U = TypeVar("U")


Mappable = Identity[T] | Maybe[T] | Left[Any] | Right[T] | IO[T] | Task[Any, T]


@curry
def fmap(f: Callable[[T], U], container: Mappable[T]) -> Mappable[U]:
    """Map ``f`` over any container, preserving its structure.

    Raises:
        AssertionError: If ``container`` is not one of the Mappable variants.
    """
    match container:
        case Identity():
            return container.map(f)
        case Maybe():
            return container.map(f)
        case Left():
            return container
        case Right():
            return container.map(f)
        case IO():
            return container.map(f)
        case Task():
            return container.map(f)
        case _:
            assert_never(container)


__all__ = [
    "Mappable",
    "fmap",
]
