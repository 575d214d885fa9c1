"""
Synchronous functor containers: Identity, Maybe and Either.

Each container is a frozen dataclass holding exactly one value. ``map``
never mutates the receiver; it returns a new container, or the receiver
itself where the container short-circuits (``Left``).

Type Safety:
    - Containers are frozen dataclasses compared by value, so the functor
      laws can be checked with ``==``
    - ``Either`` is a closed union of ``Left`` and ``Right`` and is folded
      with an exhaustive ``match``

Usage:
    >>> Maybe.of({"name": "Bob", "age": 22}).map(lambda p: p["age"]).value
    22
    >>> Right.of("rain").map(lambda s: "b" + s)
    Right(value='brain')
    >>> Left.of("rain").map(lambda s: "b" + s)
    Left(value='rain')
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from functorkit.curry import curry
from functorkit.errors import assert_never


T = TypeVar("T")
U = TypeVar("U")
L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Identity(Generic[T]):
    """The plainest functor: a box around a value."""

    value: T

    @classmethod
    def of(cls, value: U) -> Identity[U]:
        return Identity(value)

    def map(self, f: Callable[[T], U]) -> Identity[U]:
        return Identity(f(self.value))


@dataclass(frozen=True)
class Maybe(Generic[T]):
    """A value that may be absent.

    ``None`` is the absent marker. Mapping over an absent Maybe yields a new
    absent Maybe and never calls the mapped function.
    """

    value: T | None

    @classmethod
    def of(cls, value: U | None) -> Maybe[U]:
        return Maybe(value)

    def is_nothing(self) -> bool:
        """Check whether the value is absent."""
        return self.value is None

    def is_just(self) -> bool:
        """Check whether a value is present."""
        return not self.is_nothing()

    def map(self, f: Callable[[T], U | None]) -> Maybe[U]:
        """Apply ``f`` to a present value; stay absent otherwise."""
        match self.value:
            case None:
                return Maybe(None)
            case value:
                return Maybe(f(value))

    def get_or_else(self, default: U) -> T | U:
        """Return the value, or ``default`` when absent."""
        return default if self.value is None else self.value


@dataclass(frozen=True)
class Left(Generic[L]):
    """The failure branch of an Either, carrying an explanatory value."""

    value: L

    @classmethod
    def of(cls, value: U) -> Left[U]:
        return Left(value)

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, f: Callable[[object], object]) -> Left[L]:
        """No-op on Left: ``f`` is never called."""
        return self


@dataclass(frozen=True)
class Right(Generic[R]):
    """The success branch of an Either."""

    value: R

    @classmethod
    def of(cls, value: U) -> Right[U]:
        return Right(value)

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map(self, f: Callable[[R], U]) -> Right[U]:
        return Right(f(self.value))


Either = Left[L] | Right[R]


@curry
def either(
    on_left: Callable[[L], U],
    on_right: Callable[[R], U],
    value: Either[L, R],
) -> U:
    """
    Fold an Either into a single value.

    Both handlers must return the same type. Curried, so
    ``either(on_left, on_right)`` is a function awaiting the Either.

    Example:
        >>> either(len, str.upper, Right("ok"))
        'OK'
        >>> either(len, str.upper, Left("oops"))
        4
    """
    match value:
        case Left(error):
            return on_left(error)
        case Right(success):
            return on_right(success)
        case _ as unreachable:
            assert_never(unreachable)


@curry
def maybe(default: U, f: Callable[[T], U], value: Maybe[T]) -> U:
    """Fold a Maybe: ``default`` when absent, ``f(value)`` otherwise."""
    match value.value:
        case None:
            return default
        case present:
            return f(present)


__all__ = [
    "Either",
    "Identity",
    "Left",
    "Maybe",
    "Right",
    "either",
    "maybe",
]
