"""
Curried, data-last helpers for pointfree pipelines.

Every multi-argument helper takes the data it works on last, so supplying
the leading arguments yields a unary function ready for ``compose`` or a
container's ``map``.

Example:
    >>> initials = compose(join(". "), map_list(compose(to_upper, head)), split(" "))
    >>> initials("simon phillip kerr")
    'S. P. K'
    >>> snake_case = compose(replace(r"\\s+", "_"), to_lower)
    >>> snake_case("Simon Kerr")
    'simon_kerr'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import reduce
from typing import Any, Callable, Iterable, Sequence, TypeVar

from functorkit.curry import curry


T = TypeVar("T")
U = TypeVar("U")


@curry
def prop(key: str, obj: object) -> Any:
    """Read ``key`` from a mapping, or the attribute ``key`` from an object.

    Returns ``None`` when missing so the result composes with ``Maybe``.
    """
    if isinstance(obj, Mapping):
        return obj.get(key)
    return getattr(obj, key, None)


@curry
def split(sep: str, text: str) -> list[str]:
    return text.split(sep)


@curry
def join(sep: str, parts: Iterable[str]) -> str:
    return sep.join(parts)


def to_upper(text: str) -> str:
    return text.upper()


def to_lower(text: str) -> str:
    return text.lower()


@curry
def replace(pattern: str, repl: str, text: str) -> str:
    """Replace every match of the regular expression ``pattern``."""
    return re.sub(pattern, repl, text)


def head(items: Sequence[T]) -> T | None:
    """First element, or ``None`` for an empty sequence."""
    return items[0] if items else None


@curry
def map_list(f: Callable[[T], U], items: Iterable[T]) -> list[U]:
    return [f(item) for item in items]


@curry
def filter_list(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    return [item for item in items if predicate(item)]


@curry
def reduce_list(f: Callable[[U, T], U], initial: U, items: Iterable[T]) -> U:
    return reduce(f, items, initial)


@curry
def take(n: int, items: Sequence[T]) -> Sequence[T]:
    return items[:n]


@curry
def add(x: Any, y: Any) -> Any:
    return x + y


@curry
def multiply(x: Any, y: Any) -> Any:
    return x * y


@curry
def divide(x: Any, y: Any) -> Any:
    return x / y


@curry
def contains(item: object, items: Iterable[object]) -> bool:
    return item in items


__all__ = [
    "add",
    "contains",
    "divide",
    "filter_list",
    "head",
    "join",
    "map_list",
    "multiply",
    "prop",
    "reduce_list",
    "replace",
    "split",
    "take",
    "to_lower",
    "to_upper",
]
