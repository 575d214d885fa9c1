"""
Currying with explicit arity.

A :class:`Curried` accumulates positional arguments until it has as many as
the wrapped function's arity, then calls it. Arity is fixed at construction,
either passed in or read once from the function's signature, so partial
application never depends on inspecting the function at call time.

Usage:
    >>> add = curry(lambda x, y: x + y)
    >>> add(5)(5)
    10
    >>> add(1, 2)
    3
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, TypeVar


R = TypeVar("R")

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class Curried(Generic[R]):
    """A function of fixed arity plus the arguments captured so far.

    Attributes:
        fn: The wrapped function.
        arity: Number of positional arguments ``fn`` needs before it runs.
        args: Arguments captured by earlier partial applications.
    """

    fn: Callable[..., R]
    arity: int
    args: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if self.arity < 0:
            raise ValueError(f"arity must be non-negative, got {self.arity}")
        # Partial applications keep presenting as the wrapped function.
        for attr in ("__name__", "__qualname__", "__doc__"):
            value = getattr(self.fn, attr, None)
            if value is not None:
                object.__setattr__(self, attr, value)

    def __call__(self, *args: Any) -> Any:
        collected = self.args + args
        if len(collected) >= self.arity:
            # Surplus arguments go through; fn decides whether it accepts them.
            return self.fn(*collected)
        return replace(self, args=collected)

    @property
    def remaining(self) -> int:
        """Arguments still needed before ``fn`` is called."""
        return max(self.arity - len(self.args), 0)


def positional_arity(fn: Callable[..., object]) -> int:
    """Count the positional parameters of ``fn`` that have no default.

    Raises:
        TypeError: If the signature of ``fn`` cannot be inspected.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise TypeError(
            f"cannot infer the arity of {fn!r}; pass arity explicitly"
        ) from exc
    return sum(
        1
        for param in signature.parameters.values()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


def curry(fn: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """Wrap ``fn`` so it can be applied to any prefix of its arguments.

    Args:
        fn: Function to curry. An existing :class:`Curried` is returned as is
            when no arity is given.
        arity: Number of arguments to collect before calling ``fn``. Read
            from the signature when omitted.

    Returns:
        A :class:`Curried` with no captured arguments.
    """
    if isinstance(fn, Curried) and arity is None:
        return fn
    return Curried(fn=fn, arity=positional_arity(fn) if arity is None else arity)


__all__ = [
    "Curried",
    "curry",
    "positional_arity",
]
