"""
Error ADTs for functorkit.

Expected failures are values, not exceptions: they travel inside a ``Left``
or through a Task's reject channel. Each error is a frozen dataclass with a
``Literal`` discriminator so callers can match on it exhaustively.

Type Safety:
    - All error types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Never

from pydantic import ValidationError


@dataclass(frozen=True)
class TracingFailed:
    """A tracer could not deliver an event.

    Attributes:
        message: Human-readable error description.
        logger_name: Logger the event was routed to.
        kind: Discriminator for pattern matching. Always "TracingFailed".
    """

    message: str
    logger_name: str = ""
    kind: Literal["TracingFailed"] = "TracingFailed"


@dataclass(frozen=True)
class SettingsInvalid:
    """Pydantic rejected the supplied tracing settings."""

    error: ValidationError
    kind: Literal["SettingsInvalid"] = "SettingsInvalid"


@dataclass(frozen=True)
class AwaitableFailed:
    """A coroutine lifted into a Task raised instead of returning.

    Attributes:
        error: The exception raised by the awaitable.
        kind: Discriminator for pattern matching. Always "AwaitableFailed".
    """

    error: BaseException
    kind: Literal["AwaitableFailed"] = "AwaitableFailed"


FunctorkitError = TracingFailed | SettingsInvalid | AwaitableFailed


def assert_never(value: Never) -> Never:
    """Exhaustiveness guard for ``match`` statements over closed unions.

    Use it in the default case so that mypy reports any variant left
    unhandled; reaching it at runtime means a value outside the union was
    passed in.

    Example:
        >>> match container:
        ...     case Identity(): ...
        ...     case _:
        ...         assert_never(container)
    """
    raise AssertionError(f"Unhandled case: {value!r}")


__all__ = [
    "AwaitableFailed",
    "FunctorkitError",
    "SettingsInvalid",
    "TracingFailed",
    "assert_never",
]
