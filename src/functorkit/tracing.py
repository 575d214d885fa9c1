"""
Tracing through an injected collaborator.

Pipelines never log through process-wide state. They receive a
:class:`Tracer` and hand it immutable :class:`TraceEvent` values; the tracer
decides where the events go. :class:`LoggingTracer` routes them to the
standard logging module, :class:`RecordingTracer` keeps them in memory for
tests.

Example:
    >>> tracer = RecordingTracer()
    >>> dasherize = compose(join("-"), map_list(to_lower), trace(tracer, "after split"), split(" "))
    >>> dasherize("The world is a vampire")
    'the-world-is-a-vampire'
    >>> tracer.events[0].value
    ['The', 'world', 'is', 'a', 'vampire']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Protocol, TypeVar

from functorkit.config import TraceLevel, TracingSettings
from functorkit.containers import Either, Left, Right
from functorkit.curry import curry
from functorkit.errors import TracingFailed, assert_never


T = TypeVar("T")


@dataclass(frozen=True)
class TraceEvent:
    """A request to record an intermediate value.

    Attributes:
        tag: Short label naming the point in the pipeline.
        value: The value observed at that point.
        level: Severity of the event.
        logger_name: Logger to use; the tracer's default when empty.
        kind: Discriminator for pattern matching. Always "TraceEvent".
    """

    tag: str
    value: object = None
    level: TraceLevel = "debug"
    logger_name: str = ""
    kind: Literal["TraceEvent"] = "TraceEvent"


class Tracer(Protocol):
    """Anything that can receive trace events."""

    @property
    def settings(self) -> TracingSettings: ...

    def emit(self, event: TraceEvent) -> Either[TracingFailed, None]:
        """Deliver one event; report failure as a Left instead of raising."""
        ...


class LoggingTracer:
    """Tracer backed by the standard logging module."""

    def __init__(self, settings: TracingSettings | None = None) -> None:
        self._settings = settings if settings is not None else TracingSettings()

    @property
    def settings(self) -> TracingSettings:
        return self._settings

    def emit(self, event: TraceEvent) -> Either[TracingFailed, None]:
        """Log ``event`` at its level on the event's (or default) logger."""
        logger_name = event.logger_name or self._settings.logger_name
        logger = logging.getLogger(logger_name)

        try:
            match event.level:
                case "debug":
                    logger.debug("%s %r", event.tag, event.value)
                case "info":
                    logger.info("%s %r", event.tag, event.value)
                case "warning":
                    logger.warning("%s %r", event.tag, event.value)
                case "error":
                    logger.error("%s %r", event.tag, event.value)
                case "critical":
                    logger.critical("%s %r", event.tag, event.value)
                case _ as unreachable:
                    assert_never(unreachable)
            return Right(None)
        except Exception as exc:
            return Left(TracingFailed(message=str(exc), logger_name=logger_name))


class RecordingTracer:
    """Test tracer that keeps every event in order.

    Attributes:
        events: All events emitted so far.

    Example:
        >>> tracer = RecordingTracer()
        >>> trace(tracer, "seen", 42)
        42
        >>> tracer.assert_tags(["seen"])
    """

    def __init__(self, settings: TracingSettings | None = None) -> None:
        self._settings = settings if settings is not None else TracingSettings()
        self.events: list[TraceEvent] = []

    @property
    def settings(self) -> TracingSettings:
        return self._settings

    def emit(self, event: TraceEvent) -> Either[TracingFailed, None]:
        self.events.append(event)
        return Right(None)

    def events_tagged(self, tag: str) -> list[TraceEvent]:
        """Return the recorded events carrying ``tag``."""
        return [e for e in self.events if e.tag == tag]

    def assert_tags(self, expected: list[str]) -> None:
        """Assert the recorded tags, in order.

        Raises:
            AssertionError: If the recorded tags differ from ``expected``.
        """
        actual = [e.tag for e in self.events]
        if actual != expected:
            raise AssertionError(f"Expected trace tags {expected}, got {actual}")

    def clear(self) -> None:
        self.events.clear()


@curry
def trace(tracer: Tracer, tag: str, value: T) -> T:
    """Emit ``value`` under ``tag`` and return it unchanged.

    Curried, so ``trace(tracer, "tag")`` can sit anywhere in a composition.
    A failing tracer never breaks the pipeline.
    """
    tracer.emit(TraceEvent(tag=tag, value=value, level=tracer.settings.level))
    return value


__all__ = [
    "LoggingTracer",
    "RecordingTracer",
    "TraceEvent",
    "Tracer",
    "trace",
]
