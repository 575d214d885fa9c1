"""Tracing configuration, validated with Pydantic and surfaced as an Either."""

from __future__ import annotations

from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from functorkit.containers import Either, Left, Right
from functorkit.errors import SettingsInvalid


TraceLevel: TypeAlias = Literal["debug", "info", "warning", "error", "critical"]

DEFAULT_LOGGER_NAME = "functorkit"


class TracingSettings(BaseModel):
    """Immutable settings shared by the tracers.

    Attributes:
        logger_name: Logger used when an event does not name one.
        level: Level given to events built by :func:`functorkit.tracing.trace`.
        warn_on_resettle: Report ignored ``resolve``/``reject`` calls made
            after a Task execution has already settled.
    """

    logger_name: str = Field(DEFAULT_LOGGER_NAME, min_length=1)
    level: TraceLevel = "debug"
    warn_on_resettle: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


def validate_settings(**data: object) -> Either[SettingsInvalid, TracingSettings]:
    """
    Build :class:`TracingSettings` and report validation problems as a Left.

    Pydantic raises on bad input; the exception is caught here at the
    boundary so configuration errors flow like any other branch failure.
    """
    try:
        return Right(TracingSettings.model_validate(data))
    except ValidationError as exc:
        return Left(SettingsInvalid(error=exc))


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "TraceLevel",
    "TracingSettings",
    "validate_settings",
]
