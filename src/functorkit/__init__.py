"""
functorkit - currying, composition and law-abiding functor containers.

Plain functions are curried and composed pointfree, then lifted into a
container that carries one effect structurally:

    - Identity: no effect, just a box
    - Maybe: possible absence (``None``)
    - Either (Left/Right): branching with an explanatory failure value
    - IO: a deferred, repeatable synchronous effect
    - Task: a lazy asynchronous effect with explicit success and failure

Expected failures are values that short-circuit ``map``; only programming
errors raise.

Example:
    >>> from functorkit import Maybe, add, compose, prop
    >>> age_in_ten_years = compose(lambda m: m.map(add(10)), lambda m: m.map(prop("age")))
    >>> age_in_ten_years(Maybe.of({"name": "Bob", "age": 22})).value
    32
    >>> age_in_ten_years(Maybe.of({"name": "Simon"})).value is None
    True
"""

from __future__ import annotations

# Configuration
from functorkit.config import TracingSettings, validate_settings

# Containers
from functorkit.containers import Either, Identity, Left, Maybe, Right, either, maybe

# Functions
from functorkit.compose import Composed, compose, converge, identity, pipe
from functorkit.curry import Curried, curry

# Errors
from functorkit.errors import (
    AwaitableFailed,
    FunctorkitError,
    SettingsInvalid,
    TracingFailed,
    assert_never,
)
from functorkit.io import IO
from functorkit.mappable import Mappable, fmap
from functorkit.pointfree import (
    add,
    contains,
    divide,
    filter_list,
    head,
    join,
    map_list,
    multiply,
    prop,
    reduce_list,
    replace,
    split,
    take,
    to_lower,
    to_upper,
)
from functorkit.task import Pending, Rejected, Resolved, Task, TaskExecution, TaskState

# Tracing
from functorkit.tracing import LoggingTracer, RecordingTracer, TraceEvent, Tracer, trace


__all__ = [
    # Functions
    "Curried",
    "curry",
    "Composed",
    "compose",
    "pipe",
    "identity",
    "converge",
    # Containers
    "Identity",
    "Maybe",
    "Left",
    "Right",
    "Either",
    "either",
    "maybe",
    "IO",
    "Task",
    "TaskExecution",
    "TaskState",
    "Pending",
    "Resolved",
    "Rejected",
    "Mappable",
    "fmap",
    # Pointfree helpers
    "prop",
    "split",
    "join",
    "to_upper",
    "to_lower",
    "replace",
    "head",
    "map_list",
    "filter_list",
    "reduce_list",
    "take",
    "add",
    "multiply",
    "divide",
    "contains",
    # Tracing
    "Tracer",
    "TraceEvent",
    "LoggingTracer",
    "RecordingTracer",
    "trace",
    # Configuration
    "TracingSettings",
    "validate_settings",
    # Errors
    "FunctorkitError",
    "TracingFailed",
    "SettingsInvalid",
    "AwaitableFailed",
    "assert_never",
]
