"""
Lazy asynchronous computations with explicit success and failure.

A :class:`Task` holds a registration callable ``(reject, resolve) -> None``.
Nothing runs at construction or map time; :meth:`Task.fork` is the single
execution trigger. Each fork creates a :class:`TaskExecution` that moves
once from ``Pending`` to ``Resolved`` or ``Rejected`` and calls exactly one
of the fork's handlers.

State machine:
    Pending -> Resolved(value)   (on_resolve called once)
    Pending -> Rejected(error)   (on_reject called once)

Settlement calls that arrive after the first one are ignored, and reported
as warning trace events when the fork was given a tracer.

Usage:
    >>> import asyncio
    >>> def fetch_post(reject, resolve):
    ...     loop = asyncio.get_running_loop()
    ...     loop.call_later(0.3, resolve, {"title": "Love them tasks"})
    >>> task = Task(fetch_post).map(prop("title")).map(to_upper)
    >>> task.fork(print, print)  # prints LOVE THEM TASKS once the timer fires

See Also:
    - functorkit.io - the synchronous deferred-effect counterpart
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, replace
from functools import reduce
from typing import Any, Awaitable, Callable, Generic, Literal, Never, TypeAlias, TypeVar

from functorkit.containers import Either, Left, Right
from functorkit.errors import AwaitableFailed
from functorkit.tracing import TraceEvent, Tracer


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")

Reject: TypeAlias = Callable[[E], None]
Resolve: TypeAlias = Callable[[T], None]


@dataclass(frozen=True)
class Pending:
    """The execution has not settled yet."""

    kind: Literal["Pending"] = "Pending"


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """The execution succeeded with ``value``."""

    value: T
    kind: Literal["Resolved"] = "Resolved"


@dataclass(frozen=True)
class Rejected(Generic[E]):
    """The execution failed with ``error``."""

    error: E
    kind: Literal["Rejected"] = "Rejected"


TaskState = Pending | Resolved[T] | Rejected[E]
Stage: TypeAlias = Callable[[Any], Any]


class TaskExecution(Generic[E, T]):
    """One run of a Task, from fork to settlement.

    Unlike the containers it is mutable. It is owned by the fork that
    created it and guards the single-settlement rule: the first call to
    :meth:`resolve` or :meth:`reject` wins. Mapped stages run only for that
    first resolution, after the guard.
    """

    def __init__(
        self,
        on_reject: Callable[[E], object],
        on_resolve: Callable[[T], object],
        tracer: Tracer | None = None,
        stages: tuple[Stage, ...] = (),
    ) -> None:
        self._on_reject = on_reject
        self._on_resolve = on_resolve
        self._tracer = tracer
        self._stages = stages
        self._state: TaskState[T, E] = Pending()

    @property
    def state(self) -> TaskState[T, E]:
        return self._state

    def is_settled(self) -> bool:
        return not isinstance(self._state, Pending)

    def resolve(self, value: Any) -> None:
        """Settle with ``value`` run through the mapped stages.

        A stage that raises leaves the execution pending and propagates to
        the caller of ``resolve``.
        """
        match self._state:
            case Pending():
                final: T = reduce(lambda acc, stage: stage(acc), self._stages, value)
                self._settle(Resolved(final))
            case _:
                self._report_ignored(Resolved(value))

    def reject(self, error: E) -> None:
        self._settle(Rejected(error))

    def _settle(self, outcome: Resolved[T] | Rejected[E]) -> None:
        match self._state:
            case Pending():
                # Terminal state is recorded before the handler runs.
                self._state = outcome
                match outcome:
                    case Resolved(value=value):
                        self._on_resolve(value)
                    case Rejected(error=error):
                        self._on_reject(error)
            case _:
                self._report_ignored(outcome)

    def _report_ignored(self, outcome: Resolved[Any] | Rejected[E]) -> None:
        if self._tracer is None or not self._tracer.settings.warn_on_resettle:
            return
        self._tracer.emit(
            TraceEvent(
                tag=f"task ignored {outcome.kind.lower()} after settlement",
                value=outcome,
                level="warning",
            )
        )


@dataclass(frozen=True)
class Task(Generic[E, T]):
    """A lazy computation that eventually rejects with ``E`` or resolves with ``T``.

    Attributes:
        computation: Registration callable receiving ``(reject, resolve)``.
            It may settle synchronously or schedule settlement on the
            running event loop.
        stages: Functions added by :meth:`map`, applied in order to the
            value the registration resolves with.
    """

    computation: Callable[[Reject[E], Resolve[Any]], None]
    stages: tuple[Stage, ...] = ()

    @classmethod
    def of(cls, value: U) -> Task[Never, U]:
        """A Task that resolves with ``value`` as soon as it is forked."""
        return Task(lambda reject, resolve: resolve(value))

    @classmethod
    def rejected(cls, error: U) -> Task[U, Never]:
        """A Task that rejects with ``error`` as soon as it is forked."""
        return Task(lambda reject, resolve: reject(error))

    @classmethod
    def from_awaitable(cls, factory: Callable[[], Awaitable[U]]) -> Task[AwaitableFailed, U]:
        """
        Lift a coroutine factory into a Task.

        ``factory`` is called on every fork, and its awaitable is scheduled on
        the running event loop. An exception raised by the awaitable becomes
        a rejection carrying :class:`AwaitableFailed`.

        Raises:
            RuntimeError: If forked with no running event loop.
        """

        # Keeps this Task's scheduled awaitables alive until they finish.
        in_flight: set[asyncio.Future[U]] = set()

        def computation(reject: Reject[AwaitableFailed], resolve: Resolve[U]) -> None:
            loop = asyncio.get_running_loop()
            future = asyncio.ensure_future(factory(), loop=loop)
            in_flight.add(future)

            def settle(done: asyncio.Future[U]) -> None:
                in_flight.discard(done)
                if done.cancelled():
                    reject(AwaitableFailed(error=asyncio.CancelledError()))
                    return
                exc = done.exception()
                if exc is not None:
                    reject(AwaitableFailed(error=exc))
                    return
                resolve(done.result())

            future.add_done_callback(settle)

        return Task(computation)

    def map(self, f: Callable[[T], U]) -> Task[E, U]:
        """Transform the eventual success value; rejections pass through.

        Nothing runs: ``f`` is appended to the stages, and forking the result
        applies the stages once, to the first resolution only.
        """
        return replace(self, stages=self.stages + (f,))  # type: ignore[return-value]

    def fork(
        self,
        on_reject: Callable[[E], object],
        on_resolve: Callable[[T], object],
        *,
        tracer: Tracer | None = None,
    ) -> TaskExecution[E, T]:
        """Run the Task.

        Invokes the registration exactly once. Exactly one of ``on_reject`` or
        ``on_resolve`` is called, once. Forking again runs the effect again.

        Args:
            on_reject: Receives the error if the Task fails.
            on_resolve: Receives the final mapped value if it succeeds.
            tracer: Receives a warning for each settlement call ignored
                because the execution had already settled.

        Returns:
            The execution, whose ``state`` reflects its progress.
        """
        execution: TaskExecution[E, T] = TaskExecution(on_reject, on_resolve, tracer, self.stages)
        self.computation(execution.reject, execution.resolve)
        return execution

    async def to_either(self) -> Either[E, T]:
        """Fork on the running event loop and await the outcome as an Either."""
        outcome: asyncio.Future[Either[E, T]] = asyncio.get_running_loop().create_future()
        self.fork(
            lambda error: outcome.set_result(Left(error)),
            lambda value: outcome.set_result(Right(value)),
        )
        return await outcome


__all__ = [
    "Pending",
    "Rejected",
    "Resolved",
    "Task",
    "TaskExecution",
    "TaskState",
]
