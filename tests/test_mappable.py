"""
Tests for fmap dispatch and the functor laws across every container.

IO and Task cannot be compared directly, so they are observed by
performing or forking them.
"""

from __future__ import annotations

from typing import Any, Callable

import pytest

from functorkit import (
    IO,
    Identity,
    Left,
    Maybe,
    Right,
    Task,
    compose,
    fmap,
    identity,
)
from tests.helpers import Spy


def observe(container: Any) -> Any:
    """Reduce a container to a comparable value."""
    match container:
        case IO():
            return ("IO", container.unsafe_perform_io())
        case Task():
            outcome: list[Any] = []
            container.fork(
                lambda error: outcome.append(("rejected", error)),
                lambda value: outcome.append(("resolved", value)),
            )
            return ("Task", outcome)
        case _:
            return container


CONTAINERS: list[Callable[[], Any]] = [
    lambda: Identity.of(3),
    lambda: Maybe.of(3),
    lambda: Maybe.of(None),
    lambda: Left.of("failure"),
    lambda: Right.of(3),
    lambda: IO.of(3),
    lambda: Task.of(3),
    lambda: Task.rejected("failure"),
]

CONTAINER_IDS = [
    "identity",
    "just",
    "nothing",
    "left",
    "right",
    "io",
    "task-resolved",
    "task-rejected",
]


def f(x: int) -> int:
    return x + 1


def g(x: int) -> int:
    return x * 10


class TestFunctorLaws:
    """Identity and composition laws for every Mappable."""

    @pytest.mark.parametrize("make", CONTAINERS, ids=CONTAINER_IDS)
    def test_identity_law(self, make: Callable[[], Any]) -> None:
        """c.map(id) == c."""
        container = make()
        assert observe(container.map(identity)) == observe(container)

    @pytest.mark.parametrize("make", CONTAINERS, ids=CONTAINER_IDS)
    def test_composition_law(self, make: Callable[[], Any]) -> None:
        """c.map(compose(f, g)) == c.map(g).map(f)."""
        container = make()
        assert observe(container.map(compose(f, g))) == observe(container.map(g).map(f))

    @pytest.mark.parametrize("make", CONTAINERS, ids=CONTAINER_IDS)
    def test_fmap_agrees_with_map(self, make: Callable[[], Any]) -> None:
        """fmap(f, c) == c.map(f)."""
        container = make()
        assert observe(fmap(f, container)) == observe(container.map(f))


class TestFmap:
    """Tests for the pointfree fmap."""

    def test_curried(self) -> None:
        """fmap(f) awaits the container."""
        increment = fmap(f)
        assert increment(Identity(1)) == Identity(2)
        assert increment(Right(1)) == Right(2)

    def test_left_skips_function(self) -> None:
        """fmap over a Left never calls f."""
        spy = Spy()
        assert fmap(spy, Left("x")) == Left("x")
        assert not spy.called

    def test_nothing_skips_function(self) -> None:
        """fmap over nothing never calls f."""
        spy = Spy()
        assert fmap(spy, Maybe(None)) == Maybe(None)
        assert not spy.called

    def test_lifts_into_a_composition(self) -> None:
        """fmap turns a plain function into a container function."""
        shout = compose(fmap(str.upper), fmap(lambda s: s + "!"))
        assert shout(Maybe.of("hey")) == Maybe("HEY!")

    def test_rejects_non_mappable(self) -> None:
        """Values outside the union are a programming error."""
        with pytest.raises(AssertionError, match="Unhandled case"):
            fmap(f, [1, 2, 3])
