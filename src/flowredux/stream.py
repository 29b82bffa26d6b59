"""
Observable projection of the store's state.

``StateStream`` gives readers the latest state without going through
dispatch. Iterating it yields the current state first, then every later
state, with two rules borrowed from state flows:

- conflation: a slow reader skips intermediate states and only sees the
  newest one;
- distinctness: a state equal to the one last yielded is not yielded again.

Example:
    >>> async for state in app.state_stream:
    ...     render(state)
"""

from __future__ import annotations

import asyncio
from contextlib import aclosing
from typing import AsyncGenerator, Callable, Generic, TypeVar

from flowredux.store import Store


S = TypeVar("S")


class StateStream(Generic[S]):
    """Read-only, conflating stream of a store's states."""

    def __init__(self, store: Store[S]) -> None:
        self._store = store

    @property
    def value(self) -> S:
        """Current state."""
        return self._store.get_state()

    def __aiter__(self) -> AsyncGenerator[S, None]:
        return self._follow()

    async def _follow(self) -> AsyncGenerator[S, None]:
        loop = asyncio.get_running_loop()
        changed = asyncio.Event()
        latest = self._store.get_state()

        def on_state(state: S) -> None:
            nonlocal latest
            latest = state
            loop.call_soon_threadsafe(changed.set)

        subscription = self._store.subscribe(on_state)
        try:
            emitted = self._store.get_state()
            yield emitted
            while True:
                await changed.wait()
                changed.clear()
                current = latest
                if current is emitted or current == emitted:
                    continue
                emitted = current
                yield current
        finally:
            subscription.unsubscribe()

    async def wait_for(self, predicate: Callable[[S], bool]) -> S:
        """Return the first state (current one included) satisfying ``predicate``.

        Combine with ``asyncio.wait_for`` to bound the wait.
        """
        async with aclosing(self._follow()) as states:
            async for state in states:
                if predicate(state):
                    return state
        raise RuntimeError("State stream ended without a matching state")
