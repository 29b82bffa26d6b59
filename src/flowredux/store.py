"""
Single-owner state store.

The store is the only holder of the current state. ``dispatch`` runs one
complete cycle per action:

    reduce -> assign -> notify subscribers -> hand the action to middleware

Cycles are serialized. A re-entrant lock makes callers on other threads wait
for the running cycle. A ``dispatch`` issued from inside a running cycle on
the same thread (a subscriber or synchronous middleware dispatching again) is
queued and applied as its own full cycle once the current one has finished,
so no subscriber is ever handed a state older than the one its notification
was triggered by. A queued action whose reducer raises is logged and skipped;
the outer ``dispatch`` only raises for its own action.

Observer and middleware exceptions are logged and never unwind a cycle whose
state has already been committed.

Example:
    >>> store = Store(app_reducer, AppState())
    >>> subscription = store.subscribe(lambda state: print(state.home_state.counter))
    >>> store.dispatch(Increment())
    1
    >>> subscription.unsubscribe()
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections import deque
from typing import Callable, Generic, Protocol, Sequence, TypeVar

from flowredux.actions import Action
from flowredux.reducers import Reducer


logger = logging.getLogger(__name__)

S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)

Observer = Callable[[S], None]
Dispatch = Callable[[Action], None]


class Middleware(Protocol[S_contra]):
    """Observer of applied actions that may dispatch follow-ups.

    Called once per cycle, after every subscriber has been notified, with the
    state the action produced. Implementations must not block.
    """

    def after_dispatch(self, action: Action, state: S_contra, dispatch: Dispatch) -> None: ...


class Subscription:
    """Handle returned by ``Store.subscribe``; call it to detach."""

    def __init__(self, release: Callable[[int], None], token: int) -> None:
        self._release = release
        self._token = token
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def unsubscribe(self) -> None:
        """Detach the observer. Calling this more than once is a no-op."""
        if self._active:
            self._active = False
            self._release(self._token)

    def __call__(self) -> None:
        self.unsubscribe()


class Store(Generic[S]):
    """Holds the authoritative state and serializes every transition.

    Args:
        reducer: Pure transition function.
        initial_state: State before the first dispatch.
        middleware: Run in order after subscribers, once per cycle.
        notify_unchanged: When false, skip subscriber notification for cycles
            whose new state equals the previous one.
    """

    def __init__(
        self,
        reducer: Reducer[S],
        initial_state: S,
        *,
        middleware: Sequence[Middleware[S]] = (),
        notify_unchanged: bool = True,
    ) -> None:
        self._reducer = reducer
        self._state = initial_state
        self._last_action: Action | None = None
        self._middleware: tuple[Middleware[S], ...] = tuple(middleware)
        self._notify_unchanged = notify_unchanged
        self._observers: dict[int, Observer[S]] = {}
        self._tokens = itertools.count()
        self._lock = threading.RLock()
        self._dispatching = False
        self._pending: deque[Action] = deque()

    def get_state(self) -> S:
        return self._state

    @property
    def last_action(self) -> Action | None:
        """Most recent action whose reducer completed."""
        return self._last_action

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._observers)

    def dispatch(self, action: Action) -> None:
        """Apply ``action`` and notify.

        Raises:
            Exception: Whatever the reducer raised. The state, last action and
                subscribers are left exactly as they were.
        """
        with self._lock:
            # Only the thread holding the lock can see this flag set.
            if self._dispatching:
                self._pending.append(action)
                return
            self._dispatching = True
            try:
                self._cycle(action)
                self._drain_pending()
            finally:
                self._dispatching = False
                self._pending.clear()

    def subscribe(self, observer: Observer[S]) -> Subscription:
        """Register ``observer`` to receive every new state."""
        with self._lock:
            token = next(self._tokens)
            self._observers[token] = observer
        return Subscription(self._release, token)

    def _release(self, token: int) -> None:
        with self._lock:
            self._observers.pop(token, None)

    def _cycle(self, action: Action) -> None:
        previous = self._state
        current = self._reducer(previous, action)
        self._state = current
        self._last_action = action
        if self._notify_unchanged or (current is not previous and current != previous):
            self._notify(current)
        for middleware in self._middleware:
            try:
                middleware.after_dispatch(action, current, self.dispatch)
            except Exception:
                logger.exception("Middleware %r raised for %s", middleware, action.kind)

    def _notify(self, state: S) -> None:
        for observer in tuple(self._observers.values()):
            try:
                observer(state)
            except Exception:
                logger.exception("State observer %r raised; continuing notification", observer)

    def _drain_pending(self) -> None:
        while self._pending:
            action = self._pending.popleft()
            try:
                self._cycle(action)
            except Exception:
                logger.exception("Queued dispatch of %r failed; state left unchanged", action)


def create_store(
    reducer: Reducer[S],
    initial_state: S,
    *middleware: Middleware[S],
    notify_unchanged: bool = True,
) -> Store[S]:
    """Convenience constructor mirroring ``createStore(reducer, state, middleware)``."""
    return Store(
        reducer,
        initial_state,
        middleware=middleware,
        notify_unchanged=notify_unchanged,
    )


__all__ = ["Dispatch", "Middleware", "Observer", "Store", "Subscription", "create_store"]
