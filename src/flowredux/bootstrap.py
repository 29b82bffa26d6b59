"""
Explicit construction of the application store.

``create_app_store`` wires the root reducer, the effect registry, the effect
middleware and the state stream together and hands back an ``AppStore``.
Nothing is global: whoever calls it owns the result and passes it on.

Usage:
    ```python
    async with await create_app_store(StoreConfig(fetch_data1_latency=0.2)) as app:
        app.dispatch(FetchData1())
        state = await app.state_stream.wait_for(lambda s: s.home_state.data1 is not None)
    ```
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Sequence

from flowredux.actions import Action, ExitApp
from flowredux.config import StoreConfig
from flowredux.effects.middleware import EffectMiddleware
from flowredux.effects.registry import EffectRegistry, TypedSideEffect
from flowredux.effects.side_effects import default_side_effects
from flowredux.reducers import app_reducer
from flowredux.result import Failure, Success
from flowredux.state import AppState
from flowredux.store import Observer, Store, Subscription
from flowredux.stream import StateStream


logger = logging.getLogger(__name__)


class AppStore:
    """The application's store together with its effect runtime.

    ``dispatch`` / ``get_state`` / ``subscribe`` delegate to the store.
    ``last_action`` and ``exit_requested`` let the host detect ``ExitApp``
    from a state observer.
    """

    def __init__(
        self,
        store: Store[AppState],
        middleware: EffectMiddleware[AppState],
        config: StoreConfig,
    ) -> None:
        self._store = store
        self._middleware = middleware
        self._config = config
        self._state_stream = StateStream(store)

    @property
    def store(self) -> Store[AppState]:
        return self._store

    @property
    def middleware(self) -> EffectMiddleware[AppState]:
        return self._middleware

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def state_stream(self) -> StateStream[AppState]:
        return self._state_stream

    @property
    def last_action(self) -> Action | None:
        return self._store.last_action

    @property
    def exit_requested(self) -> bool:
        return self._store.last_action == ExitApp()

    def dispatch(self, action: Action) -> None:
        self._store.dispatch(action)

    def get_state(self) -> AppState:
        return self._store.get_state()

    def subscribe(self, observer: Observer[AppState]) -> Subscription:
        return self._store.subscribe(observer)

    async def drain(self) -> None:
        """Wait for every in-flight effect, and the effects they trigger, to settle."""
        await self._middleware.drain()

    async def aclose(self) -> None:
        """Cancel in-flight effects. Dispatch keeps working, without effects."""
        await self._middleware.aclose()
        logger.info("AppStore closed")

    async def __aenter__(self) -> AppStore:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        await self.aclose()


def build_registry(
    registrations: Sequence[TypedSideEffect[AppState, Any]],
) -> EffectRegistry[AppState]:
    """Validate registrations, failing loudly on a wiring mistake.

    Raises:
        RuntimeError: If any registration is invalid.
    """
    match EffectRegistry.create(*registrations):
        case Success(registry):
            return registry
        case Failure(error):
            raise RuntimeError(f"Invalid side-effect registration: {error}")


async def create_app_store(
    config: StoreConfig | None = None,
    side_effects: Sequence[TypedSideEffect[AppState, Any]] | None = None,
    initial_state: AppState | None = None,
) -> AppStore:
    """Build an ``AppStore`` whose effects run on the current event loop.

    Args:
        config: Runtime settings; defaults to ``StoreConfig()``.
        side_effects: Registrations to run; defaults to
            ``default_side_effects(config)``.
        initial_state: State before the first dispatch; defaults to ``AppState()``.

    Raises:
        RuntimeError: If a registration is invalid.
    """
    resolved = config if config is not None else StoreConfig()
    registrations = side_effects if side_effects is not None else default_side_effects(resolved)
    middleware = EffectMiddleware(build_registry(registrations), asyncio.get_running_loop())
    store = Store(
        app_reducer,
        initial_state if initial_state is not None else AppState(),
        middleware=[middleware],
        notify_unchanged=resolved.notify_unchanged,
    )
    logger.info("AppStore created with %d side effects", len(middleware.registry))
    return AppStore(store, middleware, resolved)


__all__ = ["AppStore", "build_registry", "create_app_store"]
