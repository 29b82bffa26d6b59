"""
flowredux - a unidirectional state-management core.

One immutable state tree per process, replaced only by pure reducers.
Side effects run on an asyncio event loop after each dispatch and may answer
with follow-up actions.

Example:
    >>> from flowredux import StoreConfig, create_app_store
    >>> from flowredux.actions import FetchData1, Increment
    >>>
    >>> async with await create_app_store(StoreConfig()) as app:
    ...     app.dispatch(Increment())
    ...     app.dispatch(FetchData1())
    ...     await app.drain()
    ...     app.get_state().home_state.data1
    'Fetched data 1'
"""

from __future__ import annotations

from flowredux.bootstrap import AppStore, build_registry, create_app_store
from flowredux.config import StoreConfig
from flowredux.errors import ReducerError, UnknownActionError
from flowredux.reducers import app_reducer
from flowredux.result import Failure, Result, Success
from flowredux.state import AppState, HomeState, ProfileState, Screen, SettingsState
from flowredux.store import Middleware, Store, Subscription, create_store
from flowredux.stream import StateStream


__all__ = [
    "AppState",
    "AppStore",
    "Failure",
    "HomeState",
    "Middleware",
    "ProfileState",
    "ReducerError",
    "Result",
    "Screen",
    "SettingsState",
    "StateStream",
    "Store",
    "StoreConfig",
    "Subscription",
    "Success",
    "UnknownActionError",
    "app_reducer",
    "build_registry",
    "create_app_store",
    "create_store",
]
