"""
Side effects shipped with the application, and their default registrations.

Fetch effects simulate network latency with ``asyncio.sleep``; latencies come
from ``StoreConfig``. Every fetch registration maps its failure to a failure
action so that a failed fetch never leaves a loading flag set.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from flowredux.actions import (
    Action,
    DataFetched1,
    DataFetched2,
    DataFetchFailed1,
    DataFetchFailed2,
    FetchData1,
    FetchData2,
    FetchProfile,
    ProfileFetched,
    ProfileFetchFailed,
)
from flowredux.config import LogLevel, StoreConfig
from flowredux.effects.errors import EffectError, describe_effect_error
from flowredux.effects.registry import TypedSideEffect, on_any, on_kind
from flowredux.state import AppState, HomeState


FETCHED_DATA_1 = "Fetched data 1"
FETCHED_DATA_2 = "Fetched data 2"


class LoggingSideEffect:
    """Logs every action it sees. Observational only: always returns ``None``."""

    def __init__(self, logger_name: str = "flowredux.actions", level: LogLevel = "info") -> None:
        self._logger = logging.getLogger(logger_name)
        self._level: LogLevel = level

    async def __call__(self, state: AppState, action: Action) -> None:
        match self._level:
            case "debug":
                self._logger.debug("Action dispatched: %r", action)
            case "info":
                self._logger.info("Action dispatched: %r", action)
            case "warning":
                self._logger.warning("Action dispatched: %r", action)
            case "error":
                self._logger.error("Action dispatched: %r", action)
            case "critical":
                self._logger.critical("Action dispatched: %r", action)
        return None


class FetchData1SideEffect:
    def __init__(self, latency: float = 1.0) -> None:
        self._latency = latency

    async def __call__(self, state: HomeState, action: Action) -> Action:
        await asyncio.sleep(self._latency)
        return DataFetched1(data=FETCHED_DATA_1)


class FetchData2SideEffect:
    def __init__(self, latency: float = 1.5) -> None:
        self._latency = latency

    async def __call__(self, state: HomeState, action: Action) -> Action:
        await asyncio.sleep(self._latency)
        return DataFetched2(data=FETCHED_DATA_2)


class FetchProfileSideEffect:
    """Loads the profile of the user the profile screen was opened for.

    Receives the ``userId`` navigation parameter as its state slice.
    """

    def __init__(self, latency: float = 0.5) -> None:
        self._latency = latency

    async def __call__(self, user_id: str, action: Action) -> Action:
        await asyncio.sleep(self._latency)
        return ProfileFetched(username=user_id, bio=f"Profile of {user_id}")


# ========== Selectors ==========


def select_app_state(state: AppState) -> AppState:
    return state


def select_home_state(state: AppState) -> HomeState:
    return state.home_state


def select_profile_user_id(state: AppState) -> str | None:
    """``userId`` navigation parameter, or ``None`` when not on a user's profile."""
    user_id = state.navigation_params.get("userId")
    return user_id if isinstance(user_id, str) and user_id else None


# ========== Failure mappers ==========


def fetch_data1_failed(error: EffectError) -> Action:
    return DataFetchFailed1(message=describe_effect_error(error))


def fetch_data2_failed(error: EffectError) -> Action:
    return DataFetchFailed2(message=describe_effect_error(error))


def fetch_profile_failed(error: EffectError) -> Action:
    return ProfileFetchFailed(message=describe_effect_error(error))


def default_side_effects(config: StoreConfig) -> tuple[TypedSideEffect[AppState, Any], ...]:
    """The registrations the application runs with."""
    return (
        TypedSideEffect(
            name="log-actions",
            effect=LoggingSideEffect(config.action_logger_name, config.action_log_level),
            action_filter=on_any(),
            selector=select_app_state,
        ),
        TypedSideEffect(
            name="fetch-data-1",
            effect=FetchData1SideEffect(config.fetch_data1_latency),
            action_filter=on_kind(FetchData1),
            selector=select_home_state,
            on_failure=fetch_data1_failed,
        ),
        TypedSideEffect(
            name="fetch-data-2",
            effect=FetchData2SideEffect(config.fetch_data2_latency),
            action_filter=on_kind(FetchData2),
            selector=select_home_state,
            on_failure=fetch_data2_failed,
        ),
        TypedSideEffect(
            name="fetch-profile",
            effect=FetchProfileSideEffect(config.fetch_profile_latency),
            action_filter=on_kind(FetchProfile),
            selector=select_profile_user_id,
            on_failure=fetch_profile_failed,
        ),
    )


__all__ = [
    "FETCHED_DATA_1",
    "FETCHED_DATA_2",
    "FetchData1SideEffect",
    "FetchData2SideEffect",
    "FetchProfileSideEffect",
    "LoggingSideEffect",
    "default_side_effects",
    "fetch_data1_failed",
    "fetch_data2_failed",
    "fetch_profile_failed",
    "select_app_state",
    "select_home_state",
    "select_profile_user_id",
]
