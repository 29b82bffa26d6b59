"""
Side-effect layer for flowredux.

Reducers stay pure; anything that waits, talks to the outside world or logs
lives in a side effect. Effects are registered statically
(``EffectRegistry``), triggered by ``EffectMiddleware`` after each dispatch,
and answer with at most one follow-up action.

Example:
    >>> from flowredux.effects import (
    ...     EffectMiddleware,
    ...     EffectRegistry,
    ...     default_side_effects,
    ... )
    >>>
    >>> registry = EffectRegistry.create(*default_side_effects(config)).unwrap()
    >>> middleware = EffectMiddleware(registry, asyncio.get_running_loop())
    >>> store = Store(app_reducer, AppState(), middleware=[middleware])
"""

from __future__ import annotations

# Error types
from flowredux.effects.errors import (
    EffectError,
    EffectRaised,
    EffectReturnedInvalid,
    describe_effect_error,
)

# Middleware
from flowredux.effects.middleware import EffectMiddleware, invoke_side_effect

# Test double
from flowredux.effects.mock import RecordedCall, RecordingSideEffect

# Registry
from flowredux.effects.registry import (
    ActionFilter,
    AnyAction,
    DuplicateEffectName,
    EffectRegistry,
    FailureMapper,
    FamilyFilter,
    KindFilter,
    RegistryError,
    SideEffect,
    TypedSideEffect,
    UnknownActionFamily,
    UnknownActionKind,
    filter_accepts,
    on_any,
    on_family,
    on_kind,
)

# Application side effects
from flowredux.effects.side_effects import (
    FETCHED_DATA_1,
    FETCHED_DATA_2,
    FetchData1SideEffect,
    FetchData2SideEffect,
    FetchProfileSideEffect,
    LoggingSideEffect,
    default_side_effects,
    select_app_state,
    select_home_state,
    select_profile_user_id,
)


__all__ = [
    # Errors
    "EffectError",
    "EffectRaised",
    "EffectReturnedInvalid",
    "describe_effect_error",
    # Registry
    "SideEffect",
    "TypedSideEffect",
    "EffectRegistry",
    "FailureMapper",
    "ActionFilter",
    "AnyAction",
    "FamilyFilter",
    "KindFilter",
    "on_any",
    "on_family",
    "on_kind",
    "filter_accepts",
    "RegistryError",
    "UnknownActionKind",
    "UnknownActionFamily",
    "DuplicateEffectName",
    # Middleware
    "EffectMiddleware",
    "invoke_side_effect",
    # Application effects
    "LoggingSideEffect",
    "FetchData1SideEffect",
    "FetchData2SideEffect",
    "FetchProfileSideEffect",
    "FETCHED_DATA_1",
    "FETCHED_DATA_2",
    "default_side_effects",
    "select_app_state",
    "select_home_state",
    "select_profile_user_id",
    # Testing
    "RecordingSideEffect",
    "RecordedCall",
]
