"""
Master Action union and the kind-tag table.

Effect matching never inspects Python types: it looks up ``action.kind`` in
``ACTION_FAMILIES``, which lists every member of the closed action set
together with the family it belongs to.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

from flowredux.actions.home import (
    DataFetched1,
    DataFetched2,
    DataFetchFailed1,
    DataFetchFailed2,
    Decrement,
    FetchData1,
    FetchData2,
    HomeAction,
    Increment,
)
from flowredux.actions.lifecycle import ExitApp, LifecycleAction
from flowredux.actions.navigation import (
    NavigateBack,
    NavigateToProfile,
    NavigateToSettings,
    NavigationAction,
)
from flowredux.actions.profile import (
    FetchProfile,
    ProfileAction,
    ProfileFetched,
    ProfileFetchFailed,
    UpdateBio,
    UpdateUsername,
)
from flowredux.actions.settings import SettingsAction, ToggleDarkMode, ToggleNotifications


# Master Action Union - enables exhaustive pattern matching across all families
Action = HomeAction | ProfileAction | SettingsAction | NavigationAction | LifecycleAction

ActionFamily = Literal["home", "profile", "settings", "navigation", "lifecycle"]

ACTION_TYPES: tuple[type[Action], ...] = (
    Increment,
    Decrement,
    FetchData1,
    FetchData2,
    DataFetched1,
    DataFetched2,
    DataFetchFailed1,
    DataFetchFailed2,
    UpdateUsername,
    UpdateBio,
    FetchProfile,
    ProfileFetched,
    ProfileFetchFailed,
    ToggleDarkMode,
    ToggleNotifications,
    NavigateToProfile,
    NavigateToSettings,
    NavigateBack,
    ExitApp,
)


def kind_of(action_type: type[Action]) -> str:
    """Kind tag declared by an action class (its ``kind`` default)."""
    return str(action_type.kind)


ACTION_FAMILIES: Mapping[str, ActionFamily] = MappingProxyType(
    {kind_of(action_type): action_type.family for action_type in ACTION_TYPES}
)

FAMILIES: frozenset[str] = frozenset(ACTION_FAMILIES.values())


def is_action(value: object) -> bool:
    """True when ``value`` carries a kind tag from the closed action set."""
    kind = getattr(value, "kind", None)
    return isinstance(kind, str) and kind in ACTION_FAMILIES


__all__ = [
    "ACTION_FAMILIES",
    "ACTION_TYPES",
    "FAMILIES",
    "Action",
    "ActionFamily",
    "is_action",
    "kind_of",
]
