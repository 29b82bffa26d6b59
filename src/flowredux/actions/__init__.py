"""
Actions for flowredux - immutable descriptions of intents and events.

Each action is a frozen dataclass with a ``kind`` discriminator and a
class-level ``family`` tag. Families group actions by the state slice their
reducer owns.

Example:
    >>> from flowredux.actions import FetchData1, NavigateToProfile
    >>> store.dispatch(NavigateToProfile(user_id="u1"))
    >>> store.dispatch(FetchData1())
"""

from __future__ import annotations

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
from flowredux.actions.types import (
    ACTION_FAMILIES,
    ACTION_TYPES,
    FAMILIES,
    Action,
    ActionFamily,
    is_action,
    kind_of,
)


__all__ = [
    # Master union and lookup tables
    "Action",
    "ActionFamily",
    "ACTION_FAMILIES",
    "ACTION_TYPES",
    "FAMILIES",
    "is_action",
    "kind_of",
    # Home
    "HomeAction",
    "Increment",
    "Decrement",
    "FetchData1",
    "FetchData2",
    "DataFetched1",
    "DataFetched2",
    "DataFetchFailed1",
    "DataFetchFailed2",
    # Profile
    "ProfileAction",
    "UpdateUsername",
    "UpdateBio",
    "FetchProfile",
    "ProfileFetched",
    "ProfileFetchFailed",
    # Settings
    "SettingsAction",
    "ToggleDarkMode",
    "ToggleNotifications",
    # Navigation
    "NavigationAction",
    "NavigateToProfile",
    "NavigateToSettings",
    "NavigateBack",
    # Lifecycle
    "LifecycleAction",
    "ExitApp",
]
