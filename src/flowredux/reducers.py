"""
Pure reducers for the application state tree.

``app_reducer`` is the root: it routes each action family to exactly one
sub-reducer and rebuilds only the field that sub-reducer owns. Sub-reducers
return their input unchanged for actions outside their family, so calling
one with a foreign action is always safe.

No function in this module performs I/O, reads a clock or mutates its
arguments.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, TypeVar

from flowredux.actions import (
    Action,
    DataFetched1,
    DataFetched2,
    DataFetchFailed1,
    DataFetchFailed2,
    Decrement,
    ExitApp,
    FetchData1,
    FetchData2,
    FetchProfile,
    Increment,
    NavigateBack,
    NavigateToProfile,
    NavigateToSettings,
    ProfileFetched,
    ProfileFetchFailed,
    ToggleDarkMode,
    ToggleNotifications,
    UpdateBio,
    UpdateUsername,
)
from flowredux.errors import UnknownActionError
from flowredux.state import (
    PARENT_SCREEN,
    AppState,
    HomeState,
    ProfileState,
    Screen,
    SettingsState,
    freeze_params,
)


S = TypeVar("S")

Reducer = Callable[[S, Action], S]


def home_reducer(state: HomeState, action: Action) -> HomeState:
    """Counter and fetch slots. Slot 1 and slot 2 never touch each other."""
    match action:
        case Increment():
            return replace(state, counter=state.counter + 1)
        case Decrement():
            return replace(state, counter=state.counter - 1)
        case FetchData1():
            return replace(state, data1=None, is_loading1=True, error1=None)
        case FetchData2():
            return replace(state, data2=None, is_loading2=True, error2=None)
        case DataFetched1(data=data):
            return replace(state, data1=data, is_loading1=False)
        case DataFetched2(data=data):
            return replace(state, data2=data, is_loading2=False)
        case DataFetchFailed1(message=message):
            return replace(state, is_loading1=False, error1=message)
        case DataFetchFailed2(message=message):
            return replace(state, is_loading2=False, error2=message)
        case _:
            return state


def profile_reducer(state: ProfileState, action: Action) -> ProfileState:
    match action:
        case UpdateUsername(username=username):
            return replace(state, username=username)
        case UpdateBio(bio=bio):
            return replace(state, bio=bio)
        case FetchProfile():
            return replace(state, is_loading=True, error=None)
        case ProfileFetched(username=username, bio=bio):
            return replace(state, username=username, bio=bio, is_loading=False)
        case ProfileFetchFailed(message=message):
            return replace(state, is_loading=False, error=message)
        case _:
            return state


def settings_reducer(state: SettingsState, action: Action) -> SettingsState:
    match action:
        case ToggleDarkMode():
            return replace(state, is_dark_mode=not state.is_dark_mode)
        case ToggleNotifications():
            return replace(state, notifications_enabled=not state.notifications_enabled)
        case _:
            return state


def navigation_reducer(state: AppState, action: Action) -> AppState:
    """Screen and parameter transitions.

    Operates on the root because navigation fields live on ``AppState``
    itself. Back from the root screen returns ``state`` as is.
    """
    match action:
        case NavigateToProfile(user_id=user_id):
            return replace(
                state,
                current_screen=Screen.PROFILE,
                navigation_params=freeze_params({"userId": user_id}),
            )
        case NavigateToSettings(from_screen=from_screen):
            return replace(
                state,
                current_screen=Screen.SETTINGS,
                navigation_params=freeze_params({"fromScreen": from_screen}),
            )
        case NavigateBack():
            parent = PARENT_SCREEN[state.current_screen]
            if parent is None:
                return state
            return replace(state, current_screen=parent, navigation_params=freeze_params())
        case _:
            return state


def app_reducer(state: AppState, action: Action) -> AppState:
    """Root reducer.

    Raises:
        UnknownActionError: ``action`` is not part of the closed action set.
    """
    match action:
        case (
            Increment()
            | Decrement()
            | FetchData1()
            | FetchData2()
            | DataFetched1()
            | DataFetched2()
            | DataFetchFailed1()
            | DataFetchFailed2()
        ):
            return replace(state, home_state=home_reducer(state.home_state, action))
        case (
            UpdateUsername() | UpdateBio() | FetchProfile() | ProfileFetched() | ProfileFetchFailed()
        ):
            return replace(state, profile_state=profile_reducer(state.profile_state, action))
        case ToggleDarkMode() | ToggleNotifications():
            return replace(state, settings_state=settings_reducer(state.settings_state, action))
        case NavigateToProfile() | NavigateToSettings() | NavigateBack():
            return navigation_reducer(state, action)
        case ExitApp():
            return AppState()
        case _:
            raise UnknownActionError(action)


__all__ = [
    "Reducer",
    "app_reducer",
    "home_reducer",
    "navigation_reducer",
    "profile_reducer",
    "settings_reducer",
]
