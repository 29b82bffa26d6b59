"""
Application state tree.

Every record is a frozen dataclass. A transition never edits a record; it
builds a new one with ``dataclasses.replace`` so that any state value handed
out earlier (to a subscriber, a test snapshot, an effect) stays valid.

Type Safety:
    - Frozen dataclasses reject attribute assignment
    - Navigation parameters are exposed through ``MappingProxyType``
    - ``Screen`` is a closed enumeration
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Screen(str, Enum):
    """Screens known to the navigation reducer."""

    HOME = "HOME"
    PROFILE = "PROFILE"
    SETTINGS = "SETTINGS"


# Where NavigateBack leads from each screen. HOME is the root.
PARENT_SCREEN: Mapping[Screen, Screen | None] = MappingProxyType(
    {
        Screen.HOME: None,
        Screen.PROFILE: Screen.HOME,
        Screen.SETTINGS: Screen.PROFILE,
    }
)


def freeze_params(params: Mapping[str, object] | None = None) -> Mapping[str, object]:
    """Return a read-only copy of a navigation parameter bag."""
    return MappingProxyType(dict(params or {}))


@dataclass(frozen=True)
class HomeState:
    """Counter plus two independent fetch slots.

    Attributes:
        counter: Unbounded integer counter.
        data1: Payload delivered to slot 1, ``None`` while absent.
        data2: Payload delivered to slot 2, ``None`` while absent.
        is_loading1: Slot 1 fetch in flight.
        is_loading2: Slot 2 fetch in flight.
        error1: Message of the last failed slot 1 fetch.
        error2: Message of the last failed slot 2 fetch.
    """

    counter: int = 0
    data1: str | None = None
    data2: str | None = None
    is_loading1: bool = False
    is_loading2: bool = False
    error1: str | None = None
    error2: str | None = None


@dataclass(frozen=True)
class ProfileState:
    """User profile as shown on the profile screen."""

    username: str = ""
    bio: str = ""
    is_loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class SettingsState:
    is_dark_mode: bool = False
    notifications_enabled: bool = True


@dataclass(frozen=True)
class AppState:
    """Root of the state tree.

    Attributes:
        home_state: Home screen slice.
        profile_state: Profile screen slice.
        settings_state: Settings screen slice.
        current_screen: Screen on top of the navigation stack.
        navigation_params: Read-only parameters attached by the last forward
            navigation (``userId`` for PROFILE, ``fromScreen`` for SETTINGS).
    """

    home_state: HomeState = field(default_factory=HomeState)
    profile_state: ProfileState = field(default_factory=ProfileState)
    settings_state: SettingsState = field(default_factory=SettingsState)
    current_screen: Screen = Screen.HOME
    navigation_params: Mapping[str, object] = field(default_factory=freeze_params)
