"""Settings screen actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass(frozen=True)
class ToggleDarkMode:
    kind: Literal["ToggleDarkMode"] = "ToggleDarkMode"
    family: ClassVar[Literal["settings"]] = "settings"


@dataclass(frozen=True)
class ToggleNotifications:
    kind: Literal["ToggleNotifications"] = "ToggleNotifications"
    family: ClassVar[Literal["settings"]] = "settings"


# Settings Action Union
SettingsAction = ToggleDarkMode | ToggleNotifications
