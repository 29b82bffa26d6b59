"""
Navigation actions.

Forward navigation attaches a parameter bag to the target screen; going back
follows ``flowredux.state.PARENT_SCREEN`` and drops the parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

from flowredux.state import Screen


@dataclass(frozen=True)
class NavigateToProfile:
    """Open the profile screen for ``user_id``.

    Attributes:
        user_id: Stored as the ``userId`` navigation parameter.
    """

    user_id: str = ""
    kind: Literal["NavigateToProfile"] = "NavigateToProfile"
    family: ClassVar[Literal["navigation"]] = "navigation"


@dataclass(frozen=True)
class NavigateToSettings:
    """Open the settings screen.

    Attributes:
        from_screen: Stored as the ``fromScreen`` navigation parameter.
    """

    from_screen: Screen = Screen.PROFILE
    kind: Literal["NavigateToSettings"] = "NavigateToSettings"
    family: ClassVar[Literal["navigation"]] = "navigation"


@dataclass(frozen=True)
class NavigateBack:
    kind: Literal["NavigateBack"] = "NavigateBack"
    family: ClassVar[Literal["navigation"]] = "navigation"


# Navigation Action Union
NavigationAction = NavigateToProfile | NavigateToSettings | NavigateBack
