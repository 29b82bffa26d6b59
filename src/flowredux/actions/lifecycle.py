"""Application lifecycle actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass(frozen=True)
class ExitApp:
    """Reset the whole state tree to its defaults and signal shutdown."""

    kind: Literal["ExitApp"] = "ExitApp"
    family: ClassVar[Literal["lifecycle"]] = "lifecycle"


LifecycleAction = ExitApp
