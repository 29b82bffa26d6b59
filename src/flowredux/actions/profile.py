"""Profile screen actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass(frozen=True)
class UpdateUsername:
    username: str = ""
    kind: Literal["UpdateUsername"] = "UpdateUsername"
    family: ClassVar[Literal["profile"]] = "profile"


@dataclass(frozen=True)
class UpdateBio:
    bio: str = ""
    kind: Literal["UpdateBio"] = "UpdateBio"
    family: ClassVar[Literal["profile"]] = "profile"


@dataclass(frozen=True)
class FetchProfile:
    """Load the profile of the user named in the navigation parameters."""

    kind: Literal["FetchProfile"] = "FetchProfile"
    family: ClassVar[Literal["profile"]] = "profile"


@dataclass(frozen=True)
class ProfileFetched:
    username: str = ""
    bio: str = ""
    kind: Literal["ProfileFetched"] = "ProfileFetched"
    family: ClassVar[Literal["profile"]] = "profile"


@dataclass(frozen=True)
class ProfileFetchFailed:
    message: str = ""
    kind: Literal["ProfileFetchFailed"] = "ProfileFetchFailed"
    family: ClassVar[Literal["profile"]] = "profile"


# Profile Action Union
ProfileAction = UpdateUsername | UpdateBio | FetchProfile | ProfileFetched | ProfileFetchFailed
