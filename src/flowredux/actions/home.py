"""
Home screen actions: counter and the two independent fetch slots.

Type Safety:
    - All action types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - ``family`` is a class-level tag shared by every member of the union
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal


@dataclass(frozen=True)
class Increment:
    """Add one to the home counter."""

    kind: Literal["Increment"] = "Increment"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class Decrement:
    """Subtract one from the home counter."""

    kind: Literal["Decrement"] = "Decrement"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class FetchData1:
    """Start loading slot 1; clears any previous payload."""

    kind: Literal["FetchData1"] = "FetchData1"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class FetchData2:
    """Start loading slot 2; clears any previous payload."""

    kind: Literal["FetchData2"] = "FetchData2"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class DataFetched1:
    """Slot 1 payload arrived.

    Attributes:
        data: Delivered payload.
    """

    data: str = ""
    kind: Literal["DataFetched1"] = "DataFetched1"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class DataFetched2:
    """Slot 2 payload arrived.

    Attributes:
        data: Delivered payload.
    """

    data: str = ""
    kind: Literal["DataFetched2"] = "DataFetched2"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class DataFetchFailed1:
    """Slot 1 fetch failed; releases the loading flag."""

    message: str = ""
    kind: Literal["DataFetchFailed1"] = "DataFetchFailed1"
    family: ClassVar[Literal["home"]] = "home"


@dataclass(frozen=True)
class DataFetchFailed2:
    """Slot 2 fetch failed; releases the loading flag."""

    message: str = ""
    kind: Literal["DataFetchFailed2"] = "DataFetchFailed2"
    family: ClassVar[Literal["home"]] = "home"


# Home Action Union
HomeAction = (
    Increment
    | Decrement
    | FetchData1
    | FetchData2
    | DataFetched1
    | DataFetched2
    | DataFetchFailed1
    | DataFetchFailed2
)
