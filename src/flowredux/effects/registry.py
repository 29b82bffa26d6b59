"""
Static registry of side-effect registrations.

A registration (``TypedSideEffect``) ties a side effect to an action filter
and a state-slice selector. The registry is built once at startup and never
changes afterwards; at construction it precomputes, for every kind tag in
``ACTION_FAMILIES``, the ordered tuple of registrations whose filter accepts
it. Matching a dispatched action is therefore a single mapping lookup on
``action.kind``.

Type Safety:
    - Filters are frozen dataclasses with Literal discriminators
    - Construction returns a Result; unknown kinds and duplicate names are
      reported as frozen error values

Example:
    >>> registry = EffectRegistry.create(
    ...     TypedSideEffect(
    ...         name="fetch-data-1",
    ...         effect=FetchData1SideEffect(latency=1.0),
    ...         action_filter=on_kind(FetchData1),
    ...         selector=lambda state: state.home_state,
    ...     ),
    ... )
    >>> match registry:
    ...     case Success(table):
    ...         table.matching(FetchData1())
    ...     case Failure(error):
    ...         raise RuntimeError(error)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Generic, Iterator, Literal, Mapping, Protocol, TypeVar

from flowredux.actions import ACTION_FAMILIES, FAMILIES, Action, ActionFamily, kind_of
from flowredux.effects.errors import EffectError
from flowredux.result import Failure, Result, Success, partition_results


R = TypeVar("R")
S = TypeVar("S")
S_contra = TypeVar("S_contra", contravariant=True)


class SideEffect(Protocol[S_contra]):
    """Asynchronous handler run for matching actions.

    Receives only the slice its registration selects, plus the action.
    Returns ``None`` when purely observational, otherwise exactly one
    follow-up action.
    """

    async def __call__(self, state: S_contra, action: Action) -> Action | None: ...


# ========== Action filters ==========


@dataclass(frozen=True)
class AnyAction:
    """Accepts every action."""

    kind: Literal["AnyAction"] = "AnyAction"


@dataclass(frozen=True)
class FamilyFilter:
    """Accepts every action of one family (e.g. all home actions)."""

    family: str = ""
    kind: Literal["FamilyFilter"] = "FamilyFilter"


@dataclass(frozen=True)
class KindFilter:
    """Accepts actions with exactly one kind tag."""

    action_kind: str = ""
    kind: Literal["KindFilter"] = "KindFilter"


ActionFilter = AnyAction | FamilyFilter | KindFilter


def on_any() -> AnyAction:
    return AnyAction()


def on_family(family: ActionFamily) -> FamilyFilter:
    return FamilyFilter(family=family)


def on_kind(action_type: type[Action]) -> KindFilter:
    return KindFilter(action_kind=kind_of(action_type))


def filter_accepts(action_filter: ActionFilter, action_kind: str) -> bool:
    """Whether ``action_filter`` accepts actions tagged ``action_kind``."""
    match action_filter:
        case AnyAction():
            return True
        case FamilyFilter(family=family):
            return ACTION_FAMILIES.get(action_kind) == family
        case KindFilter(action_kind=accepted):
            return accepted == action_kind


# ========== Registrations ==========


FailureMapper = Callable[[EffectError], Action | None]


@dataclass(frozen=True)
class TypedSideEffect(Generic[R, S]):
    """One side-effect registration.

    Attributes:
        name: Unique name, used in logs and error values.
        effect: The side effect to run.
        action_filter: Which actions trigger the effect.
        selector: Picks the effect's input from the post-dispatch root state;
            returning ``None`` means the effect does not apply right now.
        on_failure: Converts a failure of this effect into an action to
            dispatch instead, or ``None`` to drop it.
    """

    name: str
    effect: SideEffect[S]
    action_filter: ActionFilter
    selector: Callable[[R], S | None]
    on_failure: FailureMapper | None = None

    def recover(self, error: EffectError) -> Action | None:
        """Failure action for ``error``, if this registration defines one."""
        match self.on_failure:
            case None:
                return None
            case mapper:
                return mapper(error)


# ========== Registry errors ==========


@dataclass(frozen=True)
class UnknownActionKind:
    """Registration filters on a kind tag outside the closed action set."""

    effect_name: str
    action_kind: str
    kind: Literal["UnknownActionKind"] = "UnknownActionKind"


@dataclass(frozen=True)
class UnknownActionFamily:
    """Registration filters on a family no action belongs to."""

    effect_name: str
    family: str
    kind: Literal["UnknownActionFamily"] = "UnknownActionFamily"


@dataclass(frozen=True)
class DuplicateEffectName:
    effect_name: str
    kind: Literal["DuplicateEffectName"] = "DuplicateEffectName"


RegistryError = UnknownActionKind | UnknownActionFamily | DuplicateEffectName


def _validate(registration: TypedSideEffect[R, Any]) -> Result[TypedSideEffect[R, Any], RegistryError]:
    match registration.action_filter:
        case KindFilter(action_kind=action_kind) if action_kind not in ACTION_FAMILIES:
            return Failure(UnknownActionKind(effect_name=registration.name, action_kind=action_kind))
        case FamilyFilter(family=family) if family not in FAMILIES:
            return Failure(UnknownActionFamily(effect_name=registration.name, family=family))
        case _:
            return Success(registration)


# ========== Registry ==========


class EffectRegistry(Generic[R]):
    """Immutable kind-tag -> registrations table.

    Safe to share between concurrently running effects: nothing mutates it
    after ``__init__``. Build instances with ``create`` so that registrations
    are validated.
    """

    def __init__(self, registrations: tuple[TypedSideEffect[R, Any], ...]) -> None:
        self._registrations = registrations
        self._by_kind: Mapping[str, tuple[TypedSideEffect[R, Any], ...]] = MappingProxyType(
            {
                action_kind: tuple(
                    registration
                    for registration in registrations
                    if filter_accepts(registration.action_filter, action_kind)
                )
                for action_kind in ACTION_FAMILIES
            }
        )

    @classmethod
    def create(
        cls, *registrations: TypedSideEffect[R, Any]
    ) -> Result[EffectRegistry[R], RegistryError]:
        """Validate ``registrations`` and build the lookup table.

        Returns:
            Success with the registry, or Failure with the first invalid
            registration in declaration order.
        """
        _, errors = partition_results([_validate(registration) for registration in registrations])
        if errors:
            return Failure(errors[0])

        seen: set[str] = set()
        for registration in registrations:
            if registration.name in seen:
                return Failure(DuplicateEffectName(effect_name=registration.name))
            seen.add(registration.name)

        return Success(cls(tuple(registrations)))

    @classmethod
    def empty(cls) -> EffectRegistry[R]:
        return cls(())

    def matching(self, action: Action) -> tuple[TypedSideEffect[R, Any], ...]:
        """Registrations triggered by ``action``, in registration order."""
        return self._by_kind.get(action.kind, ())

    @property
    def registrations(self) -> tuple[TypedSideEffect[R, Any], ...]:
        return self._registrations

    def __len__(self) -> int:
        return len(self._registrations)

    def __iter__(self) -> Iterator[TypedSideEffect[R, Any]]:
        return iter(self._registrations)


__all__ = [
    "ActionFilter",
    "AnyAction",
    "DuplicateEffectName",
    "EffectRegistry",
    "FailureMapper",
    "FamilyFilter",
    "KindFilter",
    "RegistryError",
    "SideEffect",
    "TypedSideEffect",
    "UnknownActionFamily",
    "UnknownActionKind",
    "filter_accepts",
    "on_any",
    "on_family",
    "on_kind",
]
