"""
Tests for the effect registry.

Verifies filter semantics, construction-time validation and that lookup
preserves registration order.
"""

from __future__ import annotations

import pytest

from flowredux.actions import (
    ACTION_FAMILIES,
    Action,
    DataFetched1,
    ExitApp,
    FetchData1,
    FetchData2,
    Increment,
    NavigateBack,
    ToggleDarkMode,
)
from flowredux.effects import (
    AnyAction,
    DuplicateEffectName,
    EffectRegistry,
    FamilyFilter,
    KindFilter,
    RecordingSideEffect,
    UnknownActionFamily,
    UnknownActionKind,
    filter_accepts,
    on_any,
    on_family,
    on_kind,
)
from flowredux.state import AppState

from tests.helpers import expect_failure, expect_success, make_registration


class TestActionFilters:
    def test_any_accepts_everything(self) -> None:
        assert all(filter_accepts(on_any(), kind) for kind in ACTION_FAMILIES)

    def test_kind_filter(self) -> None:
        kind_filter = on_kind(FetchData1)
        assert kind_filter == KindFilter(action_kind="FetchData1")
        assert filter_accepts(kind_filter, "FetchData1")
        assert not filter_accepts(kind_filter, "FetchData2")

    def test_family_filter(self) -> None:
        family_filter = on_family("home")
        assert family_filter == FamilyFilter(family="home")
        assert filter_accepts(family_filter, "Increment")
        assert filter_accepts(family_filter, "DataFetchFailed2")
        assert not filter_accepts(family_filter, "ToggleDarkMode")

    def test_filters_are_values(self) -> None:
        assert on_any() == AnyAction()
        assert on_kind(FetchData1) == on_kind(FetchData1)


class TestRegistryConstruction:
    def test_empty_registry_matches_nothing(self) -> None:
        registry: EffectRegistry[AppState] = EffectRegistry.empty()
        assert len(registry) == 0
        assert registry.matching(Increment()) == ()

    def test_create_keeps_declaration_order(self) -> None:
        first = make_registration(RecordingSideEffect(), name="first")
        second = make_registration(RecordingSideEffect(), name="second")
        registry = expect_success(EffectRegistry.create(first, second))
        assert registry.registrations == (first, second)
        assert list(registry) == [first, second]

    def test_unknown_kind_rejected(self) -> None:
        registration = make_registration(
            RecordingSideEffect(),
            name="typo",
            action_filter=KindFilter(action_kind="FetchDat1"),
        )
        error = expect_failure(EffectRegistry.create(registration))
        assert error == UnknownActionKind(effect_name="typo", action_kind="FetchDat1")

    def test_unknown_family_rejected(self) -> None:
        registration = make_registration(
            RecordingSideEffect(),
            name="family-typo",
            action_filter=FamilyFilter(family="hom"),
        )
        error = expect_failure(EffectRegistry.create(registration))
        assert error == UnknownActionFamily(effect_name="family-typo", family="hom")

    def test_duplicate_names_rejected(self) -> None:
        error = expect_failure(
            EffectRegistry.create(
                make_registration(RecordingSideEffect(), name="same"),
                make_registration(RecordingSideEffect(), name="same"),
            )
        )
        assert error == DuplicateEffectName(effect_name="same")

    def test_first_invalid_registration_reported(self) -> None:
        error = expect_failure(
            EffectRegistry.create(
                make_registration(RecordingSideEffect(), name="ok"),
                make_registration(
                    RecordingSideEffect(), name="bad-1", action_filter=KindFilter(action_kind="X")
                ),
                make_registration(
                    RecordingSideEffect(), name="bad-2", action_filter=FamilyFilter(family="Y")
                ),
            )
        )
        assert error == UnknownActionKind(effect_name="bad-1", action_kind="X")


class TestRegistryMatching:
    @pytest.fixture
    def registry(self) -> EffectRegistry[AppState]:
        return expect_success(
            EffectRegistry.create(
                make_registration(RecordingSideEffect(), name="log"),
                make_registration(
                    RecordingSideEffect(), name="fetch-1", action_filter=on_kind(FetchData1)
                ),
                make_registration(
                    RecordingSideEffect(), name="home", action_filter=on_family("home")
                ),
                make_registration(
                    RecordingSideEffect(), name="fetch-2", action_filter=on_kind(FetchData2)
                ),
            )
        )

    @staticmethod
    def _names(registry: EffectRegistry[AppState], action: Action) -> list[str]:
        return [registration.name for registration in registry.matching(action)]

    def test_matching_by_kind(self, registry: EffectRegistry[AppState]) -> None:
        assert self._names(registry, FetchData1()) == ["log", "fetch-1", "home"]
        assert self._names(registry, FetchData2()) == ["log", "home", "fetch-2"]

    def test_matching_by_family(self, registry: EffectRegistry[AppState]) -> None:
        assert self._names(registry, DataFetched1(data="d")) == ["log", "home"]
        assert self._names(registry, Increment()) == ["log", "home"]

    def test_any_only(self, registry: EffectRegistry[AppState]) -> None:
        assert self._names(registry, ToggleDarkMode()) == ["log"]
        assert self._names(registry, NavigateBack()) == ["log"]
        assert self._names(registry, ExitApp()) == ["log"]

    def test_matching_is_stable(self, registry: EffectRegistry[AppState]) -> None:
        assert registry.matching(FetchData1()) is registry.matching(FetchData1())
