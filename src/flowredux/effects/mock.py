"""
Recording side effect for testing the dispatch pipeline.

``RecordingSideEffect`` stands in for a real side effect: it records every
invocation (selected slice and action) and returns preconfigured follow-up
actions, optionally after a delay, after an ``asyncio.Event`` is set, or by
raising.

Example:
    >>> recorder = RecordingSideEffect()
    >>> recorder.mock_results["FetchData1"] = DataFetched1(data="stub")
    >>>
    >>> registration = TypedSideEffect(
    ...     name="fetch", effect=recorder, action_filter=on_kind(FetchData1),
    ...     selector=lambda state: state.home_state,
    ... )
    >>> # ... dispatch FetchData1(), await middleware.drain() ...
    >>> recorder.assert_call_sequence(["FetchData1"])
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from flowredux.actions import Action


@dataclass(frozen=True)
class RecordedCall:
    """One invocation of a recording side effect."""

    state: object
    action: Action


class RecordingSideEffect:
    """Side effect double that records calls instead of doing work.

    Attributes:
        recorded_calls: Every invocation, in the order they started.
        mock_results: Follow-up action to return, keyed by triggering kind tag.
        default_result: Returned for kinds missing from ``mock_results``.
        delay: Seconds to sleep before answering.
        gate: When set, each call waits for this event before answering.
        raises: When set, each call raises this exception instead of answering.
        completed: Kind tags of calls that finished, in completion order.
    """

    def __init__(
        self,
        default_result: Action | None = None,
        *,
        delay: float = 0.0,
        gate: asyncio.Event | None = None,
        raises: Exception | None = None,
    ) -> None:
        self.recorded_calls: list[RecordedCall] = []
        self.mock_results: dict[str, Action | None] = {}
        self.default_result = default_result
        self.delay = delay
        self.gate = gate
        self.raises = raises
        self.completed: list[str] = []

    async def __call__(self, state: object, action: Action) -> Action | None:
        self.recorded_calls.append(RecordedCall(state=state, action=action))
        if self.gate is not None:
            await self.gate.wait()
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        if self.raises is not None:
            raise self.raises
        self.completed.append(action.kind)
        return self.mock_results.get(action.kind, self.default_result)

    @property
    def call_count(self) -> int:
        return len(self.recorded_calls)

    def assert_call_sequence(self, expected: list[str]) -> None:
        """Assert the kind tags of recorded calls, in order.

        Raises:
            AssertionError: If recorded kinds don't match expected.
        """
        actual = [call.action.kind for call in self.recorded_calls]
        match actual == expected:
            case True:
                return
            case False:
                raise AssertionError(f"Expected calls for {expected}, got {actual}")

    def assert_call_count(self, count: int) -> None:
        """
        Raises:
            AssertionError: If count doesn't match.
        """
        actual = len(self.recorded_calls)
        match actual == count:
            case True:
                return
            case False:
                raise AssertionError(f"Expected {count} calls, got {actual}")

    def calls_for(self, action_kind: str) -> list[RecordedCall]:
        """Recorded calls triggered by actions tagged ``action_kind``."""
        return [call for call in self.recorded_calls if call.action.kind == action_kind]

    def reset_calls(self) -> None:
        """Clear recorded calls but keep configured results."""
        self.recorded_calls.clear()
        self.completed.clear()
