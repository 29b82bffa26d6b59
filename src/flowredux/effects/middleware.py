"""
Dispatch middleware that runs side effects.

For every applied action the middleware looks up the matching registrations,
selects each one's slice from the post-dispatch state (skipping registrations
whose selector returns ``None``) and starts every remaining effect as its own
asyncio task on the bound event loop. ``after_dispatch`` only schedules: it
never waits for an effect, so the caller of ``dispatch`` is never blocked.

When an effect finishes, its follow-up action (if any) is dispatched into the
store right away, independently of sibling effects still running. Follow-ups
go through the same pipeline, so chains of any depth are possible.

Failures are caught at the invocation boundary and reported as a
``Result``; a registration may turn the error into a failure action through
its ``on_failure`` mapper.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Any, Generic, TypeVar

from flowredux.actions import Action, is_action
from flowredux.effects.errors import (
    EffectError,
    EffectRaised,
    EffectReturnedInvalid,
    describe_effect_error,
)
from flowredux.effects.registry import EffectRegistry, TypedSideEffect
from flowredux.result import Failure, Result, Success
from flowredux.store import Dispatch


logger = logging.getLogger(__name__)

R = TypeVar("R")

Job = tuple[TypedSideEffect[R, Any], object]


def _current_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


async def invoke_side_effect(
    registration: TypedSideEffect[Any, Any],
    selected: object,
    action: Action,
) -> Result[Action | None, EffectError]:
    """Run one effect and convert whatever it does into a Result.

    Cancellation is not caught; it propagates to the owning task.
    """
    try:
        follow_up = await registration.effect(selected, action)
    except Exception as exc:
        return Failure(
            EffectRaised(
                effect_name=registration.name,
                action_kind=action.kind,
                exception_type=type(exc).__name__,
                message=str(exc),
            )
        )
    if follow_up is not None and not is_action(follow_up):
        return Failure(
            EffectReturnedInvalid(
                effect_name=registration.name,
                action_kind=action.kind,
                returned_type=type(follow_up).__name__,
            )
        )
    return Success(follow_up)


class EffectMiddleware(Generic[R]):
    """Runs registered side effects for every dispatched action.

    Args:
        registry: Immutable registration table.
        loop: Event loop that owns every effect task. ``after_dispatch`` may be
            called from any thread; work is handed to this loop.

    Lifecycle:
        ``drain()`` waits until no effect is in flight, including effects
        started by follow-up actions. ``aclose()`` cancels in-flight effects
        and stops scheduling new ones; dispatch keeps working without effects.
    """

    def __init__(self, registry: EffectRegistry[R], loop: asyncio.AbstractEventLoop) -> None:
        self._registry = registry
        self._loop = loop
        self._tasks: set[asyncio.Task[None]] = set()
        self._handoffs = 0
        self._handoff_lock = threading.Lock()
        self._closed = False

    @property
    def registry(self) -> EffectRegistry[R]:
        return self._registry

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def in_flight(self) -> int:
        """Effects running or handed to the loop but not yet started."""
        with self._handoff_lock:
            return len(self._tasks) + self._handoffs

    def after_dispatch(self, action: Action, state: R, dispatch: Dispatch) -> None:
        if self._closed:
            logger.debug("Effects closed; not running effects for %s", action.kind)
            return
        jobs = self._select(action, state)
        if not jobs:
            return
        if _current_loop() is self._loop:
            self._spawn(jobs, action, dispatch)
            return
        with self._handoff_lock:
            self._handoffs += 1
        try:
            self._loop.call_soon_threadsafe(self._spawn_handoff, jobs, action, dispatch)
        except RuntimeError:
            with self._handoff_lock:
                self._handoffs -= 1
            logger.warning("Event loop is closed; dropped %d effects for %s", len(jobs), action.kind)

    async def drain(self) -> None:
        """Wait until every in-flight effect and its follow-ups have settled."""
        while self.in_flight:
            pending = tuple(self._tasks)
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)
            else:
                await asyncio.sleep(0)

    async def aclose(self) -> None:
        """Cancel in-flight effects and refuse new ones."""
        self._closed = True
        pending = tuple(self._tasks)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        if pending:
            logger.info("Cancelled %d in-flight effects", len(pending))

    def _select(self, action: Action, state: R) -> list[Job[R]]:
        jobs: list[Job[R]] = []
        for registration in self._registry.matching(action):
            try:
                selected = registration.selector(state)
            except Exception:
                logger.warning(
                    "Selector of effect %s raised for %s; skipping",
                    registration.name,
                    action.kind,
                    exc_info=True,
                )
                continue
            if selected is None:
                logger.debug(
                    "Effect %s not applicable to %s: selector returned nothing",
                    registration.name,
                    action.kind,
                )
                continue
            jobs.append((registration, selected))
        return jobs

    def _spawn_handoff(self, jobs: list[Job[R]], action: Action, dispatch: Dispatch) -> None:
        with self._handoff_lock:
            self._handoffs -= 1
        if self._closed:
            return
        self._spawn(jobs, action, dispatch)

    def _spawn(self, jobs: list[Job[R]], action: Action, dispatch: Dispatch) -> None:
        for registration, selected in jobs:
            task = self._loop.create_task(
                self._run(registration, selected, action, dispatch),
                name=f"effect:{registration.name}:{action.kind}",
            )
            with self._handoff_lock:
                self._tasks.add(task)
            task.add_done_callback(self._forget)

    def _forget(self, task: asyncio.Task[None]) -> None:
        with self._handoff_lock:
            self._tasks.discard(task)

    async def _run(
        self,
        registration: TypedSideEffect[R, Any],
        selected: object,
        action: Action,
        dispatch: Dispatch,
    ) -> None:
        outcome = await invoke_side_effect(registration, selected, action)
        match outcome:
            case Success(None):
                return
            case Success(follow_up):
                self._dispatch_follow_up(follow_up, registration, dispatch)
            case Failure(error):
                logger.warning("Effect failed for %s: %s", action.kind, describe_effect_error(error))
                try:
                    recovery = registration.recover(error)
                except Exception:
                    logger.exception("Failure mapper of effect %s raised", registration.name)
                    return
                if recovery is not None:
                    self._dispatch_follow_up(recovery, registration, dispatch)

    @staticmethod
    def _dispatch_follow_up(
        follow_up: Action,
        registration: TypedSideEffect[R, Any],
        dispatch: Dispatch,
    ) -> None:
        try:
            dispatch(follow_up)
        except Exception:
            logger.exception(
                "Follow-up %r from effect %s was rejected by the store",
                follow_up,
                registration.name,
            )


__all__ = ["EffectMiddleware", "invoke_side_effect"]
