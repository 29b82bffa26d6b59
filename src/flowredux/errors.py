"""
Reducer exceptions.

Reducers are the one place where a failure must abort the caller: a dispatch
whose reducer raises leaves the state untouched and re-raises to whoever
called ``dispatch``. Every other failure in flowredux is a value (see
``flowredux.result`` and ``flowredux.effects.errors``).
"""

from __future__ import annotations


class ReducerError(Exception):
    """A reducer could not compute the next state for an action."""


class UnknownActionError(ReducerError):
    """Dispatched value is not a member of the closed action set.

    Attributes:
        value: The offending value.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Not a flowredux action: {value!r}")


__all__ = ["ReducerError", "UnknownActionError"]
