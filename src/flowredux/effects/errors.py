"""
Side-effect error types for flowredux.

A failing side effect never raises through ``dispatch``. The middleware
catches the exception at the invocation boundary and reports it as one of
these frozen values inside a ``Failure``.

Type Safety:
    - All error types are frozen dataclasses (immutable)
    - Literal discriminators enable exhaustive pattern matching
    - Union types define closed sets of error variants
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class EffectRaised:
    """Side effect raised instead of returning.

    Attributes:
        kind: Discriminator for pattern matching. Always "EffectRaised".
        effect_name: Registration name of the failing effect.
        action_kind: Kind tag of the action that triggered it.
        exception_type: Class name of the raised exception.
        message: ``str()`` of the raised exception.
    """

    kind: Literal["EffectRaised"] = "EffectRaised"
    effect_name: str = ""
    action_kind: str = ""
    exception_type: str = ""
    message: str = ""


@dataclass(frozen=True)
class EffectReturnedInvalid:
    """Side effect returned something that is neither ``None`` nor an action.

    Attributes:
        kind: Discriminator for pattern matching. Always "EffectReturnedInvalid".
        effect_name: Registration name of the failing effect.
        action_kind: Kind tag of the action that triggered it.
        returned_type: Class name of the returned value.
    """

    kind: Literal["EffectReturnedInvalid"] = "EffectReturnedInvalid"
    effect_name: str = ""
    action_kind: str = ""
    returned_type: str = ""


# Master EffectError Union - enables exhaustive pattern matching
EffectError = EffectRaised | EffectReturnedInvalid


def describe_effect_error(error: EffectError) -> str:
    """One-line human-readable summary, used for failure actions and logs."""
    match error:
        case EffectRaised(effect_name=name, exception_type=exc_type, message=message):
            detail = f"{exc_type}: {message}" if message else exc_type
            return f"{name} failed: {detail}"
        case EffectReturnedInvalid(effect_name=name, returned_type=returned):
            return f"{name} returned {returned}, expected an action or None"
