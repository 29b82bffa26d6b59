"""Store and side-effect configuration."""

from __future__ import annotations

from typing import Annotated, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from flowredux.result import Failure, Result, Success


TModel = TypeVar("TModel", bound=BaseModel)

LogLevel = Literal["debug", "info", "warning", "error", "critical"]

__all__: list[str] = ["LogLevel", "StoreConfig", "validate_model"]


def validate_model(model_cls: type[TModel], **data: object) -> Result[TModel, ValidationError]:
    """
    Construct a Pydantic model and surface validation issues as a Result.

    Pydantic raises on invalid input; the exception is caught here so that
    bootstrap code can branch on ``Success`` / ``Failure`` instead.
    """
    try:
        return Success(model_cls(**data))
    except ValidationError as exc:
        return Failure(exc)


class StoreConfig(BaseModel):
    """Immutable runtime settings for the application store.

    Attributes
    ----------
    fetch_data1_latency
        Simulated network delay of the slot 1 fetch, in seconds.
    fetch_data2_latency
        Simulated network delay of the slot 2 fetch, in seconds.
    fetch_profile_latency
        Simulated network delay of the profile fetch, in seconds.
    action_log_level
        Level at which every dispatched action is logged.
    action_logger_name
        Logger receiving the dispatched-action records.
    notify_unchanged
        When false, subscribers are not notified for dispatches that leave
        the state equal to the previous one. Effects still run.
    """

    fetch_data1_latency: Annotated[float, Field(ge=0.0)] = 1.0
    fetch_data2_latency: Annotated[float, Field(ge=0.0)] = 1.5
    fetch_profile_latency: Annotated[float, Field(ge=0.0)] = 0.5
    action_log_level: LogLevel = "info"
    action_logger_name: str = Field("flowredux.actions", min_length=1)
    notify_unchanged: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def create(cls, **fields: object) -> Result["StoreConfig", ValidationError]:
        return validate_model(cls, **fields)
