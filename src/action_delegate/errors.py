"""Error taxonomy for action delegation.

The delegation layer is a transparent pass-through: it raises its own errors
only when a connection cannot be built or its named action cannot be resolved.
Anything raised by the delegated action itself reaches the host unchanged.
``classify_error`` gives hosts a small, stable envelope they can translate
into their own reporting format.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DelegationError(Exception):
    """Base class for errors raised by the delegation layer itself."""


class InvalidConnectorArguments(DelegationError, TypeError):
    """Raised at construction time when arguments cannot form a connection."""


class UnresolvedAction(DelegationError, AttributeError):
    """Raised at invocation time when the target does not expose the named action.

    Carries the same ``name``, ``obj`` and wording a direct attribute lookup
    on the target would produce.

    Attributes:
        target: The bound target object.
        action_name: The action name that failed to resolve.
        reason: ``"missing"`` or ``"not_callable"``.
    """

    def __init__(
        self,
        target: Any,
        action_name: str,
        *,
        reason: str = "missing",
        message: str | None = None,
    ) -> None:
        self.target = target
        self.action_name = action_name
        self.reason = reason
        if message is None:
            type_name = type(target).__name__
            if reason == "not_callable":
                message = f"'{type_name}' object attribute '{action_name}' is not callable"
            else:
                message = f"'{type_name}' object has no attribute '{action_name}'"
        super().__init__(message, name=action_name, obj=target)


class ErrorType(str, Enum):
    INVALID_CONNECTOR_ARGUMENTS = "INVALID_CONNECTOR_ARGUMENTS"
    UNRESOLVED_ACTION = "UNRESOLVED_ACTION"
    DELEGATE_ACTION_FAILURE = "DELEGATE_ACTION_FAILURE"


# Failures raised by a delegated action are never wrapped; this code is how
# hosts label them when reporting.
DelegateActionFailure = ErrorType.DELEGATE_ACTION_FAILURE


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ErrorType
    message: str
    context: dict[str, Any] = Field(default_factory=dict)


def make_error(error_type: ErrorType, message: str, **context: Any) -> ErrorEnvelope:
    return ErrorEnvelope(type=error_type, message=message, context=dict(context))


def _qualified_type_name(value: Any) -> str:
    cls = type(value)
    return f"{cls.__module__}.{cls.__qualname__}"


def classify_error(exc: BaseException) -> ErrorEnvelope:
    """Map an exception seen by a host into an error envelope.

    The exception itself is left untouched; callers decide whether to re-raise.
    """
    if isinstance(exc, UnresolvedAction):
        return make_error(
            ErrorType.UNRESOLVED_ACTION,
            str(exc),
            action_name=exc.action_name,
            target_type=_qualified_type_name(exc.target),
            reason=exc.reason,
        )
    if isinstance(exc, InvalidConnectorArguments):
        return make_error(ErrorType.INVALID_CONNECTOR_ARGUMENTS, str(exc))
    return make_error(
        ErrorType.DELEGATE_ACTION_FAILURE,
        str(exc),
        exception_type=type(exc).__name__,
    )


__all__ = [
    "DelegateActionFailure",
    "DelegationError",
    "ErrorEnvelope",
    "ErrorType",
    "InvalidConnectorArguments",
    "UnresolvedAction",
    "classify_error",
    "make_error",
]
