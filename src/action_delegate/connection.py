"""The delegate connection: an invocable value wrapping deferred behavior."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from action_delegate.binding import TargetActionBinding
from action_delegate.config import get_config
from action_delegate.errors import InvalidConnectorArguments
from action_delegate.models import ConnectionDescription, ConnectionForm

logger = logging.getLogger(__name__)


def validate_label(label: Any) -> str | None:
    """Return ``label`` unchanged, or raise if it is neither None nor a non-blank string."""
    if label is None:
        return None
    if not isinstance(label, str) or not label.strip():
        raise InvalidConnectorArguments("label must be a non-empty string or None")
    return label


@runtime_checkable
class DelegateAction(Protocol):
    """Calling convention for delegated actions: the caller always comes first."""

    def __call__(self, caller: Any, /, *args: Any, **kwargs: Any) -> Any: ...


@dataclass(frozen=True, slots=True, eq=False)
class DelegateConnection:
    """Binds one host attribute to one action, invoked on demand.

    The wrapped action never runs at construction time and results are never
    cached: each invocation re-runs the action. Connections compare and hash
    by identity so that sharing one between several host attributes stays
    observable.
    """

    action: DelegateAction
    label: str | None = None

    def __post_init__(self) -> None:
        if not callable(self.action):
            raise InvalidConnectorArguments(
                f"DelegateConnection action must be callable, got {type(self.action).__name__}"
            )
        validate_label(self.label)

    @property
    def form(self) -> ConnectionForm:
        if isinstance(self.action, TargetActionBinding):
            return ConnectionForm.TARGET_ACTION
        return ConnectionForm.CALLABLE

    def invoke(self, caller: Any, /, *args: Any, **kwargs: Any) -> Any:
        """Run the action as ``action(caller, *args, **kwargs)`` and return its result."""
        if get_config().log_invocations:
            logger.debug(
                "Invoking delegate connection %s for caller %s",
                self.label or "<unlabelled>",
                type(caller).__name__,
            )
        return self.action(caller, *args, **kwargs)

    def __call__(self, caller: Any, /, *args: Any, **kwargs: Any) -> Any:
        return self.invoke(caller, *args, **kwargs)

    def describe(self) -> ConnectionDescription:
        """Summarize the connection without resolving or running its action."""
        action = self.action
        if isinstance(action, TargetActionBinding):
            return ConnectionDescription(
                label=self.label,
                form=ConnectionForm.TARGET_ACTION,
                action_name=action.action_name,
                target_type=action.target_type,
            )
        return ConnectionDescription(
            label=self.label,
            form=ConnectionForm.CALLABLE,
            action_qualname=getattr(action, "__qualname__", None) or type(action).__qualname__,
        )

    def __repr__(self) -> str:
        return f"DelegateConnection(label={self.label!r}, form={self.form.value})"


__all__ = ["DelegateAction", "DelegateConnection", "validate_label"]
