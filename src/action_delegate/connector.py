"""Factory that normalizes construction inputs into a ``DelegateConnection``.

Two forms are accepted::

    connect(repository, "list_colors")   # target + action name, resolved per call
    connect(lambda field: [...])         # any callable taking the caller first

Both produce connections with the same caller-first invocation contract.
"""

from __future__ import annotations

import logging
from typing import Any

from action_delegate.binding import TargetActionBinding
from action_delegate.config import get_config
from action_delegate.connection import DelegateConnection, validate_label
from action_delegate.errors import InvalidConnectorArguments

logger = logging.getLogger(__name__)

# Values that cannot carry actions of their own.
_NON_TARGET_TYPES: tuple[type, ...] = (str, bytes, bytearray, int, float, complex, bool)


def _validate_target(target: Any) -> Any:
    if target is None or isinstance(target, _NON_TARGET_TYPES):
        raise InvalidConnectorArguments(
            f"connect() target must be an object, got {type(target).__name__}"
        )
    return target


def _validate_action_name(action_name: Any) -> str:
    if not isinstance(action_name, str):
        raise InvalidConnectorArguments(
            f"connect() action name must be a string, got {type(action_name).__name__}"
        )
    if not action_name.isidentifier():
        raise InvalidConnectorArguments(
            f"connect() action name must be a valid identifier, got {action_name!r}"
        )
    return action_name


def _default_label(action: Any) -> str:
    if isinstance(action, TargetActionBinding):
        base = f"{type(action.target).__name__}.{action.action_name}"
    else:
        base = getattr(action, "__qualname__", None) or type(action).__qualname__
    return f"{get_config().default_label_prefix}{base}"


def _connect_target(target: Any, action_name: Any, label: str | None) -> DelegateConnection:
    binding = TargetActionBinding(
        target=_validate_target(target),
        action_name=_validate_action_name(action_name),
    )
    return DelegateConnection(binding, label=label or _default_label(binding))


def _connect_callable(action: Any, label: str | None) -> DelegateConnection:
    if isinstance(action, DelegateConnection):
        if label is None:
            return action
        return DelegateConnection(action.action, label=label)
    if not callable(action):
        raise InvalidConnectorArguments(
            f"connect() single argument must be callable, got {type(action).__name__}"
        )
    return DelegateConnection(action, label=label or _default_label(action))


def connect(*args: Any, label: str | None = None) -> DelegateConnection:
    """Build a delegate connection.

    Args:
        *args: Either ``(target, action_name)`` or ``(callable,)``.
        label: Optional diagnostic label. A label is derived when omitted.

    Returns:
        A connection invoked as ``connection(caller, *args)``.

    Raises:
        InvalidConnectorArguments: If the arguments cannot form a connection.
            Missing actions are not checked here; see ``UnresolvedAction``.
    """
    checked_label = validate_label(label)
    if len(args) == 2:
        connection = _connect_target(args[0], args[1], checked_label)
    elif len(args) == 1:
        connection = _connect_callable(args[0], checked_label)
    else:
        raise InvalidConnectorArguments(
            f"connect() takes a callable or a (target, action_name) pair, got {len(args)} arguments"
        )
    logger.debug("Built delegate connection %s (%s)", connection.label, connection.form.value)
    return connection


__all__ = ["connect"]
