"""Action-based delegation: lazily invoked, per-attribute callback bindings."""

from __future__ import annotations

from action_delegate.binding import TargetActionBinding
from action_delegate.config import DelegationConfig, configure, get_config, override_config
from action_delegate.connection import DelegateAction, DelegateConnection
from action_delegate.connector import connect
from action_delegate.errors import (
    DelegateActionFailure,
    DelegationError,
    ErrorEnvelope,
    ErrorType,
    InvalidConnectorArguments,
    UnresolvedAction,
    classify_error,
    make_error,
)
from action_delegate.models import ConnectionDescription, ConnectionForm
from action_delegate.slots import DelegateSlot

__version__ = "0.1.0"

__all__ = [
    "ConnectionDescription",
    "ConnectionForm",
    "DelegateAction",
    "DelegateActionFailure",
    "DelegateConnection",
    "DelegateSlot",
    "DelegationConfig",
    "DelegationError",
    "ErrorEnvelope",
    "ErrorType",
    "InvalidConnectorArguments",
    "TargetActionBinding",
    "UnresolvedAction",
    "__version__",
    "classify_error",
    "configure",
    "connect",
    "get_config",
    "make_error",
    "override_config",
]
