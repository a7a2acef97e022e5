"""Process-wide settings for the delegation layer.

Settings only affect diagnostics (labels and logging). They never change how a
connection resolves or invokes its action.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel, ConfigDict


class DelegationConfig(BaseModel):
    """Validated delegation settings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    log_invocations: bool = False
    default_label_prefix: str = ""


_lock = threading.Lock()
_active = DelegationConfig()


def get_config() -> DelegationConfig:
    return _active


def configure(**changes: Any) -> DelegationConfig:
    """Validate ``changes`` against the active config and make the result active."""
    global _active
    with _lock:
        updated = DelegationConfig.model_validate({**_active.model_dump(), **changes})
        _active = updated
    return updated


@contextmanager
def override_config(**changes: Any) -> Iterator[DelegationConfig]:
    """Temporarily apply ``changes``, restoring the previous config on exit."""
    global _active
    previous = _active
    try:
        yield configure(**changes)
    finally:
        with _lock:
            _active = previous


__all__ = ["DelegationConfig", "configure", "get_config", "override_config"]
