"""Late-bound ``(target, action name)`` adapter used by the target-action form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from action_delegate.errors import UnresolvedAction


@dataclass(frozen=True, slots=True, eq=False)
class TargetActionBinding:
    """Callable adapter that resolves ``action_name`` on ``target`` per call.

    Resolution happens at call time only, so the target may still be partially
    initialized (or later lose the action) after the binding is built.
    """

    target: Any
    action_name: str

    def resolve(self) -> Any:
        """Return the bound action, or raise ``UnresolvedAction``."""
        try:
            action = getattr(self.target, self.action_name)
        except AttributeError as exc:
            raise UnresolvedAction(self.target, self.action_name, message=str(exc)) from exc
        if not callable(action):
            raise UnresolvedAction(self.target, self.action_name, reason="not_callable")
        return action

    def __call__(self, caller: Any, /, *args: Any, **kwargs: Any) -> Any:
        # Only the lookup is translated; errors from the action itself pass through.
        action = self.resolve()
        return action(caller, *args, **kwargs)

    @property
    def target_type(self) -> str:
        cls = type(self.target)
        return f"{cls.__module__}.{cls.__qualname__}"

    def __repr__(self) -> str:
        return f"TargetActionBinding({type(self.target).__name__}.{self.action_name})"


__all__ = ["TargetActionBinding"]
