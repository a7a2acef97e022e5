"""Diagnostic models describing delegate connections."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator


class ConnectionForm(str, Enum):
    """How a connection was built."""

    TARGET_ACTION = "target_action"
    CALLABLE = "callable"


class ConnectionDescription(BaseModel):
    """Read-only summary of a connection; building one never runs the action."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str | None = None
    form: ConnectionForm
    action_name: str | None = None
    target_type: str | None = None
    action_qualname: str | None = None

    @model_validator(mode="after")
    def _validate_form_fields(self) -> ConnectionDescription:
        if self.form is ConnectionForm.TARGET_ACTION:
            if not self.action_name or not self.target_type:
                raise ValueError("target_action descriptions require action_name and target_type")
            if self.action_qualname is not None:
                raise ValueError("action_qualname only applies to callable descriptions")
        elif self.action_name is not None or self.target_type is not None:
            raise ValueError("action_name and target_type only apply to target_action descriptions")
        return self


__all__ = ["ConnectionDescription", "ConnectionForm"]
