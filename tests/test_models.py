from __future__ import annotations

import pydantic
import pytest

from action_delegate import ConnectionDescription, ConnectionForm, connect


class Catalog:
    def entries(self, caller: object) -> list[str]:
        return []


def test_target_description_from_connect() -> None:
    description = connect(Catalog(), "entries", label="catalog").describe()

    assert description == ConnectionDescription(
        label="catalog",
        form=ConnectionForm.TARGET_ACTION,
        action_name="entries",
        target_type=f"{__name__}.Catalog",
    )


def test_callable_description_round_trips_through_json() -> None:
    description = connect(Catalog().entries).describe()
    payload = description.model_dump(mode="json")

    assert payload["form"] == "callable"
    assert payload["action_qualname"] == "Catalog.entries"
    assert ConnectionDescription.model_validate(payload) == description


def test_target_description_requires_action_name() -> None:
    with pytest.raises(pydantic.ValidationError):
        ConnectionDescription(form=ConnectionForm.TARGET_ACTION, target_type="x.Y")


def test_callable_description_rejects_target_fields() -> None:
    with pytest.raises(pydantic.ValidationError):
        ConnectionDescription(form=ConnectionForm.CALLABLE, action_name="entries")


def test_target_description_rejects_qualname() -> None:
    with pytest.raises(pydantic.ValidationError):
        ConnectionDescription(
            form=ConnectionForm.TARGET_ACTION,
            action_name="entries",
            target_type="x.Y",
            action_qualname="f",
        )


def test_extra_fields_are_forbidden() -> None:
    with pytest.raises(pydantic.ValidationError):
        ConnectionDescription(form=ConnectionForm.CALLABLE, cached=True)  # type: ignore[call-arg]
