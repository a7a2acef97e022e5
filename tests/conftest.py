from __future__ import annotations

from collections.abc import Iterator

import pytest

from action_delegate import configure, get_config
from tests.hosts import ColorRepository, SelectField


@pytest.fixture
def repository() -> ColorRepository:
    return ColorRepository()


@pytest.fixture
def field() -> SelectField:
    return SelectField("color")


@pytest.fixture(autouse=True)
def _restore_config() -> Iterator[None]:
    previous = get_config()
    yield
    configure(**previous.model_dump())
