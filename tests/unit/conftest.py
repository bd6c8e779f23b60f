from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest

from tests.conftest import FAKE_GIT

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def run_process(mocker: MockerFixture) -> AsyncMock:
    """Patch anyio.run_process as seen by the invoker."""
    return mocker.patch("gitlore.git._invoker.anyio.run_process", new_callable=AsyncMock)


@pytest.fixture
def resolved_git(mocker: MockerFixture) -> AsyncMock:
    """Patch executable discovery to return a fixed git executable."""
    return mocker.patch(
        "gitlore.git._git.find_git", new_callable=AsyncMock, return_value=FAKE_GIT
    )
