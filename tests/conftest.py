from __future__ import annotations

import pytest

from tests.fakes import FakeClock, ListHistory


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def history() -> ListHistory:
    return ListHistory()
