import pytest

from sunstream.infra.timers import ManualTimers

from tests.helpers import START_TS


@pytest.fixture
def timers() -> ManualTimers:
    return ManualTimers(start=START_TS)
