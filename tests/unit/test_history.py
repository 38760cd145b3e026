import pytest

from sunstream.core.errors import EngineContractError
from sunstream.stream.history import HistoryBuffer

from tests.helpers import make_event


def test_history_is_newest_first() -> None:
    history = HistoryBuffer()
    for event_id in range(1, 4):
        history.push(make_event(event_id))
    assert [event.id for event in history.snapshot()] == [3, 2, 1]


def test_history_never_exceeds_capacity() -> None:
    history = HistoryBuffer(capacity=50)
    for event_id in range(1, 121):
        history.push(make_event(event_id))
        assert len(history) <= 50
    ids = [event.id for event in history.snapshot()]
    assert ids == list(range(120, 70, -1))


def test_fifty_first_push_evicts_the_first_event() -> None:
    history = HistoryBuffer(capacity=50)
    for event_id in range(1, 52):
        history.push(make_event(event_id))
    snapshot = history.snapshot()
    assert len(snapshot) == 50
    assert snapshot[0].id == 51
    assert snapshot[-1].id == 2


def test_history_rejects_non_increasing_ids() -> None:
    history = HistoryBuffer()
    history.push(make_event(5))
    with pytest.raises(EngineContractError):
        history.push(make_event(5))
    with pytest.raises(EngineContractError):
        history.push(make_event(4))
    assert len(history) == 1


def test_snapshot_is_detached_from_later_pushes() -> None:
    history = HistoryBuffer()
    history.push(make_event(1))
    before = history.snapshot()
    history.push(make_event(2))
    assert isinstance(before, tuple)
    assert [event.id for event in before] == [1]
    assert [event.id for event in history] == [2, 1]


def test_history_requires_positive_capacity() -> None:
    with pytest.raises(ValueError):
        HistoryBuffer(capacity=0)
