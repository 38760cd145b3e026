import pytest

from sunstream.core.errors import EngineContractError
from sunstream.stream.metrics import aggregate, round_half_up

from tests.helpers import make_event

_SEED = [
    ("TOP 20", 70),
    ("CARTE", 75),
    ("EXPOSÉES", 80),
    ("TOP 20", 85),
    ("ANALYSE", 90),
    ("CARTE", 65),
    ("TOP 20", 72),
    ("EXPOSÉES", 88),
    ("CARTE", 95),
]


def _events(rows):
    return [make_event(idx, category=category, score=score) for idx, (category, score) in enumerate(rows, start=1)]


def test_aggregate_known_seed() -> None:
    result = aggregate(_events(_SEED))
    assert dict(result.category_counts) == {"TOP 20": 3, "CARTE": 3, "EXPOSÉES": 2, "ANALYSE": 1}
    assert result.average_score == 80


def test_missing_categories_report_zero() -> None:
    result = aggregate(_events([("CARTE", 70), ("CARTE", 90)]))
    assert result.category_counts["TOP 20"] == 0
    assert result.category_counts["EXPOSÉES"] == 0
    assert result.category_counts["ANALYSE"] == 0
    assert result.category_counts["CARTE"] == 2
    assert list(result.category_counts) == ["TOP 20", "CARTE", "EXPOSÉES", "ANALYSE"]


def test_average_rounds_half_up() -> None:
    assert aggregate(_events([("TOP 20", 80), ("TOP 20", 81)])).average_score == 81
    assert aggregate(_events([("TOP 20", 62), ("TOP 20", 63)])).average_score == 63
    assert round_half_up(79.49) == 79


def test_counts_are_read_only() -> None:
    result = aggregate(_events(_SEED))
    with pytest.raises(TypeError):
        result.category_counts["CARTE"] = 0


def test_empty_history_is_a_contract_violation() -> None:
    with pytest.raises(EngineContractError):
        aggregate([])
