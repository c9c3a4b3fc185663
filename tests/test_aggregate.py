from core.aggregate import aggregate, percent
from core.normalize_skills import normalize_key


def test_recommended_keeps_master_order():
    agg = aggregate(["A", "B", "C", "D"], ["C"], ["A"])
    assert agg.recommended == ("B", "D")
    assert agg.attempted_count == 2
    assert agg.coverage == 25
    assert agg.remaining_gap_percent == 50


def test_recommended_is_disjoint_from_attempted():
    master = ["Decimals", "Fractions", "Geometry", "Ratios"]
    passed, failed = ["Fractions"], ["Ratios", "Fractions"]
    agg = aggregate(master, passed, failed)
    taken = {normalize_key(s) for s in passed + failed}
    assert not {normalize_key(s) for s in agg.recommended} & taken
    assert agg.attempted_count == 2


def test_empty_master_is_zero_percent():
    agg = aggregate([], [], [])
    assert agg.coverage == 0
    assert agg.remaining_gap_percent == 0
    assert agg.recommended == ()


def test_percent_rounds_half_up():
    assert percent(1, 8) == 13      # 12.5
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(1, 200) == 1     # 0.5
    assert percent(0, 5) == 0
    assert percent(5, 5) == 100
    assert percent(3, 0) == 0
