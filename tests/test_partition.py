from core.catalog import build_catalog
from core.normalize_skills import normalize_key
from core.parse_skills import parse_skills
from core.partition import partition


def test_variants_collapse_to_one_canonical_entry():
    catalog = build_catalog("Algebra\nGeometry")
    result = partition("Algebra\nalgebra\nALGEBRA", catalog.lookup)
    assert result.canonical == ("Algebra",)
    assert result.unknown == ()


def test_unknown_entries_dedupe_by_raw_text():
    catalog = build_catalog("Geometry")
    result = partition("algebra\nAlgebra\nalgebra\nCalculus", catalog.lookup)
    assert result.canonical == ()
    assert result.unknown == ("algebra", "Algebra", "Calculus")


def test_outputs_are_sorted():
    catalog = build_catalog("Probability, Decimals, Fractions")
    result = partition("probability; zeta; fractions; Beta", catalog.lookup)
    assert result.canonical == ("Fractions", "Probability")
    assert result.unknown == ("Beta", "zeta")


def test_accepts_parsed_sequence():
    catalog = build_catalog("Fractions")
    result = partition(["fractions", "  ", "Ratios"], catalog.lookup)
    assert result.canonical == ("Fractions",)
    assert result.unknown == ("Ratios",)


def test_every_entry_lands_in_exactly_one_list():
    catalog = build_catalog("Decimals\nFractions\nMeasurement")
    raw = "decimals\nDecimals\nRatios\nratios\n- Measurement\nVolume"
    result = partition(raw, catalog.lookup)
    canonical_keys = {normalize_key(s) for s in result.canonical}
    for skill in parse_skills(raw):
        in_canonical = normalize_key(skill) in canonical_keys
        in_unknown = skill in result.unknown
        assert in_canonical != in_unknown
    assert set(result.canonical) <= set(catalog.skills)


def test_empty_master_makes_everything_unknown():
    result = partition("X", build_catalog("").lookup)
    assert result.canonical == ()
    assert result.unknown == ("X",)
