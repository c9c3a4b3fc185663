from core.parse_skills import parse_skills


def test_empty_and_whitespace_input():
    assert parse_skills("") == []
    assert parse_skills("   \n\t ") == []


def test_plain_text_delimiters():
    text = "Fractions\nDecimals, Geometry;Probability\n\n,,;Measurement"
    assert parse_skills(text) == ["Fractions", "Decimals", "Geometry", "Probability", "Measurement"]


def test_leading_bullets_are_stripped_once():
    text = "- Fractions\n  * Decimals\n• Geometry\n-- Angles"
    assert parse_skills(text) == ["Fractions", "Decimals", "Geometry", "- Angles"]


def test_inner_dashes_are_kept():
    assert parse_skills("Self-assessment\nT-tests") == ["Self-assessment", "T-tests"]


def test_json_array():
    assert parse_skills('  ["Algebra", " Geometry ", ""]  ') == ["Algebra", "Geometry"]


def test_json_array_coerces_non_strings():
    assert parse_skills('["Algebra", 7, 2.5, 3.0, true, null, ["a", "b"], {"k": 1}]') == [
        "Algebra", "7", "2.5", "3", "true", "a,b", "[object Object]",
    ]


def test_json_array_wins_over_delimiters():
    # commas inside an element stay together when the input is a JSON array
    assert parse_skills('["Geometry, Angles", "Decimals"]') == ["Geometry, Angles", "Decimals"]


def test_malformed_json_falls_back_to_plain_text():
    assert parse_skills('["Algebra", "Geometry"') == ['["Algebra"', '"Geometry"']


def test_json_non_array_falls_back_to_plain_text():
    assert parse_skills('{"skill": "Algebra"}') == ['{"skill": "Algebra"}']
    assert parse_skills('"Algebra"') == ['"Algebra"']
    assert parse_skills("42") == ["42"]


def test_deeply_nested_brackets_fall_back_to_plain_text():
    text = "[" * 100000
    assert parse_skills(text) == [text]


def test_deep_valid_array_is_flattened_like_string_join():
    depth = 200
    text = "[" * depth + '"Algebra", "Geometry"' + "]" * depth
    assert parse_skills(text) == ["Algebra,Geometry"]
    assert parse_skills('[["a", [], ["b", null]], "c"]') == ["a,,b,", "c"]


def test_nan_and_infinity_are_not_json():
    assert parse_skills("[NaN, Infinity]") == ["[NaN", "Infinity]"]
    assert parse_skills("[-Infinity]") == ["[-Infinity]"]


def test_byte_order_mark_is_trimmed():
    assert parse_skills('\ufeff["Algebra"]') == ["Algebra"]
    assert parse_skills("\ufeffAlgebra\n\ufeff- Geometry \ufeff") == ["Algebra", "Geometry"]
    assert parse_skills('["\ufeff Algebra\ufeff"]') == ["Algebra"]
