import pytest
from hypothesis import given, strategies as st

from romanparsec.Errors import RenderError
from romanparsec.Language import RomanDef
from romanparsec.Prim import run_parser, run_parser_state
from romanparsec.Roman import (
    render, roman_below_10, roman_below_100, roman_below_1000,
    roman_numeral, roman_thousands, roman_units,
)


def run(parser, input_str):
    return run_parser(parser, input_str)


@pytest.mark.parametrize("text, value", [
    ("I", 1), ("II", 2), ("III", 3), ("IV", 4), ("V", 5), ("VI", 6),
    ("VIII", 8), ("IX", 9), ("X", 10), ("XIV", 14), ("XIX", 19),
    ("XL", 40), ("XLII", 42), ("L", 50), ("XC", 90), ("XCIX", 99),
    ("C", 100), ("CD", 400), ("D", 500), ("CM", 900), ("M", 1000),
    ("MIX", 1009), ("MCMXCIV", 1994), ("MMXXVI", 2026), ("MMMCMXCIX", 3999),
])
def test_canonical_numerals(text, value):
    res = run_parser_state(roman_numeral(), text)
    assert res.value == value
    assert res.state.at_end()


def test_longest_repetition_wins():
    for p in (roman_units(), roman_numeral()):
        res = run_parser_state(p, "III")
        assert res.value == 3
        assert res.state.at_end()


def test_units_accept_empty():
    res = run_parser_state(roman_units(), "")
    assert res.value == 0
    assert res.state.index == 0


def test_cascade_levels_stop_at_their_scale():
    assert run(roman_below_10(), "IX")[0] == 9
    assert run_parser_state(roman_below_10(), "XI").value == 0
    assert run(roman_below_100(), "XCIX")[0] == 99
    assert run(roman_below_1000(), "CMXCIX")[0] == 999
    assert run_parser_state(roman_below_1000(), "MI").state.index == 0


def test_numeral_leaves_operators():
    res = run_parser_state(roman_numeral(), "XII+V")
    assert res.value == 12
    assert res.state.input == "+V"


def test_zero_symbol():
    assert run(roman_numeral(), "Z")[0] == 0
    assert run(roman_numeral(zero="N"), "N")[0] == 0
    assert run(roman_numeral(zero="N"), "Z")[0] is None


def test_empty_string_is_not_a_numeral():
    res, err = run(roman_numeral(), "")
    assert res is None
    assert "roman numeral" in str(err)


def test_non_numeral_does_not_match():
    res, err = run(roman_numeral(), "+I")
    assert res is None
    assert err.pos.offset == 0


def test_long_run_of_m():
    n = 50000
    res = run_parser_state(roman_thousands(), "M" * n + "CDXLIV")
    assert res.value == 1000 * n + 444
    assert res.state.at_end()


# --- render ---


@pytest.mark.parametrize("value, text", [
    (0, "Z"), (1, "I"), (4, "IV"), (9, "IX"), (14, "XIV"), (40, "XL"),
    (90, "XC"), (400, "CD"), (900, "CM"), (1009, "MIX"), (1994, "MCMXCIV"),
    (3999, "MMMCMXCIX"), (5000, "MMMMM"), (-7, "-VII"), (-1000, "-M"),
])
def test_render(value, text):
    assert render(value) == text


def test_render_uses_definition_symbols():
    lang = RomanDef(zero="N", minus="~")
    assert render(0, lang) == "N"
    assert render(-3, lang) == "~III"


def test_render_too_large():
    lang = RomanDef(max_render_thousands=10)
    assert render(10999, lang) == "M" * 10 + "CMXCIX"
    with pytest.raises(RenderError):
        render(11000, lang)
    with pytest.raises(RenderError):
        render(-11000, lang)


def test_render_default_limit():
    with pytest.raises(RenderError):
        render(2 ** 63 - 1)


@given(st.integers(min_value=0, max_value=200000))
def test_parse_inverts_render(n):
    res = run_parser_state(roman_numeral(), render(n))
    assert res.value == n
    assert res.state.at_end()


@given(st.integers(min_value=1, max_value=3999))
def test_render_inverts_parse_of_canonical(n):
    text = render(n)
    value, _ = run(roman_numeral(), text)
    assert render(value) == text
