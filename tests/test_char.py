import pytest
from hypothesis import given
from hypothesis import strategies as st

from romanparsec.Char import (
    alpha,
    alpha_num,
    any_char,
    char,
    digit,
    none_of,
    one_of,
    satisfy,
    space,
    spaces,
    string,
    tab,
    upper,
)
from romanparsec.Prim import run_parser, run_parser_state


def run(parser, input_str):
    return run_parser(parser, input_str)


# --- Basic Character Parsers ---


@given(st.characters())
def test_char_parser(c):
    # Should match the character
    res, err = run(char(c), c)
    assert res == c
    assert err is None

    # Should fail on different character
    diff = chr(ord(c) + 1) if ord(c) < 0x10FFFF else chr(ord(c) - 1)
    res_fail, err_fail = run(char(c), diff)
    assert res_fail is None
    assert err_fail is not None


def test_char_on_empty_input():
    res, err = run(char("I"), "")
    assert res is None
    assert err.pos.offset == 0
    assert "end of input" in str(err)
    assert "'I'" in str(err)


def test_char_consumes_one():
    res = run_parser_state(char("M"), "MMX")
    assert res.value == "M"
    assert res.state.index == 1
    assert res.state.input == "MX"


@given(st.characters(), st.text())
def test_satisfy(c, text):
    # Predicate: matches specific char
    p = satisfy(lambda x: x == c)

    if text.startswith(c):
        res, _ = run(p, text)
        assert res == c
    else:
        res, err = run(p, text)
        assert res is None
        assert err is not None


@given(st.text(min_size=1))
def test_one_of(text):
    allowed = list(text)
    p = one_of(allowed)

    # Should match any char from the allowed list
    res, _ = run(p, text[0])
    assert res == text[0]


def test_one_of_rejects_other_chars():
    p = one_of("+-")
    assert run(p, "-")[0] == "-"
    res, err = run(p, "*")
    assert res is None
    assert "one of +-" in str(err)


def test_one_of_needs_characters():
    with pytest.raises(ValueError):
        one_of("")


@given(st.text(min_size=1))
def test_none_of(text):
    forbidden = list(text)
    p = none_of(forbidden)

    # Should fail for char in list
    res, err = run(p, text[0])
    assert res is None
    assert err is not None


# --- String Parsers ---


@given(st.text(min_size=1))
def test_string_parser(s):
    p = string(s)

    # Positive case
    res, err = run(p, s + "suffix")
    assert res == s
    assert err is None

    # Negative case: the last character differs, nothing is consumed
    last = ord(s[-1])
    partial = s[:-1] + (chr(last + 1) if last < 0x10FFFF else chr(last - 1))
    res_fail, err_fail = run(p, partial)
    assert res_fail is None
    assert err_fail.pos.offset == 0
    assert f"'{s}'" in str(err_fail)


def test_string_consumes_whole_prefix():
    res = run_parser_state(string("CM"), "CMXC")
    assert res.value == "CM"
    assert res.state.input == "XC"


def test_string_shorter_input():
    res, err = run(string("XXX"), "XX")
    assert res is None
    assert "'XX'" in str(err)


def test_string_needs_literal():
    with pytest.raises(ValueError):
        string("")


# --- Whitespace ---


def test_space_and_tab():
    assert run(space(), " ")[0] == " "
    assert run(space(), "\t")[0] == "\t"
    assert run(space(), "\n")[0] is None
    assert run(tab(), "\t")[0] == "\t"


def test_spaces():
    # Matches zero spaces
    res0, err0 = run(spaces(), "abc")
    assert res0 is None
    assert err0 is None

    # Check that it actually consumed input by chaining
    p = spaces() >> char("a")
    res2, _ = run(p, " \t  a")
    assert res2 == "a"


# --- Classification Parsers ---


@given(st.sampled_from("0123456789"))
def test_digit(c):
    res, _ = run(digit(), c)
    assert res == c


@given(st.sampled_from("abcdefghijklmnopqrstuvwxyz"))
def test_alpha(c):
    res, _ = run(alpha(), c)
    assert res == c


def test_alpha_is_lowercase_ascii_only():
    assert run(alpha(), "A")[0] is None
    assert run(alpha(), "é")[0] is None


@given(st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZ"))
def test_upper(c):
    res, _ = run(upper(), c)
    assert res == c


def test_alpha_num():
    assert run(alpha_num(), "q")[0] == "q"
    assert run(alpha_num(), "7")[0] == "7"
    res, err = run(alpha_num(), "_")
    assert res is None
    assert "letter or digit" in str(err)


def test_any_char():
    res, _ = run(any_char(), "?")
    assert res == "?"

    # Fails on empty
    res_empty, err = run(any_char(), "")
    assert res_empty is None
    assert err is not None
