from typing import Callable, List, Tuple

from .Parsec import Parsec
from .Prim import pure, many
from .Char import char, string
from .Combinators import choice, consumed, merge
from .Arith import check_int64
from .Errors import RenderError
from .Language import RomanDef, standard_def

# (value, numeral) pairs in the order render writes them
NUMERALS: List[Tuple[int, str]] = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _plus(n: int) -> Callable[[int], int]:
    return lambda v: v + n


def _digit(forms: List[Tuple[str, int]], lower: Parsec[int]) -> Parsec[int]:
    """
    One positional rule: each literal in forms followed by the next lower rule,
    or the lower rule alone. forms must list longer repetitions first
    ("XXX" before "XX" before "X"): every rule also accepts the empty string,
    so a shorter form tried first would always win and strand the rest.
    """
    alternatives = [(string(lit) >> lower).map(_plus(n)) for lit, n in forms]
    return choice(alternatives + [lower])


def roman_units() -> Parsec[int]:
    return choice([
        string("III").map(lambda _: 3),
        string("II").map(lambda _: 2),
        string("I").map(lambda _: 1),
        pure(0),
    ])


def roman_below_10() -> Parsec[int]:
    four = _digit([("IV", 4)], roman_units())
    five = _digit([("V", 5)], four)
    return _digit([("IX", 9)], five)


def roman_below_100() -> Parsec[int]:
    tens = _digit([("XXX", 30), ("XX", 20), ("X", 10)], roman_below_10())
    forty = _digit([("XL", 40)], tens)
    fifty = _digit([("L", 50)], forty)
    return _digit([("XC", 90)], fifty)


def roman_below_1000() -> Parsec[int]:
    hundreds = _digit([("CCC", 300), ("CC", 200), ("C", 100)], roman_below_100())
    four_hundred = _digit([("CD", 400)], hundreds)
    five_hundred = _digit([("D", 500)], four_hundred)
    return _digit([("CM", 900)], five_hundred)


def _thousands(ms: List[str], rest: int) -> int:
    return check_int64(1000 * len(ms) + rest, "numeral")


def roman_thousands() -> Parsec[int]:
    """
    Any number of M followed by the part below a thousand. The whole run of M
    is read by a single many() so a long run costs one pass, not one descent
    through the cascade per M. Accepts the empty string with value 0.
    """
    return merge(many(char('M')), roman_below_1000(), _thousands)


def roman_zero(symbol: str = "Z") -> Parsec[int]:
    return char(symbol).map(lambda _: 0)


def roman_numeral(zero: str = "Z") -> Parsec[int]:
    """
    A numeral: at least one roman digit, or the zero symbol on its own.
    The empty match of the cascade is rejected, so "" is never read as 0.
    """
    return (consumed(roman_thousands()) | roman_zero(zero)).label("roman numeral")


def render(value: int, lang: RomanDef = standard_def) -> str:
    """
    Write value as a numeral: the zero symbol for 0, a leading minus sign for
    negative values, otherwise the canonical subtractive form.
    """
    if value == 0:
        return lang.zero
    sign = lang.minus if value < 0 else ""
    rest = abs(value)
    if rest // 1000 > lang.max_render_thousands:
        raise RenderError(f"{value} is too large to render")

    parts = [sign]
    for n, numeral in NUMERALS:
        count, rest = divmod(rest, n)
        parts.append(numeral * count)
    return "".join(parts)
