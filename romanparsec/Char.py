from typing import Callable, Iterable

from .Parsec import Parsec
from .Prim import token, tokens, skip_many


def _show(c: str) -> str:
    return f"'{c}'"


# Core function: Succeeds if the character satisfies a predicate
def satisfy(f: Callable[[str], bool]) -> Parsec[str]:
    """Succeeds for any character where f returns True. Returns the parsed character."""
    return token(_show, lambda c: c if f(c) else None)


# Helper function: Parses a single character
def char(c: str) -> Parsec[str]:
    """Parses a single character c and returns it."""
    return satisfy(lambda x: x == c).label(_show(c))


# 1. oneOf: Parses any character in the provided collection
def one_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is in cs. Returns the parsed character."""
    allowed = frozenset(cs)
    if not allowed:
        raise ValueError("one_of needs at least one character")
    shown = ''.join(sorted(allowed))
    return satisfy(lambda c: c in allowed).label(f"one of {shown}")


# 2. noneOf: Parses any character not in the provided collection
def none_of(cs: Iterable[str]) -> Parsec[str]:
    """Succeeds if the current character is not in cs. Returns the parsed character."""
    banned = frozenset(cs)
    return satisfy(lambda c: c not in banned).label(f"none of {''.join(sorted(banned))}")


# 3. string: Parses a specific string
def string(s: str) -> Parsec[str]:
    """Parses the exact string s and returns it."""
    if not s:
        raise ValueError("string needs a non-empty literal")
    return tokens(_show, s)


# 4. space: Parses a blank (space or tab)
def space() -> Parsec[str]:
    """Parses a space or tab character and returns it."""
    return one_of(" \t").label("space")


# 5. spaces: Skips zero or more blanks
def spaces() -> Parsec[None]:
    """Skips zero or more spaces and tabs."""
    return skip_many(space()).label("white space")


def tab() -> Parsec[str]:
    return char('\t').label("tab")


def upper() -> Parsec[str]:
    """Parses an uppercase letter and returns it."""
    return satisfy(str.isupper).label("uppercase letter")


def alpha() -> Parsec[str]:
    """Parses a lowercase ASCII letter, a to z."""
    return satisfy(lambda c: 'a' <= c <= 'z').label("letter")


def digit() -> Parsec[str]:
    """Parses an ASCII digit and returns it."""
    return satisfy(lambda c: '0' <= c <= '9').label("digit")


def alpha_num() -> Parsec[str]:
    return (alpha() | digit()).label("letter or digit")


def any_char() -> Parsec[str]:
    return satisfy(lambda _: True)
