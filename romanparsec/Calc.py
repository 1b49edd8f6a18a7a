import logging
from functools import lru_cache, partial
from typing import Optional

from .Parsec import Parsec, State, initial_pos
from .Prim import lazy
from .Char import char
from .Combinators import between
from .Expr import operator_level
from .Roman import roman_numeral, render as render_numeral
from .Arith import checked_add, checked_sub, checked_mul, checked_div, checked_neg
from .Errors import EvalError, ParseFailure, TrailingInput
from .Language import RomanDef, standard_def

logger = logging.getLogger(__name__)


class Calculator:
    """
    Builds the expression grammar for a RomanDef once and evaluates any number
    of expressions with it.

        Expr  = Term (('+' | '-') Term)*
        Term  = Atom (('*' | '/') Atom)*
        Atom  = Numeral | '-' Atom | '(' Expr ')'

    Both operator levels fold strictly left to right. Unary minus applies to a
    single Atom, so -V*II is (-V)*II.
    """
    def __init__(self, lang: RomanDef = standard_def):
        self.lang = lang

        self.numeral: Parsec[int] = roman_numeral(lang.zero)

        self.unary_minus: Parsec[int] = (char(lang.minus) >> lazy(lambda: self.atom)).map(checked_neg)

        self.parens: Parsec[int] = between(
            char(lang.open_paren), char(lang.close_paren), lazy(lambda: self.expr))

        # '(' (Nested | Numeral) ')': a plain nesting of parentheses around a
        # numeral is matched here without going through Expr and Term at
        # every level. Anything else falls back to self.parens.
        self.nested_parens: Parsec[int] = between(
            char(lang.open_paren),
            char(lang.close_paren),
            lazy(lambda: self.nested_parens) | self.numeral)

        if lang.nested_fast_path:
            brackets = self.nested_parens | self.parens
        else:
            brackets = self.parens

        self.atom: Parsec[int] = (self.numeral | self.unary_minus | brackets).label("operand")

        self.term: Parsec[int] = operator_level(self.atom, {
            lang.times: checked_mul,
            lang.divide: partial(checked_div, mode=lang.division),
        })

        self.expr: Parsec[int] = operator_level(self.term, {
            lang.plus: checked_add,
            lang.minus: checked_sub,
        })

    def strip_blanks(self, line: str) -> str:
        """Remove every blank the definition allows between tokens."""
        return "".join(c for c in line if c not in self.lang.blanks)

    def evaluate(self, expression: str, source_name: str = "") -> int:
        """
        Evaluate a whole expression. Raises ParseFailure when it does not
        parse, TrailingInput when only a prefix parses, ArithmeticOverflow or
        DivisionByZero when the arithmetic fails.
        """
        logger.debug("Evaluating %r", expression)
        try:
            res = self.expr(State(expression, initial_pos(source_name)))
        except RecursionError:
            logger.debug("Nesting too deep in %r", expression)
            raise ParseFailure("expression nested too deeply", expression) from None
        except EvalError as e:
            e.expression = expression
            logger.debug("Evaluation of %r failed: %s", expression, e)
            raise

        if not res.ok:
            err = res.error
            logger.debug("Parse of %r failed: %s", expression, err)
            raise ParseFailure(err.describe(), expression, err.pos.offset, err)

        if not res.state.at_end():
            offset = res.state.index
            logger.debug("Trailing input in %r at offset %d", expression, offset)
            raise TrailingInput(
                f"unexpected '{res.state.peek()}' after a complete expression", expression, offset)

        logger.debug("Evaluated %r = %d", expression, res.value)
        return res.value

    def render(self, value: int) -> str:
        return render_numeral(value, self.lang)


@lru_cache(maxsize=None)
def calculator_for(lang: RomanDef = standard_def) -> Calculator:
    """Shared calculator per definition. Grammars are immutable, so sharing is safe."""
    return Calculator(lang)


def evaluate(expression: str, lang: Optional[RomanDef] = None) -> int:
    return calculator_for(lang or standard_def).evaluate(expression)


def render(value: int, lang: Optional[RomanDef] = None) -> str:
    return render_numeral(value, lang or standard_def)
