# Core
from .Parsec import Parsec, State, ParseError, ParseResult, SourcePos, Message, MessageType, Ok, Error
from .Prim import run_parser, run_parser_state, pure, fail, lazy, token, tokens, many, many1, skip_many

# Characters
from .Char import (
    char, string, satisfy, one_of, none_of,
    space, spaces, tab, upper, alpha, digit, alpha_num, any_char
)

# Combinators
from .Combinators import (
    choice, between, option, option_maybe, merge, ban, not_empty, consumed,
    empty_input, eof, sep_by, sep_by1, sep_by1_saved, SeqWithSeps,
    parser_trace, parser_traced
)

# Expression folding
from .Expr import fold, fold_seq, operator_level, build_expression_parser

# Calculator definition
from .Language import RomanDef, DivisionMode, standard_def, truncating_def

# Errors
from .Errors import EvalError, ParseFailure, TrailingInput, ArithmeticOverflow, DivisionByZero, RenderError

# Roman numerals
from .Roman import roman_numeral, roman_thousands, render
from .Calc import Calculator, calculator_for, evaluate
