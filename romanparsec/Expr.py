from typing import Callable, Dict, List, Mapping, TypeVar

from .Parsec import Parsec
from .Char import one_of
from .Combinators import SeqWithSeps, sep_by1_saved

T = TypeVar('T')

BinaryOp = Callable[[T, T], T]
OperatorTable = Mapping[str, BinaryOp]


def fold_seq(seq: SeqWithSeps[T, str], table: OperatorTable) -> T:
    """Left-to-right reduction: ((e0 op1 e1) op2 e2) ..."""
    acc = seq.elems[0]
    for sep, elem in zip(seq.seps, seq.elems[1:]):
        acc = table[sep](acc, elem)
    return acc


def fold(seq_parser: Parsec[SeqWithSeps[T, str]], table: OperatorTable) -> Parsec[T]:
    """
    Turns a separator-tagged sequence into a single value, applying the
    function registered for each separator strictly left to right.
    Every separator the sequence parser can produce must be a key of table.
    """
    ops: Dict[str, BinaryOp] = dict(table)
    return seq_parser.map(lambda seq: fold_seq(seq, ops))


def operator_level(term: Parsec[T], table: OperatorTable) -> Parsec[T]:
    """
    One precedence level: `term (op term)*` where op is any single-character
    key of table, folded left-associatively.
    """
    if not table:
        return term
    return fold(sep_by1_saved(term, one_of(table.keys())), table)


def build_expression_parser(levels: List[OperatorTable], atom: Parsec[T]) -> Parsec[T]:
    """
    Stacks operator levels on top of atom. levels is ordered from the tightest
    binding level to the loosest, e.g. [{'*': mul, '/': div}, {'+': add, '-': sub}].
    """
    term = atom
    for table in levels:
        term = operator_level(term, table)
    return term
