import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional

from .Parsec import Parsec, State, ParseError, ParseResult, MessageType, Message, T, U
from .Prim import pure, fail

logger = logging.getLogger(__name__)


# 1. choice: Tries parsers in order until one succeeds
def choice(parsers: List[Parsec[T]]) -> Parsec[T]:
    """
    Applies a list of parsers in order until one succeeds.
    Returns the value of the succeeding parser, or fails if none succeed.
    """
    if not parsers:
        return fail("no alternatives")
    result = parsers[0]
    for p in parsers[1:]:
        result = result | p
    return result


# 2. between: Parses an opening parser, a main parser, and a closing parser
def between(open: Parsec[Any], close: Parsec[Any], p: Parsec[T]) -> Parsec[T]:
    """
    Parses 'open', then 'p', then 'close', returning the result of 'p'.
    """
    def parse(state: State) -> ParseResult[T]:
        res_open = open(state)
        if not res_open.ok:
            return res_open
        res_p = p(res_open.state)
        if not res_p.ok:
            return res_p
        res_close = close(res_p.state)
        if not res_close.ok:
            return res_close
        return ParseResult.success(res_p.value, res_close.state)
    return Parsec(parse)


# 3. option: Tries a parser, returning a default value on failure
def option(x: T, p: Parsec[T]) -> Parsec[T]:
    """
    Tries parser p; returns its result if successful, else x without consuming input.
    """
    return p | pure(x)


# 4. optionMaybe: Tries a parser, returning Optional[T]
def option_maybe(p: Parsec[T]) -> Parsec[Optional[T]]:
    return p | pure(None)


# 5. merge: Runs two parsers in sequence and combines both values
def merge(p1: Parsec[T], p2: Parsec[U], f: Callable[[T, U], Any]) -> Parsec[Any]:
    """
    Runs p1, then p2 on what p1 left, and returns f(v1, v2). Fails if either fails.
    """
    def parse(state: State) -> ParseResult[Any]:
        res1 = p1(state)
        if not res1.ok:
            return res1
        res2 = p2(res1.state)
        if not res2.ok:
            return res2
        return ParseResult.success(f(res1.value, res2.value), res2.state)
    return Parsec(parse)


# 6. ban: Turns one particular value into a failure
def ban(p: Parsec[T], banned: T) -> Parsec[T]:
    """
    Behaves as p, except that a parsed value equal to banned is reported as a failure.
    """
    def parse(state: State) -> ParseResult[T]:
        res = p(state)
        if res.ok and res.value == banned:
            return ParseResult.failure(state, ParseError.new_message(
                state.pos, MessageType.UNEXPECT, repr(banned)))
        return res
    return Parsec(parse)


# 7. notEmpty: Refuses to run on an empty input
def not_empty(p: Parsec[T]) -> Parsec[T]:
    """
    Fails when the input given is empty, otherwise behaves as p.
    """
    def parse(state: State) -> ParseResult[T]:
        if state.at_end():
            return ParseResult.failure(state, ParseError.new_message(
                state.pos, MessageType.SYS_UNEXPECT, ""))
        return p(state)
    return Parsec(parse)


# 8. consumed: Rejects successes that did not consume anything
def consumed(p: Parsec[T]) -> Parsec[T]:
    """
    Behaves as p, except that a success which consumed no input is a failure.
    Used to keep epsilon branches of a grammar from matching on their own.
    """
    def parse(state: State) -> ParseResult[T]:
        res = p(state)
        if res.ok and res.state.index == state.index:
            found = state.peek()
            return ParseResult.failure(state, ParseError.new_message(
                state.pos, MessageType.SYS_UNEXPECT, f"'{found}'" if found else ""))
        return res
    return Parsec(parse)


# 9. emptyInput: Succeeds only when nothing is left
def empty_input(x: T) -> Parsec[T]:
    """
    Succeeds with x if the input is empty, fails otherwise.
    """
    def parse(state: State) -> ParseResult[T]:
        if state.at_end():
            return ParseResult.success(x, state)
        return ParseResult.failure(state, ParseError(state.pos, [
            Message(MessageType.UNEXPECT, f"'{state.peek()}'"),
            Message(MessageType.EXPECT, "end of input"),
        ]))
    return Parsec(parse)


# 10. eof: Succeeds only at the end of input
def eof() -> Parsec[None]:
    """
    Succeeds only if no input remains, labeled as 'end of input'.
    """
    return empty_input(None)


# 11. sepBy1: Parses one or more occurrences separated by a separator
def sep_by1(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    """
    Parses one or more occurrences of p separated by sep, returning a list of p's results.
    """
    return sep_by1_saved(p, sep).map(lambda seq: seq.elems)


# 12. sepBy: Parses zero or more occurrences separated by a separator
def sep_by(p: Parsec[T], sep: Parsec[Any]) -> Parsec[List[T]]:
    return sep_by1(p, sep) | pure([])


@dataclass
class SeqWithSeps(Generic[T, U]):
    """Elements of a separated sequence plus the separators found between them."""
    elems: List[T] = field(default_factory=list)
    seps: List[U] = field(default_factory=list)


# 13. sepBy1 keeping the separators
def sep_by1_saved(p: Parsec[T], sep: Parsec[U]) -> Parsec[SeqWithSeps[T, U]]:
    """
    Parses `p (sep p)*` greedily and returns both the elements and the
    separators. Stops at the first sep, or sep followed by a failing p, and
    leaves that input unconsumed. Fails only if the first p fails.
    """
    def parse(initial_state: State) -> ParseResult[SeqWithSeps[T, U]]:
        res_first = p(initial_state)
        if not res_first.ok:
            return res_first

        elems = [res_first.value]
        seps = []
        current_state = res_first.state

        while True:
            res_sep = sep(current_state)
            if not res_sep.ok:
                break
            res_next = p(res_sep.state)
            if not res_next.ok:
                # A separator without a right-hand side is left for the caller
                break
            seps.append(res_sep.value)
            elems.append(res_next.value)
            current_state = res_next.state

        return ParseResult.success(SeqWithSeps(elems, seps), current_state)
    return Parsec(parse)


# 14. parserTrace: Debugging parser that logs the remaining input
def parser_trace(label_str: str) -> Parsec[None]:
    def parse(state: State) -> ParseResult[None]:
        rest = state.text[state.index:state.index + 30]
        more = '...' if len(state.text) - state.index > 30 else ''
        logger.debug("%s: \"%s%s\" at %s", label_str, rest, more, state.pos)
        return ParseResult.success(None, state)
    return Parsec(parse)


# 15. parserTraced: Debugging parser that traces execution and backtracking
def parser_traced(label_str: str, p: Parsec[T]) -> Parsec[T]:
    return parser_trace(label_str) >> (
        p | (parser_trace(f"{label_str} backtracked") >> fail(f"{label_str} failed"))
    )
