from typing import Any, Callable, List, Optional, Tuple, TypeVar

from .Parsec import Parsec, State, ParseError, ParseResult, MessageType, Message, T, initial_pos

AccType = TypeVar('AccType')


def pure(value: T) -> Parsec[T]:
    """Return a parser that succeeds with a value without consuming input."""
    def parse(state: State) -> ParseResult[T]:
        return ParseResult.success(value, state)
    return Parsec(parse)


def fail(msg: str) -> Parsec[Any]:
    """A parser that always fails with a message."""
    def parse(state: State) -> ParseResult[Any]:
        return ParseResult.failure(state, ParseError.new_message(state.pos, MessageType.MESSAGE, msg))
    return Parsec(parse)


def token(show_tok: Callable[[str], str], test_tok: Callable[[str], Optional[T]]) -> Parsec[T]:
    """Parse a single character for which test_tok returns a value other than None."""
    def parse(state: State) -> ParseResult[T]:
        if state.at_end():
            return ParseResult.failure(state, ParseError.new_message(state.pos, MessageType.SYS_UNEXPECT, ""))

        tok = state.peek()
        result_val = test_tok(tok)
        if result_val is None:
            return ParseResult.failure(state, ParseError.new_message(state.pos, MessageType.SYS_UNEXPECT, show_tok(tok)))

        return ParseResult.success(result_val, state.advance(1))
    return Parsec(parse)


def tokens(show_tokens: Callable[[str], str], s: str) -> Parsec[str]:
    """Parse the exact string s in one step."""
    def parse(state: State) -> ParseResult[str]:
        if state.startswith(s):
            return ParseResult.success(s, state.advance(len(s)))

        found = state.text[state.index:state.index + len(s)]
        err = ParseError(state.pos, [
            Message(MessageType.SYS_UNEXPECT, show_tokens(found) if found else ""),
            Message(MessageType.EXPECT, show_tokens(s)),
        ])
        return ParseResult.failure(state, err)
    return Parsec(parse)


def lazy(thunk: Callable[[], Parsec[T]]) -> Parsec[T]:
    """
    Defer building a parser until it is first run. Lets a grammar rule refer to
    itself (or to a rule defined later) without recursing forever while the
    grammar is being built.
    """
    resolved: List[Parsec[T]] = []

    def parse(state: State) -> ParseResult[T]:
        if not resolved:
            resolved.append(thunk())
        return resolved[0](state)
    return Parsec(parse)


def _many_accum(
    acc_func: Callable[[T, AccType], AccType],
    p: Parsec[T],
    empty_acc: Callable[[], AccType]
) -> Parsec[AccType]:
    def parse_accum(state_outer: State) -> ParseResult[AccType]:
        current_acc = empty_acc()
        accum_state = state_outer

        while True:
            res_p = p(accum_state)

            if not res_p.ok:
                # p failed: stop and succeed with what has been collected so far
                return ParseResult.success(current_acc, accum_state)

            if res_p.state.index == accum_state.index:
                # p succeeded without consuming input, looping again would never end
                return ParseResult.failure(
                    accum_state,
                    ParseError.new_message(
                        accum_state.pos,
                        MessageType.MESSAGE,
                        "many: applied parser succeeded without consuming input"
                    )
                )

            current_acc = acc_func(res_p.value, current_acc)
            accum_state = res_p.state
    return Parsec(parse_accum)


def _append(item: T, lst: List[T]) -> List[T]:
    lst.append(item)  # the list is private to one run of the parser
    return lst


def many(p: Parsec[T]) -> Parsec[List[T]]:
    """Parse zero or more occurrences of `p`."""
    return _many_accum(_append, p, list)


def many1(p: Parsec[T]) -> Parsec[List[T]]:
    """Parse one or more occurrences of `p`."""
    return p.bind(lambda x: many(p).map(lambda xs: [x] + xs))


def skip_many(p: Parsec[Any]) -> Parsec[None]:
    """Skips zero or more occurrences of `p`."""
    return _many_accum(lambda item, acc: None, p, lambda: None)


def run_parser(parser: Parsec[T],
               input_str: str,
               source_name: str = "") -> Tuple[Optional[T], Optional[ParseError]]:
    """Run parser on input_str. Returns (value, None) on success and (None, error) on failure."""
    initial_state = State(input_str, initial_pos(source_name))
    result = parser(initial_state)
    return result.value, result.error


def run_parser_state(parser: Parsec[T], input_str: str, source_name: str = "") -> ParseResult[T]:
    """Like run_parser but returns the whole ParseResult, remaining input included."""
    return parser(State(input_str, initial_pos(source_name)))
