from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Generic, List, Tuple, TypeVar, Union

T = TypeVar('T')  # Generic type for parser results
U = TypeVar('U')


@dataclass(frozen=True)
class SourcePos:
    """Represents the current position in the input stream."""
    offset: int = 0
    name: str = ""

    def advance(self, n: int) -> 'SourcePos':
        return SourcePos(self.offset + n, self.name)

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} offset {self.offset}"
        return f"offset {self.offset}"


def initial_pos(name: str = "") -> SourcePos:
    return SourcePos(0, name)


@dataclass(frozen=True)
class State:
    """
    Parser state: the whole source text plus the position of the first
    unconsumed character. Advancing builds a new State, the text is never
    copied or sliced.
    """
    text: str
    pos: SourcePos = field(default_factory=SourcePos)

    @property
    def index(self) -> int:
        return self.pos.offset

    @property
    def input(self) -> str:
        """The remaining input. Copies, so only for diagnostics and tests."""
        return self.text[self.pos.offset:]

    def at_end(self) -> bool:
        return self.pos.offset >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos.offset] if not self.at_end() else ""

    def startswith(self, s: str) -> bool:
        return self.text.startswith(s, self.pos.offset)

    def advance(self, n: int) -> 'State':
        return State(self.text, self.pos.advance(n))


class MessageType(Enum):
    SYS_UNEXPECT = auto()  # raised by the primitives: what was actually found
    UNEXPECT = auto()
    EXPECT = auto()
    MESSAGE = auto()


@dataclass(frozen=True)
class Message:
    type: MessageType
    text: str


@dataclass
class ParseError:
    """Represents a parsing error: a position and the messages collected there."""
    pos: SourcePos
    messages: List[Message] = field(default_factory=list)

    @staticmethod
    def new_unknown(pos: SourcePos) -> 'ParseError':
        return ParseError(pos, [])

    @staticmethod
    def new_message(pos: SourcePos, msg_type: MessageType, text: str) -> 'ParseError':
        return ParseError(pos, [Message(msg_type, text)])

    def is_unknown(self) -> bool:
        return not self.messages

    def add_message(self, msg: Message) -> 'ParseError':
        return ParseError(self.pos, self.messages + [msg])

    def set_expect(self, text: str) -> 'ParseError':
        """Replace every EXPECT message with a single one (used by label)."""
        kept = [m for m in self.messages if m.type != MessageType.EXPECT]
        return ParseError(self.pos, kept + [Message(MessageType.EXPECT, text)])

    @staticmethod
    def merge(e1: 'ParseError', e2: 'ParseError') -> 'ParseError':
        # The error further into the input wins; unknown errors never win.
        if e2.is_unknown() and not e1.is_unknown():
            return e1
        if e1.is_unknown() and not e2.is_unknown():
            return e2
        if e1.pos.offset > e2.pos.offset:
            return e1
        if e2.pos.offset > e1.pos.offset:
            return e2
        merged = list(e1.messages)
        for m in e2.messages:
            if m not in merged:
                merged.append(m)
        return ParseError(e1.pos, merged)

    def _texts(self, msg_type: MessageType) -> List[str]:
        return [m.text for m in self.messages if m.type == msg_type and m.text]

    def describe(self) -> str:
        """Human readable message list, without the position."""
        parts = []
        sys_unexpect = [m for m in self.messages if m.type == MessageType.SYS_UNEXPECT]
        unexpect = self._texts(MessageType.UNEXPECT)
        if unexpect:
            parts.append("unexpected " + unexpect[0])
        elif sys_unexpect:
            found = sys_unexpect[0].text
            parts.append("unexpected " + found if found else "unexpected end of input")
        expect = self._texts(MessageType.EXPECT)
        if expect:
            if len(expect) == 1:
                parts.append("expecting " + expect[0])
            else:
                parts.append("expecting " + ", ".join(expect[:-1]) + " or " + expect[-1])
        parts.extend(self._texts(MessageType.MESSAGE))
        return "; ".join(parts) if parts else "unknown parse error"

    def __str__(self) -> str:
        return f"Parse error at {self.pos}: {self.describe()}"


@dataclass
class Ok(Generic[T]):
    value: T
    state: State


@dataclass
class Error:
    state: State
    error: ParseError


Reply = Union[Ok, Error]


@dataclass
class ParseResult(Generic[T]):
    """The outcome of running a parser: either Ok(value, state) or Error(state, error)."""
    reply: Reply

    @staticmethod
    def success(value: T, state: State) -> 'ParseResult[T]':
        return ParseResult(Ok(value, state))

    @staticmethod
    def failure(state: State, error: ParseError) -> 'ParseResult[Any]':
        return ParseResult(Error(state, error))

    @property
    def ok(self) -> bool:
        return isinstance(self.reply, Ok)

    @property
    def value(self) -> Any:
        return self.reply.value if isinstance(self.reply, Ok) else None

    @property
    def state(self) -> State:
        return self.reply.state

    @property
    def error(self) -> Any:
        return self.reply.error if isinstance(self.reply, Error) else None


class Parsec(Generic[T]):
    """A parser combinator that processes input and returns a result."""
    def __init__(self, parse_fn: Callable[[State], ParseResult[T]]):
        self.parse_fn = parse_fn

    def __call__(self, state: State) -> ParseResult[T]:
        return self.parse_fn(state)

    # Monadic bind (>>=)
    def bind(self, f: Callable[[T], 'Parsec[U]']) -> 'Parsec[U]':
        def parse(state: State) -> ParseResult[U]:
            res = self(state)
            if not res.ok:
                return res
            # The first parser succeeded, its value selects the next parser
            return f(res.value)(res.state)
        return Parsec(parse)

    # Functor map (<$>)
    def map(self, f: Callable[[T], U]) -> 'Parsec[U]':
        def parse(state: State) -> ParseResult[U]:
            res = self(state)
            if not res.ok:
                return res
            return ParseResult.success(f(res.value), res.state)
        return Parsec(parse)

    # Alternative (<|>)
    # Full backtracking: other always restarts from the original state,
    # no matter how far self got before failing.
    def __or__(self, other: 'Parsec[T]') -> 'Parsec[T]':
        def parse(state: State) -> ParseResult[T]:
            res = self(state)
            if res.ok:
                return res
            res2 = other(state)
            if res2.ok:
                return res2
            return ParseResult.failure(state, ParseError.merge(res.error, res2.error))
        return Parsec(parse)

    # Sequence (&)
    # self: Parsec[T], other: Parsec[U] -> result: Parsec[Tuple[T, U]]
    def __and__(self, other: 'Parsec[U]') -> 'Parsec[Tuple[T, U]]':
        def combined(state: State) -> ParseResult[Tuple[T, U]]:
            res1 = self(state)
            if not res1.ok:
                return res1

            res2 = other(res1.state)
            if not res2.ok:
                return res2

            return ParseResult.success((res1.value, res2.value), res2.state)
        return Parsec(combined)

    # Sequence (<*)
    # self: Parsec[T], other: Parsec[U] -> result: Parsec[T]
    def __lt__(self, other: 'Parsec[U]') -> 'Parsec[T]':
        def combined(state: State) -> ParseResult[T]:
            res1 = self(state)
            if not res1.ok:
                return res1

            res2 = other(res1.state)
            if not res2.ok:
                return res2

            return ParseResult.success(res1.value, res2.state)
        return Parsec(combined)

    # Sequence (*>) when given a parser, monadic bind when given a function
    def __rshift__(self, other: Union['Parsec[U]', Callable[[T], 'Parsec[U]']]) -> 'Parsec[U]':
        if isinstance(other, Parsec):
            return self._then(other)
        return self.bind(other)

    def _then(self, other: 'Parsec[U]') -> 'Parsec[U]':
        def combined(state: State) -> ParseResult[U]:
            res1 = self(state)  # value discarded
            if not res1.ok:
                return res1
            return other(res1.state)
        return Parsec(combined)

    # Label (<?>)
    def label(self, msg: str) -> 'Parsec[T]':
        def parse(state: State) -> ParseResult[T]:
            res = self(state)
            if res.ok:
                return res
            # Only relabel failures that happened where this parser started
            if res.error.pos.offset == state.index:
                return ParseResult.failure(res.state, res.error.set_expect(msg))
            return res
        return Parsec(parse)
