from .Errors import ArithmeticOverflow, DivisionByZero
from .Language import DivisionMode

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def check_int64(value: int, what: str = "result") -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ArithmeticOverflow(f"{what} {value} does not fit in a signed 64-bit integer")
    return value


def checked_add(a: int, b: int) -> int:
    if (b > 0 and a > INT64_MAX - b) or (b < 0 and a < INT64_MIN - b):
        raise ArithmeticOverflow(f"overflow in {a} + {b}")
    return a + b


def checked_sub(a: int, b: int) -> int:
    if (b < 0 and a > INT64_MAX + b) or (b > 0 and a < INT64_MIN + b):
        raise ArithmeticOverflow(f"overflow in {a} - {b}")
    return a - b


def checked_mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    # |a| * |b| <= limit  <=>  |a| <= limit // |b|, checked before multiplying
    limit = INT64_MAX if (a < 0) == (b < 0) else -INT64_MIN
    if abs(a) > limit // abs(b):
        raise ArithmeticOverflow(f"overflow in {a} * {b}")
    return a * b


def checked_neg(a: int) -> int:
    if a == INT64_MIN:
        raise ArithmeticOverflow(f"overflow in -({a})")
    return -a


def checked_div(a: int, b: int, mode: DivisionMode = DivisionMode.FLOOR) -> int:
    if b == 0:
        raise DivisionByZero(f"division of {a} by zero")
    if a == INT64_MIN and b == -1:
        raise ArithmeticOverflow(f"overflow in {a} / {b}")
    if mode is DivisionMode.TRUNCATE:
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a // b
