from dataclasses import dataclass, replace
from enum import Enum


class DivisionMode(Enum):
    FLOOR = "floor"        # round toward negative infinity: -V/II == -III
    TRUNCATE = "truncate"  # round toward zero: -V/II == -II


@dataclass(frozen=True)
class RomanDef:
    """
    Defines the symbols and limits of a Roman numeral calculator.
    """
    zero: str = "Z"
    plus: str = "+"
    minus: str = "-"
    times: str = "*"
    divide: str = "/"
    open_paren: str = "("
    close_paren: str = ")"
    division: DivisionMode = DivisionMode.FLOOR
    nested_fast_path: bool = True          # direct rule for ((...(numeral)...))
    max_render_thousands: int = 1_000_000  # longest run of M that render writes
    blanks: str = " \t"                    # stripped from a line before evaluation

    def __post_init__(self) -> None:
        symbols = [self.zero, self.plus, self.minus, self.times, self.divide,
                   self.open_paren, self.close_paren]
        for s in symbols:
            if len(s) != 1:
                raise ValueError(f"calculator symbols must be single characters, got {s!r}")
        if len(set(symbols)) != len(symbols):
            raise ValueError("calculator symbols must be distinct")
        if set(symbols) & set("IVXLCDM"):
            raise ValueError("calculator symbols must not clash with roman digits")
        if self.max_render_thousands < 0:
            raise ValueError("max_render_thousands must not be negative")


# -----------------------------------------------------------
# Standard definitions
# -----------------------------------------------------------

# The calculator as described by its original task: Z is zero, the four
# operators, parentheses, floor division.
standard_def = RomanDef()

# Same symbols, but division rounds toward zero like a native 64-bit divide.
truncating_def = replace(standard_def, division=DivisionMode.TRUNCATE)
