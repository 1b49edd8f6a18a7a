from romanparsec.Calc import Calculator
from romanparsec.Char import char
from romanparsec.Prim import many, run_parser


class TimeMany:
    def setup(self):
        self.parser = many(char("M"))
        self.small = "M" * 1000
        self.medium = "M" * 10000
        self.large = "M" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeEvaluate:
    def setup(self):
        self.calc = Calculator()
        self.numeral = "M" * 10000 + "CMXCIX"
        self.sum = "+".join(["MCMXCIV"] * 2000)
        self.nested = "(" * 150 + "I" + ")" * 150

    def time_long_numeral(self):
        self.calc.evaluate(self.numeral)

    def time_long_sum(self):
        self.calc.evaluate(self.sum)

    def time_nested(self):
        self.calc.evaluate(self.nested)
