import operator
from typing import Union

from pyparsing import OpAssoc, ParseException, ParserElement, Word, infix_notation, nums, one_of

from bigint.grammar import FormatError
from bigint.number import BigInteger

ParserElement.enable_packrat()

BINARY_OPS = {
    '*': operator.mul,
    '+': operator.add,
    '-': operator.sub,
    '<<': operator.lshift,
    '>>': operator.rshift,
}

COMPARISONS = {
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge,
}


class Calculator:
    """Evaluates infix expressions over BigInteger literals."""

    def __init__(self):
        literal = Word(nums)
        literal.set_parse_action(self.make_literal)
        self.expr = infix_notation(literal, [
            (one_of("+ -"), 1, OpAssoc.RIGHT, self.eval_unary),
            ('*', 2, OpAssoc.LEFT, self.eval_binary),
            (one_of("+ -"), 2, OpAssoc.LEFT, self.eval_binary),
            (one_of("<< >>"), 2, OpAssoc.LEFT, self.eval_binary),
            (one_of("== != <= >= < >"), 2, OpAssoc.LEFT, self.eval_comparison),
        ])

    def make_literal(self, tokens):
        return BigInteger.from_string(tokens[0])

    def eval_unary(self, tokens):
        op, operand = tokens[0]
        return -operand if op == '-' else +operand

    def eval_binary(self, tokens):
        items = tokens[0]
        res = items[0]
        for op, operand in zip(items[1::2], items[2::2]):
            res = BINARY_OPS[op](res, operand)
        return res

    def eval_comparison(self, tokens):
        # Chained like Python: a < b < c means a < b and b < c.
        items = tokens[0]
        res = True
        for left, op, right in zip(items[0::2], items[1::2], items[2::2]):
            res = res and COMPARISONS[op](left, right)
        return res

    def evaluate(self, text: str) -> Union[BigInteger, bool]:
        try:
            parsed = self.expr.parse_string(text, parse_all=True)
        except ParseException as e:
            raise FormatError(text, str(e)) from e
        return parsed[0]


def evaluate(text: str) -> Union[BigInteger, bool]:
    """Convenience function to evaluate an expression."""
    return Calculator().evaluate(text)
