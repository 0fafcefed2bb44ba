from collections import deque
from typing import Optional, Union

from bigint.arith import add, multiply, negate, subtract
from bigint.convert import (
    format_decimal, groups_from_decimal, groups_from_signed, groups_from_unsigned, groups_to_unsigned,
)
from bigint.grammar import parse_decimal
from bigint.groups import Groups, is_zero, shrink
from bigint.shift import shift_left, shift_right


class BigInteger:
    """
    Signed integer of unbounded magnitude.

    Stored as sign-magnitude: `negative` plus 32-bit `groups`, least
    significant first, with no redundant top group and a non-negative zero.
    """

    def __init__(self, value: Union[int, str, 'BigInteger'] = 0):
        if isinstance(value, BigInteger):
            self.negative = value.negative
            self.groups = deque(value.groups)
        elif isinstance(value, str):
            negative, digits = parse_decimal(value)
            self.groups = groups_from_decimal(digits)
            self.negative = negative and not is_zero(self.groups)
        elif isinstance(value, int):
            self.negative, self.groups = groups_from_signed(value)
        else:
            raise TypeError(f"Cannot create BigInteger from {type(value).__name__}")

    @classmethod
    def from_signed(cls, value: int) -> 'BigInteger':
        return cls._from_parts(*groups_from_signed(value))

    @classmethod
    def from_unsigned(cls, value: int) -> 'BigInteger':
        return cls._from_parts(False, groups_from_unsigned(value))

    @classmethod
    def from_string(cls, text: str) -> 'BigInteger':
        return cls(text)

    @classmethod
    def _from_parts(cls, negative: bool, groups: Groups) -> 'BigInteger':
        res = cls.__new__(cls)
        res.groups = shrink(groups)
        res.negative = negative and not is_zero(res.groups)
        return res

    def _assign(self, other: 'BigInteger'):
        self.negative = other.negative
        self.groups = other.groups

    def copy(self) -> 'BigInteger':
        return BigInteger(self)

    def is_zero(self) -> bool:
        return is_zero(self.groups)

    def to_int(self) -> int:
        res = groups_to_unsigned(self.groups)
        return -res if self.negative else res

    def __int__(self):
        return self.to_int()

    def __bool__(self):
        return not self.is_zero()

    def __hash__(self):
        return hash(self.to_int())

    def __neg__(self):
        return BigInteger._from_parts(negate(self.negative, self.groups), deque(self.groups))

    def __pos__(self):
        return self.copy()

    def __abs__(self):
        return BigInteger._from_parts(False, deque(self.groups))

    def __add__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInteger._from_parts(*add(self.negative, self.groups, other.negative, other.groups))

    __radd__ = __add__

    def __sub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInteger._from_parts(*subtract(self.negative, self.groups, other.negative, other.groups))

    def __rsub__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return BigInteger._from_parts(*multiply(self.negative, self.groups, other.negative, other.groups))

    __rmul__ = __mul__

    def __lshift__(self, amount):
        amount = _shift_amount(amount)
        if amount is None:
            return NotImplemented
        return BigInteger._from_parts(*shift_left(self.negative, self.groups, amount))

    def __rshift__(self, amount):
        amount = _shift_amount(amount)
        if amount is None:
            return NotImplemented
        return BigInteger._from_parts(*shift_right(self.negative, self.groups, amount))

    # In-place forms compute the full result before touching the receiver.
    def __iadd__(self, other):
        return self._inplace(self.__add__(other))

    def __isub__(self, other):
        return self._inplace(self.__sub__(other))

    def __imul__(self, other):
        return self._inplace(self.__mul__(other))

    def __ilshift__(self, amount):
        return self._inplace(self.__lshift__(amount))

    def __irshift__(self, amount):
        return self._inplace(self.__rshift__(amount))

    def _inplace(self, res):
        if res is NotImplemented:
            return res
        self._assign(res)
        return self

    def __eq__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.negative != other.negative or len(self.groups) != len(other.groups):
            return False
        return all(a == b for a, b in zip(self.groups, other.groups))

    def __lt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        if self.negative != other.negative:
            return self.negative
        if len(self.groups) != len(other.groups):
            return (len(self.groups) < len(other.groups)) != self.negative
        for a, b in zip(reversed(self.groups), reversed(other.groups)):
            if a != b:
                return (a < b) != self.negative
        return False

    def __le__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self < other or self == other

    def __gt__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other < self

    def __ge__(self, other):
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return not self < other

    def __str__(self):
        return format_decimal(self.negative, self.groups)

    def __repr__(self):
        return f"BigInteger('{self}')"


def _coerce(value) -> Optional[BigInteger]:
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int):
        return BigInteger(value)
    return None


def _shift_amount(amount) -> Optional[int]:
    if isinstance(amount, BigInteger):
        return amount.to_int()
    if isinstance(amount, int):
        return amount
    return None


def parse_integer(text: str) -> BigInteger:
    """Convenience function to parse decimal text."""
    return BigInteger.from_string(text)
