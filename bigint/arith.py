from collections import deque
from enum import Enum
from itertools import zip_longest
from typing import Tuple

from bigint.groups import GROUP_BITS, GROUP_MAX, Groups, is_zero, make_groups, shrink


class CarryOp(Enum):
    """How the right operand enters the carry chain: (carry_in, complement mask)."""
    ADD = (0, 0)
    COMPLEMENT_ADD = (1, GROUP_MAX)

    @property
    def carry_in(self) -> int:
        return self.value[0]

    @property
    def mask(self) -> int:
        return self.value[1]


def propagate(lhs: Groups, rhs: Groups, op: CarryOp) -> Tuple[Groups, int]:
    # The shorter side is zero-extended before masking, so a complemented
    # operand is extended with all-ones.
    res = deque()
    carry = op.carry_in
    for left, right in zip_longest(lhs, rhs, fillvalue=0):
        total = left + (right ^ op.mask) + carry
        res.append(total & GROUP_MAX)
        carry = total >> GROUP_BITS
    return res, carry


def twos_complement(groups: Groups) -> Groups:
    """
    Complements every group and adds one.

    A carry out of the top group is kept as an extra group, so the
    complement of an all-zero buffer of n groups is 2^(32n).
    """
    res, carry = propagate(make_groups(), groups, CarryOp.COMPLEMENT_ADD)
    if carry:
        res.append(carry)
    return res


def add(a_negative: bool, a: Groups, b_negative: bool, b: Groups) -> Tuple[bool, Groups]:
    if a_negative == b_negative:
        res, carry = propagate(a, b, CarryOp.ADD)
        if carry:
            res.append(carry)
        negative = a_negative
    else:
        positive, negated = (b, a) if a_negative else (a, b)
        res, carry = propagate(positive, negated, CarryOp.COMPLEMENT_ADD)
        # No carry out means |negated| > |positive|.
        negative = not carry
        if negative:
            res = twos_complement(res)
    shrink(res)
    return negative and not is_zero(res), res


def negate(negative: bool, groups: Groups) -> bool:
    return not negative and not is_zero(groups)


def subtract(a_negative: bool, a: Groups, b_negative: bool, b: Groups) -> Tuple[bool, Groups]:
    return add(a_negative, a, negate(b_negative, b), b)


def multiply(a_negative: bool, a: Groups, b_negative: bool, b: Groups) -> Tuple[bool, Groups]:
    buffer = [0] * (len(a) + len(b) + 1)
    for i, right in enumerate(b):
        if right == 0:
            continue
        carry = 0
        for j, left in enumerate(a):
            total = buffer[i + j] + left * right + carry
            buffer[i + j] = total & GROUP_MAX
            carry = total >> GROUP_BITS
        k = i + len(a)
        while carry:
            total = buffer[k] + carry
            buffer[k] = total & GROUP_MAX
            carry = total >> GROUP_BITS
            k += 1
    res = shrink(make_groups(buffer))
    return (a_negative != b_negative) and not is_zero(res), res
