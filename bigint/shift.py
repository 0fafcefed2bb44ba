from collections import deque
from typing import Tuple

from bigint.arith import twos_complement
from bigint.groups import GROUP_BITS, GROUP_MAX, Groups, is_zero, make_groups, shrink


def _shift_bits_left(groups: Groups, bits: int) -> Groups:
    res = deque()
    carried_bits = 0
    for g in groups:
        res.append(((g << bits) & GROUP_MAX) | carried_bits)
        carried_bits = g >> (GROUP_BITS - bits)
    if carried_bits:
        res.append(carried_bits)
    return res


def _shift_bits_right(groups: Groups, bits: int, filler: int) -> Groups:
    res = deque()
    carried_bits = (filler << (GROUP_BITS - bits)) & GROUP_MAX
    for g in reversed(groups):
        res.appendleft((g >> bits) | carried_bits)
        carried_bits = (g << (GROUP_BITS - bits)) & GROUP_MAX
    return res


def shift_left(negative: bool, groups: Groups, amount: int) -> Tuple[bool, Groups]:
    if amount < 0:
        return shift_right(negative, groups, -amount)
    if is_zero(groups):
        return False, make_groups()
    words, bits = divmod(amount, GROUP_BITS)
    res = deque(groups)
    # The magnitude is shifted, so a negative value needs no sign extension.
    res.extendleft([0] * words)
    if bits:
        res = _shift_bits_left(res, bits)
    return negative, shrink(res)


def shift_right(negative: bool, groups: Groups, amount: int) -> Tuple[bool, Groups]:
    """
    Arithmetic right shift: the result is floor(value / 2^amount).

    Negative values are shifted as an all-ones extended two's complement
    buffer, so shifting far enough converges to -1 rather than 0.
    """
    if amount < 0:
        return shift_left(negative, groups, -amount)
    words, bits = divmod(amount, GROUP_BITS)
    if words >= len(groups):
        return negative, make_groups([1 if negative else 0])

    if negative:
        res = twos_complement(groups)
        filler = GROUP_MAX
    else:
        res = deque(groups)
        filler = 0
    for _ in range(words):
        res.popleft()
    if bits:
        res = _shift_bits_right(res, bits, filler)
    shrink(res, filler)
    if negative:
        res = twos_complement(res)
    return negative, shrink(res)
