from collections import deque
from typing import List, Tuple

from bigint.groups import GROUP_BITS, GROUP_MAX, GROUP_RADIX, Groups, make_groups, shrink

DECIMAL_CHUNK_DIGITS = 9
DECIMAL_RADIX = 10 ** DECIMAL_CHUNK_DIGITS


def mul_add(digits: Groups, factor: int, addend: int, radix: int) -> Groups:
    """
    Multiplies a little-endian sequence of base-`radix` digits by a small
    factor and adds `addend`, in place.

    Both base conversions are folds of this step: decimal chunks into
    binary groups (factor 10^9, radix 2^32) and binary groups into decimal
    groups (factor 2^32, radix 10^9).
    """
    carry = addend
    res = deque()
    for d in digits:
        carry, low = divmod(d * factor + carry, radix)
        res.append(low)
    while carry:
        carry, low = divmod(carry, radix)
        res.append(low)
    digits.clear()
    digits.extend(res)
    return digits


def groups_from_unsigned(value: int) -> Groups:
    if value < 0:
        raise ValueError(f"Expected an unsigned value, got {value}")
    res = deque()
    while value > 0:
        res.append(value & GROUP_MAX)
        value >>= GROUP_BITS
    return make_groups(res)


def groups_from_signed(value: int) -> Tuple[bool, Groups]:
    return value < 0, groups_from_unsigned(abs(value))


def groups_to_unsigned(groups: Groups) -> int:
    res = 0
    for g in reversed(groups):
        res = (res << GROUP_BITS) | g
    return res


def split_decimal_chunks(digits: str) -> List[int]:
    """9-digit chunks, least significant first; the last one may be shorter."""
    chunks = []
    end = len(digits)
    while end > 0:
        start = max(end - DECIMAL_CHUNK_DIGITS, 0)
        chunks.append(int(digits[start:end]))
        end = start
    return chunks


def groups_from_decimal(digits: str) -> Groups:
    res = make_groups()
    for chunk in reversed(split_decimal_chunks(digits)):
        mul_add(res, DECIMAL_RADIX, chunk, GROUP_RADIX)
    return shrink(res)


def groups_to_decimal(groups: Groups) -> Groups:
    res = make_groups()
    for g in reversed(groups):
        mul_add(res, GROUP_RADIX, g, DECIMAL_RADIX)
    return shrink(res)


def format_decimal(negative: bool, groups: Groups) -> str:
    decimal = groups_to_decimal(groups)
    parts = ['-'] if negative else []
    rest = reversed(decimal)
    parts.append(str(next(rest)))
    parts.extend(str(d).zfill(DECIMAL_CHUNK_DIGITS) for d in rest)
    return ''.join(parts)
