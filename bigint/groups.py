from collections import deque
from typing import Deque, Iterable

GROUP_BITS = 32
GROUP_RADIX = 1 << GROUP_BITS
GROUP_MAX = GROUP_RADIX - 1

Groups = Deque[int]


def make_groups(values: Iterable[int] = (0,)) -> Groups:
    res = deque(values)
    if not res:
        res.append(0)
    return res


def shrink(groups: Groups, filler: int = 0) -> Groups:
    """Drops redundant most significant groups, keeping at least one."""
    while len(groups) > 1 and groups[-1] == filler:
        groups.pop()
    return groups


def is_zero(groups: Groups) -> bool:
    return len(groups) == 1 and groups[0] == 0


def dump_groups(groups: Groups) -> str:
    return ' '.join(f"{g:08x}" for g in groups)
