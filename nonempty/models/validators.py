from typing import Sequence, TypeVar

from nonempty.constants import EMPTY_LIST_ERROR_MESSAGE

T = TypeVar("T")


def non_empty_list(seq: Sequence[T]) -> Sequence[T]:
    if len(seq) == 0:
        raise ValueError(EMPTY_LIST_ERROR_MESSAGE)
    return seq


def at_least_size(n: int):
    def size_check(seq: Sequence[T]) -> Sequence[T]:
        if len(seq) < n:
            raise ValueError(f"list must have at least {n} elements.")
        return seq

    return size_check
