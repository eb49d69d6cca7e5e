from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

T = TypeVar("T")


def find_idx(s: Sequence[T], predicate: Callable[[T], bool]) -> Optional[int]:
    for i in range(len(s)):
        if predicate(s[i]):
            return i
    return None


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def split_at(items: Sequence[T], index: int) -> tuple:
    """Split into the items before ``index`` and the items from ``index`` on."""
    return tuple(items[:index]), tuple(items[index:])


def adjacent_pairs(items: Iterable[T]) -> List[tuple]:
    materialized = list(items)
    return list(zip(materialized, materialized[1:]))
