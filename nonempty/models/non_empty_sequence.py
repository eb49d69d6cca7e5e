import functools
import logging
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
    Union,
)

from pydantic import BaseModel, model_validator

from nonempty.constants import TAKE_KEEPS_HEAD_WARNING_KEY
from nonempty.logging import WARN_ONCE_KEY, global_warn_once_filter
from nonempty.models.validators import at_least_size, non_empty_list
from nonempty.util import adjacent_pairs, clamp, find_idx, split_at

log = logging.getLogger(__name__)
log.addFilter(global_warn_once_filter)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class NonEmptySequence(BaseModel, Generic[T], frozen=True):
    """An ordered, immutable sequence that always holds at least one element.

    The sequence is a ``head`` followed by a possibly empty tuple ``rest``.
    Operations that cannot empty the sequence return a new
    ``NonEmptySequence``; operations that can (``filter``, ``tail``, ...)
    return a plain ``list``. ``None`` signals absence (``from_ordinary``,
    ``get_at``).

    Note that ``take`` and ``drop`` are not complementary: ``take`` keeps the
    head even for ``n <= 0`` while ``drop`` removes it, so
    ``seq.take(n).append(seq.drop(n))`` is in general not ``seq``.
    """

    head: T
    rest: Tuple[T, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def split_plain_sequence(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            items = non_empty_list(data)
            return {"head": items[0], "rest": tuple(items[1:])}
        return data

    # ---- construction ----

    @classmethod
    def singleton(cls, x: T) -> "NonEmptySequence[T]":
        return cls(head=x, rest=())

    @classmethod
    def create(cls, head: T, rest: Iterable[T] = ()) -> "NonEmptySequence[T]":
        return cls(head=head, rest=tuple(rest))

    @classmethod
    def repeat(cls, n: int, x: T) -> "NonEmptySequence[T]":
        """``max(n, 1)`` copies of ``x``."""
        if n < 1:
            log.debug(f"repeat called with n={n}, producing a single element.")
        return cls(head=x, rest=(x,) * max(n - 1, 0))

    @classmethod
    def range(cls, a: int, b: int) -> "NonEmptySequence[int]":
        """Integers from ``a`` to ``b`` inclusive; just ``a`` when ``b < a``."""
        return cls(head=a, rest=tuple(range(a + 1, b + 1)))

    @classmethod
    def from_ordinary(cls, seq: Iterable[T]) -> Optional["NonEmptySequence[T]"]:
        items = list(seq)
        if len(items) == 0:
            return None
        return cls(head=items[0], rest=tuple(items[1:]))

    @classmethod
    def with_default(cls, default: T, seq: Iterable[T]) -> "NonEmptySequence[T]":
        result = cls.from_ordinary(seq)
        if result is None:
            return cls.singleton(default)
        return result

    @classmethod
    def with_example(
        cls, example: "NonEmptySequence[T]", seq: Iterable[T]
    ) -> "NonEmptySequence[T]":
        result = cls.from_ordinary(seq)
        if result is None:
            return example
        return result

    def cons(self, x: T) -> "NonEmptySequence[T]":
        return _assemble(x, (self.head,) + self.rest)

    def generate(self, f: Callable[[T, T], U]) -> List[U]:
        """Apply ``f`` to every pair of adjacent elements.

        Empty for a single-element sequence."""
        return [f(a, b) for a, b in adjacent_pairs(self)]

    # ---- transform / fold ----

    def map(self, f: Callable[[T], U]) -> "NonEmptySequence[U]":
        return _assemble(f(self.head), [f(x) for x in self.rest])

    def indexed_map(self, f: Callable[[int, T], U]) -> "NonEmptySequence[U]":
        return _assemble(
            f(0, self.head), [f(i, x) for i, x in enumerate(self.rest, start=1)]
        )

    @classmethod
    def map_n(
        cls, f: Callable[..., U], *sequences: "NonEmptySequence[Any]"
    ) -> "NonEmptySequence[U]":
        """Zip the sequences positionally, truncating to the shortest one."""
        at_least_size(1)(sequences)
        heads = [s.head for s in sequences]
        rests = zip(*(s.rest for s in sequences))
        return _assemble(f(*heads), [f(*xs) for xs in rests])

    @classmethod
    def map2(
        cls,
        f: Callable[[T, U], V],
        a: "NonEmptySequence[T]",
        b: "NonEmptySequence[U]",
    ) -> "NonEmptySequence[V]":
        return cls.map_n(f, a, b)

    @classmethod
    def map3(cls, f: Callable[..., V], a, b, c) -> "NonEmptySequence[V]":
        return cls.map_n(f, a, b, c)

    @classmethod
    def map4(cls, f: Callable[..., V], a, b, c, d) -> "NonEmptySequence[V]":
        return cls.map_n(f, a, b, c, d)

    @classmethod
    def map5(cls, f: Callable[..., V], a, b, c, d, e) -> "NonEmptySequence[V]":
        return cls.map_n(f, a, b, c, d, e)

    def foldl(self, f: Callable[[T, U], U], seed: U) -> U:
        """Left fold from ``seed``, head first. ``f`` gets (element, accumulator)."""
        acc = seed
        for x in self:
            acc = f(x, acc)
        return acc

    def foldr(self, f: Callable[[T, U], U], seed: U) -> U:
        """Right fold over ``rest`` from ``seed``; the head is folded in last."""
        acc = seed
        for x in reversed(self.rest):
            acc = f(x, acc)
        return f(self.head, acc)

    def reduce(self, f: Callable[[T, T], T]) -> T:
        """Left fold seeded with the head. ``f`` gets (element, accumulator)."""
        return functools.reduce(lambda acc, x: f(x, acc), self.rest, self.head)

    # ---- filtering ----

    def filter(self, pred: Callable[[T], bool]) -> List[T]:
        return [x for x in self if pred(x)]

    def filter_map(self, f: Callable[[T], Optional[U]]) -> List[U]:
        kept = []
        for x in self:
            result = f(x)
            if result is not None:
                kept.append(result)
        return kept

    # ---- combine ----

    def append(self, other: "NonEmptySequence[T]") -> "NonEmptySequence[T]":
        return _assemble(self.head, self.rest + (other.head,) + other.rest)

    @classmethod
    def concat(
        cls, sequences: "NonEmptySequence[NonEmptySequence[T]]"
    ) -> "NonEmptySequence[T]":
        first = sequences.head
        rest = list(first.rest)
        for inner in sequences.rest:
            rest.extend(inner)
        return _assemble(first.head, rest)

    def concat_map(
        self, f: Callable[[T], "NonEmptySequence[U]"]
    ) -> "NonEmptySequence[U]":
        return NonEmptySequence.concat(self.map(f))

    def intersperse(self, sep: T) -> "NonEmptySequence[T]":
        rest = []
        for x in self.rest:
            rest.extend((sep, x))
        return _assemble(self.head, rest)

    # ---- sort ----

    def sort(self) -> "NonEmptySequence[T]":
        return self._rebuild(sorted(self))

    def sort_by(self, key: Callable[[T], Any]) -> "NonEmptySequence[T]":
        return self._rebuild(sorted(self, key=key))

    def sort_with(self, cmp: Callable[[T, T], int]) -> "NonEmptySequence[T]":
        """Stable sort with a comparison returning a negative, zero or positive int."""
        return self._rebuild(sorted(self, key=functools.cmp_to_key(cmp)))

    def _rebuild(self, items: Sequence[T]) -> "NonEmptySequence[T]":
        if len(items) == 0:
            return self
        return _assemble(items[0], items[1:])

    # ---- deconstruct ----

    def is_empty(self) -> bool:
        return False

    def tail(self) -> List[T]:
        return list(self.rest)

    def uncons(self) -> Tuple[T, List[T]]:
        return self.head, list(self.rest)

    def to_list(self) -> List[T]:
        return [self.head, *self.rest]

    def last(self) -> T:
        if self.rest:
            return self.rest[-1]
        return self.head

    def replace_head(self, x: T) -> "NonEmptySequence[T]":
        return _assemble(x, self.rest)

    def replace_tail(self, rest: Iterable[T]) -> "NonEmptySequence[T]":
        return _assemble(self.head, rest)

    def pop(self) -> "NonEmptySequence[T]":
        """Drop the head, unless it is the only element."""
        return self.remove_at(0)

    def take(self, n: int) -> "NonEmptySequence[T]":
        """The head plus up to ``n - 1`` further elements.

        The head is kept even when ``n <= 0``."""
        if n <= 0:
            log.warning(
                f"take({n}) keeps the head; take and drop are not complementary "
                "for n <= 0.",
                extra={WARN_ONCE_KEY: TAKE_KEEPS_HEAD_WARNING_KEY},
            )
        return _assemble(self.head, self.rest[: max(n - 1, 0)])

    def drop(self, n: int) -> "NonEmptySequence[T]":
        """Remove up to ``n`` leading elements; the last element always survives."""
        dropped = clamp(n, 0, len(self.rest))
        if dropped == 0:
            return self
        return _assemble(self.rest[dropped - 1], self.rest[dropped:])

    def partition(self, pred: Callable[[T], bool]) -> Tuple[List[T], List[T]]:
        matching, non_matching = [], []
        for x in self:
            if pred(x):
                matching.append(x)
            else:
                non_matching.append(x)
        return matching, non_matching

    def unzip(
        self: "NonEmptySequence[Tuple[U, V]]",
    ) -> Tuple["NonEmptySequence[U]", "NonEmptySequence[V]"]:
        (head_a, head_b), rest = self.head, self.rest
        return (
            _assemble(head_a, [a for a, _ in rest]),
            _assemble(head_b, [b for _, b in rest]),
        )

    def zip(
        self, other: "NonEmptySequence[U]"
    ) -> "NonEmptySequence[Tuple[T, U]]":
        return NonEmptySequence.map2(lambda a, b: (a, b), self, other)

    # ---- utilities ----

    def length(self) -> int:
        return 1 + len(self.rest)

    def reverse(self) -> "NonEmptySequence[T]":
        return self._rebuild(self.to_list()[::-1])

    def member(self, x: Any) -> bool:
        return x == self.head or x in self.rest

    def all(self, pred: Callable[[T], bool]) -> bool:
        return all(pred(x) for x in self)

    def any(self, pred: Callable[[T], bool]) -> bool:
        return any(pred(x) for x in self)

    def minimum(self) -> T:
        return self.reduce(min)

    def maximum(self) -> T:
        return self.reduce(max)

    def sum(self) -> T:
        return self.reduce(lambda x, acc: acc + x)

    def product(self) -> T:
        return self.reduce(lambda x, acc: acc * x)

    def find_index(self, pred: Callable[[T], bool]) -> Optional[int]:
        return find_idx(self.to_list(), pred)

    def dedup(self) -> "NonEmptySequence[T]":
        """Collapse runs of adjacent equal elements."""
        return _assemble(self.head, [b for a, b in adjacent_pairs(self) if a != b])

    def uniq(self) -> "NonEmptySequence[T]":
        """Keep only the first occurrence of every element."""
        seen = [self.head]
        for x in self.rest:
            if x not in seen:
                seen.append(x)
        return _assemble(seen[0], seen[1:])

    # ---- indexed operations ----

    def get_at(self, i: int) -> Optional[T]:
        if i == 0:
            return self.head
        if 0 < i <= len(self.rest):
            return self.rest[i - 1]
        return None

    def update_at(self, i: int, f: Callable[[T], T]) -> "NonEmptySequence[T]":
        """Apply ``f`` to the element at ``i``; ``i <= 0`` targets the head."""
        if i <= 0:
            return _assemble(f(self.head), self.rest)
        if i > len(self.rest):
            log.debug(f"update_at({i}) is out of range, leaving sequence unchanged.")
            return self
        before, after = split_at(self.rest, i - 1)
        return _assemble(self.head, before + (f(after[0]),) + after[1:])

    def remove_at(self, i: int) -> "NonEmptySequence[T]":
        """Remove the element at ``i``; ``i <= 0`` targets the head.

        Removing the only element is refused and returns the sequence unchanged."""
        if i <= 0:
            if not self.rest:
                log.debug("remove_at refused to remove the only element.")
                return self
            return _assemble(self.rest[0], self.rest[1:])
        if i > len(self.rest):
            log.debug(f"remove_at({i}) is out of range, leaving sequence unchanged.")
            return self
        before, after = split_at(self.rest, i - 1)
        return _assemble(self.head, before + after[1:])

    def insert_at(self, i: int, x: T) -> "NonEmptySequence[T]":
        """Insert ``x`` at ``i``. ``i <= 0`` makes it the new head, past the end appends."""
        if i <= 0:
            return self.cons(x)
        position = clamp(i - 1, 0, len(self.rest))
        if position != i - 1:
            log.debug(f"insert_at({i}) is past the end, appending instead.")
        before, after = split_at(self.rest, position)
        return _assemble(self.head, before + (x,) + after)

    # ---- python protocols ----

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        yield self.head
        yield from self.rest

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, x: Any) -> bool:
        return self.member(x)

    def __reversed__(self) -> Iterator[T]:
        return iter(self.reverse())

    def __getitem__(self, index: Union[int, slice]) -> Union[T, List[T]]:
        return self.to_list()[index]

    def __add__(self, other: Any) -> "NonEmptySequence[T]":
        if not isinstance(other, NonEmptySequence):
            return NotImplemented
        return self.append(other)


def _assemble(head: Any, rest: Iterable[Any]) -> NonEmptySequence:
    return NonEmptySequence.model_construct(head=head, rest=tuple(rest))
