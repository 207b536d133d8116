"""
Non-Empty Sequence Module

Provides the Nonempty container used for every line and block sequence in
the parser engine. A Nonempty value always holds at least one item.
Operations that would leave nothing behind return None instead of an empty
sequence.

A Nonempty is a read-only window (start and stop offsets) over a tuple.
Taking a remainder with drop, split_at, span or split_after creates a new
window over the same tuple, so walking through a document costs time
proportional to the lines actually examined, never to the lines left over.
All helpers are loops; none of them recurse.

Usage:
    >>> lines = Nonempty.of("a", "", "b")
    >>> lines.split_after(lambda line: line == "")
    (Nonempty('a', ''), Nonempty('b'))
"""

from typing import (
    Any, Callable, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar, Union
)

from ..exceptions import EmptySequenceError

T = TypeVar("T")
U = TypeVar("U")


class Nonempty(Generic[T]):
    """
    Immutable ordered sequence with at least one item.

    Build one with Nonempty(head, tail), Nonempty.of(*items) or
    Nonempty.from_list(items).

    Attributes:
        head: The first item
        tail: The remaining items as a tuple (copied on access)
    """
    __slots__ = ("_items", "_start", "_stop")

    def __init__(self, head: T, tail: Iterable[T] = ()) -> None:
        items = (head,) + tuple(tail)
        object.__setattr__(self, "_items", items)
        object.__setattr__(self, "_start", 0)
        object.__setattr__(self, "_stop", len(items))

    @classmethod
    def _window(cls, items: Tuple[T, ...], start: int, stop: int) -> "Nonempty[T]":
        # callers guarantee 0 <= start < stop <= len(items)
        view = cls.__new__(cls)
        object.__setattr__(view, "_items", items)
        object.__setattr__(view, "_start", start)
        object.__setattr__(view, "_stop", stop)
        return view

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Nonempty is immutable, cannot set '{name}'")

    def __reduce__(self):
        return (Nonempty.from_list, (self.to_tuple(),))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, *items: T) -> "Nonempty[T]":
        """
        Build a sequence from positional items.

        Raises:
            EmptySequenceError: If no items are given
        """
        if not items:
            raise EmptySequenceError()
        return cls._window(items, 0, len(items))

    @classmethod
    def singleton(cls, item: T) -> "Nonempty[T]":
        return cls._window((item,), 0, 1)

    @classmethod
    def from_list(cls, items: Iterable[T]) -> Optional["Nonempty[T]"]:
        """Build a sequence from any iterable, or return None when it is empty."""
        items = items if isinstance(items, tuple) else tuple(items)
        if not items:
            return None
        return cls._window(items, 0, len(items))

    @staticmethod
    def unfold(
        split_fn: Callable[["Nonempty[T]"], Tuple["Nonempty[T]", Optional["Nonempty[T]"]]],
        seed: "Nonempty[T]"
    ) -> "Nonempty[Nonempty[T]]":
        """
        Repeatedly split a sequence into chunks until nothing remains.

        split_fn must always return a non-empty chunk; the loop stops as soon
        as it reports no remainder.
        """
        chunks: List[Nonempty[T]] = []
        remaining: Optional[Nonempty[T]] = seed
        while remaining is not None:
            chunk, remaining = split_fn(remaining)
            chunks.append(chunk)
        return Nonempty.from_list(chunks)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @property
    def head(self) -> T:
        return self._items[self._start]

    @property
    def tail(self) -> Tuple[T, ...]:
        return self._items[self._start + 1:self._stop]

    @property
    def last(self) -> T:
        return self._items[self._stop - 1]

    def __iter__(self) -> Iterator[T]:
        items = self._items
        for index in range(self._start, self._stop):
            yield items[index]

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, index: Union[int, slice]):
        if isinstance(index, slice):
            return self.to_tuple()[index]

        size = self._stop - self._start
        position = index + size if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"Nonempty index {index} out of range for length {size}")
        return self._items[self._start + position]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nonempty):
            return NotImplemented
        if len(self) != len(other):
            return False
        if self._items is other._items and self._start == other._start:
            return True
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __add__(self, other: "Nonempty[T]") -> "Nonempty[T]":
        if not isinstance(other, Nonempty):
            return NotImplemented
        return Nonempty.from_list(self.to_tuple() + other.to_tuple())

    def __repr__(self) -> str:
        return f"Nonempty({', '.join(repr(item) for item in self)})"

    def to_tuple(self) -> Tuple[T, ...]:
        if self._start == 0 and self._stop == len(self._items):
            return self._items
        return self._items[self._start:self._stop]

    def to_list(self) -> List[T]:
        return list(self)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def cons(self, item: T) -> "Nonempty[T]":
        """Return a new sequence with item placed in front."""
        return Nonempty.from_list((item,) + self.to_tuple())

    def rev(self) -> "Nonempty[T]":
        return Nonempty.from_list(self.to_tuple()[::-1])

    def map(self, fn: Callable[[T], U]) -> "Nonempty[U]":
        return Nonempty.from_list(tuple(fn(item) for item in self))

    def map_head(self, fn: Callable[[T], T]) -> "Nonempty[T]":
        return Nonempty(fn(self.head), self.tail)

    def replace_head(self, item: T) -> "Nonempty[T]":
        return Nonempty(item, self.tail)

    def drop(self, count: int) -> Optional["Nonempty[T]"]:
        """Return the sequence without its first count items, or None if none are left."""
        start = self._start + max(count, 0)
        if start >= self._stop:
            return None
        return Nonempty._window(self._items, start, self._stop)

    # ------------------------------------------------------------------
    # Partitioning
    # ------------------------------------------------------------------

    def split_at(self, index: int) -> Tuple["Nonempty[T]", Optional["Nonempty[T]"]]:
        """
        Split into the first index items and the rest, sharing storage.

        Raises:
            ValueError: If index is less than 1 (the first part would be empty)
        """
        if index < 1:
            raise ValueError(f"split index must be at least 1, got: {index}")

        cut = self._start + index
        if cut >= self._stop:
            return self, None
        return (
            Nonempty._window(self._items, self._start, cut),
            Nonempty._window(self._items, cut, self._stop),
        )

    def span(
        self, predicate: Callable[[T], bool]
    ) -> Optional[Tuple["Nonempty[T]", Optional["Nonempty[T]"]]]:
        """
        Take the longest leading run of items that satisfy predicate.

        Returns None when the head itself fails the predicate. Otherwise
        returns the run and whatever follows it (None if the run covers
        the whole sequence).
        """
        if not predicate(self.head):
            return None

        items, stop = self._items, self._stop
        end = self._start + 1
        while end < stop and predicate(items[end]):
            end += 1

        return self.split_at(end - self._start)

    def split_after(
        self, predicate: Callable[[T], bool]
    ) -> Tuple["Nonempty[T]", Optional["Nonempty[T]"]]:
        """
        Split right after the first item that satisfies predicate.

        The matching item ends the first part. If nothing matches, the whole
        sequence is returned with no remainder.
        """
        for offset, item in enumerate(self):
            if predicate(item):
                return self.split_at(offset + 1)
        return self, None
