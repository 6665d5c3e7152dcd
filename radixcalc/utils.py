from typing import TypeVar, Generic, Iterator, Iterable, Self, Optional


T = TypeVar("T")


class Peekable(Generic[T], Iterator[T]):
    def __init__(self, iterable: Iterable[T]):
        self._items = list(iterable)
        self._index = 0

    def __iter__(self) -> Self:
        return self

    def peek(self) -> T:
        if self._index >= len(self._items):
            raise StopIteration
        return self._items[self._index]

    def __next__(self) -> T:
        item = self.peek()
        self._index += 1
        return item


def signed_range(bits: int) -> tuple[int, int]:
    limit = 1 << (bits - 1)
    return -limit, limit - 1


SUPPORTED_BITS = (8, 16, 32, 64)


def check_bits(bits: Optional[int]) -> Optional[int]:
    if bits is not None and bits not in SUPPORTED_BITS:
        raise ValueError(f"unsupported width {bits}, expected one of {SUPPORTED_BITS}")
    return bits
