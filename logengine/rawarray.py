"""Arrays of fixed-size byte items with explicit capacity, plus string helpers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_Item = bytes | bytearray | memoryview | None


class ArrayError(Exception):
    """Raised on a bad index, item size or item count."""


def _zero_item_size() -> ArrayError:
    return ArrayError("Item size cannot be zero!")


class RawArray:
    """A growable array whose items are byte strings of one fixed size."""

    def __init__(self, item_size: int = 1) -> None:
        if item_size <= 0:
            raise _zero_item_size()
        self._item_size = item_size
        self._count = 0
        self._capacity = 0
        self._memory = bytearray()

    @property
    def item_size(self) -> int:
        """Size of one item in bytes."""
        return self._item_size

    @property
    def count(self) -> int:
        """Number of items stored."""
        return self._count

    @property
    def capacity(self) -> int:
        """Number of items that fit without growing."""
        return self._capacity

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[bytes]:
        for index in range(self._count):
            yield self.get(index)

    def __getitem__(self, index: int) -> bytes:
        return self.get(index)

    def _check(self, value: int, vmax: int) -> None:
        if not 0 <= value < vmax:
            raise ArrayError(f"Error in HArray: Element with index {value} not found!")

    def _coerce(self, value: _Item) -> bytes:
        if value is None:
            return bytes(self._item_size)
        data = bytes(value)
        if len(data) != self._item_size:
            raise ArrayError(
                f"Item of {len(data)} bytes does not match item size {self._item_size}!"
            )
        return data

    def _span(self, start: int, stop: int) -> slice:
        return slice(start * self._item_size, stop * self._item_size)

    def set_item_size(self, size: int) -> None:
        """Change the item size; the contents are dropped if the size changes."""
        if size <= 0:
            raise _zero_item_size()
        if size != self._item_size:
            self.clear_mem()
        self._item_size = size

    def delete(self, index: int) -> None:
        """Remove the item at ``index``, shifting later items down."""
        self._check(index, self._count)
        self._memory[self._span(index, self._count - 1)] = self._memory[
            self._span(index + 1, self._count)
        ]
        self._count -= 1

    def clear(self) -> None:
        """Remove all items, keeping the allocated capacity."""
        self._count = 0

    def clear_mem(self) -> None:
        """Remove all items and release the allocated capacity."""
        self.clear()
        self._capacity = 0
        self._memory = bytearray()

    def get(self, index: int) -> bytes:
        """Return a copy of the item at ``index``."""
        self._check(index, self._count)
        return bytes(self._memory[self._span(index, index + 1)])

    def add(self, value: _Item) -> int:
        """Append one item (``None`` appends zeros); return its index."""
        return self.insert(self._count, value)

    def add_many(self, values: Iterable[_Item]) -> None:
        """Append several items; at least one is required."""
        items = list(values)
        if not items:
            raise ArrayError("AddMany(): invalid parameter 'Count'=0 !")
        self.insert_many(self._count, items)

    def insert(self, index: int, value: _Item) -> int:
        """Insert one item before ``index`` (``index == count`` appends)."""
        self._check(index, self._count + 1)
        data = self._coerce(value)
        if self._count >= self._capacity:
            self.grow()
        self._memory[self._span(index + 1, self._count + 1)] = self._memory[
            self._span(index, self._count)
        ]
        self._count += 1
        self._memory[self._span(index, index + 1)] = data
        return index

    def insert_many(self, index: int, values: Iterable[_Item]) -> None:
        """Insert several items before ``index``."""
        self._check(index, self._count + 1)
        items = [self._coerce(value) for value in values]
        added = len(items)
        if self._count + added > self._capacity:
            self.grow_to(self._count + added)
        self._memory[self._span(index + added, self._count + added)] = self._memory[
            self._span(index, self._count)
        ]
        self._count += added
        self.update_many(index, items)

    def update(self, index: int, value: _Item) -> None:
        """Replace the item at ``index``; ``None`` fills it with zeros."""
        self._check(index, self._count)
        self._memory[self._span(index, index + 1)] = self._coerce(value)

    def update_many(self, index: int, values: Iterable[_Item]) -> None:
        """Replace consecutive items starting at ``index``."""
        items = [self._coerce(value) for value in values]
        self._check(index + len(items) - 1, self._count)
        self._memory[self._span(index, index + len(items))] = b"".join(items)

    def _delta(self) -> int:
        if self._capacity > 64:
            return self._capacity // 4
        if self._capacity > 8:
            return 16
        return 4

    def grow(self) -> None:
        """Enlarge the capacity by the growth step."""
        self.set_capacity(self._capacity + self._delta())

    def grow_to(self, count: int) -> None:
        """Make room for at least ``count`` items."""
        if count <= self._capacity:
            return
        delta = max(self._delta(), count - self._capacity)
        self.set_capacity(self._capacity + delta)

    def set_capacity(self, value: int) -> None:
        """Set the capacity; items beyond it are dropped."""
        if value > 0:
            size = value * self._item_size
            if size > len(self._memory):
                self._memory.extend(bytes(size - len(self._memory)))
            else:
                del self._memory[size:]
            self._capacity = value
        else:
            self._memory = bytearray()
            self._capacity = 0
        self._count = min(self._count, self._capacity)

    def add_fill_values(self, count: int) -> None:
        """Append ``count`` zero-filled items."""
        if self._count + count > self._capacity:
            self.grow_to(self._count + count)
        self._memory[self._span(self._count, self._count + count)] = bytes(
            count * self._item_size
        )
        self._count += count

    def swap(self, index1: int, index2: int) -> None:
        """Exchange two items."""
        self._check(index1, self._count)
        self._check(index2, self._count)
        if index1 == index2:
            return
        first = self.get(index1)
        self._memory[self._span(index1, index1 + 1)] = self.get(index2)
        self._memory[self._span(index2, index2 + 1)] = first


class FixedStringArray:
    """An array of strings each stored in a zero-padded slot of fixed length."""

    _ENCODING = "utf-8"

    def __init__(self, length: int) -> None:
        self._data = RawArray(length)

    @property
    def length(self) -> int:
        """Slot length in bytes."""
        return self._data.item_size

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        for index in range(len(self._data)):
            yield self.get(index)

    def add_chars(self, value: str | bytes) -> int:
        """Store ``value``, cut to the slot length and zero-padded; return its index."""
        data = value.encode(self._ENCODING) if isinstance(value, str) else bytes(value)
        data = data[: self.length].split(b"\0", 1)[0]
        return self._data.add(data.ljust(self.length, b"\0"))

    def get(self, index: int) -> str:
        """Return the string at ``index`` without its padding."""
        raw = self._data.get(index).split(b"\0", 1)[0]
        return raw.decode(self._ENCODING, errors="replace")

    def reverse(self) -> None:
        """Reverse the order of the strings in place."""
        count = len(self._data)
        for index in range(count // 2):
            self._data.swap(index, count - 1 - index)


def string_to_array(text: str, delim: str = "\n") -> list[str]:
    """Split ``text`` on ``delim``, dropping empty pieces."""
    return [piece for piece in text.split(delim) if piece]


def join_strings(items: Iterable[str]) -> str:
    """Concatenate strings with no separator."""
    return "".join(items)