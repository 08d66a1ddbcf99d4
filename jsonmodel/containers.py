"""JSON containers (objects and arrays) and generic equality and copying."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Mapping
from typing import Union

from jsonmodel.scalars import CircularReferenceError, JsonType, JsonValue

KeyLike = Union[str, bytes, bytearray]


def _normalize_key(key: KeyLike, check: bool) -> str:
    if key is None:
        raise TypeError("object key must not be None")
    if isinstance(key, (bytes, bytearray)):
        try:
            return bytes(key).decode("utf-8", "strict" if check else "surrogateescape")
        except UnicodeDecodeError as exc:
            raise ValueError(f"invalid UTF-8 object key: {bytes(key)!r}") from exc
    if isinstance(key, str):
        if check:
            try:
                key.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise ValueError(f"invalid UTF-8 object key: {key!r}") from exc
        return key
    raise TypeError(f"object key must be str or bytes, got {type(key).__name__}")


def _require_value(container: JsonValue, value: object) -> JsonValue:
    if not isinstance(value, JsonValue):
        raise TypeError(f"expected a JSON value, got {type(value).__name__}")
    if value is container:
        raise ValueError("a container cannot contain itself")
    return value


def _deep(value: JsonValue, parents: set[int]) -> JsonValue:
    if isinstance(value, (JsonObject, JsonArray)):
        return value._deep_copy(parents)
    return value.deep_copy()


class JsonObject(JsonValue):
    """A JSON object: string keys mapped to JSON values, in insertion order."""

    __slots__ = ("_items",)
    type = JsonType.OBJECT

    def __init__(self, items: Mapping[KeyLike, JsonValue] | Iterable[tuple[KeyLike, JsonValue]] | None = None) -> None:
        self._items: dict[str, JsonValue] = {}
        if items is None:
            return
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.set(key, value)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, key: KeyLike) -> JsonValue:
        return self._items[_normalize_key(key, check=False)]

    def __setitem__(self, key: KeyLike, value: JsonValue) -> None:
        self.set(key, value)

    def __delitem__(self, key: KeyLike) -> None:
        del self._items[_normalize_key(key, check=False)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, bytes, bytearray)):
            return False
        try:
            return _normalize_key(key, check=False) in self._items
        except ValueError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonObject):
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(equal(value, other._items.get(key)) for key, value in self._items.items())

    __hash__ = None  # type: ignore[assignment]

    def get(self, key: KeyLike, default: JsonValue | None = None) -> JsonValue | None:
        """Return the value for a key, or the default if it is absent."""
        return self._items.get(_normalize_key(key, check=False), default)

    def set(self, key: KeyLike, value: JsonValue) -> None:
        """Set a key, rejecting keys that are not valid UTF-8."""
        name = _normalize_key(key, check=True)
        self._items[name] = _require_value(self, value)

    def set_nocheck(self, key: KeyLike, value: JsonValue) -> None:
        """Set a key without validating its encoding."""
        name = _normalize_key(key, check=False)
        self._items[name] = _require_value(self, value)

    def items(self) -> Iterator[tuple[str, JsonValue]]:
        """Yield (key, value) pairs in insertion order."""
        yield from list(self._items.items())

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    @staticmethod
    def _require_object(other: object) -> JsonObject:
        if not isinstance(other, JsonObject):
            raise TypeError(f"expected a JSON object, got {type(other).__name__}")
        return other

    def update(self, other: JsonObject) -> None:
        """Copy every item of another object into this one."""
        for key, value in self._require_object(other).items():
            self.set_nocheck(key, value)

    def update_existing(self, other: JsonObject) -> None:
        """Copy only the items whose keys are already present."""
        for key, value in self._require_object(other).items():
            if key in self._items:
                self.set_nocheck(key, value)

    def update_missing(self, other: JsonObject) -> None:
        """Copy only the items whose keys are not yet present."""
        for key, value in self._require_object(other).items():
            if key not in self._items:
                self.set_nocheck(key, value)

    def update_recursive(self, other: JsonObject) -> None:
        """Merge another object in, descending into objects present in both.

        Raises CircularReferenceError if the other object contains itself.
        """
        self._update_recursive(self._require_object(other), set())

    def _update_recursive(self, other: JsonObject, parents: set[int]) -> None:
        marker = id(other)
        if marker in parents:
            raise CircularReferenceError("circular reference in object update")
        parents.add(marker)
        try:
            for key, value in other.items():
                current = self._items.get(key)
                if isinstance(current, JsonObject) and isinstance(value, JsonObject):
                    current._update_recursive(value, parents)
                else:
                    self.set_nocheck(key, value)
        finally:
            parents.discard(marker)

    def copy(self) -> JsonObject:
        """Return a new object holding the same values."""
        result = JsonObject()
        result._items = dict(self._items)
        return result

    def deep_copy(self) -> JsonObject:
        """Return a fully independent copy; raises CircularReferenceError on cycles."""
        return self._deep_copy(set())

    def _deep_copy(self, parents: set[int]) -> JsonObject:
        marker = id(self)
        if marker in parents:
            raise CircularReferenceError("cannot deep copy a circular reference")
        parents.add(marker)
        try:
            result = JsonObject()
            for key, value in self._items.items():
                result._items[key] = _deep(value, parents)
            return result
        finally:
            parents.discard(marker)

    def __repr__(self) -> str:
        return f"JsonObject({self._items!r})"


class JsonArray(JsonValue):
    """A JSON array of values."""

    __slots__ = ("_items",)
    type = JsonType.ARRAY

    def __init__(self, items: Iterable[JsonValue] | None = None) -> None:
        self._items: list[JsonValue] = []
        for value in items or ():
            self.append(value)

    def _index(self, index: int, upper: int) -> int:
        position = operator.index(index)
        if not 0 <= position < upper:
            raise IndexError(f"array index {position} out of range")
        return position

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> JsonValue:
        return self._items[self._index(index, len(self._items))]

    def __setitem__(self, index: int, value: JsonValue) -> None:
        checked = _require_value(self, value)
        self._items[self._index(index, len(self._items))] = checked

    def __iter__(self) -> Iterator[JsonValue]:
        return iter(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonArray):
            return NotImplemented
        if len(self._items) != len(other._items):
            return False
        return all(equal(a, b) for a, b in zip(self._items, other._items))

    __hash__ = None  # type: ignore[assignment]

    def append(self, value: JsonValue) -> None:
        """Add a value at the end."""
        self._items.append(_require_value(self, value))

    def insert(self, index: int, value: JsonValue) -> None:
        """Insert a value before the given position; the position may equal the length."""
        checked = _require_value(self, value)
        position = self._index(index, len(self._items) + 1)
        self._items.insert(position, checked)

    def remove(self, index: int) -> None:
        """Remove the value at the given position."""
        del self._items[self._index(index, len(self._items))]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def extend(self, other: JsonArray) -> None:
        """Append every value of another array."""
        if not isinstance(other, JsonArray):
            raise TypeError(f"expected a JSON array, got {type(other).__name__}")
        self._items.extend(list(other._items))

    def copy(self) -> JsonArray:
        """Return a new array holding the same values."""
        result = JsonArray()
        result._items = list(self._items)
        return result

    def deep_copy(self) -> JsonArray:
        """Return a fully independent copy; raises CircularReferenceError on cycles."""
        return self._deep_copy(set())

    def _deep_copy(self, parents: set[int]) -> JsonArray:
        marker = id(self)
        if marker in parents:
            raise CircularReferenceError("cannot deep copy a circular reference")
        parents.add(marker)
        try:
            result = JsonArray()
            result._items = [_deep(value, parents) for value in self._items]
            return result
        finally:
            parents.discard(marker)

    def __repr__(self) -> str:
        return f"JsonArray({self._items!r})"


def equal(first: JsonValue | None, second: JsonValue | None) -> bool:
    """Return True if two JSON values are equal; None never equals anything."""
    if first is None or second is None:
        return False
    if first.type != second.type:
        return False
    if first is second:
        return True
    return bool(first == second)


def copy(value: JsonValue | None) -> JsonValue | None:
    """Return a shallow copy of a value, or None for None."""
    if value is None:
        return None
    return value.copy()


def deep_copy(value: JsonValue | None) -> JsonValue | None:
    """Return a deep copy of a value, or None for None."""
    if value is None:
        return None
    return value.deep_copy()