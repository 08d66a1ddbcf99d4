"""Scalar JSON values: strings, integers, reals, booleans and null."""

from __future__ import annotations

import enum
import math
from typing import Union

from jsonmodel.utf import utf8_check_string

TextLike = Union[str, bytes, bytearray, memoryview]


class JsonType(enum.Enum):
    """The kind of a JSON value."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    INTEGER = "integer"
    REAL = "real"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"


class CircularReferenceError(ValueError):
    """Raised when a container is found to contain itself."""


class JsonValue:
    """Base class of every JSON value."""

    __slots__ = ()
    type: JsonType

    def copy(self) -> JsonValue:
        """Return a shallow copy; immutable values return themselves."""
        return self

    def deep_copy(self) -> JsonValue:
        """Return a deep copy; for scalars this is the same as a shallow copy."""
        return self.copy()


def _to_bytes(value: TextLike) -> bytes:
    if value is None:
        raise TypeError("string value must not be None")
    if isinstance(value, str):
        return value.encode("utf-8", "surrogatepass")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"expected str or bytes, got {type(value).__name__}")


def _checked_bytes(value: TextLike) -> bytes:
    data = _to_bytes(value)
    if not utf8_check_string(data):
        raise ValueError(f"invalid UTF-8 string: {data!r}")
    return data


class JsonString(JsonValue):
    """A JSON string, held as bytes that may contain NUL characters."""

    __slots__ = ("_data",)
    type = JsonType.STRING

    def __init__(self, value: TextLike, check: bool = True) -> None:
        self._data = _checked_bytes(value) if check else _to_bytes(value)

    @property
    def data(self) -> bytes:
        """The raw bytes of the string."""
        return self._data

    @property
    def value(self) -> str:
        """The string as text; bytes that are not UTF-8 become surrogate escapes."""
        return self._data.decode("utf-8", "surrogateescape")

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonString):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # type: ignore[assignment]

    def set(self, value: TextLike) -> None:
        """Replace the contents, rejecting invalid UTF-8 with ValueError."""
        self._data = _checked_bytes(value)

    def set_nocheck(self, value: TextLike) -> None:
        """Replace the contents without validating the encoding."""
        self._data = _to_bytes(value)

    def copy(self) -> JsonString:
        return JsonString(self._data, check=False)

    def __repr__(self) -> str:
        return f"JsonString({self.value!r})"


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


class JsonInteger(JsonValue):
    """A JSON integer."""

    __slots__ = ("_value",)
    type = JsonType.INTEGER

    def __init__(self, value: int) -> None:
        self._value = _require_int(value)

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = _require_int(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonInteger):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> JsonInteger:
        return JsonInteger(self._value)

    def __repr__(self) -> str:
        return f"JsonInteger({self._value!r})"


def _require_finite(value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a real number, got {type(value).__name__}")
    result = float(value)
    if math.isnan(result) or math.isinf(result):
        raise ValueError(f"real value must be finite: {result!r}")
    return result


class JsonReal(JsonValue):
    """A JSON real number; NaN and infinities are rejected."""

    __slots__ = ("_value",)
    type = JsonType.REAL

    def __init__(self, value: float) -> None:
        self._value = _require_finite(value)

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, value: float) -> None:
        self._value = _require_finite(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JsonReal):
            return NotImplemented
        return self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> JsonReal:
        return JsonReal(self._value)

    def __repr__(self) -> str:
        return f"JsonReal({self._value!r})"


class JsonBoolean(JsonValue):
    """JSON true or false; there is exactly one instance of each."""

    __slots__ = ("_value",)

    def __new__(cls, value: object = False) -> JsonBoolean:
        return _TRUE if value else _FALSE

    @property
    def value(self) -> bool:
        return self._value

    @property
    def type(self) -> JsonType:  # type: ignore[override]
        return JsonType.TRUE if self._value else JsonType.FALSE

    def __bool__(self) -> bool:
        return self._value

    def __repr__(self) -> str:
        return "true()" if self._value else "false()"


def _make_boolean(flag: bool) -> JsonBoolean:
    instance = object.__new__(JsonBoolean)
    instance._value = flag
    return instance


_TRUE = _make_boolean(True)
_FALSE = _make_boolean(False)


class JsonNull(JsonValue):
    """JSON null; there is exactly one instance."""

    __slots__ = ()
    type = JsonType.NULL
    _instance: JsonNull | None = None

    def __new__(cls) -> JsonNull:
        if cls._instance is None:
            cls._instance = object.__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "null()"


_NULL = JsonNull()


def true() -> JsonBoolean:
    """Return the JSON true value."""
    return _TRUE


def false() -> JsonBoolean:
    """Return the JSON false value."""
    return _FALSE


def null() -> JsonNull:
    """Return the JSON null value."""
    return _NULL


def boolean(value: object) -> JsonBoolean:
    """Return true() for a truthy value, false() otherwise."""
    return _TRUE if value else _FALSE


def number_value(value: JsonValue | None) -> float:
    """Return an integer or real as a float, and 0.0 for anything else."""
    if isinstance(value, JsonInteger):
        return float(value.value)
    if isinstance(value, JsonReal):
        return value.value
    return 0.0


def sprintf(fmt: str | bytes, *args: object) -> JsonString:
    """Build a JSON string with %-formatting; raises ValueError if the result is not UTF-8."""
    if fmt is None:
        raise TypeError("format must not be None")
    return JsonString(fmt % args)