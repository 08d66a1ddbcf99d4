# jsonmodel

`jsonmodel` is a small, typed in-memory model of JSON values. Each JSON
type has its own class. Strings are checked for valid UTF-8 and reals cannot
be NaN or infinite. Containers support shallow and deep copies, structural
equality and several ways of merging objects.

## Installation

```
pip install jsonmodel
```

The package uses only the standard library. To run the tests, install the
`test` extra (`pip install jsonmodel[test]`) and run `pytest`.

## Modules

* `jsonmodel.scalars`: `JsonValue` (the base class), `JsonType`,
  `JsonString`, `JsonInteger`, `JsonReal`, `JsonBoolean`, `JsonNull`,
  `CircularReferenceError`, and the helpers `true`, `false`, `null`,
  `boolean`, `number_value` and `sprintf`.
* `jsonmodel.containers`: `JsonObject`, `JsonArray`, and the functions
  `equal`, `copy` and `deep_copy`.
* `jsonmodel.strconv`: `parse_real` and `format_real`.
* `jsonmodel.utf`: `utf8_encode`, `utf8_check_first`, `utf8_check_full`,
  `utf8_iterate` and `utf8_check_string`.

## Values

```python
from jsonmodel.scalars import JsonString, JsonInteger, JsonReal, true, null, boolean
from jsonmodel.containers import JsonObject, JsonArray

name = JsonString("foo")          # raises ValueError for invalid UTF-8
raw = JsonString(b"qu\xff", check=False)
count = JsonInteger(5)
ratio = JsonReal(100.1)           # ValueError for NaN or infinity

flag = boolean(-123)              # the same object as true()
assert flag is true()

obj = JsonObject()
obj["name"] = name
obj["items"] = JsonArray([count, ratio, null()])
```

`JsonString` keeps its contents as bytes, so it may hold NUL characters.
`len()` gives the length in bytes, `data` gives the bytes and `value` gives
the text. Bytes that are not UTF-8 are turned into surrogate escapes. `set()`
replaces the contents after checking UTF-8, and `set_nocheck()` replaces them
without the check.

`JsonInteger.value` and `JsonReal.value` can be assigned. Assigning a
non-finite float to a real raises `ValueError`, and the old value is kept.

`true()`, `false()` and `null()` always return the same objects. Every value
has a `type` attribute that holds a `JsonType` member.

`JsonObject` keeps its keys in insertion order. `set()` rejects keys that are
not valid UTF-8, and `set_nocheck()` does not check them. `JsonArray` supports
`append`, `insert` (the position may be equal to the length), `remove(index)`,
`clear` and `extend`. An index out of range raises `IndexError`. A container
cannot be added as a member of itself; trying it raises `ValueError`.

## Copying and equality

```python
from jsonmodel.containers import copy, deep_copy, equal

shallow = copy(obj)       # a new container that shares its members
deep = deep_copy(obj)     # containers, strings and numbers are all duplicated
assert equal(obj, deep)
```

Copying `true()`, `false()` or `null()` returns the same object. `copy(None)`
and `deep_copy(None)` return `None`, and `equal` returns `False` when either
argument is `None`. Values of different types are never equal, and an
integer is never equal to a real.

If a value contains itself, `deep_copy` raises `CircularReferenceError`
(from `jsonmodel.scalars`).

## Merging objects

* `JsonObject.update(other)` copies every key from `other`.
* `JsonObject.update_existing(other)` copies only the keys that already exist.
* `JsonObject.update_missing(other)` copies only the keys that do not exist yet.
* `JsonObject.update_recursive(other)` merges nested objects key by key
  instead of replacing them. It raises `CircularReferenceError` if `other`
  contains itself.

Each of these raises `TypeError` if `other` is not a `JsonObject`.

## Helpers

* `sprintf(fmt, *args)` builds a `JsonString` with `%`-formatting. It raises
  `ValueError` if the result is not valid UTF-8.
* `number_value(value)` returns an integer or a real as a float, and `0.0`
  for anything else.
* `parse_real(text)` parses decimal number text. It raises `ValueError` if the
  text is not a number and `OverflowError` if the value is too large.
* `format_real(value, precision=0)` formats a float with the given number of
  significant digits, where 0 means 17. The result always contains a `.` or an
  exponent, so it reads back as a real, and the exponent has no `+` sign and
  no leading zeros.
* `utf8_iterate(buffer)` yields the code points of a UTF-8 byte string and
  raises `ValueError` at the first invalid sequence. `utf8_check_string`
  returns whether a byte string is valid UTF-8.

## What it does not do

The package only models values in memory. It does not parse JSON text into
values or write values out as JSON text, and it has no format-driven packing
or unpacking of values. It also has no command-line tool.