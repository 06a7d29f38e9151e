# strawcore

A small collection of general-purpose building blocks for Python programs.

## What is inside

- `strawcore.optional`
  - `Optional` holds one value or nothing. It offers `has_value`, `value`, `unwrap` (which takes the value out), `unwrap_or`, `value_or`, `emplace`, `reset`, `map`, `and_then`, `flatten` and `cast`.
  - Passing `None` or a null `NullValue` gives an empty optional.
  - In comparisons an empty optional sorts before any value.
  - `value()` and `unwrap()` on an empty optional raise `EmptyOptionalError`.
  - `NullValue`, `non_zero` and `non_max` are integers that reserve one value to mean "no value".
  - `NullType` is a stateless type whose instances are all equal.
- `strawcore.variant`
  - `Variant` holds a value tagged with one of a fixed tuple of distinct types.
  - It offers `is_type`, `take` (an `Optional`), `ref`, `visit` and `union`.
  - It also has `types`, `index` and `value` properties.
- `strawcore.result`
  - `Result` holds either a success value or an error. Build one with `Result.ok(...)` or `Result.err(...)`.
  - It offers `is_ok`, `is_err`, `value`, `unwrap`, `unwrap_or`, `error`, `into_optional` and `map`.
  - Reading the wrong side raises `ResultError`.
- `strawcore.typeset`
  - `TypeSet` is an immutable, insertion-ordered set of types.
  - It offers `into`, `contains`, `equals` (order-insensitive), `head`, `tail`, `union` and `intersection`.
- `strawcore.overload`
  - `Overload` combines several functions into one callable.
  - A call goes to the function whose signature accepts the arguments and whose annotated parameter types they satisfy.
  - When several fit, the one with the most exact type matches wins, and after that the earliest given.
  - It raises `TypeError` when none fits.
- `strawcore.utf`
  - `decode_codepoint` and `encode_codepoint` work on a single code point and return an `Optional`.
  - `to_utf32` decodes UTF-8 bytes into a `str` of code points.
  - `to_utf8` encodes characters or code points into UTF-8 bytes, with a placeholder for values that cannot be encoded.
- `strawcore.encoding`
  - `Utf8Encoding` and `Utf32Encoding` (little-endian) read, replace and step between code points inside encoded byte buffers.
  - `EncodedString` is a mutable string stored in a chosen encoding. It can be transcoded from another `EncodedString`.
- `strawcore.strings`
  - `to_uppercase` and `to_lowercase` change ASCII letters only.
- `strawcore.idpool`
  - `IDPool` hands out integer ids counting up from zero and reuses the smallest freed id first.
- `strawcore.date`
  - `Date` uses zero-based months (0–11) and days, and is checked on construction.
  - `DateInterval` has `of_days`, `of_months` and `of_years`.
  - Adding or subtracting an interval carries overflow into months and years.
- `strawcore.lazy`
  - `Lazy` computes its value once, on the first `get`.
  - `DynamicValue` caches its value until `invalidate` is called.
- `strawcore.storage`
  - `Delayed` is a slot whose value is built later.
  - `Uninitialised` is a slot that must be constructed exactly once before each destruct. Misuse raises `StorageError`.
  - `CopyOnWrite` shares a value until `get_mutable` gives the holder its own deep copy.
- `strawcore.reflexive`
  - `EnableReflexivePointer` is a base class whose instances hand out `ReflexivePointer`s.
  - Those pointers become invalid when the target is released or garbage-collected.
  - They follow the target when it calls `transfer_to`.
  - `deref` on a dangling pointer raises `DanglingPointerError`.
- `strawcore.repeating_task`
  - `RepeatingTask` runs an optional startup callable once, then a function repeatedly, on a background thread until `stop`.
  - It starts on construction.
  - Either callable may take the task as its one argument.
  - An exception from the worker is raised again by `stop`.
  - It also works as a context manager.
- `strawcore.image`
  - `Image` is a grid of pixels with 1 to 4 eight-bit channels.
  - It offers `read`, `write`, `blit`, `to_bytes`, `from_bytes` and `from_file`.
  - `save` writes `.png`, `.bmp` or `.jpg` files, with a JPEG quality setting.
  - Failures raise `ImageError`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from strawcore.optional import Optional
from strawcore.result import Result
from strawcore.utf import to_utf32, to_utf8
from strawcore.idpool import IDPool
from strawcore.date import Date, DateInterval

opt = Optional(5)
assert opt.map(lambda x: x * 2).unwrap_or(0) == 10
assert Optional().unwrap_or(7) == 7

res = Result.ok(3)
assert res.is_ok() and res.map(str).unwrap() == "3"

text = to_utf32("兎田ぺこら".encode("utf-8"))
assert to_utf8(text) == "兎田ぺこら".encode("utf-8")

pool = IDPool()
first, second = pool.allocate(), pool.allocate()
pool.free(first)
assert pool.allocate() == first

# 31 December 2023 plus one day is 1 January 2024 (months and days count from zero).
assert Date(2023, 11, 30) + DateInterval.of_days(1) == Date(2024, 0, 0)
```

## What it does not do

This is a library only; it installs no command-line tool.

`Image` handles eight-bit channels only; there are no floating-point pixel formats.