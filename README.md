# stx

A small collection of utility building blocks:

- `stx.option`: `Option`, which holds either a value or nothing, with combinators
  such as `map`, `and_then`, `filter`, `or_else`, `take`, `replace` and
  `unwrap_or`. `Option(value)` holds a value; `Option()` holds nothing. Misuse,
  such as unwrapping an empty option, raises `PanicError`.
- `stx.option_helpers`: `make_some` and `make_none` constructors.
- `stx.enum_ops`: bitwise helpers for flag-like enums (`enum_or`, `enum_and`,
  `enum_toggle` and their raw-value forms `enum_uv_or`, `enum_uv_and`,
  `enum_uv_toggle`, plus `enum_uv`).
- `stx.limits`: numeric limits for fixed-width integer and floating-point types,
  such as `U8_MAX`, `I64_MIN`, `F32_EPSILON` and `F64_MAX`.
- `stx.source_location`: `SourceLocation.current()` records the caller's file,
  function, line and column.
- `stx.spinlock`: `SpinLock` (also usable in a `with` block), `LockStatus` and
  the `LockGuard` context manager.
- `stx.manager`: reference-counting manager handles (`Manager`, `ManagerHandle`,
  `StaticStorageManagerHandle`, `NoopManagerHandle` and `ManagerStub`).
  `Manager.take()` moves the handle out and leaves the stub behind.
- `stx.thread_pool`: `bounded_exponential_backoff()` gives idle polling delays
  of 1 ms, 2 ms, 4 ms and so on, capped at a maximum; `STALL_TIMEOUT` and
  `CANCELATION_POLL_MIN_PERIOD` are the timings used with it.
- `stx.stream`: lock-protected streams. A `Generator` yields values and a
  `Stream` pops them in the order they went in; popping an empty stream raises
  `StreamPopError` whose `error` is `StreamError.PENDING` or
  `StreamError.CLOSED`. `MemoryBackedGenerator` stores chunks in a fixed-size
  `SmpRingBuffer` and raises `RingBufferFullError` when every slot is in use.

## Installing

```
pip install .
```

## Example

```python
from stx.option_helpers import make_some, make_none

length = make_some("Hello, World!").map(len)
assert length.unwrap() == 13
assert make_none().unwrap_or(42) == 42

from stx.stream import make_generator, make_stream, StreamPopError

gen = make_generator()
stream = make_stream(gen)
gen.yield_value(1, False)
gen.yield_value(2, True)
assert stream.pop() == 1
assert stream.pop() == 2
try:
    stream.pop()
except StreamPopError as exc:
    print(exc.error)  # StreamError.CLOSED
```

## What it does not do

- There is no thread pool that runs tasks: `stx.thread_pool` holds only the
  backoff timing policy.
- There is no call-stack walking or backtrace facility.

## Running the tests

```
pip install .[test]
pytest
```