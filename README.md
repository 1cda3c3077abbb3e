# corekit

A handful of small, dependency-free helpers for everyday Python code.

## Installation

```
pip install corekit
```

## What is inside

### Assertions: `corekit.asserts`

```python
from corekit.asserts import require_true, check_true, assert_true

require_true(port > 0, "port must be positive")  # raises ValueError
check_true(is_open, "connection is closed")       # raises IllegalStateException
assert_true(len(items) == 3)                      # raises AssertionException
```

- `require_true(condition, msg="invalid argument passed")` guards arguments
  and raises `ValueError`.
- `check_true(condition, msg="check reported invalid state")` guards object
  state and raises `IllegalStateException`, a subclass of `RuntimeError`.
- `assert_true(condition, msg="assertion failed")` guards internal invariants
  and raises `AssertionException`, a subclass of `AssertionError`. Like the
  `assert` statement, it does nothing when Python runs with `-O`.

### Environment variables: `corekit.env`

```python
from corekit.env import get_env_var, set_env_var

set_env_var("APP_MODE", "debug")  # returns True
get_env_var("APP_MODE")           # "debug"
set_env_var("APP_MODE", None)     # unsets the variable
get_env_var("APP_MODE")           # "" when unset
```

`get_env_var` returns `""` for a variable that is not set and raises
`RuntimeError` when the name is `None`. `set_env_var` raises `RuntimeError`
when the name is `None`, empty or contains `=`, or when the operating system
refuses the change. Unsetting a variable that is not set is not an error.

### Find and replace: `corekit.find_and_replace`

```python
from corekit.find_and_replace import find_and_replace

find_and_replace("foobarfoobar", "foo", "baz")  # "bazbarbazbar"
find_and_replace("foobar", "foo", "barfoo")     # "barfoobar"
find_and_replace(b"foobar", b"foo", b"bar")     # b"barbar"
```

Works on `str` or `bytes`. Occurrences are replaced left to right without
overlap, and text inserted by a replacement is not searched again. An empty
search string leaves the input unchanged.

### Rolling mean: `corekit.rolling_mean`

```python
from corekit.rolling_mean import RollingMeanAccumulator

acc = RollingMeanAccumulator(4)
for value in (1.0, 1.0, 5.0, 5.0, 5.0):
    acc.accumulate(value)
acc.rolling_mean()  # 4.0, the mean of the last four values
len(acc)            # 4
acc.window_size     # 4
```

Before the window fills, the mean is taken over the values seen so far.
A window size below one raises `ValueError`, and so does calling
`rolling_mean()` before anything has been accumulated.

### Durations: `corekit.durations`

```python
from datetime import timedelta
from corekit.durations import convert_to_nanoseconds

convert_to_nanoseconds(timedelta(minutes=5))  # 300_000_000_000
convert_to_nanoseconds(300.0)                 # 300_000_000_000 (seconds)
```

`convert_to_nanoseconds` takes a `timedelta` or a number of seconds and
returns an integer nanosecond count, truncating toward zero. A result outside
`NANOSECONDS_MIN`..`NANOSECONDS_MAX` (the signed 64-bit range) raises
`ValueError`, as does NaN; other argument types raise `TypeError`.

## What it does not do

corekit is a library only: it has no command-line tool. It does not locate
or load shared libraries, and it offers no endianness, string-splitting or
joining helpers.

## Running the tests

```
pip install "corekit[test]"
pytest
```