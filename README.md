# logengine

Small building blocks for a logging engine. The package uses only the
standard library.

## Modules

### `logengine.common`

String, path and time helpers.

- Case-insensitive comparison: `equal_ncase(a, b)` returns a bool.
  `compare_ncase(a, b)` returns `-1`, `0` or `1`.
- Trimming:
  - `trim`, `trim_left` and `trim_right` remove spaces and tabs.
  - `trim_sp_crlf` removes spaces, tabs, CR and LF.
  - `del_crlf` removes only CR and LF.
- Conversions:
  - `int_to_str(value, field_size)` left-justifies the number in a field of
    `field_size` characters.
  - `float_to_str` gives six digits after the point.
  - `bool_to_str` gives `"1"` or `"0"`.
  - `str_to_bool` is true for `1`, `yes` or `true` in any case.
  - `round_value(value, precision)` rounds halves away from zero.
  - `is_uint` checks for an unsigned decimal integer, which may start with `+`.
  - `str_to_lower` lower-cases a string.
- Paths: `extract_file_name`, `extract_file_dir` and `strip_file_ext`. Both `/`
  and `\` count as separators.
- `string_replace(text, old, new)` replaces every occurrence of `old`. It
  returns `""` when either `text` or `old` is empty.
- Time:
  - `get_curr_time_point()` returns a `datetime`.
  - `get_curr_date_time()` returns a `time.struct_time`.
  - `get_curr_date_as_string()` returns the date as `DD-MM-YYYY`.
  - `get_curr_time_as_string()` returns the locale's time format plus
    milliseconds.
  - `get_curr_date_time_as_string()` returns the locale's date and time
    format.
  - `format_curr_date_time(fmt)` formats the current time with a strftime
    pattern.
  - `date_time_to_str(value)` formats a timestamp, `struct_time` or `datetime`
    as `YYYY-MM-DD HH:MM:SS`.
- `get_thread_id()` returns the native id of the calling thread.
- `VERSION` is the version number (`10300` for 1.3.0).

### `logengine.filestream`

Byte streams. Failures raise `StreamError`, whose message starts with
`LogException : `.

- `Stream` is the abstract base class. It provides:
  - `read_char`.
  - `read_string`, which reads up to `\n` and drops a preceding `\r`.
  - `write_string`, which writes the text plus the platform line ending.
  - `read_value(fmt)` and `write_value(fmt, value)`, which use `struct`
    formats. `read_value` raises at the end of the stream.
  - `read_pstring` and `write_pstring`, for length-prefixed UTF-8 strings.
  - `eof`.
- `MemoryStream` is an in-memory stream that grows as it is written.
  - It keeps separate read and write positions. `seek_r` and `seek_w` move
    them, clamped to the stream.
  - `set_buffer(buf)` works on an external writable buffer of fixed size.
    Writing past the end of that buffer raises `StreamError`.
  - `unset_buffer()` returns to an internal buffer.
- `FileStream(name, mode)` opens a file in one of the `FileMode` modes: `READ`,
  `WRITE`, `READ_WRITE` or `WRITE_TRUNC`.
  - It offers `write_line`, `write_crlf`, `seek(offset, SeekMode)`, `length`,
    `flush` (fsync), `close` and `file_name`.
  - It is a context manager.

### `logengine.rawarray`

- `RawArray(item_size)` is a growable array of fixed-size byte items with
  explicit capacity.
  - It supports `add`, `add_many`, `insert`, `insert_many`, `update`,
    `update_many`, `delete`, `swap`, `get`, `add_fill_values`, `grow`,
    `grow_to`, `set_capacity`, `clear`, `clear_mem` and `set_item_size`.
  - Passing `None` as an item stores zeros.
  - A bad index raises `ArrayError`.
- `FixedStringArray(length)` stores strings in zero-padded slots.
  - `add_chars` stores a string, cut to the slot length.
  - `get` returns a string without its padding.
  - `reverse` reverses the order in place.
- `string_to_array(text, delim)` splits `text` and drops empty pieces.
- `join_strings(items)` concatenates strings.

## What this package does not do

The package has no loggers, sinks, layouts, log rotation or configuration
loading. It provides only the helpers, streams and arrays listed above. It
installs no command.

## Install

```
pip install .
```

## Example

```python
from logengine.common import strip_file_ext, equal_ncase
from logengine.filestream import MemoryStream

print(strip_file_ext("logs/app.log"))   # logs/app
print(equal_ncase("Info", "INFO"))      # True

stream = MemoryStream()
stream.write_string("hello")
print(stream.read_string())             # hello
```

## Tests

```
pip install .[test]
pytest
```