"""Common helpers: string conversion, trimming, path handling and time formatting."""

from __future__ import annotations

import sys
import threading
import time
from datetime import datetime

VERSION_MAJOR = 1
VERSION_MINOR = 3
VERSION_PATCH = 0
VERSION = VERSION_MAJOR * 10000 + VERSION_MINOR * 100 + VERSION_PATCH

CR_CHAR = "\r"
LF_CHAR = "\n"
END_LINE = "\r\n" if sys.platform == "win32" else "\n"
END_LINE_CHAR = "\n"

_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_DIGITS = frozenset("0123456789")
_PATH_SEPARATORS = ("/", "\\")


def round_value(value: float, precision: int) -> float:
    """Round ``value`` to ``precision`` digits after the point, halves away from zero."""
    scale = 10.0**precision
    temp = value * scale
    fraction = temp - int(temp)
    if fraction == 0:
        return temp / scale
    if fraction >= 0.5 and value > 0:
        return int(temp + 0.5) / scale
    if fraction <= -0.5 and value < 0:
        return int(temp - 0.5) / scale
    return int(temp) / scale


def int_to_str(value: int, field_size: int = 0) -> str:
    """Format an integer, left-justified in a field of ``field_size`` characters."""
    return str(int(value)).ljust(abs(field_size))


def float_to_str(value: float) -> str:
    """Format a float with six digits after the point."""
    return f"{value:f}"


def bool_to_str(value: bool) -> str:
    """Return ``"1"`` for true and ``"0"`` for false."""
    return "1" if value else "0"


def str_to_bool(value: str) -> bool:
    """Interpret ``1``, ``yes`` or ``true`` (any case) as true, anything else as false."""
    return any(equal_ncase(value, word) for word in ("1", "yes", "true"))


def _last_separator(file_name: str) -> int:
    return max(file_name.rfind(sep) for sep in _PATH_SEPARATORS)


def extract_file_name(file_name: str) -> str:
    """Return the part of a path after the last ``/`` or ``\\``."""
    return file_name[_last_separator(file_name) + 1:]


def extract_file_dir(file_name: str) -> str:
    """Return the directory part of a path, including its trailing separator."""
    return file_name[: _last_separator(file_name) + 1]


def strip_file_ext(file_name: str) -> str:
    """Remove the extension of the last path component, if it has one."""
    dot = file_name.rfind(".")
    if dot > _last_separator(file_name):
        return file_name[:dot]
    return file_name


def string_replace(text: str, old_pattern: str, new_pattern: str) -> str:
    """Replace every occurrence of ``old_pattern``; empty input or pattern gives ``""``."""
    if not old_pattern or not text:
        return ""
    return text.replace(old_pattern, new_pattern)


def get_curr_time_point() -> datetime:
    """Return the current local time as a datetime."""
    return datetime.now()


def get_curr_date_time() -> time.struct_time:
    """Return the current local time broken down into fields."""
    return time.localtime()


def get_curr_date_as_string() -> str:
    """Return the current date as ``DD-MM-YYYY``."""
    return time.strftime("%d-%m-%Y", get_curr_date_time())


def get_curr_time_as_string() -> str:
    """Return the current time in the locale's format followed by milliseconds."""
    now = get_curr_time_point()
    clock = del_crlf(now.strftime("%X"))
    return f"{clock}.{now.microsecond // 1000:03d}"


def get_curr_date_time_as_string() -> str:
    """Return the current date and time in the locale's format."""
    return time.strftime("%c", get_curr_date_time())


def format_curr_date_time(format_str: str) -> str:
    """Format the current local time with a strftime pattern."""
    return time.strftime(format_str, get_curr_date_time())


def date_time_to_str(value: float | time.struct_time | datetime) -> str:
    """Format a timestamp, struct_time or datetime as ``YYYY-MM-DD HH:MM:SS``."""
    if isinstance(value, datetime):
        return value.strftime(_DATETIME_FORMAT)
    if isinstance(value, time.struct_time):
        return time.strftime(_DATETIME_FORMAT, value)
    return time.strftime(_DATETIME_FORMAT, time.localtime(value))


def del_crlf(text: str) -> str:
    """Remove leading and trailing CR and LF characters."""
    return text.strip("\r\n")


def trim_sp_crlf(text: str) -> str:
    """Remove leading and trailing spaces, tabs, CR and LF characters."""
    return text.strip(" \t\r\n")


def trim(text: str) -> str:
    """Remove leading and trailing spaces and tabs."""
    return text.strip(" \t")


def trim_left(text: str) -> str:
    """Remove leading spaces and tabs."""
    return text.lstrip(" \t")


def trim_right(text: str) -> str:
    """Remove trailing spaces and tabs."""
    return text.rstrip(" \t")


def _upper_char(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def equal_ncase(str1: str, str2: str) -> bool:
    """Compare two strings for equality ignoring case."""
    if len(str1) != len(str2):
        return False
    return all(_upper_char(a) == _upper_char(b) for a, b in zip(str1, str2))


def compare_ncase(str1: str, str2: str) -> int:
    """Compare two strings ignoring case; return -1, 0 or 1."""
    for a, b in zip(str1, str2):
        upper1, upper2 = ord(_upper_char(a)), ord(_upper_char(b))
        if upper1 > upper2:
            return 1
        if upper1 < upper2:
            return -1
    if len(str1) > len(str2):
        return 1
    if len(str1) < len(str2):
        return -1
    return 0


def is_uint(value: str) -> bool:
    """Check that a string holds an unsigned decimal integer, optionally with a leading ``+``."""
    if not value:
        return False
    digits = value[1:] if value[0] == "+" else value
    return all(char in _DIGITS for char in digits)


def get_thread_id() -> int:
    """Return the native identifier of the calling thread."""
    return threading.get_native_id()


def str_to_lower(text: str) -> str:
    """Return the string in lower case."""
    return text.lower()