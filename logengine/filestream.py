"""Byte streams over memory buffers and files, with typed value and line helpers."""

from __future__ import annotations

import errno
import os
import struct
from abc import ABC, abstractmethod
from enum import Enum

from .common import CR_CHAR, END_LINE, END_LINE_CHAR

IO_EXCEPTION_PREFIX = "LogException : "
DEFAULT_BUF_SIZE = 1024

_ENCODING = "utf-8"
_PSTRING_LENGTH_FORMAT = "I"
_LF_BYTE = ord(END_LINE_CHAR)
_CR_BYTE = ord(CR_CHAR)


class FileMode(Enum):
    """How a file stream opens its file."""

    READ = "read"
    WRITE = "write"
    READ_WRITE = "read_write"
    WRITE_TRUNC = "write_trunc"


class SeekMode(Enum):
    """Reference point for a seek."""

    FROM_BEGIN = os.SEEK_SET
    FROM_END = os.SEEK_END
    FROM_CURRENT = os.SEEK_CUR


class StreamError(Exception):
    """Raised when a stream cannot be opened, read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return IO_EXCEPTION_PREFIX + self.message


def _to_bytes(data: bytes | bytearray | memoryview | str) -> bytes:
    if isinstance(data, str):
        return data.encode(_ENCODING)
    return bytes(data)


class Stream(ABC):
    """Base stream: raw reads and writes plus helpers built on them."""

    def __init__(self) -> None:
        self._eof = False

    @abstractmethod
    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes."""

    @abstractmethod
    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        """Write ``data`` and return the number of bytes written."""

    @abstractmethod
    def length(self) -> int:
        """Return the size of the stream in bytes."""

    def eof(self) -> bool:
        """Return whether the last read reached the end of the stream."""
        return self._eof

    def read_char(self) -> int:
        """Read one byte; return its value, or -1 at the end of the stream."""
        data = self.read(1)
        return data[0] if len(data) == 1 else -1

    def read_string(self) -> str:
        """Read a line up to ``\\n``; a ``\\r`` right before it is dropped."""
        collected = bytearray()
        while True:
            char = self.read_char()
            if char == -1:
                break
            if char == _LF_BYTE:
                if collected and collected[-1] == _CR_BYTE:
                    del collected[-1]
                break
            collected.append(char)
        return collected.decode(_ENCODING, errors="replace")

    def write_string(self, text: str) -> int:
        """Write ``text`` followed by the platform line ending."""
        return self.write(text) + self.write(END_LINE)

    def read_value(self, fmt: str):
        """Read one value packed with the struct format ``fmt``."""
        size = struct.calcsize(fmt)
        data = self.read(size)
        if len(data) != size:
            raise StreamError("End of stream reached!")
        return struct.unpack(fmt, data)[0]

    def write_value(self, fmt: str, value) -> int:
        """Write one value packed with the struct format ``fmt``."""
        return self.write(struct.pack(fmt, value))

    def read_pstring(self) -> str:
        """Read a string stored as its byte length followed by its bytes."""
        size = self.read_value(_PSTRING_LENGTH_FORMAT)
        return self.read(size).decode(_ENCODING, errors="replace")

    def write_pstring(self, text: str) -> int:
        """Write a string as its byte length followed by its bytes."""
        data = text.encode(_ENCODING)
        written = self.write_value(_PSTRING_LENGTH_FORMAT, len(data))
        if data:
            written += self.write(data)
        return written


class MemoryStream(Stream):
    """Stream over an in-memory buffer with separate read and write positions."""

    def __init__(self) -> None:
        super().__init__()
        self._memory: bytearray | memoryview = bytearray()
        self._size = 0
        self._rpos = 0
        self._wpos = 0
        self._owned = True

    def _reset_pos(self) -> None:
        self._size = 0
        self._rpos = 0
        self._wpos = 0

    def read(self, size: int) -> bytes:
        if size <= 0:
            return b""
        available = self._size - self._rpos
        self._eof = size >= available
        size = min(size, available)
        if size == 0:
            return b""
        data = bytes(self._memory[self._rpos:self._rpos + size])
        self._rpos += size
        return data

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        payload = _to_bytes(data)
        if not payload:
            return 0
        end = self._wpos + len(payload)
        if end > self._size:
            if not self._owned:
                raise StreamError("External buffer size is too small! Cannot write.")
            if end > len(self._memory):
                self._memory.extend(bytes(end - len(self._memory)))
            self._size = end
        self._memory[self._wpos:end] = payload
        self._wpos = end
        return len(payload)

    def length(self) -> int:
        return self._size

    def _clamp(self, start: int, offset: int) -> int:
        return max(0, min(self._size, start + offset))

    def _target(self, current: int, offset: int, mode: SeekMode) -> int:
        if mode is SeekMode.FROM_BEGIN:
            return self._clamp(0, offset)
        if mode is SeekMode.FROM_END:
            return self._clamp(self._size, -offset)
        return self._clamp(current, offset)

    def seek_r(self, offset: int, mode: SeekMode) -> int:
        """Move the read position, clamped to the stream; return the new position."""
        self._rpos = self._target(self._rpos, offset, mode)
        return self._rpos

    def seek_w(self, offset: int, mode: SeekMode) -> int:
        """Move the write position, clamped to the stream; return the new position."""
        self._wpos = self._target(self._wpos, offset, mode)
        return self._wpos

    def set_buffer(self, buffer: bytearray | memoryview) -> None:
        """Work on an external writable buffer of fixed size instead of the internal one."""
        view = memoryview(buffer).cast("B")
        if view.readonly:
            raise StreamError("External buffer must be writable.")
        self._reset_pos()
        self._owned = False
        self._memory = view
        self._size = len(view)

    def unset_buffer(self) -> None:
        """Return to an internal buffer of the default size, if an external one was set."""
        if self._owned:
            return
        self._reset_pos()
        self._owned = True
        self._memory = bytearray(DEFAULT_BUF_SIZE)
        self._size = DEFAULT_BUF_SIZE


_OPEN_FLAGS = {
    FileMode.READ: os.O_RDONLY,
    FileMode.WRITE: os.O_WRONLY | os.O_CREAT,
    FileMode.READ_WRITE: os.O_RDWR | os.O_CREAT,
    FileMode.WRITE_TRUNC: os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
}


class FileStream(Stream):
    """Stream over a file opened through an operating-system descriptor."""

    def __init__(self, file_name: str, mode: FileMode = FileMode.WRITE) -> None:
        super().__init__()
        self._file_name = file_name
        self._mode = mode
        flags = _OPEN_FLAGS[mode] | getattr(os, "O_BINARY", 0)
        try:
            self._fd = os.open(file_name, flags, 0o600)
        except (OSError, ValueError) as exc:
            code = getattr(exc, "errno", errno.EINVAL if isinstance(exc, ValueError) else None)
            if code == errno.EINVAL:
                message = f"Wrong file name '{file_name}'!"
            elif code == errno.EACCES:
                message = f"Can't get access to file '{file_name}'!"
            else:
                message = f"Can't open file '{file_name}'!"
            raise StreamError(message) from exc

    def __enter__(self) -> FileStream:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the file; further reads and writes fail."""
        if self._fd >= 0:
            os.close(self._fd)
            self._fd = -1

    def file_name(self) -> str:
        """Return the name the file was opened with."""
        return self._file_name

    def read(self, size: int) -> bytes:
        if self._mode in (FileMode.WRITE, FileMode.WRITE_TRUNC):
            raise StreamError("File opened in write-only mode. Can't read!")
        try:
            data = os.read(self._fd, size)
        except OSError as exc:
            raise StreamError(
                f"Cannot read from file '{self._file_name}'! May be file closed?"
            ) from exc
        self._eof = len(data) != size
        return data

    def write(self, data: bytes | bytearray | memoryview | str) -> int:
        if self._mode is FileMode.READ:
            raise StreamError("File opened in read-only mode. Can't write!")
        payload = _to_bytes(data)
        message = f"Cannot write to file '{self._file_name}'! May be disk full?"
        try:
            written = os.write(self._fd, payload)
        except OSError as exc:
            raise StreamError(message) from exc
        if written != len(payload):
            raise StreamError(message)
        return written

    def write_crlf(self) -> int:
        """Write the platform line ending."""
        return self.write(END_LINE)

    def write_line(self, data: bytes | bytearray | memoryview | str) -> int:
        """Write ``data`` followed by the platform line ending."""
        written = self.write(data)
        return self.write_crlf() + written

    def seek(self, offset: int, mode: SeekMode) -> int:
        """Move the file position relative to ``mode``; return the new position."""
        if not isinstance(mode, SeekMode):
            raise StreamError("Invalid FileStream.seek() mode.")
        try:
            return os.lseek(self._fd, offset, mode.value)
        except OSError as exc:
            raise StreamError(f"Cannot seek in file '{self._file_name}'!") from exc

    def length(self) -> int:
        return os.fstat(self._fd).st_size

    def flush(self) -> None:
        """Force written data to disk."""
        os.fsync(self._fd)