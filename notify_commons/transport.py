"""Binary transport streams used to pass model objects between processes.

Strings are written as a variable-length byte count followed by UTF-8 bytes.
Integers use the 7-bit varint encoding (low groups first, high bit = more).
"""

from __future__ import annotations

import io
from typing import Protocol

from notify_commons.errors import InvalidArgumentError, TransportError

_MAX_VINT_BYTES = 5
_MAX_VINT = 0xFFFFFFFF


class Writeable(Protocol):
    """Object that can serialize itself onto a ``StreamOutput``."""

    def write_to(self, out: StreamOutput) -> None: ...


class StreamOutput:
    """Append-only binary buffer."""

    def __init__(self) -> None:
        self._buf = io.BytesIO()

    def write_byte(self, value: int) -> None:
        if not 0 <= value <= 0xFF:
            msg = f"Byte out of range: {value}"
            raise InvalidArgumentError(msg)
        self._buf.write(bytes((value,)))

    def write_vint(self, value: int) -> None:
        if value < 0 or value > _MAX_VINT:
            msg = f"Cannot write vint {value}: must be in [0, {_MAX_VINT}]"
            raise InvalidArgumentError(msg)
        while value & ~0x7F:
            self.write_byte((value & 0x7F) | 0x80)
            value >>= 7
        self.write_byte(value)

    def write_string(self, value: str) -> None:
        try:
            data = value.encode("utf-8")
        except UnicodeEncodeError as exc:
            msg = f"String is not encodable as UTF-8: {exc}"
            raise InvalidArgumentError(msg) from exc
        self.write_vint(len(data))
        self._buf.write(data)

    def to_bytes(self) -> bytes:
        return self._buf.getvalue()


class StreamInput:
    """Forward-only reader over bytes produced by ``StreamOutput``."""

    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def _take(self, count: int) -> bytes:
        if count > self.remaining:
            msg = f"Unexpected end of stream: wanted {count} bytes, {self.remaining} left"
            raise TransportError(msg)
        chunk = self._data[self._pos : self._pos + count].tobytes()
        self._pos += count
        return chunk

    def read_byte(self) -> int:
        return self._take(1)[0]

    def read_vint(self) -> int:
        result = 0
        for i in range(_MAX_VINT_BYTES):
            b = self.read_byte()
            result |= (b & 0x7F) << (7 * i)
            if not b & 0x80:
                return result
        msg = "Invalid vint: more than 5 bytes"
        raise TransportError(msg)

    def read_string(self) -> str:
        size = self.read_vint()
        raw = self._take(size)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Invalid UTF-8 in string field: {exc}"
            raise TransportError(msg) from exc
