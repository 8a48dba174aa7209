"""Validation and parsing of command-line and configuration strings."""

from __future__ import annotations

import enum
import os
import string
from dataclasses import dataclass

MAX_FILE_NAME = 256

_BDF_LENGTH = 7
_DF_LENGTH = 4
_HEX_DIGITS = frozenset(string.hexdigits)
_DEC_DIGITS = frozenset(string.digits)


class LogLevel(enum.IntEnum):
    """Verbosity levels of the validator's log output."""

    ERROR = 0
    WARN = 1
    INFO = 2
    VERBOSE = 3

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Bdf:
    """A PCI bus/device/function triple."""

    bus: int
    device: int
    function: int

    def __str__(self) -> str:
        return f"{self.bus:02x}:{self.device:02x}.{self.function:x}"


def _all_hex(text: str, positions: tuple[int, ...]) -> bool:
    return all(text[pos] in _HEX_DIGITS for pos in positions)


def is_valid_bdf(text: str | None) -> bool:
    """Return True for a string shaped like ``2a:00.0``."""
    if text is None or len(text) != _BDF_LENGTH:
        return False
    if text[2] != ":" or text[5] != ".":
        return False
    return _all_hex(text, (0, 1, 3, 4, 6))


def parse_bdf_string(text: str | None) -> Bdf:
    """Split a ``bb:dd.f`` string into its bus, device and function numbers."""
    if text is None or len(text) != _BDF_LENGTH:
        raise ValueError(f"invalid BDF string: {text!r}")
    try:
        bus = int(text[0:2], 16)
        device = int(text[3:5], 16)
        function = int(text[6:7], 16)
    except ValueError as exc:
        raise ValueError(f"invalid BDF string: {text!r}") from exc
    return Bdf(bus & 0xFF, device & 0xFF, function & 0xFF)


def is_valid_dev_func(text: str | None) -> bool:
    """Return True for a string shaped like ``02.0``."""
    if text is None or len(text) != _DF_LENGTH:
        return False
    if text[2] != ".":
        return False
    return _all_hex(text, (0, 1, 3))


def find_char_in_str(text: str | None, char: str) -> int:
    """Index of the first ``char`` in ``text``, or -1."""
    if text is None:
        return -1
    return text.find(char)


def revert_find_char_in_str(text: str | None, char: str) -> int:
    """Index of the last ``char`` in ``text``, or -1."""
    if text is None:
        return -1
    return text.rfind(char)


def _is_decimal(text: str) -> bool:
    return bool(text) and all(ch in _DEC_DIGITS for ch in text)


def decimal_str_to_array(text: str | None, size: int | None = None) -> list[int]:
    """Parse ``"1,2,3,4"`` into ``[1, 2, 3, 4]``.

    Raises ValueError on an element that is not a decimal number or when
    more than ``size`` elements are given.
    """
    if not text:
        raise ValueError("empty decimal list")
    values: list[int] = []
    for item in text.split(","):
        if not _is_decimal(item):
            raise ValueError(f"invalid decimal value: {item!r}")
        if size is not None and len(values) == size:
            raise ValueError(f"more than {size} values in {text!r}")
        values.append(int(item, 10))
    return values


def valid_decimal_int_array(text: str | None) -> bool:
    """Return True if ``text`` is a comma-separated list of decimal numbers."""
    try:
        decimal_str_to_array(text)
    except ValueError:
        return False
    return True


def convert_hex_str_to_uint8(text: str | None) -> int:
    """Convert a numeric string (``0x`` hex, leading-zero octal or decimal) to a byte value."""
    if text is None:
        raise ValueError("no value given")
    body = text[2:] if text[:2].lower() == "0x" else text
    if not body or any(ch not in _HEX_DIGITS for ch in body):
        raise ValueError(f"invalid hex string: {text!r}")
    if text[:2].lower() == "0x":
        base = 16
    elif len(text) > 1 and text.startswith("0"):
        base = 8
    else:
        base = 10
    try:
        value = int(body, base)
    except ValueError as exc:
        raise ValueError(f"invalid number: {text!r}") from exc
    if value > 0xFF:
        raise ValueError(f"value out of byte range: {text!r}")
    return value


def get_ide_log_level_from_string(name: str | None) -> LogLevel:
    """Map a level name to its LogLevel; unknown names give WARN."""
    if name is None:
        return LogLevel.WARN
    for level in LogLevel:
        if level.label == name:
            return level
    return LogLevel.WARN


def get_ide_log_level_string(level: int) -> str:
    """Name of a log level, or ``"na"`` for an unknown one."""
    try:
        return LogLevel(level).label
    except ValueError:
        return "na"


def validate_file_name(file_name: str | os.PathLike | None) -> bool:
    """Return True if the named file exists and its name is not too long."""
    if file_name is None:
        return False
    if len(os.fspath(file_name)) > MAX_FILE_NAME:
        return False
    return os.path.exists(file_name)