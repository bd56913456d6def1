"""Hexadecimal formatting helpers."""

from __future__ import annotations

from collections.abc import Iterable

BUFFER_SIZE = 10 * 1024
"""Largest formatted result, in characters, including a terminator slot."""

_UINT_MASK = 0xFFFFFFFF


def _as_unsigned(value: int) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value & _UINT_MASK if value < 0 else value


def hex_value(value: int) -> str:
    """Format one integer as lower-case hex, at least two digits wide."""
    return f"{_as_unsigned(value):02x}"


def hex_bytes(data: Iterable[int]) -> str:
    """Format each item as two-digit hex followed by a space.

    Raises ValueError when the result would not fit the format buffer.
    """
    items = list(data)
    if len(items) * 3 + 1 > BUFFER_SIZE:
        raise ValueError(
            f"{len(items)} items do not fit a {BUFFER_SIZE}-character buffer"
        )
    return "".join(f"{_as_unsigned(item):02x} " for item in items)