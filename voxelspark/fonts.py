"""Fonts and a registry to look them up by name and size."""

from __future__ import annotations

import os
from typing import Optional, Union

NO_FILENAME = "NULL"
"""File name recorded for fonts built from in-memory data."""


class Font:
    """A named font face at a given size, with a render scale."""

    def __init__(
        self, name: str, filename: Union[str, os.PathLike[str]], size: float
    ) -> None:
        """Load a font from a file; raises OSError if it cannot be read."""
        with open(filename, "rb") as handle:
            data = handle.read()
        self._setup(name, os.fspath(filename), data, size)

    @classmethod
    def from_data(cls, name: str, data: bytes, size: float) -> "Font":
        """Build a font from bytes already in memory."""
        font = cls.__new__(cls)
        font._setup(name, NO_FILENAME, bytes(data), size)
        return font

    def _setup(self, name: str, filename: str, data: bytes, size: float) -> None:
        if not data:
            raise ValueError(f"failed to load font {name!r}: no data")
        self.name = name
        self.filename = filename
        self.data = data
        self.size = size
        self.scale: tuple[float, float] = (1.0, 1.0)

    def set_scale(self, x: float, y: float) -> None:
        self.scale = (float(x), float(y))

    def __repr__(self) -> str:
        return f"Font(name={self.name!r}, filename={self.filename!r}, size={self.size!r})"


class FontManager:
    """Holds fonts in the order they were added."""

    def __init__(self) -> None:
        self.fonts: list[Font] = []

    def add(self, font: Font) -> None:
        self.fonts.append(font)

    def default(self) -> Font:
        """The first font added."""
        if not self.fonts:
            raise LookupError("no fonts have been added")
        return self.fonts[0]

    def get(
        self, name: Optional[str] = None, size: Optional[float] = None
    ) -> Optional[Font]:
        """Find a font by name, and by size too when given.

        With no arguments, returns the default font. Returns None if nothing matches.
        """
        if name is None and size is None:
            return self.default()
        return next(
            (
                font
                for font in self.fonts
                if (size is None or font.size == size)
                and (name is None or font.name == name)
            ),
            None,
        )

    def clean(self) -> None:
        """Drop every font."""
        self.fonts.clear()