"""Process-wide debug menu visibility."""

from __future__ import annotations

from typing import ClassVar, Optional


class DebugMenu:
    """A single debug menu whose visibility is shared by the whole program."""

    _instance: ClassVar[Optional["DebugMenu"]] = None

    def __init__(self) -> None:
        self.visible = False

    @classmethod
    def _require(cls) -> "DebugMenu":
        if cls._instance is None:
            raise RuntimeError("DebugMenu.init() has not been called")
        return cls._instance

    @classmethod
    def init(cls) -> None:
        """Create the menu, hidden."""
        cls._instance = cls()

    @classmethod
    def add(cls) -> None:
        """Register an item; the menu holds no items yet, so only checks it exists."""
        cls._require()

    @classmethod
    def is_visible(cls) -> bool:
        return cls._require().visible

    @classmethod
    def set_visible(cls, visible: bool) -> None:
        cls._require().visible = bool(visible)