"""Small "use the first available value" helpers shared by the assemblers."""

from __future__ import annotations

from typing import Optional

from ..model.elements import ClassElement

__all__ = ["class_display_name", "first_text"]


def first_text(*candidates: Optional[str]) -> Optional[str]:
    """Return the first candidate that is not ``None``."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def class_display_name(cls: ClassElement, qualified: bool) -> Optional[str]:
    """Return the qualified or simple class name, or ``None`` for a nameless class.

    A class without a qualified name (local, anonymous-nested) falls back to
    its simple name.
    """
    if cls.name is None:
        return None
    if qualified:
        return first_text(cls.qualified_name, cls.name)
    return cls.name
