"""Exception types raised by the signature formatter."""

from __future__ import annotations

__all__ = [
    "ModelLoadError",
    "OrphanMemberError",
    "SignatureFormatError",
    "UnsupportedElementError",
]


class SignatureFormatError(Exception):
    """Base error for formatter failures."""


class UnsupportedElementError(SignatureFormatError, ValueError):
    """Raised when an element kind cannot carry a modifier list."""

    def __init__(self, element: object) -> None:
        self.element = element
        super().__init__(f"Unsupported element for modifier rendering: {type(element).__name__}")


class OrphanMemberError(SignatureFormatError, RuntimeError):
    """Raised when a member element has no enclosing class to qualify it."""

    def __init__(self, element: object) -> None:
        self.element = element
        name = getattr(element, "name", None) or "<unnamed>"
        super().__init__(f"No enclosing class found for {type(element).__name__} '{name}'")


class ModelLoadError(SignatureFormatError):
    """Raised when a model or configuration document cannot be loaded."""
