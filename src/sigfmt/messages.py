"""Human-readable phrases used by the renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from .model.modifiers import Modifier

__all__ = ["DEFAULT_MESSAGES", "MessageBundle"]


class MessageBundle(BaseModel):
    """Replaceable text templates for phrases that are not source tokens."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    anonymous_class_derived: str = "anonymous class derived from {name}"
    local_class: str = "local"
    package_local: str = "package-private"

    @field_validator("anonymous_class_derived")
    @classmethod
    def _requires_placeholder(cls, value: str) -> str:
        if "{name}" not in value:
            raise ValueError("anonymous_class_derived must contain a '{name}' placeholder")
        return value

    def anonymous_class_derived_display(self, name: str) -> str:
        return self.anonymous_class_derived.replace("{name}", name)

    def local_class_preposition(self) -> str:
        return self.local_class

    def visibility_presentation(self, modifier: Modifier) -> str:
        """Return the display word for a visibility modifier."""
        if modifier is Modifier.PACKAGE_LOCAL:
            return self.package_local
        return modifier.value


DEFAULT_MESSAGES = MessageBundle()
