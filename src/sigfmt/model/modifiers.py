"""Modifier vocabulary and modifier sets."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet

__all__ = ["Modifier", "ModifierSet", "VISIBILITY_MODIFIERS"]


class Modifier(str, Enum):
    """Modifier keywords known to the code model."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    PACKAGE_LOCAL = "packageLocal"
    STATIC = "static"
    ABSTRACT = "abstract"
    FINAL = "final"
    NATIVE = "native"
    SYNCHRONIZED = "synchronized"
    STRICTFP = "strictfp"
    TRANSIENT = "transient"
    VOLATILE = "volatile"

    @classmethod
    def parse(cls, value: "str | Modifier") -> "Modifier":
        if isinstance(value, Modifier):
            return value
        token = value.strip()
        for member in cls:
            if token == member.value or token.upper() == member.name:
                return member
        if token.replace("-", "_").upper() in {"PACKAGE_PRIVATE", "PACKAGE_LOCAL"}:
            return cls.PACKAGE_LOCAL
        raise ValueError(f"Unknown modifier: {value}")


VISIBILITY_MODIFIERS = (Modifier.PUBLIC, Modifier.PROTECTED, Modifier.PRIVATE)


def _freeze(values: Iterable["str | Modifier"]) -> FrozenSet[Modifier]:
    return frozenset(Modifier.parse(value) for value in values)


@dataclass(frozen=True, slots=True)
class ModifierSet:
    """Modifiers written in source (``explicit``) plus those implied by context.

    ``implicit`` holds keywords that hold without being written, such as
    ``public abstract`` on interface methods. Package-local visibility is
    derived: it is effective whenever no other visibility keyword is.
    """

    explicit: FrozenSet[Modifier] = field(default_factory=frozenset)
    implicit: FrozenSet[Modifier] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "explicit", _freeze(self.explicit))
        object.__setattr__(self, "implicit", _freeze(self.implicit))
        visible = [modifier for modifier in VISIBILITY_MODIFIERS if self.has_property(modifier)]
        if Modifier.PACKAGE_LOCAL in self.explicit:
            visible.append(Modifier.PACKAGE_LOCAL)
        if len(visible) > 1:
            names = ", ".join(modifier.value for modifier in visible)
            raise ValueError(f"Conflicting visibility modifiers: {names}")

    @classmethod
    def of(cls, *explicit: "str | Modifier", implicit: Iterable["str | Modifier"] = ()) -> "ModifierSet":
        return cls(explicit=_freeze(explicit), implicit=_freeze(implicit))

    def has_explicit(self, modifier: Modifier) -> bool:
        return modifier in self.explicit

    def has_property(self, modifier: Modifier) -> bool:
        """Return whether ``modifier`` holds, whether written or implied."""
        if modifier is Modifier.PACKAGE_LOCAL:
            if modifier in self.explicit:
                return True
            return not any(
                visibility in self.explicit or visibility in self.implicit
                for visibility in VISIBILITY_MODIFIERS
            )
        return modifier in self.explicit or modifier in self.implicit
