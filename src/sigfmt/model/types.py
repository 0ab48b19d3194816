"""Type references, substitutions and erasure."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Literal, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from .elements import ClassElement

__all__ = [
    "OBJECT",
    "PRIMITIVE_NAMES",
    "ReferenceList",
    "Substitution",
    "TypeRef",
]

PRIMITIVE_NAMES = frozenset(
    {"boolean", "byte", "char", "short", "int", "long", "float", "double", "void"}
)

WildcardKind = Literal["extends", "super"]


@dataclass(frozen=True, slots=True)
class TypeRef:
    """Reference to a (possibly generic, possibly array) type.

    ``qualified_name`` is the fully qualified name for class types, the
    keyword for primitives, the parameter name for type parameters and
    ``"?"`` for wildcards. ``target`` is the resolved class element when the
    code model knows it; it does not take part in equality.
    """

    qualified_name: str
    arguments: Tuple["TypeRef", ...] = ()
    array_depth: int = 0
    is_type_parameter: bool = False
    bound: Optional["TypeRef"] = None
    wildcard: Optional[WildcardKind] = None
    target: Optional[Any] = field(default=None, compare=False, repr=False)

    @classmethod
    def of(cls, qualified_name: str, *arguments: "TypeRef", target: Any = None) -> "TypeRef":
        return cls(qualified_name=qualified_name, arguments=tuple(arguments), target=target)

    @classmethod
    def parameter(cls, name: str, bound: Optional["TypeRef"] = None) -> "TypeRef":
        return cls(qualified_name=name, is_type_parameter=True, bound=bound)

    @classmethod
    def wildcard_of(cls, bound: Optional["TypeRef"] = None, kind: WildcardKind = "extends") -> "TypeRef":
        return cls(qualified_name="?", bound=bound, wildcard=kind if bound is not None else None)

    def array(self, depth: int = 1) -> "TypeRef":
        return replace(self, array_depth=self.array_depth + depth)

    @property
    def is_primitive(self) -> bool:
        return self.qualified_name in PRIMITIVE_NAMES and not self.arguments

    @property
    def short_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def presentable_text(self) -> str:
        return self._render(canonical=False)

    @property
    def canonical_text(self) -> str:
        return self._render(canonical=True)

    def resolve(self) -> Optional["ClassElement"]:
        return self.target

    def erasure(self) -> "TypeRef":
        """Return this type with all generic arguments stripped."""
        if self.qualified_name == "?" and not self.is_type_parameter:
            if self.wildcard == "extends" and self.bound is not None:
                return self.bound.erasure()
            return OBJECT
        if self.is_type_parameter:
            erased = self.bound.erasure() if self.bound is not None else OBJECT
            return replace(erased, array_depth=erased.array_depth + self.array_depth)
        if not self.arguments:
            return self
        return replace(self, arguments=())

    def _render(self, *, canonical: bool) -> str:
        if self.qualified_name == "?" and not self.is_type_parameter:
            if self.bound is None or self.wildcard is None:
                return "?"
            return f"? {self.wildcard} {self.bound._render(canonical=canonical)}"
        if canonical or self.is_type_parameter:
            text = self.qualified_name
        else:
            text = self.short_name
        if self.arguments:
            rendered = ", ".join(argument._render(canonical=canonical) for argument in self.arguments)
            text = f"{text}<{rendered}>"
        return text + "[]" * self.array_depth

    def __str__(self) -> str:
        return self.canonical_text


OBJECT = TypeRef(qualified_name="java.lang.Object")

ReferenceList = Tuple[TypeRef, ...]


@dataclass(frozen=True, slots=True)
class Substitution:
    """Binding of type-parameter names to concrete types."""

    EMPTY: ClassVar["Substitution"]

    bindings: Mapping[str, TypeRef] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "bindings", MappingProxyType(dict(self.bindings)))

    @classmethod
    def of(cls, **bindings: TypeRef) -> "Substitution":
        return cls(bindings=bindings)

    def substitute(self, type_ref: TypeRef) -> TypeRef:
        """Apply the bindings; unbound parameters are left untouched."""
        if not self.bindings:
            return type_ref
        return self._apply(type_ref)

    def _apply(self, type_ref: TypeRef) -> TypeRef:
        if type_ref.is_type_parameter:
            bound = self.bindings.get(type_ref.qualified_name)
            if bound is None:
                return type_ref
            if type_ref.array_depth:
                return bound.array(type_ref.array_depth)
            return bound
        if type_ref.wildcard is not None and type_ref.bound is not None:
            return replace(type_ref, bound=self._apply(type_ref.bound))
        if not type_ref.arguments:
            return type_ref
        return replace(type_ref, arguments=tuple(self._apply(argument) for argument in type_ref.arguments))


Substitution.EMPTY = Substitution()
