"""Structured code elements consumed by the formatter.

The elements form a tree: classes own members, methods own parameters and
the classes declared in their bodies, variables may own the anonymous class
created by their initializer. Attaching a child sets its ``parent`` link so
that ancestor lookups work from any node.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Type, TypeVar

from .modifiers import ModifierSet
from .types import TypeRef

__all__ = [
    "AnonymousClass",
    "ClassElement",
    "ClassInitializer",
    "CodeElement",
    "Field",
    "Method",
    "Parameter",
    "Variable",
]

E = TypeVar("E", bound="CodeElement")


@dataclass(eq=False, kw_only=True)
class CodeElement:
    """Common base for every node of the code model."""

    name: Optional[str] = None
    modifiers: Optional[ModifierSet] = None
    parent: Optional["CodeElement"] = field(default=None, repr=False)

    def children(self) -> Iterator["CodeElement"]:
        return iter(())

    def ancestors(self) -> Iterator["CodeElement"]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def ancestor_of_type(self, kind: Type[E]) -> Optional[E]:
        """Return the nearest ancestor that is an instance of ``kind``."""
        for node in self.ancestors():
            if isinstance(node, kind):
                return node
        return None

    def _adopt(self, children: Iterable[Optional["CodeElement"]]) -> None:
        for child in children:
            if child is not None:
                child.parent = self


@dataclass(eq=False, kw_only=True)
class Variable(CodeElement):
    """A local variable; also the base of fields and parameters."""

    type: Optional[TypeRef] = None
    initializer: Optional[str] = None
    initializer_class: Optional["AnonymousClass"] = None

    def __post_init__(self) -> None:
        self._adopt([self.initializer_class])

    def children(self) -> Iterator[CodeElement]:
        if self.initializer_class is not None:
            yield self.initializer_class


@dataclass(eq=False, kw_only=True)
class Field(Variable):
    """A variable declared as a class member."""

    @property
    def containing_class(self) -> Optional["ClassElement"]:
        return self.ancestor_of_type(ClassElement)


@dataclass(eq=False, kw_only=True)
class Parameter(Variable):
    """A parameter; its declaration scope is the element that owns it."""

    @property
    def declaration_scope(self) -> Optional[CodeElement]:
        return self.parent


@dataclass(eq=False, kw_only=True)
class Method(CodeElement):
    """A method or constructor (``return_type`` is ``None`` for constructors)."""

    return_type: Optional[TypeRef] = None
    parameters: List[Parameter] = field(default_factory=list)
    throws: Tuple[TypeRef, ...] = ()
    type_parameters: Tuple[TypeRef, ...] = ()
    body_classes: List["ClassElement"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.throws = tuple(self.throws)
        self._adopt(self.parameters)
        self._adopt(self.body_classes)

    @property
    def containing_class(self) -> Optional["ClassElement"]:
        return self.ancestor_of_type(ClassElement)

    def add_parameter(self, parameter: Parameter) -> Parameter:
        self.parameters.append(parameter)
        parameter.parent = self
        return parameter

    def add_body_class(self, declared: "ClassElement") -> "ClassElement":
        self.body_classes.append(declared)
        declared.parent = self
        return declared

    def parameter_index(self, parameter: Parameter) -> int:
        for index, candidate in enumerate(self.parameters):
            if candidate is parameter:
                return index
        raise ValueError(f"Parameter '{parameter.name}' is not declared by method '{self.name}'")

    def children(self) -> Iterator[CodeElement]:
        yield from self.parameters
        yield from self.body_classes


@dataclass(eq=False, kw_only=True)
class ClassInitializer(CodeElement):
    """An instance or static initializer block."""

    body_classes: List["ClassElement"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._adopt(self.body_classes)

    def children(self) -> Iterator[CodeElement]:
        yield from self.body_classes


@dataclass(eq=False, kw_only=True)
class ClassElement(CodeElement):
    """A class or interface declaration."""

    qualified_name: Optional[str] = None
    is_interface: bool = False
    extends: Tuple[TypeRef, ...] = ()
    implements: Tuple[TypeRef, ...] = ()
    type_parameters: Tuple[TypeRef, ...] = ()
    members: List[CodeElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.extends = tuple(self.extends)
        self.implements = tuple(self.implements)
        self._adopt(self.members)

    @property
    def is_local(self) -> bool:
        """True for a named class declared inside a method or initializer body."""
        return isinstance(self.parent, (Method, ClassInitializer))

    @property
    def containing_class(self) -> Optional["ClassElement"]:
        return self.ancestor_of_type(ClassElement)

    def add_member(self, member: E) -> E:
        self.members.append(member)
        member.parent = self
        return member

    def children(self) -> Iterator[CodeElement]:
        yield from self.members


@dataclass(eq=False, kw_only=True)
class AnonymousClass(ClassElement):
    """An anonymous class body; ``base_class_type`` is the type it derives from."""

    base_class_type: Optional[TypeRef] = None

    @property
    def is_local(self) -> bool:
        return False
