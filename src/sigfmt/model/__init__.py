"""Read-only code model consumed by the signature formatter."""

from .elements import (
    AnonymousClass,
    ClassElement,
    ClassInitializer,
    CodeElement,
    Field,
    Method,
    Parameter,
    Variable,
)
from .modifiers import Modifier, ModifierSet
from .types import OBJECT, PRIMITIVE_NAMES, ReferenceList, Substitution, TypeRef

__all__ = [
    "AnonymousClass",
    "ClassElement",
    "ClassInitializer",
    "CodeElement",
    "Field",
    "Method",
    "Modifier",
    "ModifierSet",
    "OBJECT",
    "PRIMITIVE_NAMES",
    "Parameter",
    "ReferenceList",
    "Substitution",
    "TypeRef",
    "Variable",
]
