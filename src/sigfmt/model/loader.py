"""Build a code model from a YAML (or already-parsed mapping) description.

The document lists classes with their members in declaration order::

    package: com.example
    classes:
      - name: Widget
        modifiers: [public]
        extends: [Base]
        members:
          - kind: field
            name: COUNT
            type: int
            modifiers: [public, static, final]
            initializer: "1"
          - kind: method
            name: run
            returns: void
            parameters:
              - {name: task, type: "java.util.List<T>"}

Type strings use source syntax (``Map<K, ? extends Number>[]``). Simple
names resolve, in order, to type parameters in scope, primitives, loaded
classes and ``java.lang`` types.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field as SchemaField, ValidationError

from ..errors import ModelLoadError
from .elements import (
    AnonymousClass,
    ClassElement,
    ClassInitializer,
    CodeElement,
    Field,
    Method,
    Parameter,
)
from .modifiers import ModifierSet
from .types import PRIMITIVE_NAMES, TypeRef

__all__ = ["LoadedModel", "build_model", "load_model", "parse_type"]

LOGGER = logging.getLogger(__name__)

JAVA_LANG_TYPES = frozenset(
    {
        "Boolean",
        "Byte",
        "Character",
        "Class",
        "Double",
        "Enum",
        "Error",
        "Exception",
        "Float",
        "Integer",
        "Iterable",
        "Long",
        "Number",
        "Object",
        "Runnable",
        "RuntimeException",
        "Short",
        "String",
        "StringBuilder",
        "Thread",
        "Throwable",
        "Void",
    }
)

_TOKEN = re.compile(r"\s*(\.\.\.|\[\]|[<>,?]|[A-Za-z_$][\w$]*(?:\s*\.\s*[A-Za-z_$][\w$]*)*)")


class _Spec(BaseModel):
    model_config = ConfigDict(extra="forbid")


class ParameterSpec(_Spec):
    name: Optional[str] = None
    type: str
    modifiers: List[str] = SchemaField(default_factory=list)


class FieldSpec(_Spec):
    kind: Literal["field"]
    name: str
    type: str
    modifiers: List[str] = SchemaField(default_factory=list)
    implicit_modifiers: List[str] = SchemaField(default_factory=list)
    initializer: Optional[str] = None
    initializer_class: Optional["ClassSpec"] = None


class MethodSpec(_Spec):
    kind: Literal["method", "constructor"]
    name: str
    returns: Optional[str] = None
    modifiers: List[str] = SchemaField(default_factory=list)
    implicit_modifiers: List[str] = SchemaField(default_factory=list)
    type_parameters: List[str] = SchemaField(default_factory=list)
    parameters: List[ParameterSpec] = SchemaField(default_factory=list)
    throws: List[str] = SchemaField(default_factory=list)
    classes: List["ClassSpec"] = SchemaField(default_factory=list)


class InitializerSpec(_Spec):
    kind: Literal["initializer"]
    modifiers: List[str] = SchemaField(default_factory=list)
    classes: List["ClassSpec"] = SchemaField(default_factory=list)


class ClassSpec(_Spec):
    kind: Literal["class", "interface", "anonymous"] = "class"
    name: Optional[str] = None
    qualified_name: Optional[str] = None
    base: Optional[str] = None
    modifiers: Optional[List[str]] = SchemaField(default_factory=list)
    implicit_modifiers: List[str] = SchemaField(default_factory=list)
    type_parameters: List[str] = SchemaField(default_factory=list)
    extends: List[str] = SchemaField(default_factory=list)
    implements: List[str] = SchemaField(default_factory=list)
    members: List["MemberSpec"] = SchemaField(default_factory=list)


MemberSpec = Annotated[
    Union[FieldSpec, MethodSpec, InitializerSpec, ClassSpec],
    SchemaField(discriminator="kind"),
]


class ModelSpec(_Spec):
    package: Optional[str] = None
    classes: List[ClassSpec] = SchemaField(default_factory=list)


for _model in (FieldSpec, MethodSpec, InitializerSpec, ClassSpec, ModelSpec):
    _model.model_rebuild()


@dataclass(slots=True)
class LoadedModel:
    """Top-level classes of a loaded model plus a qualified-name registry."""

    classes: List[ClassElement]
    registry: Dict[str, ClassElement] = field(default_factory=dict)

    def find_class(self, qualified_name: str) -> Optional[ClassElement]:
        return self.registry.get(qualified_name)

    def iter_elements(self) -> Iterator[CodeElement]:
        """Yield every element depth-first in declaration order."""
        pending: List[CodeElement] = list(reversed(self.classes))
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(list(node.children())))


Scope = Tuple[Mapping[str, TypeRef], ...]


class _Builder:
    def __init__(self, package: Optional[str]) -> None:
        self._package = package
        self._skeletons: Dict[int, ClassElement] = {}
        self.registry: Dict[str, ClassElement] = {}
        self._simple_names: Dict[str, List[ClassElement]] = {}

    def declare(
        self,
        spec: ClassSpec,
        outer_qualified: Optional[str],
        local: bool,
        in_interface: bool = False,
        member: bool = False,
    ) -> None:
        """First pass: create class shells so type references can resolve to them."""
        qualified: Optional[str] = spec.qualified_name
        if qualified is None and spec.kind != "anonymous" and spec.name and not local:
            prefix = outer_qualified if outer_qualified is not None else self._package
            qualified = f"{prefix}.{spec.name}" if prefix else spec.name
        cls_type = AnonymousClass if spec.kind == "anonymous" else ClassElement
        element = cls_type(
            name=None if spec.kind == "anonymous" else spec.name,
            qualified_name=None if spec.kind == "anonymous" else qualified,
            is_interface=spec.kind == "interface",
            modifiers=_class_modifiers(spec, in_interface, member),
        )
        self._skeletons[id(spec)] = element
        if element.qualified_name:
            self.registry[element.qualified_name] = element
        if element.name:
            self._simple_names.setdefault(element.name, []).append(element)

        for member in spec.members:
            if isinstance(member, ClassSpec):
                self.declare(
                    member,
                    element.qualified_name,
                    local or spec.kind == "anonymous",
                    in_interface=spec.kind == "interface",
                    member=True,
                )
            elif isinstance(member, FieldSpec) and member.initializer_class is not None:
                self.declare(member.initializer_class, element.qualified_name, True)
            elif isinstance(member, (MethodSpec, InitializerSpec)):
                for nested in member.classes:
                    self.declare(nested, element.qualified_name, True)

    def build_class(self, spec: ClassSpec, scope: Scope) -> ClassElement:
        element = self._skeletons[id(spec)]
        type_parameters, scope = self._type_parameters(spec.type_parameters, scope)
        element.type_parameters = type_parameters
        element.extends = tuple(self.resolve(text, scope) for text in spec.extends)
        element.implements = tuple(self.resolve(text, scope) for text in spec.implements)
        if isinstance(element, AnonymousClass):
            if spec.base is None:
                raise ModelLoadError("Anonymous class requires a 'base' type")
            element.base_class_type = self.resolve(spec.base, scope)
        for member in spec.members:
            element.add_member(self._build_member(member, scope, element.is_interface))
        return element

    def _build_member(self, spec: Any, scope: Scope, in_interface: bool) -> CodeElement:
        if isinstance(spec, ClassSpec):
            return self.build_class(spec, scope)
        if isinstance(spec, FieldSpec):
            initializer_class = None
            if spec.initializer_class is not None:
                built = self.build_class(spec.initializer_class, scope)
                if not isinstance(built, AnonymousClass):
                    raise ModelLoadError(f"Initializer class of field '{spec.name}' must be anonymous")
                initializer_class = built
            return Field(
                name=spec.name,
                type=self.resolve(spec.type, scope),
                modifiers=_modifier_set(
                    spec.modifiers,
                    _with_interface_defaults(spec.implicit_modifiers, spec.modifiers, in_interface, _INTERFACE_FIELD),
                ),
                initializer=spec.initializer,
                initializer_class=initializer_class,
            )
        if isinstance(spec, MethodSpec):
            type_parameters, method_scope = self._type_parameters(spec.type_parameters, scope)
            if spec.kind == "constructor" and spec.returns is not None:
                raise ModelLoadError(f"Constructor '{spec.name}' cannot declare a return type")
            return Method(
                name=spec.name,
                return_type=self.resolve(spec.returns, method_scope) if spec.returns else None,
                modifiers=_modifier_set(
                    spec.modifiers,
                    _with_interface_defaults(
                        spec.implicit_modifiers,
                        spec.modifiers,
                        in_interface,
                        _interface_method_defaults(spec),
                    ),
                ),
                type_parameters=type_parameters,
                parameters=[
                    Parameter(
                        name=parameter.name,
                        type=self.resolve(parameter.type, method_scope),
                        modifiers=_modifier_set(parameter.modifiers, ()),
                    )
                    for parameter in spec.parameters
                ],
                throws=tuple(self.resolve(text, method_scope) for text in spec.throws),
                body_classes=[self.build_class(nested, method_scope) for nested in spec.classes],
            )
        return ClassInitializer(
            modifiers=_modifier_set(spec.modifiers, ()),
            body_classes=[self.build_class(nested, scope) for nested in spec.classes],
        )

    def _type_parameters(self, declarations: List[str], scope: Scope) -> Tuple[Tuple[TypeRef, ...], Scope]:
        if not declarations:
            return (), scope
        declared: Dict[str, TypeRef] = {}
        inner_scope: Scope = (declared, *scope)
        parameters: List[TypeRef] = []
        for declaration in declarations:
            name, _, bound_text = declaration.partition(" extends ")
            name = name.strip()
            bound = self.resolve(bound_text, inner_scope) if bound_text.strip() else None
            parameter = TypeRef.parameter(name, bound)
            declared[name] = parameter
            parameters.append(parameter)
        return tuple(parameters), inner_scope

    def resolve(self, text: str, scope: Scope) -> TypeRef:
        return parse_type(text, lambda name: self._lookup(name, scope))

    def _lookup(self, name: str, scope: Scope) -> TypeRef:
        if "." not in name:
            for frame in scope:
                if name in frame:
                    return frame[name]
            if name in PRIMITIVE_NAMES:
                return TypeRef.of(name)
        target = self.registry.get(name)
        if target is None and "." not in name:
            candidates = self._simple_names.get(name, [])
            named = [candidate for candidate in candidates if candidate.qualified_name]
            if len(named) == 1:
                target = named[0]
            elif name in JAVA_LANG_TYPES:
                return TypeRef.of(f"java.lang.{name}")
        if target is None:
            return TypeRef.of(name)
        return TypeRef.of(target.qualified_name or name, target=target)


def parse_type(text: str, lookup: Any = None) -> TypeRef:
    """Parse a source-syntax type string.

    ``lookup`` maps a (possibly dotted) name to a base ``TypeRef``; by
    default names are taken literally.
    """
    tokens = _tokenize(text)
    resolver = lookup or (lambda name: TypeRef.of(name))
    position, parsed = _parse_type(tokens, 0, resolver, text)
    if position != len(tokens):
        raise ModelLoadError(f"Unexpected '{tokens[position]}' in type '{text}'")
    return parsed


def _tokenize(text: str) -> List[str]:
    tokens: List[str] = []
    position = 0
    stripped = text.rstrip()
    while position < len(stripped):
        match = _TOKEN.match(stripped, position)
        if match is None:
            raise ModelLoadError(f"Invalid type syntax: '{text}'")
        tokens.append(re.sub(r"\s+", "", match.group(1)))
        position = match.end()
    if not tokens:
        raise ModelLoadError("Empty type string")
    return tokens


def _parse_type(tokens: List[str], position: int, resolver: Any, text: str) -> Tuple[int, TypeRef]:
    if position >= len(tokens):
        raise ModelLoadError(f"Truncated type '{text}'")
    token = tokens[position]
    if token == "?":
        position += 1
        if position < len(tokens) and tokens[position] in ("extends", "super"):
            kind = tokens[position]
            position, bound = _parse_type(tokens, position + 1, resolver, text)
            return position, TypeRef.wildcard_of(bound, kind)  # type: ignore[arg-type]
        return position, TypeRef.wildcard_of()
    if not (token[0].isalpha() or token[0] in "_$"):
        raise ModelLoadError(f"Expected a type name in '{text}', found '{token}'")

    base = resolver(token)
    position += 1
    if position < len(tokens) and tokens[position] == "<":
        arguments: List[TypeRef] = []
        position += 1
        while True:
            position, argument = _parse_type(tokens, position, resolver, text)
            arguments.append(argument)
            if position >= len(tokens):
                raise ModelLoadError(f"Unclosed '<' in type '{text}'")
            if tokens[position] == ",":
                position += 1
                continue
            if tokens[position] == ">":
                position += 1
                break
            raise ModelLoadError(f"Unexpected '{tokens[position]}' in type '{text}'")
        base = TypeRef(
            qualified_name=base.qualified_name,
            arguments=tuple(arguments),
            target=base.target,
        )
    depth = 0
    while position < len(tokens) and tokens[position] in ("[]", "..."):
        depth += 1
        position += 1
    return position, base.array(depth) if depth else base


_INTERFACE_FIELD = ("public", "static", "final")
_INTERFACE_CLASS = ("public", "static")


def _interface_method_defaults(spec: MethodSpec) -> Tuple[str, ...]:
    if "private" in spec.modifiers:
        return ()
    if "static" in spec.modifiers:
        return ("public",)
    return ("public", "abstract")


def _with_interface_defaults(
    implicit: List[str],
    explicit: Optional[List[str]],
    in_interface: bool,
    defaults: Tuple[str, ...],
) -> List[str]:
    """Add the modifiers an interface implies for its members."""
    if not in_interface:
        return list(implicit)
    written = set(explicit or ())
    merged = list(implicit)
    for modifier in defaults:
        if modifier == "public" and written & {"protected", "private"}:
            continue
        if modifier not in written and modifier not in merged:
            merged.append(modifier)
    return merged


def _class_modifiers(spec: ClassSpec, in_interface: bool, member: bool = False) -> Optional[ModifierSet]:
    if spec.kind == "anonymous" and not spec.modifiers:
        return None
    implicit = list(spec.implicit_modifiers)
    if spec.kind == "interface" and "abstract" not in implicit:
        implicit.append("abstract")
    # member interfaces are static
    if spec.kind == "interface" and member and "static" not in implicit:
        implicit.append("static")
    return _modifier_set(
        spec.modifiers,
        _with_interface_defaults(implicit, spec.modifiers, in_interface, _INTERFACE_CLASS),
    )


def _modifier_set(explicit: Optional[List[str]], implicit: Any) -> Optional[ModifierSet]:
    if explicit is None:
        return None
    try:
        return ModifierSet.of(*explicit, implicit=implicit or ())
    except ValueError as error:
        raise ModelLoadError(str(error)) from error


def build_model(document: Mapping[str, Any]) -> LoadedModel:
    """Validate ``document`` and build the element tree it describes."""
    try:
        spec = ModelSpec.model_validate(dict(document))
    except ValidationError as error:
        raise ModelLoadError(f"Invalid model document: {error}") from error

    builder = _Builder(spec.package)
    for class_spec in spec.classes:
        builder.declare(class_spec, None, False)
    classes = [builder.build_class(class_spec, ()) for class_spec in spec.classes]
    LOGGER.debug("Built model with %d top-level class(es)", len(classes))
    return LoadedModel(classes=classes, registry=dict(builder.registry))


def load_model(path: Path) -> LoadedModel:
    if not path.exists():
        raise ModelLoadError(f"Model file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            document = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise ModelLoadError(f"Failed to parse model: {error}") from error
    if not isinstance(document, dict):
        raise ModelLoadError("Model document must be a mapping at the top level.")
    return build_model(document)
