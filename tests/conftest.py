from __future__ import annotations

import sys
import textwrap
from dataclasses import dataclass
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sigfmt.model import (  # noqa: E402
    ClassElement,
    Field,
    Method,
    ModifierSet,
    Parameter,
    TypeRef,
)

STRING = TypeRef.of("java.lang.String")
INT = TypeRef.of("int")
VOID = TypeRef.of("void")


@dataclass(slots=True)
class WidgetModel:
    """Programmatic model of ``com.example.Widget`` and its members."""

    base: ClassElement
    widget: ClassElement
    count: Field
    constructor: Method
    run: Method


@pytest.fixture()
def widget_model() -> WidgetModel:
    """Build ``public class Widget extends Base implements Runnable, Serializable``."""

    base = ClassElement(
        name="Base",
        qualified_name="com.example.Base",
        modifiers=ModifierSet.of("public", "abstract"),
    )
    widget = ClassElement(
        name="Widget",
        qualified_name="com.example.Widget",
        modifiers=ModifierSet.of("public"),
        extends=(TypeRef.of("com.example.Base", target=base),),
        implements=(TypeRef.of("java.lang.Runnable"), TypeRef.of("java.io.Serializable")),
    )
    count = widget.add_member(
        Field(
            name="COUNT",
            type=INT,
            modifiers=ModifierSet.of("public", "static", "final"),
            initializer="1+\n2",
        )
    )
    constructor = widget.add_member(
        Method(
            name="Widget",
            modifiers=ModifierSet.of("public"),
            parameters=[
                Parameter(name="a", type=STRING),
                Parameter(name="b", type=STRING),
                Parameter(name="c", type=INT),
            ],
        )
    )
    run = widget.add_member(
        Method(
            name="run",
            return_type=VOID,
            modifiers=ModifierSet.of("public"),
            parameters=[Parameter(name="a", type=STRING), Parameter(name="b", type=INT)],
        )
    )
    return WidgetModel(base=base, widget=widget, count=count, constructor=constructor, run=run)


SAMPLE_MODEL = textwrap.dedent(
    """
    package: com.example
    classes:
      - name: Base
        modifiers: [public, abstract]
      - kind: interface
        name: Shape
        modifiers: [public]
        members:
          - kind: method
            name: area
            returns: double
          - kind: field
            name: SIDES
            type: int
            initializer: "4"
      - name: Widget
        modifiers: [public]
        extends: [Base]
        implements: [Runnable, java.io.Serializable]
        members:
          - kind: field
            name: COUNT
            type: int
            modifiers: [public, static, final]
            initializer: "1+\\n2"
          - kind: field
            name: listener
            type: Runnable
            modifiers: [private]
            initializer_class:
              kind: anonymous
              base: Base
          - kind: constructor
            name: Widget
            modifiers: [public]
            parameters:
              - {name: label, type: String}
          - kind: method
            name: run
            returns: void
            modifiers: [public]
            parameters:
              - {name: a, type: String}
              - {name: b, type: int}
          - kind: method
            name: first
            returns: T
            type_parameters: ["T extends Number"]
            parameters:
              - {name: values, type: "java.util.List<? extends T>"}
              - {name: rest, type: "T..."}
            throws: [java.io.IOException]
            classes:
              - name: Helper
              - kind: anonymous
                base: Runnable
    """
).lstrip()


@pytest.fixture()
def sample_model_path(tmp_path: Path) -> Path:
    """Write the sample YAML model to a temporary file."""

    path = tmp_path / "model.yaml"
    path.write_text(SAMPLE_MODEL, encoding="utf-8")
    return path
