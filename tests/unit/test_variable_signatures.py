from __future__ import annotations

import pytest

from sigfmt.formatting.variables import format_initializer, format_variable
from sigfmt.model import AnonymousClass, ClassElement, Field, Method, ModifierSet, Parameter, Substitution, TypeRef
from sigfmt.options import FormatFlag

INT = TypeRef.of("int")
STRING = TypeRef.of("java.lang.String")

TOOLTIP = FormatFlag.SHOW_MODIFIERS | FormatFlag.SHOW_TYPE | FormatFlag.SHOW_NAME | FormatFlag.SHOW_INITIALIZER


def _owned_field(name: str = "count", **kwargs: object) -> Field:
    owner = ClassElement(name="Widget", qualified_name="com.example.Widget", modifiers=ModifierSet.of("public"))
    return owner.add_member(Field(name=name, type=INT, **kwargs))  # type: ignore[arg-type]


def test_constant_with_multiline_initializer(widget_model) -> None:
    assert format_variable(widget_model.count, TOOLTIP) == "public static final int COUNT = 1+ ..."


def test_single_line_initializer_is_verbatim() -> None:
    field = _owned_field("LIMIT", initializer="Integer.MAX_VALUE / 2", modifiers=ModifierSet.of("private"))

    assert format_variable(field, TOOLTIP) == "private int LIMIT = Integer.MAX_VALUE / 2"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("42", "42"),
        ("a +\nb", "a + ..."),
        ("x\ry", "x ..."),
        ("first\r\nsecond\nthird", "first ..."),
        ("one\ntwo\rthree", "one ..."),
        ("\nleading", " ..."),
    ],
)
def test_initializer_is_cut_at_first_line_break(source: str, expected: str) -> None:
    assert format_initializer(source) == expected


def test_initializer_flag_without_initializer_is_noop() -> None:
    parameter = Parameter(name="value", type=STRING)

    assert format_variable(parameter, FormatFlag.SHOW_NAME | FormatFlag.SHOW_INITIALIZER) == "value"


def test_type_after_name_uses_colon() -> None:
    field = _owned_field()

    assert format_variable(field, FormatFlag.SHOW_NAME | FormatFlag.SHOW_TYPE | FormatFlag.TYPE_AFTER) == "count:int"


def test_type_after_without_name_has_no_colon() -> None:
    field = _owned_field(modifiers=ModifierSet.of("private"))

    options = FormatFlag.SHOW_MODIFIERS | FormatFlag.SHOW_TYPE | FormatFlag.TYPE_AFTER
    assert format_variable(field, options) == "private int"


def test_modifiers_after_name() -> None:
    field = _owned_field(modifiers=ModifierSet.of("private", "final"))

    options = FormatFlag.SHOW_NAME | FormatFlag.SHOW_MODIFIERS | FormatFlag.MODIFIERS_AFTER
    assert format_variable(field, options) == "count private final"


def test_containing_class_prefix_for_fields() -> None:
    field = _owned_field()

    assert format_variable(field, FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS) == "Widget.count"
    assert (
        format_variable(field, FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS | FormatFlag.SHOW_FQ_NAME)
        == "com.example.Widget.count"
    )
    assert (
        format_variable(field, FormatFlag.SHOW_TYPE | FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS)
        == "int Widget.count"
    )


def test_containing_class_falls_back_to_simple_name() -> None:
    method = Method(name="build", return_type=TypeRef.of("void"))
    local = method.add_body_class(ClassElement(name="Local"))
    field = local.add_member(Field(name="x", type=INT))

    options = FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS | FormatFlag.SHOW_FQ_NAME
    assert format_variable(field, options) == "Local.x"


def test_anonymous_containing_class_is_omitted() -> None:
    anonymous = AnonymousClass(base_class_type=TypeRef.of("java.lang.Runnable"))
    field = anonymous.add_member(Field(name="x", type=INT))

    assert format_variable(field, FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS) == "x"


def test_containing_class_flag_ignored_for_parameters() -> None:
    method = Method(name="run", return_type=TypeRef.of("void"), parameters=[Parameter(name="a", type=STRING)])
    ClassElement(name="Widget", members=[method])

    options = FormatFlag.SHOW_TYPE | FormatFlag.SHOW_NAME | FormatFlag.SHOW_CONTAINING_CLASS
    assert format_variable(method.parameters[0], options) == "String a"


def test_nameless_parameter_renders_type_only() -> None:
    parameter = Parameter(type=STRING)

    assert format_variable(parameter, FormatFlag.SHOW_NAME | FormatFlag.SHOW_TYPE) == "String"


def test_substitution_applies_to_variable_type() -> None:
    parameter = Parameter(name="item", type=TypeRef.parameter("T"))

    options = FormatFlag.SHOW_TYPE | FormatFlag.SHOW_NAME | FormatFlag.SHOW_FQ_CLASS_NAMES
    assert format_variable(parameter, options, Substitution.of(T=STRING)) == "java.lang.String item"


def test_no_content_flags_render_nothing(widget_model) -> None:
    assert format_variable(widget_model.count, 0) == ""
