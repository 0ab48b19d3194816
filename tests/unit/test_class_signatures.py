from __future__ import annotations

import pytest

from sigfmt.formatting.classes import format_class
from sigfmt.messages import MessageBundle
from sigfmt.model import AnonymousClass, ClassElement, Method, ModifierSet, TypeRef
from sigfmt.options import FormatFlag

VERBOSE = FormatFlag.SHOW_NAME | FormatFlag.SHOW_ANONYMOUS_CLASS_VERBOSE


def test_simple_and_qualified_names(widget_model) -> None:
    assert format_class(widget_model.widget, FormatFlag.SHOW_NAME) == "Widget"
    assert format_class(widget_model.widget, FormatFlag.SHOW_NAME | FormatFlag.SHOW_FQ_NAME) == "com.example.Widget"


def test_extends_and_implements(widget_model) -> None:
    options = FormatFlag.SHOW_MODIFIERS | FormatFlag.SHOW_NAME | FormatFlag.SHOW_EXTENDS_IMPLEMENTS

    assert format_class(widget_model.widget, options) == "public Widget extends Base implements Runnable, Serializable"
    assert format_class(widget_model.widget, options | FormatFlag.SHOW_FQ_CLASS_NAMES) == (
        "public Widget extends com.example.Base implements java.lang.Runnable, java.io.Serializable"
    )


def test_empty_supertype_lists_are_omitted(widget_model) -> None:
    options = FormatFlag.SHOW_NAME | FormatFlag.SHOW_EXTENDS_IMPLEMENTS

    assert format_class(widget_model.base, options) == "Base"


def test_modifiers_after_name(widget_model) -> None:
    options = FormatFlag.SHOW_MODIFIERS | FormatFlag.MODIFIERS_AFTER | FormatFlag.SHOW_NAME

    assert format_class(widget_model.base, options) == "Base public abstract"


def test_verbose_anonymous_class_uses_resolved_base(widget_model) -> None:
    anonymous = AnonymousClass(base_class_type=TypeRef.of("com.example.Base", target=widget_model.base))

    assert format_class(anonymous, VERBOSE) == "anonymous class derived from Base"
    assert format_class(anonymous, VERBOSE | FormatFlag.SHOW_FQ_NAME) == "anonymous class derived from com.example.Base"


def test_verbose_anonymous_class_falls_back_to_presentable_text() -> None:
    anonymous = AnonymousClass(base_class_type=TypeRef.of("java.util.function.Supplier", TypeRef.of("java.lang.String")))

    assert format_class(anonymous, VERBOSE) == "anonymous class derived from Supplier<String>"


def test_anonymous_class_without_verbose_flag_has_no_name() -> None:
    anonymous = AnonymousClass(base_class_type=TypeRef.of("java.lang.Runnable"))

    assert format_class(anonymous, FormatFlag.SHOW_NAME) == ""


def test_anonymous_phrase_is_localizable() -> None:
    messages = MessageBundle(anonymous_class_derived="anonyme Klasse von {name}")
    anonymous = AnonymousClass(base_class_type=TypeRef.of("java.lang.Runnable"))

    assert format_class(anonymous, VERBOSE, messages=messages) == "anonyme Klasse von Runnable"


def test_message_template_requires_placeholder() -> None:
    with pytest.raises(ValueError):
        MessageBundle(anonymous_class_derived="anonymous class")


def test_local_class_qualified_name_falls_back() -> None:
    method = Method(name="build", return_type=TypeRef.of("void"))
    local = method.add_body_class(ClassElement(name="Helper", modifiers=ModifierSet.of()))

    options = FormatFlag.SHOW_MODIFIERS | FormatFlag.SHOW_REDUNDANT_MODIFIERS | FormatFlag.SHOW_NAME | FormatFlag.SHOW_FQ_NAME
    assert format_class(local, options) == "local Helper"


def test_interface_never_shows_abstract() -> None:
    shape = ClassElement(
        name="Shape",
        qualified_name="com.example.Shape",
        is_interface=True,
        modifiers=ModifierSet.of("public", implicit=["abstract"]),
        extends=(TypeRef.of("java.lang.Comparable", TypeRef.of("com.example.Shape")),),
    )
    options = (
        FormatFlag.SHOW_MODIFIERS
        | FormatFlag.SHOW_REDUNDANT_MODIFIERS
        | FormatFlag.SHOW_NAME
        | FormatFlag.SHOW_EXTENDS_IMPLEMENTS
    )

    assert format_class(shape, options) == "public Shape extends Comparable<Shape>"


@pytest.mark.parametrize(
    "flags",
    [0, FormatFlag.SHOW_FQ_NAME, FormatFlag.SHOW_ANONYMOUS_CLASS_VERBOSE, FormatFlag.MODIFIERS_AFTER],
)
def test_no_content_flags_render_nothing(widget_model, flags: int) -> None:
    anonymous = AnonymousClass(base_class_type=TypeRef.of("java.lang.Runnable"))

    assert format_class(widget_model.widget, flags) == ""
    assert format_class(anonymous, flags) == ""
