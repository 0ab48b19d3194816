"""Signatures for variables, fields and parameters."""

from __future__ import annotations

from typing import Optional

from ..messages import DEFAULT_MESSAGES, MessageBundle
from ..model.elements import Field, Variable
from ..model.types import Substitution
from ..options import FormatOptions, OptionsLike
from .fallbacks import class_display_name
from .modifiers import format_modifiers
from .segments import SignatureBuilder
from .types import format_type

__all__ = ["format_initializer", "format_variable"]

TRUNCATION_MARK = " ..."


def format_variable(
    variable: Variable,
    options: OptionsLike,
    substitution: Optional[Substitution] = None,
    *,
    messages: MessageBundle = DEFAULT_MESSAGES,
) -> str:
    opts = FormatOptions.coerce(options)
    builder = SignatureBuilder()

    if opts.show_modifiers and not opts.modifiers_after:
        builder.segment(format_modifiers(variable, opts, messages=messages))
    if opts.show_type and not opts.type_after and variable.type is not None:
        builder.segment(format_type(variable.type, opts, substitution))

    name_shown = opts.show_name and variable.name is not None
    qualifier = ""
    if isinstance(variable, Field) and opts.show_containing_class:
        containing = variable.containing_class
        if containing is not None:
            class_name = class_display_name(containing, opts.show_fq_name)
            if class_name is not None:
                qualifier = f"{class_name}."
    builder.segment(qualifier + (variable.name if name_shown else ""))

    if opts.show_type and opts.type_after and variable.type is not None:
        rendered = format_type(variable.type, opts, substitution)
        if name_shown:
            builder.attach(":").attach(rendered)
        else:
            builder.segment(rendered)
    if opts.show_modifiers and opts.modifiers_after:
        builder.segment(format_modifiers(variable, opts, messages=messages))

    if opts.show_initializer and variable.initializer is not None:
        builder.segment(f"= {format_initializer(variable.initializer)}")
    return builder.build()


def format_initializer(text: str) -> str:
    """Cut ``text`` at its first line break, marking the cut with ``" ..."``."""
    breaks = [index for index in (text.find("\n"), text.find("\r")) if index >= 0]
    if not breaks:
        return text
    return text[: min(breaks)] + TRUNCATION_MARK
