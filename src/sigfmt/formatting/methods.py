"""Signatures for methods and constructors."""

from __future__ import annotations

import logging
from typing import Optional

from ..messages import DEFAULT_MESSAGES, MessageBundle
from ..model.elements import Method
from ..model.types import Substitution
from ..options import MAX_PARAMS_TO_SHOW, FormatOptions, OptionsLike
from .fallbacks import class_display_name
from .modifiers import format_modifiers
from .segments import SignatureBuilder
from .types import format_reference_list, format_type
from .variables import format_variable

__all__ = ["format_method", "format_parameter_list"]

LOGGER = logging.getLogger(__name__)

PARAMETER_OVERFLOW_MARK = ", ..."


def format_method(
    method: Method,
    substitution: Optional[Substitution],
    options: OptionsLike,
    parameter_options: OptionsLike,
    max_parameters: int = MAX_PARAMS_TO_SHOW,
    *,
    messages: MessageBundle = DEFAULT_MESSAGES,
) -> str:
    """Render ``method`` as ``[modifiers] [type] [Class.]name(params) [throws ...]``.

    ``parameter_options`` are applied to each parameter independently of
    ``options``. At most ``max_parameters`` parameters are listed; any
    remainder is summarised as ``", ..."``.
    """
    opts = FormatOptions.coerce(options)
    builder = SignatureBuilder()

    if opts.show_modifiers and not opts.modifiers_after:
        builder.segment(format_modifiers(method, opts, messages=messages))
    if opts.show_type and not opts.type_after and method.return_type is not None:
        builder.segment(format_type(method.return_type, opts, substitution))

    qualifier = ""
    if opts.show_containing_class:
        containing = method.containing_class
        if containing is not None:
            class_name = class_display_name(containing, opts.show_fq_name)
            if class_name is not None:
                qualifier = f"{class_name}."
    name = method.name if opts.show_name and method.name is not None else ""
    builder.segment(qualifier + name)

    if opts.show_parameters:
        builder.attach("(")
        builder.attach(
            format_parameter_list(
                method,
                parameter_options,
                substitution,
                max_parameters,
                messages=messages,
            )
        )
        builder.attach(")")

    if opts.show_type and opts.type_after and method.return_type is not None:
        if builder:
            builder.attach(":")
        builder.attach(format_type(method.return_type, opts, substitution))
    if opts.show_modifiers and opts.modifiers_after:
        builder.segment(format_modifiers(method, opts, messages=messages))

    if opts.show_throws:
        throws_text = format_reference_list(method.throws, opts)
        if throws_text:
            builder.segment(f"throws {throws_text}")
    return builder.build()


def format_parameter_list(
    method: Method,
    parameter_options: OptionsLike,
    substitution: Optional[Substitution] = None,
    max_parameters: int = MAX_PARAMS_TO_SHOW,
    *,
    messages: MessageBundle = DEFAULT_MESSAGES,
) -> str:
    """Render the parameters of ``method`` without the enclosing parentheses."""
    param_opts = FormatOptions.coerce(parameter_options)
    limit = max(max_parameters, 0)
    shown = method.parameters[:limit]
    text = ", ".join(
        format_variable(parameter, param_opts, substitution, messages=messages)
        for parameter in shown
    )
    if len(method.parameters) > limit:
        LOGGER.debug(
            "Truncated parameter list of %s after %d of %d parameter(s)",
            method.name,
            limit,
            len(method.parameters),
        )
        text += PARAMETER_OVERFLOW_MARK
    return text
