"""Signatures for classes, interfaces and anonymous classes."""

from __future__ import annotations

import logging

from ..messages import DEFAULT_MESSAGES, MessageBundle
from ..model.elements import AnonymousClass, ClassElement
from ..options import FormatOptions, OptionsLike
from .fallbacks import class_display_name
from .modifiers import format_modifiers
from .segments import SignatureBuilder
from .types import format_reference_list

__all__ = ["format_class"]

LOGGER = logging.getLogger(__name__)


def format_class(
    cls: ClassElement,
    options: OptionsLike,
    *,
    messages: MessageBundle = DEFAULT_MESSAGES,
) -> str:
    opts = FormatOptions.coerce(options)
    builder = SignatureBuilder()

    if opts.show_modifiers and not opts.modifiers_after:
        builder.segment(format_modifiers(cls, opts, messages=messages))

    if opts.show_name:
        if isinstance(cls, AnonymousClass) and opts.show_anonymous_class_verbose:
            builder.segment(_anonymous_description(cls, opts, messages))
        else:
            builder.segment(class_display_name(cls, opts.show_fq_name))

    if opts.show_modifiers and opts.modifiers_after:
        builder.segment(format_modifiers(cls, opts, messages=messages))

    if opts.show_extends_implements:
        extends_text = format_reference_list(cls.extends, opts)
        if extends_text:
            builder.segment(f"extends {extends_text}")
        implements_text = format_reference_list(cls.implements, opts)
        if implements_text:
            builder.segment(f"implements {implements_text}")
    return builder.build()


def _anonymous_description(cls: AnonymousClass, opts: FormatOptions, messages: MessageBundle) -> str:
    reference = cls.base_class_type
    if reference is None:
        LOGGER.debug("Anonymous class has no base type reference")
        return messages.anonymous_class_derived_display("")
    base = reference.resolve()
    if base is None:
        LOGGER.debug("Unresolved anonymous base type %s; using its presentable text", reference.canonical_text)
        name = reference.presentable_text
    else:
        name = format_class(base, opts, messages=messages)
    return messages.anonymous_class_derived_display(name)
