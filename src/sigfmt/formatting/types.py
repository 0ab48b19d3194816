"""Type and reference-list rendering."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from ..model.types import Substitution, TypeRef
from ..options import FormatOptions, OptionsLike

__all__ = ["format_reference", "format_reference_list", "format_type"]


def format_type(
    type_ref: TypeRef,
    options: OptionsLike,
    substitution: Optional[Substitution] = None,
) -> str:
    """Substitute, optionally erase, then render ``type_ref``."""
    opts = FormatOptions.coerce(options)
    if substitution is not None:
        type_ref = substitution.substitute(type_ref)
    if opts.show_raw_type:
        type_ref = type_ref.erasure()
    if opts.show_fq_class_names:
        return type_ref.canonical_text
    return type_ref.presentable_text


def format_reference(reference: TypeRef, options: OptionsLike) -> str:
    if FormatOptions.coerce(options).show_fq_class_names:
        return reference.canonical_text
    return reference.presentable_text


def format_reference_list(references: Iterable[TypeRef], options: OptionsLike) -> str:
    """Join references with ``", "``; an empty list yields ``""``."""
    opts = FormatOptions.coerce(options)
    return ", ".join(format_reference(reference, opts) for reference in references)
