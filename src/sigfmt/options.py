"""Rendering options for the signature formatter.

Options are additive: a flag whose content is absent on an element (an
initializer on a parameter, a throws list on a field) is silently a no-op,
and bits that do not correspond to a known flag are ignored. ``FormatFlag``
keeps the historical bit values so that integer masks stored elsewhere stay
meaningful, while ``FormatOptions`` is the typed value passed through the
renderers.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import IntFlag
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict

__all__ = [
    "FormatFlag",
    "FormatOptions",
    "MAX_PARAMS_TO_SHOW",
    "OptionsLike",
    "parse_flag_names",
]

MAX_PARAMS_TO_SHOW = 7

_SEPARATORS = re.compile(r"[|,\s]+")


class FormatFlag(IntFlag):
    """Bit values understood by the renderers."""

    SHOW_NAME = 0x0001
    SHOW_TYPE = 0x0002
    TYPE_AFTER = 0x0004
    SHOW_MODIFIERS = 0x0008
    MODIFIERS_AFTER = 0x0010
    SHOW_REDUNDANT_MODIFIERS = 0x0020
    SHOW_PACKAGE_LOCAL = 0x0040
    SHOW_INITIALIZER = 0x0080
    SHOW_PARAMETERS = 0x0100
    SHOW_THROWS = 0x0200
    SHOW_EXTENDS_IMPLEMENTS = 0x0400
    SHOW_FQ_NAME = 0x0800
    SHOW_CONTAINING_CLASS = 0x1000
    SHOW_FQ_CLASS_NAMES = 0x2000
    JAVADOC_MODIFIERS_ONLY = 0x4000
    SHOW_ANONYMOUS_CLASS_VERBOSE = 0x8000
    SHOW_RAW_TYPE = 0x10000


_FIELD_FLAGS: Dict[str, FormatFlag] = {flag.name.lower(): flag for flag in FormatFlag}


class FormatOptions(BaseModel):
    """Immutable set of named rendering switches."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    show_name: bool = False
    show_type: bool = False
    type_after: bool = False
    show_modifiers: bool = False
    modifiers_after: bool = False
    show_redundant_modifiers: bool = False
    show_package_local: bool = False
    show_initializer: bool = False
    show_parameters: bool = False
    show_throws: bool = False
    show_extends_implements: bool = False
    show_fq_name: bool = False
    show_containing_class: bool = False
    show_fq_class_names: bool = False
    javadoc_modifiers_only: bool = False
    show_anonymous_class_verbose: bool = False
    show_raw_type: bool = False

    @classmethod
    def from_flags(cls, flags: int) -> "FormatOptions":
        """Build options from an integer mask, ignoring unknown bits."""
        bits = int(flags)
        return cls(**{name: bool(bits & flag) for name, flag in _FIELD_FLAGS.items()})

    @classmethod
    def coerce(cls, value: "OptionsLike") -> "FormatOptions":
        """Normalise any accepted options representation into ``FormatOptions``."""
        if isinstance(value, FormatOptions):
            return value
        if isinstance(value, int):
            return cls.from_flags(value)
        if isinstance(value, str):
            return cls.from_flags(parse_flag_names(value))
        if isinstance(value, Iterable):
            mask = 0
            for entry in value:
                mask |= cls.coerce(entry).to_flags()
            return cls.from_flags(mask)
        raise TypeError(f"Cannot interpret {value!r} as format options")

    def to_flags(self) -> FormatFlag:
        mask = FormatFlag(0)
        for name, flag in _FIELD_FLAGS.items():
            if getattr(self, name):
                mask |= flag
        return mask

    def flag_names(self) -> list[str]:
        return [flag.name for name, flag in _FIELD_FLAGS.items() if getattr(self, name)]

    def __or__(self, other: Any) -> "FormatOptions":
        try:
            extra = FormatOptions.coerce(other)
        except TypeError:
            return NotImplemented
        return FormatOptions.from_flags(self.to_flags() | extra.to_flags())

    __ror__ = __or__


OptionsLike = Union[FormatOptions, FormatFlag, int, str, Iterable[Any]]


def parse_flag_names(text: str) -> FormatFlag:
    """Parse ``"SHOW_NAME|SHOW_TYPE"`` style text (names or integer literals)."""
    mask = FormatFlag(0)
    for token in _SEPARATORS.split(text.strip()):
        if not token:
            continue
        if token[0].isdigit():
            try:
                mask |= FormatFlag(int(token, 0) & _known_bits())
            except ValueError as error:
                raise ValueError(f"Invalid flag literal: {token}") from error
            continue
        member = FormatFlag.__members__.get(token.upper())
        if member is None:
            raise ValueError(f"Unknown format flag: {token}")
        mask |= member
    return mask


def _known_bits() -> int:
    mask = 0
    for flag in FormatFlag:
        mask |= flag
    return mask
