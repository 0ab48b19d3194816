"""Render structured code elements as human-readable signatures."""

from .errors import ModelLoadError, OrphanMemberError, SignatureFormatError, UnsupportedElementError
from .external_name import class_key, get_external_name, package_display_name
from .formatting import (
    SignatureFormatter,
    format_class,
    format_method,
    format_modifiers,
    format_reference_list,
    format_type,
    format_variable,
)
from .messages import DEFAULT_MESSAGES, MessageBundle
from .options import MAX_PARAMS_TO_SHOW, FormatFlag, FormatOptions

__all__ = [
    "DEFAULT_MESSAGES",
    "FormatFlag",
    "FormatOptions",
    "MAX_PARAMS_TO_SHOW",
    "MessageBundle",
    "ModelLoadError",
    "OrphanMemberError",
    "SignatureFormatError",
    "SignatureFormatter",
    "UnsupportedElementError",
    "class_key",
    "format_class",
    "format_method",
    "format_modifiers",
    "format_reference_list",
    "format_type",
    "format_variable",
    "get_external_name",
    "package_display_name",
]
