"""Signature assemblers and their supporting renderers."""

from .classes import format_class
from .formatter import DEFAULT_PARAMETER_OPTIONS, SignatureFormatter
from .methods import format_method, format_parameter_list
from .modifiers import format_modifiers
from .types import format_reference, format_reference_list, format_type
from .variables import format_initializer, format_variable

__all__ = [
    "DEFAULT_PARAMETER_OPTIONS",
    "SignatureFormatter",
    "format_class",
    "format_initializer",
    "format_method",
    "format_modifiers",
    "format_parameter_list",
    "format_reference",
    "format_reference_list",
    "format_type",
    "format_variable",
]
