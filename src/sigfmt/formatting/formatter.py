"""Configured entry point bundling the renderers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..messages import DEFAULT_MESSAGES, MessageBundle
from ..model.elements import ClassElement, CodeElement, Method, Variable
from ..model.types import Substitution, TypeRef
from ..options import MAX_PARAMS_TO_SHOW, FormatFlag, FormatOptions, OptionsLike
from .classes import format_class
from .methods import format_method
from .modifiers import format_modifiers
from .types import format_reference_list, format_type
from .variables import format_variable

if TYPE_CHECKING:
    from ..config import FormatterConfig

__all__ = ["DEFAULT_PARAMETER_OPTIONS", "SignatureFormatter"]

DEFAULT_PARAMETER_OPTIONS = FormatFlag.SHOW_TYPE


@dataclass(frozen=True, slots=True)
class SignatureFormatter:
    """Renderers bound to a message bundle and a parameter-list threshold.

    Instances hold no per-call state and may be shared between threads.
    """

    messages: MessageBundle = field(default=DEFAULT_MESSAGES)
    max_parameters: int = MAX_PARAMS_TO_SHOW

    @classmethod
    def from_config(cls, config: "FormatterConfig") -> "SignatureFormatter":
        return cls(messages=config.messages, max_parameters=config.max_parameters)

    def format_modifiers(self, element: CodeElement, options: OptionsLike) -> str:
        return format_modifiers(element, options, messages=self.messages)

    def format_type(
        self,
        type_ref: TypeRef,
        options: OptionsLike,
        substitution: Optional[Substitution] = None,
    ) -> str:
        return format_type(type_ref, options, substitution)

    def format_reference_list(self, references: Iterable[TypeRef], options: OptionsLike) -> str:
        return format_reference_list(references, options)

    def format_variable(
        self,
        variable: Variable,
        options: OptionsLike,
        substitution: Optional[Substitution] = None,
    ) -> str:
        return format_variable(variable, options, substitution, messages=self.messages)

    def format_method(
        self,
        method: Method,
        options: OptionsLike,
        parameter_options: OptionsLike = DEFAULT_PARAMETER_OPTIONS,
        substitution: Optional[Substitution] = None,
        max_parameters: Optional[int] = None,
    ) -> str:
        limit = self.max_parameters if max_parameters is None else max_parameters
        return format_method(
            method,
            substitution,
            options,
            parameter_options,
            limit,
            messages=self.messages,
        )

    def format_class(self, cls: ClassElement, options: OptionsLike) -> str:
        return format_class(cls, options, messages=self.messages)

    def format(
        self,
        element: CodeElement,
        options: OptionsLike,
        parameter_options: OptionsLike = DEFAULT_PARAMETER_OPTIONS,
        substitution: Optional[Substitution] = None,
    ) -> str:
        """Dispatch to the assembler matching the kind of ``element``.

        Elements without a dedicated assembler (class initializers) render
        their modifiers only when modifiers are requested.
        """
        if isinstance(element, ClassElement):
            return self.format_class(element, options)
        if isinstance(element, Method):
            return self.format_method(element, options, parameter_options, substitution)
        if isinstance(element, Variable):
            return self.format_variable(element, options, substitution)
        if FormatOptions.coerce(options).show_modifiers:
            return self.format_modifiers(element, options)
        return ""
