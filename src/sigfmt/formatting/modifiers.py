"""Render an element's modifier list in canonical keyword order."""

from __future__ import annotations

from typing import List

from ..errors import UnsupportedElementError
from ..messages import DEFAULT_MESSAGES, MessageBundle
from ..model.elements import ClassElement, ClassInitializer, CodeElement, Method, Variable
from ..model.modifiers import Modifier, ModifierSet
from ..options import FormatOptions, OptionsLike

__all__ = ["format_modifiers"]

_IMPLEMENTATION_ONLY = (Modifier.NATIVE, Modifier.SYNCHRONIZED, Modifier.STRICTFP)


def format_modifiers(
    element: CodeElement,
    options: OptionsLike,
    *,
    messages: MessageBundle = DEFAULT_MESSAGES,
) -> str:
    """Return the space-separated modifiers of ``element``.

    Raises :class:`UnsupportedElementError` for element kinds that cannot
    carry modifiers.
    """
    if not isinstance(element, (Variable, Method, ClassElement, ClassInitializer)):
        raise UnsupportedElementError(element)
    modifiers = element.modifiers
    if modifiers is None:
        return ""

    opts = FormatOptions.coerce(options)
    is_interface = isinstance(element, ClassElement) and element.is_interface
    tokens: List[str] = []

    if _shown(modifiers, Modifier.PUBLIC, opts):
        tokens.append(Modifier.PUBLIC.value)
    if modifiers.has_property(Modifier.PROTECTED):
        tokens.append(Modifier.PROTECTED.value)
    if modifiers.has_property(Modifier.PRIVATE):
        tokens.append(Modifier.PRIVATE.value)

    if _shown(modifiers, Modifier.PACKAGE_LOCAL, opts, extra=opts.show_package_local):
        tokens.append(_package_local_token(element, messages))

    if _shown(modifiers, Modifier.STATIC, opts):
        tokens.append(Modifier.STATIC.value)
    # interfaces are abstract by definition
    if not is_interface and _shown(modifiers, Modifier.ABSTRACT, opts):
        tokens.append(Modifier.ABSTRACT.value)
    if _shown(modifiers, Modifier.FINAL, opts):
        tokens.append(Modifier.FINAL.value)

    if not opts.javadoc_modifiers_only:
        tokens.extend(
            modifier.value for modifier in _IMPLEMENTATION_ONLY if modifiers.has_property(modifier)
        )

    # some compilers flag methods as transient; only variables can be
    if isinstance(element, Variable) and modifiers.has_property(Modifier.TRANSIENT):
        tokens.append(Modifier.TRANSIENT.value)
    if modifiers.has_property(Modifier.VOLATILE):
        tokens.append(Modifier.VOLATILE.value)

    return " ".join(tokens)


def _shown(modifiers: ModifierSet, modifier: Modifier, opts: FormatOptions, *, extra: bool = False) -> bool:
    if opts.show_redundant_modifiers or extra:
        return modifiers.has_property(modifier)
    return modifiers.has_explicit(modifier)


def _package_local_token(element: CodeElement, messages: MessageBundle) -> str:
    if isinstance(element, ClassElement) and element.is_local:
        return messages.local_class_preposition()
    return messages.visibility_presentation(Modifier.PACKAGE_LOCAL)
