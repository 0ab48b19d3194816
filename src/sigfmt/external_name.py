"""Stable textual keys for code elements.

External names identify an element independently of any single formatting
pass, so that metadata stored out of band (suppression markers, for
instance) can be matched back to the element later. Classes are keyed by
their binary-style name; members append their signature to the key of the
enclosing class.
"""

from __future__ import annotations

import io
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import List, Optional

from .errors import OrphanMemberError
from .formatting.methods import format_method
from .formatting.variables import format_variable
from .model.elements import AnonymousClass, ClassElement, CodeElement, Field, Method, Parameter
from .model.types import Substitution
from .options import FormatFlag

__all__ = [
    "BufferPool",
    "EXTERNAL_METHOD_OPTIONS",
    "class_key",
    "get_external_name",
    "package_display_name",
]

LOGGER = logging.getLogger(__name__)

NESTED_CLASS_SEPARATOR = "$"
DEFAULT_PACKAGE = "default package"

EXTERNAL_METHOD_OPTIONS = (
    FormatFlag.SHOW_NAME
    | FormatFlag.SHOW_FQ_NAME
    | FormatFlag.SHOW_TYPE
    | FormatFlag.SHOW_PARAMETERS
    | FormatFlag.SHOW_FQ_CLASS_NAMES
)
_NAMED_PARAMETER_OPTIONS = FormatFlag.SHOW_NAME | FormatFlag.SHOW_TYPE | FormatFlag.SHOW_FQ_CLASS_NAMES
_UNNAMED_PARAMETER_OPTIONS = FormatFlag.SHOW_TYPE | FormatFlag.SHOW_FQ_CLASS_NAMES


class BufferPool:
    """Thread-safe pool of reusable string buffers."""

    def __init__(self, max_size: int = 8) -> None:
        self._lock = threading.Lock()
        self._free: List[io.StringIO] = []
        self._max_size = max_size

    @contextmanager
    def acquire(self) -> Iterator[io.StringIO]:
        """Check out an empty buffer; it is reset and returned on exit."""
        with self._lock:
            buffer = self._free.pop() if self._free else io.StringIO()
        try:
            yield buffer
        finally:
            buffer.seek(0)
            buffer.truncate(0)
            with self._lock:
                if len(self._free) < self._max_size:
                    self._free.append(buffer)

    @property
    def idle(self) -> int:
        with self._lock:
            return len(self._free)


_POOL = BufferPool()


def get_external_name(owner: CodeElement, show_param_name: bool = True) -> Optional[str]:
    """Return the external key of ``owner``, or ``None`` for unsupported owners.

    Raises :class:`OrphanMemberError` when a member has no enclosing class.
    """
    with _POOL.acquire() as buffer:
        if isinstance(owner, ClassElement):
            _write_class_key(owner, buffer)
            return buffer.getvalue()

        enclosing = owner.ancestor_of_type(ClassElement)
        if enclosing is None:
            raise OrphanMemberError(owner)
        _write_class_key(enclosing, buffer)

        if isinstance(owner, Method):
            buffer.write(" ")
            buffer.write(_method_signature(owner, show_param_name))
            return buffer.getvalue()
        if isinstance(owner, Field):
            buffer.write(" ")
            buffer.write(owner.name or "")
            return buffer.getvalue()
        if isinstance(owner, Parameter):
            scope = owner.declaration_scope
            if isinstance(scope, Method):
                buffer.write(" ")
                buffer.write(_method_signature(scope, show_param_name))
                buffer.write(" ")
                if show_param_name:
                    buffer.write(format_variable(owner, FormatFlag.SHOW_NAME, Substitution.EMPTY))
                else:
                    buffer.write(str(scope.parameter_index(owner)))
                return buffer.getvalue()
            LOGGER.debug(
                "No external name for parameter %s declared in %s",
                owner.name,
                type(scope).__name__,
            )
    return None


def class_key(cls: ClassElement) -> str:
    """Return the binary-style name of ``cls`` (``pkg.Outer$Inner``, ``pkg.Outer$1``)."""
    with _POOL.acquire() as buffer:
        _write_class_key(cls, buffer)
        return buffer.getvalue()


def package_display_name(cls: ClassElement) -> str:
    qualified = cls.qualified_name
    if qualified is not None and qualified.rfind(".") > 0:
        return qualified[: qualified.rfind(".")]
    return DEFAULT_PACKAGE


def _method_signature(method: Method, show_param_name: bool) -> str:
    parameter_options = _NAMED_PARAMETER_OPTIONS if show_param_name else _UNNAMED_PARAMETER_OPTIONS
    return format_method(method, Substitution.EMPTY, EXTERNAL_METHOD_OPTIONS, parameter_options)


def _write_class_key(cls: ClassElement, buffer: io.StringIO) -> None:
    outer = cls.containing_class
    if outer is None:
        buffer.write(cls.qualified_name or cls.name or "")
        return
    _write_class_key(outer, buffer)
    buffer.write(NESTED_CLASS_SEPARATOR)
    if cls.parent is outer and not isinstance(cls, AnonymousClass):
        buffer.write(cls.name or "")
        return
    buffer.write(str(_non_member_ordinal(cls, outer)))
    if cls.name:
        buffer.write(cls.name)


def _non_member_ordinal(cls: ClassElement, outer: ClassElement) -> int:
    """1-based position of a local or anonymous class within ``outer``."""
    for index, candidate in enumerate(_non_member_classes(outer), start=1):
        if candidate is cls:
            return index
    return 0


def _non_member_classes(outer: ClassElement) -> Iterator[ClassElement]:
    pending: List[CodeElement] = list(reversed(list(outer.children())))
    while pending:
        node = pending.pop()
        if isinstance(node, ClassElement):
            if node.parent is not outer or isinstance(node, AnonymousClass):
                yield node
            continue
        pending.extend(reversed(list(node.children())))
