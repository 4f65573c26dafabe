# SPDX-License-Identifier: MIT
# Copyright (c) 2025 joblog contributors

"""Conversion of domain values into styled documents.

``render`` is a single-dispatch function. New types are supported either
by registering a converter::

    @render.register
    def _(value: JobId) -> Document:
        return Document.text(value.hex, "cyan")

or by implementing the :class:`Renderable` protocol (a ``__document__``
method). Every converter is pure: the same value always yields an equal
document.
"""

from functools import singledispatch
from pathlib import PurePath
from typing import Protocol, runtime_checkable

from .document import Document, concat
from .levels import Severity
from .models import PackageName, Version, VersionRange

PACKAGE_COLOR = "cyan"
VERSION_COLOR = "green"
PATH_COLOR = "magenta"


@runtime_checkable
class Renderable(Protocol):
    """A value that knows how to render itself."""

    def __document__(self) -> Document:
        """Return the styled document for this value."""


@singledispatch
def render(value: object) -> Document:
    """Convert a value into a :class:`Document`.

    Raises:
        TypeError: If no converter is registered for the value's type
    """
    if isinstance(value, Renderable):
        return value.__document__()
    raise TypeError(f"Cannot render value of type {type(value).__name__}")


@render.register
def _render_document(value: Document) -> Document:
    return value


@render.register
def _render_str(value: str) -> Document:
    return Document.text(value)


@render.register(int)
@render.register(float)
def _render_number(value: int | float) -> Document:
    # bool is an int subclass and lands here too
    return Document.text(str(value))


@render.register
def _render_severity(value: Severity) -> Document:
    return Document.text(value.label)


@render.register
def _render_path(value: PurePath) -> Document:
    return Document.text(str(value), PATH_COLOR)


@render.register
def _render_exception(value: BaseException) -> Document:
    message = str(value)
    name = type(value).__name__
    return Document.text(f"{name}: {message}" if message else name)


@render.register(list)
@render.register(tuple)
def _render_sequence(value: list | tuple) -> Document:
    return concat((render(item) for item in value), ", ")


@render.register
def _render_package_name(value: PackageName) -> Document:
    return Document.text(value.value, PACKAGE_COLOR)


@render.register
def _render_version(value: Version) -> Document:
    return Document.text(str(value), VERSION_COLOR)


@render.register
def _render_version_range(value: VersionRange) -> Document:
    if value.is_any:
        return Document.text("any version")
    if value.is_exact:
        return Document.text("==") + render(value.lower)

    bounds = []
    if value.lower is not None:
        op = ">=" if value.lower_inclusive else ">"
        bounds.append(Document.text(op) + render(value.lower))
    if value.upper is not None:
        op = "<=" if value.upper_inclusive else "<"
        bounds.append(Document.text(op) + render(value.upper))
    return concat(bounds, " && ")
