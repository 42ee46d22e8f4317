"""Diagnostics reported about trigger UI entries, and the exceptions the editor raises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class TCUIEditError(Exception):
    """Base class of every exception raised by the editor core."""


class UndefinedError(TCUIEditError):
    """An object that must be given was missing."""


class RedefinedError(TCUIEditError):
    """An object was defined twice."""


class NotFoundError(TCUIEditError):
    """A looked-up object does not exist."""


class FormatError(TCUIEditError):
    """A line of a data file is malformed."""


class TypeMismatchError(TCUIEditError):
    """An object is of the wrong kind for the requested operation."""


class ErrorType(IntEnum):
    """Severity of a reported diagnostic."""

    NONE = 0
    ERROR = 1
    WARNING = 2
    TIP = 3


_TYPE_NAMES = {
    ErrorType.NONE: "",
    ErrorType.ERROR: "Error",
    ErrorType.WARNING: "Warning",
    ErrorType.TIP: "Tip",
}

_TYPE_COLORS = {
    ErrorType.NONE: "black",
    ErrorType.ERROR: "red",
    ErrorType.WARNING: "darkYellow",
    ErrorType.TIP: "black",
}


@dataclass
class ErrorItem:
    """One entry of a diagnostic: a label, a value and the UI it refers to."""

    name: str
    value: str
    ui: Any = None


class Error:
    """A diagnostic with a name, a severity and a list of related items."""

    def __init__(self, name: str = "", type: ErrorType | int = ErrorType.NONE) -> None:
        self.name = name
        self.type = type
        self.items: list[ErrorItem] = []

    def __repr__(self) -> str:
        return f"Error(name={self.name!r}, type={self.type!r}, items={self.items!r})"

    def _known_type(self) -> ErrorType | None:
        try:
            return ErrorType(self.type)
        except ValueError:
            return None

    def add_item(self, name: str, value: str, ui: Any = None) -> ErrorItem:
        """Append an item to the diagnostic and return it."""
        item = ErrorItem(name, value, ui)
        self.items.append(item)
        return item

    def color(self) -> str:
        """Name of the colour the diagnostic is shown in."""
        known = self._known_type()
        return _TYPE_COLORS[known if known is not None else ErrorType.NONE]

    def type_name(self) -> str:
        """Human-readable severity, or "UNKNOWN_TYPE" for an unknown one."""
        known = self._known_type()
        if known is None:
            return "UNKNOWN_TYPE"
        return _TYPE_NAMES[known]