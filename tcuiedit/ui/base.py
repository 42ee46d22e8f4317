"""Common behaviour of every entry of a trigger data file."""

from __future__ import annotations

from typing import Any

from tcuiedit.error import Error, ErrorType
from tcuiedit.uitype import UIType
from tcuiedit.uitype import is_function as _is_function_type
from tcuiedit.uitype import type_name as _type_name


def form_argument(*args: str) -> str:
    """Join a key and its values as ``key=value,value,...``."""
    if not args:
        raise TypeError("form_argument() needs at least a key")
    key, *values = args
    return f"{key}=" + ",".join(values)


class UIBase:
    """An entry owned by a package and indexed by name in the package's project.

    The owning package is expected to offer ``project``, ``name`` and
    ``we_strings`` (an object with ``get_value``).
    """

    type: UIType = UIType.UNKNOWN

    def __init__(self, package: Any) -> None:
        self.package = package
        self.name = ""
        self._display = ""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"

    def is_function(self) -> bool:
        return _is_function_type(self.type)

    def type_name(self) -> str:
        return _type_name(self.type)

    def register(self) -> None:
        """Index the entry in the project under its current name."""
        self.package.project.add_ui(self)

    def rename(self, name: str) -> None:
        """Change the name, keeping the project index up to date."""
        self.package.project.remove_ui(self)
        self.name = name
        self.register()

    def examine_name(self) -> Error:
        """A "Redefinition" error listing other entries of the same name, if any."""
        others = self.package.project.examine_ui(self)
        if not others:
            return Error()
        error = Error("Redefinition", ErrorType.ERROR)
        for other in others:
            error.add_item(other.package.name, other.name, other)
        return error

    def display(self, origin: bool = False) -> str:
        """Display text; world-editor strings are resolved unless ``origin`` is set."""
        if origin:
            return self._display
        return self.package.we_strings.get_value(self._display)

    def set_display(self, display: str) -> None:
        self._display = display

    def form_display(self) -> str:
        """Text shown for the entry in the editor's tree."""
        if self._display == "":
            return self.name
        return f"{self.name} - {self.display()}"

    def examine_flag(self, value: str, optional: bool = False) -> Error:
        """An "Illegal" error unless ``value`` is 0, 1, or blank when optional."""
        if value in ("0", "1") or (not value and optional):
            return Error()
        return Error("Illegal", ErrorType.ERROR)

    def trig_data(self) -> str:
        """The entry as written to the trigger data file."""
        return self.name