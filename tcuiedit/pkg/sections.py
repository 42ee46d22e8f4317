"""Sections of a trigger data file, each holding the entries of one kind."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from tcuiedit.error import FormatError
from tcuiedit.resources import get_resources
from tcuiedit.ui.base import UIBase
from tcuiedit.ui.category import Category
from tcuiedit.ui.function import Function
from tcuiedit.ui.functions import Action, Call, Condition, Event
from tcuiedit.ui.param import Param
from tcuiedit.ui.typedef import Type
from tcuiedit.ui.typedefault import TypeDefault
from tcuiedit.uitype import UIType


def split_entry(line: str) -> tuple[str, list[str]]:
    """Split ``key=value,value,...`` into the key and its values.

    Raises FormatError when the line has no ``=``.
    """
    key, sep, rest = line.partition("=")
    if not sep:
        raise FormatError(f"missing '=' in line: {line!r}")
    return key, rest.split(",")


class Section(ABC):
    """The entries of one section of a trigger data file, in file order."""

    ui_type: UIType = UIType.UNKNOWN

    def __init__(self, package: Any) -> None:
        self.package = package
        self._entries: list[UIBase] = []

    @property
    def type(self) -> UIType:
        return self.ui_type

    @property
    def data(self) -> list[UIBase]:
        return list(self._entries)

    def __getitem__(self, index: int) -> UIBase | None:
        """The entry at ``index``, or None when there is none."""
        try:
            return self._entries[index]
        except IndexError:
            return None

    def __iter__(self) -> Iterator[UIBase]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    @abstractmethod
    def _create(self, name: str, args: list[str]) -> UIBase:
        """Build the entry for one definition line."""

    def read_line(self, line: str) -> UIBase | None:
        """Parse a definition line and append the entry it defines."""
        name, args = split_entry(line)
        entry = self._create(name, args)
        self._entries.append(entry)
        return entry

    def read_comment(self, line: str) -> None:
        """Comment lines carry nothing the section keeps."""

    def type_define_text(self) -> str:
        """The comment block written before this section."""
        return get_resources().type_define_text(self.ui_type)

    def write_trig_data(self, file: Any) -> None:
        """Write every entry, one per line, to ``file``."""
        for entry in self._entries:
            file.write_line(entry.trig_data())


class CategorySection(Section):
    ui_type = UIType.TRIGGER_CATEGORY

    def _create(self, name: str, args: list[str]) -> UIBase:
        return Category(self.package, name, args)


class TypeSection(Section):
    ui_type = UIType.TRIGGER_TYPE

    def _create(self, name: str, args: list[str]) -> UIBase:
        return Type(self.package, name, args)


class TypeDefaultSection(Section):
    ui_type = UIType.TRIGGER_TYPE_DEFAULT

    def _create(self, name: str, args: list[str]) -> UIBase:
        return TypeDefault(self.package, name, args)


class ParamSection(Section):
    ui_type = UIType.TRIGGER_PARAM

    def _create(self, name: str, args: list[str]) -> UIBase:
        return Param(self.package, name, args)


class FunctionSection(Section):
    """A section of functions, where ``_``-prefixed lines extend the last function."""

    def __init__(self, package: Any) -> None:
        super().__init__(package)
        self.last_ui: Function | None = None

    def read_line(self, line: str) -> UIBase | None:
        """Parse a line: a new function, or an extra line of the previous one."""
        name, args = split_entry(line)
        if not name.startswith("_"):
            entry = self._create(name, args)
            self.last_ui = entry
            self._entries.append(entry)
            return entry
        self._add_line(name, args)
        return None

    def _add_line(self, name: str, args: list[str]) -> None:
        if self.last_ui is None:
            return
        last_name = self.last_ui.name
        candidate = name[1:1 + len(last_name)]
        if candidate.lower() == last_name.lower():
            key = name[1 + len(last_name):]
        else:
            pos = name.rfind("_")
            key = name[pos:] if pos >= 0 else name
        self.last_ui.add(key, args)


class EventSection(FunctionSection):
    ui_type = UIType.TRIGGER_EVENT

    def _create(self, name: str, args: list[str]) -> Function:
        return Event(self.package, name, args)


class ConditionSection(FunctionSection):
    ui_type = UIType.TRIGGER_CONDITION

    def _create(self, name: str, args: list[str]) -> Function:
        return Condition(self.package, name, args)


class ActionSection(FunctionSection):
    ui_type = UIType.TRIGGER_ACTION

    def _create(self, name: str, args: list[str]) -> Function:
        return Action(self.package, name, args)


class CallSection(FunctionSection):
    ui_type = UIType.TRIGGER_CALL

    def _create(self, name: str, args: list[str]) -> Function:
        return Call(self.package, name, args)