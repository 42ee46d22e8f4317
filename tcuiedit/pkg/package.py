"""A package: one directory of UI definition files and the entries read from it."""

from __future__ import annotations

import os
import re
from collections.abc import Callable
from datetime import datetime
from typing import Any

from tcuiedit.datafile import DataFile, FileType
from tcuiedit.error import FormatError, TypeMismatchError, UndefinedError
from tcuiedit.pkg.sections import (
    ActionSection,
    CallSection,
    CategorySection,
    ConditionSection,
    EventSection,
    ParamSection,
    Section,
    TypeDefaultSection,
    TypeSection,
)
from tcuiedit.pkg.westrings import WEStringTable
from tcuiedit.resources import get_resources
from tcuiedit.uitype import FunctionType, UIType

_SECTION_CLASSES: dict[UIType, type[Section]] = {
    UIType.TRIGGER_CATEGORY: CategorySection,
    UIType.TRIGGER_TYPE: TypeSection,
    UIType.TRIGGER_TYPE_DEFAULT: TypeDefaultSection,
    UIType.TRIGGER_PARAM: ParamSection,
    UIType.TRIGGER_EVENT: EventSection,
    UIType.TRIGGER_CONDITION: ConditionSection,
    UIType.TRIGGER_ACTION: ActionSection,
    UIType.TRIGGER_CALL: CallSection,
}

_HEADER = re.compile(r"\[\w+\]")

CategoryKey = tuple[str, str]


def _function_key(name: str) -> str:
    """Sort key of a function name: leading spaces moved to the end, lower-cased."""
    leading = len(name) - len(name.lstrip(" "))
    return (name[leading:] + name[:leading]).lower()


def _increment(counts: dict[str, tuple[bool, int]], name: str) -> None:
    defined, count = counts.get(name, (False, 0))
    counts[name] = (defined, count + 1)


def _decrement(counts: dict[str, tuple[bool, int]], name: str) -> None:
    if name in counts:
        defined, count = counts[name]
        counts[name] = (defined, count - 1)


class Package:
    """The sections, strings and category index of one UI package.

    ``base_path`` is a directory prefix joined to file names by concatenation.
    The package registers itself with ``project`` on creation.
    """

    def __init__(self, project: Any, base_path: str | os.PathLike[str] = "", name: str = "") -> None:
        self.project = project
        self.base_path = os.fspath(base_path)
        self.name = name
        self.current_type = UIType.UNKNOWN
        self.base_changed = False
        self._file = DataFile()
        self._processor: Callable[[str], None] | None = None
        self._category_maps: dict[FunctionType, dict[CategoryKey, dict[str, list[Any]]]] = {
            function_type: {} for function_type in FunctionType
        }
        self.we_strings = WEStringTable(self)
        self.sections: dict[UIType, Section] = {
            ui_type: cls(self) for ui_type, cls in _SECTION_CLASSES.items()
        }
        project.add_package(self)

    def __repr__(self) -> str:
        return f"Package(name={self.name!r}, base_path={self.base_path!r})"

    def section(self, ui_type: UIType | int) -> Section | None:
        """The section holding entries of ``ui_type``, or None."""
        return self.sections.get(int(ui_type))

    def current_section(self) -> Section | None:
        """The section the reader is currently in."""
        return self.section(self.current_type)

    # Reading

    def _process_trig_data(self, line: str) -> None:
        if _HEADER.fullmatch(line):
            ui_type = UIType.from_name(line[1:-1])
            if ui_type is not UIType.UNKNOWN and self.current_type != ui_type:
                self.current_type = ui_type
                self.base_changed = True
            return
        self.base_changed = False
        if line.startswith("//"):
            section = self.current_section()
            if section is not None:
                section.read_comment(line)
            return
        if self.current_type < UIType.DEFAULT_TRIGGER_CATEGORY:
            section = self.current_section()
            if section is None:
                raise FormatError(f"entry outside of any section: {line!r}")
            section.read_line(line)

    def _process_we_strings(self, line: str) -> None:
        if _HEADER.fullmatch(line) or line.startswith("//"):
            return
        self.we_strings.read_line(line)

    def read_file(self, file_type: FileType | int) -> bool:
        """Open a file of the package for reading; False if it cannot be read."""
        self._file.open(self.base_path, file_type, True)
        if not self._file.is_open():
            return False
        processors = {
            FileType.CLASSIC_TRIG_DATA: self._process_trig_data,
            FileType.CLASSIC_WE_STRINGS: self._process_we_strings,
        }
        self._processor = processors.get(self._file.file_type)
        return self._processor is not None

    def read_line(self) -> int:
        """Read and process the next line; its line number, or 0 at the end."""
        if self._processor is None:
            return 0
        entry = self._file.read_line()
        if entry is None:
            return 0
        number, text = entry
        self._processor(text)
        return number

    def read_all(self, file_type: FileType | int) -> bool:
        """Read a whole file of the package; False if it cannot be read."""
        if not self.read_file(file_type):
            return False
        while self.read_line() > 0:
            pass
        return True

    # Writing

    def _write_trig_data(self) -> None:
        for ui_type in sorted(self.sections):
            section = self.sections[ui_type]
            self._file.write_line(section.type_define_text())
            self._file.write_line()
            self._file.write_line()
            section.write_trig_data(self._file)
            self._file.write_line()
            self._file.write_line()

    def _write_we_strings(self) -> None:
        self._file.write_line("[WorldEditStrings]")
        self._file.write_line()
        self.we_strings.write_we_strings(self._file)

    def write_file(self, file_type: FileType | int) -> bool:
        """Write a file of the package under ``base_path``; False if not possible."""
        self._file.open(self.base_path, file_type, False)
        if not self._file.is_open():
            return False
        writers = {
            FileType.CLASSIC_TRIG_DATA: self._write_trig_data,
            FileType.CLASSIC_WE_STRINGS: self._write_we_strings,
        }
        with self._file:
            self._file.write_line(get_resources().license)
            self._file.write("// Generating time: ")
            self._file.write_line(datetime.now().strftime("%Y-%m-%d %H:%M:%S"))
            self._file.write_line()
            self._file.write_line()
            writer = writers.get(self._file.file_type)
            if writer is None:
                return False
            writer()
        return True

    # Category index

    @staticmethod
    def _check_function(ui: Any) -> None:
        if ui is None:
            raise UndefinedError("no UI given")
        if not ui.is_function():
            raise TypeMismatchError(f"{ui!r} is not a function")

    def add_category_ui(self, ui: Any) -> None:
        """Index a function under its category (and return type, for calls)."""
        self._check_function(ui)
        name = _function_key(ui.name)
        category = ui.category.lower()
        _increment(self.project.category_counts, category)
        return_type = ""
        if ui.type == UIType.TRIGGER_CALL:
            return_type = ui.return_type.lower()
            _increment(self.project.type_counts, return_type)
        entries = self._category_maps[ui.function_type()].setdefault((category, return_type), {})
        bucket = entries.setdefault(name, [])
        if not any(entry is ui for entry in bucket):
            bucket.append(ui)

    def remove_category_ui(self, ui: Any) -> None:
        """Remove a function from the category index."""
        self._check_function(ui)
        category = ui.category.lower()
        _decrement(self.project.category_counts, category)
        return_type = ""
        if ui.type == UIType.TRIGGER_CALL:
            return_type = ui.return_type.lower()
            _decrement(self.project.type_counts, return_type)
        entries = self._category_maps[ui.function_type()].get((category, return_type))
        if entries is None:
            return
        name = _function_key(ui.name)
        bucket = entries.get(name)
        if bucket is None:
            return
        bucket[:] = [entry for entry in bucket if entry is not ui]
        if not bucket:
            del entries[name]

    @staticmethod
    def _flatten(entries: dict[str, list[Any]]) -> list[Any]:
        return [ui for key in sorted(entries) for ui in reversed(entries[key])]

    def category_maps(self, function_type: FunctionType | int) -> dict[CategoryKey, list[Any]]:
        """Every (category, return type) pair of a function kind with its functions."""
        maps = self._category_maps[FunctionType(function_type)]
        return {key: self._flatten(entries) for key, entries in maps.items()}

    def category_map(
        self, function_type: FunctionType | int, category: str, return_type: str = ""
    ) -> list[Any]:
        """Functions of a kind in a category, ordered by name.

        The index is keyed by lower-cased names, and the lookup uses the given
        strings as they are.
        """
        entries = self._category_maps[FunctionType(function_type)].get((category, return_type))
        if entries is None:
            return []
        return self._flatten(entries)