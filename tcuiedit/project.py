"""A project: the packages loaded together and the index of their UI entries."""

from __future__ import annotations

from typing import Any

from tcuiedit.error import UndefinedError
from tcuiedit.uitype import UIType


def _remove_identical(items: list[Any], target: Any) -> list[Any]:
    return [item for item in items if item is not target]


class Project:
    """Holds packages and indexes every UI entry by lower-cased name.

    ``category_counts`` and ``type_counts`` map a lower-cased name to a pair
    (defined, number of functions referring to it).
    """

    def __init__(self) -> None:
        self.packages: list[Any] = []
        self.we_strings: dict[str, list[Any]] = {}
        self.category_counts: dict[str, tuple[bool, int]] = {}
        self.type_counts: dict[str, tuple[bool, int]] = {}
        self._ui_map: dict[str, list[Any]] = {}

    def add_package(self, package: Any) -> Any:
        """Register ``package`` with the project and return it."""
        self.packages.append(package)
        return package

    @staticmethod
    def _mark(counts: dict[str, tuple[bool, int]], name: str, defined: bool) -> None:
        _, count = counts.get(name, (defined, 0))
        counts[name] = (defined, count)

    def add_ui(self, ui: Any) -> None:
        """Index ``ui`` under its name; categories and types are marked defined."""
        if ui is None:
            raise UndefinedError()
        name = ui.name.lower()
        entries = self._ui_map.setdefault(name, [])
        if not any(entry is ui for entry in entries):
            entries.append(ui)
        if ui.type == UIType.TRIGGER_CATEGORY:
            self._mark(self.category_counts, name, True)
        elif ui.type == UIType.TRIGGER_TYPE:
            self._mark(self.type_counts, name, True)

    def get_ui(self, name: str) -> list[Any]:
        """All entries named ``name`` (case-insensitive), newest first."""
        return list(reversed(self._ui_map.get(name.lower(), [])))

    def examine_ui(self, ui: Any) -> list[Any]:
        """Other entries sharing the name of ``ui``."""
        if ui is None:
            raise UndefinedError()
        return _remove_identical(self.get_ui(ui.name), ui)

    def remove_ui(self, ui: Any) -> None:
        """Drop ``ui`` from the index, unmarking its name if nothing else defines it."""
        if ui is None:
            raise UndefinedError()
        name = ui.name.lower()
        remaining = _remove_identical(self._ui_map.get(name, []), ui)
        if remaining:
            self._ui_map[name] = remaining
        else:
            self._ui_map.pop(name, None)
        if ui.type == UIType.TRIGGER_CATEGORY:
            if self.match_ui(name, UIType.TRIGGER_CATEGORY) is None:
                self._mark(self.category_counts, name, False)
        elif ui.type == UIType.TRIGGER_TYPE:
            if self.match_ui(name, UIType.TRIGGER_TYPE) is None:
                self._mark(self.type_counts, name, False)

    def _package_index(self, package: Any) -> int:
        for index, candidate in enumerate(self.packages):
            if candidate is package:
                return index
        return -1

    def match_ui(self, name: str, ui_type: UIType) -> Any | None:
        """The entry of ``ui_type`` named ``name`` from the earliest package, if any."""
        best = None
        best_index = -1
        for ui in self.get_ui(name):
            if ui.type != ui_type:
                continue
            index = self._package_index(ui.package)
            if index >= 0 and (best_index < 0 or index < best_index):
                best_index = index
                best = ui
        return best