"""Preset values of trigger variable types."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import UIType


class Param(UIBase):
    """A ``[TriggerParams]`` entry.

    Values: first game version, variable type, code text used in the script,
    and display text.
    """

    type = UIType.TRIGGER_PARAM

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        values = iter(args)
        self.version = next(values, "")
        self.variable_type = next(values, "")
        self.script = next(values, "")
        self._display = next(values, "")

    def origin_type(self) -> Any | None:
        """The type entry of this parameter's variable type, if it is defined."""
        return self.package.project.match_ui(self.variable_type, UIType.TRIGGER_TYPE)

    def form_display(self) -> str:
        origin = self.origin_type()
        if origin is not None:
            text = origin.form_display()
            if text != "":
                return f"{self.name} ( {text} )"
        return self.name

    def trig_data(self) -> str:
        return form_argument(self.name, self.version, self.variable_type, self.script, self._display)