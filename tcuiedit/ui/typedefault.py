"""Default values of trigger types used as global variables."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import UIType


class TypeDefault(UIBase):
    """A ``[TriggerTypeDefaults]`` entry keyed by variable type.

    Values: script text, and display text (the script text is used when absent).
    """

    type = UIType.TRIGGER_TYPE_DEFAULT

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        values = iter(args)
        self.script = next(values, "")
        self._display = next(values, "")

    def origin_type(self) -> Any | None:
        """The type entry this default belongs to, if it is defined."""
        return self.package.project.match_ui(self.name, UIType.TRIGGER_TYPE)

    def form_display(self) -> str:
        origin = self.origin_type()
        if origin is not None:
            return origin.form_display()
        return ""

    def trig_data(self) -> str:
        text = form_argument(self.name, self.script)
        if self._display:
            text += "," + self._display
        return text