"""Trigger variable types."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import UIType


class Type(UIBase):
    """A ``[TriggerTypes]`` entry.

    Values: first game version, global flag, comparison flag, display text,
    base type (custom types only), import type (optional), and a flag to treat
    the type as its base type in the editor.
    """

    type = UIType.TRIGGER_TYPE

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        values = iter(args)
        self.version = next(values, "")
        self.global_flag = next(values, "")
        self.compare_flag = next(values, "")
        self._display = next(values, "")
        self.base_type = next(values, "")
        self.import_type = next(values, "")
        self.base_flag = next(values, "")

    def trig_data(self) -> str:
        text = form_argument(self.name, self.version, self.global_flag, self.compare_flag, self._display)
        if self.base_type:
            text += "," + self.base_type
            if self.import_type:
                text += "," + self.import_type
                if self.base_flag == "1":
                    text += "," + self.base_flag
        return text