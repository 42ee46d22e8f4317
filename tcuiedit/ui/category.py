"""Trigger categories, used to group trigger functions in the editor."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import UIType


class Category(UIBase):
    """A ``[TriggerCategories]`` entry.

    Values: display text, icon image file, and an optional flag (default 0)
    that hides the category name.
    """

    type = UIType.TRIGGER_CATEGORY

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        values = iter(args)
        self._display = next(values, "")
        self.icon = next(values, "")
        self.display_flag = next(values, "")

    def form_display(self) -> str:
        if self.display_flag == "1":
            return self.name
        return super().form_display()

    def trig_data(self) -> str:
        text = form_argument(self.name, self._display, self.icon)
        if self.display_flag == "1":
            text += "," + self.display_flag
        return text