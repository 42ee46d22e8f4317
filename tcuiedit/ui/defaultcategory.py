"""Categories added automatically to new maps."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import UIBase
from tcuiedit.uitype import UIType


class DefaultCategory(UIBase):
    """A ``[DefaultTriggerCategories]`` entry: a name and its display text."""

    type = UIType.DEFAULT_TRIGGER_CATEGORY

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        self._display = next(iter(args), "")

    def form_display(self) -> str:
        return self.name