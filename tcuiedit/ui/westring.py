"""A single world-editor string: a named piece of display text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class WEString:
    """A named string owned by a package; equal only to itself."""

    package: Any
    name: str = ""
    value: str = ""

    def trig_line(self) -> str:
        """The string as written to the world-editor strings file."""
        return f'{self.name}="{self.value}"'