"""The world-editor strings of a package, resolved through the project's index."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from tcuiedit.error import FormatError, NotFoundError
from tcuiedit.ui.westring import WEString

_WESTRING_PREFIX = "WESTRING"


class WEStringTable:
    """The strings read for one package.

    Every string is also indexed by name in ``package.project.we_strings`` so
    that lookups see the strings of all packages of the project.
    """

    def __init__(self, package: Any) -> None:
        self.package = package
        self._entries: list[WEString] = []

    @property
    def _index(self) -> dict[str, list[WEString]]:
        return self.package.project.we_strings

    def __iter__(self) -> Iterator[WEString]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def read_line(self, line: str) -> WEString:
        """Parse ``NAME=value`` (the value may be quoted) and add the string.

        Raises FormatError when the line has no ``=``.
        """
        name, sep, value = line.partition("=")
        if not sep:
            raise FormatError(f"missing '=' in line: {line!r}")
        if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        return self.add(name, value)

    def add(self, name: str = "", value: str = "") -> WEString:
        """Create a string, index it in the project and return it."""
        we_string = WEString(self.package, name, value)
        self._index.setdefault(name, []).append(we_string)
        self._entries.append(we_string)
        return we_string

    def remove(self, we_string: WEString | None) -> None:
        """Drop ``we_string`` from the table and from the project's index."""
        if we_string is None:
            raise NotFoundError("no string given")
        bucket = self._index.get(we_string.name)
        if bucket is not None:
            bucket[:] = [entry for entry in bucket if entry is not we_string]
            if not bucket:
                del self._index[we_string.name]
        self._entries = [entry for entry in self._entries if entry is not we_string]

    def get_value(self, name: str) -> str:
        """Follow ``WESTRING`` references from ``name`` until plain text is reached.

        Unknown names and reference cycles stop the lookup at the last name seen.
        """
        seen: list[str] = []
        value = name
        while value.startswith(_WESTRING_PREFIX):
            bucket = self._index.get(value)
            if not bucket:
                break
            seen.append(value)
            value = bucket[-1].value
            if value in seen:
                break
        return value

    def write_we_strings(self, file: Any) -> None:
        """Write every string as ``NAME="value"``, one per line."""
        for we_string in self._entries:
            file.write_line(we_string.trig_line())