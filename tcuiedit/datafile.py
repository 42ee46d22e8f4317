"""Line-oriented access to the UI definition files of a package."""

from __future__ import annotations

import os
from collections.abc import Iterator
from enum import IntEnum
from typing import IO


class FileCategory(IntEnum):
    """Which editor flavour a file belongs to."""

    CLASSIC = 0
    YDWE = 1
    UNKNOWN = -1


class FileType(IntEnum):
    """The definition files a package may hold."""

    CLASSIC_TRIG_DATA = 0
    CLASSIC_TRIG_STRINGS = 1
    CLASSIC_WE_STRINGS = 2
    YDWE_DEFINE = 3
    YDWE_EVENT = 4
    YDWE_ACTION = 5
    YDWE_CALL = 6
    UNKNOWN = -1

    def filename(self) -> str | None:
        """File name of this type inside a package directory."""
        if self is FileType.UNKNOWN:
            return None
        return _FILENAMES[self]

    def category(self) -> FileCategory:
        """The flavour this file type belongs to."""
        if self is FileType.UNKNOWN:
            return FileCategory.UNKNOWN
        if self <= FileType.CLASSIC_WE_STRINGS:
            return FileCategory.CLASSIC
        return FileCategory.YDWE


_FILENAMES = {
    FileType.CLASSIC_TRIG_DATA: "TriggerData.txt",
    FileType.CLASSIC_TRIG_STRINGS: "TriggerStrings.txt",
    FileType.CLASSIC_WE_STRINGS: "WorldEditStrings.txt",
    FileType.YDWE_DEFINE: "define.txt",
    FileType.YDWE_EVENT: "event.txt",
    FileType.YDWE_ACTION: "action.txt",
    FileType.YDWE_CALL: "call.txt",
}


def _coerce_type(file_type: FileType | int) -> FileType:
    try:
        return FileType(file_type)
    except ValueError:
        return FileType.UNKNOWN


class DataFile:
    """A definition file opened either for reading lines or for writing."""

    def __init__(self) -> None:
        self.read_flag = True
        self.file_type = FileType.UNKNOWN
        self.line_number = 0
        self._lines: Iterator[str] | None = None
        self._handle: IO[str] | None = None

    @property
    def category(self) -> FileCategory:
        return self.file_type.category()

    def reset(self) -> None:
        """Close the file and forget everything read from it."""
        self.close()
        self._lines = None
        self.line_number = 0
        self.file_type = FileType.UNKNOWN

    def open(self, path: str | os.PathLike[str], file_type: FileType | int, read: bool = True) -> None:
        """Open the file of ``file_type`` under the directory prefix ``path``.

        ``path`` is joined to the file name by plain concatenation. A file that
        cannot be opened leaves the object not open rather than raising.
        """
        self.read_flag = read
        self.reset()
        self.file_type = _coerce_type(file_type)
        if self.file_type is FileType.UNKNOWN:
            return
        target = os.fspath(path) + self.file_type.filename()
        if read:
            try:
                with open(target, encoding="utf-8-sig", errors="replace") as handle:
                    text = handle.read()
            except OSError:
                self.line_number = -1
                return
            self._lines = iter(text.split("\n"))
            self.line_number = 0
        else:
            try:
                self._handle = open(target, "w", encoding="utf-8")
            except OSError:
                return
            self.line_number = -1

    def is_open(self) -> bool:
        return self._lines is not None or self._handle is not None

    def eof(self) -> bool:
        return self.line_number < 0 and self.read_flag

    def close(self) -> None:
        """Close the underlying file handle, if one is held."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def read_line(self) -> tuple[int, str] | None:
        """Next non-blank line with trailing whitespace removed, and its line number.

        Returns None once the end of the file is reached.
        """
        if self.line_number < 0 or self._lines is None:
            return None
        for raw in self._lines:
            self.line_number += 1
            line = raw.rstrip()
            if line:
                return self.line_number, line
        self.line_number = -1
        return None

    def lines(self) -> Iterator[tuple[int, str]]:
        """Iterate over the remaining (line number, text) pairs."""
        while (entry := self.read_line()) is not None:
            yield entry

    def write_line(self, text: str = "") -> None:
        self.write(text + "\n")

    def write(self, text: str = "") -> None:
        if self._handle is None:
            raise ValueError("file is not open for writing")
        self._handle.write(text)

    def __enter__(self) -> DataFile:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()