"""Bundled text resources: the licence header and the per-section comment blocks."""

from __future__ import annotations

import os

from tcuiedit.uitype import TYPE_NAMES, UIType

_SECTION_RULE = "//***************************************************************************\n"


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None


class Resources:
    """Texts loaded from a resource directory.

    ``path`` is a directory prefix joined to file names by concatenation, so it
    normally ends with a separator. Without a path every text is empty.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.license = ""
        self._type_texts: dict[int, str] = {}
        if path is None:
            return
        prefix = os.fspath(path)
        license_text = _read_text(prefix + "LICENSE")
        if license_text is not None:
            self.license = license_text
        directory = prefix + "typeDefineText/"
        for index, section in enumerate(TYPE_NAMES):
            body = _read_text(directory + section + ".txt")
            if body is not None:
                self._type_texts[index] = f"{_SECTION_RULE}[{section}]\n{body}"

    def type_define_text(self, ui_type: UIType | int) -> str:
        """The comment block written before the section of ``ui_type``; empty if none."""
        return self._type_texts.get(int(ui_type), "")


_current: Resources | None = None


def load_resources(path: str | os.PathLike[str]) -> Resources:
    """Load the resources under ``path`` and make them the shared instance."""
    global _current
    _current = Resources(path)
    return _current


def get_resources() -> Resources:
    """The shared resources; empty ones when nothing has been loaded."""
    global _current
    if _current is None:
        _current = Resources()
    return _current