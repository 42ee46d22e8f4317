"""Behaviour shared by events, conditions, actions and calls."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import FunctionType, UIType

_log = logging.getLogger(__name__)

_EMPTY_VALUES = ("", "_", "nothing")


class ArgumentField(IntEnum):
    """The pieces of data kept for each argument of a function."""

    TYPE = 0
    DEFAULT = 1
    AI_DEFAULT = 2
    MIN = 3
    MAX = 4


@dataclass
class Argument:
    """One argument of a trigger function: its type, defaults and limits."""

    type: str = ""
    default: str = ""
    ai_default: str = ""
    min: str = ""
    max: str = ""

    def __getitem__(self, field: ArgumentField) -> str:
        return getattr(self, ArgumentField(field).name.lower())

    def __setitem__(self, field: ArgumentField, value: str) -> None:
        setattr(self, ArgumentField(field).name.lower(), value)


class Flag(IntEnum):
    """The extra lines that may follow a function's definition."""

    DEFAULTS = 0
    LIMITS = 1
    CATEGORY = 2
    SCRIPT = 3
    AI = 4
    AI_DEFAULTS = 5

    @property
    def key(self) -> str:
        """The suffix naming this line in the data file."""
        return _FLAG_KEYS[self]


_FLAG_KEYS = ("_Defaults", "_Limits", "_Category", "_ScriptName", "_UseWithAI", "_AIDefaults")


def _blank(value: str) -> str:
    return value if value else "_"


class Function(UIBase):
    """A trigger function with typed arguments and optional extra lines."""

    def __init__(self, package: Any) -> None:
        super().__init__(package)
        self.version = ""
        self.category = ""
        self.use_with_ai = ""
        self.script = ""
        self.arguments: list[Argument] = []
        self.argument_num = 0
        self.flags: dict[Flag, bool] = {flag: False for flag in Flag}
        self._last_flag = 0

    def function_type(self) -> FunctionType:
        return FunctionType.from_base(self.type)

    def _add_argument_data(self, values: list[str], field: ArgumentField) -> None:
        limits = field is ArgumentField.MIN
        if not self.arguments and len(values) == 1 and values[0] == "":
            return
        queue = deque(values)
        existing = iter(list(self.arguments))
        appending = False
        while queue:
            target = None if appending else next(existing, None)
            if target is None:
                if all(value in _EMPTY_VALUES for value in queue):
                    return
                _log.debug("%s %s %s", self.type_name(), self.name, values)
                appending = True
                target = Argument("")
                self.arguments.append(target)
            target[field] = queue.popleft()
            if target[field] == "_":
                target[field] = ""
            if queue and limits:
                target[ArgumentField.MAX] = queue.popleft()
                if target[ArgumentField.MAX] == "_":
                    target[field] = ""

    def _add_defaults(self, args: list[str]) -> None:
        self.flags[Flag.DEFAULTS] = True
        self._add_argument_data(args, ArgumentField.DEFAULT)

    def _add_limits(self, args: list[str]) -> None:
        self.flags[Flag.LIMITS] = True
        self._add_argument_data(args, ArgumentField.MIN)

    def _add_category(self, args: list[str]) -> None:
        self.flags[Flag.CATEGORY] = True
        if args:
            self.set_category(args[0])

    def _add_script(self, args: list[str]) -> None:
        self.flags[Flag.SCRIPT] = True
        if args:
            self.script = args[0]

    def _add_ai(self, args: list[str]) -> None:
        self.flags[Flag.AI] = True
        if args:
            self.use_with_ai = args[0]

    def _add_ai_defaults(self, args: list[str]) -> None:
        self.flags[Flag.AI_DEFAULTS] = True
        self._add_argument_data(args, ArgumentField.AI_DEFAULT)

    def add(self, key: str, args: Iterable[str]) -> bool:
        """Apply an extra line such as ``_Defaults`` to the function.

        ``key`` is the line's suffix after the function name. Returns whether
        the line was used.
        """
        values = list(args)
        adders = {
            Flag.DEFAULTS: self._add_defaults,
            Flag.LIMITS: self._add_limits,
            Flag.CATEGORY: self._add_category,
            Flag.SCRIPT: self._add_script,
            Flag.AI: self._add_ai,
            Flag.AI_DEFAULTS: self._add_ai_defaults,
        }
        success = False
        for offset in range(len(Flag)):
            flag = Flag((self._last_flag + offset) % len(Flag))
            if key == flag.key:
                if not self.flags[flag]:
                    adders[flag](values)
                    self._last_flag = flag + 1
                    success = True
                break

        # Tolerate malformed lines found in older data files.
        if not success:
            if key == "":
                if len(values) == 1 and not self.flags[Flag.CATEGORY]:
                    if self.package.project.match_ui(values[0], UIType.TRIGGER_CATEGORY) is not None:
                        self._add_category(values)
                        self.flags[Flag.CATEGORY] = False
                        success = True
                if not self.flags[Flag.DEFAULTS] and not success:
                    if values:
                        prefix = Flag.DEFAULTS.key
                        if values[0].startswith(prefix):
                            values[0] = values[0][len(prefix) + 1:]
                    self._add_defaults(values)
                    self.flags[Flag.DEFAULTS] = False
                    success = True
            elif key == Flag.DEFAULTS.key and not self.flags[Flag.LIMITS]:
                self._add_limits(values)
                self.flags[Flag.LIMITS] = False
                success = True
            elif key == "_Script" and not self.flags[Flag.SCRIPT]:
                self._add_script(values)
                self.flags[Flag.SCRIPT] = False
                success = True

        if not success:
            _log.debug("%s %s %s %s", self.type_name(), self.name, key, values)
        return success

    def register(self) -> None:
        """Index the function in the project and in its package's category map."""
        self.package.project.add_ui(self)
        self.package.add_category_ui(self)

    def rename(self, name: str) -> None:
        self.package.project.remove_ui(self)
        self.package.remove_category_ui(self)
        self.name = name
        self.register()

    def set_category(self, category: str) -> None:
        """Move the function to ``category``, keeping the package's map current."""
        self.package.remove_category_ui(self)
        self.category = category
        self.package.add_category_ui(self)

    def form_display(self) -> str:
        leading = len(self.name) - len(self.name.lstrip(" "))
        if leading == len(self.name) and leading > 0:
            leading -= 1
        return "~" * leading + self.name[leading:]

    def trig_data(self) -> str:
        """The argument types and extra lines that follow the function's key and values."""
        if self.arguments:
            text = "," + ",".join(argument.type for argument in self.arguments)
        else:
            text = ",nothing"
        prefix = "_" + self.name
        text += "\n" + form_argument(prefix + Flag.DEFAULTS.key)
        text += ",".join(_blank(argument.default) for argument in self.arguments)
        if self.flags[Flag.LIMITS]:
            text += "\n" + form_argument(prefix + Flag.LIMITS.key)
            text += ",".join(f"{_blank(argument.min)},{_blank(argument.max)}" for argument in self.arguments)
        text += "\n" + form_argument(prefix + Flag.CATEGORY.key, self.category)
        if self.flags[Flag.SCRIPT]:
            text += "\n" + form_argument(prefix + Flag.SCRIPT.key, self.script)
        if self.use_with_ai == "1":
            text += "\n" + form_argument(prefix + Flag.AI.key, self.use_with_ai)
            if self.flags[Flag.AI_DEFAULTS]:
                text += "\n" + form_argument(prefix + Flag.AI_DEFAULTS.key)
                text += ",".join(_blank(argument.ai_default) for argument in self.arguments)
        return text + "\n"