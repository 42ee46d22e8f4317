"""The kinds of entry found in a trigger data file."""

from __future__ import annotations

from enum import IntEnum


class UIType(IntEnum):
    """Section kinds of a trigger data file, in file order."""

    TRIGGER_CATEGORY = 0
    TRIGGER_TYPE = 1
    TRIGGER_TYPE_DEFAULT = 2
    TRIGGER_PARAM = 3
    TRIGGER_EVENT = 4
    TRIGGER_CONDITION = 5
    TRIGGER_ACTION = 6
    TRIGGER_CALL = 7
    DEFAULT_TRIGGER_CATEGORY = 8
    DEFAULT_TRIGGER = 9
    UNKNOWN = -1

    @classmethod
    def from_name(cls, name: str) -> UIType:
        """The type whose section header is ``name``, or UNKNOWN."""
        for ui_type, type_text in zip(cls, TYPE_NAMES):
            if type_text == name:
                return ui_type
        return cls.UNKNOWN


TYPE_NAMES = (
    "TriggerCategories",
    "TriggerTypes",
    "TriggerTypeDefaults",
    "TriggerParams",
    "TriggerEvents",
    "TriggerConditions",
    "TriggerActions",
    "TriggerCalls",
    "DefaultTriggerCategories",
    "DefaultTriggers",
)


def type_name(ui_type: UIType | int) -> str:
    """Section header of ``ui_type``, or "UNKNOWN_TYPE"."""
    index = int(ui_type)
    if 0 <= index < len(TYPE_NAMES):
        return TYPE_NAMES[index]
    return "UNKNOWN_TYPE"


def is_function(ui_type: UIType | int) -> bool:
    """Whether ``ui_type`` is one of the function kinds (event to call)."""
    return UIType.TRIGGER_EVENT <= int(ui_type) <= UIType.TRIGGER_CALL


class FunctionType(IntEnum):
    """The four function kinds, numbered from zero."""

    EVENT = 0
    CONDITION = 1
    ACTION = 2
    CALL = 3

    def to_base(self) -> UIType:
        """The corresponding section type."""
        return UIType(int(self) + UIType.TRIGGER_EVENT)

    @classmethod
    def from_base(cls, ui_type: UIType | int) -> FunctionType:
        """The function kind of ``ui_type``; EVENT when it is not a function."""
        if not is_function(ui_type):
            return cls.EVENT
        return cls(int(ui_type) - UIType.TRIGGER_EVENT)