"""The four kinds of trigger function: events, conditions, actions and calls."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from tcuiedit.ui.base import form_argument
from tcuiedit.ui.function import Argument, Function
from tcuiedit.uitype import UIType


class _VersionedFunction(Function):
    """A function whose values are a game version followed by argument types."""

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.name = name
        self.register()
        values = iter(args)
        self.version = next(values, "")
        for argument_type in values:
            self.arguments.append(Argument(argument_type))
            self.argument_num += 1

    def trig_data(self) -> str:
        return form_argument(self.name, self.version) + super().trig_data()


class Event(_VersionedFunction):
    """A ``[TriggerEvents]`` entry.

    Values: first game version, then argument types. The leading ``trigger``
    argument is implied and not listed.
    """

    type = UIType.TRIGGER_EVENT

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package, name, args)

    def trig_data(self) -> str:
        return super().trig_data()


class Condition(_VersionedFunction):
    """A ``[TriggerConditions]`` entry: a boolean condition function.

    Values: first game version, then argument types.
    """

    type = UIType.TRIGGER_CONDITION

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package, name, args)

    def trig_data(self) -> str:
        return super().trig_data()


class Action(_VersionedFunction):
    """A ``[TriggerActions]`` entry.

    Values: first game version, then argument types.
    """

    type = UIType.TRIGGER_ACTION

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package, name, args)

    def trig_data(self) -> str:
        return super().trig_data()


class Call(Function):
    """A ``[TriggerCalls]`` entry: a function usable as a parameter value.

    Values: first game version, a flag telling whether the call may be used in
    events, the return type, then argument types.
    """

    type = UIType.TRIGGER_CALL

    def __init__(self, package: Any, name: str, args: Iterable[str]) -> None:
        super().__init__(package)
        self.event_flag = ""
        self.return_type = ""
        self.name = name
        self.register()
        values = iter(args)
        self.version = next(values, "")
        self.event_flag = next(values, "")
        return_type = next(values, None)
        if return_type is not None:
            self.set_return_type(return_type)
        for argument_type in values:
            self.arguments.append(Argument(argument_type))
            self.argument_num += 1

    def set_return_type(self, return_type: str) -> None:
        """Change the return type, keeping the package's category map current."""
        self.package.remove_category_ui(self)
        self.return_type = return_type
        self.package.add_category_ui(self)

    def form_display(self) -> str:
        return f"({self.return_type}) {super().form_display()}"

    def trig_data(self) -> str:
        head = form_argument(self.name, self.version, self.event_flag, self.return_type)
        return head + super().trig_data()