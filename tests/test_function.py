import pytest

from tcuiedit.project import Project
from tcuiedit.ui.category import Category
from tcuiedit.ui.function import Argument, ArgumentField, Flag, Function
from tcuiedit.uitype import FunctionType, UIType


class _Strings:
    def get_value(self, name):
        return name


class _Package:
    def __init__(self, project, name="pkg"):
        self.project = project
        self.name = name
        self.we_strings = _Strings()
        self.events = []
        project.add_package(self)

    def add_category_ui(self, ui):
        self.events.append(("add", ui.name, ui.category))

    def remove_category_ui(self, ui):
        self.events.append(("remove", ui.name, ui.category))


class _Action(Function):
    type = UIType.TRIGGER_ACTION


@pytest.fixture
def package():
    return _Package(Project())


def make(package, name="Foo", types=()):
    fn = _Action(package)
    fn.name = name
    fn.register()
    for arg_type in types:
        fn.arguments.append(Argument(arg_type))
        fn.argument_num += 1
    return fn


def test_argument_field_access():
    argument = Argument("integer")
    argument[ArgumentField.DEFAULT] = "3"
    assert argument[ArgumentField.TYPE] == "integer"
    assert argument.default == "3"


def test_flag_keys(package):
    fn = make(package, types=("integer",))
    assert Flag.DEFAULTS.key == "_Defaults"
    assert fn.add(Flag.DEFAULTS.key, ["1"])
    assert fn.flags[Flag.DEFAULTS]
    assert fn.arguments[0].default == "1"
    assert Flag.SCRIPT.key == "_ScriptName"
    assert fn.add(Flag.SCRIPT.key, ["DoFoo"])
    assert fn.script == "DoFoo"
    assert "_Foo_ScriptName=DoFoo" in fn.trig_data()


def test_function_type(package):
    assert make(package).function_type() is FunctionType.ACTION


def test_register_indexes_in_project_and_package(package):
    fn = make(package)
    assert package.project.get_ui("foo") == [fn]
    assert package.events == [("add", "Foo", "")]


def test_rename(package):
    fn = make(package)
    fn.rename("Bar")
    assert package.project.get_ui("foo") == []
    assert package.project.get_ui("bar") == [fn]
    assert package.events[-2:] == [("remove", "Foo", ""), ("add", "Bar", "")]


def test_set_category_reindexes(package):
    fn = make(package)
    fn.set_category("Cat")
    assert fn.category == "Cat"
    assert package.events[-2:] == [("remove", "Foo", ""), ("add", "Foo", "Cat")]


def test_add_defaults(package):
    fn = make(package, types=("integer", "real"))
    assert fn.add("_Defaults", ["1", "_"])
    assert fn.flags[Flag.DEFAULTS]
    assert [a.default for a in fn.arguments] == ["1", ""]


def test_add_limits(package):
    fn = make(package, types=("integer", "integer"))
    fn.add("_Limits", ["0", "10", "1", "5"])
    assert [(a.min, a.max) for a in fn.arguments] == [("0", "10"), ("1", "5")]
    assert "_Foo_Limits=0,10,1,5" in fn.trig_data()


def test_add_category_and_script(package):
    fn = make(package)
    fn.add("_Category", ["Cat"])
    fn.add("_ScriptName", ["DoFoo"])
    assert fn.category == "Cat"
    assert fn.script == "DoFoo"
    assert fn.flags[Flag.CATEGORY] and fn.flags[Flag.SCRIPT]


def test_duplicate_line_is_ignored(package):
    fn = make(package)
    fn.add("_Category", ["Cat"])
    assert not fn.add("_Category", ["Other"])
    assert fn.category == "Cat"


def test_unknown_key_is_ignored(package):
    fn = make(package, types=("integer",))
    assert not fn.add("_Whatever", ["1"])
    assert fn.arguments == [Argument("integer")]


def test_second_defaults_becomes_limits(package):
    fn = make(package, types=("integer",))
    fn.add("_Defaults", ["1"])
    assert fn.add("_Defaults", ["0", "9"])
    assert (fn.arguments[0].min, fn.arguments[0].max) == ("0", "9")
    assert not fn.flags[Flag.LIMITS]


def test_old_script_key(package):
    fn = make(package)
    assert fn.add("_Script", ["DoFoo"])
    assert fn.script == "DoFoo"
    assert not fn.flags[Flag.SCRIPT]


def test_empty_key_with_known_category(package):
    Category(package, "Cat", ["Display", "icon"])
    fn = make(package)
    assert fn.add("", ["Cat"])
    assert fn.category == "Cat"
    assert not fn.flags[Flag.CATEGORY]


def test_empty_key_as_defaults(package):
    fn = make(package, types=("integer",))
    assert fn.add("", ["_Defaults=5"])
    assert fn.arguments[0].default == "5"
    assert not fn.flags[Flag.DEFAULTS]


def test_extra_values_create_arguments(package):
    fn = make(package, types=("integer",))
    fn.add("_Defaults", ["1", "2"])
    assert [a.default for a in fn.arguments] == ["1", "2"]
    assert fn.arguments[1].type == ""


def test_empty_extra_values_are_dropped(package):
    fn = make(package, types=("integer",))
    fn.add("_Defaults", ["1", "_", "nothing", ""])
    assert len(fn.arguments) == 1


def test_single_empty_value_without_arguments(package):
    fn = make(package)
    fn.add("_Defaults", [""])
    assert fn.arguments == []


def test_trig_data_without_arguments(package):
    fn = make(package)
    fn.category = "Cat"
    assert fn.trig_data() == ",nothing\n_Foo_Defaults=\n_Foo_Category=Cat\n"


def test_form_display_marks_leading_spaces(package):
    assert make(package, name="  foo").form_display() == "~~foo"
    assert make(package, name="bar").form_display() == "bar"


def _replay(package, source, types):
    target = make(package, name=source.name, types=types)
    lines = source.trig_data().strip("\n").split("\n")[1:]
    prefix = "_" + source.name
    for line in lines:
        key, _, values = line.partition("=")
        target.add(key[len(prefix):], values.split(","))
    return target


@pytest.mark.parametrize(
    "lines",
    [
        [("_Defaults", ["1", "_"])],
        [("_Defaults", ["1", "2"]), ("_Limits", ["0", "10", "_", "_"])],
        [("_Category", ["Cat"]), ("_ScriptName", ["DoFoo"])],
        [("_UseWithAI", ["1"]), ("_AIDefaults", ["3", "4"])],
    ],
)
def test_trig_data_round_trip(lines):
    project = Project()
    first = _Package(project, "a")
    second = _Package(project, "b")
    types = ("integer", "real")
    fn = make(first, types=types)
    for key, values in lines:
        fn.add(key, values)
    copy = _replay(second, fn, types)
    assert copy.trig_data() == fn.trig_data()
    assert copy.arguments == fn.arguments