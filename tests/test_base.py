import pytest

from tcuiedit.error import ErrorType
from tcuiedit.project import Project
from tcuiedit.ui.base import UIBase, form_argument
from tcuiedit.uitype import UIType


class FakeStrings:
    def __init__(self, table):
        self.table = table

    def get_value(self, name):
        return self.table.get(name, name)


class FakePackage:
    def __init__(self, project, name="pkg", strings=None):
        self.project = project
        self.name = name
        self.we_strings = FakeStrings(strings or {})
        project.add_package(self)


def _entry(package, name):
    ui = UIBase(package)
    ui.name = name
    ui.register()
    return ui


def test_form_argument_key_only():
    assert form_argument("key") == "key="


def test_form_argument_values_joined():
    assert form_argument("key", "a", "b") == "key=a,b"


def test_form_argument_needs_key():
    with pytest.raises(TypeError):
        form_argument()


def test_register_indexes_by_lower_name():
    project = Project()
    ui = _entry(FakePackage(project), "Thing")
    assert project.get_ui("THING") == [ui]


def test_rename_moves_index_entry():
    project = Project()
    ui = _entry(FakePackage(project), "old")
    ui.rename("new")
    assert ui.name == "new"
    assert project.get_ui("old") == []
    assert project.get_ui("new") == [ui]


def test_examine_name_unique():
    project = Project()
    ui = _entry(FakePackage(project), "solo")
    error = ui.examine_name()
    assert error.type == ErrorType.NONE
    assert error.items == []


def test_examine_name_redefinition():
    project = Project()
    first = _entry(FakePackage(project, "alpha"), "dup")
    second = _entry(FakePackage(project, "beta"), "dup")
    error = first.examine_name()
    assert error.name == "Redefinition"
    assert error.type == ErrorType.ERROR
    assert [(item.name, item.value, item.ui) for item in error.items] == [("beta", "dup", second)]


def test_display_resolves_strings():
    project = Project()
    ui = _entry(FakePackage(project, strings={"WESTRING_A": "Hello"}), "x")
    ui.set_display("WESTRING_A")
    assert ui.display() == "Hello"
    assert ui.display(True) == "WESTRING_A"


def test_form_display():
    project = Project()
    ui = _entry(FakePackage(project, strings={"WESTRING_A": "Hello"}), "x")
    assert ui.form_display() == "x"
    ui.set_display("WESTRING_A")
    assert ui.form_display() == "x" + " - " + "Hello"


@pytest.mark.parametrize("value,optional", [("0", False), ("1", False), ("", True), ("1", True)])
def test_examine_flag_accepts(value, optional):
    project = Project()
    ui = _entry(FakePackage(project), "x")
    assert ui.examine_flag(value, optional).type == ErrorType.NONE


@pytest.mark.parametrize("value,optional", [("", False), ("2", True), ("yes", False)])
def test_examine_flag_rejects(value, optional):
    project = Project()
    ui = _entry(FakePackage(project), "x")
    error = ui.examine_flag(value, optional)
    assert error.type == ErrorType.ERROR
    assert error.name == "Illegal"


def test_trig_data_and_type_info():
    project = Project()
    ui = _entry(FakePackage(project), "plain")
    assert ui.trig_data() == "plain"
    assert ui.is_function() is False
    assert ui.type_name() == "UNKNOWN_TYPE"
    assert ui.type == UIType.UNKNOWN