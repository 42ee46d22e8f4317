from tcuiedit.project import Project
from tcuiedit.ui.defaultcategory import DefaultCategory
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


def test_display_is_read():
    package = FakePackage(Project(), strings={"WESTRING_INIT": "Init"})
    category = DefaultCategory(package, "Cat01", ["WESTRING_INIT", "ignored"])
    assert category.display(True) == "WESTRING_INIT"
    assert category.display() == "Init"


def test_form_display_is_name():
    package = FakePackage(Project(), strings={"WESTRING_INIT": "Init"})
    category = DefaultCategory(package, "Cat01", ["WESTRING_INIT"])
    assert category.form_display() == "Cat01"


def test_no_values():
    package = FakePackage(Project())
    category = DefaultCategory(package, "Cat02", [])
    assert category.display(True) == ""
    assert category.trig_data() == "Cat02"


def test_registered_in_project():
    project = Project()
    category = DefaultCategory(FakePackage(project), "Cat03", ["x"])
    assert category.type == UIType.DEFAULT_TRIGGER_CATEGORY
    assert project.match_ui("cat03", UIType.DEFAULT_TRIGGER_CATEGORY) is category
    assert project.category_counts == {}