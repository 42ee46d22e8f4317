import pytest

from tcuiedit.error import (
    Error,
    ErrorItem,
    ErrorType,
    FormatError,
    NotFoundError,
    RedefinedError,
    TCUIEditError,
    TypeMismatchError,
    UndefinedError,
)


def test_default_error_is_none_type():
    error = Error()
    assert error.type == ErrorType.NONE
    assert error.name == ""
    assert error.items == []
    assert error.type_name() == ""


@pytest.mark.parametrize(
    "error_type, expected",
    [
        (ErrorType.NONE, ""),
        (ErrorType.ERROR, "Error"),
        (ErrorType.WARNING, "Warning"),
        (ErrorType.TIP, "Tip"),
    ],
)
def test_type_names(error_type, expected):
    assert Error("x", error_type).type_name() == expected


@pytest.mark.parametrize(
    "error_type, expected",
    [
        (ErrorType.NONE, "black"),
        (ErrorType.ERROR, "red"),
        (ErrorType.WARNING, "darkYellow"),
        (ErrorType.TIP, "black"),
    ],
)
def test_colors(error_type, expected):
    assert Error("x", error_type).color() == expected


def test_unknown_type_falls_back():
    error = Error("odd", 9)
    assert error.type_name() == "UNKNOWN_TYPE"
    assert error.color() == Error().color()


def test_add_item_keeps_order_and_ui():
    marker = object()
    error = Error("Redefinition", ErrorType.ERROR)
    first = error.add_item("pkg", "Foo", marker)
    error.add_item("other", "foo")
    assert error.items[0] is first
    assert error.items[0] == ErrorItem("pkg", "Foo", marker)
    assert error.items[1].ui is None
    assert [item.name for item in error.items] == ["pkg", "other"]


@pytest.mark.parametrize(
    "exc",
    [UndefinedError, RedefinedError, NotFoundError, FormatError, TypeMismatchError],
)
def test_exceptions_share_base(exc):
    with pytest.raises(TCUIEditError) as info:
        raise exc("boom")
    assert issubclass(exc, TCUIEditError)
    assert str(info.value) == "boom"
    assert type(info.value) is exc