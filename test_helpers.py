"""
Tests for the string, enum metadata and select-list helpers.
"""

from enum import Enum, IntEnum

import pytest

from helpers import (
    Description,
    Display,
    SelectListItem,
    constrain_length,
    empty_to_null,
    enum_attributes,
    enum_select_list,
    get_attribute,
    get_attribute_for_value,
    get_description,
    get_description_for_value,
    get_display_name,
    get_display_name_for_value,
    get_name,
    get_short_name,
    get_short_name_for_value,
    is_null_or_empty,
    is_null_or_whitespace,
    map_members,
    remove_xml_invalid_chars,
    replace_last,
    strip_html,
    to_select_list_items,
    to_trim,
)


@enum_attributes(
    ACTIVE=(Display("Active", short_name="A"), Description("Currently in use")),
    RETIRED=Display("Retired"),
)
class Status(IntEnum):
    ACTIVE = 1
    RETIRED = 2
    DRAFT = 3


# ----------------------------------------------------------------------------
# Strings
# ----------------------------------------------------------------------------

def test_to_trim():
    assert to_trim(None) == ""
    assert to_trim("  a b \t\n") == "a b"


def test_null_or_empty_checks():
    assert is_null_or_empty(None)
    assert is_null_or_empty("")
    assert not is_null_or_empty(" ")
    assert is_null_or_whitespace(" \t")
    assert not is_null_or_whitespace(" x ")


def test_empty_to_null():
    assert empty_to_null(None) is None
    assert empty_to_null("   ") is None
    assert empty_to_null(" x ") == " x "


def test_strip_html():
    html = "<p>Hello&nbsp;<b>big</b> world</p>\r\n<br/>　!"
    assert strip_html(html) == "Hellobigworld!"
    assert strip_html(None) == ""
    assert strip_html("") == ""


def test_remove_xml_invalid_chars():
    assert remove_xml_invalid_chars("a\x00b\x0bc\td\ne&f\x1f") == "abc\td\nef"


def test_replace_last():
    assert replace_last("1,2,3,", ".") == "1,2,3."
    with pytest.raises(ValueError):
        replace_last("", "x")


@pytest.mark.parametrize("original, maximum, replacement, include, expected", [
    ("abcdefghij", 20, None, True, "abcdefghij"),  # already fits
    ("abcdefghij", 10, None, True, "abcdefghij"),  # exact fit
    ("abcdefghij", 8, None, True, "abcd..."),
    ("abcdefghij", 8, "~", False, "abcdefg~"),
    ("abcdefghij", 2, "...", True, "abcdefghij"),  # marker longer than limit
    ("abcdefghij", 0, None, True, "abcdefghij"),  # limit disabled
    ("abcdefghij", 3, "...", True, "..."),
    ("", 3, None, True, ""),
    (None, 3, None, True, None),
])
def test_constrain_length(original, maximum, replacement, include, expected):
    assert constrain_length(original, maximum, replacement, include) == expected


# ----------------------------------------------------------------------------
# Enum metadata
# ----------------------------------------------------------------------------

def test_get_attribute():
    assert get_attribute(Status.ACTIVE, Display) == Display("Active", short_name="A")
    assert get_attribute(Status.ACTIVE, Description).text == "Currently in use"
    with pytest.raises(LookupError):
        get_attribute(Status.DRAFT, Display)


def test_get_attribute_for_value():
    assert get_attribute_for_value(Status, 2, Display).name == "Retired"
    assert get_attribute_for_value(Status, "2", Display).name == "Retired"
    with pytest.raises(ValueError):
        get_attribute_for_value(Status, 99, Display)


def test_display_helpers_return_empty_on_failure():
    assert get_display_name(Status.ACTIVE) == "Active"
    assert get_short_name(Status.ACTIVE) == "A"
    assert get_description(Status.ACTIVE) == "Currently in use"

    assert get_short_name(Status.RETIRED) == ""
    assert get_description(Status.RETIRED) == ""
    assert get_display_name(Status.DRAFT) == ""


def test_value_based_display_helpers():
    assert get_display_name_for_value(Status, 1) == "Active"
    assert get_short_name_for_value(Status, "1") == "A"
    assert get_description_for_value(Status, 1) == "Currently in use"
    assert get_display_name_for_value(Status, 42) == ""
    assert get_display_name_for_value(Status, "nope") == ""


def test_get_name():
    assert get_name(Status, 3) == "DRAFT"
    assert get_name(Status, "2") == "RETIRED"
    with pytest.raises(ValueError):
        get_name(Status, 7)


def test_map_members():
    assert map_members(Status, get_display_name) == ["Active", "Retired", ""]


def test_decorator_rejects_unknown_member():
    with pytest.raises(KeyError):
        @enum_attributes(MISSING=Display("x"))
        class Color(Enum):
            RED = "red"


def test_decorator_rejects_non_enum():
    with pytest.raises(TypeError):
        @enum_attributes()
        class NotAnEnum:
            pass


# ----------------------------------------------------------------------------
# Select lists
# ----------------------------------------------------------------------------

def test_to_select_list_items():
    users = [
        {"id": 1, "name": "Plusone"},
        None,
        {"id": 2, "name": "Ann"},
    ]
    options = to_select_list_items(
        users,
        include=lambda u: u is not None,
        value=lambda u: str(u["id"]),
        text=lambda u: u["name"],
        selected=lambda u: u["name"] == "Plusone",
        add_first=SelectListItem(value="", text="-- choose --"),
    )

    assert [o.value for o in options] == ["", "1", "2"]
    assert [o.text for o in options] == ["-- choose --", "Plusone", "Ann"]
    assert [o.selected for o in options] == [False, True, False]


def test_to_select_list_items_without_placeholder():
    options = to_select_list_items(
        range(3),
        include=lambda n: n > 0,
        value=str,
        text=lambda n: f"#{n}",
        selected=lambda n: False,
    )
    assert options == [SelectListItem("1", "#1"), SelectListItem("2", "#2")]


def test_enum_select_list():
    options = enum_select_list(Status, selected=Status.RETIRED)

    assert [o.to_dict() for o in options] == [
        {"value": "1", "text": "Active", "selected": False, "disabled": False},
        {"value": "2", "text": "Retired", "selected": True, "disabled": False},
        {"value": "3", "text": "DRAFT", "selected": False, "disabled": False},
    ]
