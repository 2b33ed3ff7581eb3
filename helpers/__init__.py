"""
Helpers module for Po Helper.

Handles:
- String trimming, HTML stripping and length constraints
- Display metadata on enum members
- Select-list options for the web UI
"""

from .strings import (
    to_trim,
    empty_to_null,
    is_null_or_empty,
    is_null_or_whitespace,
    strip_html,
    remove_xml_invalid_chars,
    replace_last,
    constrain_length,
)
from .enums import (
    Display,
    Description,
    enum_attributes,
    get_attribute,
    get_attribute_for_value,
    get_name,
    get_display_name,
    get_short_name,
    get_description,
    get_display_name_for_value,
    get_short_name_for_value,
    get_description_for_value,
    map_members,
)
from .select_list import SelectListItem, to_select_list_items, enum_select_list

__all__ = [
    "to_trim",
    "empty_to_null",
    "is_null_or_empty",
    "is_null_or_whitespace",
    "strip_html",
    "remove_xml_invalid_chars",
    "replace_last",
    "constrain_length",
    "Display",
    "Description",
    "enum_attributes",
    "get_attribute",
    "get_attribute_for_value",
    "get_name",
    "get_display_name",
    "get_short_name",
    "get_description",
    "get_display_name_for_value",
    "get_short_name_for_value",
    "get_description_for_value",
    "map_members",
    "SelectListItem",
    "to_select_list_items",
    "enum_select_list",
]
