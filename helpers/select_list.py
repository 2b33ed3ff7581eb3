"""
Select-list adapter: turns arbitrary items (or an enum) into option
entries for a drop-down in the web UI.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Type, TypeVar

from .enums import get_display_name

T = TypeVar("T")


@dataclass
class SelectListItem:
    """One option of a select list."""
    value: str
    text: str
    selected: bool = False
    disabled: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return asdict(self)


def to_select_list_items(
    items: Iterable[T],
    include: Callable[[T], bool],
    value: Callable[[T], str],
    text: Callable[[T], str],
    selected: Callable[[T], bool],
    add_first: Optional[SelectListItem] = None,
) -> list[SelectListItem]:
    """
    Build select-list options from a collection.

    Args:
        items: Source items
        include: Decides which items become options, e.g. ``lambda u: u is not None``
        value: Option value for an item, e.g. ``lambda u: str(u.id)``
        text: Option label for an item, e.g. ``lambda u: u.name``
        selected: Whether an item's option is pre-selected
        add_first: Optional placeholder option inserted at the top

    Returns:
        List of SelectListItem in source order
    """
    options = [
        SelectListItem(value=value(item), text=text(item), selected=selected(item))
        for item in items
        if include(item)
    ]
    if add_first is not None:
        options.insert(0, add_first)
    return options


def enum_select_list(
    enum_cls: Type[Enum],
    selected: Optional[Enum] = None,
    add_first: Optional[SelectListItem] = None,
) -> list[SelectListItem]:
    """One option per enum member, labelled with its display name."""
    return to_select_list_items(
        enum_cls,
        include=lambda member: True,
        value=lambda member: str(member.value),
        text=lambda member: get_display_name(member) or member.name,
        selected=lambda member: member is selected,
        add_first=add_first,
    )
