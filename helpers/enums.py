"""
Display metadata for enum members.

Metadata is attached with the ``enum_attributes`` class decorator:

    @enum_attributes(
        ACTIVE=(Display("Active", short_name="A"), Description("In use")),
        RETIRED=(Display("Retired"),),
    )
    class Status(Enum):
        ACTIVE = 1
        RETIRED = 2

and read back with ``get_display_name(Status.ACTIVE)`` or, from a stored
value, ``get_display_name_for_value(Status, 1)``.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Type, TypeVar

T = TypeVar("T")
A = TypeVar("A")


@dataclass(frozen=True)
class Display:
    """Human-readable names for a member."""
    name: str
    short_name: str = ""
    description: str = ""


@dataclass(frozen=True)
class Description:
    """Free-text description of a member."""
    text: str


# (enum class, member name) -> attached metadata
_REGISTRY: dict[tuple[type, str], tuple[Any, ...]] = {}


def enum_attributes(**attributes_by_member: tuple):
    """
    Class decorator attaching metadata objects to enum members.

    Raises:
        TypeError: If the decorated class is not an Enum
        KeyError: If a keyword does not name a member of the enum
    """
    def decorate(enum_cls):
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise TypeError(f"{enum_cls!r} is not an Enum")

        for member_name, attrs in attributes_by_member.items():
            if member_name not in enum_cls.__members__:
                raise KeyError(f"{enum_cls.__name__} has no member {member_name!r}")
            if not isinstance(attrs, (tuple, list)):
                attrs = (attrs,)
            _REGISTRY[(enum_cls, member_name)] = tuple(attrs)

        _lookup.cache_clear()
        return enum_cls

    return decorate


@lru_cache(maxsize=None)
def _lookup(enum_cls: type, member_name: str, attr_type: type):
    for attr in _REGISTRY.get((enum_cls, member_name), ()):
        if isinstance(attr, attr_type):
            return attr
    return None


def get_attribute(member: Enum, attr_type: Type[A]) -> A:
    """
    Get the first attribute of a given type attached to a member.

    Raises:
        LookupError: If no attribute of that type is attached
    """
    attr = _lookup(type(member), member.name, attr_type)
    if attr is None:
        raise LookupError(
            f"No {attr_type.__name__} attached to {type(member).__name__}.{member.name}"
        )
    return attr


def _member_for_value(enum_cls: Type[Enum], value: Any) -> Enum:
    try:
        return enum_cls(value)
    except ValueError:
        # Values stored as text, e.g. "2" from a form field
        if isinstance(value, str) and value.strip().lstrip("-").isdigit():
            return enum_cls(int(value))
        raise


def get_attribute_for_value(enum_cls: Type[Enum], value: Any, attr_type: Type[A]) -> A:
    """
    Get an attribute of the member holding a given value.

    Raises:
        ValueError: If no member has that value
        LookupError: If no attribute of that type is attached
    """
    return get_attribute(_member_for_value(enum_cls, value), attr_type)


def get_name(enum_cls: Type[Enum], value: Any) -> str:
    """Member name for a value. Raises ValueError for unknown values."""
    return _member_for_value(enum_cls, value).name


def get_display_name(member: Enum) -> str:
    try:
        return get_attribute(member, Display).name
    except Exception:
        return ""


def get_short_name(member: Enum) -> str:
    try:
        return get_attribute(member, Display).short_name
    except Exception:
        return ""


def get_description(member: Enum) -> str:
    try:
        return get_attribute(member, Description).text
    except Exception:
        return ""


def get_display_name_for_value(enum_cls: Type[Enum], value: Any) -> str:
    try:
        return get_attribute_for_value(enum_cls, value, Display).name
    except Exception:
        return ""


def get_short_name_for_value(enum_cls: Type[Enum], value: Any) -> str:
    try:
        return get_attribute_for_value(enum_cls, value, Display).short_name
    except Exception:
        return ""


def get_description_for_value(enum_cls: Type[Enum], value: Any) -> str:
    try:
        return get_attribute_for_value(enum_cls, value, Description).text
    except Exception:
        return ""


def map_members(enum_cls: Type[Enum], func: Callable[[Enum], T]) -> list[T]:
    """Apply func to every member in definition order."""
    return [func(member) for member in enum_cls]
