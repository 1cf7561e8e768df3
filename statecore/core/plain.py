"""
Plain-object classification for diagnostics.
"""

from typing import Any


def is_plain_object(value: Any) -> bool:
    """
    True if value is a plain dict record.

    dict literals and dict(...) results qualify. Subclass instances
    (OrderedDict, defaultdict, custom classes), lists, None and primitives
    do not.
    """
    return type(value) is dict


def describe_type(value: Any) -> str:
    """Short type name for diagnostic messages ("NoneType", "list", "Foo")."""
    return type(value).__name__
