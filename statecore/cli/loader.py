"""
Resolve "package.module:attribute" references to reducers.
"""

import importlib
from collections.abc import Mapping
from typing import Any, Optional

from ..core.combine import CombinedReducer, combine_reducers
from ..core.reducer import is_reducer


def load_object(ref: str) -> Any:
    """
    Import ``module:attr`` (dotted attribute paths allowed after the colon).

    Raises:
        ValueError: If ref is malformed or the attribute does not exist
        ImportError: If the module cannot be imported
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected 'module:attribute', got {ref!r}")

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise ValueError(f"{module_name!r} has no attribute {attr_path!r}") from None
    return obj


def load_reducer(ref: str, production: Optional[bool] = None) -> Any:
    """
    Load a reducer reference.

    A mapping of reducers is combined; a CombinedReducer or any other reducer
    is returned as it is. production=None resolves from STATECORE_ENV.
    """
    obj = load_object(ref)
    if isinstance(obj, Mapping):
        return combine_reducers(obj, production=production, name=ref)
    if isinstance(obj, CombinedReducer) or is_reducer(obj):
        return obj
    raise ValueError(f"{ref!r} is a {type(obj).__name__}, not a reducer or mapping of reducers")
