"""
statecore

Reducer composition runtime: combine many pure state-transition functions into
one transition over a composite state tree.
"""

from .core import (
    UNDEFINED,
    Action,
    ActionTypes,
    DEFAULT_ACTION_TYPES,
    CombinedReducer,
    HandlerReducer,
    Reducer,
    combine_reducers,
    bind_action_creators,
    is_plain_object,
    ConfigurationError,
    RuntimeContractViolation,
    InvalidArgumentError,
)

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Action",
    "ActionTypes",
    "DEFAULT_ACTION_TYPES",
    "CombinedReducer",
    "HandlerReducer",
    "Reducer",
    "combine_reducers",
    "bind_action_creators",
    "is_plain_object",
    "ConfigurationError",
    "RuntimeContractViolation",
    "InvalidArgumentError",
]
