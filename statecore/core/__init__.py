"""
Core reducer composition primitives.

This module provides the foundational abstractions:
- Action: Immutable intent records
- ActionTypes: Private action-type tokens (INIT, REPLACE, probes)
- Reducer: Single-method transition protocol
- combine_reducers: Compose named reducers into one transition
- bind_action_creators: Wrap action creators with dispatch
- Canonical: Deterministic serialization
"""

from .undefined import UNDEFINED
from .actions import Action, action_type_of
from .action_types import ActionTypes, DEFAULT_ACTION_TYPES
from .reducer import Reducer, HandlerReducer, as_reducer, is_reducer
from .plain import is_plain_object, describe_type
from .combine import CombinedReducer, ShapeCheck, combine_reducers, assert_reducer_shape
from .bind import bind_action_creators
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .errors import ConfigurationError, RuntimeContractViolation, InvalidArgumentError

__all__ = [
    "UNDEFINED",
    "Action",
    "action_type_of",
    "ActionTypes",
    "DEFAULT_ACTION_TYPES",
    "Reducer",
    "HandlerReducer",
    "as_reducer",
    "is_reducer",
    "is_plain_object",
    "describe_type",
    "CombinedReducer",
    "ShapeCheck",
    "combine_reducers",
    "assert_reducer_shape",
    "bind_action_creators",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "ConfigurationError",
    "RuntimeContractViolation",
    "InvalidArgumentError",
]
