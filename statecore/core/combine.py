"""
Reducer composition.

combine_reducers() turns a mapping of named reducers into a single reducer
over a composite state dict. Every child reducer runs on every action against
its own slice; the results are gathered under the same names.

Guarantees:
- Shape probes run once, at composition time; a failure is re-raised on
  every call instead of at construction
- Child reducers run in the mapping's insertion order on every call
- When no slice changes (by identity) and the key count matches, the input
  state object itself is returned
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Set, Tuple

from ..config import Settings
from .action_types import ActionTypes, DEFAULT_ACTION_TYPES, PREFIX
from .actions import Action, action_type_of
from .errors import ConfigurationError, InvalidArgumentError, RuntimeContractViolation
from .plain import describe_type, is_plain_object
from .reducer import Reducer, as_reducer, is_reducer
from .undefined import UNDEFINED
from .warning import DiagnosticReporter


def _undefined_state_message(key: str, action: Any) -> str:
    action_type = action_type_of(action)
    if action_type is UNDEFINED or action_type is None or action_type == "":
        description = "an action"
    else:
        description = f'action "{action_type}"'
    return (
        f'Given {description}, reducer "{key}" returned UNDEFINED. '
        f"To ignore an action, you must explicitly return the previous state. "
        f"If you want this reducer to hold no value, you can return None instead of UNDEFINED."
    )


def _unexpected_shape_message(
    state: Any,
    keys: Tuple[str, ...],
    action: Any,
    action_types: ActionTypes,
    unexpected_key_cache: Set[Any],
) -> Optional[str]:
    action_type = action_type_of(action)
    if action_type == action_types.init:
        argument_name = "preloaded state"
    else:
        argument_name = "previous state received by the reducer"

    if not keys:
        return (
            "Store does not have a valid reducer. Make sure the argument passed "
            "to combine_reducers is a mapping whose values are reducers."
        )

    if not is_plain_object(state):
        return (
            f'The {argument_name} has unexpected type of "{describe_type(state)}". '
            f'Expected argument to be a dict with the following keys: "{", ".join(str(k) for k in keys)}"'
        )

    unexpected = [k for k in state if k not in keys and k not in unexpected_key_cache]
    unexpected_key_cache.update(unexpected)

    if action_type == action_types.replace:
        return None

    if unexpected:
        noun = "keys" if len(unexpected) > 1 else "key"
        return (
            f'Unexpected {noun} "{", ".join(str(k) for k in unexpected)}" found in {argument_name}. '
            f'Expected to find one of the known reducer keys instead: "{", ".join(str(k) for k in keys)}". '
            f"Unexpected keys will be ignored."
        )
    return None


def assert_reducer_shape(
    reducers: Mapping[str, Reducer],
    action_types: ActionTypes = DEFAULT_ACTION_TYPES,
) -> None:
    """
    Probe every reducer with the INIT token and with a random unknown token.

    Args:
        reducers: Filtered mapping of name -> Reducer
        action_types: Token set to probe with

    Raises:
        ConfigurationError: If a reducer returns UNDEFINED for either probe
    """
    for key, reducer in reducers.items():
        initial_state = reducer.transition(UNDEFINED, Action(type=action_types.init))
        if initial_state is UNDEFINED:
            raise ConfigurationError(
                f'Reducer "{key}" returned UNDEFINED during initialization. '
                f"If the state passed to the reducer is UNDEFINED, you must "
                f"explicitly return the initial state. The initial state may "
                f"not be UNDEFINED. If you don't want to set a value for this reducer, "
                f"you can use None instead of UNDEFINED."
            )

        probe = Action(type=action_types.probe_unknown_action())
        if reducer.transition(UNDEFINED, probe) is UNDEFINED:
            raise ConfigurationError(
                f'Reducer "{key}" returned UNDEFINED when probed with a random type. '
                f'Don\'t try to handle "{action_types.init}" or other actions in the '
                f'"{PREFIX}*" namespace. They are considered private. Instead, you must return the '
                f"current state for any unknown actions, unless it is UNDEFINED, "
                f"in which case you must return the initial state, regardless of the "
                f"action type. The initial state may not be UNDEFINED, but can be None."
            )


@dataclass(frozen=True)
class ShapeCheck:
    """
    Outcome of the composition-time shape probes.

    Fields:
        error: The exception raised by the probes, or None
    """
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error

    @staticmethod
    def run(reducers: Mapping[str, Reducer], action_types: ActionTypes) -> "ShapeCheck":
        try:
            assert_reducer_shape(reducers, action_types)
        except Exception as ex:
            return ShapeCheck(error=ex)
        return ShapeCheck()


class CombinedReducer:
    """
    Reducer over a composite state dict, one slice per named child reducer.

    Build through combine_reducers(). Instances are callable as
    ``combined(state, action)`` and also implement the Reducer protocol, so
    they nest inside other combined reducers.
    """

    def __init__(
        self,
        reducers: Mapping[str, Any],
        action_types: Optional[ActionTypes] = None,
        production: Optional[bool] = None,
        name: Optional[str] = None,
    ) -> None:
        if not isinstance(reducers, Mapping):
            raise InvalidArgumentError(
                f"combine_reducers expected a mapping of reducers, instead received "
                f"{describe_type(reducers)}."
            )
        if production is None:
            production = Settings.from_env().production

        self.name = name
        self.production = production
        self.action_types = action_types or DEFAULT_ACTION_TYPES
        self._reporter = DiagnosticReporter(enabled=not production, name=name)

        final: Dict[str, Reducer] = {}
        for key, value in reducers.items():
            if is_reducer(value):
                final[key] = as_reducer(value)
            elif value is None or value is UNDEFINED:
                self._reporter.report(f'No reducer provided for key "{key}"')
            else:
                self._reporter.report(
                    f'Value for key "{key}" is a {describe_type(value)}, not a reducer; ignoring it'
                )

        self._reducers = final
        self._keys: Tuple[str, ...] = tuple(final)
        self._unexpected_key_cache: Set[Any] = set()
        self.shape_check = ShapeCheck.run(final, self.action_types)

    @property
    def keys(self) -> Tuple[str, ...]:
        return self._keys

    @property
    def unexpected_keys(self) -> frozenset:
        """Keys already reported as unexpected (never cleared)."""
        return frozenset(self._unexpected_key_cache)

    def __call__(self, state: Any = UNDEFINED, action: Any = None) -> Any:
        self.shape_check.raise_for_error()

        if action is None:
            raise InvalidArgumentError("A combined reducer must be called with an action.")
        if state is UNDEFINED:
            state = {}

        if not self.production:
            message = _unexpected_shape_message(
                state, self._keys, action, self.action_types, self._unexpected_key_cache
            )
            if message:
                self._reporter.report(message)

        is_mapping = isinstance(state, Mapping)
        has_changed = False
        next_state: Dict[str, Any] = {}
        for key in self._keys:
            previous = state.get(key, UNDEFINED) if is_mapping else UNDEFINED
            result = self._reducers[key].transition(previous, action)
            if result is UNDEFINED:
                raise RuntimeContractViolation(_undefined_state_message(key, action))
            next_state[key] = result
            has_changed = has_changed or result is not previous

        has_changed = has_changed or len(self._keys) != (len(state) if is_mapping else 0)
        return next_state if has_changed else state

    def transition(self, slice: Any, action: Any) -> Any:
        return self(slice, action)

    def __repr__(self) -> str:
        return f"CombinedReducer(keys={list(self._keys)!r})"


def combine_reducers(
    reducers: Mapping[str, Any],
    *,
    action_types: Optional[ActionTypes] = None,
    production: Optional[bool] = None,
    name: Optional[str] = None,
) -> CombinedReducer:
    """
    Combine a mapping of named reducers into one reducer.

    Args:
        reducers: Mapping of name -> reducer (callable or Reducer). Entries
            that are not reducers are dropped with a diagnostic.
        action_types: Private token set shared with the store
            (default: DEFAULT_ACTION_TYPES)
        production: Disable diagnostics (default: STATECORE_ENV == "production")
        name: Trace id attached to diagnostics

    Returns:
        CombinedReducer producing dicts keyed like the filtered mapping

    Example:
        root = combine_reducers({"count": counter, "todos": todos})
        state = root(UNDEFINED, Action(type="INC"))
    """
    return CombinedReducer(reducers, action_types=action_types, production=production, name=name)
