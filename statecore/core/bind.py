"""
Action creator binding.

Wraps action creators so calling them dispatches the action they build. This
is a convenience: ``dispatch(creators.add_todo("x"))`` works just as well.
"""

import functools
from types import ModuleType
from typing import Any, Callable, Dict, Mapping, Union

from .errors import InvalidArgumentError

Dispatch = Callable[[Any], Any]
ActionCreator = Callable[..., Any]


def _bind_action_creator(action_creator: ActionCreator, dispatch: Dispatch) -> ActionCreator:
    # Stored on a class, the instance arrives in args like any method receiver.
    @functools.wraps(action_creator)
    def bound(*args, **kwargs):
        return dispatch(action_creator(*args, **kwargs))

    return bound


def _module_creators(module: ModuleType) -> Dict[str, Any]:
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_") and getattr(value, "__module__", None) == module.__name__
    }


def bind_action_creators(
    action_creators: Union[ActionCreator, Mapping[str, Any], ModuleType],
    dispatch: Dispatch,
) -> Union[ActionCreator, Dict[str, ActionCreator]]:
    """
    Bind action creators to dispatch.

    Args:
        action_creators: A single action creator, a mapping of name ->
            action creator, or a module whose functions are action creators
            (only callables defined in that module are bound)
        dispatch: The store's dispatch callable

    Returns:
        A single wrapped function when given a function, otherwise a dict
        with the same keys holding wrapped callables. Non-callable entries
        are dropped.

    Raises:
        InvalidArgumentError: If action_creators is none of the above
    """
    if callable(action_creators) and not isinstance(action_creators, Mapping):
        return _bind_action_creator(action_creators, dispatch)

    if isinstance(action_creators, ModuleType):
        action_creators = _module_creators(action_creators)

    if not isinstance(action_creators, Mapping):
        received = "None" if action_creators is None else type(action_creators).__name__
        raise InvalidArgumentError(
            f"bind_action_creators expected a mapping, a module or a function, "
            f"instead received {received}. "
            f'Did you write "from creators import add_todo" and pass the result of '
            f"calling it, instead of passing the function or the module itself?"
        )

    return {
        key: _bind_action_creator(creator, dispatch)
        for key, creator in action_creators.items()
        if callable(creator)
    }
