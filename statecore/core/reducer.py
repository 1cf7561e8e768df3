"""
Reducer: pure state transition.

A reducer must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
- Total (never returns UNDEFINED; returns its initial state when given UNDEFINED)
"""

from typing import Any, Callable, Dict, Hashable, Protocol, runtime_checkable

from .undefined import UNDEFINED
from .actions import action_type_of

# Handler signature: (current_slice, action) -> new_slice
Handler = Callable[[Any, Any], Any]


@runtime_checkable
class Reducer(Protocol):
    """Single-method transition capability."""

    def transition(self, slice: Any, action: Any) -> Any:
        ...


class FunctionReducer:
    """Adapts a plain ``(slice, action) -> slice`` callable to the Reducer protocol."""

    __slots__ = ("fn",)

    def __init__(self, fn: Handler) -> None:
        self.fn = fn

    def transition(self, slice: Any, action: Any) -> Any:
        return self.fn(slice, action)

    def __repr__(self) -> str:
        return f"FunctionReducer({getattr(self.fn, '__name__', self.fn)!r})"


def is_reducer(value: Any) -> bool:
    """True if value implements transition() or is a plain callable."""
    return callable(getattr(value, "transition", None)) or callable(value)


def as_reducer(value: Any) -> Reducer:
    """
    Return value as a Reducer.

    Objects implementing transition() are returned as they are; plain
    callables are wrapped in FunctionReducer.

    Raises:
        TypeError: If value is neither
    """
    if callable(getattr(value, "transition", None)):
        return value
    if callable(value):
        return FunctionReducer(value)
    raise TypeError(f"Expected a reducer, got {type(value).__name__}")


class HandlerReducer:
    """
    Slice reducer built from a registry of per-action-type handlers.

    Unknown action types return the current slice untouched, and an UNDEFINED
    slice is replaced by the initial value before any handler runs, so the
    reducer always passes the composition shape probes.

    Usage:
        todos = HandlerReducer(initial=())
        todos.register("ADD_TODO", lambda cur, action: cur + (action.payload["text"],))
        reducers = {"todos": todos}
    """

    def __init__(self, initial: Any = None) -> None:
        if initial is UNDEFINED:
            raise ValueError("HandlerReducer initial value may not be UNDEFINED")
        self.initial = initial
        self._handlers: Dict[Hashable, Handler] = {}

    def register(self, action_type: Hashable, handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action_type: Action type the handler responds to
            handler: Pure function (current_slice, action) -> new_slice
        """
        self._handlers[action_type] = handler

    def transition(self, slice: Any, action: Any) -> Any:
        current = self.initial if slice is UNDEFINED else slice
        handler = self._handlers.get(action_type_of(action))
        if handler is None:
            return current
        return handler(current, action)

    def __call__(self, slice: Any = UNDEFINED, action: Any = None) -> Any:
        return self.transition(slice, action)
