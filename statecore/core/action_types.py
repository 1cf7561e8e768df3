"""
Private action types.

These tokens are reserved. Reducers must return the current state for any
action they do not recognise, and their initial state when the current state
is UNDEFINED, whatever the action type. Application code should not reference
these tokens directly.
"""

import secrets
import string
from dataclasses import dataclass

PREFIX = "@@redux/"

_ALPHABET = string.digits + string.ascii_lowercase


def random_suffix(length: int = 6) -> str:
    """
    Unguessable suffix: base-36 characters joined by dots.

    Example:
        random_suffix() -> "k.3.z.q.1.a"
    """
    return ".".join(secrets.choice(_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class ActionTypes:
    """
    Set of private action-type tokens for one process.

    Construct once with generate() and pass the instance to every composer
    and store that needs to agree on the tokens.

    Fields:
        init: Dispatched by a store while it builds its initial state
        replace: Dispatched by a store when it swaps its whole reducer
    """
    init: str
    replace: str

    @staticmethod
    def generate() -> "ActionTypes":
        return ActionTypes(
            init=f"{PREFIX}INIT{random_suffix()}",
            replace=f"{PREFIX}REPLACE{random_suffix()}",
        )

    def probe_unknown_action(self) -> str:
        """Fresh token for probing unknown-action handling (new on every call)."""
        return f"{PREFIX}PROBE_UNKNOWN_ACTION{random_suffix()}"

    def is_private(self, action_type) -> bool:
        return isinstance(action_type, str) and action_type.startswith(PREFIX)


DEFAULT_ACTION_TYPES = ActionTypes.generate()
