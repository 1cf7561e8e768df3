"""
Replay runner: reconstruct composite state from an action sequence.
"""

import hashlib
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..core.action_types import ActionTypes, DEFAULT_ACTION_TYPES
from ..core.actions import Action
from ..core.canonical import canonical_json_bytes
from ..core.reducer import as_reducer
from ..core.undefined import UNDEFINED


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied (the INIT action is not counted)
        changes: Number of transitions that returned a new state object
    """
    state: Any
    applied: int
    changes: int


def replay(
    reducer: Any,
    actions: Iterable[Any],
    state: Any = UNDEFINED,
    action_types: Optional[ActionTypes] = None,
    init: bool = True,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: Combined reducer, Reducer, or plain (state, action) callable
        actions: Actions to apply, in order
        state: Starting state (UNDEFINED = let reducers supply initial state)
        action_types: Token set whose INIT action seeds the state
        init: Dispatch the INIT action before the recorded actions

    Returns:
        ReplayResult with final state and counts
    """
    target = as_reducer(reducer)
    action_types = action_types or DEFAULT_ACTION_TYPES

    st = state
    if init:
        st = target.transition(st, Action(type=action_types.init))

    applied = 0
    changes = 0
    for action in actions:
        nxt = target.transition(st, action)
        if nxt is not st:
            changes += 1
        st = nxt
        applied += 1

    return ReplayResult(state=st, applied=applied, changes=changes)


def compute_state_hash(state: Any) -> str:
    """
    Compute SHA-256 hash of state.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
