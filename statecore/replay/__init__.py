"""
Replay of recorded actions through a reducer.

Replay folds an action sequence into a final state.
Same actions through the same pure reducers -> same state.
"""

from .runner import ReplayResult, replay, compute_state_hash
from .source import read_actions

__all__ = [
    "ReplayResult",
    "replay",
    "compute_state_hash",
    "read_actions",
]
