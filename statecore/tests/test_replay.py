"""
Tests for replay determinism.

Critical: Replay must produce identical state across multiple runs.
"""

import json

import pytest

from statecore.core import UNDEFINED, Action, HandlerReducer, combine_reducers
from statecore.core.canonical import canonical_json_str
from statecore.core.errors import InvalidArgumentError
from statecore.replay import compute_state_hash, read_actions, replay


def build_root():
    counter = HandlerReducer(initial=0)
    counter.register("INC", lambda cur, a: cur + a.payload.get("inc", 1))

    log = HandlerReducer(initial=())
    log.register("NOTE", lambda cur, a: cur + (a.payload["text"],))

    return combine_reducers({"counter": counter, "log": log}, production=True)


def write_log(path, records):
    with open(path, "w", encoding="utf-8") as f:
        for rec in records:
            f.write(json.dumps(rec) + "\n")


def test_replay_determinism_100_runs():
    """Replay same actions 100 times must produce identical state."""
    root = build_root()
    actions = [Action(type="INC", payload={"inc": i}) for i in range(10)]

    results = set()
    for _ in range(100):
        results.add(canonical_json_str(replay(root, actions).state))

    assert len(results) == 1

    final = replay(root, actions)
    assert final.state == {"counter": 45, "log": ()}
    assert final.applied == 10


def test_replay_counts_changes():
    """Only transitions returning a new object count as changes."""
    root = build_root()
    actions = [
        Action(type="INC"),
        Action(type="NOOP"),
        Action(type="NOTE", payload={"text": "hi"}),
        Action(type="NOOP"),
    ]

    result = replay(root, actions)

    assert result.applied == 4
    assert result.changes == 2
    assert result.state == {"counter": 1, "log": ("hi",)}


def test_replay_empty():
    """Replay with no actions returns the INIT state."""
    result = replay(build_root(), [])

    assert result.applied == 0
    assert result.changes == 0
    assert result.state == {"counter": 0, "log": ()}


def test_replay_without_init_from_state():
    result = replay(build_root(), [Action(type="INC")], state={"counter": 10, "log": ()}, init=False)

    assert result.state["counter"] == 11


def test_replay_plain_function():
    def total(state, action):
        state = 0 if state is UNDEFINED else state
        return state + action.payload.get("n", 0)

    result = replay(total, [Action(type="ADD", payload={"n": 2}), Action(type="ADD", payload={"n": 3})])

    assert result.state == 5


def test_read_actions(tmp_path):
    path = tmp_path / "actions.jsonl"
    write_log(path, [{"type": "INC"}, {"type": "NOTE", "payload": {"text": "x"}}])
    with open(path, "a", encoding="utf-8") as f:
        f.write("\n")

    actions = list(read_actions(str(path)))

    assert actions == [Action(type="INC"), Action(type="NOTE", payload={"text": "x"})]


def test_read_actions_rejects_untyped_records(tmp_path):
    path = tmp_path / "actions.jsonl"
    write_log(path, [{"type": "INC"}, {"payload": {}}])

    with pytest.raises(InvalidArgumentError, match=":2:"):
        list(read_actions(str(path)))


def test_read_actions_rejects_bad_json(tmp_path):
    path = tmp_path / "actions.jsonl"
    path.write_text("{not json}\n", encoding="utf-8")

    with pytest.raises(InvalidArgumentError, match="invalid JSON"):
        list(read_actions(str(path)))


def test_state_hash_ignores_key_order():
    assert compute_state_hash({"a": 1, "b": (1, 2)}) == compute_state_hash({"b": [1, 2], "a": 1})
    assert len(compute_state_hash({})) == 64
