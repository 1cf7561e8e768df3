"""
Canonical serialization of composite state.

Replay and the CLI hash state through these functions so the same state
always produces the same bytes.
"""

import dataclasses
import json
from typing import Any, Mapping

from .undefined import UNDEFINED


def canonicalize(obj: Any) -> Any:
    """
    Convert a state tree to canonical, JSON-ready form.

    Rules:
    - mapping keys stringified and sorted
    - dataclass instances converted to dicts of their fields
    - tuples converted to lists, sets and frozensets to sorted lists
    - UNDEFINED converted to None
    - recursive normalization
    """
    if obj is UNDEFINED:
        return None
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, Mapping):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        return sorted((canonicalize(x) for x in obj), key=repr)
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Guarantees:
    - sort_keys=True (secondary safety)
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - canonical preprocessing via canonicalize()
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes but returns a string."""
    return canonical_json_bytes(obj).decode("utf-8")
