"""
Action model.

Actions are immutable records describing an intent to transition state.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .undefined import UNDEFINED


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Action type discriminator (conventionally a string)
        payload: Action-specific data
        meta: Metadata (source, reason, etc.)
    """
    type: Any
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload), "meta": dict(self.meta)}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Action":
        return Action(
            type=data["type"],
            payload=dict(data.get("payload") or {}),
            meta=dict(data.get("meta") or {}),
        )


def action_type_of(action: Any) -> Any:
    """
    Read the type of an Action, a mapping with a "type" key, or any object
    with a ``type`` attribute.

    Returns:
        The action type, or UNDEFINED when the action carries none
    """
    if action is None:
        return UNDEFINED
    if isinstance(action, Mapping):
        return action.get("type", UNDEFINED)
    return getattr(action, "type", UNDEFINED)
