"""
JSON-lines action logs.

Each non-blank line is one action: {"type": "...", "payload": {...}, "meta": {...}}.
"""

import json
from typing import Iterator

from ..core.actions import Action
from ..core.errors import InvalidArgumentError


def read_actions(path: str) -> Iterator[Action]:
    """
    Read actions from a JSON-lines file.

    Yields:
        Actions in file order

    Raises:
        FileNotFoundError: If path does not exist
        InvalidArgumentError: If a line is not a JSON object with a "type" field
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                rec = json.loads(line)
            except json.JSONDecodeError as ex:
                raise InvalidArgumentError(f"{path}:{lineno}: invalid JSON ({ex.msg})") from ex
            if not isinstance(rec, dict) or "type" not in rec:
                raise InvalidArgumentError(f'{path}:{lineno}: action record needs a "type" field')
            yield Action.from_dict(rec)
