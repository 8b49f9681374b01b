from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from menu_catalog.flatten import LeafRef


@dataclass(frozen=True)
class Group:
    name: str
    items: Tuple[LeafRef, ...]

    @classmethod
    def create(cls, name: str, items: Iterable[LeafRef]) -> "Group":
        return cls(name=name, items=tuple(items))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "items": [item.to_dict() for item in self.items]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Group":
        name = data.get("name")
        items = data.get("items")
        if not isinstance(name, str):
            raise ValueError("group name must be a string")
        if not isinstance(items, list):
            raise ValueError("group items must be a list")
        refs = []
        for raw in items:
            if not isinstance(raw, dict):
                raise ValueError("group item must be an object")
            refs.append(LeafRef.from_dict(raw))
        return cls(name=name, items=tuple(refs))


@dataclass(frozen=True)
class GroupHandle:
    """Position of a group, valid only for the store revision it was taken at."""

    index: int
    revision: int


def groups_to_json(groups: Iterable[Group]) -> str:
    return json.dumps([group.to_dict() for group in groups], ensure_ascii=False)


def groups_from_json(text: str) -> Tuple[List[Group], List[str]]:
    """Decode the stored array; returns the groups and per-entry problems.

    Raises ``ValueError`` (``json.JSONDecodeError`` included) when the blob
    itself is not a JSON array.
    """
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("stored groups must be a JSON array")
    groups: List[Group] = []
    issues: List[str] = []
    for position, raw in enumerate(data):
        if not isinstance(raw, dict):
            issues.append(f"entry {position}: not an object")
            continue
        try:
            groups.append(Group.from_dict(raw))
        except ValueError as exc:
            issues.append(f"entry {position}: {exc}")
    return groups, issues
