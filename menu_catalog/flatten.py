from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .catalog import Branch, Leaf, MenuCatalog

PATH_SEPARATOR = " > "


@dataclass(frozen=True)
class LeafRef:
    module: str
    path: Tuple[str, ...]
    label: str

    @property
    def display_path(self) -> str:
        return PATH_SEPARATOR.join(self.path + (self.label,))

    @property
    def full_path(self) -> str:
        return PATH_SEPARATOR.join((self.module,) + self.path + (self.label,))

    def to_dict(self) -> Dict[str, object]:
        return {"module": self.module, "path": list(self.path), "label": self.label}

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "LeafRef":
        module = data.get("module")
        label = data.get("label")
        path = data.get("path")
        if not isinstance(module, str) or not isinstance(label, str):
            raise ValueError("leaf reference needs string module and label")
        if not isinstance(path, list) or not all(isinstance(p, str) for p in path):
            raise ValueError("leaf reference path must be a list of strings")
        return cls(module=module, path=tuple(path), label=label)


def flatten(tree: Branch, module: str) -> List[LeafRef]:
    leaves: List[LeafRef] = []

    def _walk(node: Branch, path: Tuple[str, ...]) -> None:
        for label, child in node.children.items():
            if isinstance(child, Leaf):
                leaves.append(LeafRef(module=module, path=path, label=label))
            else:
                _walk(child, path + (label,))

    _walk(tree, ())
    return leaves


def flatten_all(catalog: MenuCatalog) -> List[LeafRef]:
    leaves: List[LeafRef] = []
    for module in catalog.modules():
        leaves.extend(flatten(catalog.tree(module), module))
    return leaves


def group_by_module(leaves: Iterable[LeafRef]) -> Dict[str, List[LeafRef]]:
    grouped: Dict[str, List[LeafRef]] = {}
    for leaf in leaves:
        grouped.setdefault(leaf.module, []).append(leaf)
    return grouped


def filter_candidates(leaves: Iterable[LeafRef], term: str) -> Dict[str, List[LeafRef]]:
    """Group leaves by module, keeping those whose path contains ``term``.

    Matching is case-insensitive against ``display_path``. Modules left
    without a visible leaf are omitted.
    """
    needle = (term or "").strip().lower()
    grouped = group_by_module(leaves)
    if not needle:
        return grouped
    visible: Dict[str, List[LeafRef]] = {}
    for module, items in grouped.items():
        matches = [leaf for leaf in items if needle in leaf.display_path.lower()]
        if matches:
            visible[module] = matches
    return visible
