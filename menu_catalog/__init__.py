from .catalog import (
    GLOBAL_MODULE,
    GROUPS_MODULE,
    LEAF,
    Branch,
    Leaf,
    MenuCatalog,
    MenuNode,
    NotFound,
    build_tree,
    is_synthetic,
)
from .flatten import LeafRef, filter_candidates, flatten, flatten_all, group_by_module

__all__ = [
    "GLOBAL_MODULE",
    "GROUPS_MODULE",
    "LEAF",
    "Branch",
    "Leaf",
    "LeafRef",
    "MenuCatalog",
    "MenuNode",
    "NotFound",
    "build_tree",
    "filter_candidates",
    "flatten",
    "flatten_all",
    "group_by_module",
    "is_synthetic",
]
