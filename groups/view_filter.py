from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple, Union

from menu_catalog.catalog import GLOBAL_MODULE, GROUPS_MODULE, Branch, MenuCatalog
from menu_catalog.flatten import LeafRef

from .collation import collate_sorted
from .models import Group

MODE_ALL = "all"
MODE_GROUPS = "groups"
MODES = (MODE_ALL, MODE_GROUPS)

EMPTY_GROUPS_MESSAGE = "No hay grupos creados."


@dataclass(frozen=True)
class TreeView:
    module: str
    node: Branch


@dataclass(frozen=True)
class GroupEntry:
    index: int
    group: Group
    items: Tuple[LeafRef, ...]

    @property
    def name(self) -> str:
        return self.group.name


@dataclass(frozen=True)
class GroupsView:
    entries: Tuple[GroupEntry, ...]
    trailing: bool = False

    @property
    def placeholder(self) -> Optional[str]:
        if self.entries or self.trailing:
            return None
        return EMPTY_GROUPS_MESSAGE


ResolvedView = Union[TreeView, GroupsView]


def sort_groups(groups: Sequence[Group]) -> List[GroupEntry]:
    """Order groups by name for display, keeping their stored index.

    Items are copied and sorted by label; the stored groups are untouched.
    """
    ordered = collate_sorted(enumerate(groups), key=lambda pair: pair[1].name)
    return [
        GroupEntry(
            index=index,
            group=group,
            items=tuple(collate_sorted(group.items, key=lambda item: item.label)),
        )
        for index, group in ordered
    ]


@dataclass
class ViewFilterState:
    modes: Dict[str, str] = field(default_factory=dict)

    def mode(self, module: str) -> str:
        return self.modes.get(module, MODE_ALL)

    def set_mode(self, module: str, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"unknown view mode: {mode!r}")
        self.modes[module] = mode

    def groups_only(self, module: str) -> bool:
        return module == GROUPS_MODULE or self.mode(module) == MODE_GROUPS

    def current_view(
        self,
        module: str,
        catalog: MenuCatalog,
        groups: Sequence[Group],
    ) -> List[ResolvedView]:
        if self.groups_only(module):
            return [GroupsView(entries=tuple(sort_groups(groups)))]
        if module == GLOBAL_MODULE:
            node = catalog.global_tree()
        else:
            node = catalog.tree(module)
        sections: List[ResolvedView] = [TreeView(module=module, node=node)]
        if groups:
            sections.append(GroupsView(entries=tuple(sort_groups(groups)), trailing=True))
        return sections


def shows_filter(module: str) -> bool:
    return module != GROUPS_MODULE
