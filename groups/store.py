from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from diagnostics.logging_setup import get_logger
from menu_catalog.flatten import LeafRef

from .blob_store import BlobStore
from .errors import IndexOutOfRange, PersistenceWarning
from .models import Group, GroupHandle, groups_from_json, groups_to_json

GROUPS_KEY = "misGrupos"

logger = get_logger("groups.store")


class GroupStore:
    """Ordered collection of user groups, written through to a blob store.

    Groups are identified by position. Every mutation bumps ``revision``
    so handles taken before it stop resolving.
    """

    def __init__(self, blob: BlobStore, key: str = GROUPS_KEY) -> None:
        self._blob = blob
        self._key = key
        self._groups: List[Group] = []
        self.revision = 0
        self.last_warning: Optional[PersistenceWarning] = None

    # --- persistence
    def load(self) -> Tuple[Group, ...]:
        self._groups = []
        self.revision += 1
        try:
            raw = self._blob.get(self._key)
        except (OSError, ValueError) as exc:
            self._warn(PersistenceWarning("load", str(exc)))
            return self.all()
        if raw is None:
            return self.all()
        try:
            groups, issues = groups_from_json(raw)
        except ValueError as exc:
            self._warn(PersistenceWarning("load", f"unreadable groups blob: {exc}"))
            return self.all()
        for issue in issues:
            self._warn(PersistenceWarning("load", f"skipped {issue}"))
        self._groups = groups
        logger.info("loaded %d group(s) from %s", len(groups), self._key)
        return self.all()

    def persist(self) -> bool:
        try:
            self._blob.put(self._key, groups_to_json(self._groups))
        except (OSError, TypeError, ValueError) as exc:
            self._warn(PersistenceWarning("save", str(exc)))
            return False
        return True

    def _warn(self, warning: PersistenceWarning) -> None:
        self.last_warning = warning
        logger.warning("%s", warning)

    # --- reads
    def all(self) -> Tuple[Group, ...]:
        return tuple(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def get(self, index: int) -> Group:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._groups):
            raise IndexOutOfRange(index, len(self._groups))
        return self._groups[index]

    def handle(self, index: int) -> GroupHandle:
        self.get(index)
        return GroupHandle(index=index, revision=self.revision)

    def resolve(self, handle: GroupHandle) -> int:
        if handle.revision != self.revision:
            raise IndexOutOfRange(handle.index, len(self._groups))
        self.get(handle.index)
        return handle.index

    # --- mutations
    def create(self, name: str, items: Iterable[LeafRef]) -> int:
        index = len(self._groups)
        self._groups.append(Group.create(name, items))
        self._mutated("create", index)
        return index

    def update(self, index: int, name: str, items: Iterable[LeafRef]) -> None:
        self.get(index)
        self._groups[index] = Group.create(name, items)
        self._mutated("update", index)

    def delete(self, index: int) -> Group:
        removed = self.get(index)
        del self._groups[index]
        self._mutated("delete", index)
        return removed

    def _mutated(self, action: str, index: int) -> None:
        self.revision += 1
        logger.info("group %s at index %d (total=%d)", action, index, len(self._groups))
        self.persist()
