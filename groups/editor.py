from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from diagnostics.logging_setup import get_logger
from menu_catalog.catalog import MenuCatalog
from menu_catalog.flatten import LeafRef, filter_candidates, flatten_all

from .errors import EditorStateError, ValidationError, ValidationReason
from .models import GroupHandle
from .store import GroupStore

logger = get_logger("groups.editor")


@dataclass
class EditingSession:
    target: Optional[GroupHandle] = None
    selected: Set[LeafRef] = field(default_factory=set)
    name_draft: str = ""

    @property
    def target_index(self) -> Optional[int]:
        return None if self.target is None else self.target.index

    @property
    def is_edit(self) -> bool:
        return self.target is not None


class GroupEditor:
    """Create/edit flow for a single group at a time.

    ``Idle`` when ``session`` is None, ``Editing`` otherwise.
    """

    def __init__(
        self,
        catalog: MenuCatalog,
        store: GroupStore,
        on_saved: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.on_saved = on_saved
        self.session: Optional[EditingSession] = None

    @property
    def is_editing(self) -> bool:
        return self.session is not None

    def open_create(self) -> EditingSession:
        self.session = EditingSession()
        return self.session

    def open_edit(self, index: int) -> EditingSession:
        group = self.store.get(index)
        self.session = EditingSession(
            target=self.store.handle(index),
            selected=set(group.items),
            name_draft=group.name,
        )
        return self.session

    def _require_session(self) -> EditingSession:
        if self.session is None:
            raise EditorStateError("no group is being edited")
        return self.session

    def toggle(self, leaf: LeafRef) -> bool:
        session = self._require_session()
        if leaf in session.selected:
            session.selected.discard(leaf)
            return False
        session.selected.add(leaf)
        return True

    def set_selected(self, leaf: LeafRef, selected: bool) -> None:
        session = self._require_session()
        if selected:
            session.selected.add(leaf)
        else:
            session.selected.discard(leaf)

    def set_name(self, text: str) -> None:
        self._require_session().name_draft = text or ""

    def is_selected(self, leaf: LeafRef) -> bool:
        return self.session is not None and leaf in self.session.selected

    def candidates(self, term: str = "") -> Dict[str, List[LeafRef]]:
        return filter_candidates(flatten_all(self.catalog), term)

    def cancel(self) -> None:
        self.session = None

    def save(self) -> int:
        session = self._require_session()
        name = session.name_draft.strip()
        if not name:
            raise ValidationError(ValidationReason.EMPTY_NAME)
        if not session.selected:
            raise ValidationError(ValidationReason.NO_SELECTION)
        items = self._ordered_selection(session.selected)
        if session.target is None:
            index = self.store.create(name, items)
        else:
            # Raises IndexOutOfRange once any mutation happened since open_edit.
            index = self.store.resolve(session.target)
            self.store.update(index, name, items)
        logger.info("saved group %r with %d item(s) at index %d", name, len(items), index)
        self.session = None
        if self.on_saved is not None:
            self.on_saved(index)
        return index

    def _ordered_selection(self, selected: Set[LeafRef]) -> List[LeafRef]:
        # Catalog order first; references the catalog no longer has go last.
        universe = flatten_all(self.catalog)
        ordered = [leaf for leaf in universe if leaf in selected]
        known = set(ordered)
        extras = sorted(
            (leaf for leaf in selected if leaf not in known),
            key=lambda leaf: (leaf.module, leaf.path, leaf.label),
        )
        return ordered + extras
