from __future__ import annotations

from typing import List, Optional

from diagnostics.logging_setup import get_logger
from groups.editor import EditingSession, GroupEditor
from groups.errors import IndexOutOfRange, PersistenceWarning
from groups.models import GroupHandle
from groups.store import GroupStore
from groups.view_filter import GroupEntry, ResolvedView, ViewFilterState, shows_filter
from menu_catalog.catalog import GLOBAL_MODULE, MenuCatalog, NotFound, is_synthetic
from menu_catalog.flatten import LeafRef
from runtime_bus import RuntimeBus, topics

logger = get_logger("app_ui.controller")

SOURCE = "console.controller"


class ConsoleController:
    """Owns the console state: current module, view filters, groups, editor."""

    def __init__(
        self,
        catalog: MenuCatalog,
        store: GroupStore,
        bus: Optional[RuntimeBus] = None,
        *,
        start_module: Optional[str] = None,
    ) -> None:
        self.catalog = catalog
        self.store = store
        self.bus = bus or RuntimeBus()
        self.filters = ViewFilterState()
        self.editor = GroupEditor(catalog, store, on_saved=self._on_group_saved)
        self._seen_warning: Optional[PersistenceWarning] = None
        self.store.load()
        self._report_persistence_warning()
        modules = catalog.console_modules()
        if start_module and self._is_known(start_module):
            self.current_module = start_module
        else:
            self.current_module = modules[0]

    # --- modules / filters
    def modules(self) -> List[str]:
        return self.catalog.console_modules()

    def _is_known(self, module: str) -> bool:
        return self.catalog.has_module(module) or is_synthetic(module)

    def select_module(self, module: str) -> None:
        if not self._is_known(module):
            raise NotFound(module)
        self.current_module = module
        self.bus.publish(topics.MODULE_SELECTED, {"module": module}, source=SOURCE)
        self.refresh()

    def filter_mode(self) -> str:
        return self.filters.mode(self.current_module)

    def shows_filter(self) -> bool:
        return shows_filter(self.current_module)

    def set_filter(self, mode: str) -> None:
        self.filters.set_mode(self.current_module, mode)
        self.bus.publish(
            topics.FILTER_CHANGED,
            {"module": self.current_module, "mode": mode},
            source=SOURCE,
        )
        self.refresh()

    def sections(self) -> List[ResolvedView]:
        return self.filters.current_view(self.current_module, self.catalog, self.store.all())

    def refresh(self) -> None:
        self.bus.publish(topics.VIEW_REFRESH, {"module": self.current_module}, source=SOURCE)

    # --- menu
    def select_leaf(self, leaf: LeafRef) -> str:
        # The module label only prefixes the path in the Global view.
        if self.current_module == GLOBAL_MODULE:
            path = leaf.full_path
        else:
            path = leaf.display_path
        logger.info("Seleccionado: %s", path)
        self.bus.publish(
            topics.LEAF_SELECTED,
            {"module": leaf.module, "path": path},
            source=SOURCE,
        )
        return path

    # --- groups
    def handle_for(self, entry: GroupEntry) -> GroupHandle:
        return self.store.handle(entry.index)

    def open_create(self) -> EditingSession:
        return self.editor.open_create()

    def open_edit(self, handle: GroupHandle) -> Optional[EditingSession]:
        try:
            index = self.store.resolve(handle)
            return self.editor.open_edit(index)
        except IndexOutOfRange as exc:
            logger.info("edit ignored: %s", exc)
            return None

    def save_group(self) -> Optional[int]:
        """Commit the open session. ``ValidationError`` propagates to the dialog."""
        try:
            return self.editor.save()
        except IndexOutOfRange as exc:
            logger.info("save ignored, group no longer exists: %s", exc)
            self.editor.cancel()
            self.refresh()
            return None

    def cancel_edit(self) -> None:
        self.editor.cancel()

    def delete_group(self, handle: GroupHandle) -> bool:
        try:
            index = self.store.resolve(handle)
        except IndexOutOfRange as exc:
            logger.info("delete ignored: %s", exc)
            return False
        removed = self.store.delete(index)
        self._report_persistence_warning()
        self.bus.publish(
            topics.GROUP_DELETED,
            {"index": index, "name": removed.name},
            source=SOURCE,
        )
        self.refresh()
        return True

    def _on_group_saved(self, index: int) -> None:
        self._report_persistence_warning()
        self.bus.publish(topics.GROUP_SAVED, {"index": index}, source=SOURCE)
        self.refresh()

    def _report_persistence_warning(self) -> None:
        warning = self.store.last_warning
        if warning is None or warning is self._seen_warning:
            return
        self._seen_warning = warning
        self.bus.publish(
            topics.PERSISTENCE_WARNING,
            {"operation": warning.operation, "detail": warning.detail},
            source=SOURCE,
        )
