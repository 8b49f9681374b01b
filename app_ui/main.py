# =============================================================================
# NAV INDEX (search these tags)
# [NAV-00] Imports / constants
# [NAV-10] Tree rendering helpers
# [NAV-20] ModuleHeader
# [NAV-90] MainWindow
# [NAV-99] main() entrypoint
# =============================================================================

# === [NAV-00] Imports / constants ============================================
# region NAV-00 Imports / constants
from __future__ import annotations

import sys
from typing import Dict, List, Optional

from PyQt6 import QtCore, QtGui, QtWidgets

from . import config as ui_config
from .controller import ConsoleController
from .dialogs.group_dialog import GroupDialog
from .ui_helpers import terms
from diagnostics.logging_setup import configure_logging, get_logger
from groups.blob_store import JsonDirBlobStore
from groups.store import GroupStore
from groups.view_filter import MODE_ALL, MODE_GROUPS, GroupEntry, GroupsView, TreeView
from menu_catalog.catalog import GLOBAL_MODULE, Branch, Leaf, MenuCatalog
from menu_catalog.flatten import LeafRef
from runtime_bus import MessageEnvelope, topics

ROLE_LEAF = QtCore.Qt.ItemDataRole.UserRole
ROLE_GROUP = QtCore.Qt.ItemDataRole.UserRole + 1

logger = get_logger("app_ui.main")
# endregion


# === [NAV-10] Tree rendering helpers ==========================================
# region NAV-10 Tree rendering helpers
def _add_branch(
    parent: QtWidgets.QTreeWidgetItem,
    node: Branch,
    module: Optional[str],
    path: tuple,
) -> None:
    for label, child in node.children.items():
        item = QtWidgets.QTreeWidgetItem([label])
        parent.addChild(item)
        if isinstance(child, Leaf):
            if module is not None:
                item.setData(0, ROLE_LEAF, LeafRef(module=module, path=path, label=label))
            continue
        if module is None:
            # Global view: first level children are the modules themselves.
            _add_branch(item, child, label, ())
        else:
            _add_branch(item, child, module, path + (label,))


def _populate_tree(widget: QtWidgets.QTreeWidget, view: TreeView, is_global: bool) -> None:
    root = widget.invisibleRootItem()
    _add_branch(root, view.node, None if is_global else view.module, ())


def _populate_groups(widget: QtWidgets.QTreeWidget, view: GroupsView) -> None:
    if view.placeholder:
        placeholder = QtWidgets.QTreeWidgetItem([view.placeholder])
        placeholder.setFlags(QtCore.Qt.ItemFlag.NoItemFlags)
        widget.addTopLevelItem(placeholder)
        return
    for entry in view.entries:
        group_item = QtWidgets.QTreeWidgetItem([entry.name])
        group_item.setData(0, ROLE_GROUP, entry)
        font = group_item.font(0)
        font.setBold(True)
        group_item.setFont(0, font)
        for leaf in entry.items:
            child = QtWidgets.QTreeWidgetItem([terms.group_item_label(leaf)])
            # Display only: selecting a group item does not open a menu entry.
            group_item.addChild(child)
        widget.addTopLevelItem(group_item)


# endregion


# === [NAV-20] ModuleHeader ====================================================
# region NAV-20 ModuleHeader
class ModuleHeader(QtWidgets.QWidget):
    """Module title with the all/groups filter and the create button."""

    def __init__(self, controller: ConsoleController, on_create, parent=None):
        super().__init__(parent)
        self.controller = controller
        layout = QtWidgets.QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QtWidgets.QLabel("")
        self.title_label.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(self.title_label)
        layout.addStretch()

        self.all_button = QtWidgets.QPushButton(terms.SHOW_ALL)
        self.all_button.setCheckable(True)
        self.all_button.clicked.connect(lambda: controller.set_filter(MODE_ALL))
        self.groups_button = QtWidgets.QPushButton(terms.SHOW_GROUPS)
        self.groups_button.setCheckable(True)
        self.groups_button.clicked.connect(lambda: controller.set_filter(MODE_GROUPS))
        create_button = QtWidgets.QPushButton(terms.CREATE_GROUP)
        create_button.clicked.connect(on_create)

        layout.addWidget(self.all_button)
        layout.addWidget(self.groups_button)
        layout.addWidget(create_button)

    def sync(self) -> None:
        self.title_label.setText(self.controller.current_module)
        show = self.controller.shows_filter()
        mode = self.controller.filter_mode()
        self.all_button.setVisible(show)
        self.groups_button.setVisible(show)
        self.all_button.setChecked(mode == MODE_ALL)
        self.groups_button.setChecked(mode == MODE_GROUPS)


# endregion


# === [NAV-90] MainWindow ======================================================
# region NAV-90 MainWindow
class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: ConsoleController, title: str):
        super().__init__()
        self.controller = controller
        self.setWindowTitle(title)
        self.resize(960, 640)
        self._subscriptions: List[str] = []

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        splitter.setChildrenCollapsible(False)
        self.setCentralWidget(splitter)

        self.module_list = QtWidgets.QListWidget()
        self.module_list.setMinimumWidth(180)
        self._module_rows: Dict[str, int] = {}
        style = self.style()
        for row, module in enumerate(controller.modules()):
            pixmap = getattr(QtWidgets.QStyle.StandardPixmap, terms.icon_name_for(module))
            item = QtWidgets.QListWidgetItem(style.standardIcon(pixmap), module)
            self.module_list.addItem(item)
            self._module_rows[module] = row
        self.module_list.currentTextChanged.connect(self._on_module_clicked)
        splitter.addWidget(self.module_list)

        content = QtWidgets.QWidget()
        content_layout = QtWidgets.QVBoxLayout(content)
        self.header = ModuleHeader(controller, self._open_create)
        content_layout.addWidget(self.header)
        self.tree = QtWidgets.QTreeWidget()
        self.tree.setHeaderHidden(True)
        self.tree.setContextMenuPolicy(QtCore.Qt.ContextMenuPolicy.CustomContextMenu)
        self.tree.customContextMenuRequested.connect(self._on_context_menu)
        self.tree.itemClicked.connect(self._on_item_clicked)
        content_layout.addWidget(self.tree, stretch=1)
        splitter.addWidget(content)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 4)

        bus = controller.bus
        self._subscriptions.append(bus.subscribe(topics.VIEW_REFRESH, self._on_refresh))
        self._subscriptions.append(bus.subscribe(topics.LEAF_SELECTED, self._on_leaf_selected))
        self._subscriptions.append(
            bus.subscribe(topics.PERSISTENCE_WARNING, self._on_persistence_warning)
        )

        self._select_row(controller.current_module)
        self.render_module()

    # --- [NAV-90A] rendering
    def render_module(self) -> None:
        self.header.sync()
        self.tree.clear()
        is_global = self.controller.current_module == GLOBAL_MODULE
        for section in self.controller.sections():
            if isinstance(section, TreeView):
                _populate_tree(self.tree, section, is_global)
            else:
                _populate_groups(self.tree, section)

    def _select_row(self, module: str) -> None:
        row = self._module_rows.get(module)
        if row is None:
            return
        previous = self.module_list.blockSignals(True)
        try:
            self.module_list.setCurrentRow(row)
        finally:
            self.module_list.blockSignals(previous)

    # --- [NAV-90B] bus handlers
    def _on_refresh(self, envelope: MessageEnvelope) -> None:
        self._select_row(str(envelope.payload.get("module", "")))
        self.render_module()

    def _on_leaf_selected(self, envelope: MessageEnvelope) -> None:
        self.statusBar().showMessage(f"Seleccionado: {envelope.payload.get('path', '')}", 5000)

    def _on_persistence_warning(self, envelope: MessageEnvelope) -> None:
        detail = envelope.payload.get("detail", "")
        self.statusBar().showMessage(f"No se pudieron guardar los grupos: {detail}", 8000)

    # --- [NAV-90C] user actions
    def _on_module_clicked(self, module: str) -> None:
        if module:
            self.controller.select_module(module)

    def _on_item_clicked(self, item: QtWidgets.QTreeWidgetItem, _column: int) -> None:
        leaf = item.data(0, ROLE_LEAF)
        if isinstance(leaf, LeafRef):
            self.controller.select_leaf(leaf)

    def _open_create(self) -> None:
        self.controller.open_create()
        GroupDialog(self.controller, self).exec()

    def _on_context_menu(self, pos: QtCore.QPoint) -> None:
        item = self.tree.itemAt(pos)
        if item is None:
            return
        entry = item.data(0, ROLE_GROUP)
        if not isinstance(entry, GroupEntry):
            return
        handle = self.controller.handle_for(entry)
        menu = QtWidgets.QMenu(self)
        edit_action = menu.addAction(terms.EDIT_GROUP)
        delete_action = menu.addAction(terms.DELETE_GROUP)
        chosen = menu.exec(self.tree.viewport().mapToGlobal(pos))
        if chosen is edit_action:
            if self.controller.open_edit(handle) is not None:
                GroupDialog(self.controller, self).exec()
        elif chosen is delete_action:
            self.controller.delete_group(handle)

    def closeEvent(self, event: QtGui.QCloseEvent) -> None:
        for sub_id in self._subscriptions:
            self.controller.bus.unsubscribe(sub_id)
        self._subscriptions.clear()
        super().closeEvent(event)


# endregion


# === [NAV-99] main() entrypoint ===============================================
# region NAV-99 main() entrypoint
def build_controller(config: Dict) -> ConsoleController:
    store = GroupStore(JsonDirBlobStore(ui_config.get_store_dir(config)))
    start_module = str(config.get("start_module") or "") or None
    return ConsoleController(MenuCatalog(), store, start_module=start_module)


def main():
    config = ui_config.load_config()
    log_info = configure_logging(ui_config.get_data_dir(config))
    logger.info("logging to %s", log_info["log_path"])
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow(build_controller(config), str(config.get("window_title") or ""))
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
# endregion
