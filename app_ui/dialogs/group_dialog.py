from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from PyQt6 import QtWidgets

from app_ui.controller import ConsoleController
from app_ui.ui_helpers import terms
from groups.errors import ValidationError
from menu_catalog.flatten import LeafRef


class GroupDialog(QtWidgets.QDialog):
    """Modal form for the open editing session.

    Every checkbox toggle and name edit is forwarded to the editor; the
    dialog only decides what is visible.
    """

    def __init__(self, controller: ConsoleController, parent: Optional[QtWidgets.QWidget] = None):
        super().__init__(parent)
        self.controller = controller
        self.editor = controller.editor
        session = self.editor.session
        is_edit = bool(session and session.is_edit)
        self.setWindowTitle(terms.EDIT_GROUP if is_edit else terms.CREATE_GROUP)
        self.resize(520, 560)
        self._fieldsets: List[Tuple[QtWidgets.QGroupBox, List[Tuple[LeafRef, QtWidgets.QCheckBox]]]] = []

        layout = QtWidgets.QVBoxLayout(self)

        form = QtWidgets.QFormLayout()
        self.name_edit = QtWidgets.QLineEdit(session.name_draft if session else "")
        self.name_edit.textChanged.connect(self.editor.set_name)
        form.addRow(terms.GROUP_NAME, self.name_edit)
        layout.addLayout(form)

        self.search_edit = QtWidgets.QLineEdit()
        self.search_edit.setPlaceholderText(terms.SEARCH_OPTIONS)
        self.search_edit.textChanged.connect(self._apply_filter)
        layout.addWidget(self.search_edit)

        scroll = QtWidgets.QScrollArea()
        scroll.setWidgetResizable(True)
        body = QtWidgets.QWidget()
        self._body_layout = QtWidgets.QVBoxLayout(body)
        scroll.setWidget(body)
        layout.addWidget(scroll, stretch=1)
        self._build_options(self.editor.candidates())
        self._body_layout.addStretch()

        button_row = QtWidgets.QHBoxLayout()
        button_row.addStretch()
        save_button = QtWidgets.QPushButton(terms.SAVE)
        cancel_button = QtWidgets.QPushButton(terms.CANCEL)
        save_button.clicked.connect(self._save)
        cancel_button.clicked.connect(self.reject)
        button_row.addWidget(save_button)
        button_row.addWidget(cancel_button)
        layout.addLayout(button_row)

    def _build_options(self, grouped: Dict[str, List[LeafRef]]) -> None:
        for module, leaves in grouped.items():
            box = QtWidgets.QGroupBox(module)
            box_layout = QtWidgets.QVBoxLayout(box)
            rows: List[Tuple[LeafRef, QtWidgets.QCheckBox]] = []
            for leaf in leaves:
                checkbox = QtWidgets.QCheckBox(terms.candidate_label(leaf))
                checkbox.setChecked(self.editor.is_selected(leaf))
                checkbox.toggled.connect(
                    lambda checked, ref=leaf: self.editor.set_selected(ref, checked)
                )
                box_layout.addWidget(checkbox)
                rows.append((leaf, checkbox))
            self._body_layout.addWidget(box)
            self._fieldsets.append((box, rows))

    def _apply_filter(self, text: str) -> None:
        visible = self.editor.candidates(text)
        for box, rows in self._fieldsets:
            shown = set(visible.get(box.title(), ()))
            for leaf, checkbox in rows:
                checkbox.setVisible(leaf in shown)
            box.setVisible(bool(shown))

    def _save(self) -> None:
        try:
            self.controller.save_group()
        except ValidationError as exc:
            QtWidgets.QMessageBox.warning(self, self.windowTitle(), exc.message)
            return
        self.accept()

    def reject(self) -> None:
        self.controller.cancel_edit()
        super().reject()
