# -*- coding: utf-8 -*-
"""Main window: load, search, filter and update a YAML to-do list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from yamltodo.constants import APP_TITLE, APP_VERSION, STATUS_FILTER_MODES
from yamltodo.core.search import StatusFilter
from yamltodo.gui.controller import TodoController
from yamltodo.gui.results_widget import ResultsWidget

logger = logging.getLogger(__name__)


LIGHT_STYLE = """
QMainWindow, QWidget {
    background: #f3f5f8;
    color: #1f2937;
    font-family: "Segoe UI", "Noto Sans", sans-serif;
    font-size: 12px;
}
QLabel#appTitle { font-size: 20px; font-weight: 700; color: #0f172a; }
QLabel#mutedText { color: #6b7280; }
QLabel#errorText { color: #b45309; font-weight: 600; }
QFrame#panelCard { background: white; border: 1px solid #d0d7e2; border-radius: 10px; }
QPushButton#secondaryButton {
    background: white; border: 1px solid #d0d7e2; border-radius: 8px; padding: 4px 10px;
}
QPushButton#secondaryButton:hover { border-color: #93c5fd; background: #f8fbff; }
QPushButton#greenButton {
    background: #16a34a; color: white; border: 1px solid #15803d; border-radius: 8px; padding: 4px 10px;
}
QPushButton#dangerButton {
    background: #dc2626; color: white; border: 1px solid #b91c1c; border-radius: 8px; padding: 4px 10px;
}
"""

DARK_STYLE = """
QMainWindow, QWidget {
    background: #1e1f22;
    color: #e5e7eb;
    font-family: "Segoe UI", "Noto Sans", sans-serif;
    font-size: 12px;
}
QLabel#appTitle { font-size: 20px; font-weight: 700; color: #f9fafb; }
QLabel#mutedText { color: #9ca3af; }
QLabel#errorText { color: #facc15; font-weight: 600; }
QFrame#panelCard { background: #2b2d31; border: 1px solid #3f4147; border-radius: 10px; }
QLineEdit, QComboBox { background: #2b2d31; border: 1px solid #3f4147; border-radius: 6px; padding: 3px; }
QPushButton#secondaryButton {
    background: #2b2d31; border: 1px solid #4b5563; border-radius: 8px; padding: 4px 10px;
}
QPushButton#secondaryButton:hover { border-color: #60a5fa; }
QPushButton#greenButton {
    background: #15803d; color: white; border: 1px solid #166534; border-radius: 8px; padding: 4px 10px;
}
QPushButton#dangerButton {
    background: #b91c1c; color: white; border: 1px solid #991b1b; border-radius: 8px; padding: 4px 10px;
}
"""


class MainWindow(QMainWindow):
    """Browse, search and edit a to-do list."""

    def __init__(self, settings: dict[str, Any], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.settings = settings
        self.controller = TodoController(settings)

        window = settings.get("window", {})
        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        self.resize(int(window.get("width", 980)), int(window.get("height", 720)))

        self._build_ui()
        self._connect_controller()
        self._bind_hotkeys()
        self._apply_styles()

    def _build_ui(self) -> None:
        state = self.controller.state

        title_label = QLabel(APP_TITLE)
        title_label.setObjectName("appTitle")
        self.dark_mode_checkbox = QCheckBox("Dark mode")
        self.dark_mode_checkbox.setChecked(state.dark_mode)
        self.dark_mode_checkbox.toggled.connect(self._on_dark_mode_toggled)
        header_row = QHBoxLayout()
        header_row.addWidget(title_label)
        header_row.addStretch(1)
        header_row.addWidget(self.dark_mode_checkbox)

        self.path_edit = QLineEdit(str(state.todo_path))
        self.open_button = self._make_button("Open", self.choose_file)
        self.reload_button = self._make_button("Reload", self.reload)
        self.save_button = self._make_button("Save", self.save)
        file_row = QHBoxLayout()
        file_row.addWidget(QLabel("YAML file:"))
        file_row.addWidget(self.path_edit, 1)
        file_row.addWidget(self.open_button)
        file_row.addWidget(self.reload_button)
        file_row.addWidget(self.save_button)

        self.search_edit = QLineEdit(state.search)
        self.search_edit.setPlaceholderText("Search kind, paths, GUID or any field")
        self.search_edit.returnPressed.connect(self.run_search)
        self.regex_checkbox = QCheckBox("Regex")
        self.regex_checkbox.setChecked(state.use_regex)
        self.search_button = self._make_button("Search", self.run_search)
        self.filter_combo = QComboBox()
        self.filter_combo.addItems(STATUS_FILTER_MODES)
        self.filter_combo.setCurrentText(state.status_filter.mode)
        self.filter_combo.currentTextChanged.connect(self._on_filter_changed)
        self.custom_filter_edit = QLineEdit(state.status_filter.custom)
        self.custom_filter_edit.setPlaceholderText("Status contains…")
        self.custom_filter_edit.setVisible(state.status_filter.mode == "Custom")
        self.custom_filter_edit.returnPressed.connect(self.run_search)
        search_row = QHBoxLayout()
        search_row.addWidget(QLabel("Search:"))
        search_row.addWidget(self.search_edit, 1)
        search_row.addWidget(self.regex_checkbox)
        search_row.addWidget(self.search_button)
        search_row.addSpacing(12)
        search_row.addWidget(QLabel("Filter:"))
        search_row.addWidget(self.filter_combo)
        search_row.addWidget(self.custom_filter_edit)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorText")
        self.error_label.setVisible(False)

        self.results_widget = ResultsWidget()
        self.results_widget.done_requested.connect(self.controller.mark_done)
        self.results_widget.reopen_requested.connect(self.controller.reopen)
        self.results_widget.fail_requested.connect(self.controller.mark_failed)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(10)
        layout.addLayout(header_row)
        layout.addLayout(file_row)
        layout.addLayout(search_row)
        layout.addWidget(self.error_label)
        layout.addWidget(self.results_widget, 1)
        self.setCentralWidget(central)
        self.setStatusBar(QStatusBar())

    def _make_button(self, text: str, handler) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName("secondaryButton")
        button.clicked.connect(handler)
        return button

    def _connect_controller(self) -> None:
        self.controller.results_changed.connect(self._on_results_changed)
        self.controller.error_occurred.connect(self._show_error)
        self.controller.status_message.connect(self._show_status)

    def _bind_hotkeys(self) -> None:
        hotkeys = self.settings.get("hotkeys", {})
        bindings = [
            (hotkeys.get("open"), self.choose_file),
            (hotkeys.get("reload"), self.reload),
            (hotkeys.get("save"), self.save),
            (hotkeys.get("search"), lambda: self.search_edit.setFocus()),
        ]
        self._shortcuts: list[QShortcut] = []
        for sequence, handler in bindings:
            if not sequence:
                continue
            shortcut = QShortcut(QKeySequence(sequence), self)
            shortcut.activated.connect(handler)
            self._shortcuts.append(shortcut)

    def _apply_styles(self) -> None:
        self.setStyleSheet(DARK_STYLE if self.controller.state.dark_mode else LIGHT_STYLE)

    def load_file(self, path: str | Path) -> bool:
        """Point the window at ``path`` and load it."""
        self.path_edit.setText(str(path))
        return self.reload()

    def choose_file(self) -> None:
        start_dir = str(Path(self.path_edit.text()).parent)
        path, _ = QFileDialog.getOpenFileName(self, "Open to-do list", start_dir, "YAML (*.yaml *.yml)")
        if path:
            self.load_file(path)

    def reload(self) -> bool:
        self.controller.set_path(self.path_edit.text().strip())
        self._clear_error()
        return self.controller.load_path()

    def save(self) -> bool:
        self.controller.set_path(self.path_edit.text().strip())
        return self.controller.save_path()

    def run_search(self) -> None:
        self._clear_error()
        self.controller.set_search(self.search_edit.text(), self.regex_checkbox.isChecked())
        self.controller.set_status_filter(self._current_status_filter())
        self.controller.run_search()

    def _current_status_filter(self) -> StatusFilter:
        mode = self.filter_combo.currentText()
        custom = self.custom_filter_edit.text() if mode == "Custom" else ""
        return StatusFilter(mode, custom)

    def _on_filter_changed(self, mode: str) -> None:
        self.custom_filter_edit.setVisible(mode == "Custom")

    def _on_dark_mode_toggled(self, checked: bool) -> None:
        self.controller.state.dark_mode = checked
        self._apply_styles()

    def _on_results_changed(self, results: list) -> None:
        self.results_widget.set_results(results)

    def _show_error(self, message: str) -> None:
        self.error_label.setText(message)
        self.error_label.setVisible(True)

    def _clear_error(self) -> None:
        self.error_label.clear()
        self.error_label.setVisible(False)

    def _show_status(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)
