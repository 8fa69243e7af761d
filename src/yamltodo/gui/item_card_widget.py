# -*- coding: utf-8 -*-
"""Card showing one to-do item with status actions."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QApplication, QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from yamltodo.models.todo_item import ToDoItem


STATUS_COLOR = {
    "open": "#92400e",
    "done": "#166534",
    "failed": "#b91c1c",
}


class ItemCardWidget(QFrame):
    """Summary line, path rows and Done / Reopen / Fail buttons for one item."""

    done_requested = pyqtSignal(str)
    reopen_requested = pyqtSignal(str)
    fail_requested = pyqtSignal(str)

    def __init__(self, guid: str, item: ToDoItem, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.guid = guid
        self.item = item
        self.setObjectName("panelCard")

        self.summary_label = QLabel(str(item))
        self.summary_label.setObjectName("itemSummary")
        color = STATUS_COLOR.get(item.status().lower())
        if color:
            self.summary_label.setStyleSheet(f"color: {color}; font-weight: 600;")

        self.done_button = self._make_button("Done", "greenButton", lambda: self.done_requested.emit(self.guid))
        self.reopen_button = self._make_button("Reopen", "secondaryButton", lambda: self.reopen_requested.emit(self.guid))
        self.fail_button = self._make_button("Fail", "dangerButton", lambda: self.fail_requested.emit(self.guid))

        header = QHBoxLayout()
        header.setSpacing(8)
        header.addWidget(self.summary_label, 1)
        header.addWidget(self.done_button)
        header.addWidget(self.reopen_button)
        header.addWidget(self.fail_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(4)
        layout.addLayout(header)

        self.copy_buttons: dict[str, QPushButton] = {}
        for key, caption in (("unity_path", "Unity"), ("godot_path", "Godot")):
            value = item.get(key)
            if value is None:
                continue
            row = QHBoxLayout()
            row.setSpacing(8)
            row.addWidget(QLabel(f"{caption}: {value}"), 1)
            copy_button = self._make_button("Copy", "secondaryButton", lambda checked=False, v=value: self.copy_to_clipboard(v))
            copy_button.setToolTip(f"Copy the {caption} path to the clipboard.")
            self.copy_buttons[key] = copy_button
            row.addWidget(copy_button)
            layout.addLayout(row)

        info = item.get("info")
        if info:
            info_label = QLabel(info)
            info_label.setObjectName("mutedText")
            info_label.setWordWrap(True)
            layout.addWidget(info_label)

        guid_label = QLabel(f"GUID: {guid}")
        guid_label.setObjectName("mutedText")
        layout.addWidget(guid_label)

    def _make_button(self, text: str, object_name: str, handler) -> QPushButton:
        button = QPushButton(text)
        button.setObjectName(object_name)
        button.clicked.connect(handler)
        return button

    @staticmethod
    def copy_to_clipboard(text: str) -> None:
        clipboard = QApplication.clipboard()
        if clipboard is not None:
            clipboard.setText(text)
