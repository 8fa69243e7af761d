# -*- coding: utf-8 -*-
"""Scrollable list of item cards."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QScrollArea, QVBoxLayout, QWidget

from yamltodo.gui.item_card_widget import ItemCardWidget
from yamltodo.models.todo_item import ToDoItem


EMPTY_TEXT = "No matches yet. Enter a term and click Search."


class ResultsWidget(QWidget):
    """Show search results as cards and forward their status actions."""

    done_requested = pyqtSignal(str)
    reopen_requested = pyqtSignal(str)
    fail_requested = pyqtSignal(str)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.cards: list[ItemCardWidget] = []

        self.empty_label = QLabel(EMPTY_TEXT)
        self.empty_label.setObjectName("mutedText")

        self.list_host = QWidget()
        self.list_layout = QVBoxLayout(self.list_host)
        self.list_layout.setContentsMargins(0, 0, 0, 0)
        self.list_layout.setSpacing(8)
        self.list_layout.addWidget(self.empty_label)
        self.list_layout.addStretch(1)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setWidget(self.list_host)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.scroll, 1)

    def set_results(self, results: list[tuple[str, ToDoItem]]) -> None:
        """Rebuild the cards for the given ``(guid, item)`` pairs."""
        for card in self.cards:
            self.list_layout.removeWidget(card)
            card.deleteLater()
        self.cards.clear()

        self.empty_label.setVisible(not results)
        for position, (guid, item) in enumerate(results):
            card = ItemCardWidget(guid, item)
            card.done_requested.connect(self.done_requested.emit)
            card.reopen_requested.connect(self.reopen_requested.emit)
            card.fail_requested.connect(self.fail_requested.emit)
            self.cards.append(card)
            # after the empty label, before the trailing stretch
            self.list_layout.insertWidget(position + 1, card)
