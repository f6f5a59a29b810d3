# wifi_survey/tabs/rooms_tab.py

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (
    QAbstractItemView,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QMenu,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from wifi_survey.models import RoomRecord
from wifi_survey.projections import (
    ACTIONS_COLUMN,
    EMPTY_TABLE_MESSAGE,
    ROOM_COLUMNS,
    table_rows,
)
from wifi_survey.state import AppState, RoomList
from wifi_survey.widgets.room_dialog import RoomDialog

_LOG = logging.getLogger(__name__)


class RoomsTab(QWidget):
    """
    Rooms tab:
        - [Adicionar cômodo] button
        - Table of surveyed rooms, one row per room
        - Per-row menu: Editar / Deletar
    """

    def __init__(self, state: AppState, main_window=None):
        super().__init__()
        self.state = state
        self.main_window = main_window

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setAlignment(Qt.AlignTop)

        header_row = QHBoxLayout()
        layout.addLayout(header_row)

        title = QLabel("Cômodos")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        header_row.addWidget(title)
        header_row.addStretch(1)

        self.btn_add = QPushButton("Adicionar cômodo")
        self.btn_add.setFixedHeight(28)
        self.btn_add.clicked.connect(self.add_room)
        header_row.addWidget(self.btn_add)

        # Table
        self.table = QTableWidget(0, len(ROOM_COLUMNS))
        self.table.setHorizontalHeaderLabels([col.header for col in ROOM_COLUMNS])
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.verticalHeader().setVisible(False)

        header = self.table.horizontalHeader()
        for idx, col in enumerate(ROOM_COLUMNS):
            if col.width is not None:
                header.setSectionResizeMode(idx, QHeaderView.Fixed)
                self.table.setColumnWidth(idx, col.width)
            else:
                header.setSectionResizeMode(idx, QHeaderView.Stretch)
        layout.addWidget(self.table)

        self.state.rooms_changed.connect(self.refresh_from_state)
        self.refresh_from_state()

    # ------------------------------------------------------------------ Helpers

    def _make_dialog(self, editing: Optional[RoomRecord] = None) -> RoomDialog:
        return RoomDialog(self.state, editing=editing, parent=self)

    def _actions_button(self, room_id: str) -> QToolButton:
        btn = QToolButton()
        btn.setText("⋮")
        btn.setToolTip("Abrir menu")
        btn.setPopupMode(QToolButton.InstantPopup)

        menu = QMenu(btn)
        act_edit = menu.addAction("Editar")
        act_delete = menu.addAction("Deletar")
        # Deferred: refreshing the table destroys this button and its menu.
        act_edit.triggered.connect(lambda: QTimer.singleShot(0, lambda: self.edit_room(room_id)))
        act_delete.triggered.connect(lambda: QTimer.singleShot(0, lambda: self.delete_room(room_id)))
        btn.setMenu(menu)
        return btn

    def _show_empty(self):
        self.table.setRowCount(1)
        item = QTableWidgetItem(EMPTY_TABLE_MESSAGE)
        item.setTextAlignment(Qt.AlignCenter)
        item.setForeground(QBrush(QColor("#a3a3a3")))
        self.table.setItem(0, 0, item)
        self.table.setSpan(0, 0, 1, len(ROOM_COLUMNS))

    # ------------------------------------------------------------------ Slots

    def _run_dialog(self, dialog: RoomDialog) -> None:
        dialog.exec()

    def add_room(self):
        self._run_dialog(self._make_dialog())

    def edit_room(self, room_id: str):
        room = self.state.rooms.get(room_id)
        if room is None:
            _LOG.debug("edit requested for unknown room %s", room_id)
            return
        self._run_dialog(self._make_dialog(editing=room))

    def delete_room(self, room_id: str):
        self.state.remove_room(room_id)

    # ------------------------------------------------------------------ External API

    def refresh_from_state(self, rooms: Optional[RoomList] = None):
        rooms = self.state.rooms if rooms is None else rooms

        self.table.clearSpans()
        self.table.clearContents()
        self.table.setRowCount(0)

        rows = table_rows(rooms, ROOM_COLUMNS)
        if not rows:
            self._show_empty()
            return

        self.table.setRowCount(len(rows))
        for row_idx, row in enumerate(rows):
            for col_idx, (col, text) in enumerate(zip(ROOM_COLUMNS, row.cells)):
                if col.key == ACTIONS_COLUMN:
                    self.table.setCellWidget(row_idx, col_idx, self._actions_button(row.id))
                    continue
                item = QTableWidgetItem(text)
                item.setData(Qt.UserRole, row.id)
                self.table.setItem(row_idx, col_idx, item)
