# wifi_survey/widgets/room_dialog.py

from __future__ import annotations

import logging
from typing import Dict, Optional

from PySide6.QtGui import QDoubleValidator
from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from wifi_survey.fields import FIELDS, FieldSpec
from wifi_survey.models import RoomRecord
from wifi_survey.state import AppState

_LOG = logging.getLogger(__name__)


class RoomDialog(QDialog):
    """
    Add / edit one room.

        Cômodo:                [                    ]
        Nível de sinal (dbm):  [ 2,4GHz ] [ 5GHz ]
        Velocidade (Mbps):     [ 2,4GHz ] [ 5GHz ]
        Interferência:         [                    ]
                                  [Cancelar] [Salvar]

    Saving hands the field values to AppState.submit(). On a validation
    failure the dialog shows the missing fields and stays open.
    """

    def __init__(self, state: AppState, editing: Optional[RoomRecord] = None, parent=None):
        super().__init__(parent)
        self.state = state
        # Only used to pre-fill inputs and to know which id to replace.
        self.editing_id: Optional[str] = editing.id if editing is not None else None

        self.setWindowTitle("Editar cômodo" if editing is not None else "Adicionar cômodo")
        self.setModal(True)

        layout = QVBoxLayout(self)

        title = QLabel(self.windowTitle())
        title.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(title)

        subtitle = QLabel(
            "Adicione as informações dos sinais de rede para um determinado cômodo"
        )
        subtitle.setStyleSheet("color: gray;")
        subtitle.setWordWrap(True)
        layout.addWidget(subtitle)

        self.edits: Dict[str, QLineEdit] = {spec.key: self._make_edit(spec) for spec in FIELDS}

        form = QFormLayout()
        form.addRow("Cômodo:", self.edits["room"])
        form.addRow(
            "Nível de sinal (dbm):",
            self._pair(self.edits["signal_level_24"], self.edits["signal_level_5"]),
        )
        form.addRow(
            "Velocidade (Mbps):",
            self._pair(self.edits["speed_24"], self.edits["speed_5"]),
        )
        form.addRow("Interferência:", self.edits["interference"])
        layout.addLayout(form)

        # Footer buttons
        btn_row = QHBoxLayout()
        btn_row.addStretch(1)

        self.btn_cancel = QPushButton("Cancelar")
        self.btn_cancel.clicked.connect(self.reject)
        btn_row.addWidget(self.btn_cancel)

        self.btn_save = QPushButton("Salvar")
        self.btn_save.setDefault(True)
        self.btn_save.clicked.connect(self._on_save)
        btn_row.addWidget(self.btn_save)

        layout.addLayout(btn_row)

        if editing is not None:
            self.set_values(editing.as_form())

    # ------------------------------------------------------------------ Helpers

    def _make_edit(self, spec: FieldSpec) -> QLineEdit:
        le = QLineEdit()
        le.setObjectName(spec.key)
        le.setPlaceholderText(spec.placeholder)
        if spec.numeric:
            le.setValidator(QDoubleValidator(le))
        return le

    @staticmethod
    def _pair(left: QLineEdit, right: QLineEdit) -> QWidget:
        container = QWidget()
        row = QHBoxLayout(container)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(left)
        row.addWidget(right)
        return container

    # ------------------------------------------------------------------ Values

    def values(self) -> Dict[str, str]:
        return {key: le.text() for key, le in self.edits.items()}

    def set_values(self, values: Dict[str, str]) -> None:
        for key, text in values.items():
            if key in self.edits:
                self.edits[key].setText(text)

    # ------------------------------------------------------------------ Slots

    def _on_save(self) -> None:
        outcome = self.state.submit(self.values(), editing_id=self.editing_id)
        if outcome.failure is not None:
            QMessageBox.warning(self, outcome.failure.title, outcome.failure.description)
            return

        if outcome.record is not None:
            _LOG.debug(
                "room %s %s", outcome.record.id, "created" if outcome.created else "updated"
            )
        self.accept()
