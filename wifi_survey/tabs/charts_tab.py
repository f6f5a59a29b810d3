# wifi_survey/tabs/charts_tab.py

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from wifi_survey.projections import signal_chart, speed_chart
from wifi_survey.state import AppState, RoomList
from wifi_survey.widgets.bar_chart_widget import BarChartWidget


class ChartsTab(QWidget):
    """
    Two grouped bar charts, one category per room:
      - Signal level (dBm), fixed -90..0 axis
      - Speed (Mbps), axis fitted to the data
    """

    def __init__(self, state: AppState):
        super().__init__()
        self.state = state

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setAlignment(Qt.AlignTop)

        title = QLabel("Gráficos")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        charts_row = QHBoxLayout()
        layout.addLayout(charts_row)

        self.signal_chart = BarChartWidget()
        self.speed_chart = BarChartWidget()

        for caption, widget in (
            ("Nível de sinal (dbm)", self.signal_chart),
            ("Velocidade (Mbps)", self.speed_chart),
        ):
            column = QVBoxLayout()
            lbl = QLabel(caption)
            lbl.setStyleSheet("font-weight: bold;")
            column.addWidget(lbl)
            column.addWidget(widget)
            charts_row.addLayout(column)

        self.state.rooms_changed.connect(self.refresh_from_state)
        self.refresh_from_state()

    def refresh_from_state(self, rooms: Optional[RoomList] = None):
        rooms = self.state.rooms if rooms is None else rooms
        self.signal_chart.update_chart(signal_chart(rooms))
        self.speed_chart.update_chart(speed_chart(rooms))
