# wifi_survey/main_window.py

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QLabel,
)

from wifi_survey.config import SurveyConfig
from wifi_survey.state import AppState, RoomList
from wifi_survey.tabs.charts_tab import ChartsTab
from wifi_survey.tabs.rooms_tab import RoomsTab


class MainWindow(QMainWindow):
    """
    Top-level window.

    Layout:
        [ Cômodos | Gráficos ] (button bar)        N cômodos
        -----------------------------------------------
        [ stacked tab widgets                      ]
    """

    def __init__(self, state: AppState | None = None, config: SurveyConfig | None = None):
        super().__init__()
        self.config = config or (state.config if state is not None else SurveyConfig())
        self.state = state or AppState(self.config)

        self.setWindowTitle(self.config.window_title)
        self.resize(1100, 700)

        # Central widget + main layout
        central = QWidget(self)
        self.setCentralWidget(central)
        self.main_layout = QVBoxLayout(central)
        self.main_layout.setContentsMargins(6, 6, 6, 6)

        # Top navigation buttons
        nav_layout = QHBoxLayout()
        self.main_layout.addLayout(nav_layout)

        self.btn_rooms = QPushButton("Cômodos")
        self.btn_charts = QPushButton("Gráficos")

        for btn in (self.btn_rooms, self.btn_charts):
            btn.setFixedHeight(30)
            nav_layout.addWidget(btn)

        nav_layout.addStretch(1)

        # Status label (room count)
        self.count_label = QLabel("")
        self.count_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.count_label.setStyleSheet("font-weight: bold; padding-right: 8px;")
        nav_layout.addWidget(self.count_label)

        # Stacked tabs
        self.stack = QWidget()
        self.stack_layout = QVBoxLayout(self.stack)
        self.stack_layout.setContentsMargins(0, 6, 0, 0)
        self.main_layout.addWidget(self.stack)

        self.rooms_tab = RoomsTab(self.state, main_window=self)
        self.charts_tab = ChartsTab(self.state)

        # Simple manual "stack": we show/hide tab widgets
        self.stack_layout.addWidget(self.rooms_tab)
        self.stack_layout.addWidget(self.charts_tab)

        self._show_only(self.rooms_tab)

        self.btn_rooms.clicked.connect(lambda: self._switch_to(self.rooms_tab))
        self.btn_charts.clicked.connect(lambda: self._switch_to(self.charts_tab))

        self._build_menu_bar()

        self.state.rooms_changed.connect(self._update_count)
        self._update_count(self.state.rooms)

    # ------------------------------------------------------------------ Utils

    def _show_only(self, widget: QWidget):
        for i in range(self.stack_layout.count()):
            w = self.stack_layout.itemAt(i).widget()
            if w is not None:
                w.setVisible(w is widget)

    def _switch_to(self, widget: QWidget):
        self._show_only(widget)
        widget.refresh_from_state()

    def _update_count(self, rooms: RoomList):
        n = len(rooms)
        self.count_label.setText(f"{n} cômodo" if n == 1 else f"{n} cômodos")

    # ------------------------------------------------------------------ Menus

    def _build_menu_bar(self):
        menubar = self.menuBar()

        file_menu = menubar.addMenu("&Arquivo")

        act_add = file_menu.addAction("Adicionar cômodo...")
        file_menu.addSeparator()
        act_quit = file_menu.addAction("Sair")

        act_add.triggered.connect(self.rooms_tab.add_room)
        act_quit.triggered.connect(self.close)
