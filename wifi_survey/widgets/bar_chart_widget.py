"""
wifi_survey/widgets/bar_chart_widget.py

BarChartWidget:
- Pure PySide6 (no matplotlib)
- Grouped bars: one group per room, one bar per series (2.4GHz / 5GHz)
- Bars grow from the zero line, so negative dBm readings point down

The chart is painted into a QPixmap shown by the label.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPen, QPixmap
from PySide6.QtWidgets import QLabel

from wifi_survey.projections import ChartData, value_range

NO_DATA_TEXT = "Sem dados para o gráfico."

_MARGIN_LEFT = 48
_MARGIN_RIGHT = 12
_MARGIN_TOP = 30
_MARGIN_BOTTOM = 36
_TICKS = 5


class BarChartWidget(QLabel):
    """
    Usage:
        chart.update_chart(signal_chart(state.rooms))
    """

    def __init__(self, width: int = 480, height: int = 320, parent=None):
        super().__init__(parent)
        self.chart_width = width
        self.chart_height = height
        self.chart: Optional[ChartData] = None
        self.setAlignment(Qt.AlignCenter)
        self.setMinimumSize(width, height)

    def update_chart(self, chart: ChartData) -> None:
        self.chart = chart

        if chart.is_empty:
            self.setPixmap(QPixmap())
            self.setText(NO_DATA_TEXT)
            return

        pix = QPixmap(self.chart_width, self.chart_height)
        pix.fill(Qt.white)

        painter = QPainter(pix)
        try:
            self._paint(painter, chart)
        finally:
            painter.end()

        self.setText("")
        self.setPixmap(pix)

    # ------------------------------------------------------------------ Painting

    def _paint(self, painter: QPainter, chart: ChartData) -> None:
        low, high = value_range(chart)
        span = high - low

        plot = QRectF(
            _MARGIN_LEFT,
            _MARGIN_TOP,
            self.chart_width - _MARGIN_LEFT - _MARGIN_RIGHT,
            self.chart_height - _MARGIN_TOP - _MARGIN_BOTTOM,
        )

        def to_y(value: float) -> float:
            value = min(max(value, low), high)
            return plot.top() + (high - value) / span * plot.height()

        # Grid + y tick labels
        grid_pen = QPen(QColor("#cccccc"))
        grid_pen.setStyle(Qt.DashLine)
        for i in range(_TICKS + 1):
            tick = low + span * i / _TICKS
            y = to_y(tick)
            painter.setPen(grid_pen)
            painter.drawLine(QPointF(plot.left(), y), QPointF(plot.right(), y))
            painter.setPen(QColor("#666666"))
            painter.drawText(
                QRectF(0, y - 8, _MARGIN_LEFT - 6, 16),
                Qt.AlignRight | Qt.AlignVCenter,
                f"{tick:g}",
            )

        zero_y = to_y(0.0)
        painter.setPen(QPen(QColor("#333333")))
        painter.drawLine(QPointF(plot.left(), zero_y), QPointF(plot.right(), zero_y))

        # Bars
        n_groups = len(chart.categories)
        n_series = max(1, len(chart.series))
        group_w = plot.width() / n_groups
        bar_w = group_w * 0.8 / n_series

        for g, name in enumerate(chart.categories):
            group_x = plot.left() + g * group_w
            for s, series in enumerate(chart.series):
                value = series.values[g]
                if value is None:
                    continue
                y = to_y(value)
                x = group_x + group_w * 0.1 + s * bar_w
                painter.fillRect(
                    QRectF(x, min(y, zero_y), bar_w, abs(zero_y - y)),
                    QColor(series.color),
                )

            painter.setPen(QColor("#333333"))
            painter.drawText(
                QRectF(group_x, plot.bottom() + 4, group_w, 16),
                Qt.AlignHCenter | Qt.AlignTop,
                name,
            )

        # Legend
        x = plot.left()
        for series in chart.series:
            painter.fillRect(QRectF(x, 8, 12, 12), QColor(series.color))
            text_w = painter.fontMetrics().horizontalAdvance(series.name)
            painter.setPen(QColor("#333333"))
            painter.drawText(QRectF(x + 16, 4, text_w + 4, 20), Qt.AlignLeft | Qt.AlignVCenter, series.name)
            x += 16 + text_w + 16
