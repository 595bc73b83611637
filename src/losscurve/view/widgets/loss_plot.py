"""PyQtGraph widget showing the cross-entropy curve with reference lines and a cross-hair."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtCore import QPoint, QPointF, Qt, Signal
from PySide6.QtGui import QCursor, QFont
from PySide6.QtWidgets import QToolTip, QWidget

from losscurve.config import (
    AXIS_LABEL_STYLE,
    AXIS_TICK_FONT,
    CHART_TITLE,
    CHART_TITLE_SIZE,
    CURVE_COLOR,
    CURVE_WIDTH,
    LOSS_RANGE,
    MARKER_COLOR,
    MARKER_SIZE,
    PROBABILITY_RANGE,
    RANDOM_LINE_COLOR,
    RANDOM_LINE_WIDTH,
    REFERENCE_COLOR,
    REFERENCE_PROBABILITIES,
    REFERENCE_WIDTH,
)
from losscurve.model.loss import (
    format_readout,
    probability_to_loss,
    random_baseline_loss,
    sample_curve,
)

if TYPE_CHECKING:
    from losscurve.model.loss import CrossHairReadout


logger = logging.getLogger(__name__)


class LossCurvePlot(pg.PlotWidget):
    """
    Loss (x) vs. target probability (y) plot with:
      - the fixed curve p = exp(-x) over the visible loss range,
      - static dashed lines for REFERENCE_PROBABILITIES,
      - a dynamic dashed line for the random-guess baseline ln(N),
      - a marker glyph and tooltip following the pointer.
    """

    # Loss coordinate under the pointer and the global pointer position
    pointer_moved = Signal(float, QPoint)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAntialiasing(True)
        self._tooltip_text: str = ""

        self._configure_axes()

        xs, ps = sample_curve()
        self.curve = self.plot(xs, ps, pen=pg.mkPen(color=CURVE_COLOR, width=CURVE_WIDTH))

        self.reference_lines: list[pg.PlotDataItem] = []
        for p in REFERENCE_PROBABILITIES:
            self.reference_lines.append(self._add_reference_line(p))

        self.random_line = pg.PlotDataItem(
            pen=pg.mkPen(color=RANDOM_LINE_COLOR, width=RANDOM_LINE_WIDTH, style=Qt.PenStyle.DashLine)
        )
        self.addItem(self.random_line)
        self.random_label = pg.TextItem("1/N", color=RANDOM_LINE_COLOR, anchor=(0.5, 0.0))
        self.addItem(self.random_label)

        self.marker = pg.ScatterPlotItem(
            size=MARKER_SIZE,
            pen=None,
            brush=pg.mkBrush(*MARKER_COLOR),
        )
        self.marker.setZValue(10)
        self.addItem(self.marker)

        self.scene().sigMouseMoved.connect(self._on_scene_mouse_moved)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_random_baseline(self, n: int) -> None:
        """Move the random-guess line to x = ln(n), spanning y = 0..1."""
        x = random_baseline_loss(n)
        y0, y1 = PROBABILITY_RANGE
        self.random_line.setData([x, x], [y0, y1])
        self.random_label.setPos(x, y1)
        if not LOSS_RANGE[0] <= x <= LOSS_RANGE[1]:
            logger.debug(f"Random baseline at x={x:.4f} lies outside the visible loss range")

    @property
    def random_baseline_x(self) -> float | None:
        xs, _ = self.random_line.getData()
        if xs is None or len(xs) == 0:
            return None
        return float(xs[0])

    def show_readout(self, readout: CrossHairReadout, global_pos: QPoint) -> None:
        """Place the marker on the curve and show the tooltip at the pointer."""
        self.marker.setData(x=[readout.loss], y=[readout.probability])
        self._tooltip_text = format_readout(readout)
        QToolTip.showText(global_pos, self._tooltip_text, self)

    @property
    def marker_position(self) -> tuple[float, float] | None:
        xs, ys = self.marker.getData()
        if len(xs) == 0:
            return None
        return float(xs[0]), float(ys[0])

    @property
    def tooltip_text(self) -> str:
        return self._tooltip_text

    def map_scene_to_loss(self, scene_pos: QPointF) -> float:
        """Loss coordinate of a scene position, via the view box transform."""
        return float(self.getPlotItem().vb.mapSceneToView(scene_pos).x())

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _configure_axes(self) -> None:
        """Fixed [0, 5] x [0, 1] view, no pan/zoom, no autoscale, no legend."""
        item = self.getPlotItem()
        item.setTitle(CHART_TITLE, size=CHART_TITLE_SIZE, bold=True)
        item.setLabel('bottom', 'Loss', **AXIS_LABEL_STYLE)
        item.setLabel('left', 'Probability', **AXIS_LABEL_STYLE)

        tick_font = QFont(*AXIS_TICK_FONT)
        for name in ('bottom', 'left'):
            item.getAxis(name).setTickFont(tick_font)

        item.disableAutoRange()
        item.setXRange(*LOSS_RANGE, padding=0)
        item.setYRange(*PROBABILITY_RANGE, padding=0)
        item.setMouseEnabled(x=False, y=False)
        item.setMenuEnabled(False)
        item.hideButtons()

    def _add_reference_line(self, p: float) -> pg.PlotDataItem:
        """Vertical dashed segment at the loss of target probability p."""
        x = probability_to_loss(p)
        y0, y1 = PROBABILITY_RANGE
        line = self.plot(
            [x, x], [y0, y1],
            pen=pg.mkPen(color=REFERENCE_COLOR, width=REFERENCE_WIDTH, style=Qt.PenStyle.DashLine),
        )
        label = pg.TextItem(f"p={p:g}", color=REFERENCE_COLOR, anchor=(0.5, 0.0))
        label.setPos(x, y1)
        self.addItem(label)
        return line

    def _on_scene_mouse_moved(self, scene_pos: QPointF) -> None:
        self.pointer_moved.emit(self.map_scene_to_loss(scene_pos), QCursor.pos())
