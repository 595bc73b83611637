"""
Plot Controller
===============
Connects the class-count spinner, the shared state and the loss plot.

Why is this file needed?
------------------------
1. Decoupling: The plot widget only knows how to draw; the state only knows N.
   This controller routes events between them.
2. Testability: `handle_pointer` runs the cross-hair logic without a real
   mouse event, so it can be exercised directly.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QPoint, Slot
from PySide6.QtWidgets import QSpinBox

from losscurve.model.loss import CrossHairReadout, compute_readout
from losscurve.model.state import ClassCountState
from losscurve.view.widgets.loss_plot import LossCurvePlot

logger = logging.getLogger(__name__)


class LossCurveController(QObject):
    """Owns the signal wiring between spinner, state and plot."""

    def __init__(
        self,
        state: ClassCountState,
        plot: LossCurvePlot,
        spin: QSpinBox | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.state = state
        self.plot = plot

        if spin is not None:
            spin.valueChanged.connect(self.state.set_num_classes)
        self.state.num_classes_changed.connect(self.plot.set_random_baseline)
        self.plot.pointer_moved.connect(self.handle_pointer)

        # Initial draw of the random baseline
        self.plot.set_random_baseline(self.state.num_classes)
        logger.debug(f"Controller attached with N={self.state.num_classes}")

    @Slot(float, QPoint)
    def handle_pointer(self, data_x: float, global_pos: QPoint) -> CrossHairReadout:
        """Compute the readout at data_x for the current N and show it on the plot."""
        readout = compute_readout(data_x, self.state.num_classes)
        self.plot.show_readout(readout, global_pos)
        return readout
