"""
Main Application Window
=======================
The GUI container with the formula banner, the class-count spinner and the
loss plot.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It hands the spinner and plot to the controller, which connects
   them to the shared state.
"""
from __future__ import annotations

from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QMainWindow, QSpinBox, QVBoxLayout, QWidget
)

from losscurve.config import MAX_CLASSES, MIN_CLASSES, WINDOW_SIZE, WINDOW_TITLE
from losscurve.controller.crosshair import LossCurveController
from losscurve.model.state import ClassCountState
from losscurve.view.widgets.loss_plot import LossCurvePlot


FORMULA_HTML = (
    "<b>Loss Basis:</b> L = -ln(P<sub>target</sub>) &nbsp;&nbsp;&nbsp; "
    "<b>Average of Others:</b> P<sub>others_avg</sub> = (1 - P<sub>target</sub>) / (N - 1)"
)


class MainWindow(QMainWindow):
    def __init__(self, state: ClassCountState) -> None:
        super().__init__()
        self.state: ClassCountState = state

        self.setWindowTitle(WINDOW_TITLE)
        self.resize(*WINDOW_SIZE)

        # --- MAIN CONTAINER ---
        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. FORMULA BANNER ---
        self.formula_label = QLabel(FORMULA_HTML)
        self.formula_label.setStyleSheet(
            "font-size: 24px; padding: 25px; background: #fdfdfd; "
            "border: 1px solid #ddd; border-radius: 10px;"
        )
        main_layout.addWidget(self.formula_label)

        # --- 2. CLASS COUNT ---
        header = QHBoxLayout()
        classes_label = QLabel("Classes (N):")
        classes_label.setStyleSheet("font-weight: bold;")

        self.classes_spin = QSpinBox()
        self.classes_spin.setRange(MIN_CLASSES, MAX_CLASSES)
        self.classes_spin.setValue(self.state.num_classes)
        self.classes_spin.setMinimumHeight(60)
        self.classes_spin.setMinimumWidth(200)

        header.addWidget(classes_label)
        header.addWidget(self.classes_spin)
        header.addStretch()
        main_layout.addLayout(header)

        # --- 3. PLOT ---
        self.plot = LossCurvePlot()
        main_layout.addWidget(self.plot, 1)

        # --- SIGNAL CONNECTIONS ---
        self.controller = LossCurveController(self.state, self.plot, self.classes_spin, parent=self)
