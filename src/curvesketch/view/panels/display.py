from __future__ import annotations

from PySide6.QtCore import Slot
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QGridLayout, QLabel, QCheckBox, QComboBox,
    QDoubleSpinBox, QPushButton, QColorDialog, QSizePolicy
)

from curvesketch import config
from curvesketch.controller.commands import Commands
from curvesketch.curves.registry import list_keys, label_for
from curvesketch.model.state import AppState
from curvesketch.view.panels.base import BasePanel


class DisplayPanel(BasePanel):
    """
    Panel with the display controls.

    Top: curve type and sampling step.
    Middle: visibility toggles and colors.
    Bottom: clear / reset buttons.
    """
    def __init__(self, state: AppState, commands: Commands, parent: QWidget | None = None) -> None:
        super().__init__(state, commands, parent)

        root = QVBoxLayout(self)

        # ---- curve ----
        curve_box = QGroupBox(self.tr("Curve"), self)
        root.addWidget(curve_box, 0)
        grid = QGridLayout(curve_box)
        grid.setVerticalSpacing(8)

        grid.addWidget(QLabel(self.tr("Type:"), curve_box), 0, 0)
        self.combo_kind = QComboBox(curve_box)
        for key in list_keys():
            self.combo_kind.addItem(self.tr(label_for(key)), userData=key)
        grid.addWidget(self.combo_kind, 0, 1)

        grid.addWidget(QLabel(self.tr("Step:"), curve_box), 1, 0)
        self.spin_step = QDoubleSpinBox(curve_box)
        self.spin_step.setRange(config.MIN_STEP, 1.0)
        self.spin_step.setSingleStep(0.005)
        self.spin_step.setDecimals(3)
        self.spin_step.setKeyboardTracking(False)
        self.spin_step.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        grid.addWidget(self.spin_step, 1, 1)

        # ---- display ----
        display_box = QGroupBox(self.tr("Display"), self)
        root.addWidget(display_box, 0)
        grid = QGridLayout(display_box)
        grid.setVerticalSpacing(8)

        self.check_lines = QCheckBox(self.tr("Show lines"), display_box)
        self.check_nodes = QCheckBox(self.tr("Show nodes"), display_box)
        grid.addWidget(self.check_lines, 0, 0, 1, 2)
        grid.addWidget(self.check_nodes, 1, 0, 1, 2)

        self.button_line_color = self._add_color_row(grid, 2, self.tr("Line color:"))
        self.button_curve_color = self._add_color_row(grid, 3, self.tr("Curve color:"))
        self.button_node_color = self._add_color_row(grid, 4, self.tr("Node color:"))

        # ---- points ----
        self.button_clear = QPushButton(self.tr("Clear points"), self)
        self.button_reset = QPushButton(self.tr("Reset"), self)
        root.addWidget(self.button_clear, 0)
        root.addWidget(self.button_reset, 0)

        root.addStretch()

        self.sync_from_state()

        # wiring
        self.combo_kind.currentIndexChanged.connect(self._on_kind_changed)
        self.spin_step.valueChanged.connect(self._on_step_changed)
        self.check_lines.toggled.connect(self._on_lines_toggled)
        self.check_nodes.toggled.connect(self._on_nodes_toggled)
        self.button_line_color.clicked.connect(
            lambda: self._pick_color(self.state.style.line_color, self.commands.set_line_color)
        )
        self.button_curve_color.clicked.connect(
            lambda: self._pick_color(self.state.style.curve_color, self.commands.set_curve_color)
        )
        self.button_node_color.clicked.connect(
            lambda: self._pick_color(self.state.style.node_fill_color, self.commands.set_node_color)
        )
        self.button_clear.clicked.connect(self.commands.clear_points)
        self.button_reset.clicked.connect(self._on_reset)

    # ---- utilities ----

    def _add_color_row(self, grid: QGridLayout, row: int, label: str) -> QPushButton:
        grid.addWidget(QLabel(label, self), row, 0)
        button = QPushButton(self)
        button.setFixedWidth(60)
        grid.addWidget(button, row, 1)
        return button

    @staticmethod
    def _paint_swatch(button: QPushButton, color: str) -> None:
        button.setStyleSheet(f"background-color: {color}; border: 1px solid #555;")
        button.setToolTip(color)

    def _pick_color(self, current: str, apply) -> None:
        color = QColorDialog.getColor(QColor(current), self)
        if not color.isValid():
            return
        apply(color.name())
        self.sync_from_state()

    def sync_from_state(self) -> None:
        """Refresh every widget from the state without emitting commands."""
        style = self.state.style
        widgets = (self.combo_kind, self.spin_step, self.check_lines, self.check_nodes)
        for w in widgets:
            w.blockSignals(True)
        try:
            self.combo_kind.setCurrentIndex(self.combo_kind.findData(str(self.state.curve_kind)))
            self.spin_step.setValue(style.step)
            self.check_lines.setChecked(style.show_lines)
            self.check_nodes.setChecked(style.show_nodes)
        finally:
            for w in widgets:
                w.blockSignals(False)

        self._paint_swatch(self.button_line_color, style.line_color)
        self._paint_swatch(self.button_curve_color, style.curve_color)
        self._paint_swatch(self.button_node_color, style.node_fill_color)

    # ---- slots ----

    @Slot()
    def _on_kind_changed(self) -> None:
        self.commands.set_curve_kind(self.combo_kind.currentData())

    @Slot(float)
    def _on_step_changed(self, value: float) -> None:
        self.commands.set_step(value)

    @Slot(bool)
    def _on_lines_toggled(self, checked: bool) -> None:
        if checked != self.state.style.show_lines:
            self.commands.toggle_lines()

    @Slot(bool)
    def _on_nodes_toggled(self, checked: bool) -> None:
        if checked != self.state.style.show_nodes:
            self.commands.toggle_nodes()

    @Slot()
    def _on_reset(self) -> None:
        self.commands.reset()
        self.sync_from_state()
