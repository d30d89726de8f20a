"""
Main Application Window
=======================
The primary GUI container: display panel on the left, canvas on the right,
status bar at the bottom.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It builds the command handlers and connects keyboard shortcuts
   to them.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QSplitter, QStatusBar, QLabel

from curvesketch import config
from curvesketch.controller.commands import Commands
from curvesketch.curves.registry import label_for
from curvesketch.model.state import AppState
from curvesketch.view.canvas import CurveCanvas
from curvesketch.view.panels.display import DisplayPanel


class MainWindow(QMainWindow):
    def __init__(self, state: AppState) -> None:
        super().__init__()
        self.state = state

        self.setWindowTitle(config.VISIBLE_APP_NAME)
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

        # --- RIGHT SIDE: canvas (owns the selection controller) ---
        self.canvas = CurveCanvas(self.state)
        self.commands = Commands(self.state, self.canvas.selection, self.canvas.request_redraw)

        # --- LEFT SIDE: display controls ---
        self.panel = DisplayPanel(self.state, self.commands, self)

        splitter = QSplitter(Qt.Orientation.Horizontal, self)
        splitter.setChildrenCollapsible(False)
        splitter.addWidget(self.panel)
        splitter.addWidget(self.canvas)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        splitter.setSizes([260, config.WINDOW_WIDTH - 260])
        self.setCentralWidget(splitter)

        # --- STATUS BAR ---
        self.status_label = QLabel(self)
        status = QStatusBar(self)
        status.addPermanentWidget(self.status_label)
        self.setStatusBar(status)

        # --- ACTIONS ---
        self._add_action(self.tr("Toggle lines"), QKeySequence("Ctrl+L"), self.commands.toggle_lines)
        self._add_action(self.tr("Toggle nodes"), QKeySequence("Ctrl+N"), self.commands.toggle_nodes)
        self._add_action(self.tr("Clear points"), QKeySequence("Ctrl+Del"), self.commands.clear_points)

        self.canvas.redrawn.connect(self._update_status)
        self._update_status()

    def _add_action(self, text: str, shortcut: QKeySequence, command) -> QAction:
        action = QAction(text, self)
        action.setShortcut(shortcut)
        action.triggered.connect(lambda: self._run_command(command))
        self.addAction(action)
        return action

    def _run_command(self, command) -> None:
        command()
        self.panel.sync_from_state()

    @Slot()
    def _update_status(self) -> None:
        count = len(self.state.points)
        selected = self.state.points.selected()
        text = self.tr("{kind} | {n} points").format(kind=label_for(self.state.curve_kind), n=count)
        if selected is not None:
            text += self.tr(" | dragging {label} ({x:.0f}, {y:.0f})").format(
                label=selected.label, x=selected.x, y=selected.y
            )
        self.status_label.setText(text)
