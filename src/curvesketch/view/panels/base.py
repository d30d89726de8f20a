from __future__ import annotations

from PySide6.QtWidgets import QWidget

from curvesketch.controller.commands import Commands
from curvesketch.model.state import AppState


class BasePanel(QWidget):
    """Base class for left-side panels. Holds the state and the command handlers."""
    def __init__(self, state: AppState, commands: Commands, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self.commands = commands

    def sync_from_state(self) -> None:
        """Override to refresh widgets after the state changed elsewhere."""
        pass
