"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Global Data Model (AppState).
2. Instantiates the Main Window (View), which builds the controllers.
3. Passes the Model into the View so they can communicate.
4. Prevents circular import errors by being the orchestrator.
"""
from __future__ import annotations

from argparse import ArgumentParser, Namespace
import logging
import os
import sys
from typing import Optional, Sequence

from curvesketch import config
from curvesketch.curves.registry import create_evaluator, list_keys
from curvesketch.curves.sampler import parameters
from curvesketch.logging_config import setup_logging
from curvesketch.model.state import AppState, CurveKind

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> Namespace:
    parser = ArgumentParser(prog="curvesketch", description="Interactive Bezier / B-spline sketching.")
    parser.add_argument("--curve", choices=list_keys(), default=str(CurveKind.BSPLINE),
                        help="initial curve type")
    parser.add_argument("--step", type=float, default=config.DEFAULT_STEP,
                        help=f"curve parameter step in [{config.MIN_STEP:g}, 1]")
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--plot-basis", type=int, metavar="N", default=None,
                        help="plot the basis functions of the chosen curve for N points and exit")
    args = parser.parse_args(argv)

    try:
        parameters(args.step)
    except ValueError as e:
        parser.error(str(e))

    if args.plot_basis is not None:
        minimum = create_evaluator(args.curve).MIN_POINTS
        if args.plot_basis < minimum:
            parser.error(f"--plot-basis needs at least {minimum} points for '{args.curve}'.")
    return args


def build_state(args: Namespace) -> AppState:
    """Initial application state from the command-line options."""
    state = AppState()
    state.curve_kind = CurveKind(args.curve)
    state.style.step = args.step
    return state


def create_app():
    """Create and configure the QApplication instance."""
    from PySide6.QtCore import QCoreApplication
    from PySide6.QtWidgets import QApplication

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(config.ORG_ID)
    QCoreApplication.setApplicationName(config.APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(config.VISIBLE_APP_NAME)
    return app


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Basis plot only, no GUI
    if args.plot_basis is not None:
        create_evaluator(args.curve).plot_basis(args.plot_basis)
        return 0

    # 3. Create the Qt Application
    app = create_app()

    # 4. Initialize the Data Model
    state = build_state(args)
    logger.info(f"Starting with curve '{state.curve_kind}', step {state.style.step:g}.")

    # 5. Initialize the Main Window, passing the model
    from curvesketch.view.main_window import MainWindow

    window = MainWindow(state)
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
