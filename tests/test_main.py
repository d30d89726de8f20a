import logging

import pytest

from curvesketch import config
from curvesketch import main as app_main
from curvesketch.curves.registry import list_keys
from curvesketch.model.state import CurveKind


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("curvesketch")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def no_gui(monkeypatch):
    def fail():
        raise AssertionError("the GUI must not start")

    monkeypatch.setattr(app_main, "create_app", fail)


def test_defaults():
    args = app_main.parse_args([])
    assert args.curve == "bspline"
    assert args.step == config.DEFAULT_STEP
    assert args.debug is False
    assert args.log_file is None
    assert args.plot_basis is None


@pytest.mark.parametrize("key", list_keys())
def test_curve_choices_come_from_registry(key):
    assert app_main.parse_args(["--curve", key]).curve == key


def test_unknown_curve_exits():
    with pytest.raises(SystemExit) as exc:
        app_main.parse_args(["--curve", "hermite"])
    assert exc.value.code == 2


@pytest.mark.parametrize("step", ["0", "1.5", "-0.1", "1e-7", "nan"])
def test_invalid_step_exits(step, capsys):
    with pytest.raises(SystemExit) as exc:
        app_main.parse_args(["--step", step])
    assert exc.value.code == 2
    assert "Sample step" in capsys.readouterr().err


def test_plot_basis_below_minimum_exits():
    with pytest.raises(SystemExit):
        app_main.parse_args(["--curve", "bspline", "--plot-basis", "2"])


def test_build_state_applies_curve_and_step():
    args = app_main.parse_args(["--curve", "bezier", "--step", "0.05"])
    state = app_main.build_state(args)
    assert state.curve_kind is CurveKind.BEZIER
    assert state.style.step == 0.05
    assert len(state.points) == 0


def test_plot_basis_returns_without_gui(monkeypatch, no_gui):
    import matplotlib.pyplot as plt

    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    assert app_main.main(["--curve", "bspline-uniform", "--plot-basis", "5"]) == 0
    plt.close("all")
    assert shown == [True]


def test_debug_and_log_file(monkeypatch, no_gui, tmp_path):
    import matplotlib.pyplot as plt

    monkeypatch.setattr(plt, "show", lambda: None)
    log_file = tmp_path / "curvesketch.log"

    app_main.main(["--debug", "--log-file", str(log_file), "--curve", "bezier", "--plot-basis", "3"])
    plt.close("all")

    assert logging.getLogger("curvesketch").level == logging.DEBUG
    for handler in logging.getLogger("curvesketch").handlers:
        handler.flush()
    assert "Logging initialized." in log_file.read_text(encoding="utf-8")
