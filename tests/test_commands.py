import pytest

from curvesketch.controller.commands import Commands
from curvesketch.controller.selection import DragState, SelectionController
from curvesketch.model.state import CurveKind


@pytest.fixture
def commands(state, redraw):
    selection = SelectionController(state, request_redraw=redraw)
    return Commands(state, selection, request_redraw=redraw)


def test_toggles_only_touch_style(state, redraw, commands):
    state.points.add(10.0, 20.0)
    state.points.add(30.0, 40.0)
    before = [(p.index, p.x, p.y, p.selected) for p in state.points]

    commands.toggle_lines()
    commands.toggle_nodes()

    assert state.style.show_lines is False
    assert state.style.show_nodes is False
    assert [(p.index, p.x, p.y, p.selected) for p in state.points] == before
    assert redraw.count == 2

    commands.toggle_lines()
    assert state.style.show_lines is True


def test_set_node_color_recomputes_highlight(state, commands):
    commands.set_node_color("#22CCCC")
    assert state.style.node_fill_color == "#22cccc"
    assert state.style.selected_node_fill_color == "#2b8080"


def test_set_line_and_curve_color(state, redraw, commands):
    commands.set_line_color("#FF0000")
    commands.set_curve_color("blue")
    assert state.style.line_color == "#ff0000"
    assert state.style.curve_color == "#0000ff"
    assert redraw.count == 2


def test_invalid_color_leaves_style_untouched(state, redraw, commands):
    with pytest.raises(ValueError):
        commands.set_curve_color("nope")
    assert state.style.curve_color == "#CC2222"
    assert redraw.count == 0


def test_clear_points_drops_drag(state, commands):
    state.points.add(100.0, 100.0)
    commands.selection.press(100.0, 100.0)

    commands.clear_points()

    assert len(state.points) == 0
    assert commands.selection.drag_state is DragState.IDLE


def test_clear_keeps_style(state, commands):
    commands.toggle_nodes()
    state.points.add(1.0, 1.0)
    commands.clear_points()
    assert state.style.show_nodes is False


def test_set_curve_kind(state, commands):
    commands.set_curve_kind("bezier")
    assert state.curve_kind is CurveKind.BEZIER
    commands.set_curve_kind(CurveKind.BSPLINE_UNIFORM)
    assert state.curve_kind is CurveKind.BSPLINE_UNIFORM


def test_set_curve_kind_rejects_unknown(state, redraw, commands):
    with pytest.raises(ValueError):
        commands.set_curve_kind("hermite")
    assert state.curve_kind is CurveKind.BSPLINE
    assert redraw.count == 0


def test_set_step(state, commands):
    commands.set_step(0.05)
    assert state.style.step == 0.05
    with pytest.raises(ValueError):
        commands.set_step(0.0)
    assert state.style.step == 0.05


def test_reset(state, commands):
    state.points.add(1.0, 1.0)
    commands.set_curve_kind("bezier")
    commands.toggle_lines()

    commands.reset()

    assert len(state.points) == 0
    assert state.curve_kind is CurveKind.BSPLINE
    assert state.style.show_lines is True


@pytest.mark.parametrize("step", [1e-4, 1e-11])
def test_set_step_rejects_steps_below_minimum(state, redraw, commands, step):
    with pytest.raises(ValueError):
        commands.set_step(step)
    assert state.style.step == 0.01
    assert redraw.count == 0
