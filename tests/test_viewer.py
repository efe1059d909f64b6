import pytest

from planelab.viewer import MathViewer, Method, ViewerError


@pytest.fixture
def board():
    return MathViewer(400, 300)


def test_method_ids_follow_resource_numbers(board):
    assert [m.value for m in Method] == [1013, 1014, 1015, 1016, 1017]
    assert Method(1014) is Method.ROTATION
    assert Method.PERPENDICULAR.capacity == 3
    assert Method.LINE_FIT.capacity == 500
    board.select_method(Method.ROTATION)
    for text in ["10 0", "0 10", "-10 -10"]:
        board.pick_text(text)
    assert len(board.picked) == Method.ROTATION.capacity
    with pytest.raises(ViewerError):
        board.pick(1, 1)


def test_pick_without_method_raises(board):
    with pytest.raises(ViewerError):
        board.pick(10, 10)


def test_contains_edges(board):
    assert board.contains(0, 0)
    assert board.contains(400, 300)
    assert not board.contains(401, 10)
    assert not board.contains(10, -1)


def test_rotation_coordinates_round_trip(board):
    board.select_method(Method.ROTATION)
    for point in [(0, 0), (200, 150), (17, 290)]:
        assert board.to_client(*board.to_orthogonal(*point)) == point
    assert board.to_orthogonal(200, 150) == (0, 0)


def test_other_modes_keep_client_coordinates(board):
    board.select_method(Method.LINE_FIT)
    assert board.to_orthogonal(12, 34) == (12, 34)
    assert board.to_client(12, 34) == (12, 34)


def test_vertical_line_and_perpendicular(board):
    board.select_method(Method.PERPENDICULAR)
    assert board.pick(5, 1) == []
    assert board.pick(5, 9) == ["직선 방정식 [ x = 5 ]"]
    lines = board.pick(2, 4)
    assert lines[0] == "수선 방정식 [ y = 4 ]"
    assert board.guides == [(5, 4)]


def test_too_many_picks_raise(board):
    board.select_method(Method.PERPENDICULAR)
    board.pick(5, 1)
    board.pick(5, 9)
    board.pick(2, 4)
    with pytest.raises(ViewerError):
        board.pick(1, 1)
    assert len(board.picked) == 3


def test_point_on_line_is_rejected(board):
    board.select_method(Method.PERPENDICULAR)
    board.pick(0, 0)
    board.pick(2, 2)
    with pytest.raises(ViewerError):
        board.pick(4, 4)
    assert board.picked == [(0, 0), (2, 2)]
    board.pick(4, 0)
    assert len(board.picked) == 3
    assert len(board.guides) == 1


def test_pick_text_uses_mode_coordinates(board):
    board.select_method(Method.ROTATION)
    board.pick_text("3, 4")
    assert board.picked == [(3, 4)]
    assert board.coordinate_labels()[0] == "(3, 4)"


def test_pick_text_needs_two_numbers(board):
    board.select_method(Method.ROTATION)
    with pytest.raises(ViewerError):
        board.pick_text("12")
    assert board.picked == []


def test_rotation_full_turn_restores_points(board):
    board.select_method(Method.ROTATION)
    for text in ["10 0", "0 10", "-10 -10"]:
        board.pick_text(text)
    original = list(board.picked)
    assert len(board.expressions) == 3
    assert len(board.trail) == 1
    board.rotate(360)
    assert board.rotation == 0
    assert board.picked == original
    assert len(board.trail) == 2


def test_rotation_wraps_and_keeps_distance(board):
    board.select_method(Method.ROTATION)
    for text in ["100 0", "0 50", "-30 -40"]:
        board.pick_text(text)
    board.rotate(400)
    assert board.rotation == 40
    board.rotate(-80)
    assert board.rotation == -40
    x, y = board.picked[0]
    assert abs((x * x + y * y) ** 0.5 - 100) < 2


def test_rotate_ignored_in_other_modes(board):
    board.select_method(Method.LINE_FIT)
    board.pick(1, 1)
    assert board.rotate(90) == []
    assert board.rotation == 0
    assert board.picked == [(1, 1)]


def test_line_fit_guides_span_board(board):
    board.select_method(Method.LINE_FIT)
    for x in (10, 20, 30, 40):
        board.pick(x, 2 * x + 1)
    assert board.expressions[-1].startswith("최소 자승식")
    (sx, sy), (ex, ey) = board.guides
    assert sy == 0
    assert ey == 300
    assert sx < ex


def test_circle_fit_box_is_square(board):
    board.select_method(Method.CIRCLE_FIT)
    for point in [(150, 100), (250, 100), (200, 50), (200, 150)]:
        board.pick(*point)
    (lx, ty), (rx, by) = board.guides
    assert rx - lx == by - ty
    assert (lx + rx) // 2 == 200
    assert (ty + by) // 2 == 100


def test_parabola_fit_recovers_curve(board):
    board.select_method(Method.PARABOLA_FIT)
    for x in (0, 1, 2, 3, 4):
        board.pick(x, x * x)
    fit = board.parabola
    assert fit.axis == "x"
    assert fit.a == pytest.approx(1.0)
    assert fit.b == pytest.approx(0.0, abs=1e-9)
    assert board.expressions[-1] == fit.equation


def test_reset_and_reselect_clear_state(board):
    board.select_method(Method.ROTATION)
    for text in ["10 0", "0 10", "-10 -10"]:
        board.pick_text(text)
    board.rotate(90)
    board.reset()
    assert board.picked == []
    assert board.expressions == []
    assert board.trail == []
    assert board.rotation == 0
    assert board.coordinate_labels() == [""] * 6


def test_selecting_same_method_keeps_points(board):
    board.select_method(Method.LINE_FIT)
    board.pick(3, 3)
    board.select_method(Method.LINE_FIT)
    assert board.picked == [(3, 3)]
    board.select_method(Method.CIRCLE_FIT)
    assert board.picked == []