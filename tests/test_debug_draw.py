import pytest

from voxelcraft.debug_draw import DebugDrawer


def test_draw_line_adds_vertex_pair():
    drawer = DebugDrawer()
    drawer.draw_line((0, 1, 2), (3, 4, 5), (1, 0, 1))
    assert [v.pos for v in drawer.debug_lines] == [(0.0, 1.0, 2.0), (3.0, 4.0, 5.0)]
    assert all(v.color == (1, 0, 1) for v in drawer.debug_lines)


def test_lines_accumulate_in_order():
    drawer = DebugDrawer()
    drawer.draw_line((0, 0, 0), (1, 1, 1), (1, 0, 0))
    drawer.draw_line((2, 2, 2), (3, 3, 3), (0, 1, 0))
    assert len(drawer.debug_lines) == 4
    assert drawer.debug_lines[2].pos == (2.0, 2.0, 2.0)
    assert drawer.debug_lines[3].color == (0, 1, 0)


def test_contact_point_scales_normal():
    drawer = DebugDrawer()
    drawer.draw_contact_point((1, 2, 3), (0, 1, 0), 2.0, 0, (1, 1, 1))
    start, end = drawer.debug_lines
    assert start.pos == (1.0, 2.0, 3.0)
    assert end.pos[0] == start.pos[0]
    assert end.pos[2] == start.pos[2]
    assert end.pos[1] == pytest.approx(start.pos[1] + 10.0)


def test_clear_lines():
    drawer = DebugDrawer()
    drawer.draw_line((0, 0, 0), (1, 1, 1), (1, 1, 1))
    drawer.clear_lines()
    assert drawer.debug_lines == []


def test_debug_mode_is_kept():
    drawer = DebugDrawer(debug_mode=3)
    assert drawer.debug_mode == 3
    drawer.debug_mode = 5
    assert drawer.debug_mode == 5


def test_report_error_warning(capsys):
    DebugDrawer().report_error_warning("broken")
    assert capsys.readouterr().err == "Debug Warning: broken\n"