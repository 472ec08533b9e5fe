import logging

import numpy as np
import pytest

from warpgrid import (
    CellBounds,
    CellBoundsOrder,
    EvenlySpacedInterpolator,
    Grid,
    GridDefinition,
    Point,
    Step,
    ValidationError,
    setup_logging,
    warp_grid,
)
from warpgrid.interpolate import (
    evenly_spaced_eased_factory,
    interpolate_curve_u,
    interpolate_point_on_curve_linear,
    interpolate_straight_line_v,
    linear_eased_factory,
)


def assert_points_close(point1, point2, abs=1e-6):
    assert point1.x == pytest.approx(point2.x, abs=abs)
    assert point1.y == pytest.approx(point2.y, abs=abs)


@pytest.fixture
def square_grid(square_bounds):
    return warp_grid(square_bounds, columns=3, rows=3, interpolation_strategy="linear")


class TestSquareGrid:
    def test_centre_point(self, square_grid):
        point = square_grid.get_point(0.5, 0.5)
        assert point.x == pytest.approx(50, abs=1e-9)
        assert point.y == pytest.approx(50, abs=1e-9)

    def test_middle_cell(self, square_grid):
        bounds = square_grid.get_cell_bounds(1, 1)
        assert isinstance(bounds, CellBounds)
        assert (bounds.row, bounds.column) == (1, 1)
        assert_points_close(bounds.top.start_point, Point(100 / 3, 100 / 3))
        assert_points_close(bounds.bottom.end_point, Point(200 / 3, 200 / 3))

    def test_intersections(self, square_grid):
        intersections = square_grid.get_intersections()
        assert len(intersections) == 16
        assert intersections[0] == Point(0, 0)
        assert intersections[-1] == Point(100, 100)
        assert_points_close(intersections[5], Point(100 / 3, 100 / 3))

    def test_lines_shape(self, square_grid):
        lines = square_grid.get_lines()
        assert len(lines["x_axis"]) == 4
        assert all(len(row) == 3 for row in lines["x_axis"])
        assert len(lines["y_axis"]) == 4
        assert all(len(column) == 3 for column in lines["y_axis"])

    def test_straight_lines_by_default(self, square_grid):
        line = square_grid.get_lines_x_axis()[1][0]
        assert line.control_point_1 == line.start_point
        assert line.control_point_2 == line.end_point

    def test_to_arrays(self, square_grid):
        gx, gy = square_grid.to_arrays()
        assert gx.shape == (4, 4)
        np.testing.assert_allclose(gx[0], [0, 100 / 3, 200 / 3, 100], atol=1e-6)
        np.testing.assert_allclose(gy[:, 0], [0, 100 / 3, 200 / 3, 100], atol=1e-6)

    def test_even_strategy_agrees_on_uniform_sides(self, square_bounds, square_grid):
        even_grid = warp_grid(square_bounds, columns=3, rows=3)
        for even, linear in zip(even_grid.get_intersections(), square_grid.get_intersections()):
            assert_points_close(even, linear)

    def test_opposite_ratio(self, square_grid):
        assert_points_close(square_grid.get_point(0.5, 0.5, u_opposite=1), Point(75, 50))

    def test_model(self, square_grid):
        model = square_grid.model
        assert model.columns == (Step(1.0),) * 3
        assert model.bounding_curves is square_grid.bounding_curves
        assert hash(model) == hash(square_grid.model)


def test_single_cell_grid_returns_bounding_curves(curved_bounds):
    grid = Grid(curved_bounds, {"columns": 1, "rows": 1})
    assert grid.get_lines_x_axis() == [[curved_bounds.top], [curved_bounds.bottom]]
    assert grid.get_lines_y_axis() == [[curved_bounds.left], [curved_bounds.right]]


def test_curved_grid_edges_lie_on_bounding_curves(curved_bounds):
    grid = Grid(curved_bounds, {"columns": 3, "rows": 2})
    gx, gy = grid.to_arrays()
    for idx, u in enumerate([0, 1 / 3, 2 / 3, 1]):
        expected = grid.interpolate_point_u(u, curved_bounds.top)
        assert gx[0, idx] == pytest.approx(expected.x, abs=1e-6)
        assert gy[0, idx] == pytest.approx(expected.y, abs=1e-6)


class TestGutters:
    def test_relative_gutter_matches_explicit_gutter_steps(self, square_bounds):
        implicit = Grid(square_bounds, {"columns": 2, "rows": 2, "gutter": 0.5})
        explicit = Grid(square_bounds, {
            "columns": [1, Step(0.5, is_gutter=True), 1],
            "rows": [1, {"value": 0.5, "isGutter": True}, 1],
        })
        for point1, point2 in zip(implicit.get_intersections(), explicit.get_intersections()):
            assert_points_close(point1, point2, abs=1e-9)

    def test_cell_lookup_skips_gutters(self, square_bounds):
        grid = Grid(square_bounds, {"columns": 3, "rows": 3, "gutter": 1})
        x_axis = grid.get_lines_x_axis()
        y_axis = grid.get_lines_y_axis()
        assert len(x_axis) == 6
        assert all(len(row) == 3 for row in x_axis)
        bounds = grid.get_cell_bounds(2, 2)
        assert bounds.top == x_axis[4][2]
        assert bounds.bottom == x_axis[5][2]
        assert bounds.left == y_axis[4][2]
        assert bounds.right == y_axis[5][2]

    def test_cell_bounds_match_explicit_gutter_steps(self, curved_bounds):
        implicit = Grid(curved_bounds, {"columns": 3, "rows": 3, "gutter": 0.25})
        steps = [1, Step(0.25, is_gutter=True), 1, Step(0.25, is_gutter=True), 1]
        explicit = Grid(curved_bounds, {"columns": steps, "rows": steps})
        for side in ("top", "bottom", "left", "right"):
            curve1 = getattr(implicit.get_cell_bounds(2, 2), side)
            curve2 = getattr(explicit.get_cell_bounds(2, 2), side)
            for point1, point2 in zip(curve1.points, curve2.points):
                assert_points_close(point1, point2, abs=1e-9)

    def test_pixel_gutter(self, square_bounds):
        grid = Grid(square_bounds, {"columns": 3, "rows": 1, "gutter": "10px", "interpolationStrategy": "linear"})
        bounds = grid.get_cell_bounds(1, 0)
        assert bounds.top.start_point.x == pytest.approx(0.8 / 3 * 100 + 10, abs=1e-6)
        assert bounds.top.end_point.x - bounds.top.start_point.x == pytest.approx(80 / 3, abs=1e-6)

    def test_separate_column_and_row_gutters(self, square_bounds):
        grid = Grid(square_bounds, {"columns": 2, "rows": 2, "gutter": (0, "20px"), "interpolationStrategy": "linear"})
        assert len(grid.columns) == 2
        assert len(grid.rows) == 3
        bounds = grid.get_cell_bounds(0, 1)
        assert bounds.top.start_point.y == pytest.approx(60, abs=1e-6)

    def test_leading_and_trailing_gutters(self, square_bounds):
        grid = Grid(square_bounds, {
            "columns": [Step(1, is_gutter=True), 2, Step(1, is_gutter=True)],
            "rows": 1,
            "interpolationStrategy": "linear",
        })
        cells = grid.get_all_cell_bounds()
        assert len(cells) == 1
        assert cells[0].top.start_point.x == pytest.approx(25, abs=1e-6)
        assert cells[0].top.end_point.x == pytest.approx(75, abs=1e-6)

    def test_absolute_column_keeps_width_on_short_edge(self, narrow_edge_bounds):
        grid = Grid(narrow_edge_bounds, {"columns": ["20px", 1], "rows": 1, "precision": 200})
        gx, gy = grid.to_arrays()
        # Bottom edge runs from x=25 to x=75
        assert gx[1, 1] == pytest.approx(45, abs=0.01)
        assert gy[1, 1] == pytest.approx(100, abs=1e-9)


class TestCellOrder:
    @pytest.fixture
    def grid(self, square_bounds):
        return Grid(square_bounds, {"columns": 3, "rows": 2})

    @staticmethod
    def coordinates(cells):
        return [(cell.row, cell.column) for cell in cells]

    def test_default_is_row_major(self, grid):
        assert self.coordinates(grid.get_all_cell_bounds()) == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    def test_column_major(self, grid):
        cells = grid.get_all_cell_bounds(cell_bounds_order=CellBoundsOrder.LTR_TTB)
        assert self.coordinates(cells) == [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2)]

    def test_reversed_both_ways(self, grid):
        cells = grid.get_all_cell_bounds(cell_bounds_order="BTT_RTL")
        assert self.coordinates(cells)[0] == (1, 2)
        assert self.coordinates(cells)[-1] == (0, 0)

    def test_right_to_left_columns_outer(self, grid):
        cells = grid.get_all_cell_bounds(cell_bounds_order="RTL_TTB")
        assert self.coordinates(cells)[:3] == [(0, 2), (1, 2), (0, 1)]

    def test_single_cell_query_takes_no_order(self, grid):
        with pytest.raises(TypeError):
            grid.get_cell_bounds(1, 0, cell_bounds_order="BTT_LTR")

    @pytest.mark.parametrize("column, row", [(1.0, 1), (1, np.float64(1.0))])
    def test_float_indices_are_rejected(self, grid, column, row):
        with pytest.raises(ValidationError, match="must be an Int"):
            grid.get_cell_bounds(column, row)

    def test_numpy_integer_indices(self, grid):
        assert grid.get_cell_bounds(np.int64(2), np.int64(1)) is grid.get_cell_bounds(2, 1)


class TestCellBounds:
    def test_sequential_curves_connect(self, curved_bounds):
        grid = Grid(curved_bounds, {"columns": 2, "rows": 2, "lineStrategy": "curves"})
        bounds = grid.get_cell_bounds(1, 0, make_bounds_curves_sequential=True)
        assert_points_close(bounds.top.end_point, bounds.right.start_point)
        assert_points_close(bounds.right.end_point, bounds.bottom.start_point)
        assert_points_close(bounds.bottom.end_point, bounds.left.start_point)
        assert_points_close(bounds.left.end_point, bounds.top.start_point)

    def test_sequential_reverses_bottom_and_left(self, square_grid):
        plain = square_grid.get_cell_bounds(0, 0)
        sequential = square_grid.get_cell_bounds(0, 0, make_bounds_curves_sequential=True)
        assert sequential.top == plain.top
        assert sequential.bottom == plain.bottom.reversed()
        assert sequential.left == plain.left.reversed()

    def test_cell_bounds_build_a_nested_grid(self, square_grid):
        inner = Grid(square_grid.get_cell_bounds(1, 1), {"columns": 2, "rows": 2})
        assert_points_close(inner.get_point(0.5, 0.5), Point(50, 50))


class TestStrategies:
    def test_curves_on_square_have_control_points_at_thirds(self, square_bounds):
        grid = Grid(square_bounds, {"columns": 2, "rows": 2, "lineStrategy": "curves"})
        line = grid.get_lines_x_axis()[1][0]
        assert_points_close(line.start_point, Point(0, 50))
        assert_points_close(line.control_point_1, Point(50 / 3, 50))
        assert_points_close(line.control_point_2, Point(100 / 3, 50))
        assert_points_close(line.end_point, Point(50, 50))

    def test_custom_interpolation_factories(self, square_bounds):
        grid = Grid(square_bounds, {
            "columns": 2, "rows": 2,
            "interpolation_strategy": (linear_eased_factory, evenly_spaced_eased_factory),
        })
        assert grid.interpolate_point_u is interpolate_point_on_curve_linear
        assert isinstance(grid.interpolate_point_v, EvenlySpacedInterpolator)

    def test_single_factory_is_used_for_both_axes(self, square_bounds):
        calls = []

        def factory(precision, bezier_easing):
            calls.append((precision, bezier_easing))
            return interpolate_point_on_curve_linear

        Grid(square_bounds, {"columns": 2, "rows": 2, "interpolationStrategy": factory, "precision": 7})
        assert calls == [(7, (0.0, 0.0, 1.0, 1.0))] * 2

    def test_custom_line_constructors(self, square_bounds):
        grid = Grid(square_bounds, {
            "columns": 2, "rows": 2,
            "line_strategy": (interpolate_curve_u, interpolate_straight_line_v),
        })
        x_line = grid.get_lines_x_axis()[1][0]
        y_line = grid.get_lines_y_axis()[1][0]
        assert x_line.control_point_1 != x_line.start_point
        assert y_line.control_point_1 == y_line.start_point

    def test_easing_shifts_grid_lines(self, square_bounds):
        grid = Grid(square_bounds, {
            "columns": 3, "rows": 3,
            "interpolationStrategy": "linear",
            "bezierEasing": {"xAxis": (0.42, 0, 0.58, 1)},
        })
        gx, gy = grid.to_arrays()
        assert gx[0, 1] < 100 / 3
        assert gy[1, 0] == pytest.approx(100 / 3, abs=1e-6)


class TestFacade:
    def test_camel_case_mapping(self, square_bounds):
        grid = warp_grid(square_bounds, {
            "columns": 2, "rows": 2,
            "interpolationStrategy": "linear",
            "lineStrategy": "curves",
        })
        assert grid.definition.interpolation_strategy == "linear"
        assert grid.definition.line_strategy == "curves"

    def test_keyword_options_override_definition(self, square_bounds):
        grid = warp_grid(square_bounds, GridDefinition(columns=2, rows=2), rows=4)
        assert len(grid.get_lines_x_axis()) == 5

    def test_bounding_curves_from_mapping(self, curved_bounds):
        as_mapping = {
            side: [vars(p) for p in getattr(curved_bounds, side).points]
            for side in ("top", "bottom", "left", "right")
        }
        grid = warp_grid(as_mapping, columns=2, rows=2)
        assert grid.bounding_curves == curved_bounds

    def test_results_are_memoized(self, square_grid):
        assert square_grid.get_point(0.2, 0.3) is square_grid.get_point(0.2, 0.3)
        assert square_grid.get_lines_x_axis() is square_grid.get_lines_x_axis()
        assert square_grid.get_all_cell_bounds() is square_grid.get_all_cell_bounds()
        assert square_grid.get_cell_bounds(0, 1) is square_grid.get_cell_bounds(0, 1)


class TestLogging:
    def test_grid_creation_is_logged(self, square_bounds, caplog):
        with caplog.at_level(logging.DEBUG, logger="warpgrid"):
            Grid(square_bounds, {"columns": 2, "rows": 3})
        assert "Created grid with 2 columns and 3 rows" in caplog.text

    def test_setup_logging(self, tmp_path):
        log_file = tmp_path / "warpgrid.log"
        logger = setup_logging(logging.DEBUG, log_file=str(log_file))
        try:
            assert logger.name == "warpgrid"
            assert len(logger.handlers) == 2
            setup_logging(logging.INFO)
            assert len(logger.handlers) == 1
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
        assert "Logging initialized." in log_file.read_text()
