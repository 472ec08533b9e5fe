import logging

import numpy as np

from warpgrid.bezier import get_bezier_curve_length
from warpgrid.config import GridDefinition
from warpgrid.enums import CellBoundsOrder, InterpolationStrategy, LineStrategy
from warpgrid.interpolate.lines import (
    LineSpan,
    interpolate_curve_u,
    interpolate_curve_v,
    interpolate_straight_line_u,
    interpolate_straight_line_v,
)
from warpgrid.interpolate.point_on_curve import evenly_spaced_eased_factory, linear_eased_factory
from warpgrid.interpolate.surface import get_point_on_surface
from warpgrid.steps import get_axis_boundaries, get_content_step_indices, process_steps
from warpgrid.types import BoundingCurves, CellBounds, GridModel
from warpgrid.validation import (
    validate_bounding_curves,
    validate_cell_bounds_order,
    validate_get_cell_bounds_arguments,
    validate_get_point_arguments,
    validate_grid,
)

logger = logging.getLogger(__name__)

_INTERPOLATION_FACTORIES = {
    InterpolationStrategy.LINEAR: linear_eased_factory,
    InterpolationStrategy.EVEN: evenly_spaced_eased_factory,
}

_LINE_CONSTRUCTORS = {
    LineStrategy.STRAIGHT_LINES: (interpolate_straight_line_u, interpolate_straight_line_v),
    LineStrategy.CURVES: (interpolate_curve_u, interpolate_curve_v),
}


def get_interpolation_strategy(definition):
    """
    Build the (u, v) point-on-curve interpolators for a grid definition.

    Each grid gets fresh interpolators, so arc length lookup tables are cached
    for exactly as long as the grid lives.
    """
    strategy = definition.interpolation_strategy
    if isinstance(strategy, (list, tuple)):
        factory_u, factory_v = strategy
    elif callable(strategy):
        factory_u = factory_v = strategy
    else:
        factory_u = factory_v = _INTERPOLATION_FACTORIES[InterpolationStrategy(strategy)]

    easing = definition.bezier_easing
    return (
        factory_u(precision=definition.precision, bezier_easing=easing["u"]),
        factory_v(precision=definition.precision, bezier_easing=easing["v"]),
    )


def get_line_strategy(definition):
    strategy = definition.line_strategy
    if isinstance(strategy, (list, tuple)):
        return tuple(strategy)
    return _LINE_CONSTRUCTORS[LineStrategy(strategy)]


class Grid:
    """
    Warped grid laid over a Coons patch.

    Every query is computed on first use and cached on the instance, keyed by
    its arguments. The instance never changes after construction.

    Parameters:
    -----------
    bounding_curves : BoundingCurves or mapping
        Top, bottom, left and right curves of the patch. Corners must meet.
    definition : GridDefinition or mapping
        Columns, rows and options, see ``warpgrid.config.GridDefinition``

    Raises:
    -------
    ValidationError
        If the curves or the definition are invalid
    """

    def __init__(self, bounding_curves, definition):
        bounding_curves = BoundingCurves.from_value(bounding_curves)
        definition = GridDefinition.from_value(definition)
        validate_bounding_curves(bounding_curves)
        validate_grid(definition)

        self.definition = definition
        self.bounding_curves = bounding_curves
        self.gutter = definition.gutters
        self.columns = process_steps(definition.columns, self.gutter[0])
        self.rows = process_steps(definition.rows, self.gutter[1])

        self.interpolate_point_u, self.interpolate_point_v = get_interpolation_strategy(definition)
        self.interpolate_line_u, self.interpolate_line_v = get_line_strategy(definition)

        # Absolute (pixel) steps are resolved against each edge's own length
        self.curve_lengths = {
            side: get_bezier_curve_length(getattr(bounding_curves, side))
            for side in ("top", "bottom", "left", "right")
        }
        self._u = get_axis_boundaries(self.columns, self.curve_lengths["top"], self.curve_lengths["bottom"])
        self._v = get_axis_boundaries(self.rows, self.curve_lengths["left"], self.curve_lengths["right"])
        self._content_columns = get_content_step_indices(self.columns)
        self._content_rows = get_content_step_indices(self.rows)
        self._cache = {}

        logger.debug(
            "Created grid with %d columns and %d rows (%d x %d cells)",
            len(self.columns), len(self.rows), len(self._content_columns), len(self._content_rows))

    @property
    def model(self):
        return GridModel(self.bounding_curves, tuple(self.columns), tuple(self.rows))

    def _memoized(self, key, compute):
        if key not in self._cache:
            logger.debug("Cache miss for %s", key[0])
            self._cache[key] = compute()
        return self._cache[key]

    def _surface_point(self, u, v, u_opposite=None, v_opposite=None):
        return get_point_on_surface(
            self.bounding_curves, u, v,
            self.interpolate_point_u, self.interpolate_point_v,
            u_opposite=u_opposite, v_opposite=v_opposite,
        )

    def get_point(self, u, v, u_opposite=None, v_opposite=None):
        """
        Point at normalized coordinates on the patch.

        Parameters:
        -----------
        u, v : float
            Ratios in [0, 1] along the top and left curves
        u_opposite, v_opposite : float, optional
            Ratios along the bottom and right curves. Default to u and v.

        Returns:
        --------
        Point
        """
        validate_get_point_arguments(u, v, u_opposite, v_opposite)
        return self._memoized(
            ("get_point", u, v, u_opposite, v_opposite),
            lambda: self._surface_point(u, v, u_opposite, v_opposite),
        )

    def _is_single_cell(self):
        return self._u.count == 1 and self._v.count == 1

    def get_lines_x_axis(self):
        """
        Lines along the x axis, one list per row boundary.

        Each list holds one curve per non-gutter column. Gutter rows still get
        boundary lines on both of their sides.
        """
        return self._memoized(("get_lines_x_axis",), self._build_lines_x_axis)

    def _build_lines_x_axis(self):
        if self._is_single_cell():
            return [[self.bounding_curves.top], [self.bounding_curves.bottom]]

        curves = []
        for row_idx in range(self._v.count + 1):
            line_sections = []
            for column_idx, column in enumerate(self.columns):
                if column.is_gutter:
                    continue
                span = LineSpan(
                    start=self._u.edge[column_idx],
                    end=self._u.edge[column_idx + 1],
                    fixed=self._v.edge[row_idx],
                    opposite_start=self._u.opposite[column_idx],
                    opposite_end=self._u.opposite[column_idx + 1],
                    fixed_opposite=self._v.opposite[row_idx],
                )
                line_sections.append(self.interpolate_line_u(
                    self.bounding_curves, span, self.interpolate_point_u, self.interpolate_point_v))
            curves.append(line_sections)
        return curves

    def get_lines_y_axis(self):
        """Lines along the y axis, one list per column boundary."""
        return self._memoized(("get_lines_y_axis",), self._build_lines_y_axis)

    def _build_lines_y_axis(self):
        if self._is_single_cell():
            return [[self.bounding_curves.left], [self.bounding_curves.right]]

        curves = []
        for column_idx in range(self._u.count + 1):
            line_sections = []
            for row_idx, row in enumerate(self.rows):
                if row.is_gutter:
                    continue
                span = LineSpan(
                    start=self._v.edge[row_idx],
                    end=self._v.edge[row_idx + 1],
                    fixed=self._u.edge[column_idx],
                    opposite_start=self._v.opposite[row_idx],
                    opposite_end=self._v.opposite[row_idx + 1],
                    fixed_opposite=self._u.opposite[column_idx],
                )
                line_sections.append(self.interpolate_line_v(
                    self.bounding_curves, span, self.interpolate_point_u, self.interpolate_point_v))
            curves.append(line_sections)
        return curves

    def get_lines(self):
        return {"x_axis": self.get_lines_x_axis(), "y_axis": self.get_lines_y_axis()}

    def get_intersections(self):
        """
        Every point where an x axis line meets a y axis line, row by row.

        Returns:
        --------
        list of Point
            ``(rows + 1) * (columns + 1)`` points, gutter boundaries included
        """
        return self._memoized(("get_intersections",), self._build_intersections)

    def _build_intersections(self):
        intersections = []
        for row_idx in range(self._v.count + 1):
            for column_idx in range(self._u.count + 1):
                intersections.append(self._surface_point(
                    self._u.edge[column_idx],
                    self._v.edge[row_idx],
                    self._u.opposite[column_idx],
                    self._v.opposite[row_idx],
                ))
        return intersections

    def to_arrays(self):
        """
        Intersections as coordinate arrays.

        Returns:
        --------
        gx, gy : np.ndarray
            Arrays of shape (rows + 1, columns + 1)
        """
        shape = (self._v.count + 1, self._u.count + 1)
        xy = np.array([[p.x, p.y] for p in self.get_intersections()])
        return xy[:, 0].reshape(shape), xy[:, 1].reshape(shape)

    def get_cell_bounds(self, column, row, make_bounds_curves_sequential=False):
        """
        Bounding curves of one cell.

        Parameters:
        -----------
        column, row : int
            Zero-based cell indices, counting non-gutter steps only
        make_bounds_curves_sequential : bool, optional
            Reverse the bottom and left curves so the four curves run
            clockwise, each starting where the previous one ends

        Returns:
        --------
        CellBounds
        """
        validate_get_cell_bounds_arguments(column, row, len(self._content_columns), len(self._content_rows))
        column, row = int(column), int(row)
        return self._memoized(
            ("get_cell_bounds", column, row, bool(make_bounds_curves_sequential)),
            lambda: self._build_cell_bounds(column, row, make_bounds_curves_sequential),
        )

    def _build_cell_bounds(self, column, row, make_bounds_curves_sequential):
        lines = self.get_lines()
        x_axis, y_axis = lines["x_axis"], lines["y_axis"]

        # Line indices skip over gutter steps
        row_line_idx = self._content_rows[row]
        column_line_idx = self._content_columns[column]

        top = x_axis[row_line_idx][column]
        bottom = x_axis[row_line_idx + 1][column]
        left = y_axis[column_line_idx][row]
        right = y_axis[column_line_idx + 1][row]

        if make_bounds_curves_sequential:
            bottom = bottom.reversed()
            left = left.reversed()
        return CellBounds(top=top, bottom=bottom, left=left, right=right, row=row, column=column)

    def get_all_cell_bounds(self, make_bounds_curves_sequential=False, cell_bounds_order=CellBoundsOrder.TTB_LTR):
        """
        Bounds of every non-gutter cell.

        Parameters:
        -----------
        make_bounds_curves_sequential : bool, optional
            See ``get_cell_bounds``
        cell_bounds_order : CellBoundsOrder or str, optional
            Traversal order. Default is TTB_LTR: rows top to bottom, and
            left to right within each row.

        Returns:
        --------
        list of CellBounds
        """
        order = validate_cell_bounds_order(cell_bounds_order)
        return self._memoized(
            ("get_all_cell_bounds", bool(make_bounds_curves_sequential), order),
            lambda: self._build_all_cell_bounds(make_bounds_curves_sequential, order),
        )

    def _build_all_cell_bounds(self, make_bounds_curves_sequential, order):
        row_count = len(self._content_rows)
        column_count = len(self._content_columns)
        outer_count, inner_count = (row_count, column_count) if order.is_rows_outer else (column_count, row_count)

        outer_indices = list(range(outer_count))
        inner_indices = list(range(inner_count))
        if order.is_outer_reversed:
            outer_indices.reverse()
        if order.is_inner_reversed:
            inner_indices.reverse()

        cells_bounds = []
        for outer_idx in outer_indices:
            for inner_idx in inner_indices:
                row, column = (outer_idx, inner_idx) if order.is_rows_outer else (inner_idx, outer_idx)
                cells_bounds.append(self.get_cell_bounds(
                    column, row, make_bounds_curves_sequential=make_bounds_curves_sequential))
        return cells_bounds


def warp_grid(bounding_curves, definition=None, **options):
    """
    Create a ``Grid``.

    The definition can be passed as a mapping or ``GridDefinition``, as
    keyword options, or both (keywords override the mapping).

    Example:
        >>> grid = warp_grid(bounds, columns=3, rows=3, gutter=5)
    """
    if definition is None:
        definition = {}
    elif isinstance(definition, GridDefinition):
        definition = dict(vars(definition))
    definition = {**definition, **options}
    return Grid(bounding_curves, definition)
