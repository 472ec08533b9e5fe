"""Warped grids over Coons patches bounded by four cubic Bezier curves."""
from warpgrid.bezier import fit_cubic_bezier_to_points, get_bezier_curve_length, sample_curve
from warpgrid.config import GridDefinition
from warpgrid.easing import BezierEasing
from warpgrid.enums import CellBoundsOrder, InterpolationStrategy, LineStrategy
from warpgrid.errors import ValidationError
from warpgrid.grid import Grid, warp_grid
from warpgrid.interpolate import (
    EvenlySpacedInterpolator,
    get_point_on_surface,
    interpolate_point_on_curve_evenly_spaced,
    interpolate_point_on_curve_linear,
)
from warpgrid.logging_config import setup_logging
from warpgrid.types import BoundingCurves, CellBounds, Curve, GridModel, Point, Step

__version__ = "0.1.0"
