"""
Grid line constructors.

A U line runs across the columns at a fixed ``v`` (a row boundary); a V line
runs down the rows at a fixed ``u`` (a column boundary). Each constructor
takes the bounding curves, a ``LineSpan`` and the two point-on-curve
interpolators, and returns a cubic ``Curve``.
"""
from dataclasses import dataclass

from warpgrid.bezier import fit_cubic_bezier_to_points
from warpgrid.config import T_MIDPOINT_1, T_MIDPOINT_2
from warpgrid.interpolate.surface import get_point_on_surface
from warpgrid.math_utils import clamp_t
from warpgrid.types import Curve


@dataclass(frozen=True)
class LineSpan:
    """
    Range covered by one line section.

    ``start``/``end`` run along the line's own axis on the top (U) or left (V)
    curve, ``opposite_start``/``opposite_end`` along the bottom or right curve.
    ``fixed``/``fixed_opposite`` is the position on the other axis.
    """
    start: float
    end: float
    fixed: float
    opposite_start: float = None
    opposite_end: float = None
    fixed_opposite: float = None

    def clamped(self):
        def resolve(value, fallback):
            return clamp_t(fallback if value is None else value)

        return LineSpan(
            start=clamp_t(self.start),
            end=clamp_t(self.end),
            fixed=clamp_t(self.fixed),
            opposite_start=resolve(self.opposite_start, self.start),
            opposite_end=resolve(self.opposite_end, self.end),
            fixed_opposite=resolve(self.fixed_opposite, self.fixed),
        )


def _point_u(bounding_curves, span, ratio, interpolate_u, interpolate_v):
    # Point a given ratio of the way along a U span
    return get_point_on_surface(
        bounding_curves,
        span.start + (span.end - span.start) * ratio,
        span.fixed,
        interpolate_u,
        interpolate_v,
        u_opposite=span.opposite_start + (span.opposite_end - span.opposite_start) * ratio,
        v_opposite=span.fixed_opposite,
    )


def _point_v(bounding_curves, span, ratio, interpolate_u, interpolate_v):
    return get_point_on_surface(
        bounding_curves,
        span.fixed,
        span.start + (span.end - span.start) * ratio,
        interpolate_u,
        interpolate_v,
        u_opposite=span.fixed_opposite,
        v_opposite=span.opposite_start + (span.opposite_end - span.opposite_start) * ratio,
    )


def _straight_line(get_point, bounding_curves, span, interpolate_u, interpolate_v):
    span = span.clamped()
    start_point = get_point(bounding_curves, span, 0, interpolate_u, interpolate_v)
    end_point = get_point(bounding_curves, span, 1, interpolate_u, interpolate_v)
    # Control points sit on the ends so the curve is a straight segment
    return Curve(start_point, start_point, end_point, end_point)


def _curve(get_point, bounding_curves, span, interpolate_u, interpolate_v):
    span = span.clamped()
    ratios = (0, T_MIDPOINT_1, T_MIDPOINT_2, 1)
    points = [get_point(bounding_curves, span, ratio, interpolate_u, interpolate_v) for ratio in ratios]
    return fit_cubic_bezier_to_points(points, ratios)


def interpolate_straight_line_u(bounding_curves, span, interpolate_u, interpolate_v):
    """Straight line section along U at fixed v."""
    return _straight_line(_point_u, bounding_curves, span, interpolate_u, interpolate_v)


def interpolate_straight_line_v(bounding_curves, span, interpolate_u, interpolate_v):
    """Straight line section along V at fixed u."""
    return _straight_line(_point_v, bounding_curves, span, interpolate_u, interpolate_v)


def interpolate_curve_u(bounding_curves, span, interpolate_u, interpolate_v):
    """
    Curved line section along U at fixed v.

    Samples the surface at 0, 25, 75 and 100 percent of the span and fits a
    cubic through them, so the line follows the patch instead of the chord.
    """
    return _curve(_point_u, bounding_curves, span, interpolate_u, interpolate_v)


def interpolate_curve_v(bounding_curves, span, interpolate_u, interpolate_v):
    """Curved line section along V at fixed u. See ``interpolate_curve_u``."""
    return _curve(_point_v, bounding_curves, span, interpolate_u, interpolate_v)
