from warpgrid.math_utils import clamp_t
from warpgrid.types import Point


def _get_coordinate_on_surface(coordinate, boundary_points, corner_points, u, v):
    top, bottom, left, right = (getattr(p, coordinate) for p in boundary_points)
    top_left, top_right, bottom_left, bottom_right = (getattr(p, coordinate) for p in corner_points)
    return (
        (1 - v) * top
        + v * bottom
        + (1 - u) * left
        + u * right
        - (1 - u) * (1 - v) * top_left
        - u * (1 - v) * top_right
        - (1 - u) * v * bottom_left
        - u * v * bottom_right
    )


def get_point_on_surface(bounding_curves, u, v, interpolate_u, interpolate_v,
                         u_opposite=None, v_opposite=None):
    """
    Point on a Coons patch by bilinear blending of its four bounding curves.

    Parameters:
    -----------
    bounding_curves : BoundingCurves
        Sides of the patch
    u, v : float
        Ratios along the top and left curves
    interpolate_u, interpolate_v : callable
        Point-on-curve interpolators for the top/bottom and left/right curves
    u_opposite, v_opposite : float, optional
        Ratios along the bottom and right curves. Default to u and v.

    Returns:
    --------
    Point
    """
    # Upstream accumulation can drift fractionally outside [0, 1]
    u = clamp_t(u)
    v = clamp_t(v)
    u_opposite = u if u_opposite is None else clamp_t(u_opposite)
    v_opposite = v if v_opposite is None else clamp_t(v_opposite)

    top, bottom, left, right = (bounding_curves.top, bounding_curves.bottom,
                                bounding_curves.left, bounding_curves.right)
    boundary_points = (
        interpolate_u(u, top),
        interpolate_u(u_opposite, bottom),
        interpolate_v(v, left),
        interpolate_v(v_opposite, right),
    )
    corner_points = (top.start_point, top.end_point, bottom.start_point, bottom.end_point)

    return Point(
        float(_get_coordinate_on_surface("x", boundary_points, corner_points, u, v)),
        float(_get_coordinate_on_surface("y", boundary_points, corner_points, u, v)),
    )
