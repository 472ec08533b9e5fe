"""
Cubic Bezier helpers: evaluation, least-squares fitting, length and sampling.

The fitting routine follows Pomax's curve fitting write-up:
https://pomax.github.io/bezierinfo/#curvefitting
"""
import numpy as np
from scipy.integrate import quad

from warpgrid.math_utils import lerp
from warpgrid.matrix import get_basis_matrix, get_ratio_matrix
from warpgrid.types import Curve, Point


def _lerp_point(point1, point2, t):
    return Point(lerp(point1.x, point2.x, t), lerp(point1.y, point2.y, t))


def get_point_on_bezier(t, curve):
    """
    De Casteljau evaluation of a cubic Bezier at ``t``. No range checks.
    """
    point1 = _lerp_point(curve.start_point, curve.control_point_1, t)
    point2 = _lerp_point(curve.control_point_1, curve.control_point_2, t)
    point3 = _lerp_point(curve.control_point_2, curve.end_point, t)
    point4 = _lerp_point(point1, point2, t)
    point5 = _lerp_point(point2, point3, t)
    return _lerp_point(point4, point5, t)


def fit_cubic_bezier_to_points(points, ratios):
    """
    Fit a cubic Bezier through sample points taken at known curve parameters.

    Solves ``P = M^-1 (T T^t)^-1 T [X | Y]`` where ``T`` is the power matrix of
    the ratios and ``M`` the Bezier basis matrix.

    Parameters:
    -----------
    points : sequence of Point
        Four sample points
    ratios : sequence of float
        Curve parameter of each sample, e.g. [0, 0.25, 0.75, 1]. Must not
        contain duplicates.

    Returns:
    --------
    Curve
        The fitted curve
    """
    number_of_points = len(points)
    t_matrix, t_matrix_transposed = get_ratio_matrix(ratios)
    basis_inverted = np.linalg.inv(get_basis_matrix(number_of_points))
    ratio_multiplied_inverted = np.linalg.inv(t_matrix @ t_matrix_transposed)
    solver = basis_inverted @ ratio_multiplied_inverted @ t_matrix

    coords = np.array([[p.x, p.y] for p in points], dtype=float)
    control_points = solver @ coords
    return Curve(*(Point(float(x), float(y)) for x, y in control_points))


def get_bezier_derivative(t, curve):
    p0, p1, p2, p3 = (p.to_array() for p in curve.points)
    mt = 1 - t
    return 3 * (mt * mt * (p1 - p0) + 2 * mt * t * (p2 - p1) + t * t * (p3 - p2))


def get_bezier_curve_length(curve):
    """Arc length of a cubic Bezier by adaptive quadrature of its speed."""
    length, _ = quad(lambda t: np.linalg.norm(get_bezier_derivative(t, curve)), 0.0, 1.0, limit=100)
    return float(length)


def sample_curve(curve, num_points=50):
    """
    Sample a curve at evenly spaced parameters.

    Returns:
    --------
    np.ndarray
        Array of shape (num_points, 2)
    """
    t = np.linspace(0, 1, num_points)[:, None]
    p0, p1, p2, p3 = (p.to_array() for p in curve.points)
    mt = 1 - t
    return mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 + t**3 * p3
