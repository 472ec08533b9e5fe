import numpy as np
from scipy.special import comb


def lerp(a, b, t):
    return (1 - t) * a + t * b


def clamp_t(t):
    """Clamp a ratio into [0, 1]."""
    return min(max(t, 0.0), 1.0)


def round_to(n, value):
    return round(value, n)


def round_to_5(value):
    return round_to(5, value)


def round_to_10(value):
    return round_to(10, value)


def get_distance_between_points(point1, point2):
    return float(np.hypot(point2.x - point1.x, point2.y - point1.y))


def binomial(n, k):
    """Binomial coefficient C(n, k) as an exact integer."""
    return int(comb(n, k, exact=True))
