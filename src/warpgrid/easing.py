from scipy.optimize import brentq

from warpgrid.errors import ValidationError

IDENTITY_EASING = (0.0, 0.0, 1.0, 1.0)


def _bezier_component(s, c1, c2):
    # Cubic Bezier with end values fixed at 0 and 1
    ms = 1 - s
    return 3 * ms * ms * s * c1 + 3 * ms * s * s * c2 + s * s * s


class BezierEasing:
    """
    Cubic Bezier timing function, as in CSS ``cubic-bezier(x1, y1, x2, y2)``.

    Maps a ratio in [0, 1] to an eased ratio. The curve runs from (0, 0) to
    (1, 1); the x control values keep it monotonic so ``x(s) = t`` has one
    root, which is found with Brent's method.
    """

    def __init__(self, x1, y1, x2, y2):
        values = (x1, y1, x2, y2)
        for value in values:
            if not 0 <= value <= 1:
                raise ValidationError(
                    f"Bezier easing values must be between 0 and 1, but got {values}")
        self.x1, self.y1, self.x2, self.y2 = (float(v) for v in values)
        self.is_linear = self.x1 == self.y1 and self.x2 == self.y2

    def __call__(self, t):
        if self.is_linear or t <= 0 or t >= 1:
            return t
        s = brentq(lambda s: _bezier_component(s, self.x1, self.x2) - t, 0.0, 1.0, xtol=1e-14)
        return _bezier_component(s, self.y1, self.y2)

    def __repr__(self):
        return f"BezierEasing({self.x1}, {self.y1}, {self.x2}, {self.y2})"
