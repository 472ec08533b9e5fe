"""
Point-on-curve interpolators.

An interpolator is any callable ``(t, curve) -> Point``. Two are built in:

* linear: plain De Casteljau evaluation at ``t``;
* evenly spaced: ``t`` is a ratio of arc length, so equal steps in ``t`` give
  equal distances along the curve.

The ``*_eased_factory`` functions build interpolators with a Bezier easing
applied to ``t`` first; the grid uses them to select its strategies.
"""
import logging

import numpy as np

from warpgrid.bezier import get_point_on_bezier
from warpgrid.config import DEFAULT_PRECISION
from warpgrid.easing import IDENTITY_EASING, BezierEasing
from warpgrid.errors import ValidationError
from warpgrid.math_utils import clamp_t, round_to_10

logger = logging.getLogger(__name__)


def validate_t(t):
    if t < 0 or t > 1:
        raise ValidationError(f"t value must be between 0 and 1, but was '{t}'")


def validate_precision(precision):
    if isinstance(precision, bool) or not isinstance(precision, (int, np.integer)) or precision < 1:
        raise ValidationError(
            f"Precision must be a positive integer greater than 0, but was '{precision}'")


def _resolve_t(t):
    # Round away floating point noise just outside [0, 1] before checking
    t_rounded = round_to_10(t)
    validate_t(t_rounded)
    return clamp_t(t_rounded)


def interpolate_point_on_curve_linear(t, curve):
    """Point at curve parameter ``t``."""
    return get_point_on_bezier(_resolve_t(t), curve)


class EvenlySpacedInterpolator:
    """
    Interpolates points spaced evenly by arc length.

    The curve is approximated by ``precision`` chords and a lookup table of
    cumulative chord lengths. The table is cached per curve on the instance,
    so one instance should live as long as the grid that uses it.

    Parameters:
    -----------
    precision : int, optional
        Number of chords used to approximate the curve. Default is 20.
    """

    def __init__(self, precision=DEFAULT_PRECISION):
        validate_precision(precision)
        self.precision = int(precision)
        self._luts = {}

    def get_lut(self, curve):
        """Cumulative arc length at each of the ``precision + 1`` samples."""
        lut = self._luts.get(curve)
        if lut is None:
            samples = [
                interpolate_point_on_curve_linear(idx / self.precision, curve)
                for idx in range(self.precision + 1)
            ]
            xy = np.array([[p.x, p.y] for p in samples])
            segment_lengths = np.hypot(np.diff(xy[:, 0]), np.diff(xy[:, 1]))
            lut = np.zeros(self.precision + 1)
            lut[1:] = np.cumsum(segment_lengths)
            self._luts[curve] = lut
            logger.debug("Built arc length LUT (precision=%d, length=%.6g)", self.precision, lut[-1])
        return lut

    def __call__(self, t, curve):
        t = _resolve_t(t)
        if t == 0:
            return curve.start_point
        if t == 1:
            return curve.end_point

        lut = self.get_lut(curve)
        total_length = lut[-1]
        if total_length == 0:
            return curve.start_point
        target_length = t * total_length

        idx = max(int(np.searchsorted(lut, target_length, side="left")), 1)
        previous_length = lut[idx - 1]
        segment_length = lut[idx] - previous_length
        fraction = (target_length - previous_length) / segment_length if segment_length > 0 else 0.0
        return interpolate_point_on_curve_linear((idx - 1 + fraction) / self.precision, curve)


def interpolate_point_on_curve_evenly_spaced(t, curve, precision=DEFAULT_PRECISION):
    """
    Evenly spaced point at arc length ratio ``t``.

    Builds the lookup table on every call. Keep an ``EvenlySpacedInterpolator``
    around to reuse it.
    """
    return EvenlySpacedInterpolator(precision)(t, curve)


def with_easing(interpolate, bezier_easing=IDENTITY_EASING):
    """Wrap an interpolator so ``t`` is eased before it is used."""
    easing = BezierEasing(*bezier_easing)
    if easing.is_linear:
        return interpolate

    def interpolate_eased(t, curve):
        return interpolate(easing(t), curve)

    return interpolate_eased


def linear_eased_factory(precision=DEFAULT_PRECISION, bezier_easing=IDENTITY_EASING):
    # precision is unused but keeps the factory signature uniform
    return with_easing(interpolate_point_on_curve_linear, bezier_easing)


def evenly_spaced_eased_factory(precision=DEFAULT_PRECISION, bezier_easing=IDENTITY_EASING):
    return with_easing(EvenlySpacedInterpolator(precision), bezier_easing)
