"""
Column and row layout.

Turns a column or row specification into a list of ``Step`` objects and
resolves those steps into ratios along the bounding curves. Numeric steps are
relative weights; pixel-string steps (``"20px"``) are absolute lengths, so the
same step can cover a different ratio of two opposite edges.
"""
import re
from dataclasses import dataclass
from typing import List, Mapping

import numpy as np

from warpgrid.types import Step

# Number, optionally followed by 'px'
PIXEL_STRING_REGEXP = re.compile(r"^\d+(\.\d+)?(px)?$")


def is_number(value):
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, bool)


def is_pixel_string(value):
    return isinstance(value, str) and PIXEL_STRING_REGEXP.match(value) is not None


def _pixels(value):
    return float(value[:-2] if value.endswith("px") else value)


def is_gutter_non_zero(gutter):
    if is_number(gutter):
        return gutter > 0
    return is_pixel_string(gutter) and _pixels(gutter) > 0


def _get_processed_step_value(value):
    # Plain numbers become floats and zero pixel sizes become 0. Other
    # pixel strings stay as they are and are resolved per edge later.
    if is_number(value):
        return float(value)
    if is_pixel_string(value) and _pixels(value) == 0:
        return 0.0
    return value


def _ensure_list(steps):
    if is_number(steps):
        return [1] * int(steps)
    return list(steps)


def _ensure_step(step):
    if isinstance(step, Step):
        return Step(_get_processed_step_value(step.value), bool(step.is_gutter))
    if isinstance(step, Mapping):
        is_gutter = step.get("is_gutter", step.get("isGutter", False))
        return Step(_get_processed_step_value(step["value"]), bool(is_gutter))
    return Step(_get_processed_step_value(step))


def insert_gutters(steps, gutter):
    """Insert a gutter step after every step except the last."""
    if not is_gutter_non_zero(gutter):
        return list(steps)
    gutter_value = _get_processed_step_value(gutter)
    result = []
    last_idx = len(steps) - 1
    for idx, step in enumerate(steps):
        result.append(step)
        if idx != last_idx:
            result.append(Step(gutter_value, is_gutter=True))
    return result


def process_steps(steps, gutter=0):
    """
    Normalize a column or row specification.

    Parameters:
    -----------
    steps : int or sequence
        A count of equal steps, or a sequence of numbers, pixel strings,
        ``Step`` objects or mappings with ``value`` and optional
        ``is_gutter``/``isGutter``
    gutter : float or str, optional
        Gutter inserted between steps. Default is 0 (no gutters).

    Returns:
    --------
    list of Step
    """
    return insert_gutters([_ensure_step(step) for step in _ensure_list(steps)], gutter)


def get_total_relative_value(steps):
    """Sum of the relative (numeric) step values, gutters included."""
    return sum(step.value for step in steps if not step.is_absolute)


def get_total_absolute_size(steps):
    return sum(step.pixels for step in steps if step.is_absolute)


def get_remaining_space_ratio(steps, curve_length):
    """Share of an edge left for relative steps once absolute steps are placed."""
    if curve_length == 0:
        return 1.0
    return 1 - get_total_absolute_size(steps) / curve_length


def get_step_size(step, curve_length, total_relative_value, remaining_space_ratio):
    """Ratio of an edge covered by one step."""
    if step.is_absolute:
        return step.pixels / curve_length if curve_length else 0.0
    if total_relative_value == 0:
        return 0.0
    return step.value / total_relative_value * remaining_space_ratio


def get_step_boundaries(steps, curve_length):
    """
    Ratio along an edge at the start of each step, plus 1 for the end.

    Returns:
    --------
    np.ndarray
        ``len(steps) + 1`` cumulative ratios starting at 0
    """
    total = get_total_relative_value(steps)
    remaining = get_remaining_space_ratio(steps, curve_length)
    sizes = [get_step_size(step, curve_length, total, remaining) for step in steps]
    boundaries = np.zeros(len(steps) + 1)
    boundaries[1:] = np.cumsum(sizes)
    return boundaries


def get_content_step_indices(steps):
    """
    Index of each non-gutter step within ``steps``.

    The cell at content index ``i`` is bounded by grid lines
    ``indices[i]`` and ``indices[i] + 1``. With automatically inserted
    gutters this is ``i * 2``.
    """
    return [idx for idx, step in enumerate(steps) if not step.is_gutter]


@dataclass(frozen=True)
class AxisBoundaries:
    """Step boundaries along one axis, on an edge and on its opposite edge."""
    steps: List[Step]
    edge: np.ndarray
    opposite: np.ndarray

    @property
    def count(self):
        return len(self.steps)


def get_axis_boundaries(steps, curve_length, opposite_curve_length):
    return AxisBoundaries(
        steps=list(steps),
        edge=get_step_boundaries(steps, curve_length),
        opposite=get_step_boundaries(steps, opposite_curve_length),
    )
