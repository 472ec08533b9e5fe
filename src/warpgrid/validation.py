"""
Input validation.

Everything here runs before geometry is computed; the numerical core assumes
its inputs have passed these checks.
"""
from collections.abc import Mapping, Sequence

import numpy as np

from warpgrid.enums import CellBoundsOrder, InterpolationStrategy, LineStrategy
from warpgrid.errors import ValidationError
from warpgrid.interpolate.point_on_curve import validate_precision
from warpgrid.math_utils import round_to_5
from warpgrid.steps import is_number, is_pixel_string
from warpgrid.types import BoundingCurves, Step

_CORNERS = (
    ("top", "start_point", "left", "start_point",
     "top curve start_point and left curve start_point must have the same coordinates"),
    ("bottom", "start_point", "left", "end_point",
     "bottom curve start_point and left curve end_point must have the same coordinates"),
    ("top", "end_point", "right", "start_point",
     "top curve end_point and right curve start_point must have the same coordinates"),
    ("bottom", "end_point", "right", "end_point",
     "bottom curve end_point and right curve end_point must have the same coordinates"),
)


def get_points_are_same(point1, point2):
    # Compare at 5 decimal places so tiny rounding differences still match
    return (round_to_5(point1.x) == round_to_5(point2.x)
            and round_to_5(point1.y) == round_to_5(point2.y))


def validate_corner_points(bounding_curves):
    for curve1, end1, curve2, end2, message in _CORNERS:
        point1 = getattr(getattr(bounding_curves, curve1), end1)
        point2 = getattr(getattr(bounding_curves, curve2), end2)
        if not get_points_are_same(point1, point2):
            raise ValidationError(message)


def validate_bounding_curves(bounding_curves):
    if bounding_curves is None:
        raise ValidationError("You must supply bounding_curves")
    if not isinstance(bounding_curves, BoundingCurves):
        raise ValidationError("bounding_curves must be a BoundingCurves instance")
    validate_corner_points(bounding_curves)


def _is_step_value(value):
    return (is_number(value) and value >= 0) or is_pixel_string(value)


def validate_steps(name, steps):
    if steps is None:
        raise ValidationError(f"You must supply grid.{name} (Int or Sequence)")

    if is_number(steps):
        if int(steps) != steps or steps < 1:
            raise ValidationError(f"grid.{name} must be a positive Int, but was '{steps}'")
        return

    if isinstance(steps, str) or not isinstance(steps, Sequence):
        raise ValidationError(
            f"grid.{name} must be an Int, or a Sequence of numbers, pixel strings or steps")

    if len(steps) == 0:
        raise ValidationError(f"grid.{name} must not be empty")

    for step in steps:
        if isinstance(step, Step):
            value = step.value
        elif isinstance(step, Mapping):
            if "value" not in step:
                raise ValidationError(f"Step objects in grid.{name} must have a 'value'")
            value = step["value"]
        else:
            value = step
        if not _is_step_value(value):
            raise ValidationError(
                f"Step values in grid.{name} must be non-negative numbers or pixel strings "
                f"like '20px', but got '{value}'")


def validate_gutter(gutter):
    gutters = gutter if isinstance(gutter, (list, tuple)) else (gutter,)
    if isinstance(gutter, (list, tuple)) and len(gutter) != 2:
        raise ValidationError(f"A gutter pair must have 2 values, but got {len(gutter)}")
    for value in gutters:
        if not _is_step_value(value):
            raise ValidationError(
                f"Gutter must be a non-negative number or a pixel string, but was '{value}'")


def _validate_strategy_value(value, enum_cls, kind):
    if callable(value):
        return
    if isinstance(value, (list, tuple)):
        if len(value) != 2 or not all(callable(f) for f in value):
            raise ValidationError(f"A custom {kind} strategy must be a pair of callables (u, v)")
        return
    possible_values = [e.value for e in enum_cls]
    if value not in possible_values:
        raise ValidationError(
            f"{kind.capitalize()} strategy '{value}' is not recognised. "
            f"Must be one of {possible_values}")


def validate_interpolation_strategy(value):
    _validate_strategy_value(value, InterpolationStrategy, "interpolation")


def validate_line_strategy(value):
    # A single callable can't build lines in both directions
    if callable(value):
        raise ValidationError("A custom line strategy must be a pair of callables (u, v)")
    _validate_strategy_value(value, LineStrategy, "line")


def validate_bezier_easing(bezier_easing):
    for axis, values in bezier_easing.items():
        if len(values) != 4 or not all(is_number(v) for v in values):
            raise ValidationError(f"bezier_easing.{axis} must be 4 numbers, but was {values}")
        if not all(0 <= v <= 1 for v in values):
            raise ValidationError(f"bezier_easing.{axis} values must be between 0 and 1, but was {values}")


def validate_grid(definition):
    validate_steps("columns", definition.columns)
    validate_steps("rows", definition.rows)
    validate_gutter(definition.gutter)
    validate_interpolation_strategy(definition.interpolation_strategy)
    validate_line_strategy(definition.line_strategy)
    validate_precision(definition.precision)
    validate_bezier_easing(definition.bezier_easing)


def validate_get_point_arguments(u, v, u_opposite=None, v_opposite=None):
    for name, value in (("u", u), ("v", v), ("u_opposite", u_opposite), ("v_opposite", v_opposite)):
        if value is None and name in ("u_opposite", "v_opposite"):
            continue
        if not is_number(value) or value < 0 or value > 1:
            raise ValidationError(f"{name} value must be between 0 and 1, but was '{value}'")


def validate_get_cell_bounds_arguments(column, row, column_count, row_count):
    for name, value in (("column", column), ("row", row)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(f"{name} must be an Int, but was '{value}'")
    if column < 0 or row < 0:
        raise ValidationError(
            f"Coordinates must not be negative. You supplied column:'{column}' x row:'{row}'")
    if column >= column_count:
        raise ValidationError(
            f"Grid is '{column_count}' columns wide but coordinates are zero-based, "
            f"and you passed column:'{column}'")
    if row >= row_count:
        raise ValidationError(
            f"Grid is '{row_count}' rows high but coordinates are zero-based, "
            f"and you passed row:'{row}'")


def validate_cell_bounds_order(cell_bounds_order):
    try:
        return CellBoundsOrder(cell_bounds_order)
    except ValueError as e:
        raise ValidationError(
            f"Cell bounds order '{cell_bounds_order}' is not recognised. "
            f"Must be one of {[o.value for o in CellBoundsOrder]}") from e
