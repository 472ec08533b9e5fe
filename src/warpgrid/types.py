"""
Value types shared by every part of the grid engine.

All of them are frozen dataclasses, so they are hashable and can be used as
cache keys (the evenly-spaced interpolator keys its lookup tables on curves).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple, Union

import numpy as np

from warpgrid.errors import ValidationError


def _pick(mapping, *keys):
    for key in keys:
        if key in mapping:
            return mapping[key]
    raise ValidationError(f"Missing key '{keys[0]}' in {dict(mapping)!r}")


@dataclass(frozen=True)
class Point:
    """A point in the plane."""
    x: float
    y: float

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def distance_to(self, other: Point) -> float:
        return float(np.hypot(other.x - self.x, other.y - self.y))

    def to_array(self):
        return np.array([self.x, self.y], dtype=float)

    @classmethod
    def from_value(cls, value) -> Point:
        """Build a point from a Point, an (x, y) pair or a mapping with x/y."""
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            return cls(float(value["x"]), float(value["y"]))
        try:
            x, y = value
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Cannot interpret {value!r} as a point") from e
        return cls(float(x), float(y))


@dataclass(frozen=True)
class Curve:
    """A cubic Bezier curve."""
    start_point: Point
    control_point_1: Point
    control_point_2: Point
    end_point: Point

    @property
    def points(self):
        return (self.start_point, self.control_point_1, self.control_point_2, self.end_point)

    def reversed(self) -> Curve:
        return Curve(self.end_point, self.control_point_2, self.control_point_1, self.start_point)

    def to_array(self):
        """Control polygon as a (4, 2) array."""
        return np.array([[p.x, p.y] for p in self.points], dtype=float)

    @classmethod
    def from_value(cls, value) -> Curve:
        """
        Build a curve from a Curve, a sequence of four points, or a mapping.

        Mappings may use snake_case (``start_point``, ``control_point_1``, ...)
        or camelCase (``startPoint``, ``controlPoint1``, ...) keys.
        """
        if isinstance(value, Curve):
            return value
        if isinstance(value, Mapping):
            return cls(
                Point.from_value(_pick(value, "start_point", "startPoint")),
                Point.from_value(_pick(value, "control_point_1", "controlPoint1")),
                Point.from_value(_pick(value, "control_point_2", "controlPoint2")),
                Point.from_value(_pick(value, "end_point", "endPoint")),
            )
        points = list(value)
        if len(points) != 4:
            raise ValidationError(f"A cubic curve needs 4 points, got {len(points)}")
        return cls(*(Point.from_value(p) for p in points))


@dataclass(frozen=True)
class BoundingCurves:
    """The four sides of a Coons patch."""
    top: Curve
    bottom: Curve
    left: Curve
    right: Curve

    @classmethod
    def from_value(cls, value) -> BoundingCurves:
        if isinstance(value, BoundingCurves):
            return value
        if not isinstance(value, Mapping):
            raise ValidationError("bounding_curves must be a BoundingCurves or a mapping")
        return cls(**{side: Curve.from_value(_pick(value, side))
                      for side in ("top", "bottom", "left", "right")})


@dataclass(frozen=True)
class CellBounds(BoundingCurves):
    """Bounds of a single grid cell, with its zero-based content indices."""
    row: int = 0
    column: int = 0


@dataclass(frozen=True)
class Step:
    """
    One column or row unit.

    A numeric value is a relative weight. A string value such as ``"20px"``
    (or a bare ``"20"``) is an absolute size along the bounding curve.
    """
    value: Union[float, str]
    is_gutter: bool = False

    @property
    def is_absolute(self) -> bool:
        return isinstance(self.value, str)

    @property
    def pixels(self) -> float:
        return float(self.value[:-2] if self.value.endswith("px") else self.value)


@dataclass(frozen=True)
class GridModel:
    bounding_curves: BoundingCurves
    columns: Tuple[Step, ...]
    rows: Tuple[Step, ...]
