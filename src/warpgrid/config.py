"""
Grid definition and defaults
============================
Holds the user-facing grid definition together with the defaults applied to
every grid. ``GridDefinition.from_value`` accepts the keyword names used by
this package as well as their camelCase forms (``interpolationStrategy``,
``lineStrategy``, ``bezierEasing``), so definitions can be loaded straight
from JSON.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from warpgrid.errors import ValidationError

# Global Constants
DEFAULT_PRECISION: int = 20
DEFAULT_BEZIER_EASING = (0.0, 0.0, 1.0, 1.0)
DEFAULT_INTERPOLATION_STRATEGY: str = "even"
DEFAULT_LINE_STRATEGY: str = "straightLines"

# Curve parameters of the two interior samples used when fitting curved lines
T_MIDPOINT_1: float = 0.25
T_MIDPOINT_2: float = 0.75

_ALIASES = {
    "interpolationStrategy": "interpolation_strategy",
    "lineStrategy": "line_strategy",
    "bezierEasing": "bezier_easing",
}

_EASING_ALIASES = {"xAxis": "u", "yAxis": "v", "x_axis": "u", "y_axis": "v"}


def _default_bezier_easing():
    return {"u": DEFAULT_BEZIER_EASING, "v": DEFAULT_BEZIER_EASING}


@dataclass
class GridDefinition:
    """
    Shape and behaviour of a grid.

    Attributes:
        columns: Int count, or a sequence of weights, pixel strings or steps.
        rows: As columns.
        gutter: Number, pixel string, or a (columns, rows) pair. 0 disables gutters.
        interpolation_strategy: "even", "linear", a factory, or a (u, v) pair of factories.
        line_strategy: "straightLines", "curves", or a (u, v) pair of line constructors.
        precision: Arc length LUT resolution for the "even" strategy.
        bezier_easing: Mapping with "u" and "v" easing control values.
    """
    columns: Any
    rows: Any
    gutter: Any = 0
    interpolation_strategy: Any = DEFAULT_INTERPOLATION_STRATEGY
    line_strategy: Any = DEFAULT_LINE_STRATEGY
    precision: Any = DEFAULT_PRECISION
    bezier_easing: Optional[Mapping] = field(default_factory=_default_bezier_easing)

    def __post_init__(self):
        easing = _default_bezier_easing()
        for key, value in dict(self.bezier_easing or {}).items():
            resolved = _EASING_ALIASES.get(key, key)
            if resolved not in easing:
                raise ValidationError(f"Unknown bezier_easing axis '{key}'. Must be one of 'u', 'v'")
            try:
                easing[resolved] = tuple(value)
            except TypeError as e:
                raise ValidationError(f"bezier_easing.{resolved} must be a sequence of 4 numbers") from e
        self.bezier_easing = easing

    @property
    def gutters(self):
        """Gutter as a (columns, rows) pair."""
        if isinstance(self.gutter, (list, tuple)):
            return tuple(self.gutter)
        return self.gutter, self.gutter

    @classmethod
    def from_value(cls, value) -> GridDefinition:
        if isinstance(value, GridDefinition):
            return value
        if not isinstance(value, Mapping):
            raise ValidationError("Grid definition must be a GridDefinition or a mapping")
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, item in value.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ValidationError(f"Unknown grid definition key '{key}'")
            kwargs[name] = item
        for required in ("columns", "rows"):
            if required not in kwargs:
                raise ValidationError(f"You must supply grid.{required} (Int or Sequence)")
        return cls(**kwargs)
