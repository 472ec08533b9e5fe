from warpgrid.interpolate.lines import (
    LineSpan,
    interpolate_curve_u,
    interpolate_curve_v,
    interpolate_straight_line_u,
    interpolate_straight_line_v,
)
from warpgrid.interpolate.point_on_curve import (
    EvenlySpacedInterpolator,
    evenly_spaced_eased_factory,
    interpolate_point_on_curve_evenly_spaced,
    interpolate_point_on_curve_linear,
    linear_eased_factory,
)
from warpgrid.interpolate.surface import get_point_on_surface
