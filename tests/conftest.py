import pytest

from warpgrid import BoundingCurves, Curve, Point


def straight_curve(start, end):
    """Straight curve with control points at thirds, so it has uniform speed."""
    (x0, y0), (x1, y1) = start, end
    return Curve(
        Point(x0, y0),
        Point(x0 + (x1 - x0) / 3, y0 + (y1 - y0) / 3),
        Point(x0 + 2 * (x1 - x0) / 3, y0 + 2 * (y1 - y0) / 3),
        Point(x1, y1),
    )


@pytest.fixture
def square_bounds():
    """100 x 100 square patch with straight, uniformly parameterized sides."""
    return BoundingCurves(
        top=straight_curve((0, 0), (100, 0)),
        bottom=straight_curve((0, 100), (100, 100)),
        left=straight_curve((0, 0), (0, 100)),
        right=straight_curve((100, 0), (100, 100)),
    )


@pytest.fixture
def curved_bounds():
    return BoundingCurves.from_value({
        "top": {
            "startPoint": {"x": 0, "y": 0},
            "endPoint": {"x": 100, "y": 0},
            "controlPoint1": {"x": 10, "y": -10},
            "controlPoint2": {"x": 90, "y": -10},
        },
        "bottom": {
            "startPoint": {"x": 0, "y": 100},
            "endPoint": {"x": 100, "y": 100},
            "controlPoint1": {"x": -10, "y": 110},
            "controlPoint2": {"x": 110, "y": 110},
        },
        "left": {
            "startPoint": {"x": 0, "y": 0},
            "endPoint": {"x": 0, "y": 100},
            "controlPoint1": {"x": -10, "y": -10},
            "controlPoint2": {"x": -10, "y": 110},
        },
        "right": {
            "startPoint": {"x": 100, "y": 0},
            "endPoint": {"x": 100, "y": 100},
            "controlPoint1": {"x": 110, "y": -10},
            "controlPoint2": {"x": 110, "y": 110},
        },
    })


@pytest.fixture
def narrow_edge_bounds():
    """Patch whose bottom edge is half as long as its top edge."""
    return BoundingCurves(
        top=Curve(Point(0, 0), Point(10, -10), Point(90, -10), Point(100, 0)),
        bottom=Curve(Point(25, 100), Point(25, 100), Point(75, 100), Point(75, 100)),
        left=Curve(Point(0, 0), Point(-10, -10), Point(25, 100), Point(25, 100)),
        right=Curve(Point(100, 0), Point(110, -10), Point(75, 100), Point(75, 100)),
    )
