import matplotlib.pyplot as plt
from warpgrid import BoundingCurves, Curve, Point, warp_grid
from plot_helpers import plot_grid

# Step 1: Square patch, so the only distortion comes from easing
bounding_curves = BoundingCurves(
    top=Curve(Point(0, 0), Point(100, 0), Point(200, 0), Point(300, 0)),
    bottom=Curve(Point(0, 300), Point(100, 300), Point(200, 300), Point(300, 300)),
    left=Curve(Point(0, 0), Point(0, 100), Point(0, 200), Point(0, 300)),
    right=Curve(Point(300, 0), Point(300, 100), Point(300, 200), Point(300, 300)),
)

# Step 2: Compare easings on the x axis
easings = {
    "linear": (0, 0, 1, 1),
    "ease-in-out": (0.42, 0, 0.58, 1),
    "ease-out": (0, 0, 0.58, 1),
}

fig, axes = plt.subplots(1, len(easings), figsize=(15, 5))
for ax, (name, easing) in zip(axes, easings.items()):
    grid = warp_grid(bounding_curves, columns=12, rows=4, bezier_easing={"xAxis": easing})
    plot_grid(grid, ax=ax, title=name)

plt.tight_layout()
plt.show()
