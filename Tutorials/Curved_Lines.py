import matplotlib.pyplot as plt
from warpgrid import BoundingCurves, Curve, Point, warp_grid
from plot_helpers import plot_grid

# Step 1: A strongly bent patch
bounding_curves = BoundingCurves(
    top=Curve(Point(0, 0), Point(80, -120), Point(220, 120), Point(300, 0)),
    bottom=Curve(Point(0, 300), Point(100, 200), Point(200, 400), Point(300, 300)),
    left=Curve(Point(0, 0), Point(-100, 100), Point(100, 200), Point(0, 300)),
    right=Curve(Point(300, 0), Point(400, 100), Point(200, 200), Point(300, 300)),
)

# Step 2: Same grid with straight and with curved lines
fig, axes = plt.subplots(1, 2, figsize=(14, 7))
for ax, line_strategy in zip(axes, ["straightLines", "curves"]):
    grid = warp_grid(bounding_curves, columns=6, rows=6, line_strategy=line_strategy)
    plot_grid(grid, ax=ax, title=line_strategy)

plt.tight_layout()
plt.show()
