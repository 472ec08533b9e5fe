import logging

import matplotlib.pyplot as plt
from warpgrid import BoundingCurves, Curve, Point, Step, sample_curve, setup_logging, warp_grid

# Show LUT builds and cache misses
setup_logging(logging.DEBUG)

bounding_curves = BoundingCurves(
    top=Curve(Point(0, 0), Point(100, -50), Point(300, 50), Point(400, 0)),
    bottom=Curve(Point(50, 300), Point(150, 330), Point(250, 270), Point(350, 300)),
    left=Curve(Point(0, 0), Point(20, 100), Point(30, 200), Point(50, 300)),
    right=Curve(Point(400, 0), Point(380, 100), Point(370, 200), Point(350, 300)),
)

# Weighted columns, a fixed 40px column and explicit gutter steps between rows
grid = warp_grid(
    bounding_curves,
    columns=[1, 2, "40px", 1],
    rows=[1, Step(0.2, is_gutter=True), 1, Step(0.2, is_gutter=True), 1],
    gutter=("10px", 0),
    line_strategy="curves",
)

fig, ax = plt.subplots(figsize=(9, 7))
colors = plt.cm.viridis
cells = grid.get_all_cell_bounds(make_bounds_curves_sequential=True, cell_bounds_order="BTT_LTR")
for idx, cell in enumerate(cells):
    color = colors(idx / max(len(cells) - 1, 1))
    for curve in (cell.top, cell.right, cell.bottom, cell.left):
        xy = sample_curve(curve)
        ax.plot(xy[:, 0], xy[:, 1], color=color, linewidth=1.5)
    centre = cell.top.start_point + 0.5 * (cell.right.end_point - cell.top.start_point)
    ax.text(centre.x, centre.y, f"{idx}\n({cell.column}, {cell.row})", ha='center', va='center', color=color)

ax.set_aspect('equal')
ax.invert_yaxis()
ax.set_title("Cells in bottom-to-top, left-to-right order")
plt.show()
