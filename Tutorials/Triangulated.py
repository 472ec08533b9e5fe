import matplotlib.pyplot as plt
from warpgrid import BoundingCurves, Curve, Point, warp_grid
from plot_helpers import to_triangulation

bounding_curves = BoundingCurves(
    top=Curve(Point(0, 0), Point(60, -40), Point(140, -40), Point(200, 0)),
    bottom=Curve(Point(40, 150), Point(80, 170), Point(120, 170), Point(160, 150)),
    left=Curve(Point(0, 0), Point(0, 50), Point(20, 100), Point(40, 150)),
    right=Curve(Point(200, 0), Point(200, 50), Point(180, 100), Point(160, 150)),
)

# Generate grid
grid = warp_grid(bounding_curves, columns=15, rows=10)
gx, gy = grid.to_arrays()

# Convert to triangulation
tri = to_triangulation(gx, gy)

# Plot with triplot
plt.figure(figsize=(8, 6))
plt.triplot(tri, color='blue', linewidth=0.5)
plt.gca().invert_yaxis()
plt.axis('equal')
plt.axis('off')
plt.title("Triangulated Grid (matplotlib.triplot)")
plt.show()
