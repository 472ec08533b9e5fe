import matplotlib.pyplot as plt
from warpgrid import warp_grid
from plot_helpers import plot_grid

# Step 1: Bounding curves (corners must meet)
bounding_curves = {
    "top": {"startPoint": {"x": 0, "y": 0}, "controlPoint1": {"x": 60, "y": -40},
            "controlPoint2": {"x": 140, "y": 40}, "endPoint": {"x": 200, "y": 0}},
    "bottom": {"startPoint": {"x": 0, "y": 200}, "controlPoint1": {"x": 60, "y": 240},
               "controlPoint2": {"x": 140, "y": 160}, "endPoint": {"x": 200, "y": 200}},
    "left": {"startPoint": {"x": 0, "y": 0}, "controlPoint1": {"x": -30, "y": 60},
             "controlPoint2": {"x": 30, "y": 140}, "endPoint": {"x": 0, "y": 200}},
    "right": {"startPoint": {"x": 200, "y": 0}, "controlPoint1": {"x": 230, "y": 60},
              "controlPoint2": {"x": 170, "y": 140}, "endPoint": {"x": 200, "y": 200}},
}

# Step 2: Create Grid
grid = warp_grid(bounding_curves, columns=8, rows=8)

# Step 3: Query a point
print(grid.get_point(0.5, 0.5))

# Step 4: Plot Grid
plot_grid(grid, title="Simple Grid")
plt.show()
