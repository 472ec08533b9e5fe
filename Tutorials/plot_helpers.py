import numpy as np
import matplotlib.pyplot as plt
from matplotlib.tri import Triangulation

from warpgrid import sample_curve


def plot_curves(curves, ax=None, color='b-', linewidth=0.5, num_points=50):
    """
    Plot cubic Bezier curves as polylines.

    Parameters:
    -----------
    curves : iterable of Curve
        Curves to draw
    ax : matplotlib.axes._axes.Axes or None
        Axes to plot on; if None, creates new figure
    color : str
        Line color/style
    linewidth : float
        Width of the lines
    num_points : int
        Samples per curve
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    for curve in curves:
        xy = sample_curve(curve, num_points)
        ax.plot(xy[:, 0], xy[:, 1], color, linewidth=linewidth)
    return ax


def plot_grid(grid, ax=None, title=None, color='b-', linewidth=0.5):
    """Plot the bounding curves and every grid line of a warped grid."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 8))
    if title:
        ax.set_title(title)

    bounds = grid.bounding_curves
    plot_curves([bounds.top, bounds.bottom, bounds.left, bounds.right], ax, 'k-', linewidth=2)

    lines = grid.get_lines()
    for sections in lines["x_axis"] + lines["y_axis"]:
        plot_curves(sections, ax, color, linewidth)

    ax.set_aspect('equal')
    # Screen coordinates, y grows downwards
    ax.invert_yaxis()
    return ax


def to_triangulation(gx, gy):
    """
    Convert structured grid arrays to a matplotlib Triangulation object.

    Parameters:
    -----------
    gx, gy : np.ndarray
        Grid coordinate arrays (shape: ni x nj), e.g. from ``Grid.to_arrays``

    Returns:
    --------
    matplotlib.tri.Triangulation
    """
    ni, nj = gx.shape
    triangles = []

    for i in range(ni - 1):
        for j in range(nj - 1):
            n0 = i * nj + j
            n1 = n0 + 1
            n2 = n0 + nj
            n3 = n2 + 1
            triangles.append([n0, n2, n1])
            triangles.append([n1, n2, n3])

    return Triangulation(gx.ravel(), gy.ravel(), np.array(triangles))
