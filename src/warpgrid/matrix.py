"""
Matrices for least-squares Bezier curve fitting.

Based on Pomax's write-up on curve fitting:
https://pomax.github.io/bezierinfo/#curvefitting
"""
import numpy as np

from warpgrid.math_utils import binomial


def get_ratio_matrix(ratios):
    """
    Power matrix of the sample ratios.

    Parameters:
    -----------
    ratios : sequence of float
        Curve parameter of each sample point

    Returns:
    --------
    t_matrix, t_matrix_transposed : np.ndarray
        ``t_matrix[i][j] = ratios[j] ** i`` and its transpose
    """
    ratios = np.asarray(ratios, dtype=float)
    t_matrix = np.vstack([ratios ** i for i in range(len(ratios))])
    return t_matrix, t_matrix.T


def get_basis_matrix(number_of_points):
    """
    Bezier basis matrix in power form for a curve of the given order.

    The diagonal holds C(n-1, i); below it
    ``M[r][c] = (-1)^(r+c) * C(r, c) * M[r][r]``.
    """
    n = number_of_points
    basis = np.zeros((n, n))
    for i in range(n):
        basis[i, i] = binomial(n - 1, i)
    for c in range(n):
        for r in range(c + 1, n):
            sign = 1 if (r + c) % 2 == 0 else -1
            basis[r, c] = sign * binomial(r, c) * basis[r, r]
    return basis
