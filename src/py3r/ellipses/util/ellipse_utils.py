import numpy as np
import pandas as pd

from py3r.ellipses.exceptions import InvalidPointsError


def ellipse_points(semiaxes, ccw_angle=0.0, n_points=100, center=0j, endpoint=False):
    """
    Generate n_points along the ellipse with semi-axes (a, b), rotated
    counter-clockwise by ccw_angle (radians) and shifted to center.
    Returns a complex array, x in the real part and y in the imaginary part.
    """
    a, b = semiaxes
    t = np.linspace(0, 2 * np.pi, n_points, endpoint=endpoint)
    x = a * np.cos(t)
    y = b * np.sin(t)
    # Rotation
    R = np.array(
        [[np.cos(ccw_angle), -np.sin(ccw_angle)], [np.sin(ccw_angle), np.cos(ccw_angle)]]
    )
    rot = R @ np.stack([x, y], axis=0)
    return complex(center) + rot[0] + 1j * rot[1]


def as_xy(points) -> np.ndarray:
    """
    Coerce points to an (n, 2) float array of x, y coordinates.

    Accepts complex sequences (real part x, imaginary part y), DataFrames with
    'x' and 'y' columns, and (n, 2) array-likes. A 1D real sequence is read as
    complex numbers with zero imaginary part.
    """
    if isinstance(points, pd.DataFrame):
        if not {"x", "y"}.issubset(points.columns):
            raise KeyError(
                f"DataFrame must have 'x' and 'y' columns, got {list(points.columns)}"
            )
        return points[["x", "y"]].to_numpy(dtype=float)
    if isinstance(points, pd.Series):
        points = points.to_numpy()

    arr = np.asarray(points)
    if arr.size == 0:
        return np.empty((0, 2), dtype=float)
    if np.iscomplexobj(arr) or arr.ndim <= 1:
        arr = arr.ravel()
        return np.column_stack([arr.real, arr.imag]).astype(float)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected points of shape (n, 2), got {arr.shape}")
    return arr.astype(float)


def check_points(xy: np.ndarray, strict: bool = False) -> None:
    """
    Raise InvalidPointsError for input no ellipse can be fitted to.

    Empty and non-finite input is always rejected. With strict=True, fewer than
    three points, or points that all lie on one line, are rejected as well.
    """
    n = len(xy)
    if n == 0:
        raise InvalidPointsError(n, "no points given")
    if not np.all(np.isfinite(xy)):
        raise InvalidPointsError(n, "coordinates must be finite")
    if not strict:
        return
    if n < 3:
        raise InvalidPointsError(n, "at least 3 points are required")
    if np.linalg.matrix_rank(xy - xy.mean(axis=0)) < 2:
        raise InvalidPointsError(n, "points are collinear")
