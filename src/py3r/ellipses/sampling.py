import numpy as np
import pandas as pd

from py3r.ellipses.pform import ParametricFormEllipse
from py3r.ellipses.util.linalg_utils import rotation_mat


def ellipse_to_plot_points(ellipse: ParametricFormEllipse, n: int = 1000) -> np.ndarray:
    """
    Returns an (n, 2) array of x-y points tracing the ellipse once,
    counter-clockwise. Both 0 and 2*pi are sampled, so the first and last
    points coincide and the curve closes when drawn.
    """
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    theta_plot_vals = np.linspace(0, 2 * np.pi, n)
    unit_circle = np.stack([np.cos(theta_plot_vals), np.sin(theta_plot_vals)])
    onaxis_ellipse = np.asarray(ellipse.semiaxis_lengths)[:, None] * unit_circle
    U = rotation_mat(ellipse.ccw_angle)
    rotated_ellipse = (U @ onaxis_ellipse).T
    return np.asarray(ellipse.center) + rotated_ellipse


def ellipse_to_plot_frame(ellipse: ParametricFormEllipse, n: int = 1000) -> pd.DataFrame:
    """Same points as ellipse_to_plot_points, as a DataFrame with 'x' and 'y' columns."""
    xy = ellipse_to_plot_points(ellipse, n=n)
    return pd.DataFrame({"x": xy[:, 0], "y": xy[:, 1]})
