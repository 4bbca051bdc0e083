import numpy as np


def rotation_mat(angle: float, ccw: bool = True) -> np.ndarray:
    """Returns a 2D rotation matrix for `angle` (radians)."""
    c, s = np.cos(angle), np.sin(angle)
    if ccw:
        return np.array([[c, -s], [s, c]])
    return np.array([[c, s], [-s, c]])


def elementwise_pseudoinvert(v, tol: float = 1e-10) -> np.ndarray:
    """
    Elementwise pseudoinverse of the vector `v`.

    Equivalent to the pseudoinverse of the diagonal matrix diag(v): entries that
    are tiny relative to the largest magnitude (reciprocal >= 1/tol after
    normalisation) map to 0 instead of a huge value. An all-zero input is
    returned unchanged.
    """
    v = np.asarray(v, dtype=float)
    m = np.max(np.abs(v))
    if m == 0:
        return v
    v = v / m
    with np.errstate(divide="ignore"):
        reciprocal = 1.0 / v
    reciprocal[np.abs(reciprocal) >= 1 / tol] = 0.0
    return reciprocal / m


def canonical_angle(angle: float) -> float:
    """Fold an axis direction into (-pi/2, pi/2]; an axis and its opposite are the same."""
    folded = float(np.mod(angle + np.pi / 2, np.pi) - np.pi / 2)
    # mod maps pi/2 to -pi/2, keep the closed end on the right
    if folded == -np.pi / 2:
        folded = np.pi / 2
    return folded
