from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from py3r.ellipses.qform import QuadraticFormEllipse
from py3r.ellipses.util.linalg_utils import rotation_mat


@dataclass(frozen=True)
class ParametricFormEllipse:
    """
    Ellipse given by centre, semi-axis lengths (major first) and the
    counter-clockwise angle of the major axis from the x-axis.
    """

    semiaxis_lengths: tuple[float, float]
    center: tuple[float, float] = (0.0, 0.0)
    ccw_angle: float = 0.0

    def __post_init__(self) -> None:
        lengths = tuple(float(v) for v in self.semiaxis_lengths)
        center = tuple(float(v) for v in self.center)
        if len(lengths) != 2 or len(center) != 2:
            raise ValueError("semiaxis_lengths and center must both have two entries")
        if min(lengths) < 0:
            raise ValueError(f"semiaxis_lengths must be non-negative, got {lengths}")
        if lengths[0] < lengths[1]:
            raise ValueError(
                f"semiaxis_lengths must be sorted descending, got {lengths}"
            )
        # frozen dataclass: assign the normalised values through object
        object.__setattr__(self, "semiaxis_lengths", lengths)
        object.__setattr__(self, "center", center)
        object.__setattr__(self, "ccw_angle", float(self.ccw_angle))

    @property
    def major(self) -> float:
        return self.semiaxis_lengths[0]

    @property
    def minor(self) -> float:
        return self.semiaxis_lengths[1]

    @property
    def axis_ratio(self) -> float:
        return self.major / max(self.minor, 1e-9)

    def to_qform(self) -> QuadraticFormEllipse:
        """
        Returns the quadratic form of this ellipse.

        Only origin-centred ellipses with non-zero axes have one.
        """
        if self.center != (0.0, 0.0):
            raise ValueError(f"quadratic form needs a centre at the origin, got {self.center}")
        if self.minor == 0:
            raise ValueError("quadratic form needs non-zero semi-axes")
        U = rotation_mat(self.ccw_angle)
        S = U @ np.diag([1 / self.major**2, 1 / self.minor**2]) @ U.T
        return QuadraticFormEllipse.from_coefficients(S[0, 0], 2 * S[0, 1], S[1, 1])
