from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass

import numpy as np

from py3r.ellipses.exceptions import DegenerateEllipseWarning

logger = logging.getLogger(__name__)


def evaluate_qform(A, B, C, x, y):
    """Evaluates A*x^2 + B*x*y + C*y^2, elementwise for array input."""
    return A * x**2 + B * x * y + C * y**2


def _axis_length(denominator: float) -> float:
    # 1/denominator is the squared semi-axis; clamp invalid values to 0
    if denominator <= 0:
        return 0.0
    return float(np.sqrt(1.0 / denominator))


def _canonical(A: float, B: float, C: float) -> tuple[float, float, float]:
    theta = float(np.arctan2(B, A - C) / 2)
    # B / sin(2*theta), written so that sin(2*theta) == 0 needs no division
    rr = float(np.hypot(B, A - C))
    a = _axis_length((A + C + rr) / 2.0)
    b = _axis_length((A + C - rr) / 2.0)
    return a, b, theta


@dataclass(frozen=True)
class QuadraticFormEllipse:
    """
    Ellipse A*x^2 + B*x*y + C*y^2 = 1, always centred at the origin.

    semi_axis_a is the semi-axis along rotation_angle, semi_axis_b the
    perpendicular one. Build instances with `from_coefficients`, which derives
    the canonical parameters. A form whose semi-axes both come out as 0 is
    replaced by the unit circle and flagged with is_fallback=True.
    """

    A: float
    B: float
    C: float
    semi_axis_a: float
    semi_axis_b: float
    rotation_angle: float
    is_fallback: bool = False

    @classmethod
    def from_coefficients(cls, A, B, C) -> "QuadraticFormEllipse":
        A, B, C = float(A), float(B), float(C)
        if not np.all(np.isfinite([A, B, C])):
            raise ValueError(f"coefficients must be finite, got {(A, B, C)}")

        a, b, theta = _canonical(A, B, C)
        fallback = a == 0 and b == 0
        if fallback:
            logger.debug("degenerate form %s replaced by the unit circle", (A, B, C))
            warnings.warn(
                f"degenerate quadratic form {(A, B, C)} replaced by the unit circle",
                DegenerateEllipseWarning,
                stacklevel=2,
            )
            A, B, C = 1.0, 0.0, 1.0
            a, b, theta = _canonical(A, B, C)
        return cls(A, B, C, a, b, theta, fallback)

    @property
    def params(self) -> tuple[float, float, float]:
        return (self.A, self.B, self.C)

    @property
    def canon(self) -> tuple[float, float, float]:
        return (self.semi_axis_a, self.semi_axis_b, self.rotation_angle)

    def evaluate(self, x, y):
        return evaluate_qform(self.A, self.B, self.C, x, y)


def make_qform(A, B, C) -> QuadraticFormEllipse:
    return QuadraticFormEllipse.from_coefficients(A, B, C)
