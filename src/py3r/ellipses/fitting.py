from __future__ import annotations
import logging
import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from scipy.optimize import NonlinearConstraint, minimize

from py3r.ellipses.exceptions import EllipseFitError, EllipseFitWarning
from py3r.ellipses.qform import QuadraticFormEllipse
from py3r.ellipses.util.ellipse_utils import as_xy, check_points

logger = logging.getLogger(__name__)

_METHODS = ("SLSQP", "trust-constr")

# Hessian of a*c - b^2 with respect to (a, b, c)
_CONSTRAINT_HESS = np.array([[0.0, 0.0, 1.0], [0.0, -2.0, 0.0], [1.0, 0.0, 0.0]])


@dataclass(kw_only=True)
class FitOptions:
    verbose: bool = False
    max_iterations: Optional[int] = None
    initial_guess: Optional[Tuple[float, float, float]] = None
    method: str = "SLSQP"
    tol: Optional[float] = None
    strict: bool = False
    raise_on_failure: bool = False

    def __post_init__(self) -> None:
        if self.max_iterations is not None:
            if not isinstance(self.max_iterations, int) or self.max_iterations < 1:
                raise ValueError(
                    f"max_iterations must be a positive int, got {self.max_iterations!r}"
                )

        if self.initial_guess is not None:
            guess = tuple(float(v) for v in self.initial_guess)
            if len(guess) != 3:
                raise ValueError(
                    f"initial_guess must have 3 entries (a, b, c), got {len(guess)}"
                )
            self.initial_guess = guess

        if self.method not in _METHODS:
            raise ValueError(f"method must be one of {_METHODS}, got {self.method!r}")

        if self.tol is not None:
            if not isinstance(self.tol, (int, float)):
                raise TypeError(
                    f"tol must be a number (int or float), got {type(self.tol).__name__}"
                )
            if self.tol <= 0:
                raise ValueError(f"tol must be positive, got {self.tol}")
            self.tol = float(self.tol)

    def solver_options(self) -> dict:
        if self.method == "trust-constr":
            options = {"verbose": 2 if self.verbose else 0}
        else:
            options = {"disp": self.verbose}
        if self.max_iterations is not None:
            options["maxiter"] = self.max_iterations
        return options


@dataclass(frozen=True)
class FitResult:
    """Fitted ellipse together with what the solver reported."""

    ellipse: QuadraticFormEllipse
    coefficients: Tuple[float, float, float]
    success: bool
    status: int
    message: str
    n_iterations: Optional[int]
    objective: float


def _design_matrix(xy: np.ndarray) -> np.ndarray:
    x, y = xy[:, 0], xy[:, 1]
    return np.column_stack([x**2, 2 * x * y, y**2])


def _rms_radius(xy: np.ndarray) -> float:
    s = float(np.sqrt(np.mean(np.sum(xy**2, axis=1))))
    return s if s > 0 else 1.0


def _starting_point(M: np.ndarray, ones: np.ndarray) -> np.ndarray:
    """Unconstrained least-squares solution if it is an ellipse, else the unit circle."""
    p, *_ = np.linalg.lstsq(M, ones, rcond=None)
    if np.all(np.isfinite(p)) and p[0] * p[2] - p[1] ** 2 > 0:
        return p
    return np.array([1.0, 0.0, 1.0])


def fit_ellipse_result(points, options: FitOptions | None = None) -> FitResult:
    """
    Fits an origin-centred ellipse to `points` and reports the solver outcome.

    Solves
        min_{a,b,c} sum_i (a*x_i^2 + 2*b*x_i*y_i + c*y_i^2 - 1)^2
        s.t. a*c - b^2 >= 0
    and returns the quadratic form (A, B, C) = (a, 2b, c). The solution is used
    even when the solver does not report convergence; an EllipseFitWarning is
    emitted in that case unless options.raise_on_failure is set.

    The problem is solved on points divided by their RMS radius, so the solver
    works at unit scale whatever the size of the ellipse; coefficients are
    scaled back before they are returned. options.initial_guess is given in
    the original coordinates. Without one, the solver starts from the
    unconstrained least-squares solution when that is an ellipse, otherwise
    from the circle through the RMS radius.

    Points may be complex numbers, an (n, 2) array or a DataFrame with 'x' and
    'y' columns.
    """
    options = options or FitOptions()
    xy = as_xy(points)
    check_points(xy, strict=options.strict)

    scale = _rms_radius(xy)
    M = _design_matrix(xy / scale)
    ones = np.ones(len(xy))
    if options.initial_guess is not None:
        x0 = np.array(options.initial_guess) * scale**2
    else:
        x0 = _starting_point(M, ones)

    def objective(p):
        r = M @ p - ones
        return float(r @ r)

    def objective_jac(p):
        return 2 * M.T @ (M @ p - ones)

    def constraint(p):
        return p[0] * p[2] - p[1] ** 2

    def constraint_jac(p):
        return np.array([p[2], -2 * p[1], p[0]])

    if options.method == "trust-constr":
        H = 2 * M.T @ M
        res = minimize(
            objective,
            x0,
            jac=objective_jac,
            hess=lambda p: H,
            method="trust-constr",
            constraints=[
                NonlinearConstraint(
                    constraint,
                    0.0,
                    np.inf,
                    jac=lambda p: constraint_jac(p)[None, :],
                    hess=lambda p, v: v[0] * _CONSTRAINT_HESS,
                )
            ],
            tol=options.tol,
            options=options.solver_options(),
        )
    else:
        res = minimize(
            objective,
            x0,
            jac=objective_jac,
            method="SLSQP",
            constraints=[{"type": "ineq", "fun": constraint, "jac": constraint_jac}],
            tol=options.tol,
            options=options.solver_options(),
        )

    a, b, c = (float(v) / scale**2 for v in res.x)
    logger.debug(
        "%s fit on %d points (scale %g): success=%s status=%s nit=%s (a, b, c)=%s",
        options.method, len(xy), scale, res.success, res.status,
        getattr(res, "nit", None), (a, b, c),
    )
    if not res.success:
        if options.raise_on_failure:
            raise EllipseFitError(res.status, res.message)
        warnings.warn(
            f"ellipse fit did not converge (status {res.status}): {res.message}",
            EllipseFitWarning,
            stacklevel=2,
        )

    return FitResult(
        ellipse=QuadraticFormEllipse.from_coefficients(a, 2 * b, c),
        coefficients=(a, b, c),
        success=bool(res.success),
        status=int(res.status),
        message=str(res.message),
        n_iterations=getattr(res, "nit", None),
        objective=float(res.fun),
    )


def fit_ellipse(points, options: FitOptions | None = None) -> QuadraticFormEllipse:
    """
    Fits an ellipse centred at the origin to `points`.

    Examples
    --------
    >>> import numpy as np
    >>> from py3r.ellipses.util.ellipse_utils import ellipse_points
    >>> q = fit_ellipse(ellipse_points((2.0, 1.0), n_points=100))
    >>> bool(np.allclose(q.params, (0.25, 0.0, 1.0), atol=1e-2))
    True
    """
    return fit_ellipse_result(points, options).ellipse
