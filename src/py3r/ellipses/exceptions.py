class EllipseError(Exception):
    """Base class for errors raised by py3r.ellipses."""


class InvalidPointsError(EllipseError, ValueError):
    def __init__(self, n_points, reason):
        self.n_points = n_points
        self.reason = reason
        super().__init__(f"Cannot fit an ellipse to {n_points} point(s): {reason}")


class EllipseFitError(EllipseError):
    def __init__(self, status, message):
        self.status = status
        self.message = message
        super().__init__(f"Ellipse fit did not converge (status {status}): {message}")


class EllipseFitWarning(UserWarning):
    """The solver stopped without reporting convergence."""


class DegenerateEllipseWarning(UserWarning):
    """A degenerate quadratic form was replaced by the unit circle."""
