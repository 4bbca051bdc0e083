from .qform import (
    QuadraticFormEllipse,
    evaluate_qform,
    make_qform,
)
from .pform import ParametricFormEllipse
from .fitting import (
    FitOptions,
    FitResult,
    fit_ellipse,
    fit_ellipse_result,
)
from .conversion import quad2parametric
from .sampling import (
    ellipse_to_plot_points,
    ellipse_to_plot_frame,
)
from .util.linalg_utils import (
    rotation_mat,
    elementwise_pseudoinvert,
    canonical_angle,
)

__all__ = [
    "QuadraticFormEllipse",
    "evaluate_qform",
    "make_qform",
    "ParametricFormEllipse",
    "FitOptions",
    "FitResult",
    "fit_ellipse",
    "fit_ellipse_result",
    "quad2parametric",
    "ellipse_to_plot_points",
    "ellipse_to_plot_frame",
    "rotation_mat",
    "elementwise_pseudoinvert",
    "canonical_angle",
]
