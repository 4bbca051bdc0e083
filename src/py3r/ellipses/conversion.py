from __future__ import annotations

import numpy as np

from py3r.ellipses.pform import ParametricFormEllipse
from py3r.ellipses.qform import QuadraticFormEllipse
from py3r.ellipses.util.linalg_utils import canonical_angle, elementwise_pseudoinvert


def quad2parametric(
    qform: QuadraticFormEllipse, canonicalize: bool = False
) -> ParametricFormEllipse:
    """
    Converts a quadratic form ellipse to parametric form.

    The semi-axes come from the eigenvalues of the symmetric matrix of the
    form, the major axis direction from the matching eigenvector. Eigenvectors
    are only defined up to sign, so ccw_angle may point either way along the
    major axis; pass canonicalize=True to fold it into (-pi/2, pi/2].

    Examples
    --------
    >>> from py3r.ellipses.qform import make_qform
    >>> p = quad2parametric(make_qform(0.25, 0.0, 1.0))
    >>> [round(v, 6) for v in p.semiaxis_lengths], p.center
    ([2.0, 1.0], (0.0, 0.0))
    """
    S = np.array(
        [[qform.A, qform.B / 2],
         [qform.B / 2, qform.C]]
    )
    D, V = np.linalg.eigh(S)

    semiaxis_lengths = np.sqrt(np.abs(elementwise_pseudoinvert(D)))
    p = np.argsort(-semiaxis_lengths, kind="stable")
    sorted_semiaxes = semiaxis_lengths[p]
    major_axis = V[:, p[0]]
    ccw_angle = float(np.arctan2(major_axis[1], major_axis[0]))
    if canonicalize:
        ccw_angle = canonical_angle(ccw_angle)

    return ParametricFormEllipse(
        semiaxis_lengths=(sorted_semiaxes[0], sorted_semiaxes[1]),
        center=(0.0, 0.0),
        ccw_angle=ccw_angle,
    )
