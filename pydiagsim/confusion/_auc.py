"""AUC from a single operating point.

Only one (sensitivity, specificity) pair is known, so the ROC curve has to
be assumed rather than traced.

- :func:`auc_approx` is the placeholder used by the display: the mean of
  sensitivity and specificity, i.e. the area under the two-segment ROC
  curve through (0, 0), (1 - Sp, Se) and (1, 1).  It is identical to
  balanced accuracy.
- :func:`auc_binormal` assumes the equal-variance binormal model, solves
  for the separation ``d' = Φ⁻¹(Se) + Φ⁻¹(Sp)`` and returns
  ``AUC = Φ(d' / √2)``.
"""

from __future__ import annotations

import math

from scipy.stats import norm

from pydiagsim.confusion._common import _check_probability


def auc_approx(sensitivity: float, specificity: float) -> float:
    """Single-point AUC approximation, ``(sensitivity + specificity) / 2``."""
    sens = _check_probability(sensitivity, "sensitivity")
    spec = _check_probability(specificity, "specificity")
    return (sens + spec) / 2


def auc_binormal(sensitivity: float, specificity: float) -> float:
    """Equal-variance binormal AUC through one operating point.

    Parameters
    ----------
    sensitivity, specificity : float
        Operating point, each in [0, 1].

    Returns
    -------
    float
        ``Φ((Φ⁻¹(Se) + Φ⁻¹(Sp)) / √2)``.  Points at the (0, 0) or (1, 1)
        corners of ROC space carry no information about separation and
        return 0.5.

    Examples
    --------
    >>> round(auc_binormal(0.5, 0.5), 4)
    0.5
    """
    sens = _check_probability(sensitivity, "sensitivity")
    spec = _check_probability(specificity, "specificity")

    d_prime = float(norm.ppf(sens)) + float(norm.ppf(spec))
    if math.isnan(d_prime):
        # inf - inf: Se and Sp at opposite extremes
        return 0.5
    return float(norm.cdf(d_prime / math.sqrt(2)))
