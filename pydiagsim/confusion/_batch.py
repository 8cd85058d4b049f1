"""Vectorised confusion-matrix metrics over grids of inputs.

An interactive caller recomputes every metric whenever a slider moves;
sweeping a whole slider range (or a sensitivity × prevalence grid) one
point at a time through :func:`diagnostic_metrics` is wasteful.
:func:`batch_metrics` broadcasts the four inputs with numpy and evaluates
each formula once over the full array, with the same zero-denominator
rules as the scalar functions.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pydiagsim.confusion._common import BatchMetricsResult


def _as_probability_array(value: ArrayLike, name: str) -> NDArray[np.floating]:
    arr = np.asarray(value, dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must be finite")
    if np.any((arr < 0) | (arr > 1)):
        raise ValueError(f"{name} must be in [0, 1]")
    return arr


def _as_population_array(value: ArrayLike) -> NDArray[np.floating]:
    if np.asarray(value).dtype == np.bool_:
        raise ValueError("population_size must contain integers, not booleans")
    try:
        arr = np.asarray(value, dtype=np.float64)
    except OverflowError:
        raise ValueError("population_size is too large to represent as a float") from None
    if not np.all(np.isfinite(arr)):
        raise ValueError("population_size must be finite")
    if np.any(arr != np.floor(arr)):
        raise ValueError("population_size must contain whole numbers")
    if np.any(arr < 0):
        raise ValueError("population_size must be >= 0")
    return arr


def batch_metrics(
    sensitivity: ArrayLike,
    specificity: ArrayLike,
    prevalence: ArrayLike,
    population_size: ArrayLike,
) -> BatchMetricsResult:
    """Evaluate counts and metrics element-wise over broadcast inputs.

    Parameters
    ----------
    sensitivity, specificity, prevalence : array_like
        Probabilities in [0, 1].
    population_size : array_like
        Whole numbers >= 0.

    All four must broadcast to a common shape, e.g. a column of
    sensitivities against a row of prevalences.

    Returns
    -------
    BatchMetricsResult
        Arrays of the broadcast shape.  ``ppv``, ``npv`` and ``accuracy``
        hold NaN where their denominators are zero; ``f1``, ``mcc`` and
        ``fdr`` hold 0 there; ``lr_positive`` and ``lr_negative`` hold
        ``inf`` at specificity 1 and 0 respectively.

    Raises
    ------
    ValueError
        If an input is out of range or the shapes do not broadcast.
    """
    sens = _as_probability_array(sensitivity, "sensitivity")
    spec = _as_probability_array(specificity, "specificity")
    prev = _as_probability_array(prevalence, "prevalence")
    n = _as_population_array(population_size)

    try:
        sens, spec, prev, n = np.broadcast_arrays(sens, spec, prev, n)
    except ValueError:
        raise ValueError(
            "sensitivity, specificity, prevalence and population_size "
            "must broadcast to a common shape"
        ) from None

    tp = prev * sens * n
    fp = (1 - prev) * (1 - spec) * n
    tn = (1 - prev) * spec * n
    fn = prev * (1 - sens) * n

    with np.errstate(divide="ignore", invalid="ignore"):
        acc = (tp + tn) / n
        ppv = tp / (tp + fp)
        npv = tn / (tn + fn)

        # NaN > 0 is False, so an undefined PPV falls through to 0
        f1_denom = ppv + sens
        f1 = np.where(f1_denom > 0, 2 * ppv * sens / f1_denom, 0.0)

        mcc_denom = np.sqrt((tp + fp) * (tp + fn) * (tn + fp) * (tn + fn))
        mcc = np.where(mcc_denom == 0, 0.0, (tp * tn - fp * fn) / mcc_denom)

        positives = tp + fp
        fdr = np.where(positives == 0, 0.0, fp / positives)

        lr_pos = np.where((1 - spec) > 0, sens / (1 - spec), np.inf)
        lr_neg = np.where(spec > 0, (1 - sens) / spec, np.inf)

    balanced = (sens + spec) / 2

    return BatchMetricsResult(
        true_positives=tp,
        false_positives=fp,
        true_negatives=tn,
        false_negatives=fn,
        accuracy=acc,
        ppv=ppv,
        npv=npv,
        f1=f1,
        mcc=mcc,
        balanced_accuracy=balanced,
        fdr=fdr,
        auc_approx=balanced.copy(),
        false_positive_rate=1 - spec,
        false_negative_rate=1 - sens,
        lr_positive=lr_pos,
        lr_negative=lr_neg,
        shape=tuple(tp.shape),
    )
