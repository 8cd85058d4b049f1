"""Metrics derived from the expected confusion matrix.

Zero denominators are handled two ways:

- ``accuracy``, ``ppv`` and ``npv`` divide unguarded, so ``0/0`` gives NaN
  (IEEE-754), e.g. PPV at zero prevalence and perfect specificity, or
  accuracy in an empty population.
- ``f1_score``, ``mcc`` and ``fdr`` return exactly 0 when their
  denominator vanishes.
"""

from __future__ import annotations

import math

from pydiagsim.confusion._auc import auc_approx
from pydiagsim.confusion._common import (
    ConfusionCounts,
    DiagnosticMetrics,
    _check_inputs,
    _check_probability,
    _divide,
)
from pydiagsim.confusion._counts import _cells


# ---------------------------------------------------------------------------
# Formulas on validated inputs
# ---------------------------------------------------------------------------

def _accuracy(c: ConfusionCounts, n: int) -> float:
    return _divide(c.true_positives + c.true_negatives, n)


def _ppv(c: ConfusionCounts) -> float:
    return _divide(c.true_positives, c.true_positives + c.false_positives)


def _npv(c: ConfusionCounts) -> float:
    return _divide(c.true_negatives, c.true_negatives + c.false_negatives)


def _f1(precision: float, recall: float) -> float:
    # NaN > 0 is False, so an undefined PPV falls through to 0
    if not precision + recall > 0:
        return 0.0
    return 2 * (precision * recall) / (precision + recall)


def _mcc(c: ConfusionCounts) -> float:
    tp, fp = c.true_positives, c.false_positives
    tn, fn = c.true_negatives, c.false_negatives
    numerator = tp * tn - fp * fn
    denominator = math.sqrt((tp + fp) * (tp + fn) * (tn + fp) * (tn + fn))
    if denominator == 0:
        return 0.0
    return numerator / denominator


def _fdr(c: ConfusionCounts) -> float:
    positives = c.true_positives + c.false_positives
    if positives == 0:
        return 0.0
    return c.false_positives / positives


def _lr_positive(sens: float, spec: float) -> float:
    if (1 - spec) > 0:
        return sens / (1 - spec)
    return float("inf")


def _lr_negative(sens: float, spec: float) -> float:
    if spec > 0:
        return (1 - sens) / spec
    return float("inf")


# ---------------------------------------------------------------------------
# Unguarded ratios
# ---------------------------------------------------------------------------

def accuracy(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """(TP + TN) / N.  NaN when ``population_size == 0``."""
    sens, spec, prev, n = _check_inputs(sensitivity, specificity, prevalence, population_size)
    return _accuracy(_cells(sens, spec, prev, n), n)


def ppv(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Positive predictive value, TP / (TP + FP).

    NaN when nobody tests positive (TP + FP = 0).
    """
    return _ppv(_cells(*_check_inputs(sensitivity, specificity, prevalence, population_size)))


def npv(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Negative predictive value, TN / (TN + FN).

    NaN when nobody tests negative (TN + FN = 0).
    """
    return _npv(_cells(*_check_inputs(sensitivity, specificity, prevalence, population_size)))


# ---------------------------------------------------------------------------
# Guarded metrics
# ---------------------------------------------------------------------------

def f1_score(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Harmonic mean of precision (PPV) and recall (sensitivity).

    Returns 0 unless ``ppv + sensitivity > 0``; an undefined (NaN) PPV
    therefore also yields 0.
    """
    sens, spec, prev, n = _check_inputs(sensitivity, specificity, prevalence, population_size)
    return _f1(_ppv(_cells(sens, spec, prev, n)), sens)


def mcc(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Matthews correlation coefficient.

    ``(TP*TN - FP*FN) / sqrt((TP+FP)(TP+FN)(TN+FP)(TN+FN))``, or 0 when
    any marginal is empty.
    """
    return _mcc(_cells(*_check_inputs(sensitivity, specificity, prevalence, population_size)))


def fdr(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """False discovery rate, FP / (TP + FP); 0 when nobody tests positive."""
    return _fdr(_cells(*_check_inputs(sensitivity, specificity, prevalence, population_size)))


# ---------------------------------------------------------------------------
# Rates (no confusion matrix needed)
# ---------------------------------------------------------------------------

def balanced_accuracy(sensitivity: float, specificity: float) -> float:
    """Mean of sensitivity and specificity."""
    sens = _check_probability(sensitivity, "sensitivity")
    spec = _check_probability(specificity, "specificity")
    return (sens + spec) / 2


def false_positive_rate(specificity: float) -> float:
    """1 - specificity."""
    return 1 - _check_probability(specificity, "specificity")


def false_negative_rate(sensitivity: float) -> float:
    """1 - sensitivity."""
    return 1 - _check_probability(sensitivity, "sensitivity")


def lr_positive(sensitivity: float, specificity: float) -> float:
    """Positive likelihood ratio, sensitivity / (1 - specificity).

    ``inf`` at perfect specificity.
    """
    return _lr_positive(
        _check_probability(sensitivity, "sensitivity"),
        _check_probability(specificity, "specificity"),
    )


def lr_negative(sensitivity: float, specificity: float) -> float:
    """Negative likelihood ratio, (1 - sensitivity) / specificity.

    ``inf`` at zero specificity.
    """
    return _lr_negative(
        _check_probability(sensitivity, "sensitivity"),
        _check_probability(specificity, "specificity"),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def diagnostic_metrics(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> DiagnosticMetrics:
    """Evaluate every metric for one set of test characteristics.

    The inputs are validated and the confusion matrix is built once; every
    metric is derived from those cells.

    Parameters
    ----------
    sensitivity : float
        True positive rate, in [0, 1].
    specificity : float
        True negative rate, in [0, 1].
    prevalence : float
        Proportion of the population with the disease, in [0, 1].
    population_size : int
        Number of subjects tested, >= 0.

    Returns
    -------
    DiagnosticMetrics

    Raises
    ------
    ValueError
        If any input is outside its range.

    Examples
    --------
    >>> m = diagnostic_metrics(0.9, 0.9, 0.1, 1000)
    >>> round(m.ppv, 2), round(m.accuracy, 2)
    (0.5, 0.9)
    """
    sens, spec, prev, n = _check_inputs(
        sensitivity, specificity, prevalence, population_size,
    )
    counts = _cells(sens, spec, prev, n)
    precision = _ppv(counts)
    balanced = (sens + spec) / 2

    return DiagnosticMetrics(
        sensitivity=sens,
        specificity=spec,
        prevalence=prev,
        population_size=n,
        counts=counts,
        accuracy=_accuracy(counts, n),
        ppv=precision,
        npv=_npv(counts),
        f1=_f1(precision, sens),
        mcc=_mcc(counts),
        balanced_accuracy=balanced,
        fdr=_fdr(counts),
        auc_approx=auc_approx(sens, spec),
        false_positive_rate=1 - spec,
        false_negative_rate=1 - sens,
        lr_positive=_lr_positive(sens, spec),
        lr_negative=_lr_negative(sens, spec),
    )
