"""Expected confusion-matrix cell counts.

A test with sensitivity ``Se`` and specificity ``Sp`` applied to a
population of ``N`` subjects with disease prevalence ``p`` produces, in
expectation::

    TP = p * Se * N
    FP = (1 - p) * (1 - Sp) * N
    TN = (1 - p) * Sp * N
    FN = p * (1 - Se) * N

The four cells partition the population, so they sum to ``N`` up to
floating-point rounding.
"""

from __future__ import annotations

from pydiagsim.confusion._common import ConfusionCounts, _check_inputs


def _cells(sens: float, spec: float, prev: float, n: int) -> ConfusionCounts:
    """Cell counts from already-validated inputs."""
    return ConfusionCounts(
        true_positives=prev * sens * n,
        false_positives=(1 - prev) * (1 - spec) * n,
        true_negatives=(1 - prev) * spec * n,
        false_negatives=prev * (1 - sens) * n,
    )


def true_positives(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Diseased subjects who test positive."""
    return confusion_counts(sensitivity, specificity, prevalence, population_size).true_positives


def false_positives(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Healthy subjects who test positive."""
    return confusion_counts(sensitivity, specificity, prevalence, population_size).false_positives


def true_negatives(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Healthy subjects who test negative."""
    return confusion_counts(sensitivity, specificity, prevalence, population_size).true_negatives


def false_negatives(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> float:
    """Diseased subjects who test negative."""
    return confusion_counts(sensitivity, specificity, prevalence, population_size).false_negatives


def confusion_counts(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> ConfusionCounts:
    """All four expected cell counts.

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
    ConfusionCounts
    """
    return _cells(*_check_inputs(sensitivity, specificity, prevalence, population_size))
