"""Shared result types and helpers for confusion-matrix calculations."""

from __future__ import annotations

import operator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfusionCounts:
    """Expected confusion-matrix cell counts for a population.

    Counts are real-valued: they are expectations
    (e.g. ``prevalence * sensitivity * population_size``), not tallies,
    so they need not be whole numbers.
    """

    true_positives: float
    false_positives: float
    true_negatives: float
    false_negatives: float

    @property
    def total(self) -> float:
        """Sum of the four cells (equals the population size up to rounding)."""
        return (
            self.true_positives + self.false_positives
            + self.true_negatives + self.false_negatives
        )

    def series(self) -> list[tuple[str, float]]:
        """``(label, count)`` pairs in bar-chart order: TP, FP, TN, FN."""
        return [
            ("True Positives", self.true_positives),
            ("False Positives", self.false_positives),
            ("True Negatives", self.true_negatives),
            ("False Negatives", self.false_negatives),
        ]

    def summary(self) -> str:
        """Human-readable summary."""
        lines = ["Confusion Matrix", "=" * 40]
        lines.extend(f"{label:<16}: {value:.2f}" for label, value in self.series())
        lines.append(f"{'Total':<16}: {self.total:.2f}")
        return "\n".join(lines)


@dataclass(frozen=True)
class DiagnosticMetrics:
    """All metrics derived from one set of test characteristics.

    ``ppv``, ``npv`` and ``accuracy`` are NaN when their denominators are
    zero; ``f1``, ``mcc`` and ``fdr`` are 0 in the same situation.
    ``auc_approx`` is the provisional single-point approximation and always
    equals ``balanced_accuracy``.
    """

    sensitivity: float
    specificity: float
    prevalence: float
    population_size: int
    counts: ConfusionCounts
    accuracy: float
    ppv: float
    npv: float
    f1: float
    mcc: float
    balanced_accuracy: float
    fdr: float
    auc_approx: float
    false_positive_rate: float
    false_negative_rate: float
    lr_positive: float
    lr_negative: float

    def summary(self) -> str:
        """Human-readable summary, two decimals per value."""
        lines = [
            "Testing Simulation",
            "=" * 40,
            f"Sensitivity         : {self.sensitivity:.2f}",
            f"Specificity         : {self.specificity:.2f}",
            f"Prevalence          : {self.prevalence:.2f}",
            f"Population Size     : {self.population_size}",
            "",
            f"True Positives      : {self.counts.true_positives:.2f}",
            f"False Positives     : {self.counts.false_positives:.2f}",
            f"True Negatives      : {self.counts.true_negatives:.2f}",
            f"False Negatives     : {self.counts.false_negatives:.2f}",
            "",
            f"Accuracy            : {self.accuracy:.2f}",
            f"NPV                 : {self.npv:.2f}",
            f"PPV                 : {self.ppv:.2f}",
            f"False Positive Rate : {self.false_positive_rate:.2f}",
            f"False Negative Rate : {self.false_negative_rate:.2f}",
            f"LR+                 : {self.lr_positive:.2f}",
            f"LR−                 : {self.lr_negative:.2f}",
            f"F1 Score            : {self.f1:.2f}",
            f"MCC                 : {self.mcc:.2f}",
            f"Balanced Accuracy   : {self.balanced_accuracy:.2f}",
            f"FDR                 : {self.fdr:.2f}",
            f"AUC (Approximation) : {self.auc_approx:.2f}",
        ]
        return "\n".join(lines)


@dataclass(frozen=True)
class BatchMetricsResult:
    """Metrics evaluated element-wise over broadcast arrays of inputs.

    Every array has the broadcast shape of the four inputs.
    """

    true_positives: NDArray[np.floating]
    false_positives: NDArray[np.floating]
    true_negatives: NDArray[np.floating]
    false_negatives: NDArray[np.floating]
    accuracy: NDArray[np.floating]
    ppv: NDArray[np.floating]
    npv: NDArray[np.floating]
    f1: NDArray[np.floating]
    mcc: NDArray[np.floating]
    balanced_accuracy: NDArray[np.floating]
    fdr: NDArray[np.floating]
    auc_approx: NDArray[np.floating]
    false_positive_rate: NDArray[np.floating]
    false_negative_rate: NDArray[np.floating]
    lr_positive: NDArray[np.floating]
    lr_negative: NDArray[np.floating]
    shape: tuple[int, ...]


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _check_probability(value: float, name: str) -> float:
    """Return *value* as a float, raising if it is not in [0, 1]."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a real number, got {value!r}") from None
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be in [0, 1], got {value}")
    return value


def _check_population_size(population_size: int) -> int:
    """Return *population_size* as an int, raising unless it is a whole number >= 0.

    Booleans are rejected, as are integers too large to represent as a float
    (the counts are computed in floating point).
    """
    if isinstance(population_size, (bool, np.bool_)):
        raise ValueError(
            f"population_size must be an integer, got {population_size!r}"
        )
    try:
        n = operator.index(population_size)
    except TypeError:
        raise ValueError(
            f"population_size must be an integer, got {population_size!r}"
        ) from None
    if n < 0:
        raise ValueError(f"population_size must be >= 0, got {n}")
    try:
        float(n)
    except OverflowError:
        raise ValueError("population_size is too large to represent as a float") from None
    return n


def _check_inputs(
    sensitivity: float,
    specificity: float,
    prevalence: float,
    population_size: int,
) -> tuple[float, float, float, int]:
    """Validate the four calculator inputs.

    Rules
    -----
    - *sensitivity*, *specificity*, *prevalence* must be finite and in [0, 1].
    - *population_size* must be an integer >= 0.

    Zero prevalence and zero population are accepted; the metrics that
    divide by the resulting zero cells return NaN (or 0 where guarded).

    Raises
    ------
    ValueError
        On any validation failure.
    """
    return (
        _check_probability(sensitivity, "sensitivity"),
        _check_probability(specificity, "specificity"),
        _check_probability(prevalence, "prevalence"),
        _check_population_size(population_size),
    )


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

def _divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: ``0/0`` is NaN and ``x/0`` is ±inf, never an exception."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))
