"""Titles, formulas and plain-language explanations for each metric.

Display layers show a metric as ``"<title>: <value>"`` with an expandable
explanation underneath; the text lives here so every caller words it the
same way.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MetricDescription:
    """Display text for one metric."""

    title: str
    formula: str
    explanation: str

    def format(self, value: float) -> str:
        """``"<title>: <value>"`` with two decimals."""
        return f"{self.title}: {value:.2f}"


METRIC_DESCRIPTIONS: dict[str, MetricDescription] = {
    "accuracy": MetricDescription(
        title="Accuracy",
        formula="Accuracy = (TP + TN) / Population Size",
        explanation=(
            "Share of all tested subjects whose result is correct. "
            "Dominated by the larger class when prevalence is far from 0.5."
        ),
    ),
    "npv": MetricDescription(
        title="NPV (Negative Predictive Value)",
        formula="NPV = TN / (TN + FN)",
        explanation=(
            "Probability that a subject who tests negative is truly free of "
            "the disease. A high NPV means a negative result can be trusted "
            "to rule the disease out."
        ),
    ),
    "ppv": MetricDescription(
        title="PPV (Positive Predictive Value)",
        formula="PPV = TP / (TP + FP)",
        explanation=(
            "Probability that a subject who tests positive actually has the "
            "disease. A high PPV means a positive result reliably indicates "
            "disease; it falls sharply as prevalence drops."
        ),
    ),
    "sensitivity": MetricDescription(
        title="True Positive Rate (Sensitivity)",
        formula="Sensitivity = TP / (TP + FN)",
        explanation=(
            "The test's ability to detect the disease in those who have it."
        ),
    ),
    "specificity": MetricDescription(
        title="True Negative Rate (Specificity)",
        formula="Specificity = TN / (TN + FP)",
        explanation=(
            "The test's ability to clear those who do not have the disease."
        ),
    ),
    "false_positive_rate": MetricDescription(
        title="False Positive Rate",
        formula="False Positive Rate = 1 - Specificity",
        explanation=(
            "Proportion of healthy subjects who are wrongly flagged positive."
        ),
    ),
    "false_negative_rate": MetricDescription(
        title="False Negative Rate",
        formula="False Negative Rate = 1 - Sensitivity",
        explanation=(
            "Proportion of diseased subjects the test misses."
        ),
    ),
    "lr_positive": MetricDescription(
        title="Positive Likelihood Ratio (LR+)",
        formula="LR+ = Sensitivity / (1 - Specificity)",
        explanation=(
            "How many times more likely a positive result is in a diseased "
            "subject than in a healthy one. Values well above 1 make a "
            "positive result useful for ruling the disease in; infinite at "
            "perfect specificity."
        ),
    ),
    "lr_negative": MetricDescription(
        title="Negative Likelihood Ratio (LR−)",
        formula="LR− = (1 - Sensitivity) / Specificity",
        explanation=(
            "How likely a negative result is in a diseased subject relative "
            "to a healthy one. Values close to 0 make a negative result "
            "useful for ruling the disease out; infinite at zero specificity."
        ),
    ),
    "f1": MetricDescription(
        title="F1 Score",
        formula="F1 = 2 * (Precision * Recall) / (Precision + Recall)",
        explanation=(
            "Harmonic mean of precision (PPV) and recall (sensitivity); "
            "high only when both are high."
        ),
    ),
    "mcc": MetricDescription(
        title="Matthews Correlation Coefficient (MCC)",
        formula=(
            "MCC = (TP * TN - FP * FN) / "
            "sqrt((TP + FP) * (TP + FN) * (TN + FP) * (TN + FN))"
        ),
        explanation=(
            "Correlation between test result and true status using all four "
            "cells. Ranges from -1 (total disagreement) through 0 (no better "
            "than chance) to 1 (perfect prediction)."
        ),
    ),
    "balanced_accuracy": MetricDescription(
        title="Balanced Accuracy",
        formula="Balanced Accuracy = (Sensitivity + Specificity) / 2",
        explanation=(
            "Average of sensitivity and specificity; unaffected by prevalence, "
            "so it stays informative on imbalanced populations."
        ),
    ),
    "fdr": MetricDescription(
        title="False Discovery Rate (FDR)",
        formula="FDR = FP / (TP + FP)",
        explanation=(
            "Proportion of positive results that are false alarms; 1 - PPV "
            "whenever anyone tests positive."
        ),
    ),
    "auc_approx": MetricDescription(
        title="AUC (Approximation)",
        formula="AUC ≈ (Sensitivity + Specificity) / 2",
        explanation=(
            "Area under the ROC curve, i.e. the test's ability to separate "
            "cases from non-cases across thresholds. Only one operating point "
            "is known here, so this is a simplified approximation."
        ),
    ),
}


def describe(name: str) -> MetricDescription:
    """Look up the display text for a metric.

    Parameters
    ----------
    name : str
        Key of :data:`METRIC_DESCRIPTIONS`, e.g. ``'ppv'`` or ``'mcc'``.

    Raises
    ------
    ValueError
        If *name* is not a known metric.
    """
    try:
        return METRIC_DESCRIPTIONS[name]
    except KeyError:
        known = ", ".join(sorted(METRIC_DESCRIPTIONS))
        raise ValueError(f"unknown metric {name!r}; expected one of: {known}") from None
