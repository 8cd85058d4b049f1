"""
Confusion-matrix arithmetic for a diagnostic test at a given prevalence.

Expected cell counts (TP, FP, TN, FN) for a population, predictive values,
F1, Matthews correlation, balanced accuracy, false discovery rate, AUC
approximations, and vectorised evaluation over grids of inputs.
"""

from pydiagsim.confusion._common import (
    ConfusionCounts,
    DiagnosticMetrics,
    BatchMetricsResult,
)
from pydiagsim.confusion._counts import (
    true_positives,
    false_positives,
    true_negatives,
    false_negatives,
    confusion_counts,
)
from pydiagsim.confusion._metrics import (
    accuracy,
    ppv,
    npv,
    f1_score,
    mcc,
    balanced_accuracy,
    fdr,
    false_positive_rate,
    false_negative_rate,
    lr_positive,
    lr_negative,
    diagnostic_metrics,
)
from pydiagsim.confusion._auc import auc_approx, auc_binormal
from pydiagsim.confusion._batch import batch_metrics
from pydiagsim.confusion._describe import (
    MetricDescription,
    METRIC_DESCRIPTIONS,
    describe,
)

__all__ = [
    "ConfusionCounts",
    "DiagnosticMetrics",
    "BatchMetricsResult",
    "MetricDescription",
    "METRIC_DESCRIPTIONS",
    "true_positives",
    "false_positives",
    "true_negatives",
    "false_negatives",
    "confusion_counts",
    "accuracy",
    "ppv",
    "npv",
    "f1_score",
    "mcc",
    "balanced_accuracy",
    "fdr",
    "false_positive_rate",
    "false_negative_rate",
    "lr_positive",
    "lr_negative",
    "auc_approx",
    "auc_binormal",
    "diagnostic_metrics",
    "batch_metrics",
    "describe",
]
