"""
PyDiagSim: diagnostic-test performance statistics for Python.

Derives the confusion matrix of a screening test applied to a population
from its sensitivity, specificity and the disease prevalence, together with
the usual derived metrics (PPV, NPV, F1, MCC, balanced accuracy, FDR, AUC).
Presentation layers (sliders, charts, explanation panels) call into this
package; nothing here renders anything.

Usage:
    from pydiagsim import confusion
"""

__version__ = "0.1.0"

from pydiagsim import confusion

__all__ = [
    "__version__",
    "confusion",
]
