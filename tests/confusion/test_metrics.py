"""Tests for metrics derived from the confusion matrix."""

import math

import numpy as np
import pytest

from pydiagsim.confusion import (
    DiagnosticMetrics,
    accuracy,
    ppv,
    npv,
    f1_score,
    mcc,
    balanced_accuracy,
    fdr,
    auc_approx,
    false_positive_rate,
    false_negative_rate,
    lr_positive,
    lr_negative,
    diagnostic_metrics,
)


# ---------------------------------------------------------------------------
# Worked examples
# ---------------------------------------------------------------------------

class TestScreeningExample:
    """Se = Sp = 0.9, prevalence 10%, 1000 subjects."""

    ARGS = (0.9, 0.9, 0.1, 1000)

    def test_accuracy(self):
        assert accuracy(*self.ARGS) == pytest.approx(0.90)

    def test_ppv(self):
        """Half the positives are false alarms at 10% prevalence."""
        assert ppv(*self.ARGS) == pytest.approx(0.50)

    def test_npv(self):
        assert npv(*self.ARGS) == pytest.approx(810 / 820)
        assert npv(*self.ARGS) == pytest.approx(0.9878, abs=1e-4)

    def test_f1(self):
        expected = 2 * 0.5 * 0.9 / (0.5 + 0.9)
        assert f1_score(*self.ARGS) == pytest.approx(expected)

    def test_mcc(self):
        tp, fp, tn, fn = 90, 90, 810, 10
        expected = (tp * tn - fp * fn) / math.sqrt(
            (tp + fp) * (tp + fn) * (tn + fp) * (tn + fn)
        )
        assert mcc(*self.ARGS) == pytest.approx(expected)

    def test_fdr_is_one_minus_ppv(self):
        assert fdr(*self.ARGS) == pytest.approx(1 - ppv(*self.ARGS))

    def test_rates(self):
        assert false_positive_rate(0.9) == pytest.approx(0.1)
        assert false_negative_rate(0.9) == pytest.approx(0.1)

    def test_likelihood_ratios(self):
        assert lr_positive(0.9, 0.9) == pytest.approx(9.0)
        assert lr_negative(0.9, 0.9) == pytest.approx(1 / 9)


class TestPerfectTest:
    """Se = Sp = 1 at prevalence 0.5."""

    ARGS = (1.0, 1.0, 0.5, 100)

    def test_no_errors(self):
        m = diagnostic_metrics(*self.ARGS)
        assert m.counts.false_positives == 0
        assert m.counts.false_negatives == 0

    def test_predictive_values(self):
        assert ppv(*self.ARGS) == 1.0
        assert npv(*self.ARGS) == 1.0

    def test_mcc_one(self):
        assert mcc(*self.ARGS) == pytest.approx(1.0)

    def test_f1_one(self):
        assert f1_score(*self.ARGS) == pytest.approx(1.0)

    def test_lr_positive_infinite(self):
        assert lr_positive(1.0, 1.0) == float("inf")


# ---------------------------------------------------------------------------
# Zero denominators
# ---------------------------------------------------------------------------

class TestUnguardedNaN:
    """accuracy, PPV and NPV propagate NaN on 0/0."""

    def test_ppv_nan_without_positives(self):
        """No disease and no false positives: nobody tests positive."""
        assert math.isnan(ppv(0.8, 1.0, 0.0, 100))

    def test_ppv_zero_at_zero_prevalence_with_false_positives(self):
        """Zero prevalence with Sp < 1 still yields positives, all false."""
        assert ppv(0.8, 0.9, 0.0, 100) == 0.0

    def test_npv_nan_without_negatives(self):
        """Everyone diseased and detected: nobody tests negative."""
        assert math.isnan(npv(1.0, 0.5, 1.0, 100))

    def test_accuracy_nan_empty_population(self):
        assert math.isnan(accuracy(0.9, 0.9, 0.1, 0))

    def test_no_exception_raised(self):
        m = diagnostic_metrics(0.9, 0.9, 0.1, 0)
        assert math.isnan(m.accuracy)
        assert math.isnan(m.ppv)
        assert math.isnan(m.npv)


class TestGuardedZero:
    """F1, MCC and FDR return exactly 0 on a zero denominator."""

    def test_f1_zero_when_precision_and_recall_zero(self):
        # Se = 0: no true positives, PPV = 0/FP = 0
        assert f1_score(0.0, 0.5, 0.5, 100) == 0.0

    def test_f1_zero_when_ppv_undefined(self):
        assert f1_score(0.8, 1.0, 0.0, 100) == 0.0

    def test_mcc_zero_when_nobody_negative(self):
        # Se = 1, Sp = 0: everyone tests positive, TN + FN = 0
        assert mcc(1.0, 0.0, 0.3, 100) == 0.0

    def test_mcc_zero_empty_population(self):
        assert mcc(0.9, 0.9, 0.1, 0) == 0.0

    def test_fdr_zero_without_positives(self):
        assert fdr(0.8, 1.0, 0.0, 100) == 0.0

    def test_fdr_zero_empty_population(self):
        assert fdr(0.9, 0.9, 0.1, 0) == 0.0


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------

class TestProperties:
    """Relationships that hold across the input space."""

    @pytest.mark.parametrize("sens", np.linspace(0, 1, 5))
    @pytest.mark.parametrize("spec", np.linspace(0, 1, 5))
    def test_balanced_accuracy_equals_auc_approx(self, sens, spec):
        assert balanced_accuracy(sens, spec) == auc_approx(sens, spec)

    @pytest.mark.parametrize("prev", [0.01, 0.1, 0.5, 0.9])
    def test_balanced_accuracy_ignores_prevalence(self, prev):
        m = diagnostic_metrics(0.7, 0.8, prev, 500)
        assert m.balanced_accuracy == pytest.approx(0.75)

    def test_ppv_increases_with_prevalence(self):
        lo = ppv(0.9, 0.9, 0.01, 1000)
        hi = ppv(0.9, 0.9, 0.5, 1000)
        assert hi > lo

    def test_mcc_bounds(self):
        for sens in np.linspace(0, 1, 11):
            for spec in np.linspace(0, 1, 11):
                assert -1.0 - 1e-12 <= mcc(sens, spec, 0.3, 1000) <= 1.0 + 1e-12

    def test_mcc_minus_one_for_inverted_test(self):
        assert mcc(0.0, 0.0, 0.5, 100) == pytest.approx(-1.0)

    def test_mcc_zero_for_uninformative_test(self):
        """Se + Sp = 1 means the result is independent of disease status."""
        assert mcc(0.6, 0.4, 0.2, 1000) == pytest.approx(0.0, abs=1e-12)

    def test_ppv_npv_independent_of_population_size(self):
        assert ppv(0.9, 0.8, 0.2, 10) == pytest.approx(ppv(0.9, 0.8, 0.2, 10_000))
        assert npv(0.9, 0.8, 0.2, 10) == pytest.approx(npv(0.9, 0.8, 0.2, 10_000))

    def test_lr_negative_infinite_at_zero_specificity(self):
        assert lr_negative(0.5, 0.0) == float("inf")


# ---------------------------------------------------------------------------
# Composite result
# ---------------------------------------------------------------------------

class TestDiagnosticMetrics:
    """diagnostic_metrics bundles every metric."""

    def test_returns_result(self):
        assert isinstance(diagnostic_metrics(0.9, 0.9, 0.1, 1000), DiagnosticMetrics)

    def test_fields_match_functions(self):
        args = (0.85, 0.75, 0.2, 400)
        m = diagnostic_metrics(*args)
        assert m.accuracy == accuracy(*args)
        assert m.ppv == ppv(*args)
        assert m.npv == npv(*args)
        assert m.f1 == f1_score(*args)
        assert m.mcc == mcc(*args)
        assert m.fdr == fdr(*args)
        assert m.auc_approx == m.balanced_accuracy
        assert m.false_positive_rate == pytest.approx(0.25)
        assert m.false_negative_rate == pytest.approx(0.15)

    def test_inputs_echoed(self):
        m = diagnostic_metrics(0.9, 0.8, 0.1, 250)
        assert (m.sensitivity, m.specificity, m.prevalence) == (0.9, 0.8, 0.1)
        assert m.population_size == 250

    def test_frozen(self):
        m = diagnostic_metrics(0.9, 0.9, 0.1, 1000)
        with pytest.raises(AttributeError):
            m.ppv = 0.0

    def test_summary(self):
        s = diagnostic_metrics(0.9, 0.9, 0.1, 1000).summary()
        assert "Population Size     : 1000" in s
        assert "PPV                 : 0.50" in s
        assert "Accuracy            : 0.90" in s
        assert "AUC (Approximation) : 0.90" in s

    def test_summary_with_nan(self):
        s = diagnostic_metrics(0.9, 0.9, 0.1, 0).summary()
        assert "nan" in s

    def test_invalid_input(self):
        with pytest.raises(ValueError, match="specificity"):
            diagnostic_metrics(0.9, 1.1, 0.1, 100)

    def test_inputs_validated_once(self, monkeypatch):
        """The cells are built from one validation pass, not one per metric."""
        from pydiagsim.confusion import _metrics

        calls = {"check": 0, "cells": 0}
        real_check, real_cells = _metrics._check_inputs, _metrics._cells

        def counting_check(*args):
            calls["check"] += 1
            return real_check(*args)

        def counting_cells(*args):
            calls["cells"] += 1
            return real_cells(*args)

        monkeypatch.setattr(_metrics, "_check_inputs", counting_check)
        monkeypatch.setattr(_metrics, "_cells", counting_cells)

        m = diagnostic_metrics(0.9, 0.9, 0.1, 1000)
        assert calls == {"check": 1, "cells": 1}
        assert m.ppv == pytest.approx(0.5)

    def test_huge_population_raises_value_error(self):
        with pytest.raises(ValueError, match="population_size"):
            diagnostic_metrics(0.9, 0.9, 0.1, 10**400)
