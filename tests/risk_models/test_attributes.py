"""
Tests for attribute risks
"""

import dataclasses

import pytest

from project_lighthouse_risk.cancellation import CancellationToken, ComputationInterruptedError
from project_lighthouse_risk.risk_models import AttributeRisks, QuasiIdentifierRisk, RiskSummary


class RecordingRiskProvider:
    """Returns fixed summaries per combination and records every call."""

    def __init__(self, qids_to_summary):
        self.qids_to_summary = qids_to_summary
        self.calls = []

    def __call__(self, qids, token):
        self.calls.append((qids, token))
        return self.qids_to_summary[qids]


class TestRiskSummary:
    """Test RiskSummary"""

    def test_getters(self):
        summary = RiskSummary(highest_risk=0.5, average_risk=0.3, fraction_unique=0.2)
        assert summary.get_highest_risk() == 0.5
        assert summary.get_average_risk() == 0.3
        assert summary.get_fraction_of_unique_tuples() == 0.2

    def test_read_only(self):
        summary = RiskSummary(highest_risk=0.5, average_risk=0.3, fraction_unique=0.2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            summary.highest_risk = 1.0  # type: ignore[misc]


class TestAttributeRisks:
    """
    Tests for AttributeRisks.
    """

    # pylint: disable=missing-function-docstring,no-self-use

    @property
    def qids_to_summary(self):
        return {
            ("A",): RiskSummary(0.5, 0.3, 0.2),
            ("B",): RiskSummary(0.9, 0.4, 0.6),
            ("C",): RiskSummary(0.1, 0.1, 0.0),
            ("A", "B"): RiskSummary(1.0, 0.7, 0.8),
            ("A", "C"): RiskSummary(0.5, 0.4, 0.3),
            ("B", "C"): RiskSummary(1.0, 0.5, 0.6),
            ("A", "B", "C"): RiskSummary(1.0, 0.9, 0.9),
        }

    def test_all_combinations_in_order(self):
        provider = RecordingRiskProvider(self.qids_to_summary)
        token = CancellationToken()
        results = AttributeRisks(["A", "B", "C"], token, provider).compute()
        assert [result.qids for result in results] == [
            ("A",),
            ("B",),
            ("C",),
            ("A", "B"),
            ("A", "C"),
            ("B", "C"),
            ("A", "B", "C"),
        ]
        assert all(call_token is token for _, call_token in provider.calls)

    def test_values_passed_through(self):
        provider = RecordingRiskProvider(self.qids_to_summary)
        results = AttributeRisks(["A", "B"], CancellationToken(), provider).compute()
        assert results == [
            QuasiIdentifierRisk(("A",), 0.5, 0.3, 0.2),
            QuasiIdentifierRisk(("B",), 0.9, 0.4, 0.6),
            QuasiIdentifierRisk(("A", "B"), 1.0, 0.7, 0.8),
        ]

    def test_attribute_risks_memoized(self):
        provider = RecordingRiskProvider(self.qids_to_summary)
        attribute_risks = AttributeRisks(["A", "B"], CancellationToken(), provider)
        assert attribute_risks.attribute_risks is attribute_risks.attribute_risks
        assert len(provider.calls) == 3

    def test_no_qids(self):
        provider = RecordingRiskProvider({})
        assert AttributeRisks([], CancellationToken(), provider).compute() == []

    def test_interrupted_before_start(self):
        provider = RecordingRiskProvider(self.qids_to_summary)
        token = CancellationToken()
        token.request()
        with pytest.raises(ComputationInterruptedError):
            AttributeRisks(["A", "B"], token, provider).compute()
        assert provider.calls == []

    def test_interrupted_between_combinations(self):
        token = CancellationToken()
        qids_to_summary = self.qids_to_summary
        calls = []

        def interrupting_provider(qids, call_token):
            calls.append(qids)
            call_token.request()
            return qids_to_summary[qids]

        with pytest.raises(ComputationInterruptedError):
            AttributeRisks(["A", "B", "C"], token, interrupting_provider).compute()
        assert calls == [("A",)]
