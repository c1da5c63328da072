"""
Project Lighthouse Risk - Disclosure risk estimation for released tabular data.

This package estimates how likely records of a released dataset are to be
re-identified, from the sample itself and from the population it was drawn
from. Long-running estimates can be cancelled cooperatively.
"""

from project_lighthouse_risk._version import __version__
from project_lighthouse_risk.cancellation import CancellationToken, ComputationInterruptedError
from project_lighthouse_risk.equivalence_classes import EquivalenceClasses
from project_lighthouse_risk.population import PopulationModel
from project_lighthouse_risk.risk_estimate_builder import (
    InterruptibleRiskEstimateBuilder,
    RiskEstimateBuilder,
)
from project_lighthouse_risk.risk_models import (
    QuasiIdentifierRisk,
    RiskSummary,
    StatisticalModel,
)

__all__ = [
    "__version__",
    "CancellationToken",
    "ComputationInterruptedError",
    "EquivalenceClasses",
    "PopulationModel",
    "RiskEstimateBuilder",
    "InterruptibleRiskEstimateBuilder",
    "QuasiIdentifierRisk",
    "RiskSummary",
    "StatisticalModel",
]
