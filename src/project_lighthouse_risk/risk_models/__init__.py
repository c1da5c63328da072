"""
Disclosure risk models computed from equivalence classes.

Classes
-------
SampleBasedReidentificationRisk
    Highest, average and lowest re-identification risk within the sample.

SampleBasedUniquenessRisk
    Number and fraction of records that are unique within the sample.

PopulationBasedUniquenessRisk
    Estimated number and fraction of records that are unique within the
    population, under a :data:`StatisticalModel`.

AttributeRisks
    Risks for every combination of quasi-identifiers.
"""

from .attributes import AttributeRisks, QuasiIdentifierRisk, RiskProvider, RiskSummary
from .population_based import PopulationBasedUniquenessRisk, StatisticalModel
from .sample_based import SampleBasedReidentificationRisk, SampleBasedUniquenessRisk

__all__ = [
    "AttributeRisks",
    "QuasiIdentifierRisk",
    "RiskProvider",
    "RiskSummary",
    "PopulationBasedUniquenessRisk",
    "StatisticalModel",
    "SampleBasedReidentificationRisk",
    "SampleBasedUniquenessRisk",
]
