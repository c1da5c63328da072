"""
Tests for population-based risk models
"""

import pytest

from project_lighthouse_risk.cancellation import CancellationToken, ComputationInterruptedError
from project_lighthouse_risk.constants import EPSILON
from project_lighthouse_risk.equivalence_classes import EquivalenceClasses
from project_lighthouse_risk.population import PopulationModel
from project_lighthouse_risk.risk_models import PopulationBasedUniquenessRisk, StatisticalModel


class TestPopulationBasedUniquenessRisk:
    """
    Tests for PopulationBasedUniquenessRisk.
    """

    # pylint: disable=missing-function-docstring,no-self-use

    def test_whole_population_sampled(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode", "age"], [2, 1, 2, 1])
        risk = PopulationBasedUniquenessRisk(PopulationModel(6), classes, CancellationToken())
        assert risk.get_num_unique_tuples(StatisticalModel.ZAYATZ) == 2.0
        assert risk.get_fraction_of_unique_tuples(StatisticalModel.ZAYATZ) == pytest.approx(
            2 / 6, abs=EPSILON
        )

    def test_zayatz(self):
        # N=4, n=3: h(1) = 3/4, h(2) = 2/4, so P = 0.75 / (0.75 + 0.5) = 0.6
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [1, 2])
        risk = PopulationBasedUniquenessRisk(PopulationModel(4), classes, CancellationToken())
        assert risk.get_num_unique_tuples(StatisticalModel.ZAYATZ) == pytest.approx(0.6, abs=EPSILON)
        assert risk.get_fraction_of_unique_tuples(StatisticalModel.ZAYATZ) == pytest.approx(
            0.15, abs=EPSILON
        )

    def test_zayatz_all_sample_unique(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [1, 1, 1, 1])
        risk = PopulationBasedUniquenessRisk(PopulationModel(100), classes, CancellationToken())
        assert risk.get_num_unique_tuples() == pytest.approx(4.0, abs=EPSILON)
        assert risk.get_fraction_of_unique_tuples() == pytest.approx(0.04, abs=EPSILON)

    def test_zayatz_no_sample_uniques(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [2, 3])
        risk = PopulationBasedUniquenessRisk(PopulationModel(1_000), classes, CancellationToken())
        assert risk.get_fraction_of_unique_tuples(StatisticalModel.ZAYATZ) == 0.0

    def test_zayatz_bounded_by_sample_uniques(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [1, 1, 1, 2, 3, 5, 8])
        risk = PopulationBasedUniquenessRisk(
            PopulationModel(10_000), classes, CancellationToken()
        )
        num_unique = risk.get_num_unique_tuples(StatisticalModel.ZAYATZ)
        assert 0.0 <= num_unique <= 3.0
        assert 0.0 <= risk.get_fraction_of_unique_tuples(StatisticalModel.ZAYATZ) <= 1.0

    def test_population_smaller_than_sample(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [2, 3])
        with pytest.raises(ValueError, match="exceeds population size"):
            PopulationBasedUniquenessRisk(PopulationModel(4), classes, CancellationToken())

    def test_interrupted(self):
        classes = EquivalenceClasses.from_class_sizes(["zipcode"], [1, 2])
        token = CancellationToken()
        risk = PopulationBasedUniquenessRisk(PopulationModel(100), classes, token)
        token.request()
        with pytest.raises(ComputationInterruptedError):
            risk.get_fraction_of_unique_tuples(StatisticalModel.ZAYATZ)
