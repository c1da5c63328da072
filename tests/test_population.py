"""
Tests for population
"""

import dataclasses

import pytest

from project_lighthouse_risk.population import PopulationModel


class TestPopulationModel:
    """
    Tests for PopulationModel.
    """

    # pylint: disable=missing-function-docstring,no-self-use

    def test_sampling_fraction(self):
        assert PopulationModel(100).sampling_fraction(25) == 0.25

    def test_sampling_fraction_whole_population(self):
        assert PopulationModel(6).sampling_fraction(6) == 1.0

    def test_sample_larger_than_population(self):
        with pytest.raises(ValueError, match="exceeds population size"):
            PopulationModel(5).sampling_fraction(6)

    @pytest.mark.parametrize("population_size", [0, -1])
    def test_non_positive_population_size(self, population_size):
        with pytest.raises(ValueError, match="must be > 0"):
            PopulationModel(population_size)

    def test_frozen(self):
        population = PopulationModel(100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            population.population_size = 200  # type: ignore[misc]
