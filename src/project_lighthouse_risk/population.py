"""
Population model for population-based disclosure risk estimates.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PopulationModel:
    """
    Descriptor of the population a released sample was drawn from.

    Parameters
    ----------
    population_size : int
        Number of individuals in the underlying population. Must be positive.

    Raises
    ------
    ValueError
        If population_size is not positive.
    """

    population_size: int

    def __post_init__(self) -> None:
        if self.population_size <= 0:
            raise ValueError(f"population_size ({self.population_size}) must be > 0")

    def sampling_fraction(self, sample_size: int) -> float:
        """
        Fraction of the population covered by a sample.

        Parameters
        ----------
        sample_size : int
            Number of records in the sample.

        Returns
        -------
        float
            sample_size / population_size.

        Raises
        ------
        ValueError
            If the sample is larger than the population.
        """
        if sample_size > self.population_size:
            raise ValueError(
                f"Sample size ({sample_size}) exceeds population size ({self.population_size})"
            )
        return sample_size / self.population_size
