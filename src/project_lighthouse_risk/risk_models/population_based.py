"""
Population-based uniqueness risk.

The released dataset is treated as a sample of a larger population. The number
of records that are unique in the population is estimated from the sample's
equivalence class size distribution under a statistical model.
"""

import logging
from enum import Enum
from typing import Optional

from scipy.stats import hypergeom

from project_lighthouse_risk.cancellation import CancellationToken
from project_lighthouse_risk.constants import EPSILON
from project_lighthouse_risk.equivalence_classes import EquivalenceClasses
from project_lighthouse_risk.population import PopulationModel

_LOGGER = logging.getLogger(__name__)

StatisticalModel = Enum("StatisticalModel", ["ZAYATZ"])


class PopulationBasedUniquenessRisk:
    """
    Estimates of population uniqueness.

    Parameters
    ----------
    population : PopulationModel
        The population the sample was drawn from.
    classes : EquivalenceClasses
        Partition of the released sample.
    token : CancellationToken
        Token polled while estimating.
    logger : Optional[logging.Logger], default=None
        Logger for recording the computation, defaults to this module's logger.

    Raises
    ------
    ValueError
        If the sample is larger than the population.
    """

    def __init__(
        self,
        population: PopulationModel,
        classes: EquivalenceClasses,
        token: CancellationToken,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.population = population
        self.classes = classes
        self.token = token
        self.logger = logger if logger is not None else _LOGGER
        self.sampling_fraction = population.sampling_fraction(classes.num_records)

    def get_num_unique_tuples(self, model: StatisticalModel = StatisticalModel.ZAYATZ) -> float:
        """
        Estimated number of records that are unique in the population.

        Parameters
        ----------
        model : StatisticalModel, default=StatisticalModel.ZAYATZ
            Statistical model used for the estimate.

        Returns
        -------
        float
            Estimated number of population uniques.

        Raises
        ------
        ComputationInterruptedError
            If cancellation was requested while estimating.
        """
        self.token.raise_if_requested()
        if 1.0 - self.sampling_fraction < EPSILON:
            return float(self.classes.num_unique_records)
        if model is StatisticalModel.ZAYATZ:
            return self._zayatz()
        raise ValueError(f"Unsupported statistical model {model}")

    def get_fraction_of_unique_tuples(
        self, model: StatisticalModel = StatisticalModel.ZAYATZ
    ) -> float:
        """
        Estimated fraction of the population whose records are population unique.

        Parameters
        ----------
        model : StatisticalModel, default=StatisticalModel.ZAYATZ
            Statistical model used for the estimate.

        Returns
        -------
        float
            Value in [0, 1].
        """
        return self.get_num_unique_tuples(model) / self.population.population_size

    def _zayatz(self) -> float:
        """
        Zayatz's estimator of population uniques.

        Assumes that the population's equivalence class size distribution
        matches the sample's. The probability that a sample unique is also a
        population unique is the share of sample uniques stemming from
        population classes of size one:

            P = f_1 h(1) / sum_i f_i h(i)

        where f_i is the number of sample classes of size i and h(i) is the
        hypergeometric probability of drawing exactly one record of a population
        class of size i into the sample.

        References
        ----------
        L. Zayatz, "Estimation of the percent of unique population elements on
        a microdata file using the sample," Statistical Research Division
        Report Number: Census/SRD/RR-91/08, 1991.
        """
        num_unique = self.classes.num_unique_records
        if num_unique == 0:
            return 0.0
        population_size = self.population.population_size
        sample_size = self.classes.num_records
        numerator = 0.0
        denominator = 0.0
        for size, count in self.classes.size_to_count.items():
            self.token.raise_if_requested()
            probability = float(hypergeom.pmf(1, population_size, size, sample_size))
            denominator += count * probability
            if size == 1:
                numerator = count * probability
        if denominator == 0.0:
            return 0.0
        estimate = num_unique * numerator / denominator
        self.logger.debug(
            "Zayatz estimate of %.2f population uniques from %d sample uniques",
            estimate,
            num_unique,
        )
        return estimate
