"""
Builder for disclosure risk estimates.

:class:`RiskEstimateBuilder` is the entry point of this package. It holds the
released dataset, the population model and the quasi-identifiers, computes the
equivalence classes once, and hands them to the risk models it creates.

Every builder owns a :class:`CancellationToken`. Builders created internally for
attribute risk computations share the token of the builder that created them, so
a single call to :meth:`RiskEstimateBuilder.interrupt` aborts the whole request::

    builder = RiskEstimateBuilder(population, df, ["zipcode", "age"])
      builder.get_population_based_attribute_risks(StatisticalModel.ZAYATZ)
        AttributeRisks(qids, token, _AttributeRiskProvider(...))
          for each combination of qids:
            _derive_builder(..., token, qids=combination)  # shares token
              .get_equivalence_class_model()
            _derive_builder(..., token, classes=classes)   # shares token
              .get_sample_based_reidentification_risk()
              .get_population_based_uniqueness_risk()

Public constructors always allocate a new token, so independently created
builders never observe each other's interrupts.
"""

import logging
import threading
from collections.abc import Hashable, Sequence
from typing import Optional

import pandas as pd

from project_lighthouse_risk.cancellation import CancellationToken
from project_lighthouse_risk.equivalence_classes import EquivalenceClasses
from project_lighthouse_risk.population import PopulationModel
from project_lighthouse_risk.risk_models import (
    AttributeRisks,
    PopulationBasedUniquenessRisk,
    RiskSummary,
    SampleBasedReidentificationRisk,
    SampleBasedUniquenessRisk,
    StatisticalModel,
)

_LOGGER = logging.getLogger(__name__)


class RiskEstimateBuilder:
    """
    Creates disclosure risk estimates for a released dataset.

    Parameters
    ----------
    population : PopulationModel
        Population the dataset was sampled from. Never modified.
    handle : pd.DataFrame
        The released dataset. Never modified.
    qids : Optional[Sequence[Hashable]], default=None
        Quasi-identifier column labels. If None, all columns are treated as QIDs.
    logger : Optional[logging.Logger], default=None
        Logger for recording the computation, defaults to this module's logger.

    Raises
    ------
    ValueError
        If population or handle is None.
    TypeError
        If population is not a PopulationModel or handle is not a DataFrame.

    Examples
    --------
    >>> df = pd.DataFrame({"zipcode": [12345, 12345, 54321], "age": [30, 30, 40]})
    >>> builder = RiskEstimateBuilder(PopulationModel(1_000), df, ["zipcode", "age"])
    >>> builder.get_sample_based_reidentification_risk().get_highest_risk()
    1.0
    >>> builder.get_sample_based_uniqueness_risk().get_fraction_of_unique_tuples()
    0.3333333333333333
    """

    def __init__(
        self,
        population: PopulationModel,
        handle: pd.DataFrame,
        qids: Optional[Sequence[Hashable]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        _validate_inputs(population, handle)
        self._setup(population, handle, qids, None, CancellationToken(), logger)

    def _setup(
        self,
        population: PopulationModel,
        handle: pd.DataFrame,
        qids: Optional[Sequence[Hashable]],
        classes: Optional[EquivalenceClasses],
        token: CancellationToken,
        logger: Optional[logging.Logger],
    ) -> None:
        self.population = population
        self.handle = handle
        if classes is not None:
            self.qids: tuple[Hashable, ...] = classes.qids
        elif qids is None:
            self.qids = tuple(handle.columns)
        else:
            self.qids = tuple(qids)
        self.logger = logger if logger is not None else _LOGGER
        self._token = token
        self._classes = classes
        self._classes_lock = threading.Lock()

    @classmethod
    def from_equivalence_classes(
        cls,
        population: PopulationModel,
        handle: pd.DataFrame,
        classes: EquivalenceClasses,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "RiskEstimateBuilder":
        """
        Create a builder around already computed equivalence classes.

        Parameters
        ----------
        population : PopulationModel
            Population the dataset was sampled from.
        handle : pd.DataFrame
            The released dataset.
        classes : EquivalenceClasses
            Equivalence classes of handle, used as is.
        logger : Optional[logging.Logger], default=None
            Logger for recording the computation.

        Returns
        -------
        RiskEstimateBuilder
            A builder with its own, new cancellation token.

        Raises
        ------
        ValueError
            If population, handle or classes is None.
        """
        _validate_inputs(population, handle)
        if classes is None:
            raise ValueError("classes must not be None")
        builder = cls.__new__(cls)
        builder._setup(population, handle, None, classes, CancellationToken(), logger)
        return builder

    @property
    def token(self) -> CancellationToken:
        return self._token

    def get_equivalence_class_model(self) -> EquivalenceClasses:
        """
        Return the equivalence classes, computing them on first use.

        Concurrent callers observe a single computation and receive the same
        instance. If the computation fails, nothing is cached and the next call
        computes again.

        Returns
        -------
        EquivalenceClasses
            The equivalence classes of the dataset over this builder's QIDs.

        Raises
        ------
        ComputationInterruptedError
            If cancellation was requested before or during the computation.
        """
        classes = self._classes
        if classes is None:
            with self._classes_lock:
                classes = self._classes
                if classes is None:
                    classes = EquivalenceClasses(
                        self.handle, self.qids, self._token, logger=self.logger
                    )
                    self._classes = classes
        return classes

    def get_interruptible_instance(self) -> "InterruptibleRiskEstimateBuilder":
        return InterruptibleRiskEstimateBuilder(self)

    def get_population_based_attribute_risks(
        self, model: Optional[StatisticalModel] = None
    ) -> AttributeRisks:
        """
        Risks for all combinations of quasi-identifiers.

        Parameters
        ----------
        model : Optional[StatisticalModel], default=None
            Statistical model for population uniqueness. If None, sample
            uniqueness is reported instead.

        Returns
        -------
        AttributeRisks
            Aggregator sharing this builder's cancellation token.
        """
        return self._get_attribute_risks(model)

    def get_population_based_uniqueness_risk(self) -> PopulationBasedUniquenessRisk:
        return PopulationBasedUniquenessRisk(
            self.population, self.get_equivalence_class_model(), self._token, logger=self.logger
        )

    def get_sample_based_attribute_risks(self) -> AttributeRisks:
        return self._get_attribute_risks(None)

    def get_sample_based_reidentification_risk(self) -> SampleBasedReidentificationRisk:
        return SampleBasedReidentificationRisk(self.get_equivalence_class_model())

    def get_sample_based_uniqueness_risk(self) -> SampleBasedUniquenessRisk:
        return SampleBasedUniquenessRisk(self.get_equivalence_class_model())

    def interrupt(self) -> None:
        """
        Request cancellation of every computation sharing this builder's token.

        Running computations abort with ComputationInterruptedError when they
        next poll the token. Calling this more than once has no further effect.
        """
        if self._token.request():
            self.logger.warning("Signaling risk estimation interrupt")

    def _get_attribute_risks(self, model: Optional[StatisticalModel]) -> AttributeRisks:
        return AttributeRisks(
            self.qids,
            self._token,
            _AttributeRiskProvider(self.population, self.handle, model, self.logger),
            logger=self.logger,
        )


class InterruptibleRiskEstimateBuilder:
    """
    A view of a :class:`RiskEstimateBuilder` that can be interrupted.

    Intended for callers that run the estimates in a worker thread and cancel
    them from another thread, e.g. from a "stop" action in a user interface.

    Parameters
    ----------
    builder : RiskEstimateBuilder
        The builder whose token is interrupted.
    """

    def __init__(self, builder: RiskEstimateBuilder) -> None:
        self._builder = builder

    def interrupt(self) -> None:
        self._builder.interrupt()

    def get_equivalence_class_model(self) -> EquivalenceClasses:
        return self._builder.get_equivalence_class_model()

    def get_population_based_attribute_risks(
        self, model: Optional[StatisticalModel] = None
    ) -> AttributeRisks:
        return self._builder.get_population_based_attribute_risks(model)

    def get_population_based_uniqueness_risk(self) -> PopulationBasedUniquenessRisk:
        return self._builder.get_population_based_uniqueness_risk()

    def get_sample_based_attribute_risks(self) -> AttributeRisks:
        return self._builder.get_sample_based_attribute_risks()

    def get_sample_based_reidentification_risk(self) -> SampleBasedReidentificationRisk:
        return self._builder.get_sample_based_reidentification_risk()

    def get_sample_based_uniqueness_risk(self) -> SampleBasedUniquenessRisk:
        return self._builder.get_sample_based_uniqueness_risk()


class _AttributeRiskProvider:
    """
    Computes the risk summary of one combination of quasi-identifiers.

    Parameters
    ----------
    population : PopulationModel
        Population the dataset was sampled from.
    handle : pd.DataFrame
        The released dataset.
    model : Optional[StatisticalModel]
        If None, the fraction of unique records is sample-based, otherwise it is
        population-based under this model.
    logger : logging.Logger
        Logger handed to the derived builders.
    """

    def __init__(
        self,
        population: PopulationModel,
        handle: pd.DataFrame,
        model: Optional[StatisticalModel],
        logger: logging.Logger,
    ) -> None:
        self.population = population
        self.handle = handle
        self.model = model
        self.logger = logger

    def __call__(self, qids: tuple[Hashable, ...], token: CancellationToken) -> RiskSummary:
        builder = _derive_builder(self.population, self.handle, token, self.logger, qids=qids)
        classes = builder.get_equivalence_class_model()
        builder = _derive_builder(self.population, self.handle, token, self.logger, classes=classes)

        reidentification_risk = builder.get_sample_based_reidentification_risk()
        highest_risk = reidentification_risk.get_highest_risk()
        average_risk = reidentification_risk.get_average_risk()
        if self.model is None:
            uniqueness_risk = builder.get_sample_based_uniqueness_risk()
            fraction_unique = uniqueness_risk.get_fraction_of_unique_tuples()
        else:
            population_risk = builder.get_population_based_uniqueness_risk()
            fraction_unique = population_risk.get_fraction_of_unique_tuples(self.model)

        return RiskSummary(
            highest_risk=highest_risk,
            average_risk=average_risk,
            fraction_unique=fraction_unique,
        )


def _derive_builder(
    population: PopulationModel,
    handle: pd.DataFrame,
    token: CancellationToken,
    logger: logging.Logger,
    qids: Optional[Sequence[Hashable]] = None,
    classes: Optional[EquivalenceClasses] = None,
) -> RiskEstimateBuilder:
    """
    Create a builder that adopts an existing cancellation token.

    Exactly one of qids and classes must be given.
    """
    if (qids is None) == (classes is None):
        raise ValueError("Exactly one of qids and classes must be given")
    _validate_inputs(population, handle)
    builder = RiskEstimateBuilder.__new__(RiskEstimateBuilder)
    builder._setup(population, handle, qids, classes, token, logger)
    return builder


def _validate_inputs(population: PopulationModel, handle: pd.DataFrame) -> None:
    if population is None:
        raise ValueError("population must not be None")
    if handle is None:
        raise ValueError("handle must not be None")
    if not isinstance(population, PopulationModel):
        raise TypeError(f"population must be a PopulationModel, not {type(population).__name__}")
    if not isinstance(handle, pd.DataFrame):
        raise TypeError(f"handle must be a pandas DataFrame, not {type(handle).__name__}")
