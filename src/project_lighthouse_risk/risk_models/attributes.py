"""
Risk estimates for subsets of the quasi-identifiers.

:class:`AttributeRisks` evaluates every non-empty combination of the
quasi-identifiers to show which attributes contribute most to disclosure risk.
The risks of a single combination are supplied by a callback, so the same
aggregation serves sample-based and population-based estimates.
"""

import itertools as it
import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import Callable, Optional, Protocol

from project_lighthouse_risk.cancellation import CancellationToken

_LOGGER = logging.getLogger(__name__)


class RiskProvider(Protocol):
    """Read-only access to the risks of one combination of quasi-identifiers."""

    def get_highest_risk(self) -> float: ...

    def get_average_risk(self) -> float: ...

    def get_fraction_of_unique_tuples(self) -> float: ...


@dataclass(frozen=True)
class RiskSummary:
    """
    Immutable risk summary of one combination of quasi-identifiers.

    Attributes
    ----------
    highest_risk : float
        Highest re-identification risk of any record, in [0, 1].
    average_risk : float
        Average re-identification risk over all records, in [0, 1].
    fraction_unique : float
        Fraction of unique records (sample- or population-based), in [0, 1].
    """

    highest_risk: float
    average_risk: float
    fraction_unique: float

    def get_highest_risk(self) -> float:
        return self.highest_risk

    def get_average_risk(self) -> float:
        return self.average_risk

    def get_fraction_of_unique_tuples(self) -> float:
        return self.fraction_unique


RiskProviderCallback = Callable[[tuple[Hashable, ...], CancellationToken], RiskProvider]


@dataclass(frozen=True)
class QuasiIdentifierRisk:
    """Risks of a single combination of quasi-identifiers."""

    qids: tuple[Hashable, ...]
    highest_risk: float
    average_risk: float
    fraction_unique: float


class AttributeRisks:
    """
    Risk estimates for all non-empty combinations of quasi-identifiers.

    Parameters
    ----------
    qids : Sequence[Hashable]
        Quasi-identifiers to combine.
    token : CancellationToken
        Token polled before each combination and handed to risk_provider.
    risk_provider : RiskProviderCallback
        Called once per combination with ``(qids, token)``.
    logger : Optional[logging.Logger], default=None
        Logger for recording the computation, defaults to this module's logger.

    Notes
    -----
    The number of combinations is ``2 ** len(qids) - 1``, and each one requires
    a fresh partition of the dataset.
    """

    def __init__(
        self,
        qids: Sequence[Hashable],
        token: CancellationToken,
        risk_provider: RiskProviderCallback,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.qids = tuple(qids)
        self.token = token
        self.risk_provider = risk_provider
        self.logger = logger if logger is not None else _LOGGER

    def compute(self) -> list[QuasiIdentifierRisk]:
        """
        Evaluate every combination of quasi-identifiers.

        Returns
        -------
        List[QuasiIdentifierRisk]
            One entry per combination, ordered by the number of quasi-identifiers
            and then by the order of the quasi-identifiers given.

        Raises
        ------
        ComputationInterruptedError
            If cancellation was requested during the computation.
        """
        results = []
        for size in range(1, len(self.qids) + 1):
            for subset in it.combinations(self.qids, size):
                self.token.raise_if_requested()
                self.logger.debug("Computing attribute risks for %s", subset)
                provider = self.risk_provider(subset, self.token)
                results.append(
                    QuasiIdentifierRisk(
                        qids=subset,
                        highest_risk=provider.get_highest_risk(),
                        average_risk=provider.get_average_risk(),
                        fraction_unique=provider.get_fraction_of_unique_tuples(),
                    )
                )
        return results

    @cached_property
    def attribute_risks(self) -> list[QuasiIdentifierRisk]:
        """Memoized result of :meth:`compute`."""
        return self.compute()
