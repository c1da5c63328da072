"""
Cooperative cancellation for long-running risk estimation.

A single :class:`CancellationToken` is shared by reference across every
computation spawned from one risk analysis request. Long-running collaborators
(equivalence class construction, population-based estimators, attribute risk
aggregation) poll the token and abort with :class:`ComputationInterruptedError`
once cancellation has been requested. Nothing is stopped forcibly.
"""

import threading
from typing import Any


class ComputationInterruptedError(RuntimeError):
    """
    Raised by a computation that observed a cancellation request.

    This error is fatal to the current risk analysis request only, it is never
    caught or retried by :class:`~project_lighthouse_risk.RiskEstimateBuilder`.
    """

    def __init__(self, message: str = "Risk computation was interrupted") -> None:
        super().__init__(message)


class CancellationToken:
    """
    A thread-safe, monotonic cancellation flag.

    The flag starts out unset and can only go from unset to set. Every read and
    write happens under the token's lock. Copying a token returns the token
    itself, so a request tree always shares one flag.

    Examples
    --------
    >>> token = CancellationToken()
    >>> token.requested
    False
    >>> token.request()
    True
    >>> token.requested
    True
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._requested = False

    @property
    def requested(self) -> bool:
        """
        Whether cancellation has been requested.

        Returns
        -------
        bool
            True once :meth:`request` has been called.
        """
        with self._lock:
            return self._requested

    def request(self) -> bool:
        """
        Request cancellation. Calling this more than once has no further effect.

        Returns
        -------
        bool
            True if this call set the flag, False if it was already set.
        """
        with self._lock:
            changed = not self._requested
            self._requested = True
            return changed

    def raise_if_requested(self) -> None:
        """
        Raise if cancellation has been requested.

        Raises
        ------
        ComputationInterruptedError
            If :meth:`request` has been called on this token.
        """
        if self.requested:
            raise ComputationInterruptedError()

    def __copy__(self) -> "CancellationToken":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "CancellationToken":
        return self

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(requested={self.requested})"
