"""Failure kinds raised by the data-access services.

Every store failure reaches the caller as one of these, so callers can tell
a rejected write from a missing payload or a missing row. Profile lookups are
the one exception: they report absence and failure as result variants
(see ``brewtuner.services.profile_registry``).
"""

from __future__ import annotations


class BrewTunerStoreError(RuntimeError):
    """Base class for failures talking to the backing store."""

    def __init__(self, operation: str, message: str, cause: BaseException | None = None):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.cause = cause


class RemoteWriteError(BrewTunerStoreError):
    """The backing store rejected or failed a write."""


class RemoteReadError(BrewTunerStoreError):
    """The backing store failed a read."""


class NoDataReturned(BrewTunerStoreError):
    """A request succeeded but a mandatory payload was missing."""


class UpdateNotFound(BrewTunerStoreError):
    """A targeted update or delete matched no row."""
