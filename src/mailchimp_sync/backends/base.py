"""Sync backend base module."""

from abc import ABC, abstractmethod

from mailchimp_sync.backends import BatchRequest, BatchResponse


class BaseBackend(ABC):
    """Base class for all sync backends."""

    @abstractmethod
    def batch_subscribe(self, batch_request: BatchRequest, timeout: int = None) -> BatchResponse:
        """
        Subscribe or update every entry of a batch in one call.

        Args:
            batch_request: List identifier, policy flags and subscriber entries
            timeout: API request timeout in seconds

        Returns:
            BatchResponse: Counts and per-subscriber errors reported by the provider

        Raises:
            TransportError: If the batch cannot be submitted

        """
