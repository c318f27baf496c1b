"""Dummy sync backend."""

import logging

from mailchimp_sync.backends import BatchRequest, BatchResponse

from .base import BaseBackend

logger = logging.getLogger(__name__)


class DummyBackend(BaseBackend):
    """Dummy sync backend reporting every entry as added without any network call."""

    def __init__(self, api_key: str = None, timeout: int = None):
        """Accept the parameters of the Mailchimp backend and ignore them."""

    def batch_subscribe(self, batch_request: BatchRequest, timeout: int = None) -> BatchResponse:
        """Pretend to subscribe every entry."""
        logger.debug("Dummy backend received %d entries for list %s", len(batch_request.entries), batch_request.list_id)
        return BatchResponse(added_count=len(batch_request.entries))
