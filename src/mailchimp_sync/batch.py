"""Map contact records into a batch subscribe request."""

import logging
from collections.abc import Iterable, Iterator

from mailchimp_sync.backends import BatchRequest, MergeFields, SubscriberPayload
from mailchimp_sync.records import Record

logger = logging.getLogger(__name__)

# Subscription policy sent with every batch.
UPDATE_EXISTING = True
DOUBLE_OPTIN = False


def build_payload(record: Record) -> SubscriberPayload:
    """
    Map a record to a subscriber payload.

    Merge fields are attached only when both first and last names are set: a
    record with a single name is sent as email only.
    """
    if record.first_name and record.last_name:
        return SubscriberPayload(
            email=record.email_address,
            merge_fields=MergeFields(first_name=record.first_name, last_name=record.last_name),
        )
    return SubscriberPayload(email=record.email_address)


def build_batch(records: Iterable[Record], list_id: str) -> BatchRequest:
    """Build the batch request for `list_id`, one entry per record in input order."""
    entries = [build_payload(record) for record in records]
    logger.debug("Built batch of %d entries for list %s", len(entries), list_id)
    return BatchRequest(
        list_id=list_id,
        update_existing=UPDATE_EXISTING,
        double_optin=DOUBLE_OPTIN,
        entries=entries,
    )


def split_batch(batch_request: BatchRequest, batch_size: int) -> Iterator[BatchRequest]:
    """
    Split a batch into sub-batches of at most `batch_size` entries.

    Sub-batches keep the list identifier, the policy flags and the entry order.
    An empty batch yields nothing.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be a positive integer, got {batch_size}")

    for start in range(0, len(batch_request.entries), batch_size):
        yield BatchRequest(
            list_id=batch_request.list_id,
            update_existing=batch_request.update_existing,
            double_optin=batch_request.double_optin,
            entries=batch_request.entries[start : start + batch_size],
        )
