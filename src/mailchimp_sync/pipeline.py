"""Run a full database to Mailchimp synchronization."""

import logging

from mailchimp_sync.backends import BatchResponse
from mailchimp_sync.backends.base import BaseBackend
from mailchimp_sync.batch import build_batch, split_batch
from mailchimp_sync.records import DEFAULT_QUERY, fetch_records
from mailchimp_sync.reporter import report

logger = logging.getLogger(__name__)


def run_sync(
    client: BaseBackend,
    connection_string: str,
    list_id: str,
    stdout,
    query: str = DEFAULT_QUERY,
    batch_size: int | None = None,
    timeout: int | None = None,
) -> BatchResponse:
    """
    Fetch the contacts, submit them to `list_id` and report the outcome.

    Stages run once each, in order. Any `SyncError` raised by a stage aborts the
    run and propagates to the caller; subscribers rejected by the provider are
    only reported.

    Args:
        client: Backend used to submit the batch
        connection_string: SQLAlchemy database URL
        list_id: Identifier of the target list
        stdout: Text stream receiving the report
        query: SQL returning (email) or (first name, last name, email)
        batch_size: Split the submission into requests of at most this many
            entries. ``None`` sends everything in a single request.
        timeout: API request timeout in seconds

    Returns:
        BatchResponse: The provider response, aggregated over sub-batches

    """
    logger.info("Fetching records")
    records = fetch_records(connection_string, query)

    logger.info("Building batch for list %s", list_id)
    batch_request = build_batch(records, list_id)
    stdout.write(f"Synchronising {len(batch_request.entries)} entries\n")

    if not batch_request.entries:
        logger.info("No entries to synchronise, skipping submission")
        response = BatchResponse()
    elif batch_size is None:
        logger.info("Submitting %d entries", len(batch_request.entries))
        response = client.batch_subscribe(batch_request, timeout)
    else:
        response = BatchResponse()
        for index, sub_batch in enumerate(split_batch(batch_request, batch_size), start=1):
            logger.info("Submitting sub-batch %d (%d entries)", index, len(sub_batch.entries))
            response = response.merge(client.batch_subscribe(sub_batch, timeout))

    report(response, stdout)
    if response.error_count:
        logger.warning("%d subscribers were rejected", response.error_count)
    return response
