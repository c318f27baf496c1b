"""Mailchimp sync tasks module."""

import io
import logging
from dataclasses import asdict

from celery import shared_task
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from mailchimp_sync import sync_client
from mailchimp_sync.pipeline import run_sync
from mailchimp_sync.records import DEFAULT_QUERY

logger = logging.getLogger(__name__)


@shared_task
def sync_mailchimp_list(list_id: str, query: str = None, batch_size: int = None, timeout: int = None):
    """Synchronize the database configured in settings into a Mailchimp list."""
    connection_string = getattr(settings, "MAILCHIMP_SYNC_CONNECTION_STRING", None)
    if not connection_string:
        raise ImproperlyConfigured("settings.MAILCHIMP_SYNC_CONNECTION_STRING is not configured")

    output = io.StringIO()
    response = run_sync(
        sync_client,
        connection_string,
        list_id,
        output,
        query=query or getattr(settings, "MAILCHIMP_SYNC_QUERY", DEFAULT_QUERY),
        batch_size=batch_size,
        timeout=timeout,
    )
    logger.info("Mailchimp sync report for list %s:\n%s", list_id, output.getvalue())
    return asdict(response)
