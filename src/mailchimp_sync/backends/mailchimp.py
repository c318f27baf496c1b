"""Mailchimp marketing API integration."""

import logging
from urllib.parse import quote

import requests

from mailchimp_sync.backends import BatchError, BatchRequest, BatchResponse, SubscriberPayload
from mailchimp_sync.exceptions import TransportError

from .base import BaseBackend

logger = logging.getLogger(__name__)

DEFAULT_DATACENTER = "us1"


class MailchimpBackend(BaseBackend):
    """
    Mailchimp marketing API integration.

    Uses the "batch subscribe or unsubscribe list members" endpoint so a whole
    batch is upserted in a single call. The API datacenter is the suffix of the
    API key (``<key>-us6`` targets ``us6.api.mailchimp.com``).
    """

    def __init__(self, api_key: str, timeout: int = 10):
        """Configure the Mailchimp backend."""
        self._api_key = api_key
        self._timeout = timeout

    @property
    def base_url(self):
        """Return the API root for the datacenter encoded in the API key."""
        _, separator, datacenter = self._api_key.rpartition("-")
        if not separator or not datacenter:
            datacenter = DEFAULT_DATACENTER
        return f"https://{datacenter}.api.mailchimp.com/3.0"

    @staticmethod
    def _serialize_member(entry: SubscriberPayload, double_optin: bool) -> dict:
        member = {
            "email_address": entry.email,
            "status": "pending" if double_optin else "subscribed",
        }
        if entry.merge_fields is not None:
            member["merge_fields"] = entry.merge_fields.to_dict()
        return member

    def batch_subscribe(self, batch_request: BatchRequest, timeout: int = None) -> BatchResponse:
        """
        Subscribe or update every entry of a batch on a Mailchimp list.

        Args:
            batch_request: List identifier, policy flags and subscriber entries
            timeout: API request timeout in seconds, overrides the backend default

        Returns:
            BatchResponse: Created/updated counts and per-subscriber errors

        Raises:
            TransportError: If the request fails, is rejected, or the answer
                cannot be decoded

        """
        payload = {
            "members": [
                self._serialize_member(entry, batch_request.double_optin) for entry in batch_request.entries
            ],
            "update_existing": batch_request.update_existing,
        }
        url = f"{self.base_url}/lists/{quote(batch_request.list_id, safe='')}"
        logger.debug("Submitting %d members to %s", len(payload["members"]), url)

        try:
            response = requests.post(
                url,
                json=payload,
                auth=("anystring", self._api_key),
                timeout=timeout or self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as err:
            raise TransportError(f"Failed to submit batch to Mailchimp list {batch_request.list_id!r}: {err}") from err
        except ValueError as err:
            raise TransportError("Mailchimp returned an invalid JSON response") from err

        try:
            return BatchResponse(
                added_count=int(data.get("total_created", 0)),
                updated_count=int(data.get("total_updated", 0)),
                error_count=int(data.get("error_count", 0)),
                errors=[
                    BatchError(email=error.get("email_address", ""), message=error.get("error", ""))
                    for error in data.get("errors", [])
                ],
            )
        except (AttributeError, TypeError, ValueError) as err:
            raise TransportError("Mailchimp returned an unexpected response") from err
