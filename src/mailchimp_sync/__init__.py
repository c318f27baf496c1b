"""Synchronize contacts from a relational database into a Mailchimp list."""

from django.utils.functional import LazyObject

from .handler import SyncClientHandler


class DefaultSyncClient(LazyObject):
    """Lazy object to handle the sync backend."""

    def _setup(self):
        """Configure the sync backend."""
        self._wrapped = sync_client_handler()


sync_client_handler = SyncClientHandler()
sync_client = DefaultSyncClient()
