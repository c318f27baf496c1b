"""Sync backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from mailchimp_sync.exceptions import InvalidBackendError


class SyncClientHandler:
    """
    Build sync clients from a backend definition.

    A definition is a dict like ``settings.MAILCHIMP_SYNC``: the dotted path of
    the backend class under ``BACKEND`` and its keyword arguments under
    ``PARAMETERS``. The settings are read when no definition is given.
    """

    def __init__(self, definition=None):
        """Initialize the handler with an optional backend definition."""
        self._definition = definition
        self._default_client = None

    @cached_property
    def definition(self):
        """Return the backend definition, read once from the settings if needed."""
        if self._definition is not None:
            return self._definition
        try:
            return settings.MAILCHIMP_SYNC.copy()
        except AttributeError as e:
            raise ImproperlyConfigured("settings.MAILCHIMP_SYNC is not configured") from e

    def __call__(self):
        """Return the client built from the definition alone, creating it on first use."""
        if self._default_client is None:
            self._default_client = self.create_client(self.definition)
        return self._default_client

    def create_client(self, definition, **overrides):
        """
        Instantiate a sync backend from `definition`.

        Keyword arguments take precedence over the definition ``PARAMETERS``,
        which lets the command line inject the API key it resolved.
        """
        backend_path = definition["BACKEND"]
        parameters = {**definition.get("PARAMETERS", {}), **overrides}
        try:
            backend_class = import_string(backend_path)
        except ImportError as e:
            raise InvalidBackendError(f"Could not find backend {backend_path!r}: {e}") from e
        return backend_class(**parameters)
