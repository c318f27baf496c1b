"""Custom value classes for django-configurations."""

import os

from configurations import values

from mailchimp_sync.exceptions import ConfigError


class SecretFileValue(values.Value):
    """
    Value read from environment variables with reading file support.

    The value set is either (in order of priority):
    * The content of the file referenced by the environment variable
      `{name}_{file_suffix}` if set.
    * The value of the environment variable `{name}` if set.
    * The default value

    An empty environment variable counts as unset.
    """

    file_suffix = "FILE"

    def __init__(self, *args, **kwargs):
        """Initialize the value."""
        super().__init__(*args, **kwargs)
        if "file_suffix" in kwargs:
            self.file_suffix = kwargs["file_suffix"]

    def read_file(self, filename):
        """Return the content of `filename` without its trailing newline."""
        if not os.path.exists(filename):
            raise ConfigError(f"Path {filename!r} does not exist.")
        try:
            with open(filename) as file:
                return file.read().removesuffix("\n")
        except OSError as err:
            raise ConfigError(f"Path {filename!r} cannot be read: {err!r}") from err

    def setup(self, name):
        """Get the value from environment variables."""
        value = self.default
        if self.environ:
            full_environ_name = self.full_environ_name(name)
            full_environ_name_file = f"{full_environ_name}_{self.file_suffix}"
            filename = os.environ.get(full_environ_name_file)
            if filename:
                value = self.to_python(self.read_file(filename))
            elif os.environ.get(full_environ_name):
                value = self.to_python(os.environ[full_environ_name])
            elif self.environ_required:
                raise ConfigError(
                    f"Value {name!r} is required to be set as the environment variable "
                    f"{full_environ_name_file!r} or {full_environ_name!r}"
                )
        self.value = value
        return value


def environ_value(name, default=None):
    """Resolve `name` (or `{name}_FILE`) from the environment without any prefix."""
    return SecretFileValue(default, environ_prefix=None).setup(name)
