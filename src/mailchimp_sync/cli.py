"""Standalone `mailchimp-sync` command line entry point."""

import os
import sys

import django
from django.conf import settings

from mailchimp_sync.management.commands.sync_mailchimp import Command

DEFAULT_SETTINGS = {
    "INSTALLED_APPS": ["mailchimp_sync"],
    "MAILCHIMP_SYNC": {
        "BACKEND": "mailchimp_sync.backends.mailchimp.MailchimpBackend",
    },
    "LOGGING": {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{levelname} {asctime} {name} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "mailchimp_sync": {
                "handlers": ["console"],
                "level": "WARNING",
            },
        },
    },
}


def main(argv=None):
    """
    Run the `sync_mailchimp` command outside of a Django project.

    A minimal Django configuration is installed unless settings were already
    configured (e.g. through DJANGO_SETTINGS_MODULE). Fatal errors are printed
    on stderr and exit the process with status 1.
    """
    if not settings.configured and "DJANGO_SETTINGS_MODULE" not in os.environ:
        settings.configure(**DEFAULT_SETTINGS)
    django.setup()

    argv = sys.argv[1:] if argv is None else argv
    Command().run_from_argv(["mailchimp-sync", "sync_mailchimp", *argv])


if __name__ == "__main__":
    main()
