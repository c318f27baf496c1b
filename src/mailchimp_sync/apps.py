"""Mailchimp sync application."""

from django.apps import AppConfig


class MailchimpSyncConfig(AppConfig):
    """Configuration class for the Mailchimp sync app."""

    name = "mailchimp_sync"
    verbose_name = "Mailchimp synchronization"
