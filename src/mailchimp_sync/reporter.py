"""Render a batch response as text."""

from mailchimp_sync.backends import BatchResponse


def format_summary(batch_response: BatchResponse) -> str:
    """Return the one-line count summary."""
    return (
        f"Added: {batch_response.added_count}, "
        f"Updated: {batch_response.updated_count}, "
        f"Error: {batch_response.error_count}"
    )


def report(batch_response: BatchResponse, stdout):
    """Write the summary line then one line per rejected subscriber to `stdout`."""
    stdout.write(f"{format_summary(batch_response)}\n")
    for error in batch_response.errors:
        stdout.write(f"{error.email}: {error.message}\n" if error.email else f"{error.message}\n")
