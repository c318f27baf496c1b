"""Sync backends module."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MergeFields:
    """Personalization values attached to a subscriber."""

    first_name: str
    last_name: str

    def to_dict(self) -> dict[str, str]:
        """Return the merge fields keyed by their Mailchimp tags."""
        return {"FNAME": self.first_name, "LNAME": self.last_name}


@dataclass(frozen=True)
class SubscriberPayload:
    """One subscriber upsert in a batch request."""

    email: str
    merge_fields: MergeFields | None = None


@dataclass
class BatchRequest:
    """Bulk subscribe request sent to the provider in a single call."""

    list_id: str
    update_existing: bool
    double_optin: bool
    entries: list[SubscriberPayload] = field(default_factory=list)


@dataclass(frozen=True)
class BatchError:
    """A subscriber rejected by the provider."""

    email: str
    message: str


@dataclass
class BatchResponse:
    """Outcome of a batch subscribe request."""

    added_count: int = 0
    updated_count: int = 0
    error_count: int = 0
    errors: list[BatchError] = field(default_factory=list)

    def merge(self, other: "BatchResponse") -> "BatchResponse":
        """Return a new response summing this one and `other`, errors in order."""
        return BatchResponse(
            added_count=self.added_count + other.added_count,
            updated_count=self.updated_count + other.updated_count,
            error_count=self.error_count + other.error_count,
            errors=[*self.errors, *other.errors],
        )
