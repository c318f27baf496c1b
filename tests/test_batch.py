"""Tests for the batch builder."""

import pytest

from mailchimp_sync import batch
from mailchimp_sync.backends import BatchRequest, MergeFields, SubscriberPayload
from mailchimp_sync.batch import build_batch, build_payload, split_batch
from mailchimp_sync.records import Record


def test_build_batch_end_to_end_rows():
    """Test named and unnamed records map to the expected payloads."""
    records = [
        Record(first_name="Jane", last_name="Doe", email_address="jane@x.com"),
        Record(first_name="", last_name="", email_address="bob@x.com"),
    ]

    request = build_batch(records, "list-1")

    assert request.entries[0] == SubscriberPayload(
        email="jane@x.com", merge_fields=MergeFields(first_name="Jane", last_name="Doe")
    )
    assert request.entries[0].merge_fields.to_dict() == {"FNAME": "Jane", "LNAME": "Doe"}
    assert request.entries[1] == SubscriberPayload(email="bob@x.com")
    assert request.entries[1].merge_fields is None


@pytest.mark.parametrize(
    ("first_name", "last_name"),
    [("Jane", ""), ("", "Doe"), ("", "")],
)
def test_build_payload_without_full_name(first_name, last_name):
    """Test a record missing one of the names gets no merge fields."""
    record = Record(first_name=first_name, last_name=last_name, email_address="jane@x.com")

    assert build_payload(record).merge_fields is None


def test_build_batch_keeps_order_and_count():
    """Test one entry is produced per record, in input order."""
    records = [Record(email_address=f"user{i}@x.com") for i in range(50)]

    request = build_batch(records, "list-1")

    assert [entry.email for entry in request.entries] == [record.email_address for record in records]


@pytest.mark.parametrize("count", [0, 1, 3])
def test_build_batch_policy_flags(count):
    """Test the policy flags never depend on the input."""
    records = [Record(first_name="Jane", last_name="Doe", email_address=f"{i}@x.com") for i in range(count)]

    request = build_batch(records, "list-1")

    assert request.update_existing is True
    assert request.double_optin is False
    assert batch.UPDATE_EXISTING is True
    assert batch.DOUBLE_OPTIN is False


def test_build_batch_empty():
    """Test an empty input still builds a valid request."""
    assert build_batch([], "list-1") == BatchRequest(
        list_id="list-1", update_existing=True, double_optin=False, entries=[]
    )


def test_split_batch():
    """Test sub-batches are bounded and keep order and flags."""
    request = build_batch([Record(email_address=f"user{i}@x.com") for i in range(5)], "list-1")

    sub_batches = list(split_batch(request, 2))

    assert [len(sub_batch.entries) for sub_batch in sub_batches] == [2, 2, 1]
    assert [entry for sub_batch in sub_batches for entry in sub_batch.entries] == request.entries
    assert all(sub_batch.list_id == "list-1" for sub_batch in sub_batches)
    assert all(sub_batch.update_existing and not sub_batch.double_optin for sub_batch in sub_batches)


def test_split_batch_empty():
    """Test an empty batch yields no sub-batch."""
    assert not list(split_batch(build_batch([], "list-1"), 10))


@pytest.mark.parametrize("batch_size", [0, -1])
def test_split_batch_invalid_size(batch_size):
    """Test a non positive batch size is rejected."""
    with pytest.raises(ValueError, match="positive integer"):
        list(split_batch(build_batch([], "list-1"), batch_size))
