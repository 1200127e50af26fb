"""Tests for the envelope model and empty-envelope detection."""

from __future__ import annotations

import pytest

from ndjson_html_formatter.messages.envelope import Envelope, EnvelopeKind, is_empty_envelope


def test_envelope_kind_covers_every_payload_slot() -> None:
    """All nineteen message payload slots should be recognized."""
    assert len(EnvelopeKind) == 19
    assert EnvelopeKind("testRunHookFinished") is EnvelopeKind.TEST_RUN_HOOK_FINISHED


@pytest.mark.parametrize("kind", list(EnvelopeKind))
def test_from_record_recognizes_each_payload_slot(kind: EnvelopeKind) -> None:
    """A record carrying one recognized slot should decode to that kind."""
    envelope = Envelope.from_record({kind.value: {"id": "1"}})

    assert envelope.kind is kind
    assert envelope.payload == {"id": "1"}
    assert not is_empty_envelope(envelope)


def test_record_without_recognized_slots_is_empty() -> None:
    """Unknown keys alone should produce an empty envelope."""
    envelope = Envelope.from_record({"somethingElse": {"id": "1"}})

    assert envelope.kind is None
    assert is_empty_envelope(envelope)


def test_null_payload_slots_do_not_count_as_present() -> None:
    """Explicit nulls in every slot should still be treated as an empty envelope."""
    envelope = Envelope.from_record({"attachment": None, "hook": None})

    assert is_empty_envelope(envelope)


def test_null_item_is_empty() -> None:
    """A record that failed to decode into an envelope counts as empty."""
    assert is_empty_envelope(None)


def test_to_record_restores_wire_shape() -> None:
    """Envelopes should serialize back to a single-key JSON object."""
    envelope = Envelope(kind=EnvelopeKind.SOURCE, payload={"uri": "a.feature"})

    assert envelope.to_record() == {"source": {"uri": "a.feature"}}
    assert Envelope(kind=None).to_record() == {}
