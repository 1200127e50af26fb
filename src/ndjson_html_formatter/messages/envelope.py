"""Envelope model for decoded message records."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class EnvelopeKind(str, Enum):
    """One case per payload slot an envelope can carry.

    Values are the JSON keys used on the wire.
    """

    ATTACHMENT = "attachment"
    GHERKIN_DOCUMENT = "gherkinDocument"
    HOOK = "hook"
    META = "meta"
    PARAMETER_TYPE = "parameterType"
    PARSE_ERROR = "parseError"
    PICKLE = "pickle"
    SOURCE = "source"
    STEP_DEFINITION = "stepDefinition"
    TEST_CASE = "testCase"
    TEST_CASE_FINISHED = "testCaseFinished"
    TEST_CASE_STARTED = "testCaseStarted"
    TEST_RUN_FINISHED = "testRunFinished"
    TEST_RUN_HOOK_FINISHED = "testRunHookFinished"
    TEST_RUN_HOOK_STARTED = "testRunHookStarted"
    TEST_RUN_STARTED = "testRunStarted"
    TEST_STEP_FINISHED = "testStepFinished"
    TEST_STEP_STARTED = "testStepStarted"
    UNDEFINED_PARAMETER_TYPE = "undefinedParameterType"


_KINDS_BY_KEY: dict[str, EnvelopeKind] = {kind.value: kind for kind in EnvelopeKind}


@dataclass(frozen=True)
class Envelope:
    """One decoded record.

    `kind` is `None` when the record carried none of the recognized payload
    slots, which makes it an empty envelope.
    """

    kind: EnvelopeKind | None
    payload: Any = None

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> Envelope:
        """Build an envelope from the first recognized, non-null payload key of a JSON object."""
        for key, value in record.items():
            kind = _KINDS_BY_KEY.get(key)
            if kind is not None and value is not None:
                return cls(kind=kind, payload=value)
        return cls(kind=None)

    def to_record(self) -> dict[str, Any]:
        """Return the wire representation of this envelope."""
        if self.kind is None:
            return {}
        return {self.kind.value: self.payload}


def is_empty_envelope(envelope: Envelope | None) -> bool:
    """Return True when a decoded item is null or carries no payload."""
    return envelope is None or envelope.kind is None
