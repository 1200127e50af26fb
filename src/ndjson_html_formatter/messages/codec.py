"""Decoding and encoding of newline-delimited message records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
import logging
from typing import BinaryIO

import orjson

from ..errors import DataFormatError
from .envelope import Envelope

LOGGER = logging.getLogger(__name__)

UTF8_BOM = b"\xef\xbb\xbf"


class MessageCodec(ABC):
    """Turns a byte stream into envelopes and envelopes back into bytes."""

    @abstractmethod
    def decode(self, stream: BinaryIO, source_name: str = "<stream>") -> Iterator[Envelope | None]:
        """Lazily decode one item per record in `stream`.

        Yields `None` for records that are valid JSON but not a message object.

        Raises:
            DataFormatError: When a record cannot be parsed.
        """

    @abstractmethod
    def encode(self, envelope: Envelope) -> bytes:
        """Serialize one envelope into a single record without a trailing newline."""


class NdjsonMessageCodec(MessageCodec):
    """orjson-backed NDJSON codec; one JSON object per line."""

    def decode(self, stream: BinaryIO, source_name: str = "<stream>") -> Iterator[Envelope | None]:
        for line_number, raw_line in enumerate(stream, start=1):
            if line_number == 1:
                raw_line = raw_line.removeprefix(UTF8_BOM)
            if not raw_line.strip():
                continue
            try:
                record = orjson.loads(raw_line)
            except orjson.JSONDecodeError as exc:
                raise DataFormatError(f"Malformed JSON in {source_name} at line {line_number}: {exc}.") from exc
            if not isinstance(record, dict):
                LOGGER.debug("Non-object record in %s at line %d.", source_name, line_number)
                yield None
                continue
            yield Envelope.from_record(record)

    def encode(self, envelope: Envelope) -> bytes:
        return orjson.dumps(envelope.to_record())
