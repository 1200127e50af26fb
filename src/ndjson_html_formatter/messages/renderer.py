"""HTML report rendering for decoded envelopes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Callable
import html
import logging
from types import TracebackType
from typing import TextIO

from .codec import MessageCodec
from .envelope import Envelope, EnvelopeKind

LOGGER = logging.getLogger(__name__)

DEFAULT_REPORT_TITLE = "Cucumber"

EnvelopeSerializer = Callable[[TextIO, Envelope], None]

_DOCUMENT_PROLOGUE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
</head>
<body>
<div id="content"></div>
<script>
window.CUCUMBER_MESSAGES = [
"""

_DOCUMENT_EPILOGUE = """</body>
</html>
"""


class EnvelopeRenderer(ABC):
    """Incrementally incorporates envelopes into one output document."""

    @abstractmethod
    def write(self, envelope: Envelope) -> None:
        """Render one envelope into the document."""

    @abstractmethod
    def close(self) -> None:
        """Finalize the document once the input sequence has ended."""

    def __enter__(self) -> EnvelopeRenderer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if exc_type is None:
            self.close()
            return
        # The in-flight exception stays the one reported for this file.
        try:
            self.close()
        except Exception as close_exc:
            LOGGER.warning("Could not finalize report after %s: %s", exc_type.__name__, close_exc)


RendererFactory = Callable[[TextIO], EnvelopeRenderer]


class HtmlReportRenderer(EnvelopeRenderer):
    """Embeds envelopes as a JSON array into a standalone HTML page.

    The prologue is written lazily before the first envelope (or on close), so
    a renderer that never receives input still produces a complete document.
    """

    def __init__(self, sink: TextIO, serialize: EnvelopeSerializer, title: str = DEFAULT_REPORT_TITLE) -> None:
        self._sink = sink
        self._serialize = serialize
        self._title = title
        self._kind_counts: Counter[EnvelopeKind] = Counter()
        self._prologue_written = False
        self._first_message = True
        self._closed = False

    def write(self, envelope: Envelope) -> None:
        if self._closed:
            raise ValueError("Cannot write to a closed renderer.")
        self._write_prologue()
        if not self._first_message:
            self._sink.write(",\n")
        self._serialize(self._sink, envelope)
        self._first_message = False
        if envelope.kind is not None:
            self._kind_counts[envelope.kind] += 1

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._write_prologue()
        self._sink.write("\n];\n</script>\n")
        self._sink.write(self._render_summary())
        self._sink.write(_DOCUMENT_EPILOGUE)
        self._sink.flush()
        LOGGER.debug("Rendered %d envelopes.", sum(self._kind_counts.values()))

    def _write_prologue(self) -> None:
        if self._prologue_written:
            return
        self._sink.write(_DOCUMENT_PROLOGUE.format(title=html.escape(self._title)))
        self._prologue_written = True

    def _render_summary(self) -> str:
        rows = "".join(
            f"<tr><td>{html.escape(kind.value)}</td><td>{self._kind_counts[kind]}</td></tr>\n"
            for kind in EnvelopeKind
            if self._kind_counts[kind]
        )
        return (
            '<table class="message-summary">\n'
            "<thead><tr><th>Message</th><th>Count</th></tr></thead>\n"
            f"<tbody>\n{rows}</tbody>\n"
            "</table>\n"
        )


def build_envelope_serializer(codec: MessageCodec) -> EnvelopeSerializer:
    """Return a sink callback writing one envelope as script-safe JSON text."""

    def _serialize(sink: TextIO, envelope: Envelope) -> None:
        # `</` would terminate the surrounding <script> element.
        sink.write(codec.encode(envelope).decode("utf-8").replace("</", "<\\/"))

    return _serialize


def build_html_renderer_factory(codec: MessageCodec, title: str = DEFAULT_REPORT_TITLE) -> RendererFactory:
    """Return a factory producing HTML renderers that serialize with `codec`."""
    serializer = build_envelope_serializer(codec)

    def _factory(sink: TextIO) -> EnvelopeRenderer:
        return HtmlReportRenderer(sink, serialize=serializer, title=title)

    return _factory
