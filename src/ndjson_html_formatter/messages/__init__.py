"""Message codec and report rendering collaborators."""

from .codec import MessageCodec, NdjsonMessageCodec
from .envelope import Envelope, EnvelopeKind, is_empty_envelope
from .renderer import EnvelopeRenderer, HtmlReportRenderer, build_html_renderer_factory

__all__ = [
    "Envelope",
    "EnvelopeKind",
    "EnvelopeRenderer",
    "HtmlReportRenderer",
    "MessageCodec",
    "NdjsonMessageCodec",
    "build_html_renderer_factory",
    "is_empty_envelope",
]
