"""Conversion of one NDJSON file into an HTML report."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import DataFormatError
from ..messages.codec import MessageCodec
from ..messages.envelope import is_empty_envelope
from ..messages.renderer import RendererFactory
from ..paths import HTML_SUFFIX

LOGGER = logging.getLogger(__name__)


def derive_output_path(input_file_path: Path, output_directory: Path | None = None) -> Path:
    """Return the `.html` path for an input file.

    The file keeps its base name; it lands in `output_directory` when given,
    else beside the input file.
    """
    directory = output_directory if output_directory is not None else input_file_path.parent
    return directory / f"{input_file_path.stem}{HTML_SUFFIX}"


def convert_ndjson_file(
    input_file_path: Path,
    output_file_path: Path,
    codec: MessageCodec,
    renderer_factory: RendererFactory,
) -> int:
    """Decode `input_file_path` and render every envelope into `output_file_path`.

    The output file is truncated first and left in place if conversion fails
    part-way.

    Returns:
        Number of envelopes rendered.

    Raises:
        DataFormatError: If a record is malformed, null, or an empty envelope.
        OSError: If either file cannot be opened, read, or written.
    """
    output_file_path.parent.mkdir(parents=True, exist_ok=True)
    envelope_count = 0
    with (
        output_file_path.open("w", encoding="utf-8") as output_handle,
        input_file_path.open("rb") as input_handle,
        renderer_factory(output_handle) as renderer,
    ):
        for envelope in codec.decode(input_handle, source_name=str(input_file_path)):
            if is_empty_envelope(envelope):
                raise DataFormatError(f"Empty envelope or non-NDJSON JSON data encountered in {input_file_path}.")
            renderer.write(envelope)
            envelope_count += 1

    LOGGER.info("Rendered %d envelopes from %s to %s.", envelope_count, input_file_path, output_file_path)
    return envelope_count
