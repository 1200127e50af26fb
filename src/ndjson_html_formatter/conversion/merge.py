"""Merging of several NDJSON files into one intermediate stream."""

from __future__ import annotations

from collections.abc import Sequence
import logging
from pathlib import Path

from ..errors import MergeError
from ..messages.codec import UTF8_BOM
from ..paths import NDJSON_SUFFIX, get_default_temp_dir

LOGGER = logging.getLogger(__name__)


def build_merge_artifact_path(merged_file_name: str, temp_dir: Path | None = None) -> Path:
    """Return the intermediate NDJSON path for a merged-output name.

    Only the base name of `merged_file_name` is used; its directory and
    extension are dropped.
    """
    return (temp_dir or get_default_temp_dir()) / f"{Path(merged_file_name).stem}{NDJSON_SUFFIX}"


def ensure_artifact_is_not_input(input_file_paths: Sequence[Path], artifact_path: Path) -> None:
    """Refuse an intermediate path that would overwrite one of the inputs.

    Raises:
        MergeError: If `artifact_path` resolves to an input file.
    """
    resolved_artifact = artifact_path.resolve()
    for input_file_path in input_file_paths:
        if input_file_path.resolve() == resolved_artifact:
            raise MergeError(
                f"Merge intermediate {artifact_path} is also an input file ({input_file_path}); "
                "choose a different --mergedFile name or temp directory."
            )


def merge_ndjson_files(input_file_paths: Sequence[Path], artifact_path: Path) -> Path:
    """Concatenate the non-blank lines of all inputs, in order, into `artifact_path`.

    Lines are copied verbatim apart from a leading UTF-8 byte-order mark on
    each input; malformed records are left for the decoder.

    Raises:
        MergeError: If `artifact_path` is one of the inputs, an input cannot be
            read, or the artifact cannot be written.
    """
    ensure_artifact_is_not_input(input_file_paths, artifact_path)
    kept_lines = 0
    dropped_lines = 0
    try:
        artifact_path.parent.mkdir(parents=True, exist_ok=True)
        with artifact_path.open("wb") as output_handle:
            for input_file_path in input_file_paths:
                with input_file_path.open("rb") as input_handle:
                    for line_number, raw_line in enumerate(input_handle, start=1):
                        if line_number == 1:
                            raw_line = raw_line.removeprefix(UTF8_BOM)
                        if not raw_line.strip():
                            dropped_lines += 1
                            continue
                        output_handle.write(raw_line.rstrip(b"\r\n"))
                        output_handle.write(b"\n")
                        kept_lines += 1
    except OSError as exc:
        raise MergeError(f"Failed to merge input files into {artifact_path}: {exc}") from exc

    LOGGER.info(
        "Merged %d files into %s (%d lines kept, %d blank lines dropped).",
        len(input_file_paths),
        artifact_path,
        kept_lines,
        dropped_lines,
    )
    return artifact_path


def remove_merge_artifact(artifact_path: Path) -> None:
    """Delete the intermediate file; failures are logged and otherwise ignored."""
    try:
        artifact_path.unlink(missing_ok=True)
    except OSError as exc:
        LOGGER.warning("Could not remove merge artifact %s: %s", artifact_path, exc)
