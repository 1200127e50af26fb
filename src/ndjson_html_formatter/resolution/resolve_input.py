"""Input path resolution helpers for NDJSON conversion."""

from __future__ import annotations

from collections.abc import Iterable
import glob
import logging
from pathlib import Path

from ..errors import ResolutionError
from ..paths import DIRECTORY_FILE_PATTERN

LOGGER = logging.getLogger(__name__)


def resolve_input_specification(specification: str, working_directory: Path | None = None) -> list[Path]:
    """Resolve one input specification into concrete file paths.

    Args:
        specification: A file path, a directory path, or a glob pattern.
        working_directory: Base for glob patterns. Defaults to the process
            working directory, not the specification's own parent.

    Returns:
        Matching files in filesystem enumeration order.

    Raises:
        ResolutionError: If the specification matches no files.
    """
    candidate = Path(specification)

    if candidate.is_dir():
        matches = [path for path in candidate.rglob(DIRECTORY_FILE_PATTERN) if path.is_file()]
        if not matches:
            raise ResolutionError(f"No ndjson files found in directory: {specification}")
        LOGGER.info("Found %d ndjson files in %s.", len(matches), specification)
        return matches

    if candidate.is_file():
        return [candidate]

    base_directory = working_directory or Path.cwd()
    matches = [
        base_directory / match
        for match in glob.glob(specification, root_dir=base_directory, recursive=True)
        if (base_directory / match).is_file()
    ]
    if not matches:
        raise ResolutionError(f"File or directory: {specification} not found.")
    LOGGER.info("Pattern %s matched %d files.", specification, len(matches))
    return matches


def build_file_set(resolved_groups: Iterable[Iterable[Path]]) -> list[Path]:
    """Concatenate resolved paths and drop later duplicates, keeping first-seen order."""
    return list(dict.fromkeys(path for group in resolved_groups for path in group))
