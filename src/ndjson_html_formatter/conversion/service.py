"""Service orchestration for batch NDJSON to HTML conversion."""

from __future__ import annotations

from collections.abc import Callable, Sequence
import logging
from pathlib import Path

from ..errors import FormatterError
from ..messages.codec import MessageCodec, NdjsonMessageCodec
from ..messages.renderer import RendererFactory, build_html_renderer_factory
from ..resolution.resolve_input import build_file_set, resolve_input_specification
from .convert import convert_ndjson_file, derive_output_path
from .merge import (
    build_merge_artifact_path,
    ensure_artifact_is_not_input,
    merge_ndjson_files,
    remove_merge_artifact,
)
from .schemas import BatchResult, ConversionOutcome, ResolutionFailure

LOGGER = logging.getLogger(__name__)


class BatchConversionService:
    """Coordinates resolution, optional merging, conversion, and cleanup.

    Every specification and every file is processed even when earlier ones
    fail; each failure is reported through `emit` and recorded in the
    returned `BatchResult`.
    """

    def __init__(
        self,
        emit: Callable[[str], None],
        codec: MessageCodec | None = None,
        renderer_factory: RendererFactory | None = None,
        output_directory: Path | None = None,
        merged_file_name: str | None = None,
        temp_dir: Path | None = None,
        working_directory: Path | None = None,
    ) -> None:
        self._emit = emit
        self._codec = codec or NdjsonMessageCodec()
        self._renderer_factory = renderer_factory or build_html_renderer_factory(self._codec)
        self._output_directory = output_directory
        self._merged_file_name = merged_file_name or None
        self._temp_dir = temp_dir
        self._working_directory = working_directory

    def run(self, specifications: Sequence[str]) -> BatchResult:
        """Convert every file denoted by `specifications` and return the accumulated result."""
        result = BatchResult()
        result.resolved_files = self._resolve(specifications, result)
        LOGGER.info("Resolved %d input files from %d specifications.", len(result.resolved_files), len(specifications))

        working_set = result.resolved_files
        try:
            if self._merged_file_name is not None:
                working_set = self._merge(result)
            for input_file_path in working_set:
                result.outcomes.append(self._convert(input_file_path))
        finally:
            if result.merge_artifact is not None:
                remove_merge_artifact(result.merge_artifact)

        LOGGER.info("Converted %d of %d files.", result.converted_count, len(result.outcomes))
        return result

    def _resolve(self, specifications: Sequence[str], result: BatchResult) -> list[Path]:
        resolved_groups: list[list[Path]] = []
        for specification in specifications:
            try:
                resolved_groups.append(resolve_input_specification(specification, self._working_directory))
            except (FormatterError, OSError) as exc:
                result.resolution_failures.append(ResolutionFailure(specification=specification, reason=str(exc)))
                self._report_failure(specification, exc)
        return build_file_set(resolved_groups)

    def _merge(self, result: BatchResult) -> list[Path]:
        assert self._merged_file_name is not None
        artifact_path = build_merge_artifact_path(self._merged_file_name, self._temp_dir)
        try:
            # Only a path that is not an input may be scheduled for deletion.
            ensure_artifact_is_not_input(result.resolved_files, artifact_path)
            result.merge_artifact = artifact_path
            return [merge_ndjson_files(result.resolved_files, artifact_path)]
        except FormatterError as exc:
            result.merge_failure = ResolutionFailure(specification=self._merged_file_name, reason=str(exc))
            self._report_failure(self._merged_file_name, exc)
            return []

    def _convert(self, input_file_path: Path) -> ConversionOutcome:
        output_file_path: Path | None = None
        try:
            output_file_path = derive_output_path(input_file_path, self._output_directory)
            envelope_count = convert_ndjson_file(
                input_file_path=input_file_path,
                output_file_path=output_file_path,
                codec=self._codec,
                renderer_factory=self._renderer_factory,
            )
        except Exception as exc:
            # Any failure, including one raised by the codec or renderer, is scoped to this file.
            LOGGER.debug("Conversion of %s failed.", input_file_path, exc_info=True)
            self._report_failure(str(input_file_path), exc)
            return ConversionOutcome(source_path=input_file_path, output_path=output_file_path, error=str(exc))

        self._emit(f"Conversion of {input_file_path} completed successfully.")
        return ConversionOutcome(
            source_path=input_file_path,
            output_path=output_file_path,
            envelope_count=envelope_count,
        )

    def _report_failure(self, item: str, exc: BaseException) -> None:
        self._emit(f"An error occurred while processing {item}.\n{exc}")
