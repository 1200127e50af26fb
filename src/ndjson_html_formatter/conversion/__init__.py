"""Batch conversion pipeline: merging, per-file conversion, orchestration."""

from .convert import convert_ndjson_file, derive_output_path
from .merge import build_merge_artifact_path, merge_ndjson_files, remove_merge_artifact
from .schemas import BatchResult, ConversionOutcome, ResolutionFailure
from .service import BatchConversionService

__all__ = [
    "BatchConversionService",
    "BatchResult",
    "ConversionOutcome",
    "ResolutionFailure",
    "build_merge_artifact_path",
    "convert_ndjson_file",
    "derive_output_path",
    "merge_ndjson_files",
    "remove_merge_artifact",
]
