"""Typed schemas used by the batch conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

SUCCESS_EXIT_CODE = 0
FAILURE_EXIT_CODE = -1


@dataclass(frozen=True)
class ResolutionFailure:
    """One input specification that could not be resolved."""

    specification: str
    reason: str


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of converting one file from the working set.

    `error` is `None` on success; `output_path` is `None` when the output
    path could not be derived.
    """

    source_path: Path
    output_path: Path | None
    envelope_count: int = 0
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Accumulated outcomes of one batch run.

    Failures only ever accumulate, so once a run has failed it stays failed.
    """

    resolved_files: list[Path] = field(default_factory=list)
    resolution_failures: list[ResolutionFailure] = field(default_factory=list)
    merge_failure: ResolutionFailure | None = None
    merge_artifact: Path | None = None
    outcomes: list[ConversionOutcome] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return (
            bool(self.resolution_failures)
            or self.merge_failure is not None
            or any(not outcome.succeeded for outcome in self.outcomes)
        )

    @property
    def exit_code(self) -> int:
        return FAILURE_EXIT_CODE if self.failed else SUCCESS_EXIT_CODE

    @property
    def converted_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)
