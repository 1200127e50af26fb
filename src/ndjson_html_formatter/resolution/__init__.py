"""Input specification resolution."""

from .resolve_input import build_file_set, resolve_input_specification

__all__ = ["build_file_set", "resolve_input_specification"]
