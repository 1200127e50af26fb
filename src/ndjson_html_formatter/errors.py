"""Custom exceptions for NDJSON to HTML batch conversion failures."""


class FormatterError(Exception):
    """Base exception for conversion pipeline errors."""


class ResolutionError(FormatterError):
    """Raised when an input specification matches no files."""


class DataFormatError(FormatterError):
    """Raised when a decoded record is malformed or a structurally empty envelope."""


class MergeError(FormatterError):
    """Raised when input files cannot be merged into the intermediate NDJSON file."""
