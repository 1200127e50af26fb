"""Shared path settings for the NDJSON HTML formatter."""

from __future__ import annotations

import os
from pathlib import Path
import tempfile

NDJSON_SUFFIX = ".ndjson"
HTML_SUFFIX = ".html"
DIRECTORY_FILE_PATTERN = f"*{NDJSON_SUFFIX}"
TEMP_DIR_ENV_VAR = "NDJSON_HTML_FORMATTER_TMPDIR"


def get_default_temp_dir() -> Path:
    """Return the temp-files area used for merge artifacts."""
    override = os.environ.get(TEMP_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path(tempfile.gettempdir())
