"""Local configuration for outline2html."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SOURCE_ENCODING = "utf-8"

OUTLINE2HTML_LOG_LEVEL = os.getenv("OUTLINE2HTML_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
OUTLINE2HTML_SOURCE_ENCODING = os.getenv("OUTLINE2HTML_SOURCE_ENCODING", DEFAULT_SOURCE_ENCODING)
