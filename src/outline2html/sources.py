"""Load outline source text from a local file."""

from __future__ import annotations

import logging
from pathlib import Path

from outline2html.config import OUTLINE2HTML_SOURCE_ENCODING
from outline2html.exceptions import SourceNotAvailableError
from outline2html.file_utils import read_text_async

logger = logging.getLogger(__name__)


async def load_source_text(source: str | Path) -> str:
    """Read the outline text at ``source``.

    The file is decoded with ``OUTLINE2HTML_SOURCE_ENCODING`` (UTF-8 by
    default).

    Raises:
        SourceNotAvailableError: If the file does not exist, cannot be read
            or is not valid text in the configured encoding.
    """
    path = Path(source).expanduser()
    logger.debug("Reading source from %s", path)
    try:
        return await read_text_async(path, encoding=OUTLINE2HTML_SOURCE_ENCODING)
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceNotAvailableError(f"Cannot open file `{source}`: {exc}") from exc
