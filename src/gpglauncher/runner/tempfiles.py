"""Scoped temporary files for handing input text to gpg.

gpg reads the text to import, decrypt, encrypt or sign from a file path
argument, so each such call writes its input to a fresh temporary file
that only lives for the duration of the call.
"""

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Union

import structlog

logger = structlog.get_logger(__name__)

TEMP_FILE_SUFFIX = ".txt"


@contextmanager
def scoped_temp_file(
    prefix: str,
    text: str,
    directory: Optional[Union[str, Path]] = None,
) -> Iterator[Path]:
    """Write text to a uniquely named file and remove it on exit.

    The file is deleted whether the block returns normally, returns early
    or raises.

    Args:
        prefix: Leading part of the file name (e.g. "encrypted").
        text: Content written to the file as UTF-8.
        directory: Where to create the file; the system temp dir if None.

    Yields:
        Absolute path of the written file.
    """
    fd, name = tempfile.mkstemp(
        prefix=prefix,
        suffix=TEMP_FILE_SUFFIX,
        dir=str(directory) if directory is not None else None,
    )
    path = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        logger.debug("Created temp file", path=str(path))
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug("Removed temp file", path=str(path))
