from __future__ import annotations

"""
Temporary File Writer.

Creates a uniquely named file in the system temp directory and fills it
with the given content. Callers only see a complete file: a failed write
removes whatever was written.
"""

import logging
import os
import tempfile
from typing import Optional, Tuple, Union

from vimbutil.domain.settings import UtilSettings

logger = logging.getLogger(__name__)


def create_tmp_file(
        content: Union[str, bytes],
        settings: Optional[UtilSettings] = None,
) -> Tuple[bool, Optional[str]]:
    """
    Create a temporary file holding content.

    The file is named '<project>-XXXXXXXX' and lives in the OS temp
    directory. It is left on disk on success; removing it is up to the
    caller.

    Args:
        content: Text (encoded with the settings encoding) or raw bytes.
        settings: Utility settings; defaults are used when omitted.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, path of the file). The
        path is None whenever the flag is False.
    """
    settings = settings or UtilSettings()
    try:
        data = content.encode(settings.encoding) if isinstance(content, str) else content
    except (LookupError, UnicodeError) as e:
        logger.error(f"Could not encode temporary file content as {settings.encoding}: {e}")
        return False, None

    try:
        fd, path = tempfile.mkstemp(prefix=settings.tmp_prefix)
    except OSError as e:
        logger.error(f"Could not create temporary file: {e}")
        return False, None

    try:
        written = os.write(fd, data)
    except OSError as e:
        logger.error(f"Could not write temporary file {path}: {e}")
        written = -1
    finally:
        os.close(fd)

    if written < len(data):
        _discard(path)
        if written >= 0:
            logger.error(f"Could not write temporary file {path}: short write")
        return False, None

    logger.debug(f"Temporary file created at {path}")
    return True, path


def _discard(path: str) -> None:
    try:
        os.unlink(path)
    except OSError as e:
        logger.warning(f"Could not remove temporary file {path}: {e}")
