"""Writing generated source to disk."""

import logging
from pathlib import Path

from upath import UPath

from sendgen.exceptions import OutputError

logger = logging.getLogger(__name__)


class SourceWriter:
    """Writes generated source text to files.

    Example:
        >>> writer = SourceWriter()
        >>> writer.write(source, 'wrapper/send.go')
    """

    def write(self, content: str, path: UPath | Path | str) -> UPath:
        """Write ``content`` to ``path``, creating parent directories.

        Raises:
            OutputError: If the file cannot be written.
        """
        path = UPath(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e)

        logger.debug(f'Wrote {len(content)} characters to {path}')
        return path
