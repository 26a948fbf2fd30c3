"""
Input resolution and size validation.

Input comes from one of two places:
  tempfile-host notes.txt        the named file, label 'notes.txt'
  echo hi | tempfile-host        stdin copied to a private temp file,
                                 label '(stdin)'

The upload needs a named, seekable file, so piped data is materialised
in full before anything touches the network. The temp file belongs to
the `with resolve_input(...)` block and is removed when it exits.
"""

import logging
import os
import shutil
import sys
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass

from tempfile_host import config
from tempfile_host.errors import FileNotFound, OversizeInput, UsageError

logger = logging.getLogger(__name__)

CHUNK = 256 * 1024  # 256 KB stdin copy chunks


@dataclass
class InputSource:
    path: str
    label: str
    piped: bool = False

    @property
    def size(self) -> int:
        return os.path.getsize(self.path)

    @property
    def filename(self) -> str:
        """Name sent to the server with the file bytes."""
        return os.path.basename(self.path)


@contextmanager
def resolve_input(target=None, stdin=None):
    """
    Yield an InputSource for `target`, or for piped stdin when target is None.

    Raises FileNotFound when target is not a regular file, UsageError when
    there is no target and stdin is an interactive terminal.
    """
    if target is not None:
        if not os.path.isfile(target):
            raise FileNotFound(target)
        yield InputSource(path=target, label=target)
        return

    stdin = stdin if stdin is not None else sys.stdin
    if stdin is None or stdin.isatty():
        raise UsageError()

    tmp = tempfile.NamedTemporaryFile(prefix='tempfile-host-', delete=False)
    try:
        try:
            shutil.copyfileobj(getattr(stdin, 'buffer', stdin), tmp, CHUNK)
        finally:
            tmp.close()
        logger.debug('stdin copied to %s (%d bytes)', tmp.name, os.path.getsize(tmp.name))
        yield InputSource(path=tmp.name, label=config.STDIN_LABEL, piped=True)
    finally:
        try:
            os.unlink(tmp.name)
        except FileNotFoundError:
            pass


def check_size(source, limit=None):
    """Raise OversizeInput if the input is larger than `limit` bytes (inclusive ceiling)."""
    limit = config.MAX_SIZE_BYTES if limit is None else limit
    size = source.size
    if size > limit:
        raise OversizeInput(size, limit)
    return source
