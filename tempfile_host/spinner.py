"""
tempfile_host/spinner.py

Status line shown on stderr while the upload request blocks:

      ⣾  Sending notes.txt (3.0 MiB)  4s

The line is redrawn from a daemon thread and erased when the block ends,
so the summary that follows on stdout starts on a clean line. Nothing is
drawn when the stream is not a terminal.

Usage:
    with UploadStatus(source.label, source.size):
        link = api.upload(source.path)
"""

import sys
import threading
import time

from tempfile_host.format import dim, human_size

_FRAMES = '⣾⣽⣻⢿⡿⣟⣯⣷'
_TICK = 0.1  # seconds between redraws

_ERASE = '\r\033[K'


class UploadStatus:
    def __init__(self, label: str, size=None, stream=None):
        self.label   = label
        self.size    = size
        self.stream  = stream if stream is not None else sys.stderr
        self._done   = threading.Event()
        self._worker = None
        self._t0     = None

    def __enter__(self):
        if self.stream.isatty():
            self._t0 = time.monotonic()
            self._worker = threading.Thread(target=self._run, daemon=True)
            self._worker.start()
        return self

    def __exit__(self, *_):
        if self._worker is None:
            return
        self._done.set()
        self._worker.join()
        self._worker = None
        self.stream.write(_ERASE)
        self.stream.flush()

    def render(self, tick: int, elapsed: float) -> str:
        """One frame of the status line, without the leading erase."""
        text = f'Sending {self.label}'
        if self.size is not None:
            text += f' ({human_size(self.size)})'
        frame = dim(_FRAMES[tick % len(_FRAMES)], stream=self.stream)
        return f'  {frame}  {text}  {int(elapsed)}s'

    def _run(self):
        tick = 0
        while not self._done.wait(_TICK):
            self.stream.write(_ERASE + self.render(tick, time.monotonic() - self._t0))
            self.stream.flush()
            tick += 1
