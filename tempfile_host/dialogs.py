"""
tempfile_host/dialogs.py

Zenity dialogs for the GUI variant. Each call runs zenity as a child
process; the dialog text uses Pango markup, so caller-supplied strings
are escaped with markup().

Usage:
    path = select_file()
    with Progress("Uploading <b>x.png</b>..."):
        link = slow_upload()
    info("Upload Complete!", "...")
"""

import html
import logging
import shutil
import subprocess

logger = logging.getLogger(__name__)


def find_zenity():
    return shutil.which('zenity')


def markup(text) -> str:
    """Escape text for a zenity --text argument."""
    return html.escape(str(text), quote=False)


def _zenity(*args):
    return subprocess.run(['zenity', *args], capture_output=True, text=True)


def select_file(title='Select a file to upload'):
    """Return the chosen path, or None if the dialog was cancelled or closed."""
    proc = _zenity('--file-selection', f'--title={title}')
    if proc.returncode != 0:
        return None
    return proc.stdout.rstrip('\n') or None


def error(title, text, width=None):
    args = ['--error', f'--title={title}', f'--text={text}']
    if width:
        args.append(f'--width={width}')
    _zenity(*args)


def info(title, text, width=None):
    args = ['--info', f'--title={title}', f'--text={text}']
    if width:
        args.append(f'--width={width}')
    _zenity(*args)


class Progress:
    """
    Pulsating progress window shown for the length of a `with` block.

    The window is purely cosmetic: closing it does not interrupt the work
    in the block. It is terminated on every exit from the block, including
    exceptions and KeyboardInterrupt.
    """

    def __init__(self, text: str, title: str = 'Uploading File'):
        self._text  = text
        self._title = title
        self._proc  = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *_):
        self.stop()

    def start(self):
        # stdin stays open: zenity --auto-close would close on EOF.
        self._proc = subprocess.Popen(
            ['zenity', '--progress', f'--title={self._title}',
             f'--text={self._text}', '--pulsate', '--auto-close', '--no-cancel'],
            stdin=subprocess.PIPE,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        logger.debug('progress window pid %d', self._proc.pid)

    def stop(self):
        if self._proc is None:
            return
        proc, self._proc = self._proc, None
        if proc.poll() is None:
            proc.terminate()
        try:
            proc.stdin.close()
        except OSError:
            pass
        try:
            proc.wait(timeout=5)
        except subprocess.TimeoutExpired:
            proc.kill()
            proc.wait()
