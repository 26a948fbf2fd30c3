"""
Optional desktop integrations: clipboard and notifications.

Each tool is looked up on PATH at call time. A missing tool is a normal
outcome, and a tool that fails is ignored. Nothing here ever raises.
"""

import logging
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

# Preference order: Wayland first, then X11.
_CLIPBOARDS = (
    ('Wayland', ['wl-copy']),
    ('X11',     ['xclip', '-selection', 'clipboard']),
)

NOTIFY_ICON = 'network-transmit-receive'


@dataclass
class Clipboard:
    kind: str
    argv: list


def find_clipboard():
    """Return the preferred clipboard tool on PATH, or None."""
    for kind, argv in _CLIPBOARDS:
        if shutil.which(argv[0]):
            return Clipboard(kind, argv)
    return None


def copy_to_clipboard(text: str):
    """Copy text to the clipboard. Returns 'Wayland'/'X11', or None if skipped."""
    clip = find_clipboard()
    if clip is None:
        logger.debug('no clipboard tool found')
        return None
    try:
        proc = subprocess.run(clip.argv, input=text.encode(), timeout=3)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug('%s failed: %s', clip.argv[0], e)
        return None
    if proc.returncode != 0:
        logger.debug('%s exited %d', clip.argv[0], proc.returncode)
        return None
    return clip.kind


def find_notifier():
    return shutil.which('notify-send')


def notify(title: str, body: str) -> bool:
    """Show a desktop notification if notify-send is installed."""
    notifier = find_notifier()
    if notifier is None:
        return False
    try:
        proc = subprocess.run([notifier, title, body, '-i', NOTIFY_ICON], timeout=5)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug('notify-send failed: %s', e)
        return False
    return proc.returncode == 0
