"""
Config and history for tempfile-host.

Preferences live in ~/.config/tempfile-host/config.json.
Every successful upload is appended to ~/.config/tempfile-host/history.log.
"""

import json
from datetime import datetime
from pathlib import Path

from tempfile_host.errors import HistoryWriteError

SERVICE_URL = 'https://0x0.st'
USER_AGENT = 'tempfile-host-script/2.2'
GUI_USER_AGENT = 'tempfile-host-gui/2.0'

MAX_SIZE_MB = 512
MAX_SIZE_BYTES = MAX_SIZE_MB * 1024 * 1024

STDIN_LABEL = '(stdin)'

CONFIG_DIR = Path.home() / '.config' / 'tempfile-host'
CONFIG_FILE = CONFIG_DIR / 'config.json'
HISTORY_FILE = CONFIG_DIR / 'history.log'

_TIMESTAMP = '%Y-%m-%d %H:%M:%S'


def load(path=None):
    """Load config from disk. Returns empty dict if missing."""
    p = Path(path) if path else CONFIG_FILE
    if p.exists():
        return json.loads(p.read_text())
    return {}


def save(cfg, path=None):
    """Save config to disk, creating parent dirs if needed."""
    p = Path(path) if path else CONFIG_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(cfg, indent=2) + '\n')


def enabled(key, default=True):
    """Boolean preference lookup. A broken config file counts as missing."""
    try:
        cfg = load()
    except (OSError, ValueError):
        return default
    if not isinstance(cfg, dict):
        return default
    return bool(cfg.get(key, default))


# ── Upload history ────────────────────────────────────────────────────────────

def record_upload(label, url, path=None, now=None):
    """
    Append one `[timestamp] label -> url` line to the history log.

    Creates the log and its directory on first use. Returns the log path.
    Raises HistoryWriteError if the line cannot be written.
    """
    p = Path(path) if path else HISTORY_FILE
    stamp = (now or datetime.now()).strftime(_TIMESTAMP)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        with p.open('a', encoding='utf-8') as f:
            f.write(f'[{stamp}] {label} -> {url}\n')
    except OSError as e:
        raise HistoryWriteError(f'Could not write history to {p}: {e}') from e
    return p


def load_history(path=None, limit=None):
    """Return history lines, oldest first. Missing log gives []."""
    p = Path(path) if path else HISTORY_FILE
    if not p.exists():
        return []
    lines = p.read_text(encoding='utf-8', errors='replace').splitlines()
    if limit is not None:
        lines = lines[-limit:] if limit > 0 else []
    return lines
