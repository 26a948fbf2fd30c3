"""
Formatting helpers: sizes and minimal ANSI color.

Color decisions, first match wins:
  NO_COLOR set              off
  config "ansi": false      off
  FORCE_COLOR set           on (for tmux/screen/SSH setups that hide the tty)
  otherwise                 on only when the stream is a terminal
"""

import os
import sys

_STYLES = {
    'bold':   '1',
    'dim':    '2',
    'red':    '31',
    'green':  '32',
    'yellow': '33',
    'cyan':   '36',
}


def human_mib(n):
    """Whole MiB, rounded down: 537919488 → 513"""
    return n // 1024 // 1024


def human_size(n):
    """12 → '12 B', 3145728 → '3.0 MiB'"""
    for unit in ('B', 'KiB', 'MiB'):
        if n < 1024 or unit == 'MiB':
            return f'{n} {unit}' if unit == 'B' else f'{n:.1f} {unit}'
        n /= 1024


def _is_terminal(stream):
    try:
        return os.isatty(stream.fileno())
    except (AttributeError, OSError, ValueError):
        return getattr(stream, 'isatty', lambda: False)()


def color_enabled(stream=None) -> bool:
    if os.environ.get('NO_COLOR'):
        return False
    from tempfile_host import config
    if not config.enabled('ansi'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    return _is_terminal(stream if stream is not None else sys.stdout)


def style(text, *names, stream=None) -> str:
    """Wrap text in the named SGR styles, e.g. style('x', 'bold', 'red')."""
    if not names or not color_enabled(stream):
        return text
    codes = ';'.join(_STYLES[name] for name in names)
    return f'\033[{codes}m{text}\033[0m'


def _named(name):
    def paint(text, stream=None):
        return style(text, name, stream=stream)
    paint.__name__ = name
    return paint


green, red, yellow, cyan, bold, dim = (
    _named(n) for n in ('green', 'red', 'yellow', 'cyan', 'bold', 'dim')
)


def err(msg):
    """Print `ERROR: msg` to stderr, bold red when colored."""
    label = style('ERROR:', 'bold', 'red', stream=sys.stderr)
    print(f'{label} {msg}', file=sys.stderr)
