"""
tempfile-host --history [N] — print the last N uploads from the history log.
"""

from tempfile_host import config
from tempfile_host.format import dim

DEFAULT_LIMIT = 10


def cmd_history(args):
    limit = getattr(args, 'history', None)
    if limit is None:
        limit = DEFAULT_LIMIT
    lines = config.load_history(limit=limit)
    if not lines:
        print('  (no uploads yet)')
        return
    for line in lines:
        print(line)
    print(dim(f'  {config.HISTORY_FILE}'))
