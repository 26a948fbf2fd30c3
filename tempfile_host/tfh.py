#!/usr/bin/env python3
"""
tempfile-host — upload files or piped data to 0x0.st.

  tempfile-host notes.txt        upload a file  →  https://0x0.st/Ab12.txt
  echo "text" | tempfile-host    upload stdin
  tempfile-host --history        last uploads from the history log
  tempfile-host-gui              pick a file in a dialog and upload it

The link is copied to the clipboard (wl-copy or xclip), announced with
notify-send when available, and logged to ~/.config/tempfile-host/history.log.
"""

import argparse
import logging
import os
import sys

from tempfile_host import config
from tempfile_host.errors import TempfileHostError, UsageError
from tempfile_host.format import bold, err


def _usage(prog):
    return (
        f'{bold("Usage:")}\n'
        f'  {prog} <file_path>\n'
        f'  or\n'
        f'  echo "text" | {prog}'
    )


class _Parser(argparse.ArgumentParser):
    """Bad command lines exit 1, like every other usage failure."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser():
    from tempfile_host import __version__

    parser = _Parser(
        prog='tempfile-host',
        description='Upload a file or piped data to 0x0.st and copy the link.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
examples:
  tempfile-host report.pdf        upload a file
  echo "hello" | tempfile-host    upload stdin
  tempfile-host --history 20      show the last 20 uploads

notes:
  Files up to {config.MAX_SIZE_MB} MiB. Files on 0x0.st may be removed at any
  time (typically after 30-365 days of no access).
""",
    )
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('file', nargs='?', default=None,
                        help='File to upload (omit to read piped stdin)')
    parser.add_argument('--no-notify', action='store_true',
                        help='Do not send a desktop notification')
    parser.add_argument('--history', nargs='?', type=int, const=10, default=None,
                        metavar='N', help='Show the last N uploads (default 10) and exit')
    parser.add_argument('--debug', action='store_true',
                        help='Log request details to stderr')
    return parser


def _parse(parser, argv):
    """
    Parse argv. A lone unrecognised argument naming an existing file is
    taken as the file, so `tempfile-host -notes.txt` uploads -notes.txt.
    """
    args, extra = parser.parse_known_args(argv)
    if args.file is None and len(extra) == 1 and os.path.isfile(extra[0]):
        args.file = extra[0]
    elif extra:
        parser.error(f"unrecognized arguments: {' '.join(extra)}")
    return args


def _setup_logging(debug):
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s %(name)s %(levelname)s: %(message)s',
            stream=sys.stderr,
        )


def main(argv=None, stdin=None):
    from tempfile_host.commands.history import cmd_history
    from tempfile_host.commands.upload import cmd_up

    parser = build_parser()
    args = _parse(parser, argv)
    _setup_logging(args.debug)

    try:
        if args.history is not None:
            cmd_history(args)
        else:
            cmd_up(args, stdin=stdin)
    except UsageError:
        print(_usage(parser.prog))
        sys.exit(1)
    except TempfileHostError as e:
        err(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        sys.exit(130)


def gui_main(argv=None):
    from tempfile_host.commands.gui import cmd_gui

    parser = _Parser(
        prog='tempfile-host-gui',
        description='Pick a file in a dialog and upload it to 0x0.st.',
    )
    parser.add_argument('--debug', action='store_true',
                        help='Log request details to stderr')
    args = parser.parse_args(argv)
    _setup_logging(args.debug)

    try:
        sys.exit(cmd_gui(args))
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == '__main__':
    main()
