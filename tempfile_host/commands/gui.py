"""
tempfile-host-gui — pick a file in a dialog and upload it.

Same pipeline as the CLI with dialogs in place of terminal output:
file selection, size check, upload behind a progress window, then a
result dialog. Cancelling the file selection exits 0.
"""

import logging
import os
import sys

from tempfile_host import api, config, desktop, dialogs
from tempfile_host.errors import (OversizeInput, TempfileHostError,
                                  UploadRejected, UploadTransportError)
from tempfile_host.format import human_mib
from tempfile_host.source import InputSource, check_size

logger = logging.getLogger(__name__)


def cmd_gui(args=None) -> int:
    if not dialogs.find_zenity():
        print("ERROR: Dependency 'zenity' not found.", file=sys.stderr)
        return 1

    path = dialogs.select_file()
    if path is None:
        return 0

    logger.debug('selected %s', path)
    name = os.path.basename(path)
    source = InputSource(path=path, label=f'(GUI) {name}')

    try:
        return _upload(source, name)
    except TempfileHostError as e:
        dialogs.error('Error', dialogs.markup(e), width=400)
        return 1


def _upload(source, name) -> int:
    if not os.path.isfile(source.path):
        dialogs.error('Validation Error', f'File <b>{dialogs.markup(name)}</b> not found.')
        return 1

    try:
        check_size(source)
    except OversizeInput as e:
        dialogs.error(
            'Validation Error',
            f'The file <b>{dialogs.markup(name)}</b> is too large '
            f'({human_mib(e.size)} MiB).\n'
            f'The service limit is {config.MAX_SIZE_MB} MiB.',
        )
        return 1

    try:
        with dialogs.Progress(f'Uploading <b>{dialogs.markup(name)}</b>...\nPlease wait.'):
            link = api.upload(source.path, filename=source.filename,
                              user_agent=config.GUI_USER_AGENT)
    except (UploadRejected, UploadTransportError) as e:
        response = e.body if isinstance(e, UploadRejected) else str(e)
        dialogs.error(
            'Upload Failed',
            'An error occurred while trying to upload the file.\n\n'
            f'<b>Server response:</b>\n{dialogs.markup(response.rstrip())}',
            width=400,
        )
        return 1

    desktop.copy_to_clipboard(link)
    config.record_upload(source.label, link)

    safe = dialogs.markup(link)
    dialogs.info(
        'Upload Complete!',
        'File uploaded successfully!\n\n'
        f'<b>Link:</b> <a href="{safe}">{safe}</a>\n\n'
        'The link has been copied to your clipboard.',
        width=500,
    )
    return 0
