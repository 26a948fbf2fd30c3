"""
tempfile-host — upload a file or piped data.

  tempfile-host notes.txt          upload a file
  echo "hello" | tempfile-host     upload stdin
  tempfile-host --no-notify x.png  skip the desktop notification
"""

import logging

from tempfile_host import api, config, desktop
from tempfile_host.format import bold, cyan, green, style, yellow
from tempfile_host.source import check_size, resolve_input
from tempfile_host.spinner import UploadStatus

logger = logging.getLogger(__name__)

RETENTION_NOTE = ('ℹ️  Note: Files on 0x0.st may be removed at any time '
                  '(typically after 30-365 days of no access).')


def cmd_up(args, stdin=None):
    target = getattr(args, 'file', None)

    with resolve_input(target, stdin=stdin) as source:
        # Piped input is not held to the size ceiling; only file arguments are.
        if not source.piped:
            check_size(source)
        else:
            logger.debug('size check skipped for piped input (%d bytes)', source.size)

        print(yellow(f'▶ Sending {source.label}...'))
        print(yellow(f'📤 Uploading to {config.SERVICE_URL}...'))

        with UploadStatus(source.label, source.size):
            link = api.upload(source.path, filename=source.filename,
                              user_agent=config.USER_AGENT)

    _on_success(link, source.label, notify=not getattr(args, 'no_notify', False))


def _on_success(link, label, notify=True):
    print()
    print(style('✔ Upload complete!', 'bold', 'green'))
    print(f'  {bold("Link:")} {green(link)}')
    print()
    print(cyan(RETENTION_NOTE))

    kind = desktop.copy_to_clipboard(link)
    if kind:
        print(yellow(f'📋 Link copied to clipboard ({kind}).'))

    if notify and config.enabled('notify'):
        desktop.notify('Upload Complete', f'The link has been copied:\n{link}')

    path = config.record_upload(label, link)
    print(f'{yellow("📜 Link saved to:")} {path}')
