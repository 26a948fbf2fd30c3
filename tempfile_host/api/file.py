"""
Upload to 0x0.st.

One multipart POST, field 'file', no retry and no timeout beyond the
requests default. The service answers in plain text: a link on success,
a human-readable message otherwise. Only the body shape decides which;
the HTTP status code is not looked at.
"""

import logging
import os
import re

import requests

from tempfile_host import config
from tempfile_host.errors import UploadRejected, UploadTransportError

logger = logging.getLogger(__name__)

_URL_RE = re.compile(r'https?://')


def classify(body: str) -> str:
    """Return the link in `body`, or raise UploadRejected with the raw body."""
    if _URL_RE.match(body):
        return body.strip()
    raise UploadRejected(body)


def upload(path, filename=None, user_agent=None, url=None, session=None) -> str:
    """
    POST the file at `path` and return the resulting link.

    Raises UploadTransportError if no response arrives, UploadRejected if
    the response body is not a link.
    """
    filename   = filename or os.path.basename(path)
    user_agent = user_agent or config.USER_AGENT
    url        = url or config.SERVICE_URL
    post       = session.post if session is not None else requests.post

    logger.debug('POST %s file=%s (%s)', url, filename, user_agent)
    try:
        with open(path, 'rb') as f:
            res = post(
                url,
                files={'file': (filename, f)},
                headers={'User-Agent': user_agent},
            )
    except requests.RequestException as e:
        raise UploadTransportError(str(e)) from e

    logger.debug('HTTP %s, %d bytes', res.status_code, len(res.content))
    return classify(res.text)
