"""
tempfile_host/tests/conftest.py

Shared pytest fixtures for the tempfile-host test suite.
"""

import io
from unittest.mock import MagicMock, patch

import pytest

from tempfile_host import config


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path_factory, monkeypatch):
    """
    Redirect CONFIG_FILE and HISTORY_FILE into tmp_path for every test, so
    nothing reads or writes the real ~/.config/tempfile-host.
    """
    # Not under tmp_path: its name embeds the test name, which would leak
    # into printed paths and confuse output assertions.
    cfg_dir = tmp_path_factory.mktemp('cfg') / 'config'
    monkeypatch.setattr(config, 'CONFIG_DIR', cfg_dir)
    monkeypatch.setattr(config, 'CONFIG_FILE', cfg_dir / 'config.json')
    monkeypatch.setattr(config, 'HISTORY_FILE', cfg_dir / 'history.log')
    monkeypatch.setenv('NO_COLOR', '1')
    monkeypatch.delenv('FORCE_COLOR', raising=False)
    yield cfg_dir


@pytest.fixture(autouse=True)
def no_desktop_tools():
    """Pretend no clipboard/notification tool is installed unless a test says otherwise."""
    with patch('tempfile_host.desktop.shutil.which', return_value=None) as which:
        yield which


class FakeStdin:
    """Stand-in for sys.stdin: binary data behind .buffer plus isatty()."""

    def __init__(self, data=b'', tty=False):
        self.buffer = io.BytesIO(data)
        self._tty = tty

    def isatty(self):
        return self._tty


@pytest.fixture
def piped_stdin():
    return lambda data=b'': FakeStdin(data)


@pytest.fixture
def terminal_stdin():
    return FakeStdin(tty=True)


def fake_response(text, status_code=200):
    res = MagicMock()
    res.text = text
    res.content = text.encode()
    res.status_code = status_code
    return res


@pytest.fixture
def mock_post():
    """
    Patch requests.post in the uploader. Each call records the uploaded
    filename, bytes and the temp path it came from in mock_post.uploads.
    Set mock_post.reply to change the response body.
    """
    with patch('tempfile_host.api.file.requests.post') as post:
        post.uploads = []
        post.reply = 'https://0x0.st/Ab12.txt\n'
        post.status = 200

        def _post(url, files=None, headers=None, **kwargs):
            filename, f = files['file']
            post.uploads.append({
                'url': url,
                'filename': filename,
                'data': f.read(),
                'path': f.name,
                'headers': headers,
            })
            return fake_response(post.reply, post.status)

        post.side_effect = _post
        yield post
