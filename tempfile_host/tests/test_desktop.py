"""
tempfile_host/tests/test_desktop.py

Clipboard and notification lookups. subprocess.run is patched so no real
tool runs; shutil.which decides which tools "exist".
"""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from tempfile_host import desktop


def _which(*present):
    return lambda name: f'/usr/bin/{name}' if name in present else None


def _done(rc=0):
    return MagicMock(returncode=rc)


class TestFindClipboard:
    def test_none_installed(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which()):
            assert desktop.find_clipboard() is None

    def test_wayland_preferred(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('wl-copy', 'xclip')):
            clip = desktop.find_clipboard()
        assert clip.kind == 'Wayland'
        assert clip.argv == ['wl-copy']

    def test_x11_fallback(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('xclip')):
            clip = desktop.find_clipboard()
        assert clip.kind == 'X11'
        assert clip.argv == ['xclip', '-selection', 'clipboard']


class TestCopyToClipboard:
    def test_skips_silently_without_tool(self):
        with patch('tempfile_host.desktop.subprocess.run') as run:
            assert desktop.copy_to_clipboard('https://0x0.st/a') is None
        run.assert_not_called()

    def test_pipes_text_to_tool(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('wl-copy')), \
             patch('tempfile_host.desktop.subprocess.run', return_value=_done()) as run:
            assert desktop.copy_to_clipboard('https://0x0.st/a') == 'Wayland'
        assert run.call_args.args[0] == ['wl-copy']
        assert run.call_args.kwargs['input'] == b'https://0x0.st/a'

    def test_tool_failure_is_not_fatal(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('xclip')), \
             patch('tempfile_host.desktop.subprocess.run', return_value=_done(1)):
            assert desktop.copy_to_clipboard('x') is None

    @pytest.mark.parametrize('exc', [OSError('gone'), subprocess.TimeoutExpired('xclip', 3)])
    def test_tool_crash_is_not_fatal(self, exc):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('xclip')), \
             patch('tempfile_host.desktop.subprocess.run', side_effect=exc):
            assert desktop.copy_to_clipboard('x') is None


class TestNotify:
    def test_absent(self):
        with patch('tempfile_host.desktop.subprocess.run') as run:
            assert desktop.notify('t', 'b') is False
        run.assert_not_called()

    def test_sends(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('notify-send')), \
             patch('tempfile_host.desktop.subprocess.run', return_value=_done()) as run:
            assert desktop.notify('Upload Complete', 'link') is True
        argv = run.call_args.args[0]
        assert argv[1:3] == ['Upload Complete', 'link']
        assert desktop.NOTIFY_ICON in argv

    def test_failure_swallowed(self):
        with patch('tempfile_host.desktop.shutil.which', side_effect=_which('notify-send')), \
             patch('tempfile_host.desktop.subprocess.run', side_effect=OSError('no dbus')):
            assert desktop.notify('t', 'b') is False
