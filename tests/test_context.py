from evnt.context import StorageContext
from evnt.storeapi import StorageException
from pathlib import Path
from unittest import mock
import tempfile
import os

import pytest


def test_context_paths():
    context = StorageContext('/tmp/nonexistent/evnt')

    assert context.data_dir == '/tmp/nonexistent/evnt'
    assert context.events_dir == os.path.join('/tmp/nonexistent/evnt', 'events')
    assert context.event_path('42') == os.path.join('/tmp/nonexistent/evnt', 'events', '42')
    assert not os.path.exists('/tmp/nonexistent/evnt')


def test_context_accepts_path_like():
    context = StorageContext(Path('/tmp/some') / 'dir')
    assert context.data_dir == os.path.join('/tmp/some', 'dir')

    context = StorageContext(b'/tmp/bytes')
    assert context.data_dir == '/tmp/bytes'


def test_ensure_directories():
    with tempfile.TemporaryDirectory() as tmpdir:
        context = StorageContext(os.path.join(tmpdir, 'a', 'b'))

        context.ensure_directories()

        assert os.path.isdir(context.data_dir)
        assert os.path.isdir(context.events_dir)


def test_ensure_directories_twice():
    with tempfile.TemporaryDirectory() as tmpdir:
        context = StorageContext(tmpdir)

        context.ensure_directories()
        with open(context.event_path('1'), 'wb') as f:
            f.write(b'data')
        context.ensure_directories()

        assert os.listdir(tmpdir) == ['events']
        assert os.listdir(context.events_dir) == ['1']


def test_ensure_directories_fails():
    with tempfile.TemporaryDirectory() as tmpdir:
        blocker = os.path.join(tmpdir, 'file')
        with open(blocker, 'w') as f:
            f.write('not a directory')
        context = StorageContext(blocker)

        with pytest.raises(StorageException) as exc:
            context.ensure_directories()

        assert exc.value.path == context.events_dir
        assert context.events_dir in str(exc.value)
        assert isinstance(exc.value.__cause__, OSError)


@mock.patch('os.makedirs')
def test_ensure_directories_permission_error(m_makedirs):
    m_makedirs.side_effect = PermissionError(13, 'Permission denied')
    context = StorageContext('/root/forbidden')

    with pytest.raises(StorageException) as exc:
        context.ensure_directories()

    assert isinstance(exc.value.__cause__, PermissionError)
    assert m_makedirs.call_count == 1
