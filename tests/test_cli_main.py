from unittest import mock
from evnt.cli.__main__ import main, format_error
from evnt.metadata import version
from evnt.storeapi import StorageException
import evnt.cli.init
import evnt.cli.add
import evnt.cli.listing
import evnt.cli.delete
import tempfile
import io
import os
import logging


@mock.patch('sys.stdout', new_callable=io.StringIO)
def test_cli_main_version(fake_out):
    assert main(['-v']) == 0
    assert fake_out.getvalue() == 'evnt %s\n' % version


@mock.patch.object(logging, 'basicConfig')
@mock.patch.object(evnt.cli.init, 'run_init')
def test_cli_main_verbose(m_run_init, m_basicConfig):
    main(['--verbose', 'init'])

    assert m_basicConfig.call_count == 1
    assert m_basicConfig.call_args[1]['level'] == logging.DEBUG


@mock.patch('sys.stdout', new_callable=io.StringIO)
def test_cli_main_no_command(fake_out):
    assert main([]) == 1
    assert 'usage' in fake_out.getvalue()


@mock.patch.object(evnt.cli.init, 'run_init')
def test_cli_main_command_init(m_run_init):
    m_run_init.return_value = None
    assert main(['init']) == 0
    assert m_run_init.call_count == 1


@mock.patch.object(evnt.cli.add, 'run_add')
def test_cli_main_command_add(m_run_add):
    m_run_add.return_value = None
    assert main(['add', 'Dentist', '-t', '2024-03-01T09:30:00Z']) == 0
    assert m_run_add.call_count == 1
    assert m_run_add.call_args[0][0].name == 'Dentist'


@mock.patch.object(evnt.cli.listing, 'run_list')
def test_cli_main_command_list(m_run_list):
    m_run_list.return_value = None
    assert main(['list']) == 0
    assert m_run_list.call_count == 1


@mock.patch.object(evnt.cli.delete, 'run_delete')
def test_cli_main_command_delete(m_run_delete):
    m_run_delete.return_value = 1
    assert main(['delete', '42']) == 1
    assert m_run_delete.call_count == 1


@mock.patch('sys.stderr', new_callable=io.StringIO)
@mock.patch.object(evnt.cli.listing, 'run_list')
def test_cli_main_store_error(m_run_list, fake_err):
    try:
        raise OSError('disk on fire')
    except OSError as e:
        error = StorageException('failed to read directory `/data/events`')
        error.__cause__ = e
    m_run_list.side_effect = error

    assert main(['list']) == 1
    assert fake_err.getvalue() == 'error: failed to read directory `/data/events`: disk on fire\n'


@mock.patch('sys.stdout', new_callable=io.StringIO)
def test_cli_main_end_to_end(fake_out):
    with tempfile.TemporaryDirectory() as tmpdir:
        with mock.patch.dict(os.environ, {'HOME': tmpdir}):
            data_dir = os.path.join(tmpdir, 'data')

            assert main(['-d', data_dir, 'add', 'Test Event', '-D', 'Event description',
                         '-t', '1000-10-10T14:30:00Z']) == 0
            event_id = fake_out.getvalue().strip()
            assert os.path.isfile(os.path.join(data_dir, 'events', event_id))

            assert main(['-d', data_dir, 'list', '-F', '{id}|{name}|{description}|{occurs_at}']) == 0
            assert fake_out.getvalue().splitlines()[1] == \
                '%s|Test Event|Event description|1000-10-10 14:30 UTC' % event_id

            assert main(['-d', data_dir, 'delete', event_id]) == 0
            assert os.listdir(os.path.join(data_dir, 'events')) == []


def test_format_error():
    cause = OSError('root cause')
    err = StorageException('outer')
    err.__cause__ = cause

    assert format_error(err) == 'outer: root cause'
    assert format_error(ValueError()) == 'ValueError'
