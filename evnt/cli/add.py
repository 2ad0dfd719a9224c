"""
------------
evnt.cli.add
------------

Adds a new calendar event.
"""
import argparse
from datetime import datetime, timezone
from logging import getLogger
from evnt.cli.store import get_store


log = getLogger(__name__)


def get_parser(subparsers):
    """Configures the subparser for the ``add`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``add`` command.
    """
    parser = subparsers.add_parser('add', help='Add an event')

    parser.add_argument('name', help='Name of the event')
    parser.add_argument('-t', '--time', dest='time', required=True, metavar='TIMESTAMP', type=parse_timestamp,
                        help='When the event occurs, in ISO-8601 format (for example 2024-03-01T09:30). ' +
                        'Timestamps without an offset are in local time.')
    parser.add_argument('-D', '--description', dest='description', default=None,
                        help='Event description')

    return parser


def parse_timestamp(value):
    """Parses an ISO-8601 timestamp and converts it to UTC.

    A trailing ``Z`` is accepted as UTC. Timestamps without an offset are taken to
    be in local time.

    :param str value: the timestamp.

    Returns an aware :class:`datetime.datetime` in UTC.
    """
    iso_value = value
    if iso_value.endswith(('Z', 'z')):
        iso_value = iso_value[:-1] + '+00:00'
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        raise argparse.ArgumentTypeError('invalid timestamp: %s' % value)
    return parsed.astimezone(timezone.utc)


def run_add(args):
    """Creates and saves a new event, then prints its id.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    store = get_store(args)
    event = store.create_event(args.name, args.time, description=args.description)
    store.save(event)
    log.info('Added event %s', event.id)
    print(event.id)
