"""
---------------
evnt.cli.delete
---------------

Deletes a calendar event.
"""
import sys
from logging import getLogger
from evnt.cli.store import get_store
from evnt.model import filename_to_id
from evnt.storeapi import EventStoreException


log = getLogger(__name__)


def get_parser(subparsers):
    """Configures the subparser for the ``delete`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``delete`` command.
    """
    parser = subparsers.add_parser('delete', help='Delete an event')
    parser.add_argument('event_id', metavar='ID', help='Id of the event to delete')
    return parser


def run_delete(args):
    """Deletes the event with the given id.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.

    Returns the exit status: ``0`` if the event was deleted, ``1`` otherwise.
    """
    event_id = filename_to_id(args.event_id)
    if event_id is None:
        print('error: invalid event id `%s`' % args.event_id, file=sys.stderr)
        return 1

    store = get_store(args)
    if event_id not in store.existing_ids():
        print('error: no event with id %s' % event_id, file=sys.stderr)
        return 1

    try:
        event = store.read_event(event_id)
    except EventStoreException as e:
        raise EventStoreException('cannot delete event %s, it could not be read' % event_id) from e

    store.delete(event)
    log.info('Deleted event %s', event_id)
    return 0
