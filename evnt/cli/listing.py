"""
----------------
evnt.cli.listing
----------------

Lists the stored calendar events.
"""
from evnt.cli.store import get_store


def get_parser(subparsers):
    """Configures the subparser for the ``list`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``list`` command.
    """
    parser = subparsers.add_parser('list', help='List all events')

    parser.add_argument('-F', '--format-output', dest='o_format',
                        default='{occurs_at} {name} ({id})',
                        metavar='FORMAT_STRING', help='Event output format string. ' +
                        'Available properties are: id, name, description and occurs_at.')
    parser.add_argument('-T', '--format-timestamp', dest='o_ts_format',
                        default='%Y-%m-%d %H:%M %Z', metavar='DATE_FORMAT_STRING',
                        help='Timestamp strftime compatible format string')
    parser.add_argument('--local', dest='local', action='store_true',
                        help='Show the event times in local time instead of UTC.')
    return parser


def format_event(event, fmt, datefmt=None, local=False):
    """Format the event using the provided format.

    :param evnt.model.Event event: the event to format.
    :param str fmt: the format string. This is compatibile with :func:`str.format`.
    :param str datefmt: alternative date format for formatting the event time.
        The format must be compatible with :func:`datetime.strftime`
    :param bool local: convert the event time to the local timezone.

    Returns the formatted event as string.
    """
    occurs_at = event.occurs_at.astimezone() if local else event.occurs_at
    data = {
        "id": event.id,
        "name": event.name,
        "description": event.description or '',
        "occurs_at": occurs_at.strftime(datefmt) if datefmt else occurs_at.isoformat(),
    }
    return fmt.format(**data)


def run_list(args):
    """Prints all of the events, ordered by the time they occur.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    store = get_store(args)
    for event in sorted(store.read_all(), key=lambda ev: ev.occurs_at):
        print(format_event(event, args.o_format, args.o_ts_format, args.local))
