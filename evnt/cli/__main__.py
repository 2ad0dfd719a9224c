import sys
import logging
from evnt.cli.parser import get_parent_parser
from evnt.cli import init, add, listing, delete
from evnt.config import ConfigException
from evnt.storeapi import EventStoreException


log = logging.getLogger('evnt.cli')


def format_error(err):
    """Joins the messages of the exception and all of its causes.
    """
    messages = []
    while err is not None:
        messages.append(str(err) or err.__class__.__name__)
        err = err.__cause__
    return ': '.join(messages)


def main(argv=None):
    parser = get_parent_parser('evnt', 'Local calendar events')

    subparsers = parser.add_subparsers(dest='command', title='command', help='CLI commands')
    init.get_parser(subparsers)
    add.get_parser(subparsers)
    listing.get_parser(subparsers)
    delete.get_parser(subparsers)

    args = parser.parse_args(argv)

    if args.version:
        from evnt.metadata import version
        print('evnt', version)
        return 0

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    commands = {
        'init': init.run_init,
        'add': add.run_add,
        'list': listing.run_list,
        'delete': delete.run_delete,
    }
    if not args.command:
        parser.print_help()
        return 1

    try:
        return commands[args.command](args) or 0
    except (EventStoreException, ConfigException, ValueError) as e:
        log.debug('Command %s failed', args.command, exc_info=True)
        print('error: %s' % format_error(e), file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
