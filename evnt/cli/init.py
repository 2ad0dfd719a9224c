"""
-------------
evnt.cli.init
-------------

Creates the data directories.
"""
from evnt.cli.store import get_context


def get_parser(subparsers):
    """Configures the subparser for the ``init`` command.

    :param argparse.ArgumentParser subparser: subparser for commands.

    Returns :class:`argparse.ArgumentParser` configured for the ``init`` command.
    """
    return subparsers.add_parser('init', help='Create the data directories')


def run_init(args):
    """Creates the data directories and prints the events directory.

    :param argparse.Namespace args: the parsed arguments passed to the CLI.
    """
    context = get_context(args)
    print(context.events_dir)
