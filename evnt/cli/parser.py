"""
---------------
evnt.cli.parser
---------------

Top level :mod:`argparse` parser for ``python -m evnt.cli``. The commands
(``init``, ``add``, ``list`` and ``delete``) register themselves as subparsers of
this parser.
"""
import argparse


def get_parent_parser(name, desc=''):
    """Builds the parser holding the options shared by every evnt command.

    The shared options select where the calendar lives (``--data-dir``,
    ``--config``) and how much the program logs (``--verbose``).

    :param str name: program name shown in the usage line.
    :param str desc: text shown at the top of ``--help``.

    Returns the :class:`argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(prog=name, description=desc)

    parser.add_argument('-v', '--version', action='store_true',
                        help='Show the evnt version and exit')
    parser.add_argument('-d', '--data-dir', dest='data_dir', default=None, metavar='DIR',
                        help='Calendar data directory (default: ~/.local/share/evnt)')
    parser.add_argument('-c', '--config', dest='config_file', default=None, metavar='FILE',
                        help='YAML configuration file (default: ~/.config/evnt/config.yml)')
    parser.add_argument('--verbose', dest='verbose', action='store_true',
                        help='Log debug messages to stderr.')

    return parser
