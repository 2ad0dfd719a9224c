"""
--------------
evnt.cli.store
--------------

Sets up the event store from the command line arguments.
"""
from logging import getLogger
from evnt.config import load_config, resolve_data_dir
from evnt.context import StorageContext
from evnt.filestore import FileEventStore


log = getLogger(__name__)


def get_context(args):
    """Creates the :class:`evnt.context.StorageContext` for the data directory
    resolved from the arguments, environment and configuration file, and makes
    sure its directories exist.

    :param argparse.Namespace args: the parsed arguments.
    """
    config = load_config(args.config_file)
    data_dir = resolve_data_dir(data_dir=args.data_dir, config=config)
    log.debug('Using data directory %s', data_dir)

    context = StorageContext(data_dir)
    context.ensure_directories()
    return context


def get_store(args):
    """Creates a :class:`evnt.filestore.FileEventStore` based on the arguments passed.

    :param argparse.Namespace args: the parsed arguments.
    """
    return FileEventStore(get_context(args))
