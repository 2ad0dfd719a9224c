"""
-----------
evnt.config
-----------

Resolves where the calendar data is stored.

The data directory is taken from (in order of precedence):

* the ``--data-dir`` command line argument,
* the ``EVNT_DATA_DIR`` environment variable,
* the ``data_dir`` entry in the YAML configuration file,
* the default: ``$HOME/.local/share/evnt``.

The configuration file is optional and is looked up in
``$HOME/.config/evnt/config.yml`` unless another file is given explicitly:

.. code-block:: yaml

    data_dir: ~/calendar
"""
import os
from os.path import join as join_paths, expanduser, isfile
from logging import getLogger

import yaml


log = getLogger(__name__)

DEFAULT_DATA_DIR_SUFFIX = '.local/share/evnt'

DEFAULT_CONFIG_SUFFIX = '.config/evnt/config.yml'

DATA_DIR_ENV = 'EVNT_DATA_DIR'


class ConfigException(Exception):
    """Raised when the configuration file cannot be loaded.
    """
    pass


def home_dir():
    return os.environ.get('HOME') or expanduser('~')


def default_data_dir():
    return join_paths(home_dir(), DEFAULT_DATA_DIR_SUFFIX)


def default_config_file():
    return join_paths(home_dir(), DEFAULT_CONFIG_SUFFIX)


def load_config(config_file=None):
    """Loads the YAML configuration file.

    :param config_file: ``str``, path to the configuration file. If not given, the
        default configuration file is used, and it is fine if it does not exist.

    Raises :class:`ConfigException` if the file cannot be read or parsed, or if it
    does not contain a mapping.

    Returns the configuration as ``dict``.
    """
    required = config_file is not None
    config_file = config_file or default_config_file()
    if not required and not isfile(config_file):
        log.debug('No configuration file at %s', config_file)
        return {}

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigException('failed to read configuration file `%s`' % config_file) from e
    except yaml.YAMLError as e:
        raise ConfigException('invalid configuration file `%s`' % config_file) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigException('configuration file `%s` must contain a mapping' % config_file)
    log.debug('Loaded configuration from %s', config_file)
    return config


def resolve_data_dir(data_dir=None, config=None, environ=None):
    """Resolves the data directory.

    :param data_dir: ``str``, explicitly requested data directory.
    :param config: ``dict``, the loaded configuration.
    :param environ: mapping of environment variables. Defaults to ``os.environ``.

    Returns the data directory path as ``str``.
    """
    environ = os.environ if environ is None else environ
    if data_dir:
        return expanduser(data_dir)
    if environ.get(DATA_DIR_ENV):
        return expanduser(environ[DATA_DIR_ENV])
    if config and config.get('data_dir'):
        return expanduser(str(config['data_dir']))
    return default_data_dir()
