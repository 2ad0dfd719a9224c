"""
------------
evnt.context
------------

Storage context: the directories in which the calendar data is kept.
"""
import os
from os.path import join as join_paths
from logging import getLogger
from evnt.storeapi import StorageException


log = getLogger(__name__)

EVENTS_DIR_NAME = 'events'


class StorageContext:
    """Holds the root data directory and the events directory inside it.

    Creating a context does not touch the filesystem. Call
    :meth:`StorageContext.ensure_directories` to create the directories.

    :param data_dir: path-like, the root data directory. The events are kept in
        its ``events`` subdirectory.
    """
    def __init__(self, data_dir):
        self._data_dir = os.fsdecode(os.fspath(data_dir))
        self._events_dir = join_paths(self._data_dir, EVENTS_DIR_NAME)

    @property
    def data_dir(self):
        return self._data_dir

    @property
    def events_dir(self):
        return self._events_dir

    def event_path(self, file_name):
        """Returns the full path of a file in the events directory.
        """
        return join_paths(self._events_dir, file_name)

    def ensure_directories(self):
        """Creates the events directory and all of its missing parents.

        Does nothing if the directory already exists.

        Raises :class:`evnt.storeapi.StorageException` if the directory cannot be
        created.
        """
        try:
            os.makedirs(self._events_dir, exist_ok=True)
        except OSError as e:
            raise StorageException('failed to create directory `%s`' % self._events_dir,
                                   path=self._events_dir) from e
        log.info('Using events directory %s', self._events_dir)

    def __repr__(self):
        return 'StorageContext<%s>' % self._data_dir
