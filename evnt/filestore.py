"""
--------------
evnt.filestore
--------------

File based implementation of the Event Store.

This module provides an implementation of the :class:`evnt.storeapi.EventStore`
that keeps every event in its own file. The files live in the events directory
of a :class:`evnt.context.StorageContext` and are named after the event id
(its decimal representation). The file content is the binary encoding produced
by :class:`evnt.model.EventSerializer`.

The events directory works as a plain, unindexed table. Listing the events
means reading every file in the directory, and the events come back in the order
in which the directory lists them.

Here is an example of usage of the store:

.. code-block:: python

    from datetime import datetime, timezone
    from evnt.context import StorageContext
    from evnt.filestore import FileEventStore

    context = StorageContext('./data')
    context.ensure_directories()

    store = FileEventStore(context)

    event = store.create_event('Dentist', datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc),
                               description='Bring the X-rays')
    store.save(event)

    for ev in store.read_all():
        print('Found:', ev.name, ev.occurs_at)

would print::

    >> Found: Dentist 2024-03-01 09:30:00+00:00

The store does not coordinate concurrent access. Two processes creating events
at the same time may pick the same id.
"""

import os
import struct
from random import SystemRandom
from logging import getLogger
from evnt.storeapi import (EventStore,
                           StorageException,
                           EventNotFound,
                           EventSerializationException,
                           EventDeserializationException)
from evnt.model import (Event,
                        EventSerializer,
                        EventParser,
                        InvalidEventData,
                        ID_BITS,
                        id_to_filename,
                        filename_to_id)


log = getLogger(__name__)


class FileEventStore(EventStore):
    """An :class:`evnt.storeapi.EventStore` that keeps one file per event.

    :param context: :class:`evnt.context.StorageContext`, the directories to work
        with. The events directory must already exist, see
        :meth:`evnt.context.StorageContext.ensure_directories`.
    :param random: a :class:`random.Random` compatible source of random bits used
        for generating event ids. Defaults to :class:`random.SystemRandom`.
    """
    def __init__(self, context, random=None):
        self.context = context
        self.random = random or SystemRandom()
        self.serializer = EventSerializer()
        self.parser = EventParser()

    def create_event(self, name, occurs_at, description=None):
        if not name:
            raise ValueError('Event name must not be empty')
        try:
            event_id = self.generate_id()
        except StorageException as e:
            raise StorageException('failed to generate event id for `%s`' % name, path=e.path) from e
        return Event(id=event_id, name=name, occurs_at=occurs_at, description=description)

    def generate_id(self):
        """Generates an id that is not used by any of the stored events.

        Draws random 128-bit values until one is found that is not taken. There is
        no limit on the number of draws; with 128 bits a collision is very
        unlikely, so the loop practically always ends after the first draw.

        Returns the id as ``int``.
        """
        ids = self.existing_ids()
        while True:
            event_id = self.random.getrandbits(ID_BITS)
            if event_id not in ids:
                return event_id
            log.debug('Event id %d already taken, drawing another one.', event_id)

    def existing_ids(self):
        """Collects the ids of the stored events from the file names in the events directory.

        Files whose names are not event ids are ignored.

        Returns a ``set`` of ``int`` ids.
        """
        events_dir = self.context.events_dir
        try:
            names = os.listdir(events_dir)
        except OSError as e:
            raise StorageException('failed to read directory `%s`' % events_dir, path=events_dir) from e

        ids = set()
        for name in names:
            event_id = filename_to_id(name)
            if event_id is not None:
                ids.add(event_id)
        return ids

    def save(self, event):
        try:
            data = self.serializer.serialize(event)
        except (ValueError, TypeError, AttributeError, OverflowError, struct.error) as e:
            raise EventSerializationException('failed to serialize event `%s` (id: %s)' %
                                              (event.name, event.id)) from e

        path = self.context.event_path(id_to_filename(event.id))
        try:
            with open(path, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise StorageException('failed to write event `%s` (id: %s) to `%s`' % (event.name, event.id, path),
                                   path=path) from e
        log.debug('Saved event %s to %s', event.id, path)

    def read_all(self):
        events_dir = self.context.events_dir
        events = []
        try:
            with os.scandir(events_dir) as entries:
                for entry in entries:
                    if entry.is_file(follow_symlinks=False):
                        events.append(self._read_event(entry.path))
        except OSError as e:
            raise StorageException('failed to read directory `%s`' % events_dir, path=events_dir) from e
        log.debug('Read %d events from %s', len(events), events_dir)
        return events

    def read_event(self, event_id):
        """Reads the event stored under the given id.

        Only the file of that event is read, so other unreadable files in the
        events directory do not affect it.

        :param event_id: ``int``, the id of the event.

        Raises :class:`evnt.storeapi.EventNotFound` if there is no such event.

        Returns the :class:`evnt.model.Event`.
        """
        path = self.context.event_path(id_to_filename(event_id))
        if not os.path.isfile(path):
            raise EventNotFound('no event with id %s' % event_id, path=path)
        return self._read_event(path)

    def _read_event(self, path):
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise StorageException('failed to read from file `%s`' % path, path=path) from e

        try:
            return self.parser.parse_event(data)
        except InvalidEventData as e:
            raise EventDeserializationException('failed to deserialize event from file `%s`' % path,
                                                path=path) from e

    def delete(self, event):
        path = self.context.event_path(id_to_filename(event.id))
        try:
            os.remove(path)
        except FileNotFoundError as e:
            raise EventNotFound('failed to delete event `%s` (id: %s): no such file `%s`' %
                                (event.name, event.id, path), path=path) from e
        except OSError as e:
            raise StorageException('failed to delete event `%s` (id: %s)' % (event.name, event.id),
                                   path=path) from e
        log.debug('Deleted event %s', event.id)
