"""
-------------
evnt.storeapi
-------------

Event Store API
^^^^^^^^^^^^^^^

Defines the interface and the exceptions to be used when implementing an Event Store.
"""
from abc import abstractmethod


class EventStore:
    """EventStore is the basic interface for interaction with the calendar events.

    The store supports creating, listing and deleting events. It does not support
    updating events, looking them up by any attribute, or ordering them.
    The store assumes a single process works with the underlying storage at a
    time. Instances are **not** thread-safe.
    """
    @abstractmethod
    def create_event(self, name, occurs_at, description=None):
        """Creates a new event with a unique id.

        The event is not saved. Call :meth:`EventStore.save` to persist it.

        :param name: ``str``, the name of the event. Must not be empty.
        :param occurs_at: :class:`datetime.datetime`, the time of the event.
        :param description: ``str``, optional description.

        Returns the new :class:`evnt.model.Event`.
        """
        pass

    @abstractmethod
    def save(self, event):
        """Saves an event in the underlying storage.

        An event previously saved with the same id is overwritten.

        :param event: :class:`evnt.model.Event`, the Event object to store.

        This method does not return any value.
        """
        pass

    @abstractmethod
    def read_all(self):
        """Reads all of the stored events.

        The events are returned in no particular order. If any of the events
        cannot be read, the whole operation fails.

        Returns a ``list`` of :class:`evnt.model.Event`.
        """
        pass

    @abstractmethod
    def delete(self, event):
        """Deletes an event from the storage.

        :param event: :class:`evnt.model.Event`, the event to be removed.

        Raises :class:`EventNotFound` if the event is not in the storage.
        This method does not return any value.
        """
        pass


class EventStoreException(Exception):
    """General store error.
    """
    pass


class StorageException(EventStoreException):
    """Represents a filesystem error (create, list, read, write or delete).

    :param message: ``str``, the error message.
    :param path: ``str``, the path being accessed when the error occurred.
    """
    def __init__(self, message, path=None):
        super(StorageException, self).__init__(message)
        self.path = path


class EventNotFound(StorageException):
    """Raised if the event is not found in the underlying storage.
    """
    pass


class EventSerializationException(EventStoreException):
    """Represents an error while encoding an event.
    """
    pass


class EventDeserializationException(EventStoreException):
    """Represents an error while decoding a stored event.

    :param message: ``str``, the error message.
    :param path: ``str``, the file that could not be decoded.
    """
    def __init__(self, message, path=None):
        super(EventDeserializationException, self).__init__(message)
        self.path = path
