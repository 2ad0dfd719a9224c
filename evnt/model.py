"""
----------
evnt.model
----------

Calendar event model and its binary representation.

An event is serialized into a small self-describing binary record. The record
starts with a fixed size preamble that carries the sizes of the variable length
fields, followed by a fixed size body (timestamp and id) and then the encoded
name and description:

.. code-block:: text

    preamble: magic(4s) flags(B) name_size(I) description_size(I)
    body:     seconds(q) microseconds(I) id(16s) name description

All integers are big-endian. The timestamp is kept as seconds and microseconds
relative to the UNIX epoch in UTC.
"""
import re
import struct
from collections import namedtuple
from datetime import datetime, timedelta, timezone


MAGIC = b'EVNT'

FLAG_DESCRIPTION = 0x01

ID_BITS = 128

MAX_ID = (1 << ID_BITS) - 1

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_PREAMBLE = struct.Struct('>4sBII')
_BODY = struct.Struct('>qI16s')

_ID_NAME = re.compile(r'\+?[0-9]+')


EventPreamble = namedtuple('EventPreamble', ['flags', 'name', 'description'])


def to_utc(occurs_at):
    """Normalizes a :class:`datetime.datetime` to UTC.

    Naive values are taken to already be in UTC.
    """
    if occurs_at.tzinfo is None:
        return occurs_at.replace(tzinfo=timezone.utc)
    return occurs_at.astimezone(timezone.utc)


def id_to_filename(event_id):
    """Returns the name of the file holding the event with the given id.
    """
    return str(event_id)


def filename_to_id(name):
    """Parses an event id out of a file name.

    :param name: ``str``, the file name (without the directory).

    Returns the id as ``int``, or ``None`` if the name is not the decimal form of
    an unsigned 128-bit integer.
    """
    if not _ID_NAME.fullmatch(name):
        return None
    event_id = int(name)
    if event_id > MAX_ID:
        return None
    return event_id


class Event:
    """A calendar event.

    :param id: ``int``, unsigned 128-bit identifier. Also the file name of the
        stored event. Cannot be changed once the event is created.
    :param name: ``str``, the name of the event.
    :param occurs_at: :class:`datetime.datetime`, when the event occurs. Stored
        in UTC.
    :param description: ``str``, optional description.
    """
    def __init__(self, id, name, occurs_at, description=None):
        self._id = id
        self.name = name
        self.description = description
        self.occurs_at = occurs_at

    @property
    def id(self):
        return self._id

    @property
    def occurs_at(self):
        return self._occurs_at

    @occurs_at.setter
    def occurs_at(self, value):
        self._occurs_at = to_utc(value)

    def __eq__(self, other):
        if not isinstance(other, Event):
            return NotImplemented
        return (self.id == other.id and self.name == other.name and
                self.description == other.description and self.occurs_at == other.occurs_at)

    def __hash__(self):
        return hash(self.id)

    def __repr__(self):
        return 'Event<%s %r @ %s>' % (self.id, self.name, self.occurs_at.isoformat())


class InvalidEventData(Exception):
    """Raised when bytes cannot be parsed as an :class:`Event`.
    """
    pass


class EventSerializer:
    """Serializes :class:`Event` objects to bytes.

    :param encoding: ``str``, the text encoding used for the name and description.
    """
    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    def serialize(self, event):
        """Serializes the event.

        Raises :class:`ValueError`, :class:`OverflowError`, :class:`TypeError` or
        :class:`struct.error` if the event holds values that cannot be encoded.

        Returns the encoded event as ``bytes``.
        """
        name = event.name.encode(self.encoding)
        flags = 0
        description = b''
        if event.description is not None:
            flags |= FLAG_DESCRIPTION
            description = event.description.encode(self.encoding)

        preamble = _PREAMBLE.pack(MAGIC, flags, len(name), len(description))
        return preamble + self._serialize_body(event) + name + description

    def _serialize_body(self, event):
        if not 0 <= event.id <= MAX_ID:
            raise OverflowError('Event id %d does not fit in %d bits' % (event.id, ID_BITS))
        delta = to_utc(event.occurs_at) - EPOCH
        seconds = delta.days * 86400 + delta.seconds
        return _BODY.pack(seconds, delta.microseconds, event.id.to_bytes(16, 'big'))


class EventParser:
    """Parses :class:`Event` objects from bytes produced by :class:`EventSerializer`.

    :param encoding: ``str``, the text encoding used for the name and description.
    """
    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    def parse_preamble(self, data):
        if len(data) < _PREAMBLE.size:
            raise InvalidEventData('Data too short for an event preamble. %d bytes, expected at least %d' %
                                   (len(data), _PREAMBLE.size))
        magic, flags, name_size, description_size = _PREAMBLE.unpack_from(data)
        if magic != MAGIC:
            raise InvalidEventData('Invalid magic %r' % magic)
        if flags & ~FLAG_DESCRIPTION:
            raise InvalidEventData('Unknown flags 0x%02x' % flags)
        if not flags & FLAG_DESCRIPTION and description_size:
            raise InvalidEventData('Description size set, but no description flag')
        return EventPreamble(flags=flags, name=name_size, description=description_size)

    def parse_event(self, data):
        """Parses a complete event.

        :param data: ``bytes``, the entire serialized event. Trailing data is
            rejected.

        Raises :class:`InvalidEventData` if the data is corrupted or is not an
        event.

        Returns the parsed :class:`Event`.
        """
        preamble = self.parse_preamble(data)
        expected = _PREAMBLE.size + _BODY.size + preamble.name + preamble.description
        if len(data) != expected:
            raise InvalidEventData('Invalid event size. %d bytes, expected %d' % (len(data), expected))

        seconds, microseconds, raw_id = _BODY.unpack_from(data, _PREAMBLE.size)
        occurs_at = self._parse_timestamp(seconds, microseconds)

        offset = _PREAMBLE.size + _BODY.size
        name = self._decode(data[offset:offset + preamble.name], 'name')
        offset += preamble.name
        description = None
        if preamble.flags & FLAG_DESCRIPTION:
            description = self._decode(data[offset:offset + preamble.description], 'description')

        return Event(id=int.from_bytes(raw_id, 'big'), name=name, occurs_at=occurs_at,
                     description=description)

    def _parse_timestamp(self, seconds, microseconds):
        if microseconds > 999999:
            raise InvalidEventData('Invalid microseconds value %d' % microseconds)
        try:
            return EPOCH + timedelta(seconds=seconds, microseconds=microseconds)
        except OverflowError as e:
            raise InvalidEventData('Timestamp %d out of range' % seconds) from e

    def _decode(self, raw, field):
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise InvalidEventData('Invalid %s encoding' % field) from e
