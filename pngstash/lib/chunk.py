from .chunk_type import ChunkType
from .exceptions import (
    ChecksumMismatchError, PayloadEncodingError, TruncatedError)
import struct
import zlib


# length + type in front of the payload, crc behind it
CHUNK_HEADER_LEN = 8
CHUNK_CRC_LEN = 4


def _unpack_from(fmt, buf, offset, what):
    ''' struct.unpack_from, but raise TruncatedError naming the field we were
    trying to read if the buffer is too short '''
    size = struct.calcsize(fmt)
    if offset + size > len(buf):
        raise TruncatedError(
            'Need {} bytes for the chunk {} at offset {} but only {} '
            'remain'.format(size, what, offset, max(len(buf) - offset, 0)))
    return struct.unpack_from(fmt, buf, offset)


class Chunk():
    __slots__ = ('_type', '_data')

    def __init__(self, chunk_type, data):
        ''' Build a chunk from its type and payload. The CRC is always
        calculated here, never taken from the caller. '''
        if not isinstance(chunk_type, ChunkType):
            raise TypeError(
                'chunk_type must be a ChunkType, not {}'.format(
                    type(chunk_type).__name__))
        data = bytes(data)
        type_bytes = chunk_type.raw_bytes
        object.__setattr__(self, '_type', chunk_type)
        object.__setattr__(
            self, '_data',
            struct.pack('>I', len(data)) + type_bytes + data +
            struct.pack('>I', zlib.crc32(type_bytes + data)))

    @classmethod
    def from_bytes(cls, buf, offset=0):
        ''' If you have some bytes that are supposed to represent a Chunk
        (with its headers and everything) starting at offset, use this
        function to create a Chunk instance. Trailing bytes after the chunk
        are left alone; use len(chunk.raw_data) to know where it ended. '''
        chunk_len, = _unpack_from('>I', buf, offset, 'length')
        chunk_type, = _unpack_from('>4s', buf, offset + 4, 'type')
        chunk_type = ChunkType(chunk_type)
        chunk_data, = _unpack_from(
            '>{}s'.format(chunk_len), buf, offset + CHUNK_HEADER_LEN, 'data')
        chunk_crc, = _unpack_from(
            '>I', buf, offset + CHUNK_HEADER_LEN + chunk_len, 'crc')
        chunk = cls(chunk_type, chunk_data)
        # the crc we just calculated ourselves is the one we trust, the one
        # we were given has to match it
        if chunk.crc != chunk_crc:
            raise ChecksumMismatchError(chunk_type, chunk.crc, chunk_crc)
        return chunk

    def __setattr__(self, name, value):
        raise AttributeError('Chunk is immutable')

    def __reduce__(self):
        return (type(self), (self._type, self.chunk_payload))

    @property
    def length(self):
        ''' 4-byte uint for number of bytes in data field '''
        l, = struct.unpack_from('>I', self._data, 0)
        return l

    @property
    def type(self):
        ''' the ChunkType naming this chunk '''
        return self._type

    @property
    def chunk_payload(self):
        ''' payload data in this chunk '''
        return self._data[CHUNK_HEADER_LEN:CHUNK_HEADER_LEN+self.length]

    @property
    def crc(self):
        ''' 4-byte uint crc calculated on type and data (not length) '''
        r, = struct.unpack_from('>I', self._data, len(self._data) - 4)
        return r

    @property
    def raw_data(self):
        ''' the length, type, chunk_payload, and crc all smooshed together like
        it would appear in a PNG file'''
        return self._data

    def data_as_string(self):
        try:
            return self.chunk_payload.decode('utf-8')
        except UnicodeDecodeError as e:
            raise PayloadEncodingError(
                'Payload of {} chunk is not UTF-8: {}'.format(
                    self.type, e)) from e

    def __bytes__(self):
        return self._data

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __str__(self):
        return 'Chunk {} with crc {} and len {}'.format(
            self.type, self.crc, self.length)

    def __repr__(self):
        return 'Chunk({!r}, len={}, crc={})'.format(
            str(self.type), self.length, self.crc)
