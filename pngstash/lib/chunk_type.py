from .exceptions import InvalidChunkTypeError


# Each of the 4 bytes of a chunk type carries one property in bit 5, the bit
# that separates upper from lower case ASCII letters.
# https://www.w3.org/TR/PNG/#5Chunk-naming-conventions
# upper 1st: critical
# upper 2nd: public
# upper 3rd: reserved and must be upper
# lower 4th: safe to copy
PROPERTY_BIT = 0x20


class ChunkType():
    __slots__ = ('_raw',)

    def __init__(self, raw):
        ''' Build a chunk type from its 4 raw bytes. Raises
        InvalidChunkTypeError if there aren't exactly 4 bytes or if any of
        them is not an ASCII letter. '''
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise InvalidChunkTypeError(
                'Chunk type must be bytes, not {}'.format(type(raw).__name__))
        raw = bytes(raw)
        if len(raw) != 4:
            raise InvalidChunkTypeError(
                'Chunk type must be 4 bytes long, got {}'.format(len(raw)))
        # bytes.isalpha() only considers ASCII letters
        if not raw.isalpha():
            raise InvalidChunkTypeError(
                'Chunk type {!r} contains non-letters'.format(raw))
        object.__setattr__(self, '_raw', raw)

    @classmethod
    def from_string(cls, s):
        ''' Given a string like 'IHDR', return the chunk type for it '''
        if not isinstance(s, str):
            raise InvalidChunkTypeError(
                'Chunk type must be a str, not {}'.format(type(s).__name__))
        return cls(s.encode('utf-8'))

    def __setattr__(self, name, value):
        raise AttributeError('ChunkType is immutable')

    def __reduce__(self):
        # copy and pickle can't set attributes, rebuild through __init__
        return (type(self), (self._raw,))

    @property
    def raw_bytes(self):
        return self._raw

    def _bit_is_clear(self, index):
        return self._raw[index] & PROPERTY_BIT == 0

    @property
    def is_critical(self):
        ''' critical chunks must be understood to display the image '''
        return self._bit_is_clear(0)

    @property
    def is_public(self):
        return self._bit_is_clear(1)

    @property
    def is_reserved_bit_valid(self):
        return self._bit_is_clear(2)

    @property
    def is_safe_to_copy(self):
        ''' editors that don't know this chunk may copy it over even when
        they modified critical chunks '''
        return not self._bit_is_clear(3)

    @property
    def is_valid(self):
        # Only the reserved bit is checked. The other three bits are free.
        return self.is_reserved_bit_valid

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._raw == other._raw

    def __hash__(self):
        return hash(self._raw)

    def __str__(self):
        return self._raw.decode('ascii')

    def __repr__(self):
        return 'ChunkType({!r})'.format(str(self))
