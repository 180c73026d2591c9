from .chunk import Chunk
from .chunk_type import ChunkType
from .exceptions import (
    BadSignatureError, ChunkNotFoundError, InvalidChunkTypeError)


PNG_SIG = b'\x89PNG\r\n\x1a\n'


class Png():
    '''
    A PNG file as the ordered list of its chunks.

    Only the structure is looked at: the file must start with the PNG
    signature and every following byte must belong to a well-formed chunk.
    Which chunks appear and in what order is up to the caller, so IHDR and
    IDAT are just opaque chunks here.
    '''

    def __init__(self, chunks=()):
        self._chunks = []
        for chunk in chunks:
            self.append_chunk(chunk)

    @classmethod
    def from_bytes(cls, buf):
        ''' Parse a whole PNG file. The buffer has to be consumed exactly:
        bytes trailing the last complete chunk are an error, even after
        IEND. '''
        if bytes(buf[:len(PNG_SIG)]) != PNG_SIG:
            raise BadSignatureError('Could not find PNG file signature')
        chunks = []
        offset = len(PNG_SIG)
        while offset < len(buf):
            c = Chunk.from_bytes(buf, offset)
            chunks.append(c)
            offset += len(c.raw_data)
        return cls(chunks)

    @property
    def chunks(self):
        return tuple(self._chunks)

    def append_chunk(self, chunk):
        if not isinstance(chunk, Chunk):
            raise TypeError(
                'Can only append a Chunk, not {}'.format(type(chunk).__name__))
        self._chunks.append(chunk)

    def _index_of(self, chunk_type):
        ''' Index of the first chunk with the given type string, or None. An
        invalid type string can't name any chunk, so it is None as well. '''
        try:
            chunk_type = ChunkType.from_string(chunk_type)
        except InvalidChunkTypeError:
            return None
        for i, c in enumerate(self._chunks):
            if c.type == chunk_type:
                return i
        return None

    def chunk_by_type(self, chunk_type):
        i = self._index_of(chunk_type)
        return None if i is None else self._chunks[i]

    def remove_chunk(self, chunk_type):
        ''' Remove the first chunk with the given type string and return it.
        Raises ChunkNotFoundError, leaving the chunks untouched, if there is
        none. '''
        i = self._index_of(chunk_type)
        if i is None:
            raise ChunkNotFoundError(chunk_type)
        return self._chunks.pop(i)

    @property
    def raw_data(self):
        return PNG_SIG + b''.join(c.raw_data for c in self._chunks)

    def __bytes__(self):
        return self.raw_data

    def __copy__(self):
        # chunks are immutable, only the list has to be new
        return type(self)(self._chunks)

    def __len__(self):
        return len(self._chunks)

    def __iter__(self):
        return iter(self.chunks)

    def __eq__(self, other):
        if not isinstance(other, Png):
            return NotImplemented
        return self._chunks == other._chunks

    def __str__(self):
        return '\n'.join(str(c) for c in self._chunks)

    def __repr__(self):
        return 'Png({!r})'.format(self._chunks)
