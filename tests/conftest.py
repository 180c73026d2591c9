import struct
import zlib

import pytest

from pngstash.lib.chunk import Chunk
from pngstash.lib.chunk_type import ChunkType
from pngstash.lib.png import Png


def make_chunk(chunk_type, data):
    return Chunk(ChunkType.from_string(chunk_type), data)


@pytest.fixture
def basic_chunks():
    """A 1x1 grayscale image"""
    return [
        make_chunk('IHDR', struct.pack('>IIBBBBB', 1, 1, 1, 0, 0, 0, 0)),
        make_chunk('IDAT', zlib.compress(struct.pack('>BB', 0, 0))),
        make_chunk('IEND', b''),
    ]


@pytest.fixture
def basic_png(basic_chunks):
    return Png(basic_chunks)


@pytest.fixture
def basic_png_bytes(basic_png):
    return basic_png.raw_data
