import pytest

from pngstash.lib.chunk_type import ChunkType
from pngstash.lib.exceptions import InvalidChunkTypeError, PngStashException


def test_from_bytes():
    chunk_type = ChunkType(bytes([82, 117, 83, 116]))

    assert chunk_type.raw_bytes == b'RuSt'


def test_from_string_matches_from_bytes():
    assert ChunkType.from_string('RuSt') == ChunkType(bytes([82, 117, 83, 116]))


def test_properties_rust():
    chunk_type = ChunkType.from_string('RuSt')

    assert chunk_type.is_critical
    assert not chunk_type.is_public
    assert chunk_type.is_reserved_bit_valid
    assert chunk_type.is_safe_to_copy
    assert chunk_type.is_valid


def test_reserved_bit_invalid():
    chunk_type = ChunkType.from_string('Rust')

    assert not chunk_type.is_reserved_bit_valid
    assert not chunk_type.is_valid


@pytest.mark.parametrize('text,critical,public,safe', [
    ('ruSt', False, False, True),
    ('RUSt', True, True, True),
    ('RuST', True, False, False),
    ('IHDR', True, True, False),
    ('tEXt', False, True, True),
])
def test_property_bits(text, critical, public, safe):
    chunk_type = ChunkType.from_string(text)

    assert chunk_type.is_critical == critical
    assert chunk_type.is_public == public
    assert chunk_type.is_safe_to_copy == safe


def test_is_valid_only_checks_reserved_bit():
    """Critical, public and safe-to-copy bits don't matter for validity"""
    for text in ('abCd', 'ABCD', 'aBCD', 'AbCD'):
        assert ChunkType.from_string(text).is_valid
    for text in ('abcd', 'ABcD'):
        assert not ChunkType.from_string(text).is_valid


@pytest.mark.parametrize('raw', [
    b'Ru1t', b'Ru t', b'Ru-t', b'RuS\x00', b'\xc3\xa9St',
    b'RuS', b'RuStt', b'',
])
def test_invalid_bytes(raw):
    with pytest.raises(InvalidChunkTypeError):
        ChunkType(raw)


@pytest.mark.parametrize('text', ['Ru1t', 'RuS', 'RuStt', '', 'éSt', 'RuSé'])
def test_invalid_string(text):
    with pytest.raises(InvalidChunkTypeError):
        ChunkType.from_string(text)


def test_invalid_is_a_png_stash_exception():
    with pytest.raises(PngStashException):
        ChunkType.from_string('12ab')


def test_not_bytes():
    with pytest.raises(InvalidChunkTypeError):
        ChunkType('RuSt')
    with pytest.raises(InvalidChunkTypeError):
        ChunkType.from_string(b'RuSt')


def test_str_keeps_case():
    assert str(ChunkType.from_string('RuSt')) == 'RuSt'
    assert repr(ChunkType.from_string('RuSt')) == "ChunkType('RuSt')"


def test_equality_is_case_sensitive():
    assert ChunkType.from_string('RuSt') != ChunkType.from_string('rust')
    assert ChunkType.from_string('RuSt') == ChunkType.from_string('RuSt')
    assert hash(ChunkType.from_string('RuSt')) == hash(ChunkType(b'RuSt'))


def test_immutable():
    chunk_type = ChunkType.from_string('RuSt')

    with pytest.raises(AttributeError):
        chunk_type._raw = b'Rust'
    assert chunk_type.raw_bytes == b'RuSt'
