import zlib

import pytest

from regionfile.compression.deflate import BLOCK_SIZE, ZlibField, decompress, decompress_stream
from regionfile.exceptions import DecompressionFailure
from regionfile.streams import Stream


DATA = b'the quick brown fox jumps over the lazy dog' * 10


def test_decompress():
    compressed = zlib.compress(DATA)

    value, consumed = decompress(compressed)

    assert value == DATA
    assert consumed == len(compressed)


def test_decompress_ignores_trailing_data():
    compressed = zlib.compress(DATA)

    value, consumed = decompress(compressed + b'\x00' * 100 + b'garbage')

    assert value == DATA
    assert consumed == len(compressed)


def test_decompress_truncated():
    compressed = zlib.compress(DATA)

    with pytest.raises(DecompressionFailure) as e:
        decompress(compressed[:-6])

    assert 'truncated' in str(e.value)

    with pytest.raises(DecompressionFailure):
        decompress(b'')


def test_decompress_malformed():
    with pytest.raises(DecompressionFailure):
        decompress(b'this is not zlib at all')


def test_zlibfield():
    compressed = zlib.compress(b'hello')
    stream = Stream(b'\x02' + compressed)
    stream.seek(1)

    field = ZlibField()
    field.unpack(stream)

    assert field.value == b'hello'
    assert field.compressed_size == len(compressed)


def test_decompress_stream_stops_at_the_end_marker():
    compressed = zlib.compress(DATA)
    stream = Stream(compressed + b'\x00' * (BLOCK_SIZE * 16))

    value, consumed = decompress_stream(stream)

    assert value == DATA
    assert consumed == len(compressed)
    # only the first block has been read
    assert stream.tell() == BLOCK_SIZE


def test_decompress_stream_across_blocks():
    original = bytes(range(256)) * 16
    compressed = zlib.compress(original, 0)  # stored, so bigger than a block

    value, consumed = decompress_stream(Stream(compressed + b'trailing'), block_size=64)

    assert value == original
    assert consumed == len(compressed)
