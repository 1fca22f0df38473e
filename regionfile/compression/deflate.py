'''
# zlib (RFC 1950) streams

A zlib stream is a two bytes header, a deflate (RFC 1951) compressed body and an
adler32 checksum; the end of the stream is marked inside the deflate body itself,
so it's possible to decompress without knowing in advance the compressed length.
'''
import io
import logging
import zlib
from typing import Tuple

from .. import fields
from ..exceptions import DecompressionFailure


logger = logging.getLogger(__name__)


BLOCK_SIZE = 4096


def decompress_stream(stream, block_size=BLOCK_SIZE) -> Tuple[bytes, int]:
    '''Decompress a single zlib stream reading from the actual position of the
    stream a block at a time, stopping at the end of the zlib stream: the bytes
    after it are ignored (at most a block of them is read).

    It returns the decompressed data and the number of bytes the stream
    actually occupied.'''
    decompressor = zlib.decompressobj()
    value = []
    consumed = 0
    try:
        while not decompressor.eof:
            data = stream.read(block_size)
            if not data:
                break
            consumed += len(data)
            value.append(decompressor.decompress(data))
        value.append(decompressor.flush())
    except zlib.error as e:
        raise DecompressionFailure(str(e)) from e

    if not decompressor.eof:
        raise DecompressionFailure('truncated stream')

    unused = len(decompressor.unused_data)
    if unused:
        logger.debug('ignoring %d bytes read after the end of the zlib stream', unused)

    return b''.join(value), consumed - unused


def decompress(data: bytes) -> Tuple[bytes, int]:
    '''Same as decompress_stream() but from bytes.'''
    return decompress_stream(io.BytesIO(data))


class ZlibField(fields.PaddingField):
    '''Takes from the stream up to the end of the zlib stream and decompresses it.

    The value is the decompressed data, the size the compressed one.'''

    def __init__(self, **kw):
        self.compressed_size = 0
        super().__init__(**kw)

    def unpack(self, stream):
        self.value, self.compressed_size = decompress_stream(stream)

    def _get_size(self):
        return self.compressed_size
