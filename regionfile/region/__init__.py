'''
# Region files

A region file packs up to 1024 chunks, each compressed on its own.

  .-------------------------------------.
  | header: 1024 location records       |  4096 bytes
  |-------------------------------------|
  | sector 1                            |
  | sector 2                            |
    ...
  | sector N                            |
  '-------------------------------------'

The file is divided in sectors of 4096 bytes, the header occupying the first one.
Each location record is 4 bytes: the first three are the big-endian offset, in
sectors, of the chunk data, the last one is the number of sectors it takes up.
A record with all the bytes set to zero means the chunk is not present; the id
of a chunk is the position of its record in the header.

The data of a chunk starts with a big-endian 32 bits length (counting the
compression tag and the payload), the compression tag and the compressed payload.
Only zlib (tag 2) is supported.

The length is not used to bound the payload: the zlib stream carries its own
end marker and the data is decompressed up to it.
'''
import logging
from typing import List, NamedTuple

from regionfile.core import Chunk
from regionfile import fields
from regionfile.compression.deflate import ZlibField
from regionfile.exceptions import (
    ChunkNotFound,
    ChunkUnpackException,
    IoFailure,
    UnsupportedFormat,
)
from regionfile.streams import Stream
from .enum import CompressionType


logger = logging.getLogger(__name__)


SECTOR_SIZE = 4096
HEADER_SIZE = 4096
LOCATION_SIZE = 4
LOCATIONS_PER_HEADER = HEADER_SIZE // LOCATION_SIZE


class HeaderEntry(NamedTuple):
    '''A chunk present in the region, as described by its location record.'''
    id: int
    start: int
    size: int

    @property
    def end(self) -> int:
        return self.start + self.size

    @property
    def offset(self) -> int:
        '''Absolute offset in bytes of the chunk data.'''
        return self.start * SECTOR_SIZE


class LocationRecord(Chunk):
    start   = fields.UIntField(3, endianess=fields.Endianess.BIG_ENDIAN)
    sectors = fields.StructField('B')

    def is_empty(self):
        return self.start.value == 0 and self.sectors.value == 0


class RegionHeader(Chunk):
    locations = fields.ArrayField(LocationRecord(), n=LOCATIONS_PER_HEADER)

    @property
    def entries(self) -> List[HeaderEntry]:
        return [
            HeaderEntry(id=idx, start=location.start.value, size=location.sectors.value)
            for idx, location in enumerate(self.locations)
            if not location.is_empty()
        ]


class ChunkBlock(Chunk):
    '''The data of a single chunk, found at the start of its first sector.'''
    length      = fields.StructField('I', endianess=fields.Endianess.BIG_ENDIAN)
    compression = fields.StructField('B')
    data        = ZlibField()

    def validate_compression(self):
        if self.compression.value != CompressionType.ZLIB.value:
            raise UnsupportedFormat(self.compression.value, CompressionType.ZLIB)

    def validate_data(self):
        # the length counts the compression tag too
        if self.length.value != self.data.compressed_size + 1:
            logger.warning('chunk length says %d bytes but the zlib stream took %d (+1 for the tag)',
                           self.length.value, self.data.compressed_size)


def read_header(source) -> List[HeaderEntry]:
    '''Parse the header from the start of the source and return the present chunks,
    ordered by id.

    A source shorter than the header is padded with zeros, i.e. the missing
    locations are considered unused.'''
    with Stream(source) as stream:
        try:
            stream.seek(0)
            raw = stream.read(HEADER_SIZE)
        except (OSError, ValueError) as e:
            raise IoFailure('header parse', e) from e

    if len(raw) < HEADER_SIZE:
        logger.warning('header is only %d bytes long, padding it to %d', len(raw), HEADER_SIZE)
        raw = raw.ljust(HEADER_SIZE, b'\x00')

    header = RegionHeader(raw)

    entries = header.entries
    logger.debug('found %d chunks in the header', len(entries))

    return entries


def find_entry(header_entries: List[HeaderEntry], chunk_id: int) -> HeaderEntry:
    for entry in header_entries:
        if entry.id == chunk_id:
            return entry

    raise ChunkNotFound(chunk_id)


def extract(source, header_entries: List[HeaderEntry], chunk_id: int) -> bytes:
    '''Return the decompressed data of the chunk with the given id.'''
    entry = find_entry(header_entries, chunk_id)

    logger.debug('extracting %r from offset 0x%x', entry, entry.offset)

    with Stream(source) as stream:
        try:
            stream.seek(entry.offset)
            block = ChunkBlock(stream)
        except (OSError, ValueError, ChunkUnpackException) as e:
            raise IoFailure('data read', e) from e

    return block.data.value


class RegionFile(object):
    '''A region file with its header already parsed.

    It can be used as a context manager, closing the file at the end if it
    was opened from a path.'''

    def __init__(self, source):
        self.stream = Stream(source)
        self.header = read_header(self.stream)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.stream!r}, chunks={len(self)})>'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __len__(self):
        return len(self.header)

    def __iter__(self):
        return iter(self.header)

    def __contains__(self, chunk_id):
        return any(entry.id == chunk_id for entry in self.header)

    def get(self, chunk_id) -> HeaderEntry:
        return find_entry(self.header, chunk_id)

    def extract(self, chunk_id) -> bytes:
        return extract(self.stream, self.header, chunk_id)

    def close(self):
        self.stream.close()
