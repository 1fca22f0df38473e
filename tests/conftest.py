import struct
import zlib

import pytest


SECTOR_SIZE = 4096


@pytest.fixture
def zlib_block():
    '''Build the raw data of a chunk: length, compression tag and payload.'''
    def _block(data=b'', tag=2, compressed=None, length=None):
        payload = zlib.compress(data) if compressed is None else compressed
        length = len(payload) + 1 if length is None else length
        return struct.pack('>I', length) + bytes([tag]) + payload

    return _block


@pytest.fixture
def region_factory():
    '''Build a region file in memory.

    "slots" maps the chunk id to the 4 raw bytes of its location record,
    "blocks" maps a sector to the data placed at its start.'''
    def _region(slots=None, blocks=None):
        data = bytearray(SECTOR_SIZE)
        for chunk_id, raw in (slots or {}).items():
            data[chunk_id * 4:chunk_id * 4 + 4] = raw

        for sector, block in sorted((blocks or {}).items()):
            offset = sector * SECTOR_SIZE
            if len(data) < offset:
                data.extend(b'\x00' * (offset - len(data)))
            data[offset:offset + len(block)] = block

        return bytes(data)

    return _region
