"""
# Region file inspection.

A region file is a container: a fixed size table of locations at the start of the
file pointing to data blocks ("chunks") spread over the rest of it, each compressed
on its own.

The formats are described declaratively: a Chunk is an ordered list of Fields,
declared as class attributes, and unpacking it means reading each field in order
from a Stream, that is anything we can seek() and read() (a path, raw bytes or
an already opened binary file).

Two operations are defined over a region file

 1. read_header(): scan the table of locations and list the chunks present.

 2. extract(): locate a chunk, check its compression and return the
    decompressed data.

Both are read only and don't keep any state between calls.
"""
