from enum import Enum


class CompressionType(Enum):
    '''Tag preceding the payload of a chunk. Only ZLIB is supported.'''
    GZIP = 1
    ZLIB = 2
    NONE = 3
