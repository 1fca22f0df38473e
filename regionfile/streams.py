import io
import logging
import os

from .exceptions import IoFailure


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/path/file object to
    uniform its properties: everything downstream only needs seek() and read().

    A stream closes the underlying object only if it was the one opening it.'''

    def __init__(self, obj):
        self.owned = False
        self.obj = obj

        if isinstance(obj, Stream):
            self.obj = obj.obj
        elif isinstance(obj, (str, os.PathLike)):
            self.init_path()
        elif isinstance(obj, (bytes, bytearray)):
            self.init_bytes()
        elif not (hasattr(obj, 'read') and hasattr(obj, 'seek')):
            raise ValueError('\'%s\' cannot be used as a stream' % obj.__class__.__name__)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.obj!r})>'

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def init_path(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'', self.obj)
        try:
            self.obj = open(self.obj, 'rb')
        except OSError as e:
            raise IoFailure('open', e) from e
        self.owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)
        self.owned = True

    def seek(self, offset):
        if not isinstance(offset, int):
            raise ValueError('\'%s\' is the wrong kind of offset to use' % offset.__class__.__name__)

        self.obj.seek(offset)

        return self

    def read(self, size):
        return self.obj.read(size)

    def read_all(self):
        return self.obj.read()

    def tell(self):
        return self.obj.tell()

    def close(self):
        if self.owned:
            self.obj.close()
