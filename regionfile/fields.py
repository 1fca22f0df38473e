"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from a stream without sub-components.
"""
import logging
import struct

from bitstring import Bits

from .meta import FieldBase, Endianess
from .exceptions import UnpackException


logger = logging.getLogger(__name__)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN):
        super().__init__()
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return '<%s(%r)>' % (self.__class__.__name__, self.value)

    def _get_size(self):
        raise NotImplementedError(f"method {self.__class__.__name__}._get_size() not implemented")

    size = property(
        fget=lambda self: self._get_size(),
    )

    def _read_exactly(self, stream, size):
        raw = stream.read(size)
        if len(raw) != size:
            raise UnpackException(chain=[], reason=f'expected {size} bytes, got {len(raw)}')

        return raw

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.
    """

    def __init__(self, format, default=0, **kw):
        self.format = format
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def get_format(self):
        return '%s%s' % ('<' if self.endianess == Endianess.LITTLE_ENDIAN else '>', self.format)

    def _get_size(self):
        return struct.calcsize(self.get_format())

    def _unpack(self, raw):
        return struct.unpack(self.get_format(), raw)[0]

    def unpack(self, stream):
        self.value = self._unpack(self._read_exactly(stream, self.size))


class UIntField(Field):
    '''Unsigned integer with an arbitrary number of bytes, the ones
    that struct doesn't know about (like 24 bits).'''

    def __init__(self, n, default=0, **kw):
        self.n = n
        super().__init__(default=default, **kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value))

    def _get_size(self):
        return self.n

    def _unpack(self, raw):
        bits = Bits(raw)
        return bits.uint if self.endianess == Endianess.BIG_ENDIAN else bits.uintle

    def unpack(self, stream):
        self.value = self._unpack(self._read_exactly(stream, self.size))


class ArrayField(Field):
    '''Unpack an array of "n" fields built from the prototype passed as first argument.

    It behaves like a (read only) list of the unpacked elements.
    '''

    def __init__(self, prototype, n=0, **kw):
        if not isinstance(n, int):
            raise ValueError('n is \'%s\' must be an integer' % n.__class__.__name__)

        self.prototype = prototype
        self.n = n

        super().__init__(**kw)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.prototype.__class__.__name__} x {len(self)})>'

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        return []

    def _get_size(self):
        return sum(element.size for element in self.value)

    def instance_element(self):
        return self.prototype.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        self.value = []
        for idx in range(self.n):
            element = self.instance_element()
            element.offset = stream.tell()
            try:
                element.unpack(stream)
            except UnpackException as e:
                e.chain.append(str(idx))
                raise

            self.value.append(element)


class PaddingField(Field):
    '''Takes as much stream as possible'''

    def value_from_default(self):
        return b''

    def _get_size(self):
        return len(self.value)

    def unpack(self, stream):
        self.value = stream.read_all()
