"""
Core module for the abstraction of a file format

"""
import logging
from typing import Dict, List, Tuple

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import (
    ChunkUnpackException,
    UnpackException,
)


logger = logging.getLogger(__name__)


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: its fields are
    declared as class attributes and are unpacked in the order of declaration.

    A Chunk can contain sub-chunks.

    If a method named "validate_<field name>" is defined, it's called right after
    that field has been unpacked, before going on with the following ones: this
    allows to stop early when a value makes the rest of the data meaningless.
    """

    def __init__(self, source=None, **kwargs):
        for name, prototype in self._meta.prototypes.items():
            setattr(self, name, prototype.create(father=self))

        super().__init__(**kwargs)

        if source is not None:
            stream = Stream(source)
            logger.debug('unpacking \'%s\' from %r', self.__class__.__name__, stream)
            self.unpack(stream)

    def init(self):
        for _, field in self.get_fields():
            field.init()

    # a chunk has no value of its own, only its fields have
    value = property(fget=lambda self: self)

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    def _get_size(self):
        '''the size is derived from the sub-fields'''
        return sum(field.size for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        result = {}
        for name, field in self.get_fields():
            result[name] = (field.offset, field.size)

        return result

    def unpack(self, stream):
        '''Take the binary data from the stream, starting from its actual position,
        and fill the fields with it.

        An offset already set on a field is where it starts, otherwise the
        field follows the previous one.'''
        for field_name, field in self.get_fields():
            if field.offset is not None:
                stream.seek(field.offset)
            else:
                field.offset = stream.tell()

            logger.debug('unpacking %s.%s at offset %d', self.__class__.__name__, field_name, field.offset)

            try:
                field.unpack(stream)
            except UnpackException as e:
                e.chain.append(field_name)
                raise ChunkUnpackException(chain=e.chain, reason=e.reason) from e

            validate = getattr(self, 'validate_%s' % field_name, None)
            if validate:
                validate()
