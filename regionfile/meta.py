import copy
import logging
from enum import Enum, auto


logger = logging.getLogger(__name__)


class Endianess(Enum):
    LITTLE_ENDIAN = auto()
    BIG_ENDIAN    = auto()


class FieldBase(object):

    def contribute_to_chunk(self, cls, name):
        if name in cls._meta.fields:
            raise AttributeError(f'field {name} is already present in class {cls.__name__}')

        self.name = name
        cls._meta.fields.append(name)
        cls._meta.prototypes[name] = self

    def create(self, father):
        '''Every chunk instance gets its own copy of the fields declared on the class.'''
        instance = copy.deepcopy(self)
        instance.father = father
        return instance


class Meta(object):
    """Class containing metadata about the abstraction"""

    def __init__(self):
        self.fields = []
        self.prototypes = {}


class MetaChunk(type):
    '''Collects the fields declared in the class body, in order of declaration,
    and moves them into the "_meta" attribute of the new class.

    The declaration order is the order of unpacking.'''

    def __new__(cls, name, bases, attrs):
        declared = [
            (_name, _value) for _name, _value in attrs.items()
            if hasattr(_value, 'contribute_to_chunk') and not isinstance(_value, type)
        ]
        for field_name, _ in declared:
            attrs.pop(field_name)

        new_cls = super().__new__(cls, name, bases, attrs)
        new_cls._meta = Meta()

        # handle inheritance
        parents = [_ for _ in bases if isinstance(_, MetaChunk)]
        for parent in parents:
            for field_name in parent._meta.fields:
                new_cls._meta.fields.append(field_name)
                new_cls._meta.prototypes[field_name] = parent._meta.prototypes[field_name]

        for field_name, field in declared:
            logger.debug('contribute_to_chunk() for field \'%s.%s\'', name, field_name)
            field.contribute_to_chunk(new_cls, field_name)

        return new_cls
