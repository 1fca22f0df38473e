class RegionException(Exception):
    '''Base class to extend in order to throw exception in regionfile.

    Everything raised on purpose by this package derives from it, so that a caller
    (the command line tool in the first place) can report it and exit.
    '''
    pass


class UnpackException(RegionException):
    '''It takes a single argument that represents the chain of the layer that
    caused the exception.'''

    def __init__(self, chain, reason=None):
        self.chain = chain
        self.reason = reason
        super().__init__()

    # the chain grows while the exception bubbles up, so the message is built late
    def __str__(self):
        where = '.'.join(reversed(self.chain)) or '<root>'
        if self.reason:
            return f"failed to unpack '{where}': {self.reason}"
        return f"failed to unpack '{where}'"


class ChunkUnpackException(UnpackException):
    pass


class IoFailure(RegionException):
    '''Wraps the error raised by the underlying source, naming the operation
    that was going on: "open", "header parse" or "data read".'''

    MESSAGES = {
        'open': 'failed to open region file',
        'header parse': 'failed to parse header',
        'data read': 'failed to read chunk data',
    }

    def __init__(self, operation, cause):
        self.operation = operation
        self.cause = cause
        prefix = self.MESSAGES.get(operation, f'failed during {operation}')
        super().__init__(f'{prefix}: {cause}')


class ChunkNotFound(RegionException):

    def __init__(self, chunk_id):
        self.chunk_id = chunk_id
        super().__init__(f'no chunk with ID {chunk_id}')


class UnsupportedFormat(RegionException):

    def __init__(self, tag, expected):
        self.tag = tag
        self.expected = expected
        super().__init__(
            f'unsupported format {tag}, the only supported format is '
            f'{expected.value} ({expected.name.lower()})')


class DecompressionFailure(RegionException):

    def __init__(self, reason):
        self.reason = reason
        super().__init__(f'failed to decompress chunk data: {reason}')


class UnsafeOutputTarget(RegionException):

    def __init__(self):
        super().__init__('refusing to output to a tty (please pipe output to a file)')
