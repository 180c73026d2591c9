class PngStashException(Exception):
    ''' Base class of every error raised while handling PNG chunks. '''
    def __init__(self, txt):
        super().__init__(txt)


class InvalidChunkTypeError(PngStashException):
    ''' The chunk type is not exactly 4 ASCII letters '''
    pass


class TruncatedError(PngStashException):
    ''' The buffer ended before a field was fully read '''
    pass


class BadSignatureError(PngStashException):
    ''' The buffer does not start with the PNG signature '''
    pass


class ChecksumMismatchError(PngStashException):
    ''' The stored CRC of a chunk doesn't match the one we calculated '''
    def __init__(self, chunk_type, expected, given):
        self.expected = expected
        self.given = given
        super().__init__(
            'CRC of {} chunk is {} but {} was expected'.format(
                chunk_type, given, expected))


class PayloadEncodingError(PngStashException):
    ''' The chunk payload was asked for as text but isn't UTF-8 '''
    pass


class ChunkNotFoundError(PngStashException):
    ''' No chunk of the requested type, or the type isn't a valid one '''
    def __init__(self, chunk_type):
        self.chunk_type = chunk_type
        super().__init__('No {} chunk found'.format(chunk_type))


class DecryptionError(PngStashException):
    ''' The encrypted message couldn't be decrypted with the passphrase '''
    pass
