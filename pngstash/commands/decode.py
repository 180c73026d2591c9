from ..lib.png import Png
from ..lib.exceptions import ChunkNotFoundError, PngStashException
from ..util.crypto import decrypt_message, read_key_file
from ..util.log import log_stdout as log
from ..util.log import fail_hard, fail_with_exception
from argparse import ArgumentDefaultsHelpFormatter
import os


def decode_message(png_bytes, chunk_type, password=None):
    ''' Given the bytes of a PNG, return the message held in the first chunk
    of the given type. Raises ChunkNotFoundError if there is no such chunk
    and PayloadEncodingError if it doesn't hold text. '''
    png = Png.from_bytes(png_bytes)
    chunk = png.chunk_by_type(chunk_type)
    if chunk is None:
        raise ChunkNotFoundError(chunk_type)
    message = chunk.data_as_string()
    if password is not None:
        message = decrypt_message(password, message)
    return message


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'decode', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Print a message hidden in a PNG file')
    p.add_argument('file', type=str, help='PNG holding the message')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk holding the message')
    p.add_argument(
        '--key-file', type=str, default=None,
        help='If the message was encrypted, read the passphrase from this '
        'file.')


def main(args):
    if not os.path.isfile(args.file):
        fail_hard(args.file, 'must exist')
    if args.key_file is not None and not os.path.isfile(args.key_file):
        fail_hard(args.key_file, 'must be a file')
    pw = read_key_file(args.key_file) if args.key_file else None
    with open(args.file, 'rb') as fd:
        data = fd.read()
    try:
        message = decode_message(data, args.chunk_type, pw)
    except PngStashException as e:
        fail_with_exception(args.file, e)
    log(message)
