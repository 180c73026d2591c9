from ..lib.chunk import Chunk
from ..lib.chunk_type import ChunkType
from ..lib.exceptions import PngStashException
from ..lib.png import Png
from ..util.crypto import encrypt_message, read_key_file
from ..util.log import fail_hard, fail_with_exception
from argparse import ArgumentDefaultsHelpFormatter
import os


def encode_message(png_bytes, chunk_type, message, password=None):
    ''' Given the bytes of a PNG, return new bytes with message hidden in an
    extra chunk of the given type appended at the end. If password is given
    the message is encrypted first. '''
    chunk_type = ChunkType.from_string(chunk_type)
    png = Png.from_bytes(png_bytes)
    if password is not None:
        message = encrypt_message(password, message)
    png.append_chunk(Chunk(chunk_type, bytes(message, 'utf-8')))
    return png.raw_data


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'encode', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Hide a message in a PNG file')
    p.add_argument('file', type=str, help='PNG to hide the message in')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk holding the message, '
                   'like ruSt')
    p.add_argument('message', type=str, help='The message to hide')
    p.add_argument('output', type=str, nargs='?', default=None,
                   help='Where to write the new PNG. If not given, overwrite '
                   'file')
    p.add_argument(
        '--key-file', type=str, default=None,
        help='If given, encrypt the message with the passphrase read from '
        'this file.')


def main(args):
    if not os.path.isfile(args.file):
        fail_hard(args.file, 'must exist')
    if args.key_file is not None and not os.path.isfile(args.key_file):
        fail_hard(args.key_file, 'must be a file')
    output = args.file if args.output is None else args.output
    if os.path.isdir(output):
        fail_hard('Output can\'t be a directory')
    pw = read_key_file(args.key_file) if args.key_file else None
    with open(args.file, 'rb') as fd:
        data = fd.read()
    try:
        data = encode_message(data, args.chunk_type, args.message, pw)
    except PngStashException as e:
        fail_with_exception(args.file, e)
    with open(output, 'wb') as fd:
        fd.write(data)
