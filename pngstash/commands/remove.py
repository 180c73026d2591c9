from ..lib.png import Png
from ..lib.exceptions import PngStashException
from ..util.log import log_stderr as log
from ..util.log import fail_hard, fail_with_exception
from argparse import ArgumentDefaultsHelpFormatter
import os


def remove_message(png_bytes, chunk_type):
    ''' Given the bytes of a PNG, return new bytes without the first chunk of
    the given type. Raises ChunkNotFoundError if there is no such chunk. '''
    png = Png.from_bytes(png_bytes)
    png.remove_chunk(chunk_type)
    return png.raw_data


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'remove', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Remove a hidden message from a PNG file')
    p.add_argument('file', type=str, help='PNG to remove the message from. '
                   'It is overwritten.')
    p.add_argument('chunk_type', type=str,
                   help='4 letter type of the chunk holding the message')


def main(args):
    if not os.path.isfile(args.file):
        fail_hard(args.file, 'must exist')
    with open(args.file, 'rb') as fd:
        data = fd.read()
    try:
        data = remove_message(data, args.chunk_type)
    except PngStashException as e:
        fail_with_exception(args.file, e)
    with open(args.file, 'wb') as fd:
        fd.write(data)
    log('Removed', args.chunk_type, 'chunk from', args.file)
