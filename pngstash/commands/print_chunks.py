from ..lib.png import Png
from ..lib.exceptions import PngStashException
from ..util.log import log_stdout as log
from ..util.log import fail_hard, fail_with_exception
from argparse import ArgumentDefaultsHelpFormatter
import os


def describe_chunk_type(chunk_type):
    flags = [
        'critical' if chunk_type.is_critical else 'ancillary',
        'public' if chunk_type.is_public else 'private',
        'safe to copy' if chunk_type.is_safe_to_copy else 'unsafe to copy',
    ]
    if not chunk_type.is_valid:
        flags.append('INVALID')
    return ', '.join(flags)


def describe_chunks(png_bytes):
    ''' Given the bytes of a PNG, return a list of lines describing it and
    every chunk in it, in file order. '''
    png = Png.from_bytes(png_bytes)
    lines = ['Contains {} chunks'.format(len(png))]
    for c in png.chunks:
        lines.append('{} ({})'.format(c, describe_chunk_type(c.type)))
    return lines


def gen_parser(sub_p):
    p = sub_p.add_parser(
        'print', formatter_class=ArgumentDefaultsHelpFormatter,
        help='Print all the chunks of PNG files')
    p.add_argument('image', nargs='+', help='PNG files to look at')


def main(args):
    for image in args.image:
        if not os.path.isfile(image):
            fail_hard(image, 'must exist')
    for image in args.image:
        with open(image, 'rb') as fd:
            data = fd.read()
        try:
            lines = describe_chunks(data)
        except PngStashException as e:
            fail_with_exception(image, e)
        log(image)
        for line in lines:
            log('   ', line)
