import pngstash.commands.encode
import pngstash.commands.decode
import pngstash.commands.remove
import pngstash.commands.print_chunks
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
import sys


PNG_STASH_VERSION = '0.1.0'


def create_parser():
    p = ArgumentParser(formatter_class=ArgumentDefaultsHelpFormatter)
    p.add_argument('--version', action='version',
                   version='%(prog)s ' + PNG_STASH_VERSION)
    sub_p = p.add_subparsers(dest='command')
    pngstash.commands.encode.gen_parser(sub_p)
    pngstash.commands.decode.gen_parser(sub_p)
    pngstash.commands.remove.gen_parser(sub_p)
    pngstash.commands.print_chunks.gen_parser(sub_p)
    return p


def main(argv=None):
    parser = create_parser()
    args = parser.parse_args(argv)
    def_args = [args]
    def_kwargs = {}
    known_commands = {
        'encode': {'f': pngstash.commands.encode.main,
                   'a': def_args, 'kw': def_kwargs},
        'decode': {'f': pngstash.commands.decode.main,
                   'a': def_args, 'kw': def_kwargs},
        'remove': {'f': pngstash.commands.remove.main,
                   'a': def_args, 'kw': def_kwargs},
        'print': {'f': pngstash.commands.print_chunks.main,
                  'a': def_args, 'kw': def_kwargs},
    }
    try:
        if args.command not in known_commands:
            parser.print_help()
        else:
            comm = known_commands[args.command]
            sys.exit(comm['f'](*comm['a'], **comm['kw']))
    except KeyboardInterrupt:
        print('')


if __name__ == '__main__':
    main()
