'''
Command line interface to inspect a region file and extract its chunks.

 $ regiontool inspect -f r.0.0.mca
 $ regiontool extract -f r.0.0.mca -c 5 > chunk.nbt

Set the DEBUG environment variable to have debug logging (on stderr).
'''
import argparse
import logging
import os
import sys

from regionfile.exceptions import RegionException, UnsafeOutputTarget
from regionfile.region import RegionFile


logger = logging.getLogger(__name__)


ROW_FORMAT = '{:<6}{:<6}{:<6}{:<6}'


def build_parser():
    parser = argparse.ArgumentParser(prog='regiontool', description='Inspect and extract region files')
    subparsers = parser.add_subparsers(dest='command', required=True)

    inspect_parser = subparsers.add_parser('inspect', help='list the chunks present in the file')
    inspect_parser.add_argument('-m', '--machine', action='store_true', help='Machine readable output')
    inspect_parser.add_argument('-f', '--file', required=True, help='File to read')

    extract_parser = subparsers.add_parser('extract', help='write the decompressed chunk to stdout')
    extract_parser.add_argument('-f', '--file', required=True, help='File to read')
    extract_parser.add_argument('-c', '--chunk', required=True, type=int, help='Chunk ID to extract')

    return parser


def inspect_region(path, machine=False, out=None):
    out = sys.stdout if out is None else out

    with RegionFile(path) as region:
        if not machine:
            print(ROW_FORMAT.format('ID', 'Start', 'End', 'Size'), file=out)
        for entry in region:
            print(ROW_FORMAT.format(entry.id, entry.start, entry.end, entry.size), file=out)


def extract_chunk(path, chunk_id, out=None):
    out = sys.stdout if out is None else out

    if out.isatty():
        raise UnsafeOutputTarget()

    with RegionFile(path) as region:
        data = region.extract(chunk_id)

    logger.debug('writing %d bytes for chunk %d', len(data), chunk_id)

    out = getattr(out, 'buffer', out)
    out.write(data)
    out.flush()


def main(argv=None):
    logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)

    args = build_parser().parse_args(argv)

    try:
        if args.command == 'inspect':
            inspect_region(args.file, machine=args.machine)
        elif args.command == 'extract':
            extract_chunk(args.file, args.chunk)
    except RegionException as e:
        logger.debug('command \'%s\' failed', args.command, exc_info=True)
        print(f'error: {e}', file=sys.stderr)
        return 1

    return 0
