#!/usr/bin/env python3
"""
Inspect, extract and replace the SVG table of a font file
(c) 2024 Rob Hagemans, licence: https://opensource.org/licenses/MIT
"""

import sys
import argparse

import fontsvg
from fontsvg.documents import save_documents, load_documents
from fontsvg.scripting import run_main


def list_table(args):
    """Print the header and document index."""
    svg = fontsvg.load_svg_table(args.font)
    print(f'version: {svg.version}')
    print(f'offsetToSVGDocIndex: {svg.offset_to_svg_doc_index}')
    print(f'reserved: {svg.reserved}')
    print(f'numEntries: {svg.num_entries}')
    for number, doc in enumerate(svg.svg_documents):
        print(
            f'{number}: glyphs {doc.start_glyph_id}-{doc.end_glyph_id}'
            f" {'gzip' if doc.compressed else 'text'}"
            f' {len(doc.data)} chars'
        )


def extract_table(args):
    """Write the documents to a directory."""
    svg = fontsvg.load_svg_table(args.font)
    paths = save_documents(svg, args.outdir, overwrite=args.overwrite)
    for path in paths:
        print(path)


def insert_table(args):
    """Replace the SVG table with documents from a directory."""
    svg = load_documents(args.indir, compress=args.compress)
    fontsvg.save_svg_table(svg, args.font, args.outfile)


def _get_parser():
    parser = argparse.ArgumentParser(
        prog='svgtable',
        description='Inspect, extract and replace the SVG table of a font file.',
    )
    parser.add_argument(
        '--debug', action='store_true', default=False,
        help='enable debugging output'
    )
    parser.add_argument(
        '--version', action='version', version=f'%(prog)s {fontsvg.__version__}'
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help='show the document index')
    list_parser.add_argument('font', help='TrueType/OpenType font file')
    list_parser.set_defaults(func=list_table)

    extract_parser = subparsers.add_parser(
        'extract', help='write SVG documents to a directory'
    )
    extract_parser.add_argument('font', help='TrueType/OpenType font file')
    extract_parser.add_argument('outdir', help='directory to write documents to')
    extract_parser.add_argument(
        '--overwrite', action='store_true', default=False,
        help='overwrite existing files'
    )
    extract_parser.set_defaults(func=extract_table)

    insert_parser = subparsers.add_parser(
        'insert', help='build the SVG table from a directory of documents'
    )
    insert_parser.add_argument('font', help='TrueType/OpenType font file')
    insert_parser.add_argument(
        'indir', help='directory with glyph<start>[-<end>].svg files'
    )
    insert_parser.add_argument('outfile', help='font file to write')
    insert_parser.add_argument(
        '--compress', action='store_true', default=False,
        help='gzip-compress the documents'
    )
    insert_parser.set_defaults(func=insert_table)
    return parser


def main(argv=None):
    args = _get_parser().parse_args(argv)
    return run_main(args.func, args, debug=args.debug)


if __name__ == '__main__':
    sys.exit(main())
