"""
fontsvg.sfnt - SVG table in TrueType/OpenType font files

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.tables.DefaultTable import DefaultTable

from .magic import Magic, FileFormatError
from .svg import parse_svg_table, build_svg_table
from .compressors import GZIP
from .constants import SVG_TAG


SFNT_MAGIC = (
    Magic(b'\0\1\0\0'),
    # TrueType
    Magic(b'true'),
    # OpenType
    Magic(b'OTTO'),
    # WOFF
    Magic(b'wOFF'),
)


def _open_sfnt(infile):
    """Open font file with fontTools, after checking the signature."""
    with open(infile, 'rb') as instream:
        if not any(_magic.fits(instream) for _magic in SFNT_MAGIC):
            raise FileFormatError(
                f'Not a TrueType/OpenType font file: `{Path(infile).name}`'
            )
    try:
        return TTFont(infile, recalcTimestamp=False)
    except TTLibError as e:
        raise FileFormatError(e) from e


def load_svg_table(infile, compressor=GZIP):
    """
    Read the SVG table from a font file.

    infile: path to TrueType, OpenType or WOFF file
    compressor: decompressor for gzipped documents (default: gzip)
    """
    font = _open_sfnt(infile)
    try:
        if SVG_TAG not in font:
            raise FileFormatError(
                f'No `{SVG_TAG}` table in font file `{Path(infile).name}`'
            )
        data = font.getTableData(SVG_TAG)
    finally:
        font.close()
    logging.debug('Read %d bytes of `%s` table.', len(data), SVG_TAG)
    return parse_svg_table(data, compressor=compressor)


def save_svg_table(svg, infile, outfile, compressor=GZIP):
    """
    Write a font file with the SVG table replaced.

    svg: SvgTable to store
    infile: path to font file providing all other tables
    outfile: path to write the new font file to
    compressor: compressor for documents marked as compressed (default: gzip)
    """
    font = _open_sfnt(infile)
    try:
        if SVG_TAG in font:
            logging.info('Replacing existing `%s` table.', SVG_TAG)
        table = DefaultTable(SVG_TAG)
        table.data = build_svg_table(svg, compressor=compressor)
        font[SVG_TAG] = table
        font.save(outfile)
    finally:
        font.close()
    logging.debug('Wrote %d bytes of `%s` table.', len(table.data), SVG_TAG)
