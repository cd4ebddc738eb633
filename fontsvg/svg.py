"""
fontsvg.svg - the OpenType `SVG ` table

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import logging
from collections import namedtuple

from .struct import big_endian as be, StructError
from .binary import Cursor, get_span
from .table import Table, Field, LITERAL
from .magic import FileFormatError
from .compressors import GZIP, GZIP_MAGIC
from .constants import SVG_TAG, SVG_HEADER_SIZE


# https://learn.microsoft.com/en-us/typography/opentype/spec/svg

_SVG_HEADER = be.Struct(
    version='uint16',
    # offset from start of table to the SVG Document Index
    offsetToSVGDocIndex='uint32',
    reserved='uint32',
)

_SVG_DOC_INDEX_ENTRY = be.Struct(
    startGlyphID='uint16',
    endGlyphID='uint16',
    # offset from start of the SVG Document Index
    svgDocOffset='uint32',
    # length of the raw, possibly compressed, document
    svgDocLength='uint32',
)

# numEntries precedes the entries in the document index
_NUM_ENTRIES = be.uint16


class SvgDocument(namedtuple(
        'SvgDocument', 'start_glyph_id end_glyph_id data compressed',
        defaults=(False,),
    )):
    """SVG document for an inclusive range of glyph ids."""


class SvgTable(namedtuple(
        'SvgTable',
        'version offset_to_svg_doc_index reserved num_entries svg_documents'
    )):
    """SVG table: header and document records in index order."""

    @classmethod
    def create(cls, svg_documents=(), offset_to_svg_doc_index=SVG_HEADER_SIZE):
        """Create table with default header for a sequence of documents."""
        svg_documents = tuple(svg_documents)
        return cls(
            version=0,
            offset_to_svg_doc_index=offset_to_svg_doc_index,
            reserved=0,
            num_entries=len(svg_documents),
            svg_documents=svg_documents,
        )


def is_gzipped(data):
    """Document bytes start with the gzip signature."""
    return GZIP_MAGIC.matches(data)


###############################################################################
# reader

def parse_svg_table(data, start=0, compressor=GZIP):
    """
    Parse an SVG table from a binary buffer.

    data: buffer holding the table, possibly as part of a larger font file
    start: offset of the table in the buffer (default: 0)
    compressor: decompressor for gzipped documents (default: gzip)
    """
    try:
        return _parse_svg_table(data, start, compressor)
    except StructError as e:
        raise FileFormatError(f'SVG table truncated: {e}') from e


def _parse_svg_table(data, start, compressor):
    """Parse an SVG table; may raise StructError."""
    cursor = Cursor(data, start)
    header = cursor.read(_SVG_HEADER)
    logging.info('SVG table header:')
    for name, value in vars(header).items():
        logging.info('    %s: %s', name, value)
    # numEntries and the entries follow the header;
    # offsetToSVGDocIndex only locates the documents
    num_entries = cursor.read(_NUM_ENTRIES)
    doc_index_start = start + header.offsetToSVGDocIndex
    logging.info('    numEntries: %s', num_entries)
    svg_documents = []
    for number in range(num_entries):
        entry = cursor.read(_SVG_DOC_INDEX_ENTRY)
        logging.debug('SVG document index entry %d: %s', number, entry)
        svg_documents.append(
            _parse_svg_document(data, doc_index_start, entry, compressor)
        )
    return SvgTable(
        version=header.version,
        offset_to_svg_doc_index=header.offsetToSVGDocIndex,
        reserved=header.reserved,
        num_entries=num_entries,
        svg_documents=tuple(svg_documents),
    )


def _parse_svg_document(data, doc_index_start, entry, compressor):
    """Extract and decode the document described by an index entry."""
    svg_data = get_span(
        data, doc_index_start + entry.svgDocOffset, entry.svgDocLength
    )
    # documents are plain text or gzip-encoded
    compressed = is_gzipped(svg_data)
    if compressed:
        svg_data = compressor.decompress(svg_data)
    try:
        text = svg_data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise FileFormatError(
            f'SVG document for glyphs {entry.startGlyphID}-{entry.endGlyphID} '
            f'is not valid UTF-8: {e}'
        ) from e
    return SvgDocument(
        start_glyph_id=entry.startGlyphID,
        end_glyph_id=entry.endGlyphID,
        data=text,
        compressed=compressed,
    )


###############################################################################
# writer

def _encode_svg_document(svg_document, compressor):
    """Convert document text to stored bytes."""
    svg_data = svg_document.data.encode('utf-8')
    if svg_document.compressed:
        svg_data = compressor.compress(svg_data)
    return svg_data


def make_svg_table(svg, compressor=GZIP):
    """
    Convert an SvgTable to a binary table definition.

    Version and reserved fields are written as 0; the number of entries and
    all document offsets and lengths are calculated from the documents.
    The document index always follows the header; an offsetToSVGDocIndex
    past the end of the index entries is out of range.
    """
    svg_documents = tuple(svg.svg_documents)
    num_entries = len(svg_documents)
    fields = [
        Field('version', 'USHORT', 0),
        Field('offsetToSVGDocIndex', 'ULONG', svg.offset_to_svg_doc_index),
        Field('reserved', 'ULONG', 0),
        Field('numEntries', 'USHORT', num_entries),
    ]
    # lengths must be known before the offsets can be calculated
    doc_data = [_encode_svg_document(_doc, compressor) for _doc in svg_documents]
    # documents follow the index entries; offsets are relative to
    # offsetToSVGDocIndex, which normally points at numEntries
    svg_doc_offset = (
        SVG_HEADER_SIZE + _NUM_ENTRIES.size
        + num_entries * _SVG_DOC_INDEX_ENTRY.size
        - svg.offset_to_svg_doc_index
    )
    for number, (svg_document, data) in enumerate(zip(svg_documents, doc_data)):
        logging.debug(
            'SVG document %d: glyphs %d-%d, offset %d, length %d',
            number, svg_document.start_glyph_id, svg_document.end_glyph_id,
            svg_doc_offset, len(data)
        )
        fields.extend((
            Field(f'startGlyphID_{number}', 'USHORT', svg_document.start_glyph_id),
            Field(f'endGlyphID_{number}', 'USHORT', svg_document.end_glyph_id),
            Field(f'svgDocOffset_{number}', 'ULONG', svg_doc_offset),
            Field(f'svgDocLength_{number}', 'ULONG', len(data)),
        ))
        svg_doc_offset += len(data)
    fields.extend(
        Field(f'svgDocument_{_number}', LITERAL, _data)
        for _number, _data in enumerate(doc_data)
    )
    return Table(SVG_TAG, fields)


def build_svg_table(svg, compressor=GZIP):
    """Convert an SvgTable to binary."""
    return bytes(make_svg_table(svg, compressor))
