"""
fontsvg.documents - SVG documents as files in a directory

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import re
import logging
from pathlib import Path

from .svg import SvgTable, SvgDocument


# glyph5.svg, glyph6-10.svg
_FILENAME_RE = re.compile(r'glyph(?P<start>\d+)(?:-(?P<end>\d+))?\.svg')


def document_filename(svg_document):
    """File name encoding the glyph range of a document."""
    start, end = svg_document.start_glyph_id, svg_document.end_glyph_id
    if start == end:
        return f'glyph{start}.svg'
    return f'glyph{start}-{end}.svg'


def parse_document_filename(name):
    """Glyph range (start, end) from a document file name, or None."""
    match = _FILENAME_RE.fullmatch(Path(name).name.lower())
    if not match:
        return None
    start = int(match.group('start'))
    end = match.group('end')
    return start, (start if end is None else int(end))


def save_documents(svg, outdir, overwrite=False):
    """
    Write the documents of an SvgTable to individual files.

    svg: SvgTable
    outdir: directory to write to; created if needed
    overwrite: replace existing files (default: False)
    """
    outdir = Path(outdir)
    paths = [outdir / document_filename(_doc) for _doc in svg.svg_documents]
    # check all targets before writing anything
    for number, filepath in enumerate(paths):
        if filepath in paths[:number]:
            raise ValueError(
                f'More than one document for glyph range {filepath.stem}.'
            )
        if not overwrite and filepath.exists():
            raise ValueError(
                f'Overwriting existing file {str(filepath)}'
                ' requires overwrite to be set'
            )
    logging.debug('Creating directory `%s`', outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    for svg_document, filepath in zip(svg.svg_documents, paths):
        logging.debug('Writing `%s`.', filepath)
        filepath.write_bytes(svg_document.data.encode('utf-8'))
    return paths


def load_documents(indir, compress=False):
    """
    Create an SvgTable from a directory of document files.

    Files are named glyph<start>.svg or glyph<start>-<end>.svg and are
    stored in order of glyph range.

    indir: directory to read from
    compress: mark documents for gzip compression (default: False)
    """
    indir = Path(indir)
    if not indir.is_dir():
        raise NotADirectoryError(f'`{indir}` is not a directory.')
    ranged = []
    for filepath in indir.iterdir():
        if filepath.is_dir():
            continue
        glyph_range = parse_document_filename(filepath.name)
        if glyph_range is None:
            logging.warning('Skipping `%s`: not a glyph document name.', filepath.name)
            continue
        ranged.append((glyph_range, filepath))
    svg_documents = []
    for (start, end), filepath in sorted(ranged):
        logging.debug('Reading `%s`.', filepath)
        svg_documents.append(SvgDocument(
            start_glyph_id=start,
            end_glyph_id=end,
            data=filepath.read_bytes().decode('utf-8'),
            compressed=compress,
        ))
    return SvgTable.create(svg_documents)
