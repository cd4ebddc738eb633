"""
fontsvg - read and write the SVG table of OpenType fonts

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import sys as _sys
assert _sys.version_info >= (3, 9)

from .constants import VERSION as __version__
from .magic import FileFormatError
from .struct import StructError
from .svg import (
    SvgTable, SvgDocument,
    parse_svg_table, make_svg_table, build_svg_table, is_gzipped,
)
from .sfnt import load_svg_table, save_svg_table
