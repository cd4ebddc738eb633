"""
fontsvg.compressors - compression of embedded documents

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import gzip
import zlib

from .magic import Magic, FileFormatError


class Compressor:
    """Compress and decompress byte buffers."""

    magic = None

    def compress(self, data):
        """Compress a bytes buffer."""
        raise NotImplementedError()

    def decompress(self, data):
        """Decompress a bytes buffer."""
        raise NotImplementedError()

    def __repr__(self):
        return f'{type(self).__name__}()'


class GzipCompressor(Compressor):
    """Gzip (RFC 1952) compression."""

    magic = Magic(b'\x1f\x8b')

    def __init__(self, compresslevel=9):
        self.compresslevel = compresslevel

    def compress(self, data):
        """Compress to a gzip stream."""
        # zero timestamp so that output only depends on input
        return gzip.compress(
            bytes(data), compresslevel=self.compresslevel, mtime=0
        )

    def decompress(self, data):
        """Decompress a gzip stream."""
        try:
            return gzip.decompress(bytes(data))
        except (gzip.BadGzipFile, EOFError, zlib.error) as e:
            raise FileFormatError(f'Could not decompress gzip data: {e}') from e


GZIP = GzipCompressor()
GZIP_MAGIC = GzipCompressor.magic
