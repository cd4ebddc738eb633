"""
fontsvg.binary - reading from binary buffers

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from .struct import StructError


def get_span(data, offset, length):
    """Slice exactly `length` bytes at `offset`; fail if out of bounds."""
    if offset < 0 or length < 0 or offset + length > len(data):
        raise StructError(
            f'Cannot read {length} bytes at offset {offset} '
            f'from buffer of length {len(data)}.'
        )
    return bytes(data[offset:offset+length])


class Cursor:
    """Read consecutive binary fields from a shared buffer."""

    def __init__(self, data, offset=0):
        """Set up cursor on buffer at given offset."""
        self._data = data
        self._offset = offset

    def __repr__(self):
        return f'{type(self).__name__}(<{len(self._data)} bytes>, offset={self._offset})'

    @property
    def offset(self):
        """Current position in the buffer."""
        return self._offset

    def seek(self, offset):
        """Move to an absolute position in the buffer."""
        self._offset = offset

    def read(self, fieldtype):
        """Read a scalar or structure and advance."""
        value = fieldtype.from_bytes(self._data, self._offset)
        self._offset += fieldtype.size
        return value

    def read_bytes(self, length):
        """Read a run of bytes and advance."""
        value = get_span(self._data, self._offset, length)
        self._offset += length
        return value
