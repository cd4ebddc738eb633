"""
fontsvg.magic - data type recognition

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


class FileFormatError(Exception):
    """Incorrect file format."""


class Magic:
    """Match file contents against a leading byte sequence."""

    def __init__(self, value):
        """Initialise from bytes."""
        if not isinstance(value, bytes):
            raise TypeError(
                f'Initialiser must be bytes, not {type(value).__name__}'
            )
        self._value = value

    def __repr__(self):
        return f'{type(self).__name__}({self._value!r})'

    def __len__(self):
        """Signature length."""
        return len(self._value)

    def matches(self, target):
        """Target bytes start with the signature."""
        return bytes(target[:len(self)]) == self._value

    def fits(self, instream):
        """Binary stream matches the signature; stream position is kept."""
        pos = instream.tell()
        try:
            return self.matches(instream.read(len(self)))
        finally:
            instream.seek(pos)
