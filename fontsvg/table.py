"""
fontsvg.table - serialise named field lists to binary tables

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

from collections import namedtuple
from itertools import accumulate

from .struct import big_endian as be


# field type names, big-endian as all sfnt data
FIELD_TYPES = {
    'USHORT': be.uint16,
    'uint16': be.uint16,
    'ULONG': be.uint32,
    'uint32': be.uint32,
}

# raw bytes, included as given
LITERAL = 'LITERAL'


class Field(namedtuple('Field', 'name type value')):
    """Named, typed value in a table."""

    def __bytes__(self):
        if self.type == LITERAL:
            return bytes(self.value)
        try:
            fieldtype = FIELD_TYPES[self.type]
        except KeyError:
            raise ValueError(
                f'Field type `{self.type}` of field `{self.name}` not understood'
            ) from None
        return fieldtype.to_bytes(self.value)


class Table:
    """Binary table defined by an ordered list of fields."""

    def __init__(self, tag, fields):
        """Create table from tag and sequence of Field or (name, type, value)."""
        if len(tag) != 4:
            raise ValueError(f'Table tag must be 4 characters, got `{tag}`')
        self.tag = tag
        self.fields = tuple(Field(*_f) for _f in fields)
        self._index = {}
        for number, field in enumerate(self.fields):
            if field.name in self._index:
                raise ValueError(f'Duplicate field name `{field.name}`')
            self._index[field.name] = number

    def __repr__(self):
        return f"{type(self).__name__}('{self.tag}', <{len(self.fields)} fields>)"

    def __getitem__(self, name):
        """Value of a named field."""
        return self.fields[self._index[name]].value

    def __bytes__(self):
        return b''.join(bytes(_f) for _f in self.fields)

    def __len__(self):
        """Size of the table in bytes."""
        return len(bytes(self))

    def offset_of(self, name):
        """Byte offset of a named field from the start of the table."""
        number = self._index[name]
        offsets = accumulate(
            (len(bytes(_f)) for _f in self.fields[:number]), initial=0
        )
        *_, offset = offsets
        return offset
