"""
fontsvg.struct - fixed-width binary types

(c) 2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""

import ctypes
from types import SimpleNamespace
from functools import partial


class StructError(ValueError):
    """Binary data does not fit the structure."""


# type strings
TYPES = {
    'uint16': ctypes.c_uint16,
    'USHORT': ctypes.c_uint16,

    'uint32': ctypes.c_uint32,
    'ULONG': ctypes.c_uint32,
}


def _parse_type(atype):
    """Convert struct member type specification to ctypes base type."""
    try:
        return TYPES[atype]
    except KeyError:
        pass
    raise ValueError('Field type `{}` not understood'.format(atype))


def _endian_ctype(endian, ctype):
    """Byte-order specific version of a ctypes scalar type."""
    if endian[:1].lower() in ('b', '>'):
        return ctype.__ctype_be__
    elif endian[:1].lower() in ('l', '<'):
        return ctype.__ctype_le__
    raise ValueError(f"Endianness '{endian}' not recognised.")


class _WrappedCType:
    """Wrapper for ctypes type."""

    def from_bytes(self, data, offset=0):
        """Decode from a buffer at the given offset."""
        # pylint: disable=no-member
        if offset < 0:
            raise StructError(f'Negative offset {offset}.')
        try:
            cvalue = self._ctype.from_buffer_copy(data, offset)
        except ValueError as e:
            raise StructError(
                f'Cannot read {self.size} bytes at offset {offset} '
                f'from buffer of length {len(data)}: {e}'
            ) from e
        return self._unwrap(cvalue)

    def read_from(self, stream, offset=None):
        """Read from binary stream."""
        if offset is not None:
            stream.seek(offset, 0)
        return self.from_bytes(stream.read(self.size))

    @property
    def size(self):
        # pylint: disable=no-member
        return ctypes.sizeof(self._ctype)


class ScalarType(_WrappedCType):
    """
    Fixed-width integer type.

    uint16 = ScalarType('big', ctypes.c_uint16)
    assert uint16.to_bytes(2) == b'\0\2'
    assert uint16.from_bytes(b'\0\2') == 2
    """

    def __init__(self, endian, ctype):
        self._basetype = ctype
        self._ctype = _endian_ctype(endian, ctype)

    def __repr__(self):
        return f'{type(self).__name__}({self._basetype.__name__})'

    def _unwrap(self, cvalue):
        return cvalue.value

    def to_bytes(self, value):
        """Encode an integer value; fail if it doesn't fit."""
        cvalue = self._ctype(value)
        if cvalue.value != value:
            raise StructError(
                f'Value {value} out of range for {self._basetype.__name__}.'
            )
        return bytes(cvalue)


class StructValue(SimpleNamespace):
    """Decoded structure, with fields as attributes."""


class StructType(_WrappedCType):
    """
    Represent a structured type.

    mystruct = StructType('big', first='uint16', second='uint16')
    s = mystruct.from_bytes(b'\0\1\0\2')
    assert s.first == 1 and s.second == 2
    assert mystruct.to_bytes(first=1, second=2) == b'\0\1\0\2'
    """

    def __init__(self, endian, /, **description):
        """Create a structured type."""
        if endian[:1].lower() in ('b', '>'):
            parent = ctypes.BigEndianStructure
        elif endian[:1].lower() in ('l', '<'):
            parent = ctypes.LittleEndianStructure
        else:
            raise ValueError(f"Endianness '{endian}' not recognised.")

        class _CStruct(parent):
            _fields_ = tuple(
                (_field, _parse_type(_type))
                for _field, _type in description.items()
            )
            _pack_ = 1
            _layout_ = 'ms'

        self._ctype = _CStruct
        self._scalars = {
            _field: ScalarType(endian, _parse_type(_type))
            for _field, _type in description.items()
        }

    @property
    def fields(self):
        """Field names, in order."""
        return tuple(self._scalars.keys())

    def _unwrap(self, cvalue):
        return StructValue(**{
            _field: getattr(cvalue, _field)
            for _field in self._scalars
        })

    def to_bytes(self, **values):
        """Encode field values; missing fields are zero."""
        return b''.join(
            _type.to_bytes(values.get(_field, 0))
            for _field, _type in self._scalars.items()
        )


big_endian = SimpleNamespace(
    Struct=partial(StructType, '>'),
    uint16=ScalarType('>', ctypes.c_uint16),
    uint32=ScalarType('>', ctypes.c_uint32),
)
