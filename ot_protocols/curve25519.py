"""Scalars and points for the toy curve used by the EC base OT.

The point arithmetic here is deliberately simplified: addition and doubling
are coordinate-wise modulo P, so this is NOT a real elliptic curve group and
offers no discrete-log hardness. Nothing is constant-time. The protocols only
go through Scalar and Point, so a real curve backend can replace this module.
"""

import os
from base64 import b64encode, b64decode

from .errors import InvalidInverse
from .hashing import sha256

P = 2 ** 255 - 19
L = 2 ** 252 + 27742317777372353535851937790883648493

SCALAR_BYTES = 32
COORDINATE_BYTES = 32


def _int_to_le(value, length):
    return value.to_bytes(length, 'little')


def _le_to_int(data):
    return int.from_bytes(data, 'little')


class Scalar:
    __slots__ = ('_value',)

    def __init__(self, value=0):
        self._value = int(value) % L

    @property
    def value(self):
        return self._value

    @classmethod
    def random(cls):
        # 64 bytes reduced mod L keeps the modulo bias negligible
        return cls(_le_to_int(os.urandom(64)))

    @classmethod
    def hash(cls, data):
        return cls(_le_to_int(sha256(data)))

    def _coerce(self, other):
        if isinstance(other, Scalar):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Scalar(self._value + other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Scalar(self._value - other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Scalar(other - self._value)

    def __mul__(self, other):
        if isinstance(other, Point):
            return other.multiply(self)
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Scalar(self._value * other)

    __rmul__ = __mul__

    def __neg__(self):
        return Scalar(-self._value)

    def inverse(self):
        if self._value == 0:
            raise InvalidInverse(self._value, L)
        return Scalar(pow(self._value, -1, L))

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash(('Scalar', self._value))

    def __repr__(self):
        return 'Scalar(%d)' % self._value

    def to_bytes(self):
        return _int_to_le(self._value, SCALAR_BYTES)

    def to_hex(self):
        return self.to_bytes().hex()

    def to_base64(self):
        return b64encode(self.to_bytes()).decode('ascii')

    @classmethod
    def from_bytes(cls, data):
        if len(data) != SCALAR_BYTES:
            raise ValueError('Scalar encoding must be %d bytes, got %d'
                             % (SCALAR_BYTES, len(data)))
        return cls(_le_to_int(data))

    @classmethod
    def from_hex(cls, hex_string):
        return cls.from_bytes(bytes.fromhex(hex_string))

    @classmethod
    def from_base64(cls, base64_string):
        return cls.from_bytes(b64decode(base64_string, validate=True))


class Point:
    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        self._x = int(x) % P
        self._y = int(y) % P

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    @classmethod
    def identity(cls):
        return cls(0, 0)

    @staticmethod
    def derive_y(x):
        return (x * x + 1) % P

    @classmethod
    def hash(cls, data):
        x = _le_to_int(sha256(data)) % P
        return cls(x, cls.derive_y(x))

    @classmethod
    def random(cls):
        return GENERATOR.multiply(Scalar.random())

    def is_infinity(self):
        return self._x == 0 and self._y == 0

    def add(self, other):
        if other is None or other.is_infinity():
            return self
        if self.is_infinity():
            return other
        return Point(self._x + other._x, self._y + other._y)

    def double(self):
        return Point(self._x * 2, self._y * 2)

    def negate(self):
        return Point(-self._x, -self._y)

    def multiply(self, scalar):
        if isinstance(scalar, int):
            scalar = Scalar(scalar)
        result = Point.identity()
        addend = self
        bits = scalar.value
        while bits > 0:
            if bits & 1:
                result = result.add(addend)
            addend = addend.double()
            bits >>= 1
        return result

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.add(other.negate())

    def __neg__(self):
        return self.negate()

    def __mul__(self, other):
        if not isinstance(other, (Scalar, int)):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash(('Point', self._x, self._y))

    def __repr__(self):
        return 'Point(%d, %d)' % (self._x, self._y)

    def to_bytes(self):
        return (_int_to_le(self._x, COORDINATE_BYTES)
                + _int_to_le(self._y, COORDINATE_BYTES))

    def to_hex(self):
        return self.to_bytes().hex()

    def to_base64(self):
        return b64encode(self.to_bytes()).decode('ascii')

    @classmethod
    def from_bytes(cls, data):
        if len(data) != 2 * COORDINATE_BYTES:
            raise ValueError('Point encoding must be %d bytes, got %d'
                             % (2 * COORDINATE_BYTES, len(data)))
        return cls(_le_to_int(data[:COORDINATE_BYTES]),
                   _le_to_int(data[COORDINATE_BYTES:]))

    @classmethod
    def from_hex(cls, hex_string):
        return cls.from_bytes(bytes.fromhex(hex_string))

    @classmethod
    def from_base64(cls, base64_string):
        return cls.from_bytes(b64decode(base64_string, validate=True))


GENERATOR = Point(9, Point.derive_y(9))
