"""Unit-tagged scalars for yapgeom.

Scalars in **yapgeom** are ordinary Python floats, exactly as in yapCAD.
Where a scalar has a physical meaning (a length, an area, an angle) it
is returned as a ``Quantity``, which *is* a float and can be used
anywhere a float can, but which also carries a ``units`` tag.  The tag
is propagated through multiplication and division and checked on
addition, subtraction and ordering, so that adding a length to an area
fails loudly instead of producing a meaningless number.

There is deliberately no unit conversion here: a ``Unit`` is only a
product of named base symbols raised to integer powers.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import Dict, Tuple, Union

from yapgeom.errors import UnitsMismatchError, require_same_units

Number = Union[int, float]


@dataclass(frozen=True)
class Unit:
    """A product of base unit symbols with integer exponents."""

    dimensions: Tuple[Tuple[str, int], ...] = ()

    @classmethod
    def base(cls, symbol: str) -> "Unit":
        if not symbol:
            raise ValueError("base unit needs a non-empty symbol")
        return cls(((symbol, 1),))

    @staticmethod
    def _combine(a: Dict[str, int], b: Dict[str, int], sign: int) -> "Unit":
        result = dict(a)
        for symbol, power in b.items():
            result[symbol] = result.get(symbol, 0) + sign * power
        return Unit(tuple(sorted((s, p) for s, p in result.items() if p != 0)))

    def __mul__(self, other: "Unit") -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit._combine(dict(self.dimensions), dict(other.dimensions), 1)

    def __truediv__(self, other: "Unit") -> "Unit":
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit._combine(dict(self.dimensions), dict(other.dimensions), -1)

    def __pow__(self, n: int) -> "Unit":
        if isinstance(n, bool) or not isinstance(n, int):
            raise ValueError('units can only be raised to integer powers: {}'.format(n))
        return Unit(tuple((s, p * n) for s, p in self.dimensions if p * n != 0))

    def inverse(self) -> "Unit":
        return self ** -1

    @property
    def is_unitless(self) -> bool:
        return not self.dimensions

    def __str__(self) -> str:
        if not self.dimensions:
            return "1"
        return "*".join(s if p == 1 else "{}^{}".format(s, p)
                        for s, p in self.dimensions)


UNITLESS = Unit()
METERS = Unit.base("m")
SQUARE_METERS = METERS * METERS
CUBIC_METERS = SQUARE_METERS * METERS
RADIANS = Unit.base("rad")


def _isgoodnum(n) -> bool:
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


class Quantity(float):
    """A float tagged with a ``Unit``.

    Arithmetic, ``round()`` and ``divmod()`` keep or combine the units.
    ``int()``, ``math.floor()`` and friends return plain numbers.
    """

    def __new__(cls, value: Number, units: Unit = UNITLESS) -> "Quantity":
        if not _isgoodnum(value):
            raise ValueError('bad value passed to Quantity: {}'.format(value))
        if not isinstance(units, Unit):
            raise ValueError('bad units passed to Quantity: {}'.format(units))
        if isinstance(value, Quantity) and value.units != units:
            raise UnitsMismatchError(
                "cannot retag a '{}' quantity as '{}'".format(value.units, units))
        self = super().__new__(cls, value)
        self.units = units
        return self

    @classmethod
    def zero(cls, units: Unit = UNITLESS) -> "Quantity":
        return cls(0.0, units)

    @property
    def value(self) -> float:
        return float(self)

    def __repr__(self) -> str:
        return "Quantity({}, {})".format(float(self), self.units)

    def __str__(self) -> str:
        if self.units.is_unitless:
            return str(float(self))
        return "{} {}".format(float(self), self.units)

    # additive operations need matching units; a literal zero is the
    # additive identity of every unit so that sum() works
    def _additive_units(self, other, operation: str) -> Unit:
        if isinstance(other, Quantity):
            require_same_units(self.units, other.units, operation)
            return self.units
        if not _isgoodnum(other):
            return None
        if other != 0 and not self.units.is_unitless:
            raise UnitsMismatchError(
                "{}: cannot combine '{}' quantity with a plain number".format(
                    operation, self.units))
        return self.units

    def __add__(self, other):
        units = self._additive_units(other, "add")
        if units is None:
            return NotImplemented
        return Quantity(float(self) + float(other), units)

    __radd__ = __add__

    def __sub__(self, other):
        units = self._additive_units(other, "subtract")
        if units is None:
            return NotImplemented
        return Quantity(float(self) - float(other), units)

    def __rsub__(self, other):
        units = self._additive_units(other, "subtract")
        if units is None:
            return NotImplemented
        return Quantity(float(other) - float(self), units)

    def __mul__(self, other):
        if isinstance(other, Quantity):
            return Quantity(float(self) * float(other), self.units * other.units)
        if _isgoodnum(other):
            return Quantity(float(self) * other, self.units)
        return NotImplemented

    def __rmul__(self, other):
        if _isgoodnum(other):
            return Quantity(other * float(self), self.units)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(float(self) / float(other), self.units / other.units)
        if _isgoodnum(other):
            return Quantity(float(self) / other, self.units)
        return NotImplemented

    def __rtruediv__(self, other):
        if _isgoodnum(other):
            return Quantity(other / float(self), self.units.inverse())
        return NotImplemented

    def __floordiv__(self, other):
        if isinstance(other, Quantity):
            return Quantity(float(self) // float(other), self.units / other.units)
        if _isgoodnum(other):
            return Quantity(float(self) // other, self.units)
        return NotImplemented

    def __rfloordiv__(self, other):
        if _isgoodnum(other):
            return Quantity(other // float(self), self.units.inverse())
        return NotImplemented

    # the remainder has the units of the dividend, so both sides must agree
    def __mod__(self, other):
        if isinstance(other, Quantity):
            require_same_units(self.units, other.units, "mod")
            return Quantity(float(self) % float(other), self.units)
        if _isgoodnum(other):
            return Quantity(float(self) % other, self.units)
        return NotImplemented

    def __rmod__(self, other):
        if not _isgoodnum(other):
            return NotImplemented
        if not self.units.is_unitless:
            raise UnitsMismatchError(
                "mod: cannot divide a plain number by a '{}' quantity".format(self.units))
        return Quantity(other % float(self))

    def __divmod__(self, other):
        q = self.__floordiv__(other)
        if q is NotImplemented:
            return q
        return q, self.__mod__(other)

    def __rdivmod__(self, other):
        q = self.__rfloordiv__(other)
        if q is NotImplemented:
            return q
        return q, self.__rmod__(other)

    def __pow__(self, n):
        if isinstance(n, Quantity):
            if not n.units.is_unitless:
                raise UnitsMismatchError(
                    "pow: exponent must be unitless, not '{}'".format(n.units))
            n = float(n)
        if not _isgoodnum(n):
            return NotImplemented
        if isinstance(n, int):
            return Quantity(float(self) ** n, self.units ** n)
        if float(n).is_integer():
            return Quantity(float(self) ** n, self.units ** int(n))
        if not self.units.is_unitless:
            raise UnitsMismatchError(
                "pow: '{}' quantity needs an integer exponent: {}".format(self.units, n))
        return Quantity(float(self) ** n)

    def __rpow__(self, other):
        if not _isgoodnum(other):
            return NotImplemented
        if not self.units.is_unitless:
            raise UnitsMismatchError(
                "pow: exponent must be unitless, not '{}'".format(self.units))
        return Quantity(other ** float(self))

    def __round__(self, ndigits=None):
        return Quantity(round(float(self), ndigits), self.units)

    def __neg__(self):
        return Quantity(-float(self), self.units)

    def __pos__(self):
        return self

    def __abs__(self):
        return Quantity(abs(float(self)), self.units)

    def _check_order(self, other) -> None:
        if isinstance(other, Quantity):
            require_same_units(self.units, other.units, "compare")

    def __lt__(self, other):
        self._check_order(other)
        return float.__lt__(self, other)

    def __le__(self, other):
        self._check_order(other)
        return float.__le__(self, other)

    def __gt__(self, other):
        self._check_order(other)
        return float.__gt__(self, other)

    def __ge__(self, other):
        self._check_order(other)
        return float.__ge__(self, other)

    def __eq__(self, other):
        if isinstance(other, Quantity) and other.units != self.units:
            return False
        return float.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = float.__hash__


def units_of(value) -> Unit:
    """Return the units of ``value``; plain numbers are unitless."""

    if isinstance(value, Quantity):
        return value.units
    if _isgoodnum(value):
        return UNITLESS
    raise ValueError('bad scalar value: {}'.format(value))


def meters(x: Number) -> Quantity:
    return Quantity(x, METERS)


def radians(x: Number) -> Quantity:
    return Quantity(x, RADIANS)


def degrees(x: Number) -> Quantity:
    """An angle given in degrees, stored in radians."""
    return Quantity(float(x) * pi / 180.0, RADIANS)


def to_radians(angle) -> float:
    """Return ``angle`` as a raw radian float.

    Plain numbers are taken to be radians already.  Quantities must be
    tagged ``RADIANS`` (or be unitless).
    """
    if isinstance(angle, Quantity):
        if angle.units not in (RADIANS, UNITLESS):
            raise UnitsMismatchError(
                "angle must be in radians, not '{}'".format(angle.units))
        return float(angle)
    if _isgoodnum(angle):
        return float(angle)
    raise ValueError('bad angle: {}'.format(angle))


__all__ = [
    "Unit",
    "Quantity",
    "UNITLESS",
    "METERS",
    "SQUARE_METERS",
    "CUBIC_METERS",
    "RADIANS",
    "units_of",
    "meters",
    "radians",
    "degrees",
    "to_radians",
]
