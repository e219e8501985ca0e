import math

import pytest

from yapgeom.errors import GeometryError, UnitsMismatchError
from yapgeom.units import (
    CUBIC_METERS,
    METERS,
    RADIANS,
    SQUARE_METERS,
    UNITLESS,
    Quantity,
    Unit,
    degrees,
    meters,
    radians,
    to_radians,
    units_of,
)


class TestUnit:
    """unit tests for Unit algebra"""

    def test_products(self):
        assert(METERS * METERS == SQUARE_METERS)
        assert(SQUARE_METERS * METERS == CUBIC_METERS)
        assert(CUBIC_METERS / METERS == SQUARE_METERS)
        assert(METERS / METERS == UNITLESS)
        assert(METERS ** 3 == CUBIC_METERS)
        assert(METERS.inverse() * METERS == UNITLESS)

    def test_canonical_order(self):
        a = Unit.base("m") * Unit.base("rad")
        b = Unit.base("rad") * Unit.base("m")
        assert(a == b)
        assert(hash(a) == hash(b))

    def test_str(self):
        assert(str(UNITLESS) == "1")
        assert(str(METERS) == "m")
        assert(str(SQUARE_METERS) == "m^2")
        assert(str(METERS * RADIANS) == "m*rad")

    def test_bad_power(self):
        with pytest.raises(ValueError):
            METERS ** 1.5

    def test_empty_symbol(self):
        with pytest.raises(ValueError):
            Unit.base("")


class TestQuantity:
    """unit tests for unit-tagged floats"""

    def test_is_a_float(self):
        q = meters(2.5)
        assert(isinstance(q, float))
        assert(q.value == 2.5)
        assert(math.sqrt(meters(4.0)) == 2.0)

    def test_addition_requires_matching_units(self):
        assert(meters(1) + meters(2) == meters(3))
        assert((meters(3) - meters(1)).units == METERS)
        with pytest.raises(UnitsMismatchError):
            meters(1) + Quantity(1.0, SQUARE_METERS)
        with pytest.raises(UnitsMismatchError):
            meters(1) + 1.0

    def test_zero_is_additive_identity(self):
        assert(meters(2) + 0 == meters(2))
        total = sum([meters(1), meters(2), meters(3)])
        assert(total == meters(6))
        assert(total.units == METERS)

    def test_multiplication_combines_units(self):
        area = meters(2) * meters(3)
        assert(area.units == SQUARE_METERS)
        assert(float(area) == 6.0)
        assert((area / meters(2)).units == METERS)
        assert((2 * meters(3)).units == METERS)
        assert((1 / meters(4)).units == METERS.inverse())

    def test_ordering(self):
        assert(meters(1) < meters(2))
        assert(meters(2) >= meters(2))
        with pytest.raises(UnitsMismatchError):
            meters(1) < Quantity(2.0, SQUARE_METERS)

    def test_equality_across_units_is_false(self):
        assert(meters(1) != Quantity(1.0, SQUARE_METERS))
        assert(not (meters(1) == radians(1)))

    def test_unary(self):
        assert((-meters(2)).units == METERS)
        assert(abs(meters(-2)) == meters(2))

    def test_power_keeps_units(self):
        assert(meters(3) ** 2 == Quantity(9.0, SQUARE_METERS))
        assert(meters(2) ** 3.0 == Quantity(8.0, CUBIC_METERS))
        assert((meters(2) ** -1).units == METERS.inverse())
        assert(Quantity(4.0) ** 0.5 == Quantity(2.0))
        assert(2 ** Quantity(3.0) == Quantity(8.0))
        with pytest.raises(UnitsMismatchError):
            meters(4) ** 0.5
        with pytest.raises(UnitsMismatchError):
            2 ** meters(3)
        with pytest.raises(UnitsMismatchError):
            meters(2) ** meters(2)

    def test_floor_division_and_remainder_keep_units(self):
        assert(meters(7) // meters(2) == Quantity(3.0))
        assert(meters(7) // 2 == meters(3))
        assert(meters(7) % meters(2) == meters(1))
        assert(meters(7) % 2 == meters(1))
        q, r = divmod(meters(7), meters(2))
        assert(q == Quantity(3.0) and r == meters(1))
        assert((7 // meters(2)).units == METERS.inverse())
        with pytest.raises(UnitsMismatchError):
            meters(7) % radians(2)
        with pytest.raises(UnitsMismatchError):
            7 % meters(2)

    def test_round_keeps_units(self):
        assert(round(meters(2.26), 1) == meters(2.3))
        assert(round(meters(2.6)) == meters(3))
        assert(isinstance(math.floor(meters(2.6)), int))

    def test_retag_is_rejected(self):
        with pytest.raises(UnitsMismatchError):
            Quantity(meters(1), SQUARE_METERS)

    def test_bad_values(self):
        with pytest.raises(ValueError):
            Quantity("1")
        with pytest.raises(ValueError):
            Quantity(True)
        with pytest.raises(ValueError):
            Quantity(1.0, "m")

    def test_errors_are_value_errors(self):
        assert(issubclass(UnitsMismatchError, GeometryError))
        assert(issubclass(GeometryError, ValueError))


def test_units_of():
    assert units_of(3.0) == UNITLESS
    assert units_of(meters(3.0)) == METERS
    with pytest.raises(ValueError):
        units_of("3")


def test_angles():
    assert math.isclose(float(degrees(180)), math.pi)
    assert degrees(90).units == RADIANS
    assert to_radians(1.5) == 1.5
    assert to_radians(radians(0.5)) == 0.5
    assert to_radians(Quantity(0.25)) == 0.25
    with pytest.raises(UnitsMismatchError):
        to_radians(meters(1))
    with pytest.raises(ValueError):
        to_radians(None)
