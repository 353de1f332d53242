import pytest

from vfxgeom.enums import IntersectType


def test_values_match_declaration_order():
    assert IntersectType(0) is IntersectType.INSIDE
    assert IntersectType(1) is IntersectType.OUTSIDE
    assert IntersectType["INTERSECTS"].value == 2


def test_lookup_by_value():
    assert IntersectType(2) is IntersectType.INTERSECTS
    assert [m.name for m in IntersectType] == ["INSIDE", "OUTSIDE", "INTERSECTS"]


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        IntersectType(3)