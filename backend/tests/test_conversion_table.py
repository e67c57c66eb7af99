import pytest

from recipe_costing.errors import ConversionError
from recipe_costing.schemas.units import UoMName, UoMType, uom
from recipe_costing.services.units.conversion_table import ConversionTable, convert_units


def test_same_kind_conversion():
    result = convert_units(uom(2, UoMName.kilograms), UoMName.pounds, UoMType.mass)
    assert result.unit_name == UoMName.pounds
    assert result.unit_type == UoMType.mass
    assert result.amount == pytest.approx(2000 / 453.592)


def test_volume_units():
    result = convert_units(uom(3, UoMName.teaspoons), UoMName.tablespoons, UoMType.volume)
    assert result.amount == pytest.approx(3 * 4.92892 / 14.7868)


def test_millilitres_to_grams_entry_and_inverse():
    table = ConversionTable()
    assert table.try_convert(uom(250, UoMName.millilitres), UoMName.grams, UoMType.mass).amount == 250
    assert table.try_convert(uom(80, UoMName.grams), UoMName.millilitres, UoMType.volume).amount == 80


def test_custom_density_entry():
    table = ConversionTable(cross_kind={(UoMName.millilitres, UoMName.grams): 0.5})
    assert table.try_convert(uom(100, UoMName.millilitres), UoMName.grams, UoMType.mass).amount == 50
    assert table.try_convert(uom(100, UoMName.grams), UoMName.millilitres, UoMType.volume).amount == 200


def test_no_direct_entry_returns_none():
    table = ConversionTable()
    assert table.try_convert(uom(1, UoMName.cups), UoMName.grams, UoMType.mass) is None
    assert table.try_convert(uom(1, UoMName.whole), UoMName.grams, UoMType.mass) is None


def test_target_type_mismatch_returns_none():
    table = ConversionTable()
    assert table.try_convert(uom(1, UoMName.grams), UoMName.kilograms, UoMType.volume) is None


def test_convert_units_raises_without_entry():
    with pytest.raises(ConversionError) as exc:
        convert_units(uom(2, UoMName.whole), UoMName.grams, UoMType.mass)
    assert "whole" in str(exc.value)
    assert "grams" in str(exc.value)


@pytest.mark.parametrize(
    "start, via, target",
    [
        (uom(1.5, UoMName.kilograms), UoMName.ounces, UoMName.grams),
        (uom(12, UoMName.ounces), UoMName.milligrams, UoMName.pounds),
        (uom(2, UoMName.cups), UoMName.tablespoons, UoMName.litres),
        (uom(750, UoMName.millilitres), UoMName.teaspoons, UoMName.cups),
    ],
)
def test_chained_conversions_agree_with_direct(start, via, target):
    kind = start.unit_type
    chained = convert_units(convert_units(start, via, kind), target, kind)
    direct = convert_units(start, target, kind)
    assert chained.amount == pytest.approx(direct.amount)
