from typing import Optional

from recipe_costing.config import settings
from recipe_costing.schemas.recipe import NutrientFact
from recipe_costing.schemas.units import UnitOfMeasure
from recipe_costing.services.units.conversion_table import CANONICAL_UNITS, ConversionTable, convert_units


def _to_canonical(value: UnitOfMeasure, table: Optional[ConversionTable]) -> UnitOfMeasure:
    target = CANONICAL_UNITS[value.unit_type]
    return convert_units(value, target, value.unit_type, table=table)


def to_base_units(
    fact: NutrientFact,
    basis_amount: Optional[float] = None,
    table: Optional[ConversionTable] = None,
) -> NutrientFact:
    """
    Express a nutrient fact in canonical units on a fixed basis.
    "500 milligrams sodium per 50 grams" -> "1 gram sodium per 100 grams" with the default basis.
    """
    basis = basis_amount if basis_amount is not None else settings.nutrient_basis_amount
    amount = _to_canonical(fact.quantity_amount, table)
    per = _to_canonical(fact.quantity_per, table)
    scale = basis / per.amount
    return NutrientFact(
        nutrient_name=fact.nutrient_name,
        quantity_amount=amount.model_copy(update={"amount": amount.amount * scale}),
        quantity_per=per.model_copy(update={"amount": basis}),
    )
