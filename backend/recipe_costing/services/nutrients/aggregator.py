"""Accumulate a line item's nutrient contributions into a per-recipe nutrient mapping."""

from typing import Dict, Optional

from recipe_costing.logging import get_logger
from recipe_costing.schemas.recipe import NutrientFact
from recipe_costing.schemas.units import UnitOfMeasure, UoMName, UoMType
from recipe_costing.services.costing.selector import SupplierChoice
from recipe_costing.services.nutrients.base_units import to_base_units
from recipe_costing.services.units.conversion_table import ConversionTable
from recipe_costing.services.units.converter import convert_with_fallback

logger = get_logger(__name__)


def _empty_entry(base_fact: NutrientFact) -> NutrientFact:
    return NutrientFact(
        nutrient_name=base_fact.nutrient_name,
        quantity_amount=base_fact.quantity_amount.model_copy(update={"amount": 0.0}),
        quantity_per=base_fact.quantity_per.model_copy(),
    )


def nutrient_contribution(
    required: UnitOfMeasure,
    base_fact: NutrientFact,
    normalized_mass_grams: float,
    table: Optional[ConversionTable] = None,
) -> float:
    """
    Nutrient yield of one line item, on the fact's own quantity_per basis and scaled by
    the line item's gram mass. Returns 0.0 for a line item weighing nothing.
    """
    if normalized_mass_grams == 0:
        return 0.0
    per = base_fact.quantity_per
    density = base_fact.quantity_amount.amount / per.amount
    in_fact_units = convert_with_fallback(required, per.unit_name, per.unit_type, table=table).amount
    total_for_ingredient = density * in_fact_units
    return (total_for_ingredient / normalized_mass_grams) * per.amount


def accumulate_nutrients(
    required: UnitOfMeasure,
    choice: SupplierChoice,
    nutrient_map: Dict[str, NutrientFact],
    table: Optional[ConversionTable] = None,
    basis_amount: Optional[float] = None,
) -> float:
    """
    Add the chosen product's nutrients for `required` into nutrient_map (in place).
    Entries are keyed by nutrient name; the first fact seen for a name fixes its unit and basis.
    Returns the line item's cost: its gram mass times the chosen cost per gram.
    """
    normalized_mass_grams = convert_with_fallback(
        required, UoMName.grams, UoMType.mass, table=table
    ).amount

    for fact in choice.product.nutrient_facts:
        base_fact = to_base_units(fact, basis_amount=basis_amount, table=table)
        entry = nutrient_map.get(base_fact.nutrient_name)
        if entry is None:
            entry = _empty_entry(base_fact)
            nutrient_map[base_fact.nutrient_name] = entry
        contribution = nutrient_contribution(required, base_fact, normalized_mass_grams, table=table)
        entry.quantity_amount.amount += contribution
        logger.debug(
            "nutrients.accumulated nutrient=%s contribution=%s total=%s",
            base_fact.nutrient_name,
            contribution,
            entry.quantity_amount.amount,
        )

    return normalized_mass_grams * choice.cost
