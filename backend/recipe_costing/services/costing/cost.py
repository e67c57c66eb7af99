from typing import Optional

from recipe_costing.errors import ConversionError
from recipe_costing.schemas.recipe import SupplierProduct
from recipe_costing.schemas.units import UoMName, UoMType
from recipe_costing.services.units.conversion_table import ConversionTable
from recipe_costing.services.units.converter import convert_with_fallback


def normalized_cost_per_gram(
    supplier: SupplierProduct, table: Optional[ConversionTable] = None
) -> float:
    """
    Supplier price per gram of product. Raises ConversionError when the package size has no
    gram path or weighs nothing.
    """
    grams = convert_with_fallback(
        supplier.unit_of_measure, UoMName.grams, UoMType.mass, table=table
    ).amount
    if grams <= 0:
        raise ConversionError(
            supplier.unit_of_measure, UoMName.grams, UoMType.mass, detail="package weighs 0 grams"
        )
    return supplier.price / grams
