import math
from dataclasses import dataclass
from typing import List, Optional

from recipe_costing.errors import CostingError, NoSupplierFoundError
from recipe_costing.logging import get_logger
from recipe_costing.schemas.recipe import Ingredient, Product, SupplierProduct
from recipe_costing.services.costing.cost import normalized_cost_per_gram
from recipe_costing.services.units.conversion_table import ConversionTable

logger = get_logger(__name__)


@dataclass
class SupplierChoice:
    cost: float  # per gram
    product: Product
    supplier: SupplierProduct


def select_cheapest(
    ingredient: Ingredient,
    products: List[Product],
    table: Optional[ConversionTable] = None,
) -> SupplierChoice:
    """
    Pick the supplier with the lowest cost per gram across all candidate products.
    Ties keep the first supplier in input order. Suppliers whose package size cannot be
    expressed in grams are skipped.
    """
    best: Optional[SupplierChoice] = None
    lowest = math.inf
    skipped = 0
    for product in products:
        for supplier in product.supplier_products:
            try:
                cost = normalized_cost_per_gram(supplier, table=table)
            except CostingError as e:
                skipped += 1
                logger.warning(
                    "supplier.cost_failed ingredient=%s supplier=%s error=%s",
                    ingredient.ingredient_name,
                    supplier.supplier_name,
                    e,
                )
                continue
            if cost < lowest:
                lowest = cost
                best = SupplierChoice(cost=cost, product=product, supplier=supplier)

    if best is None:
        detail = f"{skipped} supplier(s) could not be costed" if skipped else "no candidate suppliers"
        raise NoSupplierFoundError(ingredient.ingredient_name, detail=detail)

    logger.info(
        "supplier.selected ingredient=%s supplier=%s product=%s cost_per_gram=%s",
        ingredient.ingredient_name,
        best.supplier.supplier_name,
        best.product.product_name,
        best.cost,
    )
    return best
