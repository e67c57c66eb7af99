from recipe_costing.schemas.recipe import (
    Dataset,
    Ingredient,
    LineItem,
    NutrientFact,
    Product,
    Recipe,
    RecipeSummary,
    SupplierProduct,
)
from recipe_costing.schemas.units import UNIT_TYPES, UnitOfMeasure, UoMName, UoMType, uom

__all__ = [
    "Dataset",
    "Ingredient",
    "LineItem",
    "NutrientFact",
    "Product",
    "Recipe",
    "RecipeSummary",
    "SupplierProduct",
    "UNIT_TYPES",
    "UnitOfMeasure",
    "UoMName",
    "UoMType",
    "uom",
]
