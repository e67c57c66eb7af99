from pydantic import BaseModel, Field, model_validator

from recipe_costing.schemas.units import UnitOfMeasure


class NutrientFact(BaseModel):
    """quantity_amount of nutrient per quantity_per of product, e.g. 5 g sodium per 100 g."""

    nutrient_name: str
    quantity_amount: UnitOfMeasure
    quantity_per: UnitOfMeasure

    @model_validator(mode="after")
    def _check_quantity_per(self) -> "NutrientFact":
        if self.quantity_per.amount <= 0:
            raise ValueError(f"quantity_per for {self.nutrient_name} must be greater than zero")
        return self


class SupplierProduct(BaseModel):
    supplier_name: str = ""
    supplier_product_name: str = ""
    price: float = Field(ge=0)
    unit_of_measure: UnitOfMeasure


class Product(BaseModel):
    product_name: str = ""
    brand_name: str = ""
    supplier_products: list[SupplierProduct] = []
    nutrient_facts: list[NutrientFact] = []


class Ingredient(BaseModel):
    ingredient_name: str


class LineItem(BaseModel):
    ingredient: Ingredient
    unit_of_measure: UnitOfMeasure


class Recipe(BaseModel):
    recipe_name: str
    line_items: list[LineItem] = []


class RecipeSummary(BaseModel):
    cheapest_cost: float
    nutrients_at_cheapest_cost: dict[str, NutrientFact] = {}


class Dataset(BaseModel):
    """Import format for the data source: recipes plus candidate products keyed by ingredient name."""

    recipes: list[Recipe] = []
    products: dict[str, list[Product]] = {}
