from typing import Optional

from sqlmodel import Field, SQLModel

from recipe_costing.schemas.units import UoMName, UoMType


class Ingredient(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True, unique=True)


class Recipe(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str


class RecipeLineItem(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    recipe_id: int = Field(foreign_key="recipe.id")
    ingredient_id: int = Field(foreign_key="ingredient.id")
    amount: float
    unit_name: UoMName
    unit_type: UoMType


class Product(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    ingredient_id: int = Field(foreign_key="ingredient.id", index=True)
    product_name: str = ""
    brand_name: str = ""


class SupplierProduct(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="product.id", index=True)
    supplier_name: str = ""
    supplier_product_name: str = ""
    price: float
    amount: float
    unit_name: UoMName
    unit_type: UoMType


class ProductNutrientFact(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    product_id: int = Field(foreign_key="product.id", index=True)
    nutrient_name: str
    amount: float
    unit_name: UoMName
    unit_type: UoMType
    per_amount: float
    per_unit_name: UoMName
    per_unit_type: UoMType
