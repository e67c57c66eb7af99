"""Data source for costing: loads datasets into the database and reads recipes and candidate products back."""

import json
from pathlib import Path

from sqlmodel import Session, select

from recipe_costing import schemas
from recipe_costing.logging import get_logger, log_fields
from recipe_costing.storage import models

logger = get_logger(__name__)


def _uom(amount: float, unit_name, unit_type) -> schemas.UnitOfMeasure:
    return schemas.UnitOfMeasure(amount=amount, unit_name=unit_name, unit_type=unit_type)


def get_ingredient_by_name(session: Session, name: str) -> models.Ingredient | None:
    return session.exec(select(models.Ingredient).where(models.Ingredient.name == name)).first()


def get_or_create_ingredient(session: Session, name: str) -> models.Ingredient:
    ingredient = get_ingredient_by_name(session, name)
    if ingredient:
        return ingredient
    ingredient = models.Ingredient(name=name)
    session.add(ingredient)
    session.commit()
    session.refresh(ingredient)
    logger.info("ingredient.created id=%s name=%s", ingredient.id, ingredient.name)
    return ingredient


def create_recipe(session: Session, recipe: schemas.Recipe) -> models.Recipe:
    row = models.Recipe(name=recipe.recipe_name)
    session.add(row)
    session.commit()
    session.refresh(row)
    for line_item in recipe.line_items:
        ingredient = get_or_create_ingredient(session, line_item.ingredient.ingredient_name)
        uom = line_item.unit_of_measure
        session.add(
            models.RecipeLineItem(
                recipe_id=row.id,
                ingredient_id=ingredient.id,
                amount=uom.amount,
                unit_name=uom.unit_name,
                unit_type=uom.unit_type,
            )
        )
    session.commit()
    logger.info("recipe.created id=%s name=%s line_items=%s", row.id, row.name, len(recipe.line_items))
    return row


def create_product(session: Session, ingredient_id: int, product: schemas.Product) -> models.Product:
    row = models.Product(
        ingredient_id=ingredient_id,
        product_name=product.product_name,
        brand_name=product.brand_name,
    )
    session.add(row)
    session.commit()
    session.refresh(row)
    for supplier in product.supplier_products:
        uom = supplier.unit_of_measure
        session.add(
            models.SupplierProduct(
                product_id=row.id,
                supplier_name=supplier.supplier_name,
                supplier_product_name=supplier.supplier_product_name,
                price=supplier.price,
                amount=uom.amount,
                unit_name=uom.unit_name,
                unit_type=uom.unit_type,
            )
        )
    for fact in product.nutrient_facts:
        session.add(
            models.ProductNutrientFact(
                product_id=row.id,
                nutrient_name=fact.nutrient_name,
                amount=fact.quantity_amount.amount,
                unit_name=fact.quantity_amount.unit_name,
                unit_type=fact.quantity_amount.unit_type,
                per_amount=fact.quantity_per.amount,
                per_unit_name=fact.quantity_per.unit_name,
                per_unit_type=fact.quantity_per.unit_type,
            )
        )
    session.commit()
    logger.info(
        "product.created id=%s ingredient_id=%s name=%s suppliers=%s nutrient_facts=%s",
        row.id,
        ingredient_id,
        row.product_name,
        len(product.supplier_products),
        len(product.nutrient_facts),
    )
    return row


def delete_recipes_named(session: Session, name: str) -> int:
    recipes = list(session.exec(select(models.Recipe).where(models.Recipe.name == name)))
    for recipe in recipes:
        for li in session.exec(select(models.RecipeLineItem).where(models.RecipeLineItem.recipe_id == recipe.id)):
            session.delete(li)
        session.delete(recipe)
    session.commit()
    return len(recipes)


def delete_products_for_ingredient(session: Session, ingredient_id: int) -> int:
    products = list(session.exec(select(models.Product).where(models.Product.ingredient_id == ingredient_id)))
    for product in products:
        for s in session.exec(select(models.SupplierProduct).where(models.SupplierProduct.product_id == product.id)):
            session.delete(s)
        for f in session.exec(
            select(models.ProductNutrientFact).where(models.ProductNutrientFact.product_id == product.id)
        ):
            session.delete(f)
        session.delete(product)
    session.commit()
    return len(products)


def load_dataset(session: Session, dataset: schemas.Dataset) -> dict:
    """
    Load a dataset. A recipe replaces any stored recipe with the same name, and an ingredient's
    product list replaces the products stored for that ingredient, so reloading is idempotent.
    """
    products_created = 0
    products_replaced = 0
    for ingredient_name, products in dataset.products.items():
        ingredient = get_or_create_ingredient(session, ingredient_name)
        products_replaced += delete_products_for_ingredient(session, ingredient.id)
        for product in products:
            create_product(session, ingredient.id, product)
            products_created += 1
    recipes_replaced = 0
    for recipe in dataset.recipes:
        recipes_replaced += delete_recipes_named(session, recipe.recipe_name)
        create_recipe(session, recipe)
    counts = {
        "recipes_created": len(dataset.recipes),
        "recipes_replaced": recipes_replaced,
        "products_created": products_created,
        "products_replaced": products_replaced,
        "ingredients": len(list(session.exec(select(models.Ingredient)))),
    }
    logger.info("dataset.loaded %s", log_fields(**counts))
    return counts


def load_dataset_file(path: str | Path) -> schemas.Dataset:
    with Path(path).open("r", encoding="utf-8") as handle:
        return schemas.Dataset.model_validate(json.load(handle))


def fetch_recipes(session: Session) -> list[schemas.Recipe]:
    recipes = list(session.exec(select(models.Recipe).order_by(models.Recipe.id)))
    ingredients = {i.id: i for i in session.exec(select(models.Ingredient))}
    line_items = list(session.exec(select(models.RecipeLineItem).order_by(models.RecipeLineItem.id)))
    items_by_recipe: dict[int, list[schemas.LineItem]] = {}
    for li in line_items:
        items_by_recipe.setdefault(li.recipe_id, []).append(
            schemas.LineItem(
                ingredient=schemas.Ingredient(ingredient_name=ingredients[li.ingredient_id].name),
                unit_of_measure=_uom(li.amount, li.unit_name, li.unit_type),
            )
        )
    return [
        schemas.Recipe(recipe_name=r.name, line_items=items_by_recipe.get(r.id, []))
        for r in recipes
    ]


def fetch_products_for_ingredient(session: Session, ingredient: schemas.Ingredient) -> list[schemas.Product]:
    row = get_ingredient_by_name(session, ingredient.ingredient_name)
    if row is None:
        return []
    products = list(
        session.exec(
            select(models.Product).where(models.Product.ingredient_id == row.id).order_by(models.Product.id)
        )
    )
    result: list[schemas.Product] = []
    for p in products:
        suppliers = session.exec(
            select(models.SupplierProduct)
            .where(models.SupplierProduct.product_id == p.id)
            .order_by(models.SupplierProduct.id)
        )
        facts = session.exec(
            select(models.ProductNutrientFact)
            .where(models.ProductNutrientFact.product_id == p.id)
            .order_by(models.ProductNutrientFact.id)
        )
        result.append(
            schemas.Product(
                product_name=p.product_name,
                brand_name=p.brand_name,
                supplier_products=[
                    schemas.SupplierProduct(
                        supplier_name=s.supplier_name,
                        supplier_product_name=s.supplier_product_name,
                        price=s.price,
                        unit_of_measure=_uom(s.amount, s.unit_name, s.unit_type),
                    )
                    for s in suppliers
                ],
                nutrient_facts=[
                    schemas.NutrientFact(
                        nutrient_name=f.nutrient_name,
                        quantity_amount=_uom(f.amount, f.unit_name, f.unit_type),
                        quantity_per=_uom(f.per_amount, f.per_unit_name, f.per_unit_type),
                    )
                    for f in facts
                ],
            )
        )
    return result
