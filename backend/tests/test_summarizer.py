import pytest

from recipe_costing.errors import NoSupplierFoundError
from recipe_costing.schemas.recipe import (
    Ingredient,
    LineItem,
    NutrientFact,
    Product,
    Recipe,
    SupplierProduct,
)
from recipe_costing.schemas.units import UoMName, uom
from recipe_costing.services.costing.summarizer import order_nutrients, summarize, summarize_recipe


def _fact(name: str, grams: float) -> NutrientFact:
    return NutrientFact(
        nutrient_name=name,
        quantity_amount=uom(grams, UoMName.grams),
        quantity_per=uom(100, UoMName.grams),
    )


def _product(price: float, grams: float, facts: list[NutrientFact]) -> Product:
    return Product(
        supplier_products=[SupplierProduct(supplier_name="s", price=price, unit_of_measure=uom(grams, UoMName.grams))],
        nutrient_facts=facts,
    )


def _line(name: str, amount: float, unit: UoMName = UoMName.grams) -> LineItem:
    return LineItem(ingredient=Ingredient(ingredient_name=name), unit_of_measure=uom(amount, unit))


def _fetcher(catalog: dict[str, list[Product]]):
    return lambda ingredient: catalog.get(ingredient.ingredient_name, [])


def test_single_line_item_recipe():
    recipe = Recipe(recipe_name="Oats", line_items=[_line("Oats", 500)])
    catalog = {"Oats": [_product(2.0, 1000, [_fact("Protein", 10)])]}
    summary = summarize([recipe], _fetcher(catalog))["Oats"]
    assert summary.cheapest_cost == pytest.approx(1.0)
    protein = summary.nutrients_at_cheapest_cost["Protein"]
    # contributions stay on the fact's "per 100 g" basis
    assert protein.quantity_amount.amount == pytest.approx(10.0)
    assert protein.quantity_amount.unit_name == UoMName.grams
    assert protein.quantity_per.amount == 100
    assert protein.quantity_per.unit_name == UoMName.grams


def test_nutrients_emitted_alphabetically():
    recipe = Recipe(recipe_name="Mix", line_items=[_line("Seeds", 50)])
    catalog = {"Seeds": [_product(1.0, 100, [_fact("Zinc", 0.01), _fact("Protein", 20), _fact("Iron", 0.005)])]}
    summary = summarize_recipe(recipe, _fetcher(catalog))
    assert list(summary.nutrients_at_cheapest_cost) == ["Iron", "Protein", "Zinc"]


def test_order_nutrients():
    ordered = order_nutrients({"b": _fact("b", 1), "C": _fact("C", 1), "a": _fact("a", 1)})
    assert list(ordered) == ["C", "a", "b"]


def test_costs_sum_across_line_items():
    recipe = Recipe(
        recipe_name="Pancakes",
        line_items=[_line("Flour", 200), _line("Milk", 1, UoMName.cups)],
    )
    catalog = {
        "Flour": [_product(3.0, 1000, [_fact("Carbohydrate", 76)])],
        "Milk": [_product(1.5, 1000, [_fact("Protein", 3.4), _fact("Carbohydrate", 5)])],
    }
    summary = summarize_recipe(recipe, _fetcher(catalog))
    assert summary.cheapest_cost == pytest.approx(200 * 0.003 + 236.588 * 0.0015)
    assert summary.nutrients_at_cheapest_cost["Carbohydrate"].quantity_amount.amount == pytest.approx(81.0)
    assert list(summary.nutrients_at_cheapest_cost) == ["Carbohydrate", "Protein"]


def test_missing_supplier_fails_whole_recipe():
    recipe = Recipe(recipe_name="Risotto", line_items=[_line("Rice", 300), _line("Saffron", 1)])
    catalog = {"Rice": [_product(2.0, 1000, [_fact("Carbohydrate", 80)])]}
    with pytest.raises(NoSupplierFoundError) as exc:
        summarize_recipe(recipe, _fetcher(catalog))
    assert exc.value.ingredient_name == "Saffron"


def test_summarize_propagates_first_failure():
    good = Recipe(recipe_name="Rice", line_items=[_line("Rice", 300)])
    bad = Recipe(recipe_name="Risotto", line_items=[_line("Saffron", 1)])
    catalog = {"Rice": [_product(2.0, 1000, [_fact("Carbohydrate", 80)])]}
    with pytest.raises(NoSupplierFoundError):
        summarize([good, bad], _fetcher(catalog))


def test_recipes_do_not_share_nutrients():
    catalog = {"Rice": [_product(2.0, 1000, [_fact("Carbohydrate", 80)])]}
    recipes = [
        Recipe(recipe_name="Small", line_items=[_line("Rice", 100)]),
        Recipe(recipe_name="Large", line_items=[_line("Rice", 400)]),
    ]
    result = summarize(recipes, _fetcher(catalog))
    assert list(result) == ["Small", "Large"]
    assert result["Small"].nutrients_at_cheapest_cost["Carbohydrate"].quantity_amount.amount == pytest.approx(80.0)
    assert result["Large"].nutrients_at_cheapest_cost["Carbohydrate"].quantity_amount.amount == pytest.approx(80.0)
    assert result["Large"].cheapest_cost == pytest.approx(0.8)
