"""
Per-recipe cost and nutrient summaries.
Each line item is costed at its cheapest supplier and that supplier's product supplies the
nutrients. Nutrients are emitted sorted by name.
"""

from typing import Callable, Dict, List, Optional

from recipe_costing.logging import get_logger
from recipe_costing.schemas.recipe import Ingredient, NutrientFact, Product, Recipe, RecipeSummary
from recipe_costing.services.costing.selector import select_cheapest
from recipe_costing.services.nutrients.aggregator import accumulate_nutrients
from recipe_costing.services.units.conversion_table import ConversionTable
from recipe_costing.utils.timing import time_span

logger = get_logger(__name__)

ProductFetcher = Callable[[Ingredient], List[Product]]


def order_nutrients(nutrient_map: Dict[str, NutrientFact]) -> Dict[str, NutrientFact]:
    return {name: nutrient_map[name] for name in sorted(nutrient_map)}


def summarize_recipe(
    recipe: Recipe,
    fetch_products: ProductFetcher,
    table: Optional[ConversionTable] = None,
) -> RecipeSummary:
    total_cost = 0.0
    nutrient_map: Dict[str, NutrientFact] = {}
    with time_span("summary.recipe", recipe=recipe.recipe_name, line_items=len(recipe.line_items)):
        for line_item in recipe.line_items:
            products = fetch_products(line_item.ingredient)
            choice = select_cheapest(line_item.ingredient, products, table=table)
            total_cost += accumulate_nutrients(line_item.unit_of_measure, choice, nutrient_map, table=table)
    logger.info(
        "summary.recipe_done recipe=%s cost=%s nutrients=%s",
        recipe.recipe_name,
        total_cost,
        len(nutrient_map),
    )
    return RecipeSummary(cheapest_cost=total_cost, nutrients_at_cheapest_cost=order_nutrients(nutrient_map))


def summarize(
    recipes: List[Recipe],
    fetch_products: ProductFetcher,
    table: Optional[ConversionTable] = None,
) -> Dict[str, RecipeSummary]:
    """Summaries keyed by recipe name. The first recipe that fails raises; nothing partial is returned."""
    return {
        recipe.recipe_name: summarize_recipe(recipe, fetch_products, table=table)
        for recipe in recipes
    }
