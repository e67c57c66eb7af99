from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from recipe_costing.errors import ConversionError, CostingError
from recipe_costing.logging import get_logger
from recipe_costing.schemas.recipe import Dataset, RecipeSummary
from recipe_costing.schemas.units import UNIT_TYPES, UnitOfMeasure, UoMName, UoMType
from recipe_costing.services.costing.summarizer import summarize_recipe
from recipe_costing.services.reporting.compare import compare_summaries
from recipe_costing.services.units.converter import convert_with_fallback
from recipe_costing.storage.db import get_session
from recipe_costing.storage.repositories import fetch_products_for_ingredient, fetch_recipes, load_dataset
from recipe_costing.utils.timing import time_span

router = APIRouter()
logger = get_logger(__name__)


class SummaryResponse(BaseModel):
    summaries: dict[str, RecipeSummary] = {}
    failures: dict[str, str] = {}  # recipe_name -> error message


class CompareResponse(BaseModel):
    matches: bool
    mismatches: list[dict] = []
    failures: dict[str, str] = {}


class ConvertRequest(BaseModel):
    unit_of_measure: UnitOfMeasure
    to_unit_name: UoMName
    to_unit_type: UoMType | None = None


def _summarize_stored_recipes() -> SummaryResponse:
    response = SummaryResponse()
    with get_session() as session:
        recipes = fetch_recipes(session)
        with time_span("summary.all", recipes=len(recipes)):
            for recipe in recipes:
                try:
                    response.summaries[recipe.recipe_name] = summarize_recipe(
                        recipe, lambda ingredient: fetch_products_for_ingredient(session, ingredient)
                    )
                except CostingError as e:
                    logger.warning("summary.recipe_failed recipe=%s error=%s", recipe.recipe_name, e)
                    response.failures[recipe.recipe_name] = str(e)
    return response


@router.post("/dataset")
def upload_dataset(dataset: Dataset) -> dict:
    with get_session() as session:
        return load_dataset(session, dataset)


@router.get("/recipes/summary", response_model=SummaryResponse)
def recipes_summary() -> SummaryResponse:
    """
    Cheapest cost and nutrients for every stored recipe.
    A recipe that cannot be costed is reported under failures; the others are still summarized.
    """
    return _summarize_stored_recipes()


@router.post("/summary/compare", response_model=CompareResponse)
def compare_with_expected(expected: dict[str, RecipeSummary]) -> CompareResponse:
    result = _summarize_stored_recipes()
    mismatches = compare_summaries(result.summaries, expected)
    for m in mismatches:
        logger.info("summary.mismatch recipe=%s field=%s reason=%s", m["recipe"], m["field"], m["reason"])
    return CompareResponse(
        matches=not mismatches and not result.failures,
        mismatches=mismatches,
        failures=result.failures,
    )


@router.post("/convert", response_model=UnitOfMeasure)
def convert(body: ConvertRequest) -> UnitOfMeasure:
    to_type = body.to_unit_type or UNIT_TYPES[body.to_unit_name]
    try:
        return convert_with_fallback(body.unit_of_measure, body.to_unit_name, to_type)
    except ConversionError as e:
        raise HTTPException(status_code=422, detail=str(e))
