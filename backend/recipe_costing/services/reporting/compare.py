"""Compare computed recipe summaries against expected ones."""

from __future__ import annotations

from recipe_costing.config import settings
from recipe_costing.schemas.recipe import RecipeSummary


def _mismatch(recipe: str, field: str, expected: object, actual: object, reason: str) -> dict:
    return {"recipe": recipe, "field": field, "expected": expected, "actual": actual, "reason": reason}


def compare_summaries(
    actual: dict[str, RecipeSummary],
    expected: dict[str, RecipeSummary],
    tolerance: float | None = None,
) -> list[dict]:
    """
    Return one {"recipe", "field", "expected", "actual", "reason"} entry per difference.
    An empty list means the summaries match within tolerance.
    """
    tol = settings.comparison_tolerance if tolerance is None else tolerance
    mismatches: list[dict] = []

    for name in expected:
        if name not in actual:
            mismatches.append(_mismatch(name, "recipe", name, None, "recipe missing from result"))
    for name in actual:
        if name not in expected:
            mismatches.append(_mismatch(name, "recipe", None, name, "unexpected recipe in result"))

    for name, want in expected.items():
        got = actual.get(name)
        if got is None:
            continue
        if abs(got.cheapest_cost - want.cheapest_cost) > tol:
            mismatches.append(
                _mismatch(name, "cheapest_cost", want.cheapest_cost, got.cheapest_cost, "cost differs")
            )

        want_nutrients = want.nutrients_at_cheapest_cost
        got_nutrients = got.nutrients_at_cheapest_cost
        for nutrient, want_fact in want_nutrients.items():
            got_fact = got_nutrients.get(nutrient)
            field = f"nutrients_at_cheapest_cost.{nutrient}"
            if got_fact is None:
                mismatches.append(_mismatch(name, field, nutrient, None, "nutrient missing"))
                continue
            if abs(got_fact.quantity_amount.amount - want_fact.quantity_amount.amount) > tol:
                mismatches.append(
                    _mismatch(
                        name,
                        field,
                        want_fact.quantity_amount.amount,
                        got_fact.quantity_amount.amount,
                        "nutrient amount differs",
                    )
                )
            if got_fact.quantity_amount.unit_name != want_fact.quantity_amount.unit_name:
                mismatches.append(
                    _mismatch(
                        name,
                        field,
                        want_fact.quantity_amount.unit_name.value,
                        got_fact.quantity_amount.unit_name.value,
                        "nutrient unit differs",
                    )
                )
            want_per, got_per = want_fact.quantity_per, got_fact.quantity_per
            if got_per.unit_name != want_per.unit_name or abs(got_per.amount - want_per.amount) > tol:
                mismatches.append(
                    _mismatch(
                        name,
                        field,
                        f"{want_per.amount} {want_per.unit_name.value}",
                        f"{got_per.amount} {got_per.unit_name.value}",
                        "nutrient basis differs",
                    )
                )
        for nutrient in got_nutrients:
            if nutrient not in want_nutrients:
                mismatches.append(
                    _mismatch(name, f"nutrients_at_cheapest_cost.{nutrient}", None, nutrient, "unexpected nutrient")
                )
        if set(got_nutrients) == set(want_nutrients) and list(got_nutrients) != list(want_nutrients):
            mismatches.append(
                _mismatch(
                    name,
                    "nutrients_at_cheapest_cost",
                    list(want_nutrients),
                    list(got_nutrients),
                    "nutrient order differs",
                )
            )

    return mismatches
