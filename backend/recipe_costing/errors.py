"""Errors raised while costing recipes. All of them propagate to the caller of summarize."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recipe_costing.schemas.units import UnitOfMeasure, UoMName, UoMType


class CostingError(Exception):
    """Base class for recipe costing failures."""


class ConversionError(CostingError):
    def __init__(
        self,
        source: "UnitOfMeasure",
        to_name: "UoMName",
        to_type: "UoMType",
        detail: str | None = None,
    ) -> None:
        self.source = source
        self.to_name = to_name
        self.to_type = to_type
        self.detail = detail
        message = (
            f"Unsupported conversion: {source.unit_type.value} ({source.amount} {source.unit_name.value})"
            f" -> {to_type.value} ({to_name.value})"
        )
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoSupplierFoundError(CostingError):
    def __init__(self, ingredient_name: str, detail: str | None = None) -> None:
        self.ingredient_name = ingredient_name
        message = f"No supplier found for ingredient: {ingredient_name}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
