from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class UoMType(str, Enum):
    mass = "mass"
    volume = "volume"
    whole = "whole"


class UoMName(str, Enum):
    milligrams = "milligrams"
    grams = "grams"
    kilograms = "kilograms"
    ounces = "ounces"
    pounds = "pounds"
    millilitres = "millilitres"
    litres = "litres"
    teaspoons = "teaspoons"
    tablespoons = "tablespoons"
    cups = "cups"
    whole = "whole"


UNIT_TYPES: dict[UoMName, UoMType] = {
    UoMName.milligrams: UoMType.mass,
    UoMName.grams: UoMType.mass,
    UoMName.kilograms: UoMType.mass,
    UoMName.ounces: UoMType.mass,
    UoMName.pounds: UoMType.mass,
    UoMName.millilitres: UoMType.volume,
    UoMName.litres: UoMType.volume,
    UoMName.teaspoons: UoMType.volume,
    UoMName.tablespoons: UoMType.volume,
    UoMName.cups: UoMType.volume,
    UoMName.whole: UoMType.whole,
}


class UnitOfMeasure(BaseModel):
    """An amount with its unit, e.g. 500 grams. unit_type is inferred when omitted."""

    amount: float = Field(ge=0)
    unit_name: UoMName
    unit_type: UoMType

    @model_validator(mode="before")
    @classmethod
    def _infer_unit_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("unit_type") is None and data.get("unit_name") is not None:
            data = {**data, "unit_type": UNIT_TYPES[UoMName(data["unit_name"])]}
        return data

    @model_validator(mode="after")
    def _check_unit_type(self) -> "UnitOfMeasure":
        expected = UNIT_TYPES[self.unit_name]
        if self.unit_type != expected:
            raise ValueError(
                f"unit {self.unit_name.value} is {expected.value}, not {self.unit_type.value}"
            )
        return self


def uom(amount: float, unit_name: UoMName) -> UnitOfMeasure:
    return UnitOfMeasure(amount=amount, unit_name=unit_name, unit_type=UNIT_TYPES[unit_name])
