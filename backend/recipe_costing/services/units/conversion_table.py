"""
Table-driven single-hop unit conversion.
Units of the same kind convert through their factor to the canonical unit of that kind.
Cross-kind pairs convert only when the table holds an explicit ratio for that exact pair.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from recipe_costing.config import settings
from recipe_costing.errors import ConversionError
from recipe_costing.schemas.units import UNIT_TYPES, UnitOfMeasure, UoMName, UoMType

# Canonical unit per kind is the one with factor 1
MASS_TO_GRAMS = {
    UoMName.milligrams: 0.001,
    UoMName.grams: 1.0,
    UoMName.kilograms: 1000.0,
    UoMName.ounces: 28.3495,
    UoMName.pounds: 453.592,
}
VOLUME_TO_MILLILITRES = {
    UoMName.millilitres: 1.0,
    UoMName.litres: 1000.0,
    UoMName.teaspoons: 4.92892,
    UoMName.tablespoons: 14.7868,
    UoMName.cups: 236.588,
}
WHOLE_TO_WHOLE = {
    UoMName.whole: 1.0,
}

KIND_FACTORS: Dict[UoMType, Dict[UoMName, float]] = {
    UoMType.mass: MASS_TO_GRAMS,
    UoMType.volume: VOLUME_TO_MILLILITRES,
    UoMType.whole: WHOLE_TO_WHOLE,
}

CANONICAL_UNITS: Dict[UoMType, UoMName] = {
    UoMType.mass: UoMName.grams,
    UoMType.volume: UoMName.millilitres,
    UoMType.whole: UoMName.whole,
}


def _default_cross_kind() -> Dict[Tuple[UoMName, UoMName], float]:
    return {(UoMName.millilitres, UoMName.grams): settings.millilitre_to_gram_ratio}


@dataclass
class ConversionTable:
    # (from_unit, to_unit) -> to_amount per one from_unit; the inverse pair is implied
    cross_kind: Dict[Tuple[UoMName, UoMName], float] = field(default_factory=_default_cross_kind)

    def ratio(self, from_name: UoMName, to_name: UoMName) -> Optional[float]:
        from_type = UNIT_TYPES[from_name]
        to_type = UNIT_TYPES[to_name]
        if from_type == to_type:
            factors = KIND_FACTORS[from_type]
            return factors[from_name] / factors[to_name]
        if (from_name, to_name) in self.cross_kind:
            return self.cross_kind[(from_name, to_name)]
        inverse = self.cross_kind.get((to_name, from_name))
        if inverse:
            return 1 / inverse
        return None

    def try_convert(
        self, from_uom: UnitOfMeasure, to_name: UoMName, to_type: UoMType
    ) -> Optional[UnitOfMeasure]:
        """Single-hop conversion. Returns None when the table has no entry for the pair."""
        if UNIT_TYPES[to_name] != to_type:
            return None
        ratio = self.ratio(from_uom.unit_name, to_name)
        if ratio is None:
            return None
        return UnitOfMeasure(amount=from_uom.amount * ratio, unit_name=to_name, unit_type=to_type)


_default_table: Optional[ConversionTable] = None


def default_table() -> ConversionTable:
    global _default_table
    if _default_table is None:
        _default_table = ConversionTable()
    return _default_table


def convert_units(
    from_uom: UnitOfMeasure,
    to_name: UoMName,
    to_type: UoMType,
    table: Optional[ConversionTable] = None,
) -> UnitOfMeasure:
    converted = (table or default_table()).try_convert(from_uom, to_name, to_type)
    if converted is None:
        raise ConversionError(from_uom, to_name, to_type, detail="no direct table entry")
    return converted
