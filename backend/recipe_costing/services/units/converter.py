"""
Unit conversion with a mass/volume pivot fallback.

Direct table conversion is tried first. When it has no entry and the request crosses
between volume and mass, the amount is moved to the pivot unit of its own kind
(millilitres or grams), across to the pivot of the other kind, then to the target unit.
Nothing else falls back: count <-> volume, for example, fails outright.
"""

from typing import Optional

from recipe_costing.errors import ConversionError
from recipe_costing.logging import get_logger
from recipe_costing.schemas.units import UnitOfMeasure, UoMName, UoMType
from recipe_costing.services.units.conversion_table import ConversionTable, default_table

logger = get_logger(__name__)

_PIVOT_PATHS = {
    (UoMType.volume, UoMType.mass): (
        (UoMName.millilitres, UoMType.volume),
        (UoMName.grams, UoMType.mass),
    ),
    (UoMType.mass, UoMType.volume): (
        (UoMName.grams, UoMType.mass),
        (UoMName.millilitres, UoMType.volume),
    ),
}


def convert_with_fallback(
    from_uom: UnitOfMeasure,
    to_name: UoMName,
    to_type: UoMType,
    table: Optional[ConversionTable] = None,
) -> UnitOfMeasure:
    table = table or default_table()
    direct = table.try_convert(from_uom, to_name, to_type)
    if direct is not None:
        return direct

    path = _PIVOT_PATHS.get((from_uom.unit_type, to_type))
    if path is None:
        raise ConversionError(from_uom, to_name, to_type)

    current = from_uom
    for hop_name, hop_type in path + ((to_name, to_type),):
        converted = table.try_convert(current, hop_name, hop_type)
        if converted is None:
            raise ConversionError(
                from_uom,
                to_name,
                to_type,
                detail=f"no table entry for hop {current.unit_name.value} -> {hop_name.value}",
            )
        current = converted
    logger.debug(
        "conversion.fallback from=%s %s to=%s amount=%s",
        from_uom.amount,
        from_uom.unit_name.value,
        to_name.value,
        current.amount,
    )
    return current
