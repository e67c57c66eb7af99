"""Unit conversion: single-hop table lookups and the mass/volume pivot fallback."""

from recipe_costing.services.units.conversion_table import ConversionTable, convert_units, default_table
from recipe_costing.services.units.converter import convert_with_fallback

__all__ = ["ConversionTable", "convert_units", "convert_with_fallback", "default_table"]
