"""Cheapest-supplier costing and per-recipe summaries."""
