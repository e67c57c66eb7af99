import logging

from recipe_costing.logging import log_fields
from recipe_costing.utils.timing import format_duration, time_span


def test_format_duration():
    assert format_duration(12500) == "12.5s"
    assert format_duration(750) == "750ms"
    assert format_duration(0.42) == "0.4ms"


def test_log_fields():
    assert log_fields(recipe="Oats", line_items=2) == "recipe=Oats line_items=2"


def test_time_span_logs_fields(caplog):
    with caplog.at_level(logging.INFO, logger="recipe_costing.utils.timing"):
        with time_span("summary.recipe", recipe="Oats"):
            pass
    assert "[TIMING] summary.recipe" in caplog.text
    assert "recipe=Oats" in caplog.text
