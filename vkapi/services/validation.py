from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Dict, List, Tuple

from vkapi.models.forecast import CreateForecastRequest, FieldError
from vkapi.utils.clock import yesterday

MIN_TEMPERATURE_C = -50
MAX_TEMPERATURE_C = 60
MAX_SUMMARY_LENGTH = 100

# (value, today) -> passed?
Predicate = Callable[[Any, dt.date], bool]
Rule = Tuple[Predicate, str]


def _present(value: Any, today: dt.date) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _after_yesterday(value: Any, today: dt.date) -> bool:
    # an omitted date is never later than yesterday, so it fails here as well
    return value is not None and value > yesterday(today)


def _temperature_in_range(value: Any, today: dt.date) -> bool:
    return MIN_TEMPERATURE_C <= value <= MAX_TEMPERATURE_C


def utf16_length(value: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(value.encode("utf-16-le")) // 2


def _summary_fits(value: Any, today: dt.date) -> bool:
    return value is None or utf16_length(value) <= MAX_SUMMARY_LENGTH


# wire field name -> (request attribute, ordered rules)
CREATE_FORECAST_RULES: Dict[str, Tuple[str, List[Rule]]] = {
    "date": ("date", [
        (_present, "Date is required"),
        (_after_yesterday, "Date must be today or in the future"),
    ]),
    "temperatureC": ("temperature_c", [
        (_temperature_in_range, "Temperature must be between -50 and 60 degrees Celsius"),
    ]),
    "summary": ("summary", [
        (_present, "Summary is required"),
        (_summary_fits, "Summary cannot exceed 100 characters"),
    ]),
}


def validate_create_request(request: CreateForecastRequest, today: dt.date) -> List[FieldError]:
    """Run every rule and collect all failures; an empty list means valid."""
    errors: List[FieldError] = []
    for field, (attr, rules) in CREATE_FORECAST_RULES.items():
        value = getattr(request, attr)
        for predicate, message in rules:
            if not predicate(value, today):
                errors.append(FieldError(field=field, message=message))
    return errors
