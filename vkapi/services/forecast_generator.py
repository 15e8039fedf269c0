from __future__ import annotations

import datetime as dt
from typing import Tuple, Union

from vkapi.models.forecast import Forecast
from vkapi.services.random_source import RandomSource

SUMMARIES: Tuple[str, ...] = (
    "Freezing", "Bracing", "Chilly", "Cool", "Mild",
    "Warm", "Balmy", "Hot", "Sweltering", "Scorching",
)

MIN_GENERATED_C = -20
MAX_GENERATED_C = 54


def target_date(target: Union[int, dt.date], today: dt.date) -> dt.date:
    if isinstance(target, dt.datetime):
        return target.date()
    if isinstance(target, dt.date):
        return target
    return today + dt.timedelta(days=int(target))


def generate_forecast(
    target: Union[int, dt.date],
    rng: RandomSource,
    today: dt.date,
    summaries: Tuple[str, ...] = SUMMARIES,
) -> Forecast:
    """
    Build one mock forecast.

    `target` is either a day offset from `today` or an explicit date. Any
    value is accepted; range limits belong to the caller. Temperature is
    drawn first, then the summary.
    """
    temperature_c = rng.next_int(MIN_GENERATED_C, MAX_GENERATED_C)
    summary = rng.choice(summaries)
    return Forecast(date=target_date(target, today), temperature_c=temperature_c, summary=summary)
