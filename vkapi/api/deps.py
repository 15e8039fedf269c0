import datetime as dt
from typing import Callable

from fastapi import Depends

from vkapi.services.forecast_service import WeatherForecastService
from vkapi.services.random_source import RandomSource, SharedRandomSource
from vkapi.utils import clock

_random = SharedRandomSource()

def get_random_source() -> RandomSource:
    return _random

def get_clock() -> Callable[[], dt.date]:
    return clock.today

def get_forecast_service(
    rng: RandomSource = Depends(get_random_source),
    today: Callable[[], dt.date] = Depends(get_clock),
) -> WeatherForecastService:
    return WeatherForecastService(rng=rng, today=today)
