from __future__ import annotations

import datetime as dt
import logging
from typing import Callable, List, Optional

from vkapi.core.errors import InvalidArgumentError, NotFoundError, ValidationFailedError
from vkapi.models.forecast import CreateForecastRequest, Forecast
from vkapi.services.forecast_generator import generate_forecast
from vkapi.services.random_source import RandomSource
from vkapi.services.validation import validate_create_request
from vkapi.utils import clock

logger = logging.getLogger(__name__)

MIN_DAYS = 1
MAX_DAYS = 14
DEFAULT_DAYS = 5


class WeatherForecastService:
    def __init__(self, rng: RandomSource, today: Optional[Callable[[], dt.date]] = None):
        self.rng = rng
        self.today = today or clock.today

    def list_forecasts(self, days: int = DEFAULT_DAYS) -> List[Forecast]:
        logger.info(f"Getting weather forecast for {days} days")
        if days < MIN_DAYS or days > MAX_DAYS:
            raise InvalidArgumentError(f"Days must be between {MIN_DAYS} and {MAX_DAYS}")

        today = self.today()
        return [generate_forecast(offset, self.rng, today) for offset in range(1, days + 1)]

    def get_by_date(self, date: dt.date) -> Forecast:
        logger.info(f"Getting weather forecast for date: {date.isoformat()}")
        today = self.today()
        if date < today:
            raise NotFoundError("Cannot retrieve forecast for past dates")
        return generate_forecast(date, self.rng, today)

    def create(self, request: CreateForecastRequest) -> Forecast:
        logger.info(f"Creating weather forecast for date: {request.date}")
        errors = validate_create_request(request, self.today())
        if errors:
            logger.info(f"Create request rejected with {len(errors)} field error(s)")
            raise ValidationFailedError(errors)

        return Forecast(date=request.date, temperature_c=request.temperature_c, summary=request.summary)
