import datetime as dt
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response

from vkapi.api.deps import get_forecast_service
from vkapi.models.forecast import (
    CreateForecastRequest,
    ErrorResponse,
    Forecast,
    ValidationErrorResponse,
)
from vkapi.services.forecast_service import DEFAULT_DAYS, WeatherForecastService

router = APIRouter()

@router.get(
    "/weatherforecast",
    response_model=List[Forecast],
    summary="Get weather forecast",
    description="Retrieves weather forecast data for the specified number of days",
    operation_id="GetWeatherForecast",
    responses={400: {"model": ErrorResponse, "description": "Invalid request parameters"}},
)
async def get_weather_forecast(
    days: int = Query(DEFAULT_DAYS, description="Number of days to forecast (1-14)"),
    svc: WeatherForecastService = Depends(get_forecast_service),
):
    # range is checked by the service so the error body stays {"Error": ...}
    return svc.list_forecasts(days)


@router.get(
    "/weatherforecast/{date}",
    name="get_weather_forecast_by_date",
    response_model=Forecast,
    summary="Get weather forecast by date",
    description="Retrieves weather forecast data for a specific date",
    operation_id="GetWeatherForecastByDate",
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid date format"},
        404: {"model": ErrorResponse, "description": "Forecast not found for the specified date"},
    },
)
async def get_weather_forecast_by_date(
    date: dt.date,
    svc: WeatherForecastService = Depends(get_forecast_service),
):
    return svc.get_by_date(date)


@router.post(
    "/weatherforecast",
    status_code=201,
    response_model=Forecast,
    summary="Create weather forecast",
    description="Creates a new weather forecast entry",
    operation_id="CreateWeatherForecast",
    responses={400: {"model": ValidationErrorResponse, "description": "Invalid request data"}},
)
async def create_weather_forecast(
    payload: CreateForecastRequest,
    request: Request,
    response: Response,
    svc: WeatherForecastService = Depends(get_forecast_service),
):
    forecast = svc.create(payload)
    response.headers["Location"] = str(
        request.url_for("get_weather_forecast_by_date", date=forecast.date.isoformat())
    )
    return forecast
