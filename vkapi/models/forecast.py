from __future__ import annotations

import datetime as dt
import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

FAHRENHEIT_DIVISOR = 0.5556


def celsius_to_fahrenheit(temperature_c: int) -> int:
    # 0.5556 approximates 5/9; kept as-is for output compatibility
    return 32 + math.floor(temperature_c / FAHRENHEIT_DIVISOR)


class Forecast(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: dt.date = Field(..., description="The date of the forecast")
    temperature_c: int = Field(..., alias="temperatureC", description="Temperature in Celsius")
    summary: Optional[str] = Field(None, description="Weather summary")

    @computed_field(alias="temperatureF", description="Temperature in Fahrenheit")
    @property
    def temperature_f(self) -> int:
        return celsius_to_fahrenheit(self.temperature_c)


class CreateForecastRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: Optional[dt.date] = Field(None, description="The date for the forecast")
    temperature_c: int = Field(0, alias="temperatureC", description="Temperature in Celsius")
    summary: Optional[str] = Field(None, description="Weather summary")


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class ErrorResponse(BaseModel):
    error: str = Field(..., alias="Error")


class ValidationErrorResponse(BaseModel):
    error: str = Field(..., alias="Error")
    errors: List[FieldError] = Field(default_factory=list, alias="Errors")
