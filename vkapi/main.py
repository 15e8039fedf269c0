import logging
import sys
from contextlib import asynccontextmanager
from typing import List

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.docs import get_swagger_ui_html

from vkapi.core.config import settings
from vkapi.core.errors import register_exception_handlers
from vkapi.core.logging import configure_logging
from vkapi.api.deps import get_forecast_service
from vkapi.api.routes.health import router as health_router
from vkapi.api.routes.weather_forecast import router as weather_forecast_router
from vkapi.models.forecast import Forecast
from vkapi.services.forecast_service import DEFAULT_DAYS, WeatherForecastService

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

OPENAPI_URL = "/swagger/v1/swagger.json"
SWAGGER_UI_PARAMETERS = {"defaultModelsExpandDepth": -1}


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.app_name} application")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"{settings.app_name} application started successfully")
    yield
    logger.info(f"Shutting down {settings.app_name} application")


def create_app() -> FastAPI:
    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.api_version,
        contact={"name": settings.contact_name, "email": settings.contact_email},
        docs_url=None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url=OPENAPI_URL if docs_enabled else None,
        swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    if docs_enabled:
        # Swagger UI lives at the site root
        @app.get("/", include_in_schema=False)
        async def swagger_ui():
            return get_swagger_ui_html(
                openapi_url=OPENAPI_URL,
                title=f"{settings.app_name} Documentation",
                swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
            )

    app.include_router(health_router, tags=["health"])
    app.include_router(weather_forecast_router, prefix="/api", tags=["Weather"])

    # minimal routed twin of GET /api/weatherforecast, fixed at five days
    @app.get("/weatherforecast", response_model=List[Forecast], operation_id="GetWeatherForecastMinimal")
    async def weatherforecast(svc: WeatherForecastService = Depends(get_forecast_service)):
        return svc.list_forecasts(DEFAULT_DAYS)

    return app

app = create_app()


def run() -> None:
    """
    Serve the app with uvicorn.

    uvicorn reports bind and lifespan failures by calling sys.exit itself, so
    a non-zero SystemExit is treated like any other startup failure: logged,
    then the process exits with status 1.
    """
    try:
        uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    except KeyboardInterrupt:
        raise
    except SystemExit as exc:
        if exc.code in (None, 0):
            raise
        logger.exception("Application terminated unexpectedly")
        sys.exit(1)
    except Exception:
        logger.exception("Application terminated unexpectedly")
        sys.exit(1)


if __name__ == "__main__":
    run()
