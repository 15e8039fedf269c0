from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    app_name: str = Field(default="VK API")
    app_description: str = Field(default="Sample Web API for testing and development")
    app_version: str = Field(default="1.0.0")
    api_version: str = Field(default="v1")
    contact_name: str = Field(default="Development Team")
    contact_email: str = Field(default="dev@example.com")
    env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    # CORS (comma-separated)
    cors_allowed_origins: str = Field(default="")

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def is_development(self) -> bool:
        return self.env.strip().lower() == "development"

settings = Settings()
